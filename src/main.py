import uvicorn
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.core.exceptions.base import register_exception_handlers
from src.api.core.middleware.auth import auth_middleware
from src.api.core.middleware.logging import logging_middleware
from src.api.core.middleware.security import (
    PayloadSizeMiddleware,
    SecurityHeadersMiddleware,
)
from src.api.router import api_router
from src.database.connection import AsyncSessionLocal, create_tables
from src.modules.credits.seed import CatalogSeeder
from src.modules.documents.generator import LoggingDocumentGenerator
from src.utils.logger import setup_logging
from src.utils.settings.app import AppSettings
from src.utils.settings.credits import CreditSettings

app_settings = AppSettings()
is_production = app_settings.is_production


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger = setup_logging(is_production, app_settings.LOG_LEVEL)
    app_settings.validate_prod()
    logger.info("Starting School Credits API...")

    credit_settings = CreditSettings()
    if credit_settings.CREATE_TABLES_ON_STARTUP:
        await create_tables()

    app.state.session_factory = AsyncSessionLocal
    app.state.document_generator = LoggingDocumentGenerator()
    logger.info("Database session factory added to app state")

    if credit_settings.SEED_DEFAULT_CATALOG:
        async with app.state.session_factory() as session:
            await CatalogSeeder(session).seed_defaults()

    yield

    logger.info("Shutting down School Credits API...")


app = FastAPI(
    title="School Credits API",
    description="Credit ledger and document-cost gating for school document generation",
    version=app_settings.API_VERSION,
    lifespan=lifespan,
    docs_url=None if is_production else "/docs",
    redoc_url=None if is_production else "/redoc",
    openapi_url=None if is_production else "/openapi.json",
)

register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=app_settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)
app.add_middleware(SecurityHeadersMiddleware, is_production=is_production)
app.add_middleware(PayloadSizeMiddleware, max_request_size=app_settings.MAX_REQUEST_SIZE)
app.middleware("http")(auth_middleware)
app.middleware("http")(logging_middleware)

app.include_router(api_router)


def run_dev_server():
    """Run development server with auto-reload."""
    uvicorn.run(
        "src.main:app", host="0.0.0.0", port=8010, reload=True, access_log=False
    )


def run_prod_server():
    """Run production server."""
    uvicorn.run(
        "src.main:app", host="0.0.0.0", port=8010, reload=False, access_log=False
    )
