from fastapi import APIRouter

from src.api.credits.router import router as credits_router
from src.api.documents.router import router as documents_router
from src.api.health.router import router as health_router, root_router

# V1 API router
v1_router = APIRouter(prefix="/v1")

# Include domain routers
v1_router.include_router(credits_router)
v1_router.include_router(documents_router)

# Main API router
api_router = APIRouter()
api_router.include_router(root_router)
api_router.include_router(health_router)
api_router.include_router(v1_router)
