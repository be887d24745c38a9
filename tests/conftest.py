"""Global test configuration and fixtures for the School Credits API."""

import os

# Settings are read at import time by src.database.connection and src.main
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret-key-for-testing-only")
os.environ["SEED_DEFAULT_CATALOG"] = "false"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"

from collections.abc import AsyncGenerator  # noqa: E402
from decimal import Decimal  # noqa: E402
from typing import Callable  # noqa: E402
from uuid import uuid4  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from asgi_lifespan import LifespanManager  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from jose import jwt  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.api.core.constants import JWT_ALGORITHM  # noqa: E402
from src.database.models import Base, CreditPackage, DocumentCost  # noqa: E402
from src.utils.settings.auth import AuthSettings  # noqa: E402
from tests.factories import CreditPackageFactory, DocumentCostFactory  # noqa: E402
from tests.utils.generators import RecordingDocumentGenerator  # noqa: E402

TEST_BASE_URL = "http://test-school-credits-api"


@pytest.fixture
def test_database_uri(tmp_path) -> str:
    """File-backed SQLite database per test, or TEST_DATABASE_URL when set."""
    return os.getenv("TEST_DATABASE_URL") or (
        f"sqlite+aiosqlite:///{tmp_path / 'school_credits_test.db'}"
    )


@pytest_asyncio.fixture
async def async_engine(test_database_uri) -> AsyncGenerator[AsyncEngine, None]:
    engine = create_async_engine(test_database_uri, echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(async_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=async_engine, class_=AsyncSession, expire_on_commit=False
    )


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def owner_id() -> str:
    return str(uuid4())


@pytest.fixture
def document_generator() -> RecordingDocumentGenerator:
    return RecordingDocumentGenerator()


# Catalog Fixtures
@pytest_asyncio.fixture
async def document_costs(db_session: AsyncSession) -> dict[str, DocumentCost]:
    """Cost table with the documents used across the suite, committed."""
    costs = {}
    for document_type, required_credits, category in (
        ("fee_receipt", 2, "finance_documents"),
        ("id_card", 2, "student_documents"),
        ("transcript", 4, "academic_documents"),
        ("admit_card", 1, "exam_documents"),
        ("certificate", 30, "academic_documents"),
    ):
        costs[document_type] = await DocumentCostFactory.create_async(
            db_session,
            document_type=document_type,
            required_credits=required_credits,
            category=category,
        )
    await db_session.commit()
    return costs


@pytest_asyncio.fixture
async def credit_packages(db_session: AsyncSession) -> dict[str, CreditPackage]:
    """Free, starter, standard and one retired package, committed."""
    packages = {
        "standard": await CreditPackageFactory.create_async(
            db_session, name="Standard", credits=200, price=Decimal("900.00")
        ),
        "free": await CreditPackageFactory.create_async(
            db_session, name="Free Monthly", credits=20, price=Decimal("0.00")
        ),
        "starter": await CreditPackageFactory.create_async(
            db_session, name="Starter", credits=50, price=Decimal("250.00")
        ),
        "retired": await CreditPackageFactory.create_async(
            db_session,
            name="Legacy",
            credits=10,
            price=Decimal("10.00"),
            is_active=False,
        ),
    }
    await db_session.commit()
    return packages


# Application Fixtures
@pytest_asyncio.fixture
async def app(
    session_factory, document_generator
) -> AsyncGenerator[FastAPI, None]:
    """FastAPI application bound to the per-test database."""
    from src.main import app

    async with LifespanManager(app):
        app.state.session_factory = session_factory
        app.state.document_generator = document_generator
        yield app


# JWT Token Fixtures
@pytest.fixture()
def jwt_token_factory() -> Callable[..., str]:
    """Factory for creating Supabase-style JWT tokens."""
    auth_settings = AuthSettings()

    def create_token(
        user_id: str,
        email: str = "admin@school.example",
        role: str = "authenticated",
        audience: str = "authenticated",
        secret: str | None = None,
    ) -> str:
        payload = {
            "sub": user_id,
            "email": email,
            "role": role,
            "aud": audience,
            "user_metadata": {"full_name": "School Admin", "email_verified": True},
            "app_metadata": {"provider": "email", "providers": ["email"]},
            "is_anonymous": False,
        }
        return jwt.encode(
            payload,
            secret or auth_settings.SUPABASE_JWT_SECRET,
            algorithm=JWT_ALGORITHM,
        )

    return create_token


@pytest.fixture
def user_token(owner_id: str, jwt_token_factory) -> str:
    return jwt_token_factory(owner_id)


# HTTP Client Fixtures
@pytest_asyncio.fixture
async def public_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url=TEST_BASE_URL,
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def authorized_client(
    app: FastAPI, user_token: str
) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url=TEST_BASE_URL,
        headers={"Authorization": f"Bearer {user_token}"},
    ) as ac:
        yield ac
