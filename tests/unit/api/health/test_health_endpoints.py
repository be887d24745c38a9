"""Health check endpoints tests."""

from unittest.mock import patch

import pytest
from fastapi import status
from httpx import AsyncClient

from src.modules.health.service import HealthCheckResult


@pytest.mark.asyncio
async def test_root_endpoint(app, public_client: AsyncClient):
    response = await public_client.get("/")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["service"] == "school-credits-api"
    assert data["docs"] == "/docs"
    assert "version" in data


@pytest.mark.asyncio
async def test_health_check_with_catalog(
    app, public_client: AsyncClient, credit_packages, document_costs
):
    response = await public_client.get("/health/")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["status"] == "healthy"
    assert data["services"]["database"]["status"] == "healthy"
    assert data["services"]["catalog"]["details"] == {
        "active_packages": 3,
        "active_costs": 5,
    }
    assert "timestamp" in data


@pytest.mark.asyncio
async def test_health_check_without_catalog_is_degraded(
    app, public_client: AsyncClient
):
    response = await public_client.get("/health/")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["status"] == "degraded"
    assert data["services"]["catalog"]["status"] == "degraded"


@pytest.mark.asyncio
async def test_health_check_database_unhealthy(app, public_client: AsyncClient):
    unhealthy = HealthCheckResult(
        service="database", status="unhealthy", connected=False, error="refused"
    )
    with patch(
        "src.modules.health.service.HealthService.check_database_health",
        return_value=unhealthy,
    ):
        response = await public_client.get("/health/")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["status"] == "unhealthy"
    assert data["services"]["database"]["error"] == "refused"
    assert "catalog" not in data["services"]


@pytest.mark.asyncio
async def test_liveness_check(app, public_client: AsyncClient):
    response = await public_client.get("/health/liveness")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "alive", "service": "school-credits-api"}


@pytest.mark.asyncio
async def test_responses_carry_request_id(app, public_client: AsyncClient):
    response = await public_client.get("/", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"
