"""Health endpoint tests. No store needed."""

from httpx import AsyncClient

from coffeetasks.api.v1.dependencies import get_coffeeshop_repo


async def test_health_returns_ok(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_readiness_without_store_returns_503(client: AsyncClient) -> None:
    """Without Firebase credentials the lifespan leaves no client on app.state."""
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 503
    assert response.json()["firestore"] is False


async def test_store_backed_route_without_store_returns_503(app, client: AsyncClient) -> None:
    """Un-overridden repository dependencies answer 503 when Firestore is not configured."""
    del app.dependency_overrides[get_coffeeshop_repo]
    response = await client.get(
        "/api/v1/coffeeshops", headers={"Authorization": "Bearer super-uid"}
    )
    assert response.status_code == 503
    assert response.json()["error"] == "SERVICE_UNAVAILABLE"
