"""Profile bootstrap endpoint tests."""

from httpx import AsyncClient

from tests.fakes import SHOP_ID, FakeStore, bearer


async def test_me_returns_profile_and_home(client: AsyncClient) -> None:
    response = await client.get("/api/v1/me", headers=bearer("admin-uid"))
    assert response.status_code == 200
    data = response.json()
    assert data["role"] == "admin"
    assert data["coffeeshop_id"] == SHOP_ID
    assert data["home"] == "/admin"
    assert data["degraded"] is False


async def test_me_superadmin_lands_on_super(client: AsyncClient) -> None:
    response = await client.get("/api/v1/me", headers=bearer("super-uid"))
    assert response.json()["home"] == "/super"


async def test_me_without_token_returns_401(client: AsyncClient) -> None:
    response = await client.get("/api/v1/me")
    assert response.status_code == 401


async def test_me_without_profile_returns_403(client: AsyncClient) -> None:
    response = await client.get("/api/v1/me", headers=bearer("ghost-uid"))
    assert response.status_code == 403


async def test_me_read_failure_is_degraded_staff(
    client: AsyncClient, store: FakeStore
) -> None:
    """A store error never grants more than the lowest role."""
    store.users.fail_reads = True
    response = await client.get("/api/v1/me", headers=bearer("super-uid"))
    assert response.status_code == 200
    data = response.json()
    assert data["role"] == "staff"
    assert data["degraded"] is True
    assert data["home"] == "/login"
