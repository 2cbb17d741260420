"""Account creation endpoint tests (authn, authz, validation order; duplicates)."""

from httpx import AsyncClient

from tests.fakes import SHOP_ID, FakeStore, bearer

URL = "/api/v1/accounts"

VALID = {
    "email": "barista@example.com",
    "password": "secret1",
    "name": "Barista",
    "role": "staff",
    "coffeeshop_id": SHOP_ID,
}


async def test_create_account_requires_authentication(
    client: AsyncClient, store: FakeStore
) -> None:
    response = await client.post(URL, json=VALID)
    assert response.status_code == 401
    assert response.json()["error"] == "AUTHENTICATION_ERROR"
    assert store.auth.logins == {}


async def test_create_account_requires_superadmin(
    client: AsyncClient, store: FakeStore
) -> None:
    for uid in ("admin-uid", "staff-uid"):
        response = await client.post(URL, json=VALID, headers=bearer(uid))
        assert response.status_code == 403
        assert response.json()["error"] == "PERMISSION_DENIED"
    assert store.auth.logins == {}


async def test_permission_checked_before_body_validation(client: AsyncClient) -> None:
    """A staff caller sending a short password gets 403, not 422."""
    response = await client.post(
        URL, json={**VALID, "password": "123"}, headers=bearer("staff-uid")
    )
    assert response.status_code == 403


async def test_short_password_returns_422(client: AsyncClient, store: FakeStore) -> None:
    response = await client.post(
        URL, json={**VALID, "password": "12345"}, headers=bearer("super-uid")
    )
    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"
    assert store.auth.logins == {}


async def test_superadmin_creates_account(client: AsyncClient, store: FakeStore) -> None:
    response = await client.post(URL, json=VALID, headers=bearer("super-uid"))
    assert response.status_code == 201
    uid = response.json()["uid"]
    assert store.auth.logins[uid] == "barista@example.com"
    assert store.users.profiles[uid]["role"] == "staff"
    assert store.users.profiles[uid]["coffeeshop_id"] == SHOP_ID


async def test_duplicate_email_returns_409(client: AsyncClient) -> None:
    first = await client.post(URL, json=VALID, headers=bearer("super-uid"))
    assert first.status_code == 201
    second = await client.post(URL, json=VALID, headers=bearer("super-uid"))
    assert second.status_code == 409
    assert second.json()["error"] == "USER_ALREADY_EXISTS"


async def test_unknown_coffeeshop_returns_404(client: AsyncClient, store: FakeStore) -> None:
    response = await client.post(
        URL, json={**VALID, "coffeeshop_id": "missing"}, headers=bearer("super-uid")
    )
    assert response.status_code == 404
    assert store.auth.logins == {}
