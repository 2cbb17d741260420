"""Pytest configuration and fixtures for coffeetasks.

HTTP tests run against coffeetasks.main.create_app() through ASGITransport.
Store-backed dependencies are overridden with the in-memory fakes in
tests.fakes; the Bearer token is taken as the caller's uid.
"""

from typing import Annotated

import pytest
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials
from httpx import ASGITransport, AsyncClient

from coffeetasks.api.v1.dependencies import (
    get_auth_client,
    get_caller_uid,
    get_coffeeshop_repo,
    get_task_repo,
    get_task_result_repo,
    get_user_profile_repo,
    security,
)
from coffeetasks.core.config import get_settings
from coffeetasks.core.limiter import limiter
from coffeetasks.domain.exceptions import AuthenticationException
from coffeetasks.main import create_app
from tests.fakes import FakeStore


async def _uid_from_bearer(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> str:
    if credentials is None or not credentials.credentials:
        raise AuthenticationException()
    return credentials.credentials


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def app(store: FakeStore):
    """App with store-backed dependencies replaced by in-memory fakes."""
    get_settings.cache_clear()
    limiter.reset()
    application = create_app()
    application.dependency_overrides[get_caller_uid] = _uid_from_bearer
    application.dependency_overrides[get_coffeeshop_repo] = lambda: store.coffeeshops
    application.dependency_overrides[get_task_repo] = lambda: store.tasks
    application.dependency_overrides[get_task_result_repo] = lambda: store.results
    application.dependency_overrides[get_user_profile_repo] = lambda: store.users
    application.dependency_overrides[get_auth_client] = lambda: store.auth
    yield application
    application.dependency_overrides.clear()
    get_settings.cache_clear()


@pytest.fixture
async def client(app) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
