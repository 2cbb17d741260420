"""Daily fan-out trigger endpoint tests (scheduler secret, idempotent re-run)."""

import pytest
from httpx import AsyncClient

from coffeetasks.core.config import get_settings
from tests.fakes import SHOP_ID, FakeStore

URL = "/api/v1/jobs/daily-fanout"
SECRET = "test-scheduler-secret"


@pytest.fixture
def scheduler_secret(monkeypatch: pytest.MonkeyPatch) -> str:
    monkeypatch.setenv("FANOUT_TRIGGER_SECRET", SECRET)
    get_settings.cache_clear()
    return SECRET


@pytest.fixture
def no_scheduler_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FANOUT_TRIGGER_SECRET", raising=False)
    get_settings.cache_clear()


async def test_trigger_not_configured_returns_503(
    client: AsyncClient, no_scheduler_secret: None
) -> None:
    response = await client.post(URL, headers={"X-Scheduler-Secret": "anything"})
    assert response.status_code == 503


async def test_trigger_wrong_secret_returns_401(
    client: AsyncClient, scheduler_secret: str
) -> None:
    response = await client.post(URL, headers={"X-Scheduler-Secret": "wrong"})
    assert response.status_code == 401
    missing = await client.post(URL)
    assert missing.status_code == 401


async def test_trigger_runs_fanout_for_given_date(
    client: AsyncClient, store: FakeStore, scheduler_secret: str
) -> None:
    """Second call for the same date creates nothing."""
    store.tasks.seed(SHOP_ID, "t1", {"title": "Clean", "active": True, "days": [1, 3, 5]})
    headers = {"X-Scheduler-Secret": scheduler_secret}

    first = await client.post(URL, params={"date": "2024-06-05"}, headers=headers)
    assert first.status_code == 200
    body = first.json()
    assert body["date"] == "2024-06-05"
    assert body["iso_weekday"] == 3
    assert body["results_created"] == 1
    assert body["ok"] is True

    second = await client.post(URL, params={"date": "2024-06-05"}, headers=headers)
    assert second.json()["results_created"] == 0
    assert second.json()["results_skipped_existing"] == 1


async def test_trigger_reports_failed_coffeeshops(
    client: AsyncClient, store: FakeStore, scheduler_secret: str
) -> None:
    store.tasks.failing_coffeeshops.add(SHOP_ID)
    response = await client.post(
        URL, params={"date": "2024-06-05"}, headers={"X-Scheduler-Secret": scheduler_secret}
    )
    assert response.status_code == 200
    assert response.json()["failed_coffeeshop_ids"] == [SHOP_ID]
    assert response.json()["ok"] is False


async def test_trigger_rejects_bad_date(client: AsyncClient, scheduler_secret: str) -> None:
    response = await client.post(
        URL, params={"date": "5.6.2024"}, headers={"X-Scheduler-Secret": scheduler_secret}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"
