"""Tests for the batch script entry points (store construction patched out)."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

import coffeetasks.__main__ as serve
from coffeetasks.application.dtos.fanout import FanoutRunResult
from coffeetasks.core.config import Settings
from scripts import migrate_legacy_profiles, run_daily_fanout


@pytest.mark.asyncio
async def test_fanout_script_exits_1_without_store() -> None:
    with patch.object(run_daily_fanout, "create_firestore_client", return_value=None):
        assert await run_daily_fanout.main([]) == 1


@pytest.mark.asyncio
async def test_fanout_script_rejects_bad_date() -> None:
    assert await run_daily_fanout.main(["--date", "2024/06/05"]) == 2


@pytest.mark.asyncio
async def test_fanout_script_passes_date_and_coffeeshops() -> None:
    """Exit code is 1 when any coffeeshop failed; the client is always closed."""
    client = MagicMock()
    client.aclose = AsyncMock()
    result = FanoutRunResult(
        date="2024-06-05",
        iso_weekday=3,
        coffeeshops_processed=1,
        results_created=2,
        results_skipped_existing=0,
        tasks_not_due=0,
        failed_coffeeshop_ids=("shop2",),
    )
    use_case = SimpleNamespace(run=AsyncMock(return_value=result))
    with (
        patch.object(run_daily_fanout, "create_firestore_client", return_value=client),
        patch.object(run_daily_fanout, "RunDailyFanoutUseCase", return_value=use_case),
    ):
        code = await run_daily_fanout.main(
            ["--date", "2024-06-05", "--coffeeshop", "shop1", "--coffeeshop", "shop2"]
        )

    assert code == 1
    kwargs = use_case.run.await_args.kwargs
    assert kwargs["coffeeshop_ids"] == ["shop1", "shop2"]
    assert str(kwargs["day"]) == "2024-06-05"
    client.aclose.assert_awaited_once()


@pytest.mark.asyncio
async def test_migration_script_exits_1_without_store() -> None:
    with patch.object(migrate_legacy_profiles, "create_firestore_client", return_value=None):
        assert await migrate_legacy_profiles.main(["--dry-run"]) == 1


def test_serve_runs_uvicorn_with_configured_address() -> None:
    settings = Settings(_env_file=None, host="127.0.0.1", port=9000)
    with (
        patch.object(serve, "get_settings", return_value=settings),
        patch.object(serve.uvicorn, "run") as run,
    ):
        serve.main()
    run.assert_called_once_with(
        "coffeetasks.main:app", host="127.0.0.1", port=9000, reload=False
    )
