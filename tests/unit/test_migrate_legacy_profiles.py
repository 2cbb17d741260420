"""Unit tests for the legacy Users -> users profile migration."""

import pytest

from coffeetasks.application.use_cases.profiles import MigrateLegacyProfilesUseCase
from tests.fakes import InMemoryUserProfileRepository


def _repo() -> InMemoryUserProfileRepository:
    return InMemoryUserProfileRepository(
        profiles={"u1": {"name": "Kept", "role": "admin"}},
        legacy={
            "u1": {"name": "Old", "role": "Staff"},
            "u2": {"name": "Copied", "role": "Admin", "coffeeshop_id": "shop1"},
            "u3": {"name": "Broken", "role": "owner"},
        },
    )


@pytest.mark.asyncio
async def test_copies_missing_profiles_with_lowercase_role() -> None:
    repo = _repo()
    result = await MigrateLegacyProfilesUseCase(repo).run()

    assert result.scanned == 3
    assert result.copied == 1
    assert result.already_present == 1
    assert result.invalid_role == 1
    assert repo.profiles["u2"] == {"name": "Copied", "role": "admin", "coffeeshop_id": "shop1"}
    assert repo.profiles["u1"] == {"name": "Kept", "role": "admin"}
    assert "u3" not in repo.profiles


@pytest.mark.asyncio
async def test_dry_run_writes_nothing() -> None:
    repo = _repo()
    result = await MigrateLegacyProfilesUseCase(repo).run(dry_run=True)
    assert result.copied == 1
    assert "u2" not in repo.profiles


@pytest.mark.asyncio
async def test_only_profile_fields_are_copied() -> None:
    repo = InMemoryUserProfileRepository(
        legacy={
            "u9": {
                "name": "A",
                "role": "Admin",
                "login": "a@x.io",
                "password": "hunter2",
                "coffeeshop_id": "shop1",
            }
        },
    )
    await MigrateLegacyProfilesUseCase(repo).run()

    migrated = repo.profiles["u9"]
    assert "password" not in migrated
    assert migrated == {
        "name": "A",
        "role": "admin",
        "login": "a@x.io",
        "coffeeshop_id": "shop1",
    }
