"""Copy profiles from the legacy 'Users' collection into the canonical 'users' one."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from coffeetasks.application.services.profile_service import parse_role

if TYPE_CHECKING:
    from coffeetasks.application.interfaces.repositories import IUserProfileRepository

logger = logging.getLogger(__name__)

# Only these fields move; legacy records can carry a plaintext password.
PROFILE_FIELDS = (
    "name",
    "role",
    "login",
    "coffeeshop_id",
    "coffeeshop_location",
    "created_at",
)


@dataclass(frozen=True)
class ProfileMigrationResult:
    scanned: int
    copied: int
    already_present: int
    invalid_role: int


class MigrateLegacyProfilesUseCase:
    """One-off migration so the app reads a single profile location.

    Canonical profiles are never overwritten. Roles are stored lowercase;
    legacy records without a recognised role are skipped and logged.
    """

    def __init__(self, user_repo: "IUserProfileRepository") -> None:
        self._user_repo = user_repo

    async def run(self, dry_run: bool = False) -> ProfileMigrationResult:
        scanned = copied = already_present = invalid_role = 0
        async for uid, data in self._user_repo.stream_legacy():
            scanned += 1
            if await self._user_repo.exists(uid):
                already_present += 1
                continue
            role = parse_role(data.get("role"))
            if role is None:
                invalid_role += 1
                logger.warning("Legacy profile %s has no valid role; skipped", uid)
                continue
            if not dry_run:
                profile = {k: data[k] for k in PROFILE_FIELDS if k in data}
                profile["role"] = role.value
                await self._user_repo.create(uid, profile)
            copied += 1
        return ProfileMigrationResult(
            scanned=scanned,
            copied=copied,
            already_present=already_present,
            invalid_role=invalid_role,
        )
