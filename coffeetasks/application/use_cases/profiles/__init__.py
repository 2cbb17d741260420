"""Profile maintenance jobs."""

from coffeetasks.application.use_cases.profiles.migrate_legacy_profiles import (
    MigrateLegacyProfilesUseCase,
)

__all__ = ["MigrateLegacyProfilesUseCase"]
