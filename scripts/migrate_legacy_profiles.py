"""Copy profiles from the legacy 'Users' collection into 'users'.

Usage:
    python -m scripts.migrate_legacy_profiles [--dry-run]
Existing 'users' documents are never overwritten. Run once; afterwards the
application reads only 'users'.
"""

import argparse
import asyncio
import sys

from coffeetasks.application.use_cases.profiles import MigrateLegacyProfilesUseCase
from coffeetasks.core.config import get_settings
from coffeetasks.infrastructure.firebase import create_firestore_client
from coffeetasks.infrastructure.firebase.repositories import FirestoreUserProfileRepository
from coffeetasks.shared.telemetry.logging import setup_logging


async def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Migrate legacy Users profiles.")
    parser.add_argument(
        "--dry-run", action="store_true", help="Report what would be copied; write nothing"
    )
    args = parser.parse_args(argv)
    setup_logging()

    client = create_firestore_client(get_settings())
    if client is None:
        print("Firestore not configured", file=sys.stderr)
        return 1
    try:
        result = await MigrateLegacyProfilesUseCase(
            FirestoreUserProfileRepository(client)
        ).run(dry_run=args.dry_run)
    finally:
        await client.aclose()

    prefix = "[dry-run] " if args.dry_run else ""
    print(
        f"{prefix}Scanned {result.scanned}, copied {result.copied}, "
        f"already present {result.already_present}, invalid role {result.invalid_role}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
