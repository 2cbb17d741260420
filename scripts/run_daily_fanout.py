"""Run the daily task fan-out once, outside the HTTP API.

Usage:
    python -m scripts.run_daily_fanout [--date YYYY-MM-DD] [--coffeeshop ID ...]
Without --date, "today" is evaluated in FANOUT_TIMEZONE. Without
--coffeeshop, every coffeeshop is processed. Exits 1 when any coffeeshop
failed so the scheduler can alert.
"""

import argparse
import asyncio
import sys

from coffeetasks.application.use_cases.fanout import RunDailyFanoutUseCase
from coffeetasks.core.config import get_settings
from coffeetasks.infrastructure.firebase import create_firestore_client
from coffeetasks.infrastructure.firebase.repositories import (
    FirestoreCoffeeshopRepository,
    FirestoreTaskDefinitionRepository,
    FirestoreTaskResultRepository,
)
from coffeetasks.shared.telemetry.logging import setup_logging
from coffeetasks.shared.utils.datetime import parse_ymd


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Materialize today's task results.")
    parser.add_argument("--date", help="Calendar day YYYY-MM-DD (default: today)")
    parser.add_argument(
        "--coffeeshop",
        action="append",
        dest="coffeeshops",
        help="Only this coffeeshop id (repeatable)",
    )
    return parser.parse_args(argv)


async def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    setup_logging()
    settings = get_settings()

    day = None
    if args.date:
        try:
            day = parse_ymd(args.date)
        except ValueError:
            print(f"Invalid --date (expected YYYY-MM-DD): {args.date}", file=sys.stderr)
            return 2

    client = create_firestore_client(settings)
    if client is None:
        print(
            "Firestore not configured (set FIREBASE_SERVICE_ACCOUNT_KEY or FIREBASE_SERVICE_ACCOUNT_PATH)",
            file=sys.stderr,
        )
        return 1
    try:
        fanout = RunDailyFanoutUseCase(
            FirestoreCoffeeshopRepository(client),
            FirestoreTaskDefinitionRepository(client),
            FirestoreTaskResultRepository(client),
            settings.fanout_timezone,
        )
        result = await fanout.run(day=day, coffeeshop_ids=args.coffeeshops)
    finally:
        await client.aclose()

    print(
        f"{result.date}: created {result.results_created}, "
        f"skipped {result.results_skipped_existing} existing, "
        f"{result.coffeeshops_processed} coffeeshop(s) processed"
    )
    if not result.ok:
        print(
            f"Failed coffeeshops: {', '.join(result.failed_coffeeshop_ids)}",
            file=sys.stderr,
        )
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
