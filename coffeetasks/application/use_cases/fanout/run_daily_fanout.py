"""Run the daily task fan-out: materialize today's task results for every coffeeshop."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import TYPE_CHECKING

from coffeetasks.application.dtos.fanout import CoffeeshopFanoutResult, FanoutRunResult
from coffeetasks.domain.entities.task import TaskResultSnapshot
from coffeetasks.shared.utils.datetime import format_ymd, iso_weekday, local_date, utc_now

if TYPE_CHECKING:
    from coffeetasks.application.interfaces.repositories import (
        ICoffeeshopRepository,
        ITaskDefinitionRepository,
        ITaskResultRepository,
    )

logger = logging.getLogger(__name__)

MAX_FAILED_COFFEESHOP_IDS = 50


class RunDailyFanoutUseCase:
    """Creates one task result per due task per coffeeshop for a calendar day.

    Idempotent: result ids are derived from (task id, date). Results that
    already exist are skipped without being written, so a status advanced by
    staff is never reset. The remaining results of a coffeeshop are created
    in one atomic batch with an exists == false precondition; a concurrent
    run that got there first makes this coffeeshop's batch fail as a whole,
    which is logged and safe to re-run.

    Each coffeeshop is independent: a read or commit failure is logged and
    the run moves on to the next one. No retry within a run.
    """

    def __init__(
        self,
        coffeeshop_repo: "ICoffeeshopRepository",
        task_repo: "ITaskDefinitionRepository",
        result_repo: "ITaskResultRepository",
        timezone: str,
    ) -> None:
        self._coffeeshop_repo = coffeeshop_repo
        self._task_repo = task_repo
        self._result_repo = result_repo
        self._timezone = timezone

    def today(self, now: datetime | None = None) -> date:
        """Calendar day of `now` (default: current time) in the configured zone."""
        return local_date(now or utc_now(), self._timezone)

    async def run_for_coffeeshop(
        self, coffeeshop_id: str, day: date
    ) -> tuple[CoffeeshopFanoutResult, int]:
        """Materialize due results for one coffeeshop.

        Returns:
            (per-coffeeshop result, number of active tasks not due on `day`)
        """
        tasks = await self._task_repo.list_active(coffeeshop_id)
        due = [t for t in tasks if t.is_due_on(day)]
        not_due = len(tasks) - len(due)
        snapshots = [TaskResultSnapshot.for_day(t, day) for t in due]

        existing = await self._result_repo.existing_ids(
            coffeeshop_id, [s.id for s in snapshots]
        )
        to_create = [s for s in snapshots if s.id not in existing]
        if to_create:
            await self._result_repo.create_many(coffeeshop_id, to_create)

        return (
            CoffeeshopFanoutResult(
                coffeeshop_id=coffeeshop_id,
                due=len(due),
                created=len(to_create),
                skipped_existing=len(snapshots) - len(to_create),
            ),
            not_due,
        )

    async def run(
        self,
        now: datetime | None = None,
        *,
        day: date | None = None,
        coffeeshop_ids: list[str] | None = None,
    ) -> FanoutRunResult:
        """Run the fan-out for every coffeeshop (or the given ones).

        Args:
            now: Invocation time; "today" is its date in the configured zone.
            day: Explicit calendar day, overrides `now` (manual re-runs).
            coffeeshop_ids: Restrict to these coffeeshops.

        Returns:
            FanoutRunResult with counts and failed coffeeshop ids.
        """
        run_day = day or self.today(now)
        ymd = format_ymd(run_day)
        weekday = iso_weekday(run_day)

        if coffeeshop_ids is None:
            coffeeshop_ids = await self._coffeeshop_repo.list_ids()
        logger.info(
            "Daily fan-out for %s (ISO weekday %d): %d coffeeshop(s)",
            ymd,
            weekday,
            len(coffeeshop_ids),
        )

        processed = 0
        created = 0
        skipped = 0
        not_due_total = 0
        failed: list[str] = []

        for coffeeshop_id in coffeeshop_ids:
            try:
                result, not_due = await self.run_for_coffeeshop(coffeeshop_id, run_day)
            except Exception:
                logger.exception(
                    "Fan-out failed for coffeeshop %s on %s; continuing", coffeeshop_id, ymd
                )
                if len(failed) < MAX_FAILED_COFFEESHOP_IDS:
                    failed.append(coffeeshop_id)
                continue
            processed += 1
            created += result.created
            skipped += result.skipped_existing
            not_due_total += not_due
            logger.debug(
                "Coffeeshop %s: due=%d created=%d skipped_existing=%d",
                coffeeshop_id,
                result.due,
                result.created,
                result.skipped_existing,
            )

        summary = FanoutRunResult(
            date=ymd,
            iso_weekday=weekday,
            coffeeshops_processed=processed,
            results_created=created,
            results_skipped_existing=skipped,
            tasks_not_due=not_due_total,
            failed_coffeeshop_ids=tuple(failed),
        )
        logger.info(
            "Daily fan-out for %s done: created=%d skipped_existing=%d failed=%d",
            ymd,
            created,
            skipped,
            len(failed),
        )
        return summary
