"""Scheduled job triggers. Called by the external scheduler, not by users."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from coffeetasks.api.v1.dependencies import get_fanout_use_case, verify_scheduler_secret
from coffeetasks.application.use_cases.fanout import RunDailyFanoutUseCase
from coffeetasks.core.limiter import limit_fanout_trigger
from coffeetasks.domain.exceptions import ValidationException
from coffeetasks.schemas.fanout import FanoutRunResponse
from coffeetasks.shared.utils.datetime import parse_ymd

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/daily-fanout",
    response_model=FanoutRunResponse,
    dependencies=[Depends(verify_scheduler_secret)],
)
@limit_fanout_trigger
async def trigger_daily_fanout(
    request: Request,
    fanout: Annotated[RunDailyFanoutUseCase, Depends(get_fanout_use_case)],
    date: str | None = Query(
        default=None,
        description="Calendar day YYYY-MM-DD to materialize; default is today in FANOUT_TIMEZONE",
    ),
) -> FanoutRunResponse:
    """Materialize task results for every coffeeshop.

    Requires X-Scheduler-Secret. Safe to call more than once for the same
    day: existing results are left untouched. Per-coffeeshop failures are
    reported in failed_coffeeshop_ids; the response is still 200.
    """
    day = None
    if date is not None:
        try:
            day = parse_ymd(date)
        except ValueError:
            raise ValidationException("date must be YYYY-MM-DD", field="date") from None
    result = await fanout.run(day=day)
    if not result.ok:
        logger.warning(
            "Fan-out for %s finished with %d failed coffeeshop(s)",
            result.date,
            len(result.failed_coffeeshop_ids),
        )
    return FanoutRunResponse(
        date=result.date,
        iso_weekday=result.iso_weekday,
        coffeeshops_processed=result.coffeeshops_processed,
        results_created=result.results_created,
        results_skipped_existing=result.results_skipped_existing,
        tasks_not_due=result.tasks_not_due,
        failed_coffeeshop_ids=list(result.failed_coffeeshop_ids),
        ok=result.ok,
    )
