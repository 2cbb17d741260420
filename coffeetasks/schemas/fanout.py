"""Daily fan-out trigger API schemas."""

from pydantic import BaseModel


class FanoutRunResponse(BaseModel):
    """Summary of one fan-out run. ok is False when any coffeeshop failed."""

    date: str
    iso_weekday: int
    coffeeshops_processed: int
    results_created: int
    results_skipped_existing: int
    tasks_not_due: int
    failed_coffeeshop_ids: list[str]
    ok: bool
