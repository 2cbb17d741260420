"""DTOs for the daily task fan-out job."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CoffeeshopFanoutResult:
    """Outcome for one coffeeshop in one run."""

    coffeeshop_id: str
    due: int
    created: int
    skipped_existing: int


@dataclass(frozen=True)
class FanoutRunResult:
    """Summary of one fan-out invocation."""

    date: str
    iso_weekday: int
    coffeeshops_processed: int
    results_created: int
    results_skipped_existing: int
    tasks_not_due: int
    failed_coffeeshop_ids: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.failed_coffeeshop_ids
