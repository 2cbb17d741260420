"""Daily task fan-out."""

from coffeetasks.application.use_cases.fanout.run_daily_fanout import RunDailyFanoutUseCase

__all__ = ["RunDailyFanoutUseCase"]
