"""HTTP middleware applied in coffeetasks.main."""

from coffeetasks.middleware.timeout import TimeoutMiddleware

__all__ = ["TimeoutMiddleware"]
