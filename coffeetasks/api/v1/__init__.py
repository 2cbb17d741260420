"""API v1: router aggregation and endpoint modules."""

from coffeetasks.api.v1.router import api_router

__all__ = ["api_router"]
