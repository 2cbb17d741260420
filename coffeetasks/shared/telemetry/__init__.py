"""Logging setup."""

from coffeetasks.shared.telemetry.logging import setup_logging

__all__ = ["setup_logging"]
