"""Shared utilities: datetime, generators."""

from coffeetasks.shared.utils.datetime import (
    ensure_utc,
    format_ymd,
    iso_weekday,
    local_date,
    parse_ymd,
    utc_now,
)
from coffeetasks.shared.utils.generators import generate_cuid

__all__ = [
    "ensure_utc",
    "format_ymd",
    "generate_cuid",
    "iso_weekday",
    "local_date",
    "parse_ymd",
    "utc_now",
]
