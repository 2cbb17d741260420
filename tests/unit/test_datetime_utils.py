"""Unit tests for calendar helpers used by the daily fan-out."""

from datetime import UTC, date, datetime

import pytest

from coffeetasks.shared.utils.datetime import (
    format_ymd,
    iso_weekday,
    local_date,
    parse_ymd,
)


def test_local_date_uses_configured_zone_not_utc() -> None:
    """20:00 UTC on June 4 is already June 5 in Almaty."""
    moment = datetime(2024, 6, 4, 20, 0, tzinfo=UTC)
    assert local_date(moment, "Asia/Almaty") == date(2024, 6, 5)
    assert local_date(moment, "UTC") == date(2024, 6, 4)


def test_local_date_treats_naive_as_utc() -> None:
    assert local_date(datetime(2024, 6, 4, 20, 0), "Asia/Almaty") == date(2024, 6, 5)


def test_iso_weekday_sunday_is_seven() -> None:
    assert iso_weekday(date(2024, 6, 9)) == 7
    assert iso_weekday(date(2024, 6, 10)) == 1


def test_format_ymd_zero_pads() -> None:
    assert format_ymd(date(2024, 6, 5)) == "2024-06-05"


@pytest.mark.parametrize("value", ["2024-6-5", "05/06/2024", "2024-06-05T00:00", ""])
def test_parse_ymd_rejects_other_shapes(value: str) -> None:
    with pytest.raises(ValueError):
        parse_ymd(value)


def test_parse_ymd_roundtrip() -> None:
    assert parse_ymd("2024-06-05") == date(2024, 6, 5)
