"""Unit tests for Settings validation."""

import pytest
from pydantic import ValidationError

from coffeetasks.core.config import Settings


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.fanout_timezone == "Asia/Almaty"
    assert settings.fanout_schedule == "1 0 * * *"
    assert not settings.firebase_configured


def test_unknown_timezone_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, fanout_timezone="Mars/Olympus_Mons")


def test_schedule_must_have_five_fields() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, fanout_schedule="0 0 * *")


def test_cors_origin_list_strips_blanks() -> None:
    settings = Settings(_env_file=None, allowed_origins=" https://a.example , ,https://b.example")
    assert settings.cors_origin_list == ["https://a.example", "https://b.example"]


def test_firebase_configured_with_key_path() -> None:
    settings = Settings(_env_file=None, firebase_service_account_path="/secrets/sa.json")
    assert settings.firebase_configured
