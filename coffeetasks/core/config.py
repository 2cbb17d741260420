"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Firebase credentials are optional at load time so the
API can start (and be tested) without a store; routes that need Firestore
answer 503 until credentials are configured.
"""

from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env."""

    # App
    app_name: str = "coffeetasks"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server (python -m coffeetasks)
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS (admin SPA origins)
    allowed_origins: str = "http://localhost:5173,http://localhost:8080"

    # Request
    request_timeout_seconds: int = 60

    # Firebase / Firestore: use key (env) or path (file).
    firebase_service_account_key: SecretStr | None = None
    firebase_service_account_path: str | None = None  # Path to JSON file
    # Overrides project_id from the service account JSON (e.g. shared credentials).
    firebase_project_id: str | None = None

    # Daily fan-out trigger. The scheduler owns the cron; "today" is always
    # evaluated in fanout_timezone, never in the host zone.
    fanout_schedule: str = "1 0 * * *"
    fanout_timezone: str = "Asia/Almaty"
    # Shared secret sent by the scheduler as X-Scheduler-Secret.
    fanout_trigger_secret: SecretStr | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("fanout_timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Reject unknown IANA zone names at load time."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"fanout_timezone is not a known IANA zone: {v!r}") from e
        return v

    @field_validator("fanout_schedule")
    @classmethod
    def validate_schedule(cls, v: str) -> str:
        """Cron expression must have the five standard fields."""
        if len(v.split()) != 5:
            raise ValueError(
                f"fanout_schedule must be a 5-field cron expression, got: {v!r}"
            )
        return v

    @property
    def firebase_configured(self) -> bool:
        """True when a service account key or key path is set."""
        has_key = (
            self.firebase_service_account_key
            and self.firebase_service_account_key.get_secret_value()
        )
        return bool(has_key or self.firebase_service_account_path)

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    In tests, call get_settings.cache_clear() before overriding env vars so
    the next get_settings() uses the new values.
    """
    return Settings()
