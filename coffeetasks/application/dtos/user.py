"""DTOs for account and profile use cases."""

from dataclasses import dataclass

from coffeetasks.application.dtos.coffeeshop import GeoPoint
from coffeetasks.domain.enums import Role


@dataclass(frozen=True)
class UserProfileResult:
    """Profile read-model. No password.

    degraded is True when the stored profile could not be read or was
    malformed and the lowest-privilege role was assumed.
    """

    id: str
    name: str
    role: Role
    login: str = ""
    coffeeshop_id: str | None = None
    coffeeshop_location: GeoPoint | None = None
    degraded: bool = False


@dataclass(frozen=True)
class AccountCreate:
    """Input for privileged account creation (login + profile)."""

    email: str
    password: str
    name: str
    role: str
    coffeeshop_id: str | None = None


@dataclass(frozen=True)
class AccountCreationResult:
    uid: str
