"""Account and profile API schemas."""

from pydantic import BaseModel, EmailStr, Field

from coffeetasks.domain.enums import Role


class GeoPointSchema(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class AccountCreateRequest(BaseModel):
    """Request body for creating a login + profile (superadmin only).

    coffeeshop_id is required for admin and staff accounts.
    """

    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    name: str = Field(..., min_length=1, max_length=255)
    role: Role
    coffeeshop_id: str | None = Field(default=None, max_length=128)


class AccountCreateResponse(BaseModel):
    uid: str


class ProfileResponse(BaseModel):
    """Caller profile plus the route the admin SPA should land on."""

    id: str
    name: str
    role: Role
    login: str
    coffeeshop_id: str | None = None
    coffeeshop_location: GeoPointSchema | None = None
    degraded: bool = False
    home: str
