"""Coffeeshop API schemas."""

from pydantic import BaseModel, Field

from coffeetasks.schemas.account import GeoPointSchema


class CoffeeshopCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    location: GeoPointSchema | None = None


class CoffeeshopResponse(BaseModel):
    id: str
    name: str
    location: GeoPointSchema | None = None
