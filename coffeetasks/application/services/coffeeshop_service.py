"""Coffeeshop service: superadmin management of tenants."""

from __future__ import annotations

from typing import TYPE_CHECKING

from coffeetasks.application.dtos.coffeeshop import CoffeeshopResult, GeoPoint
from coffeetasks.domain.exceptions import ValidationException

if TYPE_CHECKING:
    from coffeetasks.application.interfaces.repositories import ICoffeeshopRepository


class CoffeeshopService:
    def __init__(self, coffeeshop_repo: "ICoffeeshopRepository") -> None:
        self._coffeeshop_repo = coffeeshop_repo

    async def create_coffeeshop(
        self, name: str, location: GeoPoint | None = None
    ) -> CoffeeshopResult:
        """Create a coffeeshop. Raises ValidationException on blank name or bad coordinates."""
        if not name or not name.strip():
            raise ValidationException("Coffeeshop name is required", field="name")
        if location is not None and not (
            -90 <= location.latitude <= 90 and -180 <= location.longitude <= 180
        ):
            raise ValidationException("Location is out of range", field="location")
        return await self._coffeeshop_repo.create(name.strip(), location)

    async def list_coffeeshops(self) -> list[CoffeeshopResult]:
        return await self._coffeeshop_repo.list_all()
