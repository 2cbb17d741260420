"""DTOs for coffeeshop (tenant) use cases."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    def to_dict(self) -> dict[str, float]:
        return {"latitude": self.latitude, "longitude": self.longitude}


@dataclass(frozen=True)
class CoffeeshopResult:
    """Coffeeshop read-model."""

    id: str
    name: str
    location: GeoPoint | None = None
