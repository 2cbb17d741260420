"""Repository and provider interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
Firestore implementations live in coffeetasks.infrastructure.firebase.repositories;
tests substitute in-memory fakes.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from coffeetasks.application.dtos.coffeeshop import CoffeeshopResult, GeoPoint
    from coffeetasks.application.dtos.task import TaskResultRecord
    from coffeetasks.domain.entities.task import TaskDefinition, TaskResultSnapshot


class ICoffeeshopRepository(Protocol):
    """Protocol for coffeeshop (tenant) repository."""

    async def list_ids(self) -> list[str]:
        """Return every coffeeshop id (tenant enumeration)."""

    async def list_all(self) -> list[CoffeeshopResult]:
        """Return all coffeeshops."""

    async def get_by_id(self, coffeeshop_id: str) -> CoffeeshopResult | None:
        """Return coffeeshop by id."""

    async def create(self, name: str, location: GeoPoint | None) -> CoffeeshopResult:
        """Create a coffeeshop with a generated id."""


class ITaskDefinitionRepository(Protocol):
    """Protocol for task definitions nested under a coffeeshop."""

    async def list_active(self, coffeeshop_id: str) -> list[TaskDefinition]:
        """Return task definitions with active == true."""

    async def list_all(self, coffeeshop_id: str) -> list[TaskDefinition]:
        """Return all task definitions of the coffeeshop."""

    async def get(self, coffeeshop_id: str, task_id: str) -> TaskDefinition | None:
        """Return one task definition."""

    async def save(self, coffeeshop_id: str, task: TaskDefinition) -> None:
        """Create or replace a task definition."""


class ITaskResultRepository(Protocol):
    """Protocol for task results nested under a coffeeshop."""

    async def existing_ids(self, coffeeshop_id: str, result_ids: list[str]) -> set[str]:
        """Return the subset of result_ids that already exist."""

    async def create_many(
        self, coffeeshop_id: str, snapshots: list[TaskResultSnapshot]
    ) -> None:
        """Create all results atomically; fail the whole batch if any exists."""

    async def list_by_date(self, coffeeshop_id: str, date: str) -> list[TaskResultRecord]:
        """Return results for one calendar day."""

    async def get(self, coffeeshop_id: str, result_id: str) -> TaskResultRecord | None:
        """Return one task result."""

    async def update_fields(
        self, coffeeshop_id: str, result_id: str, fields: dict[str, Any]
    ) -> None:
        """Write workflow fields of an existing result."""


class IUserProfileRepository(Protocol):
    """Protocol for user profiles (canonical users collection)."""

    async def get_raw(self, uid: str) -> dict[str, Any] | None:
        """Return the stored profile document, or None if missing."""

    async def create(self, uid: str, data: dict[str, Any]) -> None:
        """Write a new profile document."""

    async def exists(self, uid: str) -> bool:
        """Return whether a canonical profile exists."""

    def stream_legacy(self) -> AsyncIterator[tuple[str, dict[str, Any]]]:
        """Yield (uid, data) from the legacy profile collection."""


class IAuthProvider(Protocol):
    """Protocol for the login provider (Firebase Auth)."""

    async def create_login(self, email: str, password: str, display_name: str) -> str:
        """Create a login and return its uid."""

    async def delete_login(self, uid: str) -> None:
        """Delete a login."""
