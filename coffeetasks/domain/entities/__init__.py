"""Domain entities."""

from coffeetasks.domain.entities.task import (
    TaskDefinition,
    TaskResultSnapshot,
    result_id_for,
)

__all__ = [
    "TaskDefinition",
    "TaskResultSnapshot",
    "result_id_for",
]
