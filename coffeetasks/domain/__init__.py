"""Domain layer: entities, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from coffeetasks.domain.entities import TaskDefinition, TaskResultSnapshot
from coffeetasks.domain.enums import RepeatType, Role, TaskResultStatus, TaskType
from coffeetasks.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    CoffeeTasksException,
    ResourceNotFoundException,
    ValidationException,
)

__all__ = [
    # Entities
    "TaskDefinition",
    "TaskResultSnapshot",
    # Enums
    "RepeatType",
    "Role",
    "TaskResultStatus",
    "TaskType",
    # Exceptions
    "AuthenticationException",
    "AuthorizationException",
    "CoffeeTasksException",
    "ResourceNotFoundException",
    "ValidationException",
]
