"""Application ports (Protocols)."""

from coffeetasks.application.interfaces.repositories import (
    IAuthProvider,
    ICoffeeshopRepository,
    ITaskDefinitionRepository,
    ITaskResultRepository,
    IUserProfileRepository,
)

__all__ = [
    "IAuthProvider",
    "ICoffeeshopRepository",
    "ITaskDefinitionRepository",
    "ITaskResultRepository",
    "IUserProfileRepository",
]
