"""Firestore-backed repository implementations."""

from coffeetasks.infrastructure.firebase.repositories.coffeeshop_repo_firestore import (
    FirestoreCoffeeshopRepository,
)
from coffeetasks.infrastructure.firebase.repositories.task_repo_firestore import (
    FirestoreTaskDefinitionRepository,
)
from coffeetasks.infrastructure.firebase.repositories.task_result_repo_firestore import (
    FirestoreTaskResultRepository,
)
from coffeetasks.infrastructure.firebase.repositories.user_profile_repo_firestore import (
    FirestoreUserProfileRepository,
)

__all__ = [
    "FirestoreCoffeeshopRepository",
    "FirestoreTaskDefinitionRepository",
    "FirestoreTaskResultRepository",
    "FirestoreUserProfileRepository",
]
