"""Firestore client and repository dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from coffeetasks.domain.exceptions import StoreNotConfiguredException
from coffeetasks.infrastructure.firebase import (
    FirebaseAuthRESTClient,
    FirestoreRESTClient,
)
from coffeetasks.infrastructure.firebase.repositories import (
    FirestoreCoffeeshopRepository,
    FirestoreTaskDefinitionRepository,
    FirestoreTaskResultRepository,
    FirestoreUserProfileRepository,
)


def get_firestore_client(request: Request) -> FirestoreRESTClient:
    """Process-wide Firestore client built in lifespan. 503 when not configured."""
    client = getattr(request.app.state, "firestore", None)
    if client is None:
        raise StoreNotConfiguredException()
    return client


FirestoreDep = Annotated[FirestoreRESTClient, Depends(get_firestore_client)]


def get_auth_client(request: Request) -> FirebaseAuthRESTClient:
    """Firebase Auth admin client (login create/delete)."""
    auth_client = getattr(request.app.state, "auth_client", None)
    if auth_client is None:
        raise StoreNotConfiguredException("Firebase Auth is not configured")
    return auth_client


def get_coffeeshop_repo(client: FirestoreDep) -> FirestoreCoffeeshopRepository:
    return FirestoreCoffeeshopRepository(client)


def get_task_repo(client: FirestoreDep) -> FirestoreTaskDefinitionRepository:
    return FirestoreTaskDefinitionRepository(client)


def get_task_result_repo(client: FirestoreDep) -> FirestoreTaskResultRepository:
    return FirestoreTaskResultRepository(client)


def get_user_profile_repo(client: FirestoreDep) -> FirestoreUserProfileRepository:
    return FirestoreUserProfileRepository(client)
