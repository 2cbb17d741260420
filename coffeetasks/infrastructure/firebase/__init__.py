"""Firestore and Firebase Auth integration (REST, google-auth)."""

from coffeetasks.infrastructure.firebase._auth_rest_client import FirebaseAuthRESTClient
from coffeetasks.infrastructure.firebase._rest_client import (
    SERVER_TIMESTAMP,
    DocumentExistsError,
    DocumentNotFoundError,
    FirestoreRESTClient,
)
from coffeetasks.infrastructure.firebase.client import create_firestore_client

__all__ = [
    "SERVER_TIMESTAMP",
    "DocumentExistsError",
    "DocumentNotFoundError",
    "FirebaseAuthRESTClient",
    "FirestoreRESTClient",
    "create_firestore_client",
]
