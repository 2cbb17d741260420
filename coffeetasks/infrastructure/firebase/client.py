"""Firestore client construction.

Credentials come from FIREBASE_SERVICE_ACCOUNT_KEY (JSON string) or
FIREBASE_SERVICE_ACCOUNT_PATH (file path). The client is built explicitly by
the API lifespan or a script and handed to repositories; there is no
process-wide singleton, so tests can pass a client with a mock transport.
"""

import json
import logging
from pathlib import Path

import httpx

from coffeetasks.core.config import Settings
from coffeetasks.infrastructure.firebase._rest_client import (
    FIRESTORE_SCOPE,
    IDENTITY_TOOLKIT_SCOPE,
    FirestoreRESTClient,
    _get_credentials,
)

logger = logging.getLogger(__name__)


def _load_key_dict(settings: Settings) -> dict | None:
    """Return service account dict from env key or file path."""
    key_json = (
        settings.firebase_service_account_key.get_secret_value()
        if settings.firebase_service_account_key
        else None
    )
    if key_json:
        try:
            return json.loads(key_json)
        except json.JSONDecodeError as e:
            raise ValueError("FIREBASE_SERVICE_ACCOUNT_KEY is not valid JSON") from e
    path = settings.firebase_service_account_path
    if path:
        resolved = Path(path).expanduser().resolve()
        if not resolved.is_file():
            logger.warning(
                "FIREBASE_SERVICE_ACCOUNT_PATH set but file not found: %s (resolved: %s)",
                path,
                resolved,
            )
            return None
        with open(resolved, encoding="utf-8") as f:
            return json.load(f)
    return None


def create_firestore_client(
    settings: Settings,
    *,
    http_client: httpx.AsyncClient | None = None,
) -> FirestoreRESTClient | None:
    """Build a Firestore client from settings, or None if not configured.

    The credentials carry both the Firestore and Identity Toolkit scopes so
    the same client can back FirebaseAuthRESTClient.

    Raises:
        ValueError: If the key is malformed or has no project id.
    """
    key_dict = _load_key_dict(settings)
    if not key_dict:
        return None
    project_id = settings.firebase_project_id or key_dict.get("project_id")
    if not project_id:
        raise ValueError("Firebase service account JSON missing 'project_id'")
    cred = _get_credentials(key_dict, scopes=[FIRESTORE_SCOPE, IDENTITY_TOOLKIT_SCOPE])
    logger.info("Firestore client created for project %s", project_id)
    return FirestoreRESTClient(project_id, cred, http_client=http_client)
