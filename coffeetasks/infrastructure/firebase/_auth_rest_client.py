"""Firebase Authentication admin calls over the Identity Toolkit REST API.

Creates and deletes email/password logins with the service account token
(no firebase-admin). Shares the HTTP pool and credentials of the Firestore
client.
"""

from __future__ import annotations

import logging

import httpx

from coffeetasks.domain.exceptions import UserAlreadyExistsException, ValidationException
from coffeetasks.infrastructure.firebase._rest_client import FirestoreRESTClient

logger = logging.getLogger(__name__)

_BASE = "https://identitytoolkit.googleapis.com/v1"


def _error_message(resp: httpx.Response) -> str:
    """Identity Toolkit error code, e.g. 'EMAIL_EXISTS' or 'WEAK_PASSWORD : ...'."""
    try:
        return str(resp.json().get("error", {}).get("message", ""))
    except ValueError:
        return ""


class FirebaseAuthRESTClient:
    """Create/delete Firebase Auth users for a project."""

    def __init__(self, firestore: FirestoreRESTClient) -> None:
        self._firestore = firestore
        self._accounts_url = f"{_BASE}/projects/{firestore.project_id}/accounts"

    async def _post(self, url: str, body: dict) -> httpx.Response:
        token = await self._firestore.get_token()
        return await self._firestore._http.post(
            url,
            json=body,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {token}",
            },
        )

    async def create_login(self, email: str, password: str, display_name: str) -> str:
        """Create an email/password login and return its uid.

        Raises:
            UserAlreadyExistsException: Email already registered.
            ValidationException: Rejected by the provider (e.g. weak password).
        """
        resp = await self._post(
            self._accounts_url,
            {"email": email, "password": password, "displayName": display_name},
        )
        if resp.status_code == 400:
            code = _error_message(resp)
            if code.startswith("EMAIL_EXISTS") or code.startswith("DUPLICATE_EMAIL"):
                raise UserAlreadyExistsException(email)
            if code.startswith("INVALID_EMAIL"):
                raise ValidationException("Invalid email", field="email")
            if code.startswith("WEAK_PASSWORD"):
                raise ValidationException("Password is too weak", field="password")
            raise ValidationException(f"Auth provider rejected the account: {code}")
        resp.raise_for_status()
        uid = resp.json().get("localId")
        if not uid:
            raise ValueError("Identity Toolkit response missing localId")
        return uid

    async def delete_login(self, uid: str) -> None:
        """Delete a login (used to roll back a half-created account)."""
        resp = await self._post(f"{self._accounts_url}:delete", {"localId": uid})
        resp.raise_for_status()
        logger.info("Deleted auth login %s", uid)
