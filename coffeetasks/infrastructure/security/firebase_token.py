"""Firebase ID token verification (google-auth, no firebase-admin).

The admin SPA signs in with Firebase Auth and sends the ID token as a
Bearer token. Verification checks signature, expiry, issuer and audience
(the Firebase project id).
"""

import asyncio
from typing import Any

import cachecontrol
import google.auth.exceptions
import requests
from google.auth.transport.requests import Request
from google.oauth2 import id_token


class FirebaseTokenVerifier:
    """Verify Firebase ID tokens for one project."""

    def __init__(self, project_id: str) -> None:
        self._project_id = project_id
        # Signing certs are fetched once and reused until their Cache-Control max-age.
        self._request = Request(session=cachecontrol.CacheControl(requests.Session()))

    def _verify_sync(self, token: str) -> dict[str, Any]:
        try:
            claims = id_token.verify_firebase_token(
                token, self._request, audience=self._project_id
            )
        except (ValueError, google.auth.exceptions.GoogleAuthError) as e:
            raise ValueError(f"Invalid token: {e!s}") from e
        if not claims or not claims.get("sub"):
            raise ValueError("Token missing required claim: sub")
        return claims

    async def verify(self, token: str) -> str:
        """Return the uid (sub claim) of a valid ID token.

        Raises:
            ValueError: If the token is invalid, expired, or for another project.
        """
        claims = await asyncio.to_thread(self._verify_sync, token)
        return str(claims["sub"])
