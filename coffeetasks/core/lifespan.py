"""Application lifespan: startup and shutdown.

Builds the Firestore client, the Firebase Auth client and the ID-token
verifier once per process and keeps them on app.state; dependencies hand
them to repositories. No business logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from coffeetasks.core.config import get_settings
from coffeetasks.infrastructure.firebase import (
    FirebaseAuthRESTClient,
    create_firestore_client,
)
from coffeetasks.infrastructure.security import FirebaseTokenVerifier
from coffeetasks.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit close the Firestore HTTP pool.

    Missing or invalid Firebase credentials are logged and the app starts
    without a store; store-backed routes then answer 503.
    """
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    app.state.firestore = None
    app.state.auth_client = None
    app.state.token_verifier = None
    if settings.firebase_configured:
        try:
            client = create_firestore_client(settings)
        except Exception:
            logger.exception("Firebase initialization failed")
            client = None
        if client is not None:
            app.state.firestore = client
            app.state.auth_client = FirebaseAuthRESTClient(client)
            app.state.token_verifier = FirebaseTokenVerifier(client.project_id)
    else:
        logger.warning("Firebase credentials not set; store-backed routes will return 503")

    yield

    # ---- Shutdown ----
    if getattr(app.state, "firestore", None) is not None:
        await app.state.firestore.aclose()
        app.state.firestore = None
        logger.info("Firestore HTTP client closed")
