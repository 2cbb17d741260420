"""Caller authentication helpers."""

from coffeetasks.infrastructure.security.firebase_token import FirebaseTokenVerifier

__all__ = ["FirebaseTokenVerifier"]
