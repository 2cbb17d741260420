"""Unit tests for FirebaseTokenVerifier (google-auth verification patched out)."""

from unittest.mock import patch

import pytest
from cachecontrol.adapter import CacheControlAdapter

from coffeetasks.infrastructure.security import firebase_token
from coffeetasks.infrastructure.security.firebase_token import FirebaseTokenVerifier


def test_cert_fetches_go_through_a_caching_session() -> None:
    verifier = FirebaseTokenVerifier("demo-project")
    adapter = verifier._request.session.get_adapter("https://www.googleapis.com/")
    assert isinstance(adapter, CacheControlAdapter)


@pytest.mark.asyncio
async def test_verify_returns_uid_and_checks_audience() -> None:
    verifier = FirebaseTokenVerifier("demo-project")
    with patch.object(
        firebase_token.id_token, "verify_firebase_token", return_value={"sub": "uid-1"}
    ) as verify:
        assert await verifier.verify("tok") == "uid-1"
    assert verify.call_args.kwargs["audience"] == "demo-project"
    assert verify.call_args.args[1] is verifier._request


@pytest.mark.asyncio
async def test_verify_rejects_token_without_sub() -> None:
    verifier = FirebaseTokenVerifier("demo-project")
    with patch.object(firebase_token.id_token, "verify_firebase_token", return_value={}):
        with pytest.raises(ValueError):
            await verifier.verify("tok")
