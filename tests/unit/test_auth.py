from datetime import timedelta

import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials

from app.core.auth import (
    create_access_token,
    decode_access_token,
    require_admin,
    require_auth,
)


def bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


class TestTokens:
    """Tests for token creation and decoding."""

    def test_round_trip_claims(self):
        token = create_access_token({"userId": "u1", "isAdmin": True})

        claims = decode_access_token(token)

        assert claims["userId"] == "u1"
        assert claims["isAdmin"] is True

    def test_expired_token_rejected(self):
        token = create_access_token({"userId": "u1"}, timedelta(seconds=-5))

        with pytest.raises(HTTPException) as exc_info:
            decode_access_token(token)

        assert exc_info.value.status_code == 401

    def test_garbage_token_rejected(self):
        with pytest.raises(HTTPException) as exc_info:
            decode_access_token("not.a.jwt")

        assert exc_info.value.status_code == 401


class TestDependencies:
    """Tests for require_auth / require_admin."""

    def test_missing_credentials(self):
        with pytest.raises(HTTPException) as exc_info:
            require_auth(None)

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Authentication required"

    def test_admin_claim_required(self):
        claims = require_auth(bearer(create_access_token({"isAdmin": False})))

        with pytest.raises(HTTPException) as exc_info:
            require_admin(claims)

        assert exc_info.value.status_code == 403

    def test_admin_passes(self):
        claims = require_auth(bearer(create_access_token({"isAdmin": True})))

        assert require_admin(claims)["isAdmin"] is True
