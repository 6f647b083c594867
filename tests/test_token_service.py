from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from phone_authorization.infrastructure.security.token_service import JwtTokenService


SECRET = "test-secret-0123456789-abcdefghijklmnop"


def _issue_token(*, user_id: str = "user-1", token_type: str = "access", secret: str = SECRET) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "type": token_type,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes=15)).timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def test_access_token_issued_by_platform_is_decoded():
    payload = JwtTokenService(jwt_secret=SECRET).decode_access_token(token=_issue_token())

    assert payload.user_id == "user-1"


def test_token_signed_with_other_secret_is_rejected():
    token = _issue_token(secret=SECRET[::-1])

    with pytest.raises(ValueError, match="Invalid access token."):
        JwtTokenService(jwt_secret=SECRET).decode_access_token(token=token)


def test_non_access_token_is_rejected():
    with pytest.raises(ValueError, match="Invalid token type."):
        JwtTokenService(jwt_secret=SECRET).decode_access_token(token=_issue_token(token_type="refresh"))


def test_expired_token_is_rejected():
    now = datetime.now(timezone.utc)
    token = jwt.encode(
        {"sub": "user-1", "type": "access", "exp": int((now - timedelta(minutes=1)).timestamp())},
        SECRET,
        algorithm="HS256",
    )

    with pytest.raises(ValueError, match="Invalid access token."):
        JwtTokenService(jwt_secret=SECRET).decode_access_token(token=token)
