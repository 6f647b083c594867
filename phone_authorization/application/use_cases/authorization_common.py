from __future__ import annotations

from datetime import datetime, timezone
from urllib.parse import urlencode

from phone_authorization.application.dto.authorizations import AuthorizationOutput
from phone_authorization.domain.entities.authorization import AuthorizationRecord


AUTHORIZATION_FORM_PATH = "/v1/authorizations/new"
SUCCESS_MESSAGE = "You've been successfully authorized"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def handler_form_path(handler_name: str) -> str:
    return f"{AUTHORIZATION_FORM_PATH}?{urlencode({'handler': handler_name})}"


def build_authorization_output(record: AuthorizationRecord) -> AuthorizationOutput:
    return AuthorizationOutput(
        id=record.id,
        handler_name=record.handler_name,
        verified_value=record.verified_value,
        granted_at=record.granted_at,
        expires_at=record.expires_at,
    )
