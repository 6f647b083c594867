from __future__ import annotations

from datetime import datetime
from typing import Protocol

from phone_authorization.domain.entities.authorization import AuthorizationRecord


class AuthorizationPort(Protocol):
    def list_authorizations_for_user(self, *, user_id: str) -> list[AuthorizationRecord]:
        ...

    def upsert_authorization(
        self,
        *,
        authorization_id: str,
        user_id: str,
        handler_name: str,
        verified_value: str,
        metadata: dict[str, str],
        granted_at: datetime,
        expires_at: datetime | None,
    ) -> AuthorizationRecord:
        ...
