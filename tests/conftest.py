from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone

import pytest

from phone_authorization.domain.entities.authorization import ActionPermissionRule, AuthorizationRecord
from phone_authorization.domain.entities.user import User
from phone_authorization.domain.services.authorization_handlers import build_handler_registry


DISCLAIMER = (
    "The City of Angers may also seek to contact you with the email address you use on this platform. "
    "This personal information is reserved for the platform's administrators and is not accessible "
    "to other users."
)


class FakeAuthorizationsStore:
    def __init__(self):
        self.authorizations: dict[tuple[str, str], AuthorizationRecord] = {}
        self.rules: dict[tuple[str, str], ActionPermissionRule] = {}
        self.users: dict[str, User] = {}
        self.upsert_calls = 0

    def get_user_by_id(self, *, user_id: str) -> User | None:
        return self.users.get(user_id)

    def list_authorizations_for_user(self, *, user_id: str) -> list[AuthorizationRecord]:
        return [record for (owner, _), record in self.authorizations.items() if owner == user_id]

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
        self.upsert_calls += 1
        key = (user_id, handler_name)
        existing = self.authorizations.get(key)
        if existing is not None:
            record = replace(
                existing,
                verified_value=verified_value,
                metadata=dict(metadata),
                granted_at=granted_at,
                expires_at=expires_at,
            )
        else:
            record = AuthorizationRecord(
                id=authorization_id,
                user_id=user_id,
                handler_name=handler_name,
                verified_value=verified_value,
                metadata=dict(metadata),
                granted_at=granted_at,
                expires_at=expires_at,
            )
        self.authorizations[key] = record
        return record

    def get_permission_rule(self, *, component_id: str, action: str) -> ActionPermissionRule | None:
        return self.rules.get((component_id, action))

    def replace_component_permissions(self, *, component_id: str, rules: list[ActionPermissionRule]) -> None:
        self.rules = {key: rule for key, rule in self.rules.items() if key[0] != component_id}
        for rule in rules:
            self.rules[(component_id, rule.action)] = rule


@pytest.fixture
def store() -> FakeAuthorizationsStore:
    return FakeAuthorizationsStore()


@pytest.fixture
def handler_registry():
    return build_handler_registry(
        available=["phone_authorization_handler"],
        contact_disclaimer_text=DISCLAIMER,
    )


@pytest.fixture
def user() -> User:
    return User(
        id="user-1",
        name="Alice",
        email="alice@example.com",
        is_active=True,
        created_at=datetime.now(timezone.utc),
    )
