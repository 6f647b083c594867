from __future__ import annotations

import json
from typing import Any, Mapping

from phone_authorization.domain.entities.authorization import (
    ActionPermissionRule,
    AuthorizationRecord,
    HandlerRequirement,
)
from phone_authorization.domain.entities.user import User


def _as_str(value: Any) -> str:
    return str(value)


def _as_dict(value: Any) -> dict:
    if value is None:
        return {}
    if isinstance(value, (str, bytes)):
        return json.loads(value)
    return dict(value)


def map_row_to_user(row: Mapping[str, Any]) -> User:
    return User(
        id=_as_str(row["id"]),
        name=row["name"],
        email=row["email"],
        is_active=bool(row["is_active"]),
        created_at=row["created_at"],
    )


def map_row_to_authorization(row: Mapping[str, Any]) -> AuthorizationRecord:
    return AuthorizationRecord(
        id=_as_str(row["id"]),
        user_id=_as_str(row["user_id"]),
        handler_name=row["name"],
        verified_value=row["unique_id"],
        metadata={str(k): str(v) for k, v in _as_dict(row.get("metadata")).items()},
        granted_at=row["granted_at"],
        expires_at=row.get("expires_at"),
    )


def map_row_to_permission_rule(row: Mapping[str, Any]) -> ActionPermissionRule:
    handlers = _as_dict(row.get("authorization_handlers"))
    return ActionPermissionRule(
        component_id=_as_str(row["component_id"]),
        action=row["action"],
        required_handlers=[
            HandlerRequirement(
                handler_name=name,
                options={str(k): str(v) for k, v in _as_dict((config or {}).get("options")).items()},
            )
            for name, config in handlers.items()
        ],
    )


def permission_rule_to_handlers_payload(rule: ActionPermissionRule) -> dict[str, dict[str, dict[str, str]]]:
    return {req.handler_name: {"options": dict(req.options)} for req in rule.required_handlers}
