from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class AuthorizationHandlerName(str, Enum):
    PHONE = "phone_authorization_handler"


@dataclass(frozen=True)
class AuthorizationRecord:
    id: str
    user_id: str
    handler_name: str
    verified_value: str
    metadata: dict[str, str]
    granted_at: datetime
    expires_at: datetime | None


@dataclass(frozen=True)
class VerifiedValue:
    value: str
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class HandlerRequirement:
    handler_name: str
    options: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ActionPermissionRule:
    component_id: str
    action: str
    required_handlers: list[HandlerRequirement]


@dataclass(frozen=True)
class PermissionCheck:
    allowed: bool
    missing_handlers: list[str]


def is_authorization_expired(record: AuthorizationRecord, *, now: datetime) -> bool:
    return record.expires_at is not None and record.expires_at <= now
