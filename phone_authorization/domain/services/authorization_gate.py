from __future__ import annotations

from datetime import datetime
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

from phone_authorization.domain.entities.authorization import (
    ActionPermissionRule,
    AuthorizationRecord,
    HandlerRequirement,
    PermissionCheck,
    is_authorization_expired,
)


REDIRECT_URL_PARAM = "redirect_url"


def _satisfies_options(record: AuthorizationRecord, options: dict[str, str]) -> bool:
    for key, expected in options.items():
        if expected in (None, ""):
            continue
        if str(record.metadata.get(key, "")) != str(expected):
            return False
    return True


def _is_requirement_met(
    requirement: HandlerRequirement,
    records: dict[str, AuthorizationRecord],
    *,
    now: datetime,
) -> bool:
    record = records.get(requirement.handler_name)
    if record is None:
        return False
    if is_authorization_expired(record, now=now):
        return False
    return _satisfies_options(record, requirement.options)


def check_permission(
    *,
    rule: ActionPermissionRule | None,
    records: list[AuthorizationRecord],
    now: datetime,
) -> PermissionCheck:
    if rule is None:
        return PermissionCheck(allowed=True, missing_handlers=[])

    by_handler = {record.handler_name: record for record in records}
    missing: list[str] = []
    for requirement in rule.required_handlers:
        if requirement.handler_name in missing:
            continue
        if not _is_requirement_met(requirement, by_handler, now=now):
            missing.append(requirement.handler_name)

    return PermissionCheck(allowed=not missing, missing_handlers=missing)


def build_authorization_link(handler_path: str, original_action_url: str) -> str:
    parts = urlsplit(handler_path)
    query = [
        (key, value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
        if key != REDIRECT_URL_PARAM
    ]
    query.append((REDIRECT_URL_PARAM, original_action_url))
    encoded = urlencode(query, quote_via=quote, safe="")
    return urlunsplit((parts.scheme, parts.netloc, parts.path, encoded, parts.fragment))


def safe_redirect_url(redirect_url: str | None) -> str | None:
    if not redirect_url:
        return None
    if not redirect_url.startswith("/") or redirect_url.startswith("//") or "\\" in redirect_url:
        return None
    return redirect_url


def resolve_redirect_target(redirect_url: str | None, *, default_path: str) -> str:
    return safe_redirect_url(redirect_url) or default_path
