from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CheckActionPermissionInput:
    user_id: str
    component_id: str
    action: str
    redirect_url: str


@dataclass(frozen=True)
class AuthorizationLinkOutput:
    handler_name: str
    display_name: str
    link_text: str
    href: str


@dataclass(frozen=True)
class CheckActionPermissionOutput:
    allowed: bool
    redirect_url: str
    authorizations: list[AuthorizationLinkOutput]


@dataclass(frozen=True)
class HandlerRequirementInput:
    handler_name: str
    options: dict[str, str | int | float | bool] = field(default_factory=dict)


@dataclass(frozen=True)
class UpdateComponentPermissionsInput:
    component_id: str
    actions: dict[str, list[HandlerRequirementInput]]


@dataclass(frozen=True)
class ComponentPermissionsOutput:
    component_id: str
    actions: dict[str, dict[str, dict[str, str]]]
