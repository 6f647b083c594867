from __future__ import annotations

from pydantic import BaseModel, Field


class AuthorizationLinkResponse(BaseModel):
    handler: str
    display_name: str
    link_text: str
    href: str


class ActionAuthorizationResponse(BaseModel):
    allowed: bool
    redirect_url: str
    authorizations: list[AuthorizationLinkResponse]


class HandlerOptionsRequest(BaseModel):
    options: dict[str, str | int | float | bool] = Field(default_factory=dict)


class ActionPermissionRequest(BaseModel):
    authorization_handlers: dict[str, HandlerOptionsRequest] = Field(default_factory=dict)


class ComponentPermissionsRequest(BaseModel):
    permissions: dict[str, ActionPermissionRequest]


class ComponentPermissionsResponse(BaseModel):
    component_id: str
    permissions: dict[str, ActionPermissionRequest]
