from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class AuthorizationOutput:
    id: str
    handler_name: str
    verified_value: str
    granted_at: datetime
    expires_at: datetime | None


@dataclass(frozen=True)
class AuthorizationHandlerItemOutput:
    name: str
    display_name: str
    form_path: str
    granted: bool


@dataclass(frozen=True)
class ListAuthorizationHandlersOutput:
    handlers: list[AuthorizationHandlerItemOutput]
    granted: list[AuthorizationOutput]


@dataclass(frozen=True)
class FormFieldOutput:
    name: str
    label: str
    input_type: str
    required: bool


@dataclass(frozen=True)
class GetAuthorizationFormInput:
    handler_name: str
    redirect_url: str | None


@dataclass(frozen=True)
class AuthorizationFormOutput:
    handler_name: str
    display_name: str
    title: str
    disclaimer: str
    fields: list[FormFieldOutput]
    submit_label: str
    redirect_url: str | None


@dataclass(frozen=True)
class SubmitAuthorizationInput:
    user_id: str
    handler_name: str
    form_data: dict[str, str | None] = field(default_factory=dict)
    redirect_url: str | None = None


@dataclass(frozen=True)
class SubmitAuthorizationOutput:
    authorization: AuthorizationOutput
    message: str
    redirect_to: str
