from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class AuthorizationResponse(BaseModel):
    id: str
    handler: str
    verified_value: str
    granted_at: datetime
    expires_at: datetime | None


class AuthorizationHandlerItemResponse(BaseModel):
    name: str
    display_name: str
    form_path: str
    granted: bool


class AuthorizationsListResponse(BaseModel):
    handlers: list[AuthorizationHandlerItemResponse]
    authorizations: list[AuthorizationResponse]


class FormFieldResponse(BaseModel):
    name: str
    label: str
    input_type: str
    required: bool


class AuthorizationFormResponse(BaseModel):
    handler: str
    display_name: str
    title: str
    disclaimer: str
    fields: list[FormFieldResponse]
    submit_label: str
    redirect_url: str | None


class SubmitAuthorizationRequest(BaseModel):
    handler: str = Field(..., min_length=1, max_length=120)
    phone_number: str | None = None
    redirect_url: str | None = Field(default=None, max_length=2048)


class SubmitAuthorizationResponse(BaseModel):
    message: str
    redirect_to: str
    authorization: AuthorizationResponse
