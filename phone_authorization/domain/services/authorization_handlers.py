from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Mapping

from phone_authorization.domain.entities.authorization import AuthorizationHandlerName, VerifiedValue
from phone_authorization.domain.exceptions import (
    AuthorizationHandlerUnavailableError,
    UnknownAuthorizationHandlerError,
)
from phone_authorization.domain.services.phone_validation import (
    DEFAULT_ALLOWED_PREFIXES,
    DEFAULT_PHONE_NUMBER_LENGTH,
    validate_phone_number,
)


@dataclass(frozen=True)
class FormField:
    name: str
    label: str
    input_type: str = "text"
    required: bool = True


@dataclass(frozen=True)
class AuthorizationForm:
    title: str
    disclaimer: str
    fields: list[FormField]
    submit_label: str
    modal_link_text: str


@dataclass(frozen=True)
class PhoneAuthorizationHandler:
    """Verifies a national phone number typed without separators."""

    contact_disclaimer_text: str
    length: int = DEFAULT_PHONE_NUMBER_LENGTH
    allowed_prefixes: tuple[str, ...] = DEFAULT_ALLOWED_PREFIXES
    expires_in: timedelta | None = None
    name: AuthorizationHandlerName = field(default=AuthorizationHandlerName.PHONE, init=False)
    display_name: str = field(default="Phone number recovery", init=False)

    @property
    def form(self) -> AuthorizationForm:
        return AuthorizationForm(
            title="Fill in your phone number",
            disclaimer=self.contact_disclaimer_text,
            fields=[
                FormField(
                    name="phone_number",
                    label="Phone number (without point nor whitespace)",
                    input_type="tel",
                )
            ],
            submit_label="I continue",
            modal_link_text="I fill in my phone number",
        )

    def verify(self, form_data: Mapping[str, str | None]) -> VerifiedValue:
        raw = form_data.get("phone_number") or ""
        phone = validate_phone_number(
            raw,
            length=self.length,
            allowed_prefixes=self.allowed_prefixes,
        )
        return VerifiedValue(value=phone.normalized, metadata={"phone_number": phone.normalized})


AuthorizationHandler = PhoneAuthorizationHandler


def resolve_handler_name(name: str) -> AuthorizationHandlerName:
    try:
        return AuthorizationHandlerName(name)
    except ValueError as exc:
        raise UnknownAuthorizationHandlerError(f"Unknown authorization handler '{name}'.") from exc


class AuthorizationHandlerRegistry:
    def __init__(
        self,
        *,
        handlers: Mapping[AuthorizationHandlerName, AuthorizationHandler],
        available: list[str],
    ):
        missing = [name for name in AuthorizationHandlerName if name not in handlers]
        if missing:
            raise ValueError(f"Handlers without implementation: {', '.join(m.value for m in missing)}.")
        self._handlers = dict(handlers)
        self._available = [resolve_handler_name(name) for name in available]

    def get(self, name: str) -> AuthorizationHandler:
        return self._handlers[resolve_handler_name(name)]

    def get_available(self, name: str) -> AuthorizationHandler:
        handler_name = resolve_handler_name(name)
        if handler_name not in self._available:
            raise AuthorizationHandlerUnavailableError(
                f"Authorization handler '{handler_name.value}' is not available."
            )
        return self._handlers[handler_name]

    def available(self) -> list[AuthorizationHandler]:
        return [self._handlers[name] for name in self._available]


def build_handler_registry(
    *,
    available: list[str],
    contact_disclaimer_text: str,
    phone_number_length: int = DEFAULT_PHONE_NUMBER_LENGTH,
    phone_allowed_prefixes: tuple[str, ...] = DEFAULT_ALLOWED_PREFIXES,
    expires_in: timedelta | None = None,
) -> AuthorizationHandlerRegistry:
    return AuthorizationHandlerRegistry(
        handlers={
            AuthorizationHandlerName.PHONE: PhoneAuthorizationHandler(
                contact_disclaimer_text=contact_disclaimer_text,
                length=phone_number_length,
                allowed_prefixes=phone_allowed_prefixes,
                expires_in=expires_in,
            ),
        },
        available=available,
    )
