from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from phone_authorization.domain.entities.phone_number import PhoneNumberRejection


class DomainError(Exception):
    """Base for domain errors."""


class PhoneNumberValidationError(DomainError):
    """Submitted phone number was rejected."""

    def __init__(self, reason: PhoneNumberRejection, *, field: str = "phone_number"):
        super().__init__(reason.message)
        self.reason = reason
        self.field = field


class UnknownAuthorizationHandlerError(DomainError):
    """Handler name does not match any registered authorization handler."""


class AuthorizationHandlerUnavailableError(DomainError):
    """Handler exists but is not enabled for this deployment."""


class InvalidPermissionRuleError(DomainError):
    """Permission payload for a component is malformed."""
