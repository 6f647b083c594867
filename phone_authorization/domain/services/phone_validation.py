from __future__ import annotations

from collections.abc import Iterable

from phone_authorization.domain.entities.phone_number import PhoneNumber, PhoneNumberRejection
from phone_authorization.domain.exceptions import PhoneNumberValidationError


DEFAULT_PHONE_NUMBER_LENGTH = 10
DEFAULT_ALLOWED_PREFIXES = ("0",)


def phone_number_rejection(
    raw: str,
    *,
    length: int = DEFAULT_PHONE_NUMBER_LENGTH,
    allowed_prefixes: Iterable[str] = DEFAULT_ALLOWED_PREFIXES,
) -> PhoneNumberRejection | None:
    # Separators are not stripped: "06 66 66 66 66" is rejected as non numeric.
    if any(ch not in "0123456789" for ch in raw):
        return PhoneNumberRejection.NON_NUMERIC
    if len(raw) < length:
        return PhoneNumberRejection.TOO_SHORT
    if len(raw) > length:
        return PhoneNumberRejection.TOO_LONG
    if not raw.startswith(tuple(allowed_prefixes)):
        return PhoneNumberRejection.DISALLOWED_PREFIX
    return None


def validate_phone_number(
    raw: str,
    *,
    length: int = DEFAULT_PHONE_NUMBER_LENGTH,
    allowed_prefixes: Iterable[str] = DEFAULT_ALLOWED_PREFIXES,
) -> PhoneNumber:
    rejection = phone_number_rejection(raw, length=length, allowed_prefixes=allowed_prefixes)
    if rejection is not None:
        raise PhoneNumberValidationError(rejection)
    return PhoneNumber(raw=raw, normalized=raw)
