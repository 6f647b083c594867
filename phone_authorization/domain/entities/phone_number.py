from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


TOO_SHORT_MESSAGE = "There's an error in this field"
INVALID_FORMAT_MESSAGE = "Not a valid phone number format"


class PhoneNumberRejection(Enum):
    NON_NUMERIC = "non_numeric"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    DISALLOWED_PREFIX = "disallowed_prefix"

    @property
    def code(self) -> str:
        return self.value

    @property
    def kind(self) -> str:
        # Only the short case keeps its own category; everything else is a format error.
        if self is PhoneNumberRejection.TOO_SHORT:
            return "too_short"
        return "invalid_format"

    @property
    def message(self) -> str:
        if self.kind == "too_short":
            return TOO_SHORT_MESSAGE
        return INVALID_FORMAT_MESSAGE


@dataclass(frozen=True)
class PhoneNumber:
    raw: str
    normalized: str
