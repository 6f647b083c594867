from __future__ import annotations

import pytest

from phone_authorization.domain.entities.phone_number import (
    INVALID_FORMAT_MESSAGE,
    TOO_SHORT_MESSAGE,
    PhoneNumberRejection,
)
from phone_authorization.domain.exceptions import PhoneNumberValidationError
from phone_authorization.domain.services.phone_validation import phone_number_rejection, validate_phone_number


@pytest.mark.parametrize("raw", ["0666666666", "0655555555", "0123456789", "0000000000"])
def test_valid_numbers_are_returned_unchanged(raw):
    phone = validate_phone_number(raw)

    assert phone.raw == raw
    assert phone.normalized == raw


def test_nine_digits_is_too_short_with_generic_message():
    with pytest.raises(PhoneNumberValidationError) as exc_info:
        validate_phone_number("066666666")

    assert exc_info.value.reason is PhoneNumberRejection.TOO_SHORT
    assert exc_info.value.reason.kind == "too_short"
    assert str(exc_info.value) == TOO_SHORT_MESSAGE == "There's an error in this field"
    assert exc_info.value.field == "phone_number"


def test_empty_input_is_too_short():
    assert phone_number_rejection("") is PhoneNumberRejection.TOO_SHORT


def test_fourteen_digits_is_reported_as_invalid_format():
    with pytest.raises(PhoneNumberValidationError) as exc_info:
        validate_phone_number("06666666666666")

    assert exc_info.value.reason is PhoneNumberRejection.TOO_LONG
    assert exc_info.value.reason.kind == "invalid_format"
    assert str(exc_info.value) == INVALID_FORMAT_MESSAGE == "Not a valid phone number format"


@pytest.mark.parametrize("raw", ["NOT_A_VALID_FORMAT", "06 66 66 66 66", "06.66.66.66.66", "066666666a", "+33666666666"])
def test_non_digit_characters_are_invalid_format_regardless_of_length(raw):
    with pytest.raises(PhoneNumberValidationError) as exc_info:
        validate_phone_number(raw)

    assert exc_info.value.reason is PhoneNumberRejection.NON_NUMERIC
    assert exc_info.value.reason.message == INVALID_FORMAT_MESSAGE


def test_short_input_with_letters_is_format_error_not_too_short():
    assert phone_number_rejection("06a") is PhoneNumberRejection.NON_NUMERIC


def test_non_ascii_digits_are_rejected():
    assert phone_number_rejection("０６６６６６６６６６") is PhoneNumberRejection.NON_NUMERIC


def test_well_formed_length_with_disallowed_prefix_is_invalid_format():
    with pytest.raises(PhoneNumberValidationError) as exc_info:
        validate_phone_number("3344444444")

    assert exc_info.value.reason is PhoneNumberRejection.DISALLOWED_PREFIX
    assert exc_info.value.reason.message == INVALID_FORMAT_MESSAGE


def test_configured_length_and_prefixes_are_honoured():
    phone = validate_phone_number("912345678", length=9, allowed_prefixes=("9", "6"))

    assert phone.normalized == "912345678"
    assert phone_number_rejection("0123456789", length=9, allowed_prefixes=("9",)) is PhoneNumberRejection.TOO_LONG
    assert phone_number_rejection("312345678", length=9, allowed_prefixes=("9", "6")) is (
        PhoneNumberRejection.DISALLOWED_PREFIX
    )


@pytest.mark.parametrize("length", [0, 1, 5, 8, 9, 11, 12, 20])
def test_every_length_other_than_ten_fails(length):
    raw = "0" * length

    rejection = phone_number_rejection(raw)

    assert rejection is not None
    expected = PhoneNumberRejection.TOO_SHORT if length < 10 else PhoneNumberRejection.TOO_LONG
    assert rejection is expected
