"""Tests for submission validation."""

import pytest

from wish_service.services.validation import (
    InvalidEmailError,
    InvalidPhoneNumberError,
    MissingFieldError,
    validate_submission,
)
from tests.conftest import make_payload


@pytest.mark.parametrize("field_name", ["name", "email", "phone_number", "input_text"])
def test_missing_required_field_is_rejected(field_name: str) -> None:
    payload = make_payload()
    del payload[field_name]

    with pytest.raises(MissingFieldError) as excinfo:
        validate_submission(payload)

    assert excinfo.value.message == "Missing required fields"


@pytest.mark.parametrize("value", ["", 42, None, ["Alice"]])
def test_empty_or_non_text_required_field_is_rejected(value: object) -> None:
    payload = make_payload()
    payload["name"] = value

    with pytest.raises(MissingFieldError):
        validate_submission(payload)


@pytest.mark.parametrize(
    "email", ["no-at-sign", "a@b", "a b@c.de", "a@@b.co", "@b.co", "a@b."]
)
def test_malformed_email_is_rejected(email: str) -> None:
    with pytest.raises(InvalidEmailError) as excinfo:
        validate_submission(make_payload(email=email))

    assert excinfo.value.message == "Invalid email format"


@pytest.mark.parametrize("email", ["a@b.co", "First.Last@Sub.Example.ORG"])
def test_well_formed_email_passes(email: str) -> None:
    submission = validate_submission(make_payload(email=email))

    assert submission.email == email


@pytest.mark.parametrize(
    "phone_number",
    ["12345", "12345678901", "123-456-7890", "+155512345", "555123456a", "5551234567\n"],
)
def test_malformed_phone_number_is_rejected(phone_number: str) -> None:
    with pytest.raises(InvalidPhoneNumberError) as excinfo:
        validate_submission(make_payload(phone_number=phone_number))

    assert excinfo.value.message == "Invalid phone number"


def test_checks_short_circuit_in_order() -> None:
    payload = make_payload(email="bad", phone_number="1")
    del payload["input_text"]

    with pytest.raises(MissingFieldError):
        validate_submission(payload)

    with pytest.raises(InvalidEmailError):
        validate_submission(make_payload(email="bad", phone_number="1"))


def test_valid_payload_builds_submission() -> None:
    submission = validate_submission(
        make_payload(temp_image_path="/tmp/a.jpg", user_photo_path="aGVsbG8=")
    )

    assert submission.name == "Alice"
    assert submission.phone_number == "5551234567"
    assert submission.gender == "female"
    assert submission.temp_image_path == "/tmp/a.jpg"
    assert submission.photo_payload == "aGVsbG8="


def test_non_text_optional_fields_are_dropped() -> None:
    submission = validate_submission(
        make_payload(gender=1, temp_image_path=False, user_photo_path="")
    )

    assert submission.gender is None
    assert submission.temp_image_path is None
    assert submission.photo_payload is None
