"""Validation of incoming wish submissions."""

import re
from collections.abc import Mapping

from wish_service.domain.wishes import WishSubmission

REQUIRED_FIELDS = ("name", "email", "phone_number", "input_text")

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$", re.IGNORECASE)
PHONE_PATTERN = re.compile(r"^[0-9]{10}$")


class SubmissionValidationError(ValueError):
    """Base error for rejected submissions, carrying a user-facing message."""

    message = "Invalid submission"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message


class MissingFieldError(SubmissionValidationError):
    message = "Missing required fields"


class InvalidEmailError(SubmissionValidationError):
    message = "Invalid email format"


class InvalidPhoneNumberError(SubmissionValidationError):
    message = "Invalid phone number"


def validate_submission(payload: Mapping[str, object]) -> WishSubmission:
    """Validate a raw submission and return the typed result.

    Checks run in order (required fields, email, phone) and stop at the
    first failure.
    """
    required: dict[str, str] = {}
    for field_name in REQUIRED_FIELDS:
        value = payload.get(field_name)
        if not isinstance(value, str) or not value:
            raise MissingFieldError
        required[field_name] = value

    email = required["email"]
    if not EMAIL_PATTERN.fullmatch(email):
        raise InvalidEmailError

    phone_number = required["phone_number"]
    if not PHONE_PATTERN.fullmatch(phone_number):
        raise InvalidPhoneNumberError

    return WishSubmission(
        name=required["name"],
        email=email,
        phone_number=phone_number,
        input_text=required["input_text"],
        gender=_optional_text(payload.get("gender")),
        temp_image_path=_optional_text(payload.get("temp_image_path")),
        photo_payload=_optional_text(payload.get("user_photo_path")) or None,
    )


def _optional_text(value: object) -> str | None:
    """Keep optional values only when they are strings."""
    return value if isinstance(value, str) else None
