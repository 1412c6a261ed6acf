"""Domain models for wish submissions."""

from dataclasses import asdict, dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class WishSubmission:
    """A submission that passed validation and is ready to be stored."""

    name: str
    email: str
    phone_number: str
    input_text: str
    gender: str | None = None
    temp_image_path: str | None = None
    photo_payload: str | None = None


@dataclass(frozen=True)
class WishRecord:
    """Represents a stored wish."""

    id: UUID
    name: str
    email: str
    phone_number: str
    input_text: str
    gender: str | None
    temp_image_path: str | None
    user_photo_path: str | None
    created_at: datetime


@dataclass(frozen=True)
class WishFilters:
    """Optional criteria for scanning stored wishes.

    Text fields match as case-insensitive substrings, ``phone_number`` as a
    case-sensitive substring, and the two path fields by exact equality.
    Empty values impose no constraint.
    """

    name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    input_text: str | None = None
    gender: str | None = None
    temp_image_path: str | None = None
    user_photo_path: str | None = None

    def is_empty(self) -> bool:
        """Return true when no criterion is set."""
        return not any(asdict(self).values())
