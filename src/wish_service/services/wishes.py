"""Services for submitting and listing wishes."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import uuid4

from wish_service.domain.wishes import WishFilters, WishRecord, WishSubmission
from wish_service.services.photos import (
    PhotoStorage,
    StorageFailure,
    decode_photo_payload,
)

logger = logging.getLogger(__name__)


class WishRepository(Protocol):
    """Persistence interface for wishes."""

    def add(self, record: WishRecord) -> None:
        """Append a record to the store."""

    def list_all(self) -> list[WishRecord]:
        """Return all records in insertion order."""


@dataclass
class WishService:
    """Application service for wish submissions."""

    repository: WishRepository
    photo_storage: PhotoStorage

    def submit(self, submission: WishSubmission) -> WishRecord:
        """Store a validated submission, writing its photo first if present."""
        photo_path = None
        if submission.photo_payload:
            content = decode_photo_payload(submission.photo_payload)
            try:
                photo_path = self.photo_storage.save(content)
            except OSError as exc:
                raise StorageFailure(f"Failed to write photo: {exc}") from exc

        record = WishRecord(
            id=uuid4(),
            name=submission.name,
            email=submission.email,
            phone_number=submission.phone_number,
            input_text=submission.input_text,
            gender=submission.gender,
            temp_image_path=submission.temp_image_path,
            user_photo_path=photo_path,
            created_at=datetime.now(tz=UTC),
        )
        try:
            self.repository.add(record)
        except Exception:
            if photo_path is not None:
                self.photo_storage.delete(photo_path)
            raise
        logger.info("Stored wish %s (photo: %s)", record.id, photo_path or "none")
        return record

    def search(self, filters: WishFilters | None = None) -> list[WishRecord]:
        """Return stored wishes matching every supplied criterion."""
        records = self.repository.list_all()
        if filters is None or filters.is_empty():
            return records
        return [record for record in records if _matches(record, filters)]


def _matches(record: WishRecord, filters: WishFilters) -> bool:
    """Return true when the record satisfies all set criteria."""
    for field_name in ("name", "email", "input_text", "gender"):
        needle = getattr(filters, field_name)
        if needle and not _contains_casefold(getattr(record, field_name), needle):
            return False
    if filters.phone_number and (filters.phone_number not in record.phone_number):
        return False
    for field_name in ("temp_image_path", "user_photo_path"):
        expected = getattr(filters, field_name)
        if expected and getattr(record, field_name) != expected:
            return False
    return True


def _contains_casefold(value: str | None, needle: str) -> bool:
    if value is None:
        return False
    return needle.lower() in value.lower()
