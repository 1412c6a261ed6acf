"""Shared test fixtures."""

import base64
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from wish_service.adapters.in_memory_wish_repository import InMemoryWishRepository
from wish_service.adapters.local_photo_storage import LocalPhotoStorage
from wish_service.config import Settings
from wish_service.containers import AppContainer
from wish_service.domain.wishes import WishSubmission
from wish_service.services.photos import PhotoStorage
from wish_service.services.wishes import WishService

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"
PNG_DATA_URL = "data:image/png;base64," + base64.b64encode(PNG_BYTES).decode("ascii")


@dataclass
class RecordingPhotoStorage(PhotoStorage):
    """Photo storage that keeps written bytes in memory."""

    saved: list[bytes] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)

    def save(self, content: bytes) -> str:
        self.saved.append(content)
        return f"uploads/fake-{len(self.saved)}.jpg"

    def delete(self, stored_path: str) -> None:
        self.deleted.append(stored_path)


@dataclass
class FailingPhotoStorage(PhotoStorage):
    """Photo storage whose writes always fail."""

    def save(self, content: bytes) -> str:
        raise OSError("disk full")

    def delete(self, stored_path: str) -> None:
        return None


def make_submission(**overrides: str | None) -> WishSubmission:
    values: dict[str, str | None] = {
        "name": "Alice",
        "email": "alice@example.com",
        "phone_number": "5551234567",
        "input_text": "A trip to the sea",
        "gender": "female",
        "temp_image_path": None,
        "photo_payload": None,
    }
    values.update(overrides)
    return WishSubmission(**values)


def make_payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "name": "Alice",
        "email": "alice@example.com",
        "phone_number": "5551234567",
        "input_text": "A trip to the sea",
        "gender": "female",
    }
    payload.update(overrides)
    return {key: value for key, value in payload.items() if value is not None}


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(base_dir=tmp_path, uploads_dir=Path("uploads"))


@pytest.fixture
def wish_repository() -> InMemoryWishRepository:
    return InMemoryWishRepository()


@pytest.fixture
def photo_storage(settings: Settings) -> LocalPhotoStorage:
    return LocalPhotoStorage(
        uploads_dir=settings.uploads_path, base_dir=settings.base_dir
    )


@pytest.fixture
def container(
    settings: Settings,
    wish_repository: InMemoryWishRepository,
    photo_storage: LocalPhotoStorage,
) -> AppContainer:
    wish_service = WishService(repository=wish_repository, photo_storage=photo_storage)
    return AppContainer(
        settings=settings,
        photo_storage=photo_storage,
        wish_service=wish_service,
    )
