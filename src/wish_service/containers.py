"""Dependency container wiring for the application."""

from dataclasses import dataclass

from wish_service.adapters.in_memory_wish_repository import InMemoryWishRepository
from wish_service.adapters.local_photo_storage import LocalPhotoStorage
from wish_service.config import Settings
from wish_service.services.wishes import WishService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    photo_storage: LocalPhotoStorage
    wish_service: WishService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    photo_storage = LocalPhotoStorage(
        uploads_dir=resolved_settings.uploads_path,
        base_dir=resolved_settings.base_dir,
    )
    wish_service = WishService(
        repository=InMemoryWishRepository(),
        photo_storage=photo_storage,
    )
    return AppContainer(
        settings=resolved_settings,
        photo_storage=photo_storage,
        wish_service=wish_service,
    )
