"""Filesystem-backed photo storage."""

from dataclasses import dataclass
from pathlib import Path
from uuid import uuid4

from wish_service.services.photos import PhotoStorage


@dataclass
class LocalPhotoStorage(PhotoStorage):
    """Writes photos into the uploads directory."""

    uploads_dir: Path
    base_dir: Path

    def ensure_directory(self) -> None:
        """Create the uploads directory if it does not exist."""
        self.uploads_dir.mkdir(parents=True, exist_ok=True)

    def save(self, content: bytes) -> str:
        """Write the bytes to a fresh file and return its base-relative path.

        A failed write removes the partial file before re-raising.
        """
        path = self.uploads_dir / f"wish-photo-{uuid4()}.jpg"
        handle = path.open("xb")
        try:
            with handle:
                handle.write(content)
        except Exception:
            path.unlink(missing_ok=True)
            raise
        return _relative_to(path, self.base_dir)

    def delete(self, stored_path: str) -> None:
        """Remove a photo previously returned by ``save``."""
        path = Path(stored_path)
        if not path.is_absolute():
            path = self.base_dir / path
        path.unlink(missing_ok=True)


def _relative_to(path: Path, base_dir: Path) -> str:
    """Return ``path`` relative to ``base_dir`` when possible."""
    try:
        return path.resolve().relative_to(base_dir.resolve()).as_posix()
    except ValueError:
        return path.resolve().as_posix()
