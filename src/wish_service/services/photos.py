"""Photo payload decoding and storage interface."""

import base64
import binascii
import re
from typing import Protocol

DATA_URL_PREFIX = re.compile(r"^data:image/[\w.+-]+;base64,")


class StorageFailure(RuntimeError):
    """Raised when a photo cannot be decoded or written."""


class PhotoStorage(Protocol):
    """Interface for persisting photo bytes."""

    def save(self, content: bytes) -> str:
        """Write the bytes under a fresh name and return the stored path."""

    def delete(self, stored_path: str) -> None:
        """Remove a previously stored photo, ignoring missing files."""


def decode_photo_payload(payload: str) -> bytes:
    """Decode a base64 photo, stripping an optional data-URL prefix."""
    encoded = DATA_URL_PREFIX.sub("", payload, count=1)
    try:
        content = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise StorageFailure(f"Invalid base64 photo payload: {exc}") from exc
    if not content:
        raise StorageFailure("Photo payload decoded to zero bytes")
    return content
