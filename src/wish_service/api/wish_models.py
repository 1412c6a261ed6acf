"""Pydantic models for wish API payloads."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from wish_service.domain.wishes import WishRecord


class WishOut(BaseModel):
    """Wish as returned to clients."""

    id: UUID
    name: str
    email: str
    phone_number: str
    gender: str | None = None
    input_text: str
    temp_image_path: str | None = None
    user_photo_path: str | None = None
    created_at: datetime = Field(serialization_alias="createdAt")

    @classmethod
    def from_record(cls, record: WishRecord) -> "WishOut":
        """Build the response model from a stored record."""
        return cls(
            id=record.id,
            name=record.name,
            email=record.email,
            phone_number=record.phone_number,
            gender=record.gender,
            input_text=record.input_text,
            temp_image_path=record.temp_image_path,
            user_photo_path=record.user_photo_path,
            created_at=record.created_at,
        )


class WishCreated(BaseModel):
    """Response body for a successful submission."""

    message: str = "Wish submitted successfully!"
    wish: WishOut


class WishList(BaseModel):
    """Response body for listing wishes."""

    message: str = "List of submitted wishes"
    total: int
    wishes: list[WishOut]
