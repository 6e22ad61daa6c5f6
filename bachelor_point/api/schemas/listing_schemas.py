from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import Field

from bachelor_point.api.schemas.base import CamelModel


class ListingRequest(CamelModel):
    """Body for both create and update. In updates, images may mix new base64 payloads and existing references."""

    title: str | None = Field(default=None, max_length=256)
    description: str | None = None
    available_from: date | None = None
    gender: str | None = Field(default=None, max_length=32)
    rent: Decimal | None = Field(default=None, max_digits=10, decimal_places=2)
    location: str | None = Field(default=None, max_length=512)
    images: list[str] | None = None


class ListingResponse(CamelModel):
    id: UUID
    title: str
    description: str
    available_from: date
    gender: str
    rent: Decimal
    location: str
    images: list[str]
    owner_id: str
    created_at: datetime
    updated_at: datetime


class ListingMutationResponse(CamelModel):
    message: str
    listing: ListingResponse
