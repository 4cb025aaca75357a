from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import Field

from schemas.base import CamelModel

PackageStatus = Literal["draft", "published", "sold_out", "canceled"]


class PackageCreate(CamelModel):
    title: str = Field(..., min_length=1)
    category_id: str = Field(..., min_length=1)
    destination_id: str = Field(..., min_length=1)
    price: int = Field(..., gt=0, description="Price per passenger in cents")
    description: Optional[str] = None
    short_description: Optional[str] = None
    original_price: Optional[int] = Field(None, ge=0)
    price_child_6_10: Optional[int] = Field(None, ge=0)
    price_child_11_13: Optional[int] = Field(None, ge=0)
    duration_days: int = Field(1, ge=1)
    departure_location: Optional[str] = None
    departure_time: Optional[str] = None
    departure_date: Optional[datetime] = None
    return_date: Optional[datetime] = None
    available_seats: int = Field(0, ge=0)
    total_seats: int = Field(0, ge=0)
    min_participants: Optional[int] = Field(None, ge=1)
    includes: list[str] = Field(default_factory=list)
    not_includes: list[str] = Field(default_factory=list)
    itinerary: Optional[Any] = None
    cover_image: Optional[str] = None
    gallery_images: list[str] = Field(default_factory=list)
    status: PackageStatus = "draft"
    is_featured: bool = False


class PackageUpdate(CamelModel):
    """Partial update; only fields present in the request body are applied."""

    id: str = Field(..., min_length=1)
    title: Optional[str] = Field(None, min_length=1)
    category_id: Optional[str] = None
    destination_id: Optional[str] = None
    price: Optional[int] = Field(None, gt=0)
    description: Optional[str] = None
    short_description: Optional[str] = None
    original_price: Optional[int] = Field(None, ge=0)
    price_child_6_10: Optional[int] = Field(None, ge=0)
    price_child_11_13: Optional[int] = Field(None, ge=0)
    duration_days: Optional[int] = Field(None, ge=1)
    departure_location: Optional[str] = None
    departure_time: Optional[str] = None
    departure_date: Optional[datetime] = None
    return_date: Optional[datetime] = None
    available_seats: Optional[int] = Field(None, ge=0)
    total_seats: Optional[int] = Field(None, ge=0)
    min_participants: Optional[int] = Field(None, ge=1)
    includes: Optional[list[str]] = None
    not_includes: Optional[list[str]] = None
    itinerary: Optional[Any] = None
    cover_image: Optional[str] = None
    gallery_images: Optional[list[str]] = None
    status: Optional[PackageStatus] = None
    is_featured: Optional[bool] = None
    is_active: Optional[bool] = None


class PackageFilters(CamelModel):
    category: Optional[str] = None
    destination: Optional[str] = None
    min_price: Optional[int] = None
    max_price: Optional[int] = None
    min_duration: Optional[int] = None
    max_duration: Optional[int] = None
    status: str = "published"
    is_featured: Optional[bool] = None
    search: Optional[str] = None
