"""Records stored in the directory (PostgREST tables).

Field names follow the backend columns so rows can be parsed as-is.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from hotel_booking.lifecycle import BookingStatus, UserRole


class Profile(BaseModel):
    id: str
    role: UserRole = UserRole.client
    full_name: str
    phone: str | None = None
    avatar_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Hotel(BaseModel):
    id: str
    owner_id: str
    name: str
    description: str = ""
    city: str
    country: str
    address: str = ""
    rating: float = Field(0.0, ge=0, le=5)  # aggregate guest rating
    star_rating: int = Field(..., ge=1, le=5)
    main_image: str | None = None
    images: list[str] = []
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Room(BaseModel):
    id: str
    hotel_id: str
    title: str
    description: str = ""
    price_per_night: Decimal = Field(..., gt=0)
    max_guests: int = Field(..., ge=1)
    bed_type: str | None = None
    room_size: int | None = None
    images: list[str] = []
    is_available: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


class BookingRoomSummary(BaseModel):
    title: str | None = None
    price_per_night: Decimal | None = None


class BookingHotelSummary(BaseModel):
    name: str | None = None
    city: str | None = None
    country: str | None = None
    main_image: str | None = None


class BookingGuestSummary(BaseModel):
    full_name: str | None = None


class Booking(BaseModel):
    id: str
    user_id: str
    room_id: str
    hotel_id: str
    check_in: date
    check_out: date
    num_guests: int
    total_price: Decimal
    status: BookingStatus = BookingStatus.pending
    special_requests: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    # Embedded relations, present when selected
    rooms: BookingRoomSummary | None = None
    hotels: BookingHotelSummary | None = None
    profiles: BookingGuestSummary | None = None


class Review(BaseModel):
    id: str
    user_id: str
    hotel_id: str
    booking_id: str | None = None
    rating: int = Field(..., ge=1, le=5)
    comment: str | None = None
    created_at: datetime | None = None


class Amenity(BaseModel):
    id: str
    name: str
    icon: str | None = None
    category: str | None = None
