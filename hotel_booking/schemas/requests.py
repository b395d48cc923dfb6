from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field

from hotel_booking.lifecycle import BookingStatus, UserRole


class SignUpRequest(BaseModel):
    email: str
    password: str = Field(..., min_length=6)
    full_name: str
    phone: str | None = None
    role: Literal["client", "owner"] = "client"


class SignInRequest(BaseModel):
    email: str
    password: str


class PriceQuoteRequest(BaseModel):
    check_in: date
    check_out: date
    num_guests: int = Field(1, ge=1)


class BookingCreate(BaseModel):
    room_id: str
    check_in: date
    check_out: date
    num_guests: int = Field(1, ge=1)
    special_requests: str | None = None


class StatusUpdate(BaseModel):
    status: BookingStatus


class RoleUpdate(BaseModel):
    role: UserRole


class HotelCreate(BaseModel):
    name: str
    description: str = ""
    city: str
    country: str
    address: str = ""
    star_rating: int = Field(..., ge=1, le=5)
    main_image: str | None = None
    images: list[str] = []
    is_active: bool = True


class HotelUpdate(BaseModel):
    name: str | None = None
    description: str | None = None
    city: str | None = None
    country: str | None = None
    address: str | None = None
    star_rating: int | None = Field(None, ge=1, le=5)
    main_image: str | None = None
    images: list[str] | None = None


class RoomCreate(BaseModel):
    title: str
    description: str = ""
    price_per_night: Decimal = Field(..., gt=0)
    max_guests: int = Field(..., ge=1)
    bed_type: str | None = None
    room_size: int | None = None
    images: list[str] = []
    is_available: bool = True


class RoomUpdate(BaseModel):
    title: str | None = None
    description: str | None = None
    price_per_night: Decimal | None = Field(None, gt=0)
    max_guests: int | None = Field(None, ge=1)
    bed_type: str | None = None
    room_size: int | None = None
    images: list[str] | None = None
    is_available: bool | None = None
