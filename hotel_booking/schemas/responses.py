from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel

from hotel_booking.lifecycle import BookingStatus
from hotel_booking.schemas.directory import Booking, Hotel, Profile, Room


class AuthResponse(BaseModel):
    user_id: str
    email: str | None = None
    access_token: str | None = None
    refresh_token: str | None = None
    expires_in: int | None = None


class MeResponse(BaseModel):
    user_id: str
    email: str | None = None
    profile: Profile


class HotelDetail(BaseModel):
    hotel: Hotel
    rooms: list[Room]


class RoomDetail(BaseModel):
    room: Room
    hotel: Hotel


class PriceQuote(BaseModel):
    room_id: str
    nights: int
    price_per_night: Decimal
    total_price: Decimal
    display_total: str


class BookingWithTransitions(BaseModel):
    booking: Booking
    allowed_transitions: list[BookingStatus]


class BookingAnalytics(BaseModel):
    total_bookings: int
    total_revenue: Decimal
    status_counts: dict[str, int]


class OwnerAnalytics(BookingAnalytics):
    total_hotels: int
    active_hotels: int


class AdminAnalytics(BookingAnalytics):
    total_users: int
    total_hotels: int
    active_hotels: int
