from datetime import date
from enum import StrEnum

from hotel_booking.lifecycle import BookingStatus
from hotel_booking.schemas.directory import Booking


class BookingView(StrEnum):
    all = "all"
    upcoming = "upcoming"
    past = "past"


def is_upcoming(booking: Booking, today: date) -> bool:
    return booking.check_in >= today and booking.status != BookingStatus.canceled


def is_past(booking: Booking, today: date) -> bool:
    return booking.check_out < today or booking.status == BookingStatus.completed


def filter_bookings(
    bookings: list[Booking], view: BookingView, today: date
) -> list[Booking]:
    if view == BookingView.upcoming:
        return [b for b in bookings if is_upcoming(b, today)]
    if view == BookingView.past:
        return [b for b in bookings if is_past(b, today)]
    return list(bookings)
