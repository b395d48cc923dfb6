"""Dashboard figures computed from loaded bookings and hotels."""

from collections import Counter
from decimal import Decimal

from hotel_booking.lifecycle import BookingStatus
from hotel_booking.schemas.directory import Booking, Hotel
from hotel_booking.schemas.responses import BookingAnalytics


def compute_revenue(bookings: list[Booking]) -> Decimal:
    """Sum of stored totals, canceled bookings excluded."""
    return sum(
        (b.total_price for b in bookings if b.status != BookingStatus.canceled),
        Decimal("0"),
    )


def count_by_status(bookings: list[Booking]) -> dict[str, int]:
    counts = Counter(b.status for b in bookings)
    return {status.value: counts.get(status, 0) for status in BookingStatus}


def count_active_hotels(hotels: list[Hotel]) -> int:
    return sum(1 for h in hotels if h.is_active)


def summarize_bookings(bookings: list[Booking]) -> BookingAnalytics:
    return BookingAnalytics(
        total_bookings=len(bookings),
        total_revenue=compute_revenue(bookings),
        status_counts=count_by_status(bookings),
    )
