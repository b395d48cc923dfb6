"""Pure functions for pricing and validating a stay.

No I/O, no side effects. Totals are kept as full-precision Decimals; only
format_price() rounds, for display.
"""

import math
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

from hotel_booking.exceptions.custom import (
    GuestCountExceededError,
    InvalidDateRangeError,
    RoomUnavailableError,
)
from hotel_booking.schemas.directory import Room

SECONDS_PER_DAY = 24 * 60 * 60
DISPLAY_QUANTUM = Decimal("0.01")


def compute_nights(check_in: date | datetime, check_out: date | datetime) -> int:
    """Calendar nights between two dates, rounded up.

    Uses the absolute difference, so out-of-order dates never yield a
    negative count. A result below 1 is not a valid stay.
    """
    delta = abs(check_out - check_in)
    return math.ceil(delta.total_seconds() / SECONDS_PER_DAY)


def _to_decimal(value: Decimal | int | float | str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() first so 99.99 stays 99.99 instead of its binary expansion
    return Decimal(str(value))


def compute_total_price(nights: int, price_per_night: Decimal | int | float | str) -> Decimal:
    if nights < 0:
        raise ValueError(f"nights must be non-negative, got {nights}")
    return _to_decimal(price_per_night) * nights


def format_price(amount: Decimal | int | float | str) -> str:
    """Round to cents (half-up) for display, e.g. ``360.00``."""
    rounded = _to_decimal(amount).quantize(DISPLAY_QUANTUM, rounding=ROUND_HALF_UP)
    return f"{rounded:.2f}"


def _as_date(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


def validate_booking_request(
    check_in: date | datetime,
    check_out: date | datetime,
    guest_count: int,
    room: Room,
    today: date | None = None,
) -> None:
    """Raise a BookingValidationError if the request cannot become a booking.

    Priority rules:
      1. Unavailable room → RoomUnavailableError (regardless of dates/guests)
      2. More guests than the room holds → GuestCountExceededError
      3. Check-out not strictly after check-in (zero nights or reversed
         dates) → InvalidDateRangeError
      4. Check-in before ``today``, when given → InvalidDateRangeError
    """
    if not room.is_available:
        raise RoomUnavailableError(f"Room '{room.title}' is not available")

    if guest_count > room.max_guests:
        raise GuestCountExceededError(
            f"Maximum {room.max_guests} guests allowed for this room"
        )

    if check_out <= check_in or compute_nights(check_in, check_out) < 1:
        raise InvalidDateRangeError("Check-out date must be after check-in date")

    if today is not None and _as_date(check_in) < today:
        raise InvalidDateRangeError("Check-in date cannot be in the past")
