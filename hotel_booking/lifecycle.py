"""Booking status lifecycle.

A booking starts as ``pending`` and moves forward through ``confirmed`` and
``checked_in`` to ``completed``; ``canceled`` can be reached from any
non-terminal state. Every transition is gated on the role of the actor.
"""

from __future__ import annotations

from enum import StrEnum

from hotel_booking.exceptions.custom import InvalidTransitionError


class UserRole(StrEnum):
    client = "client"
    owner = "owner"
    admin = "admin"


class BookingStatus(StrEnum):
    pending = "pending"
    confirmed = "confirmed"
    checked_in = "checked_in"
    completed = "completed"
    canceled = "canceled"


TERMINAL_STATUSES = frozenset({BookingStatus.completed, BookingStatus.canceled})

_STAFF = frozenset({UserRole.owner, UserRole.admin})
_EVERYONE = frozenset(UserRole)

# (from, to) -> roles allowed to perform the move
TRANSITIONS: dict[tuple[BookingStatus, BookingStatus], frozenset[UserRole]] = {
    (BookingStatus.pending, BookingStatus.confirmed): _STAFF,
    (BookingStatus.confirmed, BookingStatus.checked_in): _STAFF,
    (BookingStatus.checked_in, BookingStatus.completed): _STAFF,
    (BookingStatus.pending, BookingStatus.canceled): _EVERYONE,
    (BookingStatus.confirmed, BookingStatus.canceled): _STAFF,
    (BookingStatus.checked_in, BookingStatus.canceled): _STAFF,
}


def is_terminal(status: BookingStatus) -> bool:
    return status in TERMINAL_STATUSES


def can_transition(
    current: BookingStatus, requested: BookingStatus, role: UserRole
) -> bool:
    return role in TRANSITIONS.get((current, requested), frozenset())


def allowed_transitions(current: BookingStatus, role: UserRole) -> list[BookingStatus]:
    """Statuses ``role`` may move a booking to from ``current``, in lifecycle order."""
    return [
        target
        for target in BookingStatus
        if can_transition(current, target, role)
    ]


def guard_transition(
    current: BookingStatus, requested: BookingStatus, role: UserRole
) -> None:
    """Raise InvalidTransitionError unless ``role`` may move ``current`` to ``requested``."""
    if not can_transition(current, requested, role):
        raise InvalidTransitionError(str(current), str(requested), str(role))
