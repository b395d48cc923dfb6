from fastapi import APIRouter

from hotel_booking.dependencies import BookingDep, ClientSessionDep, SessionDep
from hotel_booking.mappers.booking_views import BookingView
from hotel_booking.schemas.directory import Booking
from hotel_booking.schemas.requests import BookingCreate, StatusUpdate
from hotel_booking.schemas.responses import BookingWithTransitions

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post("", response_model=Booking, status_code=201)
async def create_booking(
    request: BookingCreate, service: BookingDep, session: ClientSessionDep
) -> Booking:
    return await service.create_booking(session, request)


@router.get("", response_model=list[Booking])
async def my_bookings(
    service: BookingDep,
    session: ClientSessionDep,
    view: BookingView = BookingView.all,
) -> list[Booking]:
    return await service.list_user_bookings(session, view)


@router.get("/{booking_id}", response_model=BookingWithTransitions)
async def get_booking(
    booking_id: str, service: BookingDep, session: SessionDep
) -> BookingWithTransitions:
    return await service.get_booking(session, booking_id)


@router.post("/{booking_id}/cancel", response_model=Booking)
async def cancel_booking(
    booking_id: str, service: BookingDep, session: ClientSessionDep
) -> Booking:
    return await service.cancel_booking(session, booking_id)


@router.patch("/{booking_id}/status", response_model=Booking)
async def update_booking_status(
    booking_id: str, request: StatusUpdate, service: BookingDep, session: SessionDep
) -> Booking:
    return await service.change_status(session, booking_id, request.status)
