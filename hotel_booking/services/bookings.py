import logging
from datetime import date

from hotel_booking.exceptions.custom import (
    NotFoundError,
    PermissionDeniedError,
    RoomUnavailableError,
)
from hotel_booking.lifecycle import BookingStatus, UserRole, allowed_transitions, guard_transition
from hotel_booking.mappers.booking_calculator import (
    compute_nights,
    compute_total_price,
    validate_booking_request,
)
from hotel_booking.mappers.booking_views import BookingView, filter_bookings
from hotel_booking.schemas.directory import Booking, Hotel, Room
from hotel_booking.schemas.requests import BookingCreate
from hotel_booking.schemas.responses import BookingWithTransitions
from hotel_booking.services.directory import DirectoryService
from hotel_booking.session import SessionContext

logger = logging.getLogger(__name__)

BOOKINGS = "bookings"
ROOMS = "rooms"
HOTELS = "hotels"

GUEST_SELECT = "*,rooms(title,price_per_night),hotels(name,city,country,main_image)"
STAFF_SELECT = "*,profiles!bookings_user_id_fkey(full_name),rooms(title,price_per_night),hotels(name)"


class BookingService:
    def __init__(self, directory: DirectoryService) -> None:
        self._directory = directory

    async def _get_room(self, room_id: str, access_token: str) -> Room:
        record = await self._directory.get(ROOMS, room_id, access_token=access_token)
        if record is None:
            raise NotFoundError("Room", room_id)
        return Room(**record)

    async def _get_hotel(self, hotel_id: str, access_token: str) -> Hotel:
        record = await self._directory.get(HOTELS, hotel_id, access_token=access_token)
        if record is None:
            raise NotFoundError("Hotel", hotel_id)
        return Hotel(**record)

    async def _get_booking(self, booking_id: str, access_token: str) -> Booking:
        record = await self._directory.get(BOOKINGS, booking_id, access_token=access_token)
        if record is None:
            raise NotFoundError("Booking", booking_id)
        return Booking(**record)

    async def create_booking(
        self,
        session: SessionContext,
        request: BookingCreate,
        today: date | None = None,
    ) -> Booking:
        room = await self._get_room(request.room_id, session.access_token)
        hotel = await self._get_hotel(room.hotel_id, session.access_token)
        if not hotel.is_active:
            raise RoomUnavailableError(f"Hotel '{hotel.name}' is not accepting bookings")

        validate_booking_request(
            request.check_in,
            request.check_out,
            request.num_guests,
            room,
            today=today or date.today(),
        )

        nights = compute_nights(request.check_in, request.check_out)
        # Price is fixed at creation; later rate changes do not touch it
        total = compute_total_price(nights, room.price_per_night)

        record = await self._directory.create(
            BOOKINGS,
            {
                "user_id": session.user_id,
                "room_id": room.id,
                "hotel_id": hotel.id,
                "check_in": request.check_in.isoformat(),
                "check_out": request.check_out.isoformat(),
                "num_guests": request.num_guests,
                "total_price": str(total),
                "special_requests": request.special_requests or None,
                "status": BookingStatus.pending.value,
            },
            access_token=session.access_token,
        )
        booking = Booking(**record)
        logger.info(
            "Booking %s created by %s: %d nights in room %s, total %s",
            booking.id, session.user_id, nights, room.id, total,
        )
        return booking

    async def list_user_bookings(
        self,
        session: SessionContext,
        view: BookingView = BookingView.all,
        today: date | None = None,
    ) -> list[Booking]:
        records = await self._directory.list(
            BOOKINGS,
            filters={"user_id": session.user_id},
            order=[("created_at", False)],
            select=GUEST_SELECT,
            access_token=session.access_token,
        )
        bookings = [Booking(**r) for r in records]
        return filter_bookings(bookings, view, today or date.today())

    async def list_hotel_bookings(
        self, hotel_ids: list[str], access_token: str
    ) -> list[Booking]:
        if not hotel_ids:
            return []
        records = await self._directory.list(
            BOOKINGS,
            filters={"hotel_id": hotel_ids},
            order=[("created_at", False)],
            select=STAFF_SELECT,
            access_token=access_token,
        )
        return [Booking(**r) for r in records]

    async def list_all_bookings(self, access_token: str) -> list[Booking]:
        records = await self._directory.list(
            BOOKINGS,
            order=[("created_at", False)],
            select=STAFF_SELECT,
            access_token=access_token,
        )
        return [Booking(**r) for r in records]

    async def _authorize(self, session: SessionContext, booking: Booking) -> None:
        if session.role == UserRole.admin:
            return
        if session.role == UserRole.client:
            if booking.user_id != session.user_id:
                raise PermissionDeniedError("Clients may only manage their own bookings")
            return

        hotel = await self._get_hotel(booking.hotel_id, session.access_token)
        if hotel.owner_id != session.user_id:
            raise PermissionDeniedError("Booking belongs to a hotel you do not own")

    async def get_booking(
        self, session: SessionContext, booking_id: str
    ) -> BookingWithTransitions:
        booking = await self._get_booking(booking_id, session.access_token)
        await self._authorize(session, booking)
        return BookingWithTransitions(
            booking=booking,
            allowed_transitions=allowed_transitions(booking.status, session.role),
        )

    async def change_status(
        self, session: SessionContext, booking_id: str, requested: BookingStatus
    ) -> Booking:
        booking = await self._get_booking(booking_id, session.access_token)
        await self._authorize(session, booking)
        guard_transition(booking.status, requested, session.role)

        record = await self._directory.update(
            BOOKINGS,
            booking_id,
            {"status": requested.value},
            access_token=session.access_token,
        )
        if record is None:
            raise NotFoundError("Booking", booking_id)

        logger.info(
            "Booking %s moved %s -> %s by %s (%s)",
            booking_id, booking.status, requested, session.user_id, session.role,
        )
        return Booking(**record)

    async def cancel_booking(self, session: SessionContext, booking_id: str) -> Booking:
        return await self.change_status(session, booking_id, BookingStatus.canceled)
