import logging

from hotel_booking.exceptions.custom import NotFoundError, PermissionDeniedError
from hotel_booking.mappers.analytics import count_active_hotels, summarize_bookings
from hotel_booking.schemas.directory import Booking, Hotel, Room
from hotel_booking.schemas.requests import HotelCreate, HotelUpdate, RoomCreate, RoomUpdate
from hotel_booking.schemas.responses import OwnerAnalytics
from hotel_booking.services.bookings import BookingService
from hotel_booking.services.directory import DirectoryService
from hotel_booking.session import SessionContext

logger = logging.getLogger(__name__)

HOTELS = "hotels"
ROOMS = "rooms"


class OwnerService:
    """Property management for hotel owners, scoped to hotels they own."""

    def __init__(self, directory: DirectoryService, bookings: BookingService) -> None:
        self._directory = directory
        self._bookings = bookings

    async def list_hotels(self, session: SessionContext) -> list[Hotel]:
        records = await self._directory.list(
            HOTELS,
            filters={"owner_id": session.user_id},
            order=[("created_at", False)],
            access_token=session.access_token,
        )
        return [Hotel(**r) for r in records]

    async def _own_hotel(self, session: SessionContext, hotel_id: str) -> Hotel:
        record = await self._directory.get(HOTELS, hotel_id, access_token=session.access_token)
        if record is None:
            raise NotFoundError("Hotel", hotel_id)
        hotel = Hotel(**record)
        if hotel.owner_id != session.user_id:
            raise PermissionDeniedError("You do not own this hotel")
        return hotel

    async def _own_room(self, session: SessionContext, room_id: str) -> Room:
        record = await self._directory.get(ROOMS, room_id, access_token=session.access_token)
        if record is None:
            raise NotFoundError("Room", room_id)
        room = Room(**record)
        await self._own_hotel(session, room.hotel_id)
        return room

    async def create_hotel(self, session: SessionContext, request: HotelCreate) -> Hotel:
        fields = request.model_dump(mode="json")
        fields["owner_id"] = session.user_id
        record = await self._directory.create(
            HOTELS, fields, access_token=session.access_token
        )
        return Hotel(**record)

    async def update_hotel(
        self, session: SessionContext, hotel_id: str, request: HotelUpdate
    ) -> Hotel:
        await self._own_hotel(session, hotel_id)
        record = await self._directory.update(
            HOTELS,
            hotel_id,
            request.model_dump(mode="json", exclude_unset=True),
            access_token=session.access_token,
        )
        if record is None:
            raise NotFoundError("Hotel", hotel_id)
        return Hotel(**record)

    async def toggle_hotel(self, session: SessionContext, hotel_id: str) -> Hotel:
        hotel = await self._own_hotel(session, hotel_id)
        record = await self._directory.update(
            HOTELS,
            hotel_id,
            {"is_active": not hotel.is_active},
            access_token=session.access_token,
        )
        if record is None:
            raise NotFoundError("Hotel", hotel_id)
        logger.info("Owner %s set hotel %s active=%s", session.user_id, hotel_id, not hotel.is_active)
        return Hotel(**record)

    async def add_room(
        self, session: SessionContext, hotel_id: str, request: RoomCreate
    ) -> Room:
        await self._own_hotel(session, hotel_id)
        fields = request.model_dump(mode="json")
        fields["hotel_id"] = hotel_id
        record = await self._directory.create(
            ROOMS, fields, access_token=session.access_token
        )
        return Room(**record)

    async def update_room(
        self, session: SessionContext, room_id: str, request: RoomUpdate
    ) -> Room:
        await self._own_room(session, room_id)
        record = await self._directory.update(
            ROOMS,
            room_id,
            request.model_dump(mode="json", exclude_unset=True),
            access_token=session.access_token,
        )
        if record is None:
            raise NotFoundError("Room", room_id)
        return Room(**record)

    async def delete_room(self, session: SessionContext, room_id: str) -> None:
        await self._own_room(session, room_id)
        await self._directory.delete(ROOMS, room_id, access_token=session.access_token)

    async def list_bookings(self, session: SessionContext) -> list[Booking]:
        hotels = await self.list_hotels(session)
        return await self._bookings.list_hotel_bookings(
            [h.id for h in hotels], session.access_token
        )

    async def analytics(self, session: SessionContext) -> OwnerAnalytics:
        hotels = await self.list_hotels(session)
        bookings = await self._bookings.list_hotel_bookings(
            [h.id for h in hotels], session.access_token
        )
        summary = summarize_bookings(bookings)
        return OwnerAnalytics(
            **summary.model_dump(),
            total_hotels=len(hotels),
            active_hotels=count_active_hotels(hotels),
        )
