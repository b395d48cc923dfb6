import logging
from datetime import date

from hotel_booking.exceptions.custom import NotFoundError, RoomUnavailableError
from hotel_booking.mappers.booking_calculator import (
    compute_nights,
    compute_total_price,
    format_price,
    validate_booking_request,
)
from hotel_booking.mappers.hotel_filters import HotelSort, apply_hotel_filters
from hotel_booking.schemas.directory import Amenity, Hotel, Review, Room
from hotel_booking.schemas.responses import HotelDetail, PriceQuote, RoomDetail
from hotel_booking.services.directory import DirectoryService

logger = logging.getLogger(__name__)

HOTELS = "hotels"
ROOMS = "rooms"
REVIEWS = "reviews"
AMENITIES = "amenities"


class CatalogService:
    """Public hotel/room browsing and price quotes."""

    def __init__(self, directory: DirectoryService, featured_limit: int = 6) -> None:
        self._directory = directory
        self._featured_limit = featured_limit

    async def search_hotels(
        self,
        query: str = "",
        min_rating: float = 0,
        star_rating: int = 0,
        sort_by: HotelSort = HotelSort.rating,
    ) -> list[Hotel]:
        records = await self._directory.list(HOTELS, filters={"is_active": True})
        hotels = [Hotel(**r) for r in records]
        result = apply_hotel_filters(
            hotels,
            query=query,
            min_rating=min_rating,
            star_rating=star_rating,
            sort_by=sort_by,
        )
        logger.info(
            "Hotel search '%s' matched %d of %d active hotels",
            query, len(result), len(hotels),
        )
        return result

    async def featured_hotels(self) -> list[Hotel]:
        records = await self._directory.list(
            HOTELS,
            filters={"is_active": True},
            order=[("rating", False)],
            limit=self._featured_limit,
        )
        return [Hotel(**r) for r in records]

    async def get_hotel(self, hotel_id: str, access_token: str | None = None) -> Hotel:
        record = await self._directory.get(HOTELS, hotel_id, access_token=access_token)
        if record is None:
            raise NotFoundError("Hotel", hotel_id)
        return Hotel(**record)

    async def get_room(self, room_id: str, access_token: str | None = None) -> Room:
        record = await self._directory.get(ROOMS, room_id, access_token=access_token)
        if record is None:
            raise NotFoundError("Room", room_id)
        return Room(**record)

    async def list_rooms(self, hotel_id: str, access_token: str | None = None) -> list[Room]:
        records = await self._directory.list(
            ROOMS,
            filters={"hotel_id": hotel_id},
            order=[("price_per_night", True)],
            access_token=access_token,
        )
        return [Room(**r) for r in records]

    async def get_hotel_detail(self, hotel_id: str) -> HotelDetail:
        hotel = await self.get_hotel(hotel_id)
        if not hotel.is_active:
            raise NotFoundError("Hotel", hotel_id)
        rooms = await self.list_rooms(hotel_id)
        return HotelDetail(hotel=hotel, rooms=rooms)

    async def get_room_detail(self, room_id: str) -> RoomDetail:
        room = await self.get_room(room_id)
        hotel = await self.get_hotel(room.hotel_id)
        if not hotel.is_active:
            raise NotFoundError("Room", room_id)
        return RoomDetail(room=room, hotel=hotel)

    async def list_reviews(self, hotel_id: str) -> list[Review]:
        records = await self._directory.list(
            REVIEWS,
            filters={"hotel_id": hotel_id},
            order=[("created_at", False)],
        )
        return [Review(**r) for r in records]

    async def list_amenities(self) -> list[Amenity]:
        records = await self._directory.list(AMENITIES, order=[("name", True)])
        return [Amenity(**r) for r in records]

    async def quote_price(
        self,
        room_id: str,
        check_in: date,
        check_out: date,
        num_guests: int,
        today: date | None = None,
    ) -> PriceQuote:
        room = await self.get_room(room_id)
        hotel = await self.get_hotel(room.hotel_id)
        if not hotel.is_active:
            raise RoomUnavailableError(f"Hotel '{hotel.name}' is not accepting bookings")
        validate_booking_request(
            check_in, check_out, num_guests, room, today=today or date.today()
        )

        nights = compute_nights(check_in, check_out)
        total = compute_total_price(nights, room.price_per_night)
        return PriceQuote(
            room_id=room.id,
            nights=nights,
            price_per_night=room.price_per_night,
            total_price=total,
            display_total=format_price(total),
        )
