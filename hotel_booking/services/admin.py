import logging

from hotel_booking.exceptions.custom import NotFoundError
from hotel_booking.lifecycle import UserRole
from hotel_booking.mappers.analytics import count_active_hotels, summarize_bookings
from hotel_booking.schemas.directory import Booking, Hotel, Profile
from hotel_booking.schemas.responses import AdminAnalytics
from hotel_booking.services.bookings import BookingService
from hotel_booking.services.directory import DirectoryService
from hotel_booking.services.identity import IdentityService
from hotel_booking.session import SessionContext

logger = logging.getLogger(__name__)

PROFILES = "profiles"
HOTELS = "hotels"


class AdminService:
    """Platform-wide management of users, hotels and bookings."""

    def __init__(
        self,
        directory: DirectoryService,
        identity: IdentityService,
        bookings: BookingService,
    ) -> None:
        self._directory = directory
        self._identity = identity
        self._bookings = bookings

    @property
    def user_deletion_enabled(self) -> bool:
        return self._identity.admin_enabled

    async def list_users(self, session: SessionContext) -> list[Profile]:
        records = await self._directory.list(
            PROFILES,
            order=[("created_at", False)],
            access_token=session.access_token,
        )
        return [Profile(**r) for r in records]

    async def update_user_role(
        self, session: SessionContext, user_id: str, role: UserRole
    ) -> Profile:
        record = await self._directory.update(
            PROFILES, user_id, {"role": role.value}, access_token=session.access_token
        )
        if record is None:
            raise NotFoundError("User", user_id)
        logger.info("Admin %s set role of %s to %s", session.user_id, user_id, role)
        return Profile(**record)

    async def delete_user(self, session: SessionContext, user_id: str) -> None:
        await self._identity.delete_user(user_id)
        logger.info("Admin %s deleted user %s", session.user_id, user_id)

    async def list_hotels(self, session: SessionContext) -> list[Hotel]:
        records = await self._directory.list(
            HOTELS,
            order=[("created_at", False)],
            access_token=session.access_token,
        )
        return [Hotel(**r) for r in records]

    async def toggle_hotel(self, session: SessionContext, hotel_id: str) -> Hotel:
        record = await self._directory.get(HOTELS, hotel_id, access_token=session.access_token)
        if record is None:
            raise NotFoundError("Hotel", hotel_id)
        hotel = Hotel(**record)

        updated = await self._directory.update(
            HOTELS,
            hotel_id,
            {"is_active": not hotel.is_active},
            access_token=session.access_token,
        )
        if updated is None:
            raise NotFoundError("Hotel", hotel_id)
        logger.info("Admin %s set hotel %s active=%s", session.user_id, hotel_id, not hotel.is_active)
        return Hotel(**updated)

    async def delete_hotel(self, session: SessionContext, hotel_id: str) -> None:
        await self._directory.delete(HOTELS, hotel_id, access_token=session.access_token)

    async def list_bookings(self, session: SessionContext) -> list[Booking]:
        return await self._bookings.list_all_bookings(session.access_token)

    async def analytics(self, session: SessionContext) -> AdminAnalytics:
        users = await self.list_users(session)
        hotels = await self.list_hotels(session)
        bookings = await self.list_bookings(session)
        summary = summarize_bookings(bookings)
        return AdminAnalytics(
            **summary.model_dump(),
            total_users=len(users),
            total_hotels=len(hotels),
            active_hotels=count_active_hotels(hotels),
        )
