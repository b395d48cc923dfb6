import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from hotel_booking.config import Settings
from hotel_booking.exceptions.custom import (
    AuthenticationError,
    BookingValidationError,
    DirectoryError,
    IdentityError,
    InvalidTransitionError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
)
from hotel_booking.exceptions.handlers import (
    authentication_error_handler,
    booking_validation_error_handler,
    directory_error_handler,
    identity_error_handler,
    invalid_transition_error_handler,
    not_found_error_handler,
    permission_denied_error_handler,
    rate_limit_error_handler,
)
from hotel_booking.routers.admin import router as admin_router
from hotel_booking.routers.auth import router as auth_router
from hotel_booking.routers.bookings import router as bookings_router
from hotel_booking.routers.hotels import router as hotels_router
from hotel_booking.routers.owner import router as owner_router
from hotel_booking.schemas.identity import IdentityUser
from hotel_booking.services.accounts import AccountService
from hotel_booking.services.admin import AdminService
from hotel_booking.services.bookings import BookingService
from hotel_booking.services.catalog import CatalogService
from hotel_booking.services.directory import DirectoryService
from hotel_booking.services.identity import IdentityService
from hotel_booking.services.owner import OwnerService

logger = logging.getLogger(__name__)


def _log_auth_state(user: IdentityUser | None) -> None:
    if user is None:
        logger.info("Session ended")
    else:
        logger.info("Session started for user %s", user.id)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    async with httpx.AsyncClient(timeout=settings.request_timeout) as client:
        directory = DirectoryService(
            client, settings.supabase_url, settings.supabase_anon_key
        )
        identity = IdentityService(
            client,
            settings.supabase_url,
            settings.supabase_anon_key,
            service_role_key=settings.supabase_service_role_key,
        )
        identity.on_auth_state_change(_log_auth_state)

        bookings = BookingService(directory)

        app.state.account_service = AccountService(identity, directory)
        app.state.catalog_service = CatalogService(
            directory, featured_limit=settings.featured_hotels_limit
        )
        app.state.booking_service = bookings
        app.state.owner_service = OwnerService(directory, bookings)
        app.state.admin_service = AdminService(directory, identity, bookings)

        yield


app = FastAPI(title="Hotel Booking", lifespan=lifespan)

app.add_exception_handler(DirectoryError, directory_error_handler)
app.add_exception_handler(IdentityError, identity_error_handler)
app.add_exception_handler(RateLimitError, rate_limit_error_handler)
app.add_exception_handler(BookingValidationError, booking_validation_error_handler)
app.add_exception_handler(InvalidTransitionError, invalid_transition_error_handler)
app.add_exception_handler(NotFoundError, not_found_error_handler)
app.add_exception_handler(AuthenticationError, authentication_error_handler)
app.add_exception_handler(PermissionDeniedError, permission_denied_error_handler)

app.include_router(auth_router)
app.include_router(hotels_router)
app.include_router(bookings_router)
app.include_router(owner_router)
app.include_router(admin_router)
