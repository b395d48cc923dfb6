from typing import Annotated

from fastapi import Depends, Header, Request

from hotel_booking.exceptions.custom import AuthenticationError, PermissionDeniedError
from hotel_booking.lifecycle import UserRole
from hotel_booking.services.accounts import AccountService
from hotel_booking.services.admin import AdminService
from hotel_booking.services.bookings import BookingService
from hotel_booking.services.catalog import CatalogService
from hotel_booking.services.owner import OwnerService
from hotel_booking.session import SessionContext


def get_account_service(request: Request) -> AccountService:
    return request.app.state.account_service


def get_catalog_service(request: Request) -> CatalogService:
    return request.app.state.catalog_service


def get_booking_service(request: Request) -> BookingService:
    return request.app.state.booking_service


def get_owner_service(request: Request) -> OwnerService:
    return request.app.state.owner_service


def get_admin_service(request: Request) -> AdminService:
    return request.app.state.admin_service


AccountDep = Annotated[AccountService, Depends(get_account_service)]
CatalogDep = Annotated[CatalogService, Depends(get_catalog_service)]
BookingDep = Annotated[BookingService, Depends(get_booking_service)]
OwnerDep = Annotated[OwnerService, Depends(get_owner_service)]
AdminDep = Annotated[AdminService, Depends(get_admin_service)]


def bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def get_access_token(
    authorization: Annotated[str | None, Header()] = None,
) -> str:
    token = bearer_token(authorization)
    if token is None:
        raise AuthenticationError("Missing bearer token")
    return token


AccessTokenDep = Annotated[str, Depends(get_access_token)]


async def get_session(accounts: AccountDep, token: AccessTokenDep) -> SessionContext:
    return await accounts.resolve_session(token)


SessionDep = Annotated[SessionContext, Depends(get_session)]


def require_role(*roles: UserRole):
    async def _check_role(session: SessionDep) -> SessionContext:
        if session.role not in roles:
            raise PermissionDeniedError(
                f"Requires role {' or '.join(r.value for r in roles)}"
            )
        return session

    return _check_role


ClientSessionDep = Annotated[SessionContext, Depends(require_role(UserRole.client))]
OwnerSessionDep = Annotated[SessionContext, Depends(require_role(UserRole.owner))]
AdminSessionDep = Annotated[SessionContext, Depends(require_role(UserRole.admin))]