import logging

from hotel_booking.exceptions.custom import AuthenticationError, DirectoryError
from hotel_booking.schemas.directory import Profile
from hotel_booking.schemas.identity import IdentitySession, IdentityUser
from hotel_booking.schemas.requests import SignUpRequest
from hotel_booking.services.directory import DirectoryService
from hotel_booking.services.identity import IdentityService
from hotel_booking.session import SessionContext

logger = logging.getLogger(__name__)

PROFILES = "profiles"


class AccountService:
    """Sign-up/sign-in and session resolution over identity + profiles."""

    def __init__(self, identity: IdentityService, directory: DirectoryService) -> None:
        self._identity = identity
        self._directory = directory

    async def sign_up(self, request: SignUpRequest) -> IdentitySession:
        session = await self._identity.sign_up(request.email, request.password)

        # Profile row id mirrors the identity user id
        try:
            await self._directory.create(
                PROFILES,
                {
                    "id": session.user.id,
                    "full_name": request.full_name,
                    "phone": request.phone,
                    "role": request.role,
                },
                access_token=session.access_token,
            )
        except DirectoryError as exc:
            logger.warning(
                "Identity user %s has no profile; profile creation failed: %s",
                session.user.id, exc.message,
            )
            raise
        logger.info("Created %s profile for %s", request.role, session.user.id)
        return session

    async def sign_in(self, email: str, password: str) -> IdentitySession:
        return await self._identity.sign_in(email, password)

    async def sign_out(self, access_token: str) -> None:
        await self._identity.sign_out(access_token)

    async def current_user(self, access_token: str) -> IdentityUser | None:
        return await self._identity.get_user(access_token)

    async def current_profile(self, access_token: str) -> Profile | None:
        user = await self.current_user(access_token)
        if user is None:
            return None
        return await self._load_profile(user.id, access_token)

    async def _load_profile(self, user_id: str, access_token: str) -> Profile | None:
        record = await self._directory.get(PROFILES, user_id, access_token=access_token)
        return Profile(**record) if record else None

    async def resolve_session(self, access_token: str) -> SessionContext:
        user = await self.current_user(access_token)
        if user is None:
            raise AuthenticationError("Invalid or expired session")

        profile = await self._load_profile(user.id, access_token)
        if profile is None:
            raise AuthenticationError("No profile found for this user")

        return SessionContext(
            user_id=user.id,
            access_token=access_token,
            email=user.email,
            profile=profile,
        )
