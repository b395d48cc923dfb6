import logging
from collections.abc import Callable

import httpx

from hotel_booking.exceptions.custom import IdentityError, RateLimitError
from hotel_booking.schemas.identity import IdentitySession, IdentityUser
from hotel_booking.services.directory import extract_error_message

logger = logging.getLogger(__name__)

AUTH_PATH = "/auth/v1"

AuthStateListener = Callable[[IdentityUser | None], None]


class IdentityService:
    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str,
        api_key: str,
        service_role_key: str = "",
    ):
        self._client = client
        self._base_url = base_url.rstrip("/") + AUTH_PATH
        self._api_key = api_key
        self._service_role_key = service_role_key
        self._listeners: list[AuthStateListener] = []

    @property
    def admin_enabled(self) -> bool:
        return bool(self._service_role_key)

    def _headers(self, access_token: str | None = None) -> dict[str, str]:
        return {
            "apikey": self._api_key,
            "Authorization": f"Bearer {access_token or self._api_key}",
            "Content-Type": "application/json",
        }

    def _check(self, resp: httpx.Response) -> None:
        if resp.status_code == 429:
            raise RateLimitError("Identity")
        if resp.status_code >= 400:
            raise IdentityError(extract_error_message(resp), status_code=resp.status_code)

    def on_auth_state_change(self, callback: AuthStateListener) -> None:
        """Register a callback fired with the user on sign-in and None on sign-out."""
        self._listeners.append(callback)

    def _notify(self, user: IdentityUser | None) -> None:
        for callback in self._listeners:
            try:
                callback(user)
            except Exception:
                logger.exception("Auth state listener failed")

    async def sign_up(self, email: str, password: str) -> IdentitySession:
        resp = await self._client.post(
            f"{self._base_url}/signup",
            json={"email": email, "password": password},
            headers=self._headers(),
        )
        self._check(resp)

        data = resp.json()
        # With email confirmation enabled the backend returns the bare user
        if "user" in data:
            session = IdentitySession(**data)
        else:
            session = IdentitySession(user=IdentityUser(**data))

        logger.info("Signed up user %s", session.user.id)
        if session.access_token:
            self._notify(session.user)
        return session

    async def sign_in(self, email: str, password: str) -> IdentitySession:
        resp = await self._client.post(
            f"{self._base_url}/token",
            params={"grant_type": "password"},
            json={"email": email, "password": password},
            headers=self._headers(),
        )
        self._check(resp)

        session = IdentitySession(**resp.json())
        logger.info("Signed in user %s", session.user.id)
        self._notify(session.user)
        return session

    async def sign_out(self, access_token: str) -> None:
        resp = await self._client.post(
            f"{self._base_url}/logout",
            headers=self._headers(access_token),
        )
        self._check(resp)
        self._notify(None)

    async def get_user(self, access_token: str) -> IdentityUser | None:
        """Resolve a token to its user; None when the token is invalid or expired."""
        resp = await self._client.get(
            f"{self._base_url}/user",
            headers=self._headers(access_token),
        )
        if resp.status_code in (401, 403):
            return None
        self._check(resp)
        return IdentityUser(**resp.json())

    async def delete_user(self, user_id: str) -> None:
        if not self.admin_enabled:
            raise IdentityError("Service role key not configured")

        resp = await self._client.delete(
            f"{self._base_url}/admin/users/{user_id}",
            headers={
                "apikey": self._service_role_key,
                "Authorization": f"Bearer {self._service_role_key}",
            },
        )
        self._check(resp)
        logger.info("Deleted user %s", user_id)
