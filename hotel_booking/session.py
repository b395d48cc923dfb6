"""Per-request session context.

Built from the bearer token at the start of each request and handed to
services explicitly; nothing about the signed-in user is kept globally.
"""

from pydantic import BaseModel

from hotel_booking.lifecycle import UserRole
from hotel_booking.schemas.directory import Profile


class SessionContext(BaseModel):
    user_id: str
    access_token: str
    email: str | None = None
    profile: Profile

    @property
    def role(self) -> UserRole:
        return self.profile.role

    @property
    def is_admin(self) -> bool:
        return self.profile.role == UserRole.admin
