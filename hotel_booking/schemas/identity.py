from pydantic import BaseModel


class IdentityUser(BaseModel):
    id: str
    email: str | None = None
    phone: str | None = None
    created_at: str | None = None


class IdentitySession(BaseModel):
    user: IdentityUser
    access_token: str | None = None  # absent when sign-up awaits email confirmation
    refresh_token: str | None = None
    expires_in: int | None = None
    token_type: str | None = None
