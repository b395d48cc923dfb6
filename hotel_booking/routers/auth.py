from fastapi import APIRouter

from hotel_booking.dependencies import AccessTokenDep, AccountDep, SessionDep
from hotel_booking.schemas.identity import IdentitySession
from hotel_booking.schemas.requests import SignInRequest, SignUpRequest
from hotel_booking.schemas.responses import AuthResponse, MeResponse

router = APIRouter(prefix="/auth", tags=["auth"])


def _auth_response(session: IdentitySession) -> AuthResponse:
    return AuthResponse(
        user_id=session.user.id,
        email=session.user.email,
        access_token=session.access_token,
        refresh_token=session.refresh_token,
        expires_in=session.expires_in,
    )


@router.post("/signup", response_model=AuthResponse, status_code=201)
async def sign_up(request: SignUpRequest, accounts: AccountDep) -> AuthResponse:
    return _auth_response(await accounts.sign_up(request))


@router.post("/signin", response_model=AuthResponse)
async def sign_in(request: SignInRequest, accounts: AccountDep) -> AuthResponse:
    return _auth_response(await accounts.sign_in(request.email, request.password))


@router.post("/signout", status_code=204)
async def sign_out(accounts: AccountDep, token: AccessTokenDep) -> None:
    await accounts.sign_out(token)


@router.get("/me", response_model=MeResponse)
async def me(session: SessionDep) -> MeResponse:
    return MeResponse(
        user_id=session.user_id,
        email=session.email,
        profile=session.profile,
    )
