from fastapi import APIRouter, HTTPException

from hotel_booking.dependencies import AdminDep, AdminSessionDep
from hotel_booking.schemas.directory import Booking, Hotel, Profile
from hotel_booking.schemas.requests import RoleUpdate
from hotel_booking.schemas.responses import AdminAnalytics

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/users", response_model=list[Profile])
async def list_users(service: AdminDep, session: AdminSessionDep) -> list[Profile]:
    return await service.list_users(session)


@router.patch("/users/{user_id}/role", response_model=Profile)
async def update_user_role(
    user_id: str, request: RoleUpdate, service: AdminDep, session: AdminSessionDep
) -> Profile:
    return await service.update_user_role(session, user_id, request.role)


@router.delete("/users/{user_id}", status_code=204)
async def delete_user(user_id: str, service: AdminDep, session: AdminSessionDep) -> None:
    if not service.user_deletion_enabled:
        raise HTTPException(status_code=503, detail="User deletion not configured")
    await service.delete_user(session, user_id)


@router.get("/hotels", response_model=list[Hotel])
async def list_hotels(service: AdminDep, session: AdminSessionDep) -> list[Hotel]:
    return await service.list_hotels(session)


@router.post("/hotels/{hotel_id}/toggle", response_model=Hotel)
async def toggle_hotel(hotel_id: str, service: AdminDep, session: AdminSessionDep) -> Hotel:
    return await service.toggle_hotel(session, hotel_id)


@router.delete("/hotels/{hotel_id}", status_code=204)
async def delete_hotel(hotel_id: str, service: AdminDep, session: AdminSessionDep) -> None:
    await service.delete_hotel(session, hotel_id)


@router.get("/bookings", response_model=list[Booking])
async def list_bookings(service: AdminDep, session: AdminSessionDep) -> list[Booking]:
    return await service.list_bookings(session)


@router.get("/analytics", response_model=AdminAnalytics)
async def analytics(service: AdminDep, session: AdminSessionDep) -> AdminAnalytics:
    return await service.analytics(session)
