from fastapi import APIRouter

from hotel_booking.dependencies import OwnerDep, OwnerSessionDep
from hotel_booking.schemas.directory import Booking, Hotel, Room
from hotel_booking.schemas.requests import HotelCreate, HotelUpdate, RoomCreate, RoomUpdate
from hotel_booking.schemas.responses import OwnerAnalytics

router = APIRouter(prefix="/owner", tags=["owner"])


@router.get("/hotels", response_model=list[Hotel])
async def list_hotels(service: OwnerDep, session: OwnerSessionDep) -> list[Hotel]:
    return await service.list_hotels(session)


@router.post("/hotels", response_model=Hotel, status_code=201)
async def create_hotel(
    request: HotelCreate, service: OwnerDep, session: OwnerSessionDep
) -> Hotel:
    return await service.create_hotel(session, request)


@router.patch("/hotels/{hotel_id}", response_model=Hotel)
async def update_hotel(
    hotel_id: str, request: HotelUpdate, service: OwnerDep, session: OwnerSessionDep
) -> Hotel:
    return await service.update_hotel(session, hotel_id, request)


@router.post("/hotels/{hotel_id}/toggle", response_model=Hotel)
async def toggle_hotel(
    hotel_id: str, service: OwnerDep, session: OwnerSessionDep
) -> Hotel:
    return await service.toggle_hotel(session, hotel_id)


@router.post("/hotels/{hotel_id}/rooms", response_model=Room, status_code=201)
async def add_room(
    hotel_id: str, request: RoomCreate, service: OwnerDep, session: OwnerSessionDep
) -> Room:
    return await service.add_room(session, hotel_id, request)


@router.patch("/rooms/{room_id}", response_model=Room)
async def update_room(
    room_id: str, request: RoomUpdate, service: OwnerDep, session: OwnerSessionDep
) -> Room:
    return await service.update_room(session, room_id, request)


@router.delete("/rooms/{room_id}", status_code=204)
async def delete_room(room_id: str, service: OwnerDep, session: OwnerSessionDep) -> None:
    await service.delete_room(session, room_id)


@router.get("/bookings", response_model=list[Booking])
async def list_bookings(service: OwnerDep, session: OwnerSessionDep) -> list[Booking]:
    return await service.list_bookings(session)


@router.get("/analytics", response_model=OwnerAnalytics)
async def analytics(service: OwnerDep, session: OwnerSessionDep) -> OwnerAnalytics:
    return await service.analytics(session)
