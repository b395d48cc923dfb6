import json
from datetime import date
from decimal import Decimal

import httpx
import pytest
import respx
from httpx import Response

from hotel_booking.exceptions.custom import (
    GuestCountExceededError,
    InvalidDateRangeError,
    InvalidTransitionError,
    NotFoundError,
    PermissionDeniedError,
    RoomUnavailableError,
)
from hotel_booking.lifecycle import BookingStatus, UserRole
from hotel_booking.mappers.booking_views import BookingView
from hotel_booking.schemas.directory import Profile
from hotel_booking.schemas.requests import BookingCreate
from hotel_booking.services.bookings import BookingService
from hotel_booking.services.directory import DirectoryService
from hotel_booking.session import SessionContext

BASE_URL = "https://test.supabase.co"
ROOMS_URL = f"{BASE_URL}/rest/v1/rooms"
HOTELS_URL = f"{BASE_URL}/rest/v1/hotels"
BOOKINGS_URL = f"{BASE_URL}/rest/v1/bookings"

TODAY = date(2024, 5, 20)


def _session(user_id="u1", role=UserRole.client):
    return SessionContext(
        user_id=user_id,
        access_token=f"token-{user_id}",
        profile=Profile(id=user_id, role=role, full_name="Test User"),
    )


def _room(**overrides):
    data = {
        "id": "r1",
        "hotel_id": "h1",
        "title": "Deluxe King",
        "price_per_night": 120,
        "max_guests": 2,
        "is_available": True,
    }
    data.update(overrides)
    return data


def _hotel(**overrides):
    data = {
        "id": "h1",
        "owner_id": "owner-1",
        "name": "Hotel Lumière",
        "city": "Paris",
        "country": "France",
        "rating": 4.6,
        "star_rating": 4,
        "is_active": True,
    }
    data.update(overrides)
    return data


def _booking(**overrides):
    data = {
        "id": "b1",
        "user_id": "u1",
        "room_id": "r1",
        "hotel_id": "h1",
        "check_in": "2024-06-01",
        "check_out": "2024-06-04",
        "num_guests": 2,
        "total_price": 360,
        "status": "pending",
    }
    data.update(overrides)
    return data


def _request(**overrides):
    data = {
        "room_id": "r1",
        "check_in": date(2024, 6, 1),
        "check_out": date(2024, 6, 4),
        "num_guests": 2,
    }
    data.update(overrides)
    return BookingCreate(**data)


# --- create_booking ---


@respx.mock
@pytest.mark.asyncio
async def test_create_booking_prices_stay():
    respx.get(ROOMS_URL).mock(return_value=Response(200, json=[_room()]))
    respx.get(HOTELS_URL).mock(return_value=Response(200, json=[_hotel()]))
    post = respx.post(BOOKINGS_URL).mock(
        return_value=Response(201, json=[_booking()])
    )

    async with httpx.AsyncClient() as client:
        service = BookingService(DirectoryService(client, BASE_URL, "anon-key"))
        booking = await service.create_booking(
            _session(), _request(special_requests="Late arrival"), today=TODAY
        )

    assert booking.id == "b1"
    assert booking.status == BookingStatus.pending

    body = json.loads(post.calls.last.request.content)
    assert body["user_id"] == "u1"
    assert body["hotel_id"] == "h1"
    assert body["check_in"] == "2024-06-01"
    assert body["check_out"] == "2024-06-04"
    assert Decimal(body["total_price"]) == Decimal("360")
    assert body["status"] == "pending"
    assert body["special_requests"] == "Late arrival"
    assert post.calls.last.request.headers["authorization"] == "Bearer token-u1"


@respx.mock
@pytest.mark.asyncio
async def test_create_booking_too_many_guests():
    respx.get(ROOMS_URL).mock(return_value=Response(200, json=[_room(max_guests=2)]))
    respx.get(HOTELS_URL).mock(return_value=Response(200, json=[_hotel()]))

    async with httpx.AsyncClient() as client:
        service = BookingService(DirectoryService(client, BASE_URL, "anon-key"))
        with pytest.raises(GuestCountExceededError):
            await service.create_booking(_session(), _request(num_guests=3))


@respx.mock
@pytest.mark.asyncio
async def test_create_booking_same_day():
    respx.get(ROOMS_URL).mock(return_value=Response(200, json=[_room()]))
    respx.get(HOTELS_URL).mock(return_value=Response(200, json=[_hotel()]))

    async with httpx.AsyncClient() as client:
        service = BookingService(DirectoryService(client, BASE_URL, "anon-key"))
        with pytest.raises(InvalidDateRangeError):
            await service.create_booking(
                _session(), _request(check_out=date(2024, 6, 1))
            )


@respx.mock
@pytest.mark.asyncio
async def test_create_booking_inactive_hotel():
    respx.get(ROOMS_URL).mock(return_value=Response(200, json=[_room()]))
    respx.get(HOTELS_URL).mock(return_value=Response(200, json=[_hotel(is_active=False)]))

    async with httpx.AsyncClient() as client:
        service = BookingService(DirectoryService(client, BASE_URL, "anon-key"))
        with pytest.raises(RoomUnavailableError):
            await service.create_booking(_session(), _request())


@respx.mock
@pytest.mark.asyncio
async def test_create_booking_unknown_room():
    respx.get(ROOMS_URL).mock(return_value=Response(200, json=[]))

    async with httpx.AsyncClient() as client:
        service = BookingService(DirectoryService(client, BASE_URL, "anon-key"))
        with pytest.raises(NotFoundError):
            await service.create_booking(_session(), _request())


@respx.mock
@pytest.mark.asyncio
async def test_create_booking_past_check_in():
    respx.get(ROOMS_URL).mock(return_value=Response(200, json=[_room()]))
    respx.get(HOTELS_URL).mock(return_value=Response(200, json=[_hotel()]))

    async with httpx.AsyncClient() as client:
        service = BookingService(DirectoryService(client, BASE_URL, "anon-key"))
        with pytest.raises(InvalidDateRangeError):
            await service.create_booking(
                _session(),
                _request(check_in=date(2001, 1, 1), check_out=date(2001, 1, 4)),
                today=TODAY,
            )


# --- listing ---


@respx.mock
@pytest.mark.asyncio
async def test_list_user_bookings_upcoming():
    respx.get(BOOKINGS_URL).mock(
        return_value=Response(
            200,
            json=[
                _booking(id="b1", check_in="2024-06-20", check_out="2024-06-22"),
                _booking(id="b2", check_in="2024-05-01", check_out="2024-05-02"),
                _booking(id="b3", check_in="2024-07-01", check_out="2024-07-02", status="canceled"),
            ],
        )
    )

    async with httpx.AsyncClient() as client:
        service = BookingService(DirectoryService(client, BASE_URL, "anon-key"))
        bookings = await service.list_user_bookings(
            _session(), BookingView.upcoming, today=date(2024, 6, 10)
        )

    assert [b.id for b in bookings] == ["b1"]
    req = respx.calls.last.request
    assert req.url.params["user_id"] == "eq.u1"
    assert "hotels(" in req.url.params["select"]


@pytest.mark.asyncio
async def test_list_hotel_bookings_no_hotels_skips_request():
    async with httpx.AsyncClient() as client:
        service = BookingService(DirectoryService(client, BASE_URL, "anon-key"))
        assert await service.list_hotel_bookings([], "token") == []


# --- change_status ---


@respx.mock
@pytest.mark.asyncio
async def test_owner_confirms_booking_of_own_hotel():
    respx.get(BOOKINGS_URL).mock(return_value=Response(200, json=[_booking()]))
    respx.get(HOTELS_URL).mock(return_value=Response(200, json=[_hotel(owner_id="owner-1")]))
    patch = respx.patch(BOOKINGS_URL).mock(
        return_value=Response(200, json=[_booking(status="confirmed")])
    )

    async with httpx.AsyncClient() as client:
        service = BookingService(DirectoryService(client, BASE_URL, "anon-key"))
        booking = await service.change_status(
            _session("owner-1", UserRole.owner), "b1", BookingStatus.confirmed
        )

    assert booking.status == BookingStatus.confirmed
    assert json.loads(patch.calls.last.request.content) == {"status": "confirmed"}


@respx.mock
@pytest.mark.asyncio
async def test_owner_of_other_hotel_denied():
    respx.get(BOOKINGS_URL).mock(return_value=Response(200, json=[_booking()]))
    respx.get(HOTELS_URL).mock(return_value=Response(200, json=[_hotel(owner_id="owner-1")]))

    async with httpx.AsyncClient() as client:
        service = BookingService(DirectoryService(client, BASE_URL, "anon-key"))
        with pytest.raises(PermissionDeniedError):
            await service.change_status(
                _session("owner-2", UserRole.owner), "b1", BookingStatus.confirmed
            )


@respx.mock
@pytest.mark.asyncio
async def test_client_cancels_own_pending_booking():
    respx.get(BOOKINGS_URL).mock(return_value=Response(200, json=[_booking()]))
    respx.patch(BOOKINGS_URL).mock(
        return_value=Response(200, json=[_booking(status="canceled")])
    )

    async with httpx.AsyncClient() as client:
        service = BookingService(DirectoryService(client, BASE_URL, "anon-key"))
        booking = await service.cancel_booking(_session("u1"), "b1")

    assert booking.status == BookingStatus.canceled


@respx.mock
@pytest.mark.asyncio
async def test_client_cannot_cancel_confirmed_booking():
    respx.get(BOOKINGS_URL).mock(
        return_value=Response(200, json=[_booking(status="confirmed")])
    )

    async with httpx.AsyncClient() as client:
        service = BookingService(DirectoryService(client, BASE_URL, "anon-key"))
        with pytest.raises(InvalidTransitionError):
            await service.cancel_booking(_session("u1"), "b1")


@respx.mock
@pytest.mark.asyncio
async def test_client_cannot_touch_others_booking():
    respx.get(BOOKINGS_URL).mock(return_value=Response(200, json=[_booking(user_id="u9")]))

    async with httpx.AsyncClient() as client:
        service = BookingService(DirectoryService(client, BASE_URL, "anon-key"))
        with pytest.raises(PermissionDeniedError):
            await service.cancel_booking(_session("u1"), "b1")


@respx.mock
@pytest.mark.asyncio
async def test_admin_cannot_reopen_completed_booking():
    respx.get(BOOKINGS_URL).mock(
        return_value=Response(200, json=[_booking(status="completed")])
    )

    async with httpx.AsyncClient() as client:
        service = BookingService(DirectoryService(client, BASE_URL, "anon-key"))
        with pytest.raises(InvalidTransitionError):
            await service.change_status(
                _session("admin-1", UserRole.admin), "b1", BookingStatus.confirmed
            )


@respx.mock
@pytest.mark.asyncio
async def test_get_booking_lists_allowed_transitions():
    respx.get(BOOKINGS_URL).mock(return_value=Response(200, json=[_booking()]))

    async with httpx.AsyncClient() as client:
        service = BookingService(DirectoryService(client, BASE_URL, "anon-key"))
        result = await service.get_booking(_session("admin-1", UserRole.admin), "b1")

    assert result.booking.id == "b1"
    assert result.allowed_transitions == [BookingStatus.confirmed, BookingStatus.canceled]
