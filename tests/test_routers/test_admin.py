import json

import respx
from httpx import Response

USER_URL = "https://test.supabase.co/auth/v1/user"
PROFILES_URL = "https://test.supabase.co/rest/v1/profiles"
HOTELS_URL = "https://test.supabase.co/rest/v1/hotels"
BOOKINGS_URL = "https://test.supabase.co/rest/v1/bookings"

AUTH = {"Authorization": "Bearer user-token"}

ADMIN_PROFILE = {"id": "admin-1", "role": "admin", "full_name": "Ada"}
ALL_PROFILES = [
    ADMIN_PROFILE,
    {"id": "u1", "role": "client", "full_name": "Uma"},
    {"id": "o1", "role": "owner", "full_name": "Olga"},
]


def _profiles_response(request):
    # Session lookup filters by id; the admin listing does not
    if "id" in request.url.params:
        return Response(200, json=[ADMIN_PROFILE])
    return Response(200, json=ALL_PROFILES)


def _mock_session(role="admin"):
    respx.get(USER_URL).mock(return_value=Response(200, json={"id": "admin-1"}))
    if role == "admin":
        respx.get(PROFILES_URL).mock(side_effect=_profiles_response)
    else:
        respx.get(PROFILES_URL).mock(
            return_value=Response(200, json=[dict(ADMIN_PROFILE, role=role)])
        )


def _hotel(hotel_id="h1", active=True):
    return {
        "id": hotel_id,
        "owner_id": "o1",
        "name": f"Hotel {hotel_id}",
        "city": "Rome",
        "country": "Italy",
        "star_rating": 5,
        "is_active": active,
    }


@respx.mock
async def test_owner_is_denied(client):
    _mock_session("owner")

    resp = await client.get("/admin/users", headers=AUTH)

    assert resp.status_code == 403


@respx.mock
async def test_list_users(client):
    _mock_session()

    resp = await client.get("/admin/users", headers=AUTH)

    assert resp.status_code == 200
    assert [u["id"] for u in resp.json()] == ["admin-1", "u1", "o1"]


@respx.mock
async def test_change_user_role(client):
    _mock_session()
    patch = respx.patch(PROFILES_URL).mock(
        return_value=Response(200, json=[{"id": "u1", "role": "owner", "full_name": "Uma"}])
    )

    resp = await client.patch("/admin/users/u1/role", headers=AUTH, json={"role": "owner"})

    assert resp.status_code == 200
    assert resp.json()["role"] == "owner"
    assert json.loads(patch.calls.last.request.content) == {"role": "owner"}


@respx.mock
async def test_delete_user_not_configured(client):
    _mock_session()

    resp = await client.delete("/admin/users/u1", headers=AUTH)

    assert resp.status_code == 503


@respx.mock
async def test_toggle_any_hotel(client):
    _mock_session()
    respx.get(HOTELS_URL).mock(return_value=Response(200, json=[_hotel(active=True)]))
    respx.patch(HOTELS_URL).mock(return_value=Response(200, json=[_hotel(active=False)]))

    resp = await client.post("/admin/hotels/h1/toggle", headers=AUTH)

    assert resp.status_code == 200
    assert resp.json()["is_active"] is False


@respx.mock
async def test_delete_hotel(client):
    _mock_session()
    route = respx.delete(HOTELS_URL).mock(return_value=Response(204))

    resp = await client.delete("/admin/hotels/h1", headers=AUTH)

    assert resp.status_code == 204
    assert route.calls.last.request.url.params["id"] == "eq.h1"


@respx.mock
async def test_platform_analytics(client):
    _mock_session()
    respx.get(HOTELS_URL).mock(
        return_value=Response(200, json=[_hotel("h1"), _hotel("h2", active=False)])
    )
    respx.get(BOOKINGS_URL).mock(
        return_value=Response(
            200,
            json=[
                {
                    "id": "b1", "user_id": "u1", "room_id": "r1", "hotel_id": "h1",
                    "check_in": "2024-06-01", "check_out": "2024-06-04",
                    "num_guests": 2, "total_price": "360.00", "status": "completed",
                },
                {
                    "id": "b2", "user_id": "u1", "room_id": "r1", "hotel_id": "h1",
                    "check_in": "2024-08-01", "check_out": "2024-08-02",
                    "num_guests": 1, "total_price": "120.00", "status": "canceled",
                },
            ],
        )
    )

    resp = await client.get("/admin/analytics", headers=AUTH)

    assert resp.status_code == 200
    data = resp.json()
    assert data["total_users"] == 3
    assert data["total_hotels"] == 2
    assert data["active_hotels"] == 1
    assert data["total_bookings"] == 2
    assert float(data["total_revenue"]) == 360.0
    assert data["status_counts"]["canceled"] == 1
