from typing import Annotated

from fastapi import APIRouter, Query

from hotel_booking.dependencies import CatalogDep
from hotel_booking.mappers.hotel_filters import HotelSort
from hotel_booking.schemas.directory import Amenity, Hotel, Review
from hotel_booking.schemas.requests import PriceQuoteRequest
from hotel_booking.schemas.responses import HotelDetail, PriceQuote, RoomDetail

router = APIRouter(tags=["hotels"])


@router.get("/hotels", response_model=list[Hotel])
async def search_hotels(
    catalog: CatalogDep,
    q: str = "",
    min_rating: Annotated[float, Query(ge=0, le=5)] = 0,
    star_rating: Annotated[int, Query(ge=0, le=5)] = 0,
    sort_by: HotelSort = HotelSort.rating,
) -> list[Hotel]:
    return await catalog.search_hotels(
        query=q, min_rating=min_rating, star_rating=star_rating, sort_by=sort_by
    )


@router.get("/hotels/featured", response_model=list[Hotel])
async def featured_hotels(catalog: CatalogDep) -> list[Hotel]:
    return await catalog.featured_hotels()


@router.get("/hotels/{hotel_id}", response_model=HotelDetail)
async def get_hotel(hotel_id: str, catalog: CatalogDep) -> HotelDetail:
    return await catalog.get_hotel_detail(hotel_id)


@router.get("/hotels/{hotel_id}/reviews", response_model=list[Review])
async def list_reviews(hotel_id: str, catalog: CatalogDep) -> list[Review]:
    return await catalog.list_reviews(hotel_id)


@router.get("/amenities", response_model=list[Amenity])
async def list_amenities(catalog: CatalogDep) -> list[Amenity]:
    return await catalog.list_amenities()


@router.get("/rooms/{room_id}", response_model=RoomDetail)
async def get_room(room_id: str, catalog: CatalogDep) -> RoomDetail:
    return await catalog.get_room_detail(room_id)


@router.post("/rooms/{room_id}/quote", response_model=PriceQuote)
async def quote_room(
    room_id: str, request: PriceQuoteRequest, catalog: CatalogDep
) -> PriceQuote:
    return await catalog.quote_price(
        room_id, request.check_in, request.check_out, request.num_guests
    )
