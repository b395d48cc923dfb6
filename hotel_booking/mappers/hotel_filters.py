"""In-memory search, filtering and sorting over an already-loaded hotel list.

Fine while result sets stay small; larger catalogs should push these
predicates down to the directory query instead.
"""

from enum import StrEnum

from hotel_booking.schemas.directory import Hotel


class HotelSort(StrEnum):
    rating = "rating"
    name = "name"


def matches_query(hotel: Hotel, query: str) -> bool:
    """Case-insensitive substring match on name, city or country."""
    needle = query.casefold()
    if not needle:
        return True
    return any(
        needle in field.casefold()
        for field in (hotel.name, hotel.city, hotel.country)
    )


def filter_by_min_rating(hotels: list[Hotel], min_rating: float) -> list[Hotel]:
    if min_rating <= 0:
        return list(hotels)
    return [h for h in hotels if h.rating >= min_rating]


def filter_by_star_rating(hotels: list[Hotel], star_rating: int) -> list[Hotel]:
    # 0 means "any category"
    if not star_rating:
        return list(hotels)
    return [h for h in hotels if h.star_rating == star_rating]


def sort_hotels(hotels: list[Hotel], sort_by: HotelSort = HotelSort.rating) -> list[Hotel]:
    """Rating descending or name ascending. Stable, so ties keep input order."""
    if sort_by == HotelSort.name:
        return sorted(hotels, key=lambda h: h.name.casefold())
    return sorted(hotels, key=lambda h: h.rating, reverse=True)


def apply_hotel_filters(
    hotels: list[Hotel],
    query: str = "",
    min_rating: float = 0,
    star_rating: int = 0,
    sort_by: HotelSort = HotelSort.rating,
) -> list[Hotel]:
    visible = [h for h in hotels if h.is_active and matches_query(h, query)]
    visible = filter_by_min_rating(visible, min_rating)
    visible = filter_by_star_rating(visible, star_rating)
    return sort_hotels(visible, sort_by)
