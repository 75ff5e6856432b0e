"""
Restaurant endpoints.

All routes are public and read only.  Path and query parameters are
handed to ``RestaurantService`` without validation: an id that does not
parse, or a filter left out of the query string, simply matches nothing
and yields a 404.
"""

from typing import Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from foodie_finds_api.app.api.params import bind_numeric_id, format_numeric_id, parse_numeric_id
from foodie_finds_api.app.api.responses import ERROR_RESPONSES, respond
from foodie_finds_api.app.schemas.restaurant import RestaurantDetail, RestaurantList
from foodie_finds_api.app.services.restaurant_service import RestaurantService

router = APIRouter()


@router.get("", response_model=RestaurantList, responses=ERROR_RESPONSES)
def list_restaurants() -> JSONResponse:
    """Return every restaurant in store order."""
    return respond(RestaurantService.list_restaurants, "restaurants", "No restaurants found")


@router.get("/details/{id}", response_model=RestaurantDetail, responses=ERROR_RESPONSES)
def get_restaurant(id: str) -> JSONResponse:
    """Return the restaurant with the given id, wrapped in a list."""
    restaurant_id = parse_numeric_id(id)
    return respond(
        lambda: RestaurantService.get_restaurant(bind_numeric_id(restaurant_id)),
        "restaurant",
        "No restaurant found with id " + format_numeric_id(restaurant_id),
    )


@router.get("/cuisine/{cuisine}", response_model=RestaurantList, responses=ERROR_RESPONSES)
def list_restaurants_by_cuisine(cuisine: str) -> JSONResponse:
    """Return restaurants whose cuisine matches exactly (case sensitive)."""
    return respond(
        lambda: RestaurantService.list_by_cuisine(cuisine),
        "restaurants",
        "No restaurant found with cuisine " + cuisine,
    )


@router.get("/filter", response_model=RestaurantList, responses=ERROR_RESPONSES)
def filter_restaurants(
    isVeg: Optional[str] = None,
    hasOutdoorSeating: Optional[str] = None,
    isLuxury: Optional[str] = None,
) -> JSONResponse:
    """Return restaurants matching all three flags.

    Values are compared as sent, e.g. ``?isVeg=true`` matches a stored
    ``"true"``.  A missing flag binds ``NULL`` and matches nothing.
    """
    return respond(
        lambda: RestaurantService.list_by_filters(isVeg, hasOutdoorSeating, isLuxury),
        "restaurants",
        "No restaurant found with the mentioned filters",
    )


@router.get("/sort-by-rating", response_model=RestaurantList, responses=ERROR_RESPONSES)
def sort_restaurants_by_rating() -> JSONResponse:
    """Return every restaurant ordered by rating, highest first."""
    return respond(
        RestaurantService.sort_by_rating,
        "restaurants",
        "No restaurant found with the mentioned filters",
    )
