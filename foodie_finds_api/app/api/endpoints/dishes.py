"""Dish endpoints.  Same conventions as the restaurant endpoints."""

from typing import Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from foodie_finds_api.app.api.params import bind_numeric_id, format_numeric_id, parse_numeric_id
from foodie_finds_api.app.api.responses import ERROR_RESPONSES, respond
from foodie_finds_api.app.schemas.dish import DishDetail, DishList
from foodie_finds_api.app.services.dish_service import DishService

router = APIRouter()


@router.get("", response_model=DishList, responses=ERROR_RESPONSES)
def list_dishes() -> JSONResponse:
    return respond(DishService.list_dishes, "dishes", "No dishes found")


@router.get("/details/{id}", response_model=DishDetail, responses=ERROR_RESPONSES)
def get_dish(id: str) -> JSONResponse:
    dish_id = parse_numeric_id(id)
    return respond(
        lambda: DishService.get_dish(bind_numeric_id(dish_id)),
        "dish",
        "No dish found with id " + format_numeric_id(dish_id),
    )


@router.get("/filter", response_model=DishList, responses=ERROR_RESPONSES)
def filter_dishes(isVeg: Optional[str] = None) -> JSONResponse:
    return respond(
        lambda: DishService.list_by_filters(isVeg),
        "dishes",
        "No dishes found with the mentioned filters",
    )


@router.get("/sort-by-pricing", response_model=DishList, responses=ERROR_RESPONSES)
def sort_dishes_by_pricing() -> JSONResponse:
    """Return every dish ordered by price, cheapest first."""
    return respond(
        DishService.sort_by_price,
        "dishes",
        "No dishes found with the mentioned filters",
    )
