"""
Pydantic schemas for restaurants.

The boolean‑like flags are stored as whatever the seeding script wrote
(``0``/``1`` or ``"true"``/``"false"``), hence the loose types.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class RestaurantRead(BaseModel):
    """A row of the ``restaurants`` table."""

    model_config = ConfigDict(extra="allow")

    id: int
    name: str
    cuisine: str = Field(..., description="Cuisine category, matched exactly by /restaurants/cuisine")
    isVeg: Optional[Union[int, str]] = None
    hasOutdoorSeating: Optional[Union[int, str]] = None
    isLuxury: Optional[Union[int, str]] = None
    rating: Optional[float] = None


class RestaurantList(BaseModel):
    restaurants: List[RestaurantRead]


class RestaurantDetail(BaseModel):
    """Lookup by id; a list holding the matching row."""

    restaurant: List[RestaurantRead]
