"""Pydantic schemas for dishes."""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict


class DishRead(BaseModel):
    """A row of the ``dishes`` table."""

    model_config = ConfigDict(extra="allow")

    id: int
    name: str
    price: Optional[float] = None
    isVeg: Optional[Union[int, str]] = None


class DishList(BaseModel):
    dishes: List[DishRead]


class DishDetail(BaseModel):
    dish: List[DishRead]
