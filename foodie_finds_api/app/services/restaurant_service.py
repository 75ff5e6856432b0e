"""
Service layer for restaurants.

All queries are read‑only and use parameterized statements.  Filter
values are bound exactly as received, so matching follows SQLite's
comparison rules: a ``None`` value never equals anything.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from foodie_finds_api.app.core.db import fetch_all


class RestaurantService:
    """Read‑only queries against the ``restaurants`` table."""

    @classmethod
    def list_restaurants(cls) -> List[Dict[str, Any]]:
        return fetch_all("SELECT * FROM restaurants")

    @classmethod
    def get_restaurant(cls, restaurant_id: Optional[float]) -> List[Dict[str, Any]]:
        """Return the rows whose ``id`` equals ``restaurant_id``.

        The result is a list, not a single row, and is empty when the id
        is unknown or ``None``.
        """
        return fetch_all("SELECT * FROM restaurants WHERE id = ?", (restaurant_id,))

    @classmethod
    def list_by_cuisine(cls, cuisine: str) -> List[Dict[str, Any]]:
        return fetch_all("SELECT * FROM restaurants WHERE cuisine = ?", (cuisine,))

    @classmethod
    def list_by_filters(
        cls,
        is_veg: Optional[str],
        has_outdoor_seating: Optional[str],
        is_luxury: Optional[str],
    ) -> List[Dict[str, Any]]:
        """Return restaurants whose three flags equal the given values."""
        return fetch_all(
            "SELECT * FROM restaurants WHERE isVeg = ? AND hasOutdoorSeating = ? AND isLuxury = ?",
            (is_veg, has_outdoor_seating, is_luxury),
        )

    @classmethod
    def sort_by_rating(cls) -> List[Dict[str, Any]]:
        """Return every restaurant, highest rating first."""
        return fetch_all("SELECT * FROM restaurants ORDER BY rating DESC")
