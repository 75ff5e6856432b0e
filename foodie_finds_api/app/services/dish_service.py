"""Service layer for dishes."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from foodie_finds_api.app.core.db import fetch_all


class DishService:
    """Read‑only queries against the ``dishes`` table."""

    @classmethod
    def list_dishes(cls) -> List[Dict[str, Any]]:
        return fetch_all("SELECT * FROM dishes")

    @classmethod
    def get_dish(cls, dish_id: Optional[float]) -> List[Dict[str, Any]]:
        return fetch_all("SELECT * FROM dishes WHERE id = ?", (dish_id,))

    @classmethod
    def list_by_filters(cls, is_veg: Optional[str]) -> List[Dict[str, Any]]:
        return fetch_all("SELECT * FROM dishes WHERE isVeg = ?", (is_veg,))

    @classmethod
    def sort_by_price(cls) -> List[Dict[str, Any]]:
        """Return every dish, cheapest first."""
        return fetch_all("SELECT * FROM dishes ORDER BY price")
