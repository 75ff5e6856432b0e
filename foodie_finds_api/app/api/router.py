"""
Top‑level router.

Aggregates the per‑table routers.  The paths are mounted at the root
(``/restaurants``, ``/dishes``) and are unversioned.
"""

from fastapi import APIRouter

from .endpoints import dishes, restaurants

router = APIRouter()

router.include_router(restaurants.router, prefix="/restaurants", tags=["restaurants"])
router.include_router(dishes.router, prefix="/dishes", tags=["dishes"])
