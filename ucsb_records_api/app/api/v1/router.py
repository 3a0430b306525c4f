"""
Top‑level router for version 1 of the API.

This router aggregates the per-entity routers under their path
prefixes.  Every entity exposes the same shape of routes:
``GET /all``, ``GET ?id=``, ``POST /post``, ``PUT ?id=`` and
``DELETE ?id=``.
"""

from fastapi import APIRouter

from .endpoints import commits, dining_menu_items, recommendation_requests, ucsb_dates

router = APIRouter()

router.include_router(commits.router, prefix="/commits", tags=["Commits"])
router.include_router(
    recommendation_requests.router,
    prefix="/recommendationrequests",
    tags=["RecommendationRequests"],
)
router.include_router(
    dining_menu_items.router,
    prefix="/ucsbdiningcommonsmenuitem",
    tags=["UCSBDiningCommonsMenuItem"],
)
router.include_router(ucsb_dates.router, prefix="/ucsbdates", tags=["UCSBDates"])
