"""
Admin API router - combines all admin sub-routers.

- airlines: Airline CRUD, fleet and lifecycle
- countries: Country CRUD, airports and lifecycle
- fare_basis_codes: Fare basis code CRUD and lifecycle
- price_offer_logs: Price offer ingestion, search and analytics
- users: User search, profile detail, deactivation

All routes are prefixed with /api/admin
"""

from fastapi import APIRouter

from .airlines import router as airlines_router
from .countries import router as countries_router
from .fare_basis_codes import router as fare_basis_codes_router
from .price_offer_logs import router as price_offer_logs_router
from .users import router as users_router


router = APIRouter()

router.include_router(airlines_router)
router.include_router(countries_router)
router.include_router(fare_basis_codes_router)
router.include_router(price_offer_logs_router)
router.include_router(users_router)

__all__ = ["router"]
