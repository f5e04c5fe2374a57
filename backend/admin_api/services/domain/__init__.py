"""
Domain services: one per administered entity.

Usage:
    from admin_api.services.domain import AirlineService

    service = AirlineService(db)
    service.delete("AA")
"""

from admin_api.services.domain.airline_service import AirlineService
from admin_api.services.domain.country_service import CountryService
from admin_api.services.domain.fare_basis_code_service import FareBasisCodeService
from admin_api.services.domain.price_offer_log_service import PriceOfferLogService
from admin_api.services.domain.user_management_service import UserManagementService

__all__ = [
    "AirlineService",
    "CountryService",
    "FareBasisCodeService",
    "PriceOfferLogService",
    "UserManagementService",
]
