"""
Repositories: data access per entity.
"""

from admin_api.repositories.base import BaseRepository
from admin_api.repositories.airline import AirlineRepository, AirportRepository
from admin_api.repositories.country import CountryRepository
from admin_api.repositories.pricing import (
    AncillaryProductRepository,
    ContextAttributesRepository,
    FareBasisCodeRepository,
    PriceOfferLogRepository,
    PricingStats,
)
from admin_api.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "AirlineRepository",
    "AirportRepository",
    "CountryRepository",
    "AncillaryProductRepository",
    "ContextAttributesRepository",
    "FareBasisCodeRepository",
    "PriceOfferLogRepository",
    "PricingStats",
    "UserRepository",
]
