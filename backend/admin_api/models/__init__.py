"""
SQLAlchemy ORM Models Package.

- base: Base class and SoftDeleteMixin
- geography: Country, Airport
- airline: Airline, Aircraft, FlightSchedule, RouteOperator
- pricing: FareBasisCode, Booking, AncillaryProduct, ContextualPricingAttributes, PriceOfferLog
- user: AppUser, EmployeeProfile, PilotProfile, AttendantProfile, PassengerProfile
"""

# Base classes
from .base import Base, SoftDeleteMixin

# Geography
from .geography import Country, Airport

# Carriers and the rows that reference them
from .airline import Airline, Aircraft, FlightSchedule, RouteOperator

# Pricing
from .pricing import (
    FareBasisCode,
    Booking,
    AncillaryProduct,
    ContextualPricingAttributes,
    PriceOfferLog,
)

# Users
from .user import (
    AppUser,
    EmployeeProfile,
    PilotProfile,
    AttendantProfile,
    PassengerProfile,
)

__all__ = [
    "Base",
    "SoftDeleteMixin",
    "Country",
    "Airport",
    "Airline",
    "Aircraft",
    "FlightSchedule",
    "RouteOperator",
    "FareBasisCode",
    "Booking",
    "AncillaryProduct",
    "ContextualPricingAttributes",
    "PriceOfferLog",
    "AppUser",
    "EmployeeProfile",
    "PilotProfile",
    "AttendantProfile",
    "PassengerProfile",
]
