"""
Centralized constants for the backend application.
Avoids magic strings and repeated constants.

Usage:
    from shared.config.constants import Limits, UserType, LifecycleState

    if user.user_type == UserType.SUPER_ADMIN:
        ...
"""

from enum import Enum
from typing import Final


# =============================================================================
# Lifecycle
# =============================================================================


class LifecycleState(str, Enum):
    """Soft-delete lifecycle of every catalog row."""

    ACTIVE = "ACTIVE"
    DELETED = "DELETED"


# =============================================================================
# User Types
# =============================================================================


class UserType(str, Enum):
    """Account discriminator that selects the profile shape."""

    SUPER_ADMIN = "SUPER_ADMIN"
    ADMIN = "ADMIN"
    SUPERVISOR = "SUPERVISOR"
    PILOT = "PILOT"
    ATTENDANT = "ATTENDANT"
    USER = "USER"


# Account types that own an employee record
EMPLOYEE_USER_TYPES: Final[frozenset[UserType]] = frozenset({
    UserType.SUPER_ADMIN,
    UserType.ADMIN,
    UserType.SUPERVISOR,
    UserType.PILOT,
    UserType.ATTENDANT,
})


# =============================================================================
# Limits
# =============================================================================


class Limits:
    """Validation limits."""

    # Pagination
    DEFAULT_PAGE_SIZE: Final[int] = 20
    MAX_PAGE_SIZE: Final[int] = 100

    # Price limits (in cents)
    MIN_OFFER_PRICE_CENTS: Final[int] = 1
    MAX_OFFER_PRICE_CENTS: Final[int] = 100_000_00  # 100,000.00

    # Code lengths
    AIRLINE_IATA_LENGTH: Final[int] = 2
    AIRPORT_IATA_LENGTH: Final[int] = 3
    COUNTRY_ISO_LENGTH: Final[int] = 3
    MAX_FARE_CODE_LENGTH: Final[int] = 10

    # String lengths
    MAX_NAME_LENGTH: Final[int] = 100
    MAX_CALLSIGN_LENGTH: Final[int] = 50
    MAX_REGION_LENGTH: Final[int] = 50
    MAX_CONTINENT_LENGTH: Final[int] = 50
    MAX_DESCRIPTION_LENGTH: Final[int] = 255
