"""
Pydantic schemas for the admin API.
Centralized to avoid circular imports between services and routers.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from shared.config.constants import UserType


# =============================================================================
# Geography Schemas
# =============================================================================


class AirportOutput(BaseModel):
    iata_code: str
    name: str
    city: str | None = None
    country_id: str

    model_config = {"from_attributes": True}


class CountryOutput(BaseModel):
    iso_code: str
    name: str
    continent: str
    is_deleted: bool

    model_config = {"from_attributes": True}


class CountryWithAirportsOutput(CountryOutput):
    airports: list[AirportOutput] = []


class CountryCreate(BaseModel):
    iso_code: str
    name: str
    continent: str


class CountryUpdate(BaseModel):
    name: str | None = None
    continent: str | None = None


# =============================================================================
# Airline Schemas
# =============================================================================


class AircraftOutput(BaseModel):
    tail_number: str
    model: str
    airline_id: str

    model_config = {"from_attributes": True}


class AirlineOutput(BaseModel):
    iata_code: str
    name: str
    callsign: str
    operating_region: str
    base_airport_id: str
    base_airport_name: str | None = None
    is_deleted: bool

    model_config = {"from_attributes": True}


class AirlineWithFleetOutput(AirlineOutput):
    aircraft: list[AircraftOutput] = []


class AirlineCreate(BaseModel):
    iata_code: str
    name: str
    callsign: str
    operating_region: str
    base_airport_id: str


class AirlineUpdate(BaseModel):
    name: str | None = None
    callsign: str | None = None
    operating_region: str | None = None
    base_airport_id: str | None = None


# =============================================================================
# Fare Basis Code Schemas
# =============================================================================


class FareBasisCodeOutput(BaseModel):
    code: str
    description: str
    rules: str
    is_deleted: bool

    model_config = {"from_attributes": True}


class FareBasisCodeCreate(BaseModel):
    code: str
    description: str
    rules: str


class FareBasisCodeUpdate(BaseModel):
    description: str | None = None
    rules: str | None = None


# =============================================================================
# Price Offer Log Schemas
# =============================================================================


class PriceOfferLogOutput(BaseModel):
    offer_id: int
    offer_price_quote: Decimal
    timestamp: datetime
    context_attributes_id: int
    fare_id: str | None = None
    ancillary_id: int | None = None
    fare_description: str | None = None
    ancillary_product_name: str | None = None
    is_deleted: bool

    model_config = {"from_attributes": True}


class PriceOfferLogCreate(BaseModel):
    offer_price_quote: Decimal
    context_attributes_id: int
    fare_id: str | None = None
    ancillary_id: int | None = None
    timestamp: datetime | None = None  # now (UTC) when absent


class PriceOfferLogFilter(BaseModel):
    include_deleted: bool = False
    start_date: datetime | None = None
    end_date: datetime | None = None
    fare_id: str | None = None
    ancillary_id: int | None = None
    context_attributes_id: int | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None


class PriceAnalyticsOutput(BaseModel):
    subject_key: str
    average_price: Decimal
    min_price: Decimal
    max_price: Decimal
    offer_count: int

    model_config = {"from_attributes": True}


# =============================================================================
# User Schemas
# =============================================================================


class UserSummaryOutput(BaseModel):
    user_id: str
    email: str
    first_name: str
    last_name: str
    full_name: str
    user_type: UserType
    is_deleted: bool
    date_created: datetime
    last_login: datetime | None = None

    model_config = {"from_attributes": True}


class UserFilter(BaseModel):
    include_deleted: bool = False
    user_type: UserType | None = None
    name_contains: str | None = None
    email_contains: str | None = None


class _ProfileBase(BaseModel):
    """Fields every profile shape carries, taken from the account row."""

    user_id: str
    email: str
    first_name: str
    last_name: str
    full_name: str
    user_type: UserType
    date_created: datetime
    last_login: datetime | None = None


class _EmployeeFields(BaseModel):
    employee_id: int | None = None
    employee_number: str | None = None
    hire_date: date | None = None


class SuperAdminProfile(_ProfileBase, _EmployeeFields):
    kind: Literal["super_admin"] = "super_admin"


class AdminProfile(_ProfileBase, _EmployeeFields):
    kind: Literal["admin"] = "admin"
    department: str | None = None


class SupervisorProfile(_ProfileBase, _EmployeeFields):
    kind: Literal["supervisor"] = "supervisor"
    managed_area: str | None = None


class PilotProfile(_ProfileBase, _EmployeeFields):
    kind: Literal["pilot"] = "pilot"
    license_number: str | None = None
    total_flight_hours: int | None = None
    crew_base_airport_id: str | None = None


class AttendantProfile(_ProfileBase, _EmployeeFields):
    kind: Literal["attendant"] = "attendant"
    languages: list[str] = []
    crew_base_airport_id: str | None = None


class PassengerProfile(_ProfileBase):
    kind: Literal["passenger"] = "passenger"
    kris_flyer_tier: Optional[str] = None


UserProfile = Annotated[
    Union[
        SuperAdminProfile,
        AdminProfile,
        SupervisorProfile,
        PilotProfile,
        AttendantProfile,
        PassengerProfile,
    ],
    Field(discriminator="kind"),
]
