"""
Airline Service.

Handles airline business rules on top of the shared lifecycle plumbing.

Usage:
    from admin_api.services.domain import AirlineService

    service = AirlineService(db)
    airline = service.get_by_iata("AA")
    page = service.paginate(page=1, page_size=20, region="North America")
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from shared.config.constants import Limits
from shared.config.logging import get_logger
from shared.utils.exceptions import DuplicateEntityError, NotFoundError, ValidationError
from shared.utils.schemas import PageOutput
from shared.utils.validators import require_text, validate_code_length, validate_max_length

from admin_api.models import Aircraft, Airline, FlightSchedule, RouteOperator
from admin_api.repositories import AirlineRepository, AirportRepository
from admin_api.schemas import (
    AircraftOutput,
    AirlineCreate,
    AirlineOutput,
    AirlineUpdate,
    AirlineWithFleetOutput,
)
from admin_api.services.base_service import LifecycleService
from admin_api.services.crud.dependency_guard import DependencyProbe
from admin_api.services.query.predicates import active_only, compose, contains, equals, equals_upper

logger = get_logger(__name__)

AIRLINE_PROBES = (
    DependencyProbe("active aircraft", Aircraft, "airline_id"),
    DependencyProbe("active flight schedules", FlightSchedule, "airline_id"),
    DependencyProbe("active route operations", RouteOperator, "airline_id"),
)

AIRLINE_ORDERING = (Airline.name, Airline.iata_code)


class AirlineService(LifecycleService[Airline, AirlineOutput]):
    """
    Service for airline management.

    Business rules:
    - IATA codes are exactly two characters, stored upper-case
    - IATA code and name are unique across all airlines, deleted ones included
    - The base airport must be an active airport on create and on change
    - Deletion is blocked while aircraft, schedules or route operations are active
    """

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            repo=AirlineRepository(db),
            output_schema=AirlineOutput,
            entity_name="Airline",
            probes=AIRLINE_PROBES,
        )
        self._airports = AirportRepository(db)

    @property
    def airlines(self) -> AirlineRepository:
        return self._repo  # type: ignore[return-value]

    def normalize_key(self, key: str) -> str:
        return validate_code_length(key, Limits.AIRLINE_IATA_LENGTH, "IATA code")

    def to_output(self, entity: Airline) -> AirlineOutput:
        output = AirlineOutput.model_validate(entity)
        if entity.base_airport is not None:
            output.base_airport_name = entity.base_airport.name
        return output

    # =========================================================================
    # Query Methods
    # =========================================================================

    def list_active(self) -> list[AirlineOutput]:
        return self.list_outputs(self.airlines.find_active(None, AIRLINE_ORDERING))

    def list_including_deleted(self) -> list[AirlineOutput]:
        return self.list_outputs(self.airlines.find_all_including_deleted(None, AIRLINE_ORDERING))

    def get_by_iata(self, iata_code: str) -> AirlineOutput:
        code = self.normalize_key(iata_code)
        airline = self.airlines.get_active_with_base_airport(code)
        if airline is None:
            raise NotFoundError("Airline", code, active_only=True)
        return self.to_output(airline)

    def find_by_name(self, name: str) -> list[AirlineOutput]:
        """Case-insensitive partial match on the airline name."""
        term = require_text(name, "Search term cannot be empty.")
        return self.list_outputs(
            self.airlines.find_active(contains(Airline.name, term), AIRLINE_ORDERING)
        )

    def list_by_base_airport(self, airport_iata: str) -> list[AirlineOutput]:
        code = validate_code_length(airport_iata, Limits.AIRPORT_IATA_LENGTH, "airport IATA code")
        return self.list_outputs(
            self.airlines.find_active(equals(Airline.base_airport_id, code), AIRLINE_ORDERING)
        )

    def list_by_operating_region(self, region: str) -> list[AirlineOutput]:
        term = require_text(region, "Operating region cannot be empty.")
        return self.list_outputs(
            self.airlines.find_active(equals_upper(Airline.operating_region, term), AIRLINE_ORDERING)
        )

    def get_with_fleet(self, iata_code: str) -> AirlineWithFleetOutput:
        """Airline plus its active aircraft."""
        code = self.normalize_key(iata_code)
        airline = self.get_active_entity(code)
        fleet = self.airlines.active_fleet(code)
        output = AirlineWithFleetOutput(**self.to_output(airline).model_dump())
        output.aircraft = [AircraftOutput.model_validate(a) for a in fleet]
        return output

    def paginate(
        self,
        page: int,
        page_size: int,
        region: str | None = None,
    ) -> PageOutput[AirlineOutput]:
        predicate = compose(
            active_only(Airline),
            equals_upper(Airline.operating_region, region),
        )
        return self._paginate(predicate, AIRLINE_ORDERING, page, page_size)

    # =========================================================================
    # Command Methods
    # =========================================================================

    def create(self, data: AirlineCreate) -> AirlineOutput:
        """
        Create an airline.

        Raises:
            ValidationError: On malformed fields or an inactive base airport
            DuplicateEntityError: If the IATA code or name is taken
            DatabaseError: If the insert fails
        """
        iata_code = self.normalize_key(data.iata_code)
        name = self._name(data.name)
        callsign = self._callsign(data.callsign)
        region = self._region(data.operating_region)
        base_airport_id = self._require_active_airport(data.base_airport_id)

        logger.info("Creating airline", iata_code=iata_code)

        if self.airlines.exists_by_key(iata_code):
            raise DuplicateEntityError("Airline", "IATA code", iata_code)
        if self.airlines.exists_by_name(name):
            raise DuplicateEntityError("Airline", "name", name)

        airline = Airline(
            iata_code=iata_code,
            name=name,
            callsign=callsign,
            operating_region=region,
            base_airport_id=base_airport_id,
        )
        self.airlines.add(airline)
        self.commit("creating the airline", iata_code=iata_code)
        self.airlines.refresh(airline)

        logger.info("Airline created", iata_code=iata_code)
        return self.to_output(airline)

    def update(self, iata_code: str, data: AirlineUpdate) -> AirlineOutput:
        """
        Update an active airline. Unset fields keep their value; when nothing
        changes no write happens.

        Raises:
            NotFoundError: If there is no active airline with this code
            ValidationError: On blank fields or an inactive base airport
            DuplicateEntityError: If the new name belongs to another airline
            DatabaseError: If the write fails
        """
        code = self.normalize_key(iata_code)
        airline = self.get_active_entity(code)

        changes: dict[str, str] = {}
        if data.name is not None:
            name = self._name(data.name)
            if name.upper() != airline.name.upper() and self.airlines.exists_by_name(
                name, exclude_iata=code
            ):
                raise DuplicateEntityError("Airline", "name", name)
            changes["name"] = name
        if data.callsign is not None:
            changes["callsign"] = self._callsign(data.callsign)
        if data.operating_region is not None:
            changes["operating_region"] = self._region(data.operating_region)
        if data.base_airport_id is not None:
            changes["base_airport_id"] = self._require_active_airport(data.base_airport_id)

        changed = {k: v for k, v in changes.items() if getattr(airline, k) != v}
        if not changed:
            logger.info("No changes detected for airline", iata_code=code)
            return self.to_output(airline)

        for field_name, value in changed.items():
            setattr(airline, field_name, value)
        self.airlines.update(airline)

        self.commit("updating the airline", iata_code=code)
        self.airlines.refresh(airline)

        logger.info("Airline updated", iata_code=code, fields=sorted(changed))
        return self.to_output(airline)

    # =========================================================================
    # Internal Helpers
    # =========================================================================

    def _require_active_airport(self, airport_iata: str | None) -> str:
        code = validate_code_length(airport_iata, Limits.AIRPORT_IATA_LENGTH, "airport IATA code")
        if self._airports.get_active_by_key(code) is None:
            raise ValidationError(
                f"Base airport '{code}' not found or inactive.",
                field="base_airport_id",
            )
        return code

    @staticmethod
    def _name(value: str | None) -> str:
        name = require_text(value, "Airline name is required.")
        return validate_max_length(name, Limits.MAX_NAME_LENGTH, "Airline name")

    @staticmethod
    def _callsign(value: str | None) -> str:
        callsign = require_text(value, "Callsign is required.")
        return validate_max_length(callsign, Limits.MAX_CALLSIGN_LENGTH, "Callsign")

    @staticmethod
    def _region(value: str | None) -> str:
        region = require_text(value, "Operating region is required.")
        return validate_max_length(region, Limits.MAX_REGION_LENGTH, "Operating region")
