"""
Country Service.

Usage:
    from admin_api.services.domain import CountryService

    service = CountryService(db)
    country = service.get_by_iso("FRA")
    service.delete("FRA")  # blocked while airports in France are active
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from shared.config.constants import Limits
from shared.config.logging import get_logger
from shared.utils.exceptions import DuplicateEntityError, NotFoundError
from shared.utils.schemas import PageOutput
from shared.utils.validators import require_text, validate_code_length, validate_max_length

from admin_api.models import Airport, Country
from admin_api.repositories import CountryRepository
from admin_api.schemas import (
    AirportOutput,
    CountryCreate,
    CountryOutput,
    CountryUpdate,
    CountryWithAirportsOutput,
)
from admin_api.services.base_service import LifecycleService
from admin_api.services.crud.dependency_guard import DependencyProbe
from admin_api.services.query.predicates import active_only, compose, contains, equals_upper

logger = get_logger(__name__)

COUNTRY_PROBES = (DependencyProbe("active airports", Airport, "country_id"),)


class CountryService(LifecycleService[Country, CountryOutput]):
    """
    Service for country management.

    Business rules:
    - ISO codes are exactly three characters, stored upper-case
    - ISO code and name are unique across all countries, deleted ones included
    - Deletion is blocked while airports in the country are active
    """

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            repo=CountryRepository(db),
            output_schema=CountryOutput,
            entity_name="Country",
            probes=COUNTRY_PROBES,
        )

    @property
    def countries(self) -> CountryRepository:
        return self._repo  # type: ignore[return-value]

    def normalize_key(self, key: str) -> str:
        return validate_code_length(key, Limits.COUNTRY_ISO_LENGTH, "ISO code")

    # =========================================================================
    # Query Methods
    # =========================================================================

    def list_active(self) -> list[CountryOutput]:
        return self.list_outputs(self.countries.find_active(None, [Country.name]))

    def list_including_deleted(self) -> list[CountryOutput]:
        return self.list_outputs(self.countries.find_all_including_deleted(None, [Country.name]))

    def get_by_iso(self, iso_code: str) -> CountryOutput:
        return self.to_output(self.get_active_entity(self.normalize_key(iso_code)))

    def get_by_name(self, name: str) -> CountryOutput:
        term = require_text(name, "Country name cannot be empty.")
        country = self.countries.get_active_by_name(term)
        if country is None:
            raise NotFoundError("Country", term, active_only=True)
        return self.to_output(country)

    def list_by_continent(self, continent: str) -> list[CountryOutput]:
        term = require_text(continent, "Continent cannot be empty.")
        return self.list_outputs(
            self.countries.find_active(equals_upper(Country.continent, term), [Country.name])
        )

    def get_with_airports(self, iso_code: str) -> CountryWithAirportsOutput:
        code = self.normalize_key(iso_code)
        country = self.get_active_entity(code)
        output = CountryWithAirportsOutput(**self.to_output(country).model_dump())
        output.airports = [
            AirportOutput.model_validate(a) for a in self.countries.active_airports(code)
        ]
        return output

    def paginate(
        self,
        page: int,
        page_size: int,
        name_contains: str | None = None,
        continent: str | None = None,
    ) -> PageOutput[CountryOutput]:
        predicate = compose(
            active_only(Country),
            contains(Country.name, name_contains),
            equals_upper(Country.continent, continent),
        )
        return self._paginate(predicate, [Country.name], page, page_size)

    # =========================================================================
    # Command Methods
    # =========================================================================

    def create(self, data: CountryCreate) -> CountryOutput:
        iso_code = self.normalize_key(data.iso_code)
        name = require_text(data.name, "Country name is required.")
        continent = require_text(data.continent, "Continent is required.")
        validate_max_length(name, Limits.MAX_NAME_LENGTH, "Country name")
        validate_max_length(continent, Limits.MAX_CONTINENT_LENGTH, "Continent")

        logger.info("Creating country", iso_code=iso_code)

        if self.countries.exists_by_key(iso_code):
            raise DuplicateEntityError("Country", "ISO code", iso_code)
        if self.countries.exists_by_name(name):
            raise DuplicateEntityError("Country", "name", name)

        country = Country(iso_code=iso_code, name=name, continent=continent)
        self.countries.add(country)
        self.commit("creating the country", iso_code=iso_code)
        self.countries.refresh(country)
        return self.to_output(country)

    def update(self, iso_code: str, data: CountryUpdate) -> CountryOutput:
        code = self.normalize_key(iso_code)
        country = self.get_active_entity(code)

        changes: dict[str, str] = {}
        if data.name is not None:
            name = require_text(data.name, "Country name is required.")
            validate_max_length(name, Limits.MAX_NAME_LENGTH, "Country name")
            if name.upper() != country.name.upper() and self.countries.exists_by_name(
                name, exclude_iso=code
            ):
                raise DuplicateEntityError("Country", "name", name)
            changes["name"] = name
        if data.continent is not None:
            continent = require_text(data.continent, "Continent is required.")
            changes["continent"] = validate_max_length(
                continent, Limits.MAX_CONTINENT_LENGTH, "Continent"
            )

        changed = {k: v for k, v in changes.items() if getattr(country, k) != v}
        if not changed:
            logger.info("No changes detected for country", iso_code=code)
            return self.to_output(country)

        for field_name, value in changed.items():
            setattr(country, field_name, value)
        self.countries.update(country)

        self.commit("updating the country", iso_code=code)
        self.countries.refresh(country)
        logger.info("Country updated", iso_code=code, fields=sorted(changed))
        return self.to_output(country)
