"""
Tests for CountryService.
"""

import pytest

from admin_api.models import Airport
from admin_api.schemas import CountryCreate, CountryUpdate
from admin_api.services.domain import CountryService
from shared.utils.exceptions import (
    DependencyBlockedError,
    DuplicateEntityError,
    NotFoundError,
    ValidationError,
)


class TestCountryService:
    @pytest.fixture
    def service(self, db_session):
        return CountryService(db_session)

    def test_create_and_get(self, service):
        created = service.create(CountryCreate(iso_code="per", name="Peru", continent="South America"))

        assert created.iso_code == "PER"
        assert service.get_by_iso("PER").name == "Peru"

    def test_invalid_iso_code(self, service):
        with pytest.raises(ValidationError) as exc_info:
            service.get_by_iso("FR")
        assert exc_info.value.detail == "Invalid ISO code provided."

    def test_get_by_name_is_case_insensitive(self, service, seed_country):
        assert service.get_by_name("FRANCE").iso_code == "FRA"

    def test_get_by_name_missing(self, service):
        with pytest.raises(NotFoundError):
            service.get_by_name("Atlantis")

    def test_duplicate_name(self, service, seed_country):
        with pytest.raises(DuplicateEntityError):
            service.create(CountryCreate(iso_code="FRX", name="France", continent="Europe"))

    def test_list_by_continent(self, service, seed_country):
        service.create(CountryCreate(iso_code="PER", name="Peru", continent="South America"))

        assert [c.iso_code for c in service.list_by_continent("europe")] == ["FRA"]

    def test_paginate_with_name_filter(self, service, seed_country):
        service.create(CountryCreate(iso_code="FIN", name="Finland", continent="Europe"))
        service.create(CountryCreate(iso_code="PER", name="Peru", continent="South America"))

        page = service.paginate(1, 10, name_contains="f")

        assert [c.iso_code for c in page.items] == ["FIN", "FRA"]
        assert page.pagination.total == 2

    def test_update(self, service, seed_country):
        updated = service.update("FRA", CountryUpdate(name="French Republic"))
        assert updated.name == "French Republic"

    def test_create_rejects_overlong_name(self, service):
        with pytest.raises(ValidationError) as exc_info:
            service.create(CountryCreate(iso_code="ZZZ", name="N" * 101, continent="Europe"))

        assert exc_info.value.detail == "Country name must be at most 100 characters."
        assert service.list_including_deleted() == []

    def test_create_rejects_overlong_continent(self, service):
        with pytest.raises(ValidationError) as exc_info:
            service.create(CountryCreate(iso_code="ZZZ", name="Nowhere", continent="C" * 51))
        assert exc_info.value.detail == "Continent must be at most 50 characters."

    @pytest.mark.parametrize("field, width", [("name", 101), ("continent", 51)])
    def test_update_rejects_overlong_text(self, service, seed_country, field, width):
        with pytest.raises(ValidationError):
            service.update("FRA", CountryUpdate(**{field: "X" * width}))

        country = service.get_by_iso("FRA")
        assert (country.name, country.continent) == ("France", "Europe")

    def test_get_with_airports_hides_deleted_airports(self, service, seed_airport, db_session):
        db_session.add(Airport(iata_code="XXX", name="Closed", country_id="FRA", is_deleted=True))
        db_session.commit()

        output = service.get_with_airports("FRA")

        assert [a.iata_code for a in output.airports] == ["CDG"]

    def test_delete_blocked_by_active_airport(self, service, seed_airport):
        with pytest.raises(DependencyBlockedError) as exc_info:
            service.delete("FRA")
        assert exc_info.value.blocking == ["active airports"]

    def test_delete_after_airport_removed(self, service, seed_airport, db_session):
        seed_airport.is_deleted = True
        db_session.commit()

        service.delete("FRA")

        assert service.list_active() == []
        assert service.list_including_deleted()[0].is_deleted is True
