"""
Tests for FareBasisCodeService.
"""

import pytest

from admin_api.models import Booking
from admin_api.schemas import FareBasisCodeCreate, FareBasisCodeUpdate
from admin_api.services.domain import FareBasisCodeService
from shared.utils.exceptions import (
    AlreadyActiveError,
    DependencyBlockedError,
    DuplicateEntityError,
    ValidationError,
)


class TestFareBasisCodeService:
    @pytest.fixture
    def service(self, db_session):
        return FareBasisCodeService(db_session)

    def test_create_uppercases_code(self, service):
        fare = service.create(
            FareBasisCodeCreate(code="qow/kf", description="Discount", rules="Non refundable")
        )
        assert fare.code == "QOW/KF"

    @pytest.mark.parametrize("code", ["", "ABCDEFGHIJK", "Y-1"])
    def test_invalid_codes(self, service, code):
        with pytest.raises(ValidationError):
            service.create(FareBasisCodeCreate(code=code, description="d", rules="r"))

    def test_blank_description(self, service):
        with pytest.raises(ValidationError) as exc_info:
            service.create(FareBasisCodeCreate(code="Y", description="  ", rules="r"))
        assert exc_info.value.detail == "Description is required."

    def test_overlong_description(self, service, seed_fare):
        with pytest.raises(ValidationError) as exc_info:
            service.create(FareBasisCodeCreate(code="Y", description="D" * 256, rules="r"))
        assert exc_info.value.detail == "Description must be at most 255 characters."

        with pytest.raises(ValidationError):
            service.update("YOW", FareBasisCodeUpdate(description="D" * 256))

    def test_deleted_code_is_not_reused(self, service, seed_fare):
        service.delete("YOW")

        with pytest.raises(DuplicateEntityError):
            service.create(FareBasisCodeCreate(code="yow", description="d", rules="r"))

    def test_paginate_by_description(self, service, seed_fare):
        service.create(FareBasisCodeCreate(code="J", description="Business flexible", rules="r"))

        page = service.paginate(1, 10, description_contains="economy")

        assert [f.code for f in page.items] == ["YOW"]

    def test_update_rules(self, service, seed_fare):
        updated = service.update("yow", FareBasisCodeUpdate(rules="Changes allowed"))
        assert updated.rules == "Changes allowed"
        assert updated.description == "Economy one way"

    def test_delete_blocked_by_booking_and_logs(self, service, seed_fare, make_price_log, db_session):
        db_session.add(Booking(booking_reference="XYZ789", fare_basis_code_id="YOW"))
        db_session.commit()
        make_price_log(9900, fare_id="YOW")

        with pytest.raises(DependencyBlockedError) as exc_info:
            service.delete("YOW")

        assert exc_info.value.blocking == ["active bookings", "price offer logs"]

    def test_delete_and_reactivate(self, service, seed_fare):
        service.delete("YOW")
        assert service.list_active() == []

        service.reactivate("YOW")
        assert service.get_by_code("YOW").is_deleted is False

        with pytest.raises(AlreadyActiveError):
            service.reactivate("YOW")
