"""
Tests for PriceOfferLogService: ingestion, search and analytics.
"""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from admin_api.models import PriceOfferLog
from admin_api.schemas import PriceOfferLogCreate, PriceOfferLogFilter
from admin_api.services.domain import PriceOfferLogService
from admin_api.services.domain.price_offer_log_service import price_to_cents
from shared.utils.exceptions import NoDataError, NotFoundError, ValidationError


class TestPriceToCents:
    @pytest.mark.parametrize(
        "price,cents",
        [(Decimal("0.01"), 1), (Decimal("125.5"), 12550), (Decimal("100000.00"), 10_000_000)],
    )
    def test_valid_prices(self, price, cents):
        assert price_to_cents(price) == cents

    @pytest.mark.parametrize("price", [Decimal("0"), Decimal("-5"), Decimal("100000.01")])
    def test_out_of_range(self, price):
        with pytest.raises(ValidationError) as exc_info:
            price_to_cents(price)
        assert exc_info.value.detail == "Offer price must be between 0.01 and 100000.00."

    def test_too_many_decimals(self):
        with pytest.raises(ValidationError):
            price_to_cents(Decimal("10.005"))


class TestLogOffer:
    """Tests for PriceOfferLogService.log_offer()."""

    @pytest.fixture
    def service(self, db_session):
        return PriceOfferLogService(db_session)

    def test_logs_fare_offer(self, service, seed_fare, seed_context, db_session):
        output = service.log_offer(
            PriceOfferLogCreate(
                offer_price_quote=Decimal("199.99"),
                context_attributes_id=seed_context.attribute_id,
                fare_id="yow",
            )
        )

        assert output.fare_id == "YOW"
        assert output.offer_price_quote == Decimal("199.99")
        assert output.fare_description == "Economy one way"
        assert db_session.get(PriceOfferLog, output.offer_id).offer_price_cents == 19999

    def test_logs_ancillary_offer(self, service, seed_ancillary, seed_context):
        output = service.log_offer(
            PriceOfferLogCreate(
                offer_price_quote=Decimal("45"),
                context_attributes_id=seed_context.attribute_id,
                ancillary_id=seed_ancillary.product_id,
                timestamp=datetime(2024, 5, 10, 8, 30),
            )
        )

        assert output.ancillary_id == seed_ancillary.product_id
        assert output.ancillary_product_name == "Extra bag 23kg"
        assert output.fare_id is None

    def test_requires_a_subject(self, service, seed_context):
        with pytest.raises(ValidationError) as exc_info:
            service.log_offer(
                PriceOfferLogCreate(
                    offer_price_quote=Decimal("10"),
                    context_attributes_id=seed_context.attribute_id,
                )
            )
        assert exc_info.value.detail == "Either Fare Code or Ancillary Product ID must be provided."

    def test_rejects_both_subjects(self, service, seed_fare, seed_ancillary, seed_context):
        with pytest.raises(ValidationError) as exc_info:
            service.log_offer(
                PriceOfferLogCreate(
                    offer_price_quote=Decimal("10"),
                    context_attributes_id=seed_context.attribute_id,
                    fare_id="YOW",
                    ancillary_id=seed_ancillary.product_id,
                )
            )
        assert "simultaneously" in exc_info.value.detail

    def test_unknown_fare(self, service, seed_context, db_session):
        with pytest.raises(ValidationError) as exc_info:
            service.log_offer(
                PriceOfferLogCreate(
                    offer_price_quote=Decimal("10"),
                    context_attributes_id=seed_context.attribute_id,
                    fare_id="NOPE",
                )
            )
        assert exc_info.value.detail == "Fare code 'NOPE' does not exist."
        assert db_session.query(PriceOfferLog).count() == 0

    def test_unknown_ancillary(self, service, seed_context):
        with pytest.raises(ValidationError) as exc_info:
            service.log_offer(
                PriceOfferLogCreate(
                    offer_price_quote=Decimal("10"),
                    context_attributes_id=seed_context.attribute_id,
                    ancillary_id=999,
                )
            )
        assert exc_info.value.detail == "Ancillary product with ID '999' not found."

    def test_unknown_context(self, service, seed_fare):
        with pytest.raises(ValidationError) as exc_info:
            service.log_offer(
                PriceOfferLogCreate(offer_price_quote=Decimal("10"), context_attributes_id=999, fare_id="YOW")
            )
        assert exc_info.value.detail == "Context attribute set with ID '999' not found."

    def test_deleted_fare_is_rejected(self, service, seed_fare, seed_context, db_session):
        seed_fare.is_deleted = True
        db_session.commit()

        with pytest.raises(ValidationError):
            service.log_offer(
                PriceOfferLogCreate(
                    offer_price_quote=Decimal("10"),
                    context_attributes_id=seed_context.attribute_id,
                    fare_id="YOW",
                )
            )


class TestSearchAndAnalytics:
    @pytest.fixture
    def service(self, db_session):
        return PriceOfferLogService(db_session)

    @pytest.fixture
    def logs(self, seed_fare, seed_ancillary, make_price_log):
        return [
            make_price_log(10000, fare_id="YOW", when=datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)),
            make_price_log(20000, fare_id="YOW", when=datetime(2024, 5, 2, 9, 0, tzinfo=timezone.utc)),
            make_price_log(4500, ancillary_id=seed_ancillary.product_id,
                           when=datetime(2024, 5, 3, 9, 0, tzinfo=timezone.utc)),
            make_price_log(30000, fare_id="YOW", when=datetime(2024, 5, 4, 9, 0, tzinfo=timezone.utc),
                           is_deleted=True),
        ]

    def test_search_newest_first(self, service, logs):
        page = service.search(PriceOfferLogFilter(), 1, 10)

        assert [item.offer_price_quote for item in page.items] == [
            Decimal("45"), Decimal("200"), Decimal("100"),
        ]
        assert page.pagination.total == 3

    def test_search_including_deleted(self, service, logs):
        page = service.search(PriceOfferLogFilter(include_deleted=True), 1, 10)
        assert page.pagination.total == 4

    def test_search_by_fare_and_price(self, service, logs):
        page = service.search(
            PriceOfferLogFilter(fare_id="yow", min_price=Decimal("150")), 1, 10
        )
        assert [item.offer_id for item in page.items] == [logs[1].offer_id]

    def test_get_by_id_deleted(self, service, logs):
        with pytest.raises(NotFoundError):
            service.get_by_id(logs[3].offer_id)

    def test_fare_analytics(self, service, logs):
        result = service.analytics_for_fare("yow", date(2024, 5, 1), date(2024, 5, 31))

        assert result.subject_key == "YOW"
        assert result.offer_count == 2
        assert result.average_price == Decimal("150.00")
        assert result.min_price == Decimal("100.00")
        assert result.max_price == Decimal("200.00")

    def test_fare_analytics_blank_code(self, service):
        with pytest.raises(ValidationError) as exc_info:
            service.analytics_for_fare(" ", date(2024, 5, 1), date(2024, 5, 31))
        assert exc_info.value.detail == "Fare code cannot be empty."

    def test_fare_analytics_no_data(self, service, logs):
        with pytest.raises(NoDataError) as exc_info:
            service.analytics_for_fare("YOW", date(2023, 1, 1), date(2023, 1, 31))
        assert exc_info.value.detail == "No data found for the specified fare code and date range."

    def test_ancillary_analytics(self, service, logs, seed_ancillary):
        result = service.analytics_for_ancillary(
            seed_ancillary.product_id, date(2024, 5, 3), date(2024, 5, 3)
        )

        assert result.offer_count == 1
        assert result.average_price == Decimal("45.00")

    def test_delete_log_excludes_it_from_analytics(self, service, logs):
        service.delete(logs[0].offer_id)

        result = service.analytics_for_fare("YOW", date(2024, 5, 1), date(2024, 5, 31))

        assert result.offer_count == 1
