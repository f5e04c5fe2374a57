"""
Price Offer Log Service.

Ingestion path for price offers plus search and pricing analytics.

A log entry references exactly one subject (a fare basis code or an
ancillary product) and the pricing context it was computed from. Every
reference is resolved before the insert; any failure rejects the whole
entry and nothing is written. Entries are immutable afterwards apart from
soft delete and reactivation.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import ROUND_CEILING, ROUND_FLOOR, Decimal, InvalidOperation

from sqlalchemy.orm import Session

from shared.config.constants import Limits
from shared.config.logging import get_logger
from shared.utils.exceptions import NotFoundError, ValidationError
from shared.utils.schemas import PageOutput
from shared.utils.validators import normalize_code, require_text

from admin_api.models import PriceOfferLog
from admin_api.models.pricing import CENTS
from admin_api.repositories import (
    AncillaryProductRepository,
    ContextAttributesRepository,
    FareBasisCodeRepository,
    PriceOfferLogRepository,
)
from admin_api.schemas import (
    PriceAnalyticsOutput,
    PriceOfferLogCreate,
    PriceOfferLogFilter,
    PriceOfferLogOutput,
)
from admin_api.services.analytics import AnalyticsAggregator
from admin_api.services.base_service import LifecycleService
from admin_api.services.query.predicates import active_only, compose, equals, in_range

logger = get_logger(__name__)

PRICE_LOG_ORDERING = (PriceOfferLog.timestamp.desc(), PriceOfferLog.offer_id)


def price_to_cents(price: Decimal) -> int:
    """
    Convert a quoted price to integer cents.

    Raises:
        ValidationError: If the price has more than two decimals or is out of range
    """
    try:
        cents = Decimal(price) * CENTS
    except (InvalidOperation, TypeError):
        raise ValidationError("Offer price must be a decimal amount.", value=str(price))
    if cents != cents.to_integral_value():
        raise ValidationError(
            "Offer price must have at most two decimal places.", value=str(price)
        )
    cents_int = int(cents)
    if not Limits.MIN_OFFER_PRICE_CENTS <= cents_int <= Limits.MAX_OFFER_PRICE_CENTS:
        raise ValidationError(
            "Offer price must be between 0.01 and 100000.00.", value=str(price)
        )
    return cents_int


def _bound_cents(price: Decimal | None, rounding: str) -> int | None:
    if price is None:
        return None
    return int((Decimal(price) * CENTS).to_integral_value(rounding=rounding))


class PriceOfferLogService(LifecycleService[PriceOfferLog, PriceOfferLogOutput]):
    def __init__(self, db: Session):
        super().__init__(
            db=db,
            repo=PriceOfferLogRepository(db),
            output_schema=PriceOfferLogOutput,
            entity_name="Price offer log",
        )
        self._fares = FareBasisCodeRepository(db)
        self._ancillaries = AncillaryProductRepository(db)
        self._contexts = ContextAttributesRepository(db)
        self._aggregator = AnalyticsAggregator(self.logs)

    @property
    def logs(self) -> PriceOfferLogRepository:
        return self._repo  # type: ignore[return-value]

    def to_output(self, entity: PriceOfferLog) -> PriceOfferLogOutput:
        output = PriceOfferLogOutput.model_validate(entity)
        if entity.fare is not None:
            output.fare_description = entity.fare.description
        if entity.ancillary is not None:
            output.ancillary_product_name = entity.ancillary.name
        return output

    # =========================================================================
    # Ingestion
    # =========================================================================

    def log_offer(self, data: PriceOfferLogCreate) -> PriceOfferLogOutput:
        """
        Record one price offer.

        Raises:
            ValidationError: If the subject is missing or ambiguous, the price
                is out of range or a referenced row does not exist
            DatabaseError: If the insert fails
        """
        fare_code = normalize_code(data.fare_id) or None
        ancillary_id = data.ancillary_id

        logger.info(
            "Logging price offer",
            fare_id=fare_code,
            ancillary_id=ancillary_id,
            price=str(data.offer_price_quote),
        )

        if fare_code is None and ancillary_id is None:
            raise ValidationError("Either Fare Code or Ancillary Product ID must be provided.")
        if fare_code is not None and ancillary_id is not None:
            raise ValidationError(
                "Cannot log a price offer for both a Fare Code and an Ancillary Product simultaneously."
            )

        cents = price_to_cents(data.offer_price_quote)

        if fare_code is not None and self._fares.get_active_by_key(fare_code) is None:
            raise ValidationError(f"Fare code '{fare_code}' does not exist.", field="fare_id")
        if ancillary_id is not None and self._ancillaries.get_active_by_key(ancillary_id) is None:
            raise ValidationError(
                f"Ancillary product with ID '{ancillary_id}' not found.",
                field="ancillary_id",
            )
        if self._contexts.get_active_by_key(data.context_attributes_id) is None:
            raise ValidationError(
                f"Context attribute set with ID '{data.context_attributes_id}' not found.",
                field="context_attributes_id",
            )

        timestamp = data.timestamp or datetime.now(timezone.utc)
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)

        log = PriceOfferLog(
            offer_price_cents=cents,
            timestamp=timestamp,
            context_attributes_id=data.context_attributes_id,
            fare_id=fare_code,
            ancillary_id=ancillary_id,
        )
        self.logs.add(log)
        self.commit("logging the price offer", fare_id=fare_code, ancillary_id=ancillary_id)
        self.logs.refresh(log)

        logger.info("Price offer logged", offer_id=log.offer_id)
        return self.to_output(log)

    # =========================================================================
    # Queries
    # =========================================================================

    def get_by_id(self, offer_id: int) -> PriceOfferLogOutput:
        log = self.logs.get_active_by_key(offer_id)
        if log is None:
            raise NotFoundError("Price offer log", offer_id, active_only=True)
        return self.to_output(log)

    def search(
        self,
        filters: PriceOfferLogFilter,
        page: int,
        page_size: int,
    ) -> PageOutput[PriceOfferLogOutput]:
        """Newest first; ties broken by offer id."""
        predicate = compose(
            active_only(PriceOfferLog, filters.include_deleted),
            in_range(PriceOfferLog.timestamp, filters.start_date, filters.end_date),
            equals(PriceOfferLog.fare_id, normalize_code(filters.fare_id) or None),
            equals(PriceOfferLog.ancillary_id, filters.ancillary_id),
            equals(PriceOfferLog.context_attributes_id, filters.context_attributes_id),
            in_range(
                PriceOfferLog.offer_price_cents,
                _bound_cents(filters.min_price, ROUND_CEILING),
                _bound_cents(filters.max_price, ROUND_FLOOR),
            ),
        )
        return self._paginate(predicate, PRICE_LOG_ORDERING, page, page_size)

    # =========================================================================
    # Analytics
    # =========================================================================

    def analytics_for_fare(
        self, fare_code: str, start_date: date, end_date: date
    ) -> PriceAnalyticsOutput:
        """
        Raises:
            ValidationError: If the fare code is blank
            NoDataError: If no active offer for the fare falls in the range
        """
        code = require_text(fare_code, "Fare code cannot be empty.").upper()
        summary = self._aggregator.summarize(
            code,
            PriceOfferLog.fare_id == code,
            start_date,
            end_date,
            no_data_message="No data found for the specified fare code and date range.",
        )
        return PriceAnalyticsOutput.model_validate(summary)

    def analytics_for_ancillary(
        self, product_id: int, start_date: date, end_date: date
    ) -> PriceAnalyticsOutput:
        summary = self._aggregator.summarize(
            str(product_id),
            PriceOfferLog.ancillary_id == product_id,
            start_date,
            end_date,
            no_data_message="No data found for the specified ancillary product and date range.",
        )
        return PriceAnalyticsOutput.model_validate(summary)
