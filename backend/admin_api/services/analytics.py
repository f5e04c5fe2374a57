"""
Pricing analytics over logged price offers.

summarize() reduces the non-deleted offers for one subject (a fare code or
an ancillary product) inside an inclusive whole-day date range to
count / min / max / average. Aggregation runs in SQL over integer cents;
the average is divided out in Decimal so it carries no float drift.

An empty slice raises NoDataError: "no offers" is not the same as a
summary of zeros.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from shared.config.logging import get_logger
from shared.utils.exceptions import NoDataError

from admin_api.models import PriceOfferLog
from admin_api.models.pricing import CENTS
from admin_api.repositories.pricing import PriceOfferLogRepository
from admin_api.services.query.predicates import Predicate, compose, day_range

logger = get_logger(__name__)

_QUANT = Decimal("0.01")


@dataclass(frozen=True)
class AnalyticsSummary:
    subject_key: str
    average_price: Decimal
    min_price: Decimal
    max_price: Decimal
    offer_count: int


def cents_to_decimal(cents: int) -> Decimal:
    return (Decimal(cents) / CENTS).quantize(_QUANT)


class AnalyticsAggregator:
    """Read-only aggregate path over the price offer log."""

    def __init__(self, repo: PriceOfferLogRepository):
        self._repo = repo

    def summarize(
        self,
        subject_key: str,
        subject_predicate: Predicate,
        start_date: date,
        end_date: date,
        *,
        no_data_message: str = "No data found for the specified subject and date range.",
    ) -> AnalyticsSummary:
        """
        Args:
            subject_key: Label echoed back in the summary (fare code or product id)
            subject_predicate: Clause selecting the subject's offers
            start_date: First day included
            end_date: Last day included

        Raises:
            NoDataError: If no non-deleted offer matches
        """
        stats = self._repo.pricing_stats(
            compose(None, subject_predicate, day_range(PriceOfferLog.timestamp, start_date, end_date))
        )
        if stats.offer_count == 0:
            raise NoDataError(
                no_data_message,
                subject=subject_key,
                start_date=str(start_date),
                end_date=str(end_date),
            )

        average = (Decimal(stats.sum_cents) / stats.offer_count / CENTS).quantize(
            _QUANT, rounding=ROUND_HALF_UP
        )
        summary = AnalyticsSummary(
            subject_key=subject_key,
            average_price=average,
            min_price=cents_to_decimal(stats.min_cents),
            max_price=cents_to_decimal(stats.max_cents),
            offer_count=stats.offer_count,
        )
        logger.info(
            "Pricing analytics computed",
            subject=subject_key,
            offer_count=summary.offer_count,
        )
        return summary
