"""
Pricing repositories: fare basis codes, ancillary products, pricing
context attributes and the price offer log.
"""

from __future__ import annotations

from typing import NamedTuple

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from admin_api.models import (
    AncillaryProduct,
    ContextualPricingAttributes,
    FareBasisCode,
    PriceOfferLog,
)
from admin_api.repositories.base import BaseRepository
from admin_api.services.query.predicates import Predicate, active_only, compose


class PricingStats(NamedTuple):
    """Raw aggregate row over offer_price_cents."""

    offer_count: int
    min_cents: int | None
    max_cents: int | None
    sum_cents: int | None


class FareBasisCodeRepository(BaseRepository[FareBasisCode]):
    def __init__(self, session: Session):
        super().__init__(FareBasisCode, session)


class AncillaryProductRepository(BaseRepository[AncillaryProduct]):
    def __init__(self, session: Session):
        super().__init__(AncillaryProduct, session)


class ContextAttributesRepository(BaseRepository[ContextualPricingAttributes]):
    def __init__(self, session: Session):
        super().__init__(ContextualPricingAttributes, session)


class PriceOfferLogRepository(BaseRepository[PriceOfferLog]):
    def __init__(self, session: Session):
        super().__init__(PriceOfferLog, session)

    def pricing_stats(self, predicate: Predicate) -> PricingStats:
        """
        Count, min, max and sum of offer prices over non-deleted rows
        matching predicate, computed in one aggregate query.
        """
        row = self.session.execute(
            select(
                func.count(PriceOfferLog.offer_id),
                func.min(PriceOfferLog.offer_price_cents),
                func.max(PriceOfferLog.offer_price_cents),
                func.sum(PriceOfferLog.offer_price_cents),
            ).where(compose(active_only(PriceOfferLog), predicate))
        ).one()
        return PricingStats(int(row[0] or 0), row[1], row[2], row[3])
