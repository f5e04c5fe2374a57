"""
Price offer log endpoints: ingestion, search and pricing analytics.
"""

from datetime import date, datetime
from decimal import Decimal

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from shared.infrastructure.db import get_db
from shared.utils.schemas import PageOutput
from admin_api.routers._common import PageParams, get_page_params
from admin_api.schemas import (
    PriceAnalyticsOutput,
    PriceOfferLogCreate,
    PriceOfferLogFilter,
    PriceOfferLogOutput,
)
from admin_api.services.domain import PriceOfferLogService


router = APIRouter(prefix="/price-offer-logs", tags=["admin-price-offer-logs"])


def _get_service(db: Session) -> PriceOfferLogService:
    return PriceOfferLogService(db)


@router.post("", response_model=PriceOfferLogOutput, status_code=status.HTTP_201_CREATED)
def log_price_offer(body: PriceOfferLogCreate, db: Session = Depends(get_db)) -> PriceOfferLogOutput:
    """Record a price offer for exactly one fare code or ancillary product."""
    return _get_service(db).log_offer(body)


@router.get("", response_model=PageOutput[PriceOfferLogOutput])
def search_price_offer_logs(
    include_deleted: bool = False,
    start_date: datetime | None = None,
    end_date: datetime | None = None,
    fare_id: str | None = None,
    ancillary_id: int | None = None,
    context_attributes_id: int | None = None,
    min_price: Decimal | None = None,
    max_price: Decimal | None = None,
    params: PageParams = Depends(get_page_params),
    db: Session = Depends(get_db),
) -> PageOutput[PriceOfferLogOutput]:
    """Newest offers first."""
    filters = PriceOfferLogFilter(
        include_deleted=include_deleted,
        start_date=start_date,
        end_date=end_date,
        fare_id=fare_id,
        ancillary_id=ancillary_id,
        context_attributes_id=context_attributes_id,
        min_price=min_price,
        max_price=max_price,
    )
    return _get_service(db).search(filters, params.page, params.page_size)


@router.get("/analytics/fare/{fare_code}", response_model=PriceAnalyticsOutput)
def get_fare_analytics(
    fare_code: str,
    start_date: date = Query(...),
    end_date: date = Query(...),
    db: Session = Depends(get_db),
) -> PriceAnalyticsOutput:
    """Count, min, max and average offer price for a fare code (whole days, inclusive)."""
    return _get_service(db).analytics_for_fare(fare_code, start_date, end_date)


@router.get("/analytics/ancillary/{product_id}", response_model=PriceAnalyticsOutput)
def get_ancillary_analytics(
    product_id: int,
    start_date: date = Query(...),
    end_date: date = Query(...),
    db: Session = Depends(get_db),
) -> PriceAnalyticsOutput:
    return _get_service(db).analytics_for_ancillary(product_id, start_date, end_date)


@router.get("/{offer_id}", response_model=PriceOfferLogOutput)
def get_price_offer_log(offer_id: int, db: Session = Depends(get_db)) -> PriceOfferLogOutput:
    return _get_service(db).get_by_id(offer_id)


@router.delete("/{offer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_price_offer_log(offer_id: int, db: Session = Depends(get_db)) -> None:
    _get_service(db).delete(offer_id)


@router.post("/{offer_id}/reactivate", status_code=status.HTTP_204_NO_CONTENT)
def reactivate_price_offer_log(offer_id: int, db: Session = Depends(get_db)) -> None:
    _get_service(db).reactivate(offer_id)
