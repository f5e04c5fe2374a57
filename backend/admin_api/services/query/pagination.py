"""
Pagination engine: one page of a filtered, totally ordered query.

Pages and sizes are 1-based. Non-positive values are rejected rather than
clamped. Callers supply their ordering; the primary key of the model is
appended as a tiebreaker so repeated fetches return stable pages.

Consistency: the count and the windowed fetch run as two statements in the
same session. Without snapshot isolation at the database, total_count may
be stale relative to items when rows are written concurrently.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import func, inspect, select
from sqlalchemy.orm import Session

from shared.config.settings import settings
from shared.utils.exceptions import InvalidArgumentError
from shared.utils.schemas import PageMeta

from admin_api.services.query.predicates import Predicate

ItemT = TypeVar("ItemT")


@dataclass
class Page(Generic[ItemT]):
    """
    One page of results.

    Attributes:
        items: At most page_size rows, in order
        total_count: Rows matching the filter across all pages
        page_number: 1-based page index
        page_size: Requested page size
    """

    items: list[ItemT]
    total_count: int
    page_number: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return (self.total_count + self.page_size - 1) // self.page_size

    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page_number > 1

    def meta(self) -> PageMeta:
        return PageMeta(
            page=self.page_number,
            page_size=self.page_size,
            total=self.total_count,
            pages=self.total_pages,
            has_next=self.has_next,
            has_prev=self.has_prev,
        )


def validate_page_args(page_number: int, page_size: int) -> None:
    """
    Reject page arguments below 1 and sizes above the configured maximum.

    Raises:
        InvalidArgumentError: If either value is out of range
    """
    if page_number < 1:
        raise InvalidArgumentError("page number", page_number, "must be 1 or greater.")
    if page_size < 1:
        raise InvalidArgumentError("page size", page_size, "must be 1 or greater.")
    if page_size > settings.max_page_size:
        raise InvalidArgumentError(
            "page size", page_size, f"must not exceed {settings.max_page_size}."
        )


def tiebreak_ordering(model: Any, ordering: Sequence[Any]) -> list[Any]:
    """Append the primary key columns not already in the ordering."""
    order_by = list(ordering)
    present = {getattr(col, "key", None) for col in order_by}
    for pk_col in inspect(model).primary_key:
        if pk_col.key not in present:
            order_by.append(pk_col)
    return order_by


def paged_find(
    db: Session,
    model: Any,
    predicate: Predicate,
    ordering: Sequence[Any],
    page_number: int,
    page_size: int,
) -> tuple[list[Any], int]:
    """
    Fetch one window of rows matching predicate plus the total match count.

    Returns:
        (items, total_count)

    Raises:
        InvalidArgumentError: If page_number or page_size is out of range
    """
    validate_page_args(page_number, page_size)

    total = db.scalar(select(func.count()).select_from(model).where(predicate)) or 0
    if total == 0 or (page_number - 1) * page_size >= total:
        return [], total

    query = (
        select(model)
        .where(predicate)
        .order_by(*tiebreak_ordering(model, ordering))
        .offset((page_number - 1) * page_size)
        .limit(page_size)
    )
    items = list(db.execute(query).scalars().all())
    return items, total

