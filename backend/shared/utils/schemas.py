"""
Shared Pydantic schemas used across the application.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class PageMeta(BaseModel):
    """Page metadata derived from total count and page size."""

    page: int
    page_size: int
    total: int
    pages: int
    has_next: bool
    has_prev: bool


class PageOutput(BaseModel, Generic[T]):
    """One page of results."""

    items: list[T]
    pagination: PageMeta


class DependencyReport(BaseModel):
    """Result of a speculative dependency check."""

    entity_type: str
    entity_id: str
    dependencies: dict[str, bool]
    can_delete: bool
