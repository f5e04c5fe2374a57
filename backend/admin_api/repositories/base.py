"""
Repository pattern for database access.

Every soft-deletable entity gets the same contract: active-only and
including-deleted lookups by natural or surrogate key, predicate-based
finds, paged finds and the write primitives. Uniqueness checks look at
deleted rows too since keys are never reused.

Usage:
    from admin_api.repositories import BaseRepository

    repo = BaseRepository(Country, db)
    country = repo.get_active_by_key("FRA")
    items, total = repo.paged_find(predicate, [Country.name], 1, 20)
"""

from __future__ import annotations

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import exists, inspect, select
from sqlalchemy.orm import Session

from shared.infrastructure.db import safe_commit

from admin_api.models import SoftDeleteMixin
from admin_api.services.query.pagination import Page, paged_find, tiebreak_ordering
from admin_api.services.query.predicates import Predicate, active_only, compose

ModelT = TypeVar("ModelT", bound=SoftDeleteMixin)


class BaseRepository(Generic[ModelT]):
    """
    Base repository providing the common data access operations.

    Subclass to add entity-specific lookups.
    """

    def __init__(self, model: type[ModelT], session: Session):
        self._model = model
        self._session = session

    @property
    def model(self) -> type[ModelT]:
        """The SQLAlchemy model class."""
        return self._model

    @property
    def session(self) -> Session:
        return self._session

    def _key_column(self):
        return inspect(self._model).primary_key[0]

    # =========================================================================
    # Lookups
    # =========================================================================

    def get_active_by_key(self, key: Any, *, options: Sequence[Any] | None = None) -> ModelT | None:
        """Non-deleted row with this key, or None (deleted rows are not found)."""
        query = select(self._model).where(
            self._key_column() == key,
            self._model.is_deleted.is_(False),
        )
        if options:
            query = query.options(*options)
        return self._session.scalar(query)

    def get_by_key_including_deleted(self, key: Any) -> ModelT | None:
        return self._session.get(self._model, key)

    def exists_by_key(self, key: Any) -> bool:
        """True when any row, deleted or not, holds this key."""
        return bool(self._session.scalar(select(exists().where(self._key_column() == key))))

    def any(self, predicate: Predicate) -> bool:
        return bool(self._session.scalar(select(exists().where(predicate))))

    # =========================================================================
    # Finds
    # =========================================================================

    def find_active(
        self,
        predicate: Predicate | None = None,
        order_by: Sequence[Any] = (),
        *,
        options: Sequence[Any] | None = None,
    ) -> list[ModelT]:
        """Non-deleted rows matching predicate, in the given order."""
        return self._find(compose(active_only(self._model), predicate), order_by, options)

    def find_all_including_deleted(
        self,
        predicate: Predicate | None = None,
        order_by: Sequence[Any] = (),
    ) -> list[ModelT]:
        return self._find(compose(None, predicate), order_by, None)

    def paged_find(
        self,
        predicate: Predicate,
        ordering: Sequence[Any],
        page_number: int,
        page_size: int,
    ) -> tuple[list[ModelT], int]:
        """
        One window of rows matching predicate.

        Returns:
            (items, total_count)

        Raises:
            InvalidArgumentError: If page_number or page_size is out of range
        """
        return paged_find(self._session, self._model, predicate, ordering, page_number, page_size)

    def page(
        self,
        predicate: Predicate,
        ordering: Sequence[Any],
        page_number: int,
        page_size: int,
    ) -> Page:
        """paged_find() wrapped in a Page with derived metadata."""
        items, total = self.paged_find(predicate, ordering, page_number, page_size)
        return Page(items=items, total_count=total, page_number=page_number, page_size=page_size)

    def _find(
        self,
        predicate: Predicate,
        order_by: Sequence[Any],
        options: Sequence[Any] | None,
    ) -> list[ModelT]:
        query = select(self._model).where(predicate)
        if order_by:
            query = query.order_by(*tiebreak_ordering(self._model, order_by))
        if options:
            query = query.options(*options)
        return list(self._session.execute(query).scalars().unique().all())

    # =========================================================================
    # Writes
    # =========================================================================

    def add(self, entity: ModelT) -> ModelT:
        self._session.add(entity)
        return entity

    def update(self, entity: ModelT) -> ModelT:
        """Attach a modified entity; changes are written on save_changes()."""
        return self._session.merge(entity) if entity not in self._session else entity

    def mark_deleted(self, entity: ModelT) -> ModelT:
        entity.mark_deleted()
        return entity

    def save_changes(self) -> None:
        """
        Commit pending writes. Rolls back and re-raises on failure;
        services convert the storage error into an InfrastructureError.
        """
        safe_commit(self._session)

    def refresh(self, entity: ModelT) -> ModelT:
        self._session.refresh(entity)
        return entity
