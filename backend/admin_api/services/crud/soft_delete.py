"""
Soft delete lifecycle: ACTIVE <-> DELETED transitions for one entity type.

- delete(): ACTIVE -> DELETED. Consults the DependencyGuard first, then
  writes with a single conditional UPDATE that only matches while the row
  is still active and no probe finds a live dependent. Never cascades.
- reactivate(): DELETED -> ACTIVE. Foreign keys are not re-validated.

Transitions to the current state fail with a ConflictError subclass and
perform no write. Storage failures roll the session back and surface as
DatabaseError.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Generic, TypeVar

from sqlalchemy import inspect, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shared.config.logging import get_logger
from shared.infrastructure.db import safe_commit
from shared.utils.exceptions import (
    AlreadyActiveError,
    AlreadyInactiveError,
    ConcurrentModificationError,
    DatabaseError,
    DependencyBlockedError,
)

from admin_api.models import SoftDeleteMixin
from admin_api.services.crud.dependency_guard import DependencyGuard
from admin_api.services.query.predicates import compose

logger = get_logger(__name__)

T = TypeVar("T", bound=SoftDeleteMixin)


def entity_key(entity: Any) -> Any:
    """Primary key value of a mapped instance (scalar for single-column keys)."""
    identity = inspect(entity).mapper.primary_key_from_instance(entity)
    return identity[0] if len(identity) == 1 else tuple(identity)


class SoftDeleteLifecycle(Generic[T]):
    """
    State machine for one soft-deletable model.

    Args:
        db: Database session
        model: Model class (must inherit SoftDeleteMixin)
        entity_name: Name used in messages, e.g. "Airline"
        guard: Optional dependency guard consulted before delete
    """

    def __init__(
        self,
        db: Session,
        model: type[T],
        entity_name: str,
        guard: DependencyGuard | None = None,
    ):
        self._db = db
        self._model = model
        self._entity_name = entity_name
        self._guard = guard

    @property
    def guard(self) -> DependencyGuard | None:
        return self._guard

    def delete(self, entity: T) -> None:
        """
        Move an ACTIVE entity to DELETED.

        Raises:
            AlreadyInactiveError: If the entity is already deleted
            DependencyBlockedError: If live rows still reference it
            ConcurrentModificationError: If the row changed under us
            DatabaseError: If the write fails
        """
        key = entity_key(entity)
        if entity.is_deleted:
            raise AlreadyInactiveError(self._entity_name, key)

        if self._guard is not None:
            self._guard.ensure_deletable(self._entity_name, key)

        stmt = (
            update(self._model)
            .where(
                compose(
                    self._model.is_deleted.is_(False),
                    self._key_clause(key),
                    self._guard.no_live_dependents(key) if self._guard else None,
                )
            )
            .values(is_deleted=True, deleted_at=datetime.now(timezone.utc))
            .execution_options(synchronize_session=False)
        )

        try:
            result = self._db.execute(stmt)
            if result.rowcount != 1:
                self._db.rollback()
                self._raise_lost_race(key)
            safe_commit(self._db)
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.error(
                f"Failed to delete {self._entity_name.lower()}",
                key=key,
                error=str(e),
                exc_info=True,
            )
            raise DatabaseError(f"deleting the {self._entity_name.lower()}")

        self._db.refresh(entity)
        logger.info(f"{self._entity_name} deleted", key=key)

    def reactivate(self, entity: T) -> None:
        """
        Move a DELETED entity back to ACTIVE.

        Raises:
            AlreadyActiveError: If the entity is not deleted (no write happens)
            DatabaseError: If the write fails
        """
        key = entity_key(entity)
        if not entity.is_deleted:
            raise AlreadyActiveError(self._entity_name, key)

        entity.mark_active()
        try:
            safe_commit(self._db)
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.error(
                f"Failed to reactivate {self._entity_name.lower()}",
                key=key,
                error=str(e),
                exc_info=True,
            )
            raise DatabaseError(f"reactivating the {self._entity_name.lower()}")

        self._db.refresh(entity)
        logger.info(f"{self._entity_name} reactivated", key=key)

    # =========================================================================
    # Internal Helpers
    # =========================================================================

    def _key_clause(self, key: Any):
        pk_cols = inspect(self._model).primary_key
        values = key if isinstance(key, tuple) else (key,)
        return compose(None, *(col == value for col, value in zip(pk_cols, values)))

    def _raise_lost_race(self, key: Any) -> None:
        """The conditional update matched nothing; work out why."""
        if self._guard is not None:
            blocking = self._guard.blocking(key)
            if blocking:
                raise DependencyBlockedError(self._entity_name, key, blocking)

        current = self._db.get(self._model, key)
        if current is not None and current.is_deleted:
            raise AlreadyInactiveError(self._entity_name, key)
        raise ConcurrentModificationError(self._entity_name, key)
