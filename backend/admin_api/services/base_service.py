"""
Base service class for the administered entities.

Architecture:
    Router (thin) -> Service (business rules) -> Repository (data access) -> Model

Every entity service shares the same lifecycle plumbing: active-only lookups
that raise NotFoundError, guarded soft delete, reactivation, the speculative
dependency report, paging into PageOutput and commit-with-rollback that turns
storage failures into DatabaseError.

Usage:
    class CountryService(LifecycleService[Country, CountryOutput]):
        def __init__(self, db: Session):
            super().__init__(
                db=db,
                repo=CountryRepository(db),
                output_schema=CountryOutput,
                entity_name="Country",
                probes=COUNTRY_PROBES,
            )
"""

from __future__ import annotations

from typing import Any, Generic, Sequence, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shared.config.logging import get_logger
from shared.utils.exceptions import DatabaseError, NotFoundError
from shared.utils.schemas import DependencyReport, PageOutput

from admin_api.models import SoftDeleteMixin
from admin_api.repositories.base import BaseRepository
from admin_api.services.crud.dependency_guard import DependencyGuard, DependencyProbe
from admin_api.services.crud.soft_delete import SoftDeleteLifecycle
from admin_api.services.query.predicates import Predicate

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=SoftDeleteMixin)
OutputT = TypeVar("OutputT", bound=BaseModel)


class LifecycleService(Generic[ModelT, OutputT]):
    """
    Base service for soft-deletable entities.

    Subclasses add the entity's queries and commands and may override
    normalize_key() and to_output().
    """

    def __init__(
        self,
        db: Session,
        repo: BaseRepository[ModelT],
        output_schema: type[OutputT],
        entity_name: str,
        *,
        probes: Sequence[DependencyProbe] = (),
    ):
        self._db = db
        self._repo = repo
        self._output_schema = output_schema
        self._entity_name = entity_name
        self._guard = DependencyGuard(db, probes) if probes else None
        self._lifecycle = SoftDeleteLifecycle(db, repo.model, entity_name, self._guard)

    @property
    def db(self) -> Session:
        return self._db

    @property
    def repo(self) -> BaseRepository[ModelT]:
        return self._repo

    @property
    def entity_name(self) -> str:
        return self._entity_name

    # =========================================================================
    # Lookups
    # =========================================================================

    def normalize_key(self, key: Any) -> Any:
        """Validate and normalize a key before lookup. Override per entity."""
        return key

    def get_active_entity(self, key: Any, *, options: Sequence[Any] | None = None) -> ModelT:
        """
        Raises:
            NotFoundError: If no active row has this key (deleted rows included)
        """
        entity = self._repo.get_active_by_key(key, options=options)
        if entity is None:
            raise NotFoundError(self._entity_name, key, active_only=True)
        return entity

    def get_any_entity(self, key: Any) -> ModelT:
        entity = self._repo.get_by_key_including_deleted(key)
        if entity is None:
            raise NotFoundError(self._entity_name, key)
        return entity

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def delete(self, key: Any) -> None:
        """
        Soft delete an active entity after the dependency check.

        Raises:
            NotFoundError: If there is no active entity with this key
            DependencyBlockedError: If live rows still reference it
            DatabaseError: If the write fails
        """
        key = self.normalize_key(key)
        logger.info(f"Deleting {self._entity_name.lower()}", key=key)
        entity = self.get_active_entity(key)
        self._lifecycle.delete(entity)

    def reactivate(self, key: Any) -> None:
        """
        Bring a soft-deleted entity back.

        Raises:
            NotFoundError: If no row has this key
            AlreadyActiveError: If the entity is not deleted
            DatabaseError: If the write fails
        """
        key = self.normalize_key(key)
        logger.info(f"Reactivating {self._entity_name.lower()}", key=key)
        entity = self.get_any_entity(key)
        self._lifecycle.reactivate(entity)

    def check_dependents(self, key: Any) -> DependencyReport:
        """Run the dependency probes without deleting anything."""
        key = self.normalize_key(key)
        self.get_active_entity(key)
        dependencies = self._guard.check(key) if self._guard else {}
        return DependencyReport(
            entity_type=self._entity_name,
            entity_id=str(key),
            dependencies=dependencies,
            can_delete=not any(dependencies.values()),
        )

    # =========================================================================
    # Listing
    # =========================================================================

    def _paginate(
        self,
        predicate: Predicate,
        ordering: Sequence[Any],
        page_number: int,
        page_size: int,
    ) -> PageOutput[OutputT]:
        page = self._repo.page(predicate, ordering, page_number, page_size)
        return PageOutput[self._output_schema](
            items=[self.to_output(e) for e in page.items],
            pagination=page.meta(),
        )

    def list_outputs(self, entities: Sequence[ModelT]) -> list[OutputT]:
        return [self.to_output(e) for e in entities]

    # =========================================================================
    # Transformation / persistence
    # =========================================================================

    def to_output(self, entity: ModelT) -> OutputT:
        """Convert entity to output DTO. Override for custom fields."""
        return self._output_schema.model_validate(entity)

    def commit(self, operation: str, **log_context: Any) -> None:
        """
        Save pending changes; on storage failure roll back and raise
        DatabaseError with a generic message.
        """
        try:
            self._repo.save_changes()
        except SQLAlchemyError as e:
            logger.error(
                f"Failed while {operation}",
                error=str(e),
                exc_info=True,
                **log_context,
            )
            raise DatabaseError(operation)
