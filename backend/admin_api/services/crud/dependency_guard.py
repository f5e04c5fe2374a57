"""
Dependency guard for soft deletes.

Before a row moves to DELETED, every probe configured for its type checks
whether live (non-deleted) rows still reference it. All probes always run
so the caller gets the complete list of blocking kinds in one response.
The guard never writes; check() is safe to call speculatively.

Usage:
    guard = DependencyGuard(db, AIRLINE_PROBES)
    report = guard.check("AA")          # {"active aircraft": True, ...}
    guard.ensure_deletable("Airline", "AA")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from sqlalchemy import exists, not_, select
from sqlalchemy.orm import Session

from shared.config.logging import get_logger
from shared.utils.exceptions import DependencyBlockedError

from admin_api.services.query.predicates import Predicate, active_only, compose

logger = get_logger(__name__)


@dataclass(frozen=True)
class DependencyProbe:
    """
    One dependency kind: rows of `model` whose `fk_column` holds the key.

    Attributes:
        label: Human-readable kind, e.g. "active aircraft"
        model: Dependent model class
        fk_column: Attribute name of the referencing column on `model`
    """

    label: str
    model: Any
    fk_column: str

    def referencing(self, key: Any) -> Predicate:
        """Live rows of the dependent model that reference key."""
        column = getattr(self.model, self.fk_column)
        base = active_only(self.model) if hasattr(self.model, "is_deleted") else None
        return compose(base, column == key)

    def exists_clause(self, key: Any):
        return exists().where(self.referencing(key))


def check_dependents(db: Session, key: Any, probes: Sequence[DependencyProbe]) -> dict[str, bool]:
    """Run every probe and map its label to whether a live dependent exists."""
    return {
        probe.label: bool(db.scalar(select(probe.exists_clause(key))))
        for probe in probes
    }


class DependencyGuard:
    """Per-entity-type set of probes bound to a session."""

    def __init__(self, db: Session, probes: Sequence[DependencyProbe]):
        self._db = db
        self._probes = tuple(probes)

    @property
    def probes(self) -> tuple[DependencyProbe, ...]:
        return self._probes

    def check(self, key: Any) -> dict[str, bool]:
        return check_dependents(self._db, key, self._probes)

    def blocking(self, key: Any) -> list[str]:
        """Labels of the probes that found live dependents, in probe order."""
        return [label for label, present in self.check(key).items() if present]

    def ensure_deletable(self, entity_name: str, key: Any) -> None:
        """
        Raises:
            DependencyBlockedError: If any probe found a live dependent
        """
        blocking = self.blocking(key)
        if blocking:
            raise DependencyBlockedError(entity_name, key, blocking)

    def no_live_dependents(self, key: Any) -> Predicate | None:
        """
        NOT EXISTS clause over every probe, for use inside a conditional
        UPDATE so the check and the write happen in one statement.
        """
        if not self._probes:
            return None
        return compose(None, *(not_(probe.exists_clause(key)) for probe in self._probes))
