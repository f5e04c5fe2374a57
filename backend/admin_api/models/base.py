"""
Base class and SoftDeleteMixin for all SQLAlchemy ORM models.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Boolean, DateTime, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from shared.config.constants import LifecycleState


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class SoftDeleteMixin:
    """
    Mixin providing the soft delete flag and audit timestamps.

    Fields added:
    - is_deleted: Soft delete flag (True = deleted, False = active)
    - created_at, updated_at, deleted_at: Audit timestamps

    Rows are never physically removed; a deleted row stays addressable
    by its key so it can be reactivated.
    """

    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), onupdate=func.now(), nullable=True
    )
    deleted_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    @property
    def lifecycle_state(self) -> LifecycleState:
        return LifecycleState.DELETED if self.is_deleted else LifecycleState.ACTIVE

    def mark_deleted(self) -> None:
        """Flip to DELETED. Callers check the current state first."""
        self.is_deleted = True
        self.deleted_at = datetime.now(timezone.utc)

    def mark_active(self) -> None:
        """Flip back to ACTIVE."""
        self.is_deleted = False
        self.deleted_at = None
        self.updated_at = datetime.now(timezone.utc)

    def __repr__(self) -> str:
        class_name = self.__class__.__name__
        state = self.lifecycle_state.value.lower()
        return f"<{class_name}({state})>"
