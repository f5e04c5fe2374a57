"""
Geography Models: Country, Airport.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, SoftDeleteMixin

if TYPE_CHECKING:
    from .airline import Airline


class Country(SoftDeleteMixin, Base):
    """
    Country keyed by its ISO 3166 alpha-3 code.
    Inherits: is_deleted, created_at, updated_at, deleted_at from SoftDeleteMixin.
    """

    __tablename__ = "country"

    iso_code: Mapped[str] = mapped_column(String(3), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    continent: Mapped[str] = mapped_column(String(50), nullable=False)

    airports: Mapped[list["Airport"]] = relationship(back_populates="country")


class Airport(SoftDeleteMixin, Base):
    """Airport keyed by its IATA code. Blocks deletion of its country while active."""

    __tablename__ = "airport"

    iata_code: Mapped[str] = mapped_column(String(3), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    city: Mapped[Optional[str]] = mapped_column(String(100))
    country_id: Mapped[str] = mapped_column(
        String(3), ForeignKey("country.iso_code"), nullable=False, index=True
    )

    country: Mapped["Country"] = relationship(back_populates="airports")
    based_airlines: Mapped[list["Airline"]] = relationship(back_populates="base_airport")
