"""
Airline Models: Airline and the rows that reference it (Aircraft, FlightSchedule, RouteOperator).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, SoftDeleteMixin

if TYPE_CHECKING:
    from .geography import Airport


class Airline(SoftDeleteMixin, Base):
    """
    Operating carrier keyed by its two-letter IATA code.
    Inherits: is_deleted, created_at, updated_at, deleted_at from SoftDeleteMixin.
    """

    __tablename__ = "airline"

    iata_code: Mapped[str] = mapped_column(String(2), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    callsign: Mapped[str] = mapped_column(String(50), nullable=False)
    operating_region: Mapped[str] = mapped_column(String(50), nullable=False)
    base_airport_id: Mapped[str] = mapped_column(
        String(3), ForeignKey("airport.iata_code"), nullable=False, index=True
    )

    # Relationships
    base_airport: Mapped["Airport"] = relationship(back_populates="based_airlines")
    aircraft: Mapped[list["Aircraft"]] = relationship(back_populates="airline")
    flight_schedules: Mapped[list["FlightSchedule"]] = relationship(back_populates="airline")
    route_operators: Mapped[list["RouteOperator"]] = relationship(back_populates="airline")

    __table_args__ = (
        Index("ix_airline_region_deleted", "operating_region", "is_deleted"),
    )


class Aircraft(SoftDeleteMixin, Base):
    """Airframe registered to an airline."""

    __tablename__ = "aircraft"

    tail_number: Mapped[str] = mapped_column(String(10), primary_key=True)
    model: Mapped[str] = mapped_column(String(50), nullable=False)
    airline_id: Mapped[str] = mapped_column(
        String(2), ForeignKey("airline.iata_code"), nullable=False, index=True
    )

    airline: Mapped["Airline"] = relationship(back_populates="aircraft")


class FlightSchedule(SoftDeleteMixin, Base):
    __tablename__ = "flight_schedule"

    schedule_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    flight_no: Mapped[str] = mapped_column(String(10), nullable=False)
    airline_id: Mapped[str] = mapped_column(
        String(2), ForeignKey("airline.iata_code"), nullable=False, index=True
    )

    airline: Mapped["Airline"] = relationship(back_populates="flight_schedules")


class RouteOperator(SoftDeleteMixin, Base):
    """Airline assignment on a route (codeshare or operating carrier)."""

    __tablename__ = "route_operator"

    route_operator_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    route_code: Mapped[str] = mapped_column(String(20), nullable=False)
    airline_id: Mapped[str] = mapped_column(
        String(2), ForeignKey("airline.iata_code"), nullable=False, index=True
    )

    airline: Mapped["Airline"] = relationship(back_populates="route_operators")
