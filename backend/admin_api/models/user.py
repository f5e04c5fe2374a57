"""
User Models: AppUser and its per-type profile rows.

Every account has one AppUser row. Employees (admins, supervisors, crew)
also have an EmployeeProfile; pilots and attendants add a crew row on top;
passengers have a PassengerProfile.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from sqlalchemy import Date, DateTime, Enum as SQLEnum, ForeignKey, Index, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shared.config.constants import UserType

from .base import Base, SoftDeleteMixin


class AppUser(SoftDeleteMixin, Base):
    """
    Account row. The profile shape is decided by user_type.
    Inherits: is_deleted, created_at, updated_at, deleted_at from SoftDeleteMixin.
    """

    __tablename__ = "app_user"

    user_id: Mapped[str] = mapped_column(String(36), primary_key=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    user_type: Mapped[UserType] = mapped_column(
        SQLEnum(UserType, name="user_type", native_enum=False, validate_strings=True),
        nullable=False,
    )
    date_created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    last_login: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))

    # Relationships (at most one of each)
    employee: Mapped[Optional["EmployeeProfile"]] = relationship(back_populates="user")
    pilot: Mapped[Optional["PilotProfile"]] = relationship(back_populates="user")
    attendant: Mapped[Optional["AttendantProfile"]] = relationship(back_populates="user")
    passenger: Mapped[Optional["PassengerProfile"]] = relationship(back_populates="user")

    __table_args__ = (
        Index("ix_app_user_name", "last_name", "first_name"),
        Index("ix_app_user_type_deleted", "user_type", "is_deleted"),
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self) -> str:
        return f"<AppUser(user_id='{self.user_id}', type={self.user_type.value})>"


class EmployeeProfile(Base):
    """Employment data shared by every staff user type."""

    __tablename__ = "employee_profile"

    employee_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    app_user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("app_user.user_id"), nullable=False, unique=True
    )
    employee_number: Mapped[str] = mapped_column(String(20), nullable=False, unique=True)
    hire_date: Mapped[Optional[date]] = mapped_column(Date)
    department: Mapped[Optional[str]] = mapped_column(String(100))  # ADMIN
    managed_area: Mapped[Optional[str]] = mapped_column(String(100))  # SUPERVISOR

    user: Mapped["AppUser"] = relationship(back_populates="employee")


class PilotProfile(Base):
    __tablename__ = "pilot_profile"

    app_user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("app_user.user_id"), primary_key=True
    )
    license_number: Mapped[str] = mapped_column(String(30), nullable=False)
    total_flight_hours: Mapped[Optional[int]] = mapped_column(Integer)
    crew_base_airport_id: Mapped[Optional[str]] = mapped_column(
        String(3), ForeignKey("airport.iata_code")
    )

    user: Mapped["AppUser"] = relationship(back_populates="pilot")


class AttendantProfile(Base):
    __tablename__ = "attendant_profile"

    app_user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("app_user.user_id"), primary_key=True
    )
    languages: Mapped[Optional[str]] = mapped_column(String(255))  # comma separated
    crew_base_airport_id: Mapped[Optional[str]] = mapped_column(
        String(3), ForeignKey("airport.iata_code")
    )

    user: Mapped["AppUser"] = relationship(back_populates="attendant")


class PassengerProfile(Base):
    """Frequent-flyer data for customer accounts."""

    __tablename__ = "passenger_profile"

    app_user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("app_user.user_id"), primary_key=True
    )
    kris_flyer_tier: Mapped[Optional[str]] = mapped_column(String(20))
    passport_number: Mapped[Optional[str]] = mapped_column(String(20))

    user: Mapped["AppUser"] = relationship(back_populates="passenger")
