"""
Pricing Models: FareBasisCode, Booking, AncillaryProduct,
ContextualPricingAttributes, PriceOfferLog.

Monetary columns are integer cents.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, SoftDeleteMixin

CENTS = Decimal(100)


class FareBasisCode(SoftDeleteMixin, Base):
    """
    Fare basis code (e.g. "Y", "QOW/KF").
    Inherits: is_deleted, created_at, updated_at, deleted_at from SoftDeleteMixin.
    """

    __tablename__ = "fare_basis_code"

    code: Mapped[str] = mapped_column(String(10), primary_key=True)
    description: Mapped[str] = mapped_column(String(255), nullable=False)
    rules: Mapped[str] = mapped_column(Text, nullable=False)

    bookings: Mapped[list["Booking"]] = relationship(back_populates="fare_basis_code")


class Booking(SoftDeleteMixin, Base):
    __tablename__ = "booking"

    booking_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    booking_reference: Mapped[str] = mapped_column(String(6), nullable=False, unique=True)
    fare_basis_code_id: Mapped[Optional[str]] = mapped_column(
        String(10), ForeignKey("fare_basis_code.code"), index=True
    )

    fare_basis_code: Mapped[Optional["FareBasisCode"]] = relationship(back_populates="bookings")


class AncillaryProduct(SoftDeleteMixin, Base):
    """Sellable extra (bags, seats, lounge access)."""

    __tablename__ = "ancillary_product"

    product_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    base_cost_cents: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class ContextualPricingAttributes(SoftDeleteMixin, Base):
    """Snapshot of the inputs used when a price was offered."""

    __tablename__ = "contextual_pricing_attributes"

    attribute_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    time_until_departure: Mapped[Optional[int]] = mapped_column(Integer)
    length_of_stay: Mapped[Optional[int]] = mapped_column(Integer)
    competitor_fares: Mapped[Optional[str]] = mapped_column(Text)
    willingness_to_pay: Mapped[Optional[int]] = mapped_column(Integer)


class PriceOfferLog(SoftDeleteMixin, Base):
    """
    One logged price offer. References exactly one of a fare basis code or
    an ancillary product, plus the pricing context it was computed from.
    Immutable after creation apart from its soft delete flag.
    """

    __tablename__ = "price_offer_log"

    offer_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    offer_price_cents: Mapped[int] = mapped_column(Integer, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    context_attributes_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("contextual_pricing_attributes.attribute_id"),
        nullable=False,
        index=True,
    )
    fare_id: Mapped[Optional[str]] = mapped_column(
        String(10), ForeignKey("fare_basis_code.code"), index=True
    )
    ancillary_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("ancillary_product.product_id"), index=True
    )

    context_attributes: Mapped["ContextualPricingAttributes"] = relationship()
    fare: Mapped[Optional["FareBasisCode"]] = relationship()
    ancillary: Mapped[Optional["AncillaryProduct"]] = relationship()

    __table_args__ = (
        CheckConstraint(
            "(fare_id IS NULL) <> (ancillary_id IS NULL)",
            name="ck_price_offer_log_one_subject",
        ),
        CheckConstraint("offer_price_cents > 0", name="ck_price_offer_log_positive"),
        Index("ix_price_offer_log_fare_ts", "fare_id", "timestamp"),
        Index("ix_price_offer_log_ancillary_ts", "ancillary_id", "timestamp"),
    )

    @property
    def offer_price_quote(self) -> Decimal:
        return Decimal(self.offer_price_cents) / CENTS
