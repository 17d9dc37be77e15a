"""
Booking model.

WHAT: A customer's booking at a store, either of a package or custom-priced.

WHY: price and overs are stored on the booking itself. For Package bookings
they are a snapshot of the package at creation time; package_id is kept
only as a reference to where the values came from.

Invariant:
- booking_type == PACKAGE  => package_id is set
- booking_type == CUSTOM   => package_id is NULL
- price and overs are positive integers in both cases
"""

import enum
from datetime import datetime
from sqlalchemy import CheckConstraint, Column, Integer, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship, validates

from store_admin.core.validation import positive_int
from store_admin.models.base import Base, PrimaryKeyMixin


class BookingType(str, enum.Enum):
    """How the booking was priced."""

    PACKAGE = "Package"
    CUSTOM = "Custom"


class Booking(Base, PrimaryKeyMixin):
    """
    Booking model.

    Attributes:
        store_id: Store the booking was taken at
        customer_id: Customer who booked
        booking_type: PACKAGE or CUSTOM
        package_id: Source package for PACKAGE bookings, NULL otherwise
        price: Price charged, positive
        overs: Overs booked, positive
        created_at: Creation time
    """

    __tablename__ = "bookings"
    __table_args__ = (
        CheckConstraint("price > 0", name="ck_bookings_price_positive"),
        CheckConstraint("overs > 0", name="ck_bookings_overs_positive"),
    )

    store_id = Column(Integer, ForeignKey("stores.id"), nullable=False, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, index=True)
    booking_type = Column(
        Enum(
            BookingType,
            name="bookingtype",
            values_callable=lambda members: [m.value for m in members],
        ),
        nullable=False,
    )
    package_id = Column(Integer, ForeignKey("packages.id"), nullable=True, index=True)
    price = Column(Integer, nullable=False)
    overs = Column(Integer, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    store = relationship("Store")
    customer = relationship("Customer")
    package = relationship("Package")

    @validates("price", "overs")
    def _validate_positive_int(self, key, value):
        return positive_int(key, value)

    def __repr__(self) -> str:
        return (
            f"<Booking(id={self.id}, type={self.booking_type}, "
            f"price={self.price}, overs={self.overs})>"
        )
