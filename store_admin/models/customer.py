"""
Customer model.

WHY: Customers sign up through the customer-facing app; this backend only
looks them up when a booking references one.
"""

from sqlalchemy import Column, String

from store_admin.models.base import Base, TimestampMixin, PrimaryKeyMixin


class Customer(Base, PrimaryKeyMixin, TimestampMixin):
    """Customer contact record."""

    __tablename__ = "customers"

    name = Column(String(255), nullable=True)
    email = Column(String(255), unique=True, index=True, nullable=True)
    phone = Column(String(50), unique=True, index=True, nullable=True)

    def __repr__(self) -> str:
        return f"<Customer(id={self.id}, email={self.email})>"
