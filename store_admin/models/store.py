"""
Store model.

WHY: A store is a physical location. Employees work at exactly one store and
every booking is taken at one store.
"""

from sqlalchemy import Column, String, JSON

from store_admin.models.base import Base, TimestampMixin, PrimaryKeyMixin


class Store(Base, PrimaryKeyMixin, TimestampMixin):
    """
    Store model.

    Attributes:
        id: Primary key
        name: Display name
        address: Postal address
        phone: Contact phone number
        store_location: Optional geolocation, e.g. {"lat": 12.97, "lng": 77.59}
    """

    __tablename__ = "stores"

    name = Column(String(255), nullable=False)
    address = Column(String(500), nullable=False)
    phone = Column(String(50), nullable=False)
    store_location = Column(JSON, nullable=True)

    def __repr__(self) -> str:
        return f"<Store(id={self.id}, name={self.name})>"
