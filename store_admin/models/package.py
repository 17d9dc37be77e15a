"""
Package model.

WHAT: A predefined service offering with a fixed price and a number of overs.

WHY: Bookings of type Package copy price and overs from here at creation
time, so editing a package never rewrites past bookings.
"""

from sqlalchemy import CheckConstraint, Column, Integer, String, Text
from sqlalchemy.orm import validates

from store_admin.core.validation import positive_int
from store_admin.models.base import Base, TimestampMixin, PrimaryKeyMixin


class Package(Base, PrimaryKeyMixin, TimestampMixin):
    """
    Service package.

    Attributes:
        name: Internal name (e.g. "Net1")
        title: Display title
        description: Marketing description
        price: Price in minor currency units, positive
        overs: Number of overs included, positive
    """

    __tablename__ = "packages"
    __table_args__ = (
        CheckConstraint("price > 0", name="ck_packages_price_positive"),
        CheckConstraint("overs > 0", name="ck_packages_overs_positive"),
    )

    name = Column(String(255), nullable=False)
    title = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    price = Column(Integer, nullable=False)
    overs = Column(Integer, nullable=False)

    @validates("price", "overs")
    def _validate_positive_int(self, key, value):
        # Runs on construction and on every assignment, create and update alike.
        return positive_int(key, value)

    def __repr__(self) -> str:
        return f"<Package(id={self.id}, name={self.name}, price={self.price}, overs={self.overs})>"
