"""
Database models package.

WHY: Centralizing model imports ensures Alembic can discover all models
for migration generation and makes it easier to import models elsewhere.
"""

from store_admin.models.base import Base, TimestampMixin, PrimaryKeyMixin
from store_admin.models.store import Store
from store_admin.models.customer import Customer
from store_admin.models.employee import Employee, EmployeeRole
from store_admin.models.package import Package
from store_admin.models.booking import Booking, BookingType

__all__ = [
    "Base",
    "TimestampMixin",
    "PrimaryKeyMixin",
    "Store",
    "Customer",
    "Employee",
    "EmployeeRole",
    "Package",
    "Booking",
    "BookingType",
]
