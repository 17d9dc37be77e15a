"""
Data Access Object (DAO) package.

WHY: DAOs provide a clean separation between database operations and business logic,
making the codebase more testable and maintainable.
"""

from store_admin.dao.base import BaseDAO
from store_admin.dao.store import StoreDAO
from store_admin.dao.customer import CustomerDAO
from store_admin.dao.employee import EmployeeDAO
from store_admin.dao.package import PackageDAO
from store_admin.dao.booking import BookingDAO

__all__ = [
    "BaseDAO",
    "StoreDAO",
    "CustomerDAO",
    "EmployeeDAO",
    "PackageDAO",
    "BookingDAO",
]
