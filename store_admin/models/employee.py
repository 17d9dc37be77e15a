"""
Employee model.

WHY: Employees are the staff accounts of a store. Email and phone are unique
at the database level; the service pre-checks them too, but the constraint
is what decides a concurrent duplicate.
"""

import enum
from sqlalchemy import Column, Integer, String, Enum, ForeignKey, JSON
from sqlalchemy.orm import relationship

from store_admin.models.base import Base, TimestampMixin, PrimaryKeyMixin


class EmployeeRole(str, enum.Enum):
    """
    Employee role enumeration.

    WHY: ADMIN accounts are back-office operators and are left out of the
    employee listing.
    """

    ADMIN = "ADMIN"
    STAFF = "STAFF"


class Employee(Base, PrimaryKeyMixin, TimestampMixin):
    """
    Employee model.

    Attributes:
        name: Full name
        email: Login email (unique)
        phone: Phone number (unique when set)
        password: PBKDF2-derived hash, hex encoded; never serialized
        store_id: Store the employee works at
        role: ADMIN or STAFF
        access_to: List of feature/area grants
        employee_id: External (HR) identifier
    """

    __tablename__ = "employees"

    name = Column(String(255), nullable=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    phone = Column(String(50), unique=True, index=True, nullable=True)
    password = Column(String(255), nullable=False)

    store_id = Column(Integer, ForeignKey("stores.id"), nullable=False, index=True)
    role = Column(
        Enum(EmployeeRole, name="employeerole"),
        nullable=False,
        default=EmployeeRole.STAFF,
    )
    access_to = Column(JSON, nullable=False, default=list)
    employee_id = Column(String(100), nullable=True)

    store = relationship("Store")

    def __repr__(self) -> str:
        return f"<Employee(id={self.id}, email={self.email}, role={self.role})>"
