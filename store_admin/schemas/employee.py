"""
Pydantic schemas for employee endpoints.

WHAT: Request/response schemas for employee management.

WHY: EmployeeResponse has no password field, so neither the plain nor the
derived password can leave the API, whatever the handler returns.
"""

from datetime import datetime
from typing import Any, List, Optional

from store_admin.models.employee import EmployeeRole
from store_admin.schemas.common import CamelModel, CamelResponse


class EmployeeCreate(CamelModel):
    """Employee creation request (email, password and storeId are required by the service)."""

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    phone: Optional[str] = None
    store_id: Any = None
    access_to: Optional[List[str]] = None
    employee_id: Optional[str] = None


class EmployeeUpdate(CamelModel):
    """Partial employee detail update. Passwords change through their own endpoint."""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    store_id: Any = None
    access_to: Optional[List[str]] = None
    employee_id: Optional[str] = None


class EmployeePasswordUpdate(CamelModel):
    password: Optional[str] = None


class EmployeeResponse(CamelResponse):
    id: int
    name: Optional[str] = None
    email: str
    phone: Optional[str] = None
    store_id: int
    role: EmployeeRole
    access_to: List[str] = []
    employee_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class EmployeeEnvelope(CamelResponse):
    valid: bool = True
    employee: EmployeeResponse


class EmployeeListEnvelope(CamelResponse):
    valid: bool = True
    employees: List[EmployeeResponse]
