"""
Employee management API endpoints.

WHAT: Admin CRUD for employee accounts plus a password change endpoint.

WHY: Employee records carry credentials:
1. Passwords are only ever stored in derived form
2. No response contains the password field (EmployeeResponse has none)
3. Email and phone must stay unique across employees

HOW: Thin FastAPI routes over EmployeeService. The password hasher is a
dependency so deployments (and tests) can supply their own configuration.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.core.security import PasswordHasher, get_password_hasher
from store_admin.db.session import get_db
from store_admin.schemas.employee import (
    EmployeeCreate,
    EmployeeUpdate,
    EmployeePasswordUpdate,
    EmployeeResponse,
    EmployeeEnvelope,
    EmployeeListEnvelope,
)
from store_admin.services.employee_service import EmployeeService


router = APIRouter(prefix="/admin/employees", tags=["employees"])


def get_employee_service(
    db: AsyncSession = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> EmployeeService:
    return EmployeeService(db, hasher)


def _employee_to_response(employee) -> EmployeeResponse:
    return EmployeeResponse.model_validate(employee)


@router.get("", response_model=EmployeeListEnvelope)
async def list_employees(
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeListEnvelope:
    """List non-admin employees, newest first."""
    employees = await service.get_employees()
    return EmployeeListEnvelope(employees=[_employee_to_response(e) for e in employees])


@router.post("", response_model=EmployeeEnvelope, status_code=status.HTTP_201_CREATED)
async def create_employee(
    employee_data: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeEnvelope:
    """
    Create an employee.

    Body: {"email", "password", "storeId", "name"?, "phone"?, "accessTo"?, "employeeId"?}

    Fails with 409 when the email (case-insensitive) or phone is already used,
    and with 404 when the store does not exist.
    """
    employee = await service.create_employee(employee_data.model_dump(exclude_unset=True))
    return EmployeeEnvelope(employee=_employee_to_response(employee))


@router.get("/{employee_id}", response_model=EmployeeEnvelope)
async def get_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeEnvelope:
    employee = await service.get_employee_by_id(employee_id)
    return EmployeeEnvelope(employee=_employee_to_response(employee))


@router.put("/{employee_id}", response_model=EmployeeEnvelope)
async def update_employee(
    employee_id: int,
    employee_data: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeEnvelope:
    """Partially update an employee's details. Passwords are changed separately."""
    employee = await service.update_employee_details(
        employee_id, employee_data.model_dump(exclude_unset=True)
    )
    return EmployeeEnvelope(employee=_employee_to_response(employee))


@router.put("/{employee_id}/password", response_model=EmployeeEnvelope)
async def update_employee_password(
    employee_id: int,
    password_data: EmployeePasswordUpdate,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeEnvelope:
    employee = await service.update_employee_password(
        employee_id, password_data.model_dump(exclude_unset=True)
    )
    return EmployeeEnvelope(employee=_employee_to_response(employee))


@router.delete("/{employee_id}", response_model=EmployeeEnvelope)
async def delete_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeEnvelope:
    employee = await service.delete_employee(employee_id)
    return EmployeeEnvelope(employee=_employee_to_response(employee))
