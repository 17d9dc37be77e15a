"""
Employee Service.

WHAT: Business logic for employee accounts.

WHY: Employee records hold credentials, so this service:
1. Rejects duplicate emails or phones before writing
2. Only attaches employees to stores that exist
3. Stores passwords only in derived form
4. Never hands the password field back (the response schema has none)

HOW: Uses EmployeeDAO/StoreDAO and an injected PasswordHasher. The duplicate
pre-check gives a clear error early; the unique constraints on
employees.email and employees.phone decide concurrent duplicates, and a
violation at write time is reported as the same EmployeeConflictError.
"""

import logging
from typing import Any, List, Mapping, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.core.exceptions import (
    EmployeeConflictError,
    ResourceAlreadyExistsError,
    StoreNotFoundError,
)
from store_admin.core.security import PasswordHasher
from store_admin.core.validation import (
    coerce_int,
    collect_changes,
    fits_int_column,
    is_present,
    require_fields,
)
from store_admin.dao.employee import EmployeeDAO
from store_admin.dao.store import StoreDAO
from store_admin.models.employee import Employee


logger = logging.getLogger(__name__)

EMPLOYEE_DETAIL_FIELDS = ("name", "email", "store_id", "access_to", "employee_id", "phone")
EMPLOYEE_NULLABLE = ("name", "phone", "employee_id")


class EmployeeService:
    """
    Service for employee management.

    Example:
        hasher = PasswordHasher(PasswordHashingConfig(salt=settings.PASSWORD_SALT))
        service = EmployeeService(session, hasher)
        employee = await service.create_employee(
            {"email": "a@x.com", "password": "pw", "store_id": 1}
        )
    """

    def __init__(self, session: AsyncSession, hasher: PasswordHasher):
        """
        Initialize EmployeeService.

        Args:
            session: Async database session
            hasher: Password derivation configured for this deployment
        """
        self.session = session
        self.hasher = hasher
        self.employee_dao = EmployeeDAO(session)
        self.store_dao = StoreDAO(session)

    async def _require_store(self, raw_store_id: Any) -> int:
        """
        Resolve a store reference.

        Raises:
            StoreNotFoundError: If the id is malformed or unknown
        """
        store_id = coerce_int(raw_store_id)
        if (
            store_id is None
            or not fits_int_column(store_id)
            or not await self.store_dao.exists(id=store_id)
        ):
            raise StoreNotFoundError(message="Store does not exist.", store_id=raw_store_id)
        return store_id

    async def _ensure_unique(
        self,
        email: Optional[str],
        phone: Optional[str],
        exclude_id: Optional[int] = None,
    ) -> None:
        existing = await self.employee_dao.find_by_email_or_phone(
            email, phone, exclude_id=exclude_id
        )
        if existing is not None:
            raise EmployeeConflictError(email=email, phone=phone)

    async def create_employee(self, data: Mapping[str, Any]) -> Employee:
        """
        Create an employee account.

        Checks run in order: required fields, duplicate email/phone, store
        existence.

        Args:
            data: email, password, store_id (required); name, phone,
                access_to, employee_id

        Returns:
            Created Employee

        Raises:
            InvalidPayloadError: If email, password or store_id is missing
            EmployeeConflictError: If email or phone is already used
            StoreNotFoundError: If the store does not exist
        """
        require_fields(
            data,
            ["email", "password", "store_id"],
            "email, password, and storeId are required.",
        )

        email = data["email"]
        phone = data.get("phone") if is_present(data.get("phone")) else None

        await self._ensure_unique(email, phone)
        store_id = await self._require_store(data["store_id"])

        try:
            employee = await self.employee_dao.create(
                name=data.get("name"),
                email=email,
                phone=phone,
                password=self.hasher.hash(data["password"]),
                store_id=store_id,
                access_to=data.get("access_to") or [],
                employee_id=data.get("employee_id"),
            )
        except ResourceAlreadyExistsError as exc:
            # Lost a race with a concurrent creation; the constraint decides.
            raise EmployeeConflictError(email=email, phone=phone) from exc

        logger.info(f"Created employee {employee.id} at store {store_id}")
        return employee

    async def update_employee_details(self, employee_id: int, data: Mapping[str, Any]) -> Employee:
        """
        Partially update an employee's details (not the password).

        Raises:
            EmployeeNotFoundError: If the employee does not exist
            EmployeeConflictError: If the new email or phone is taken
            StoreNotFoundError: If a new store_id does not exist
        """
        await self.employee_dao.get_or_raise(employee_id)
        changes = collect_changes(data, EMPLOYEE_DETAIL_FIELDS, EMPLOYEE_NULLABLE)
        if "email" in changes and not is_present(changes["email"]):
            del changes["email"]
        if "phone" in changes and not is_present(changes["phone"]):
            changes["phone"] = None

        if "email" in changes or "phone" in changes:
            await self._ensure_unique(
                changes.get("email"), changes.get("phone"), exclude_id=employee_id
            )
        if "store_id" in changes:
            changes["store_id"] = await self._require_store(changes["store_id"])

        try:
            employee = await self.employee_dao.update(employee_id, **changes)
        except ResourceAlreadyExistsError as exc:
            raise EmployeeConflictError(employee_id=employee_id) from exc

        logger.info(f"Updated employee {employee_id}")
        return employee

    async def update_employee_password(self, employee_id: int, data: Mapping[str, Any]) -> Employee:
        """
        Replace an employee's password.

        Raises:
            InvalidPayloadError: If password is missing
            EmployeeNotFoundError: If the employee does not exist
        """
        require_fields(data, ["password"], "password is required.")
        hashed = self.hasher.hash(data["password"])
        employee = await self.employee_dao.update(employee_id, password=hashed)
        logger.info(f"Changed password of employee {employee_id}")
        return employee

    async def delete_employee(self, employee_id: int) -> Employee:
        """
        Raises:
            EmployeeNotFoundError: If the employee does not exist
        """
        employee = await self.employee_dao.delete(employee_id)
        logger.info(f"Deleted employee {employee_id}")
        return employee

    async def get_employees(self) -> List[Employee]:
        """Non-admin employees, newest first."""
        return await self.employee_dao.list_non_admin()

    async def get_employee_by_id(self, employee_id: int) -> Employee:
        """
        Raises:
            EmployeeNotFoundError: If the employee does not exist
        """
        return await self.employee_dao.get_or_raise(employee_id)
