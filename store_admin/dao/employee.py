"""
Employee Data Access Object.

WHAT: Database operations for Employee, including the duplicate lookup used
before creation and the staff listing.
"""

from typing import List, Optional
from sqlalchemy import select, or_, func
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.dao.base import BaseDAO
from store_admin.models.employee import Employee, EmployeeRole
from store_admin.core.exceptions import EmployeeNotFoundError


class EmployeeDAO(BaseDAO[Employee]):
    """
    Data Access Object for Employee model.
    """

    not_found_error = EmployeeNotFoundError

    def __init__(self, session: AsyncSession):
        super().__init__(Employee, session)

    async def find_by_email_or_phone(
        self,
        email: Optional[str],
        phone: Optional[str] = None,
        exclude_id: Optional[int] = None,
    ) -> Optional[Employee]:
        """
        Find an employee whose email or phone matches.

        Email comparison is case-insensitive. An absent phone is not used as
        a match criterion, so employees without a phone never collide.

        Args:
            email: Email to look for
            phone: Phone to look for, if any
            exclude_id: Employee to ignore (the one being updated)

        Returns:
            First matching Employee, or None
        """
        conditions = []
        if email:
            conditions.append(func.lower(Employee.email) == email.lower())
        if phone:
            conditions.append(Employee.phone == phone)
        if not conditions:
            return None

        query = select(Employee).where(or_(*conditions))
        if exclude_id is not None:
            query = query.where(Employee.id != exclude_id)

        result = await self.session.execute(query.limit(1))
        return result.scalar_one_or_none()

    async def list_non_admin(self) -> List[Employee]:
        """
        Employees other than ADMIN accounts, newest first.
        """
        result = await self.session.execute(
            select(Employee)
            .where(Employee.role != EmployeeRole.ADMIN)
            .order_by(Employee.created_at.desc(), Employee.id.desc())
        )
        return list(result.scalars().all())

