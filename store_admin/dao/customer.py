"""
Customer Data Access Object.

WHY: Customers are owned by the customer-facing signup flow; the admin side
only needs existence checks and, for seeding, creation.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.dao.base import BaseDAO
from store_admin.models.customer import Customer
from store_admin.core.exceptions import CustomerNotFoundError


class CustomerDAO(BaseDAO[Customer]):
    """Data Access Object for Customer model."""

    not_found_error = CustomerNotFoundError

    def __init__(self, session: AsyncSession):
        super().__init__(Customer, session)
