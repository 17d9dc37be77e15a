"""
Package Data Access Object.
"""

from typing import List
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.dao.base import BaseDAO
from store_admin.models.package import Package
from store_admin.core.exceptions import PackageNotFoundError


class PackageDAO(BaseDAO[Package]):
    """Data Access Object for Package model."""

    not_found_error = PackageNotFoundError

    def __init__(self, session: AsyncSession):
        super().__init__(Package, session)

    async def list_packages(self) -> List[Package]:
        return await self.get_all(order_by=[Package.id])
