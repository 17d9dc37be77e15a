"""
Store Data Access Object.
"""

from typing import List
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.dao.base import BaseDAO
from store_admin.models.store import Store
from store_admin.core.exceptions import StoreNotFoundError


class StoreDAO(BaseDAO[Store]):
    """Data Access Object for Store model."""

    not_found_error = StoreNotFoundError

    def __init__(self, session: AsyncSession):
        super().__init__(Store, session)

    async def list_stores(self) -> List[Store]:
        """All stores in creation order."""
        return await self.get_all(order_by=[Store.id])
