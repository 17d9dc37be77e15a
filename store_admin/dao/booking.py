"""
Booking Data Access Object.

WHAT: Database operations for Booking. Listings eager-load the store,
customer and package so responses can embed them without lazy loads.
"""

from typing import List
from sqlalchemy import select
from sqlalchemy.orm import selectinload
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.dao.base import BaseDAO
from store_admin.models.booking import Booking
from store_admin.core.exceptions import BookingNotFoundError


class BookingDAO(BaseDAO[Booking]):
    """Data Access Object for Booking model."""

    not_found_error = BookingNotFoundError

    def __init__(self, session: AsyncSession):
        super().__init__(Booking, session)

    def _with_relations(self):
        # populate_existing: bookings already in the session still get their
        # relations loaded
        return (
            select(Booking)
            .options(
                selectinload(Booking.store),
                selectinload(Booking.customer),
                selectinload(Booking.package),
            )
            .execution_options(populate_existing=True)
        )

    async def list_bookings(self) -> List[Booking]:
        """
        All bookings, newest first, with store/customer/package loaded.
        """
        result = await self.session.execute(
            self._with_relations().order_by(Booking.created_at.desc(), Booking.id.desc())
        )
        return list(result.scalars().all())

    async def list_by_store(self, store_id: int) -> List[Booking]:
        """
        Bookings taken at one store, newest first, with relations loaded.

        Args:
            store_id: Store ID

        Returns:
            List of Booking instances (empty if the store has none)
        """
        result = await self.session.execute(
            self._with_relations()
            .where(Booking.store_id == store_id)
            .order_by(Booking.created_at.desc(), Booking.id.desc())
        )
        return list(result.scalars().all())

    async def is_package_referenced(self, package_id: int) -> bool:
        return await self.exists(package_id=package_id)

    async def is_store_referenced(self, store_id: int) -> bool:
        return await self.exists(store_id=store_id)
