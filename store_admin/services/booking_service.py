"""
Booking Service.

WHAT: Turns a booking request into a persisted, internally consistent
Booking, and lists bookings.

WHY: A booking is the only record whose content is derived from other
records. The service guarantees:
1. The customer and the store exist (customer is checked first)
2. Package bookings copy the package's current price and overs, so later
   package edits never change past bookings
3. Custom bookings carry the caller's price and overs as integers
4. Nothing is written unless every check passed

HOW: Validates the request shape, resolves references through the DAOs,
dispatches on booking type and writes exactly one row through BookingDAO.
"""

import logging
from typing import Any, List, Mapping, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.core.validation import coerce_int, require_fields, require_integer
from store_admin.dao.base import BaseDAO
from store_admin.dao.booking import BookingDAO
from store_admin.dao.customer import CustomerDAO
from store_admin.dao.package import PackageDAO
from store_admin.dao.store import StoreDAO
from store_admin.models.booking import Booking, BookingType


logger = logging.getLogger(__name__)


class BookingService:
    """
    Service for booking creation and listing.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize BookingService.

        Args:
            session: Async database session
        """
        self.session = session
        self.booking_dao = BookingDAO(session)
        self.customer_dao = CustomerDAO(session)
        self.store_dao = StoreDAO(session)
        self.package_dao = PackageDAO(session)

    async def _resolve(self, dao: BaseDAO, raw_id: Any):
        """
        Load the record a request refers to.

        An id that is not an integer cannot match any row and is reported
        the same way as an unknown id.

        Raises:
            ResourceNotFoundError: The DAO's typed not-found error
        """
        record_id = coerce_int(raw_id)
        if record_id is None:
            raise dao.not_found_error(resource_id=raw_id)
        return await dao.get_or_raise(record_id)

    async def create_booking(self, data: Mapping[str, Any]) -> Optional[Booking]:
        """
        Create a booking.

        Args:
            data: store_id, customer_id, booking_type (required);
                package_id for "Package" bookings; price and overs for
                "Custom" bookings. Ids and numbers may be numeric strings.

        Returns:
            The persisted Booking, or None if booking_type is neither
            "Package" nor "Custom" (nothing is written in that case)

        Raises:
            InvalidPayloadError: Missing store_id/customer_id/booking_type, or
                missing/non-integer price or overs on a Custom booking
            CustomerNotFoundError: Unknown customer
            StoreNotFoundError: Unknown store
            PackageNotFoundError: Unknown or missing package on a Package booking
        """
        require_fields(
            data,
            ["store_id", "customer_id", "booking_type"],
            "storeId, customerId, bookingType are required.",
        )

        customer = await self._resolve(self.customer_dao, data["customer_id"])
        store = await self._resolve(self.store_dao, data["store_id"])
        booking_type = data["booking_type"]

        if booking_type == BookingType.PACKAGE.value:
            package = await self._resolve(self.package_dao, data.get("package_id"))
            booking = await self.booking_dao.create(
                store_id=store.id,
                customer_id=customer.id,
                booking_type=BookingType.PACKAGE,
                package_id=package.id,
                price=package.price,
                overs=package.overs,
            )
            logger.info(
                f"Created package booking {booking.id} for customer {customer.id} "
                f"at store {store.id} from package {package.id}"
            )
            return booking

        if booking_type == BookingType.CUSTOM.value:
            price = require_integer(data, "price")
            overs = require_integer(data, "overs")
            booking = await self.booking_dao.create(
                store_id=store.id,
                customer_id=customer.id,
                booking_type=BookingType.CUSTOM,
                package_id=None,
                price=price,
                overs=overs,
            )
            logger.info(
                f"Created custom booking {booking.id} for customer {customer.id} "
                f"at store {store.id}"
            )
            return booking

        logger.warning(f"Rejected booking with unknown type {booking_type!r}")
        return None

    async def get_bookings(self) -> List[Booking]:
        """All bookings, newest first."""
        return await self.booking_dao.list_bookings()

    async def get_bookings_by_store(self, store_id: int) -> List[Booking]:
        """
        Bookings of one store, newest first.

        Raises:
            StoreNotFoundError: If the store does not exist
        """
        await self.store_dao.get_or_raise(store_id)
        return await self.booking_dao.list_by_store(store_id)
