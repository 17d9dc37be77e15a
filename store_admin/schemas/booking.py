"""
Pydantic schemas for booking endpoints.

WHAT: Request/response schemas for bookings.

WHY: The request accepts loosely typed values; BookingService decides which
fields are required for the chosen bookingType and reports bad ones.
Listings embed the store, customer and package records.
"""

from datetime import datetime
from typing import Any, List, Optional

from store_admin.models.booking import BookingType
from store_admin.schemas.common import CamelModel, CamelResponse
from store_admin.schemas.package import PackageResponse
from store_admin.schemas.store import StoreResponse


class BookingCreate(CamelModel):
    """
    Booking creation request.

    Example:
        {"storeId": 1, "customerId": 1, "bookingType": "Package", "packageId": 3}
        {"storeId": 1, "customerId": 1, "bookingType": "Custom", "price": "450", "overs": "5"}
    """

    store_id: Any = None
    customer_id: Any = None
    booking_type: Any = None
    package_id: Any = None
    price: Any = None
    overs: Any = None


class CustomerResponse(CamelResponse):
    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class BookingResponse(CamelResponse):
    id: int
    store_id: int
    customer_id: int
    booking_type: BookingType
    package_id: Optional[int] = None
    price: int
    overs: int
    created_at: datetime


class BookingDetailResponse(BookingResponse):
    store: StoreResponse
    customer: CustomerResponse
    package: Optional[PackageResponse] = None


class BookingEnvelope(CamelResponse):
    valid: bool = True
    booking: BookingResponse


class BookingListEnvelope(CamelResponse):
    valid: bool = True
    bookings: List[BookingDetailResponse]
