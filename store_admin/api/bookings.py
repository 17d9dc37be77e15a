"""
Booking API endpoints.

WHAT: Booking creation and listings (all bookings, or one store's).

WHY: Bookings are built from other records: a Package booking copies the
package's current price and overs, a Custom booking takes them from the
request. An unrecognized bookingType is not an error the caller can fix
field by field, so it is answered with {"valid": false, "message": ...}
and nothing is written.

HOW: Thin FastAPI routes over BookingService.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.db.session import get_db
from store_admin.schemas.booking import (
    BookingCreate,
    BookingResponse,
    BookingDetailResponse,
    BookingEnvelope,
    BookingListEnvelope,
)
from store_admin.schemas.common import SoftFailure
from store_admin.services.booking_service import BookingService


router = APIRouter(prefix="/admin/bookings", tags=["bookings"])

BOOKING_FAILED_MESSAGE = "Failed to create booking"


@router.post(
    "",
    response_model=BookingEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": SoftFailure}},
)
async def create_booking(
    booking_data: BookingCreate,
    db: AsyncSession = Depends(get_db),
):
    """
    Create a booking.

    Body:
        {"storeId", "customerId", "bookingType": "Package", "packageId"}
        {"storeId", "customerId", "bookingType": "Custom", "price", "overs"}
    """
    booking = await BookingService(db).create_booking(booking_data.model_dump(exclude_unset=True))
    if booking is None:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=SoftFailure(message=BOOKING_FAILED_MESSAGE).model_dump(),
        )
    return BookingEnvelope(booking=BookingResponse.model_validate(booking))


@router.get("", response_model=BookingListEnvelope)
async def list_bookings(db: AsyncSession = Depends(get_db)) -> BookingListEnvelope:
    """All bookings, newest first, with store, customer and package embedded."""
    bookings = await BookingService(db).get_bookings()
    return BookingListEnvelope(
        bookings=[BookingDetailResponse.model_validate(b) for b in bookings]
    )


@router.get("/store/{store_id}", response_model=BookingListEnvelope)
async def list_store_bookings(
    store_id: int,
    db: AsyncSession = Depends(get_db),
) -> BookingListEnvelope:
    """One store's bookings, newest first. 404 if the store does not exist."""
    bookings = await BookingService(db).get_bookings_by_store(store_id)
    return BookingListEnvelope(
        bookings=[BookingDetailResponse.model_validate(b) for b in bookings]
    )
