"""
Store management API endpoints.

WHAT: Admin CRUD for stores.

WHY: Stores are where employees work and bookings are taken. Deleting a
store that employees or bookings still reference is refused.

HOW: Thin FastAPI routes over CatalogService. Domain failures propagate as
DomainError and are rendered by the exception handlers as
{"valid": false, "error", "error_description"}.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.db.session import get_db
from store_admin.schemas.store import (
    StoreCreate,
    StoreUpdate,
    StoreResponse,
    StoreEnvelope,
    StoreListEnvelope,
)
from store_admin.services.catalog_service import CatalogService


router = APIRouter(prefix="/admin/stores", tags=["stores"])


def _store_to_response(store) -> StoreResponse:
    return StoreResponse.model_validate(store)


@router.get("", response_model=StoreListEnvelope)
async def list_stores(db: AsyncSession = Depends(get_db)) -> StoreListEnvelope:
    """List all stores in creation order."""
    stores = await CatalogService(db).get_stores()
    return StoreListEnvelope(stores=[_store_to_response(s) for s in stores])


@router.post("", response_model=StoreEnvelope, status_code=status.HTTP_201_CREATED)
async def create_store(
    store_data: StoreCreate,
    db: AsyncSession = Depends(get_db),
) -> StoreEnvelope:
    """
    Create a store.

    Body: {"name", "address", "phone", "storeLocation"?}
    """
    store = await CatalogService(db).create_store(store_data.model_dump(exclude_unset=True))
    return StoreEnvelope(store=_store_to_response(store))


@router.get("/{store_id}", response_model=StoreEnvelope)
async def get_store(store_id: int, db: AsyncSession = Depends(get_db)) -> StoreEnvelope:
    store = await CatalogService(db).get_store_by_id(store_id)
    return StoreEnvelope(store=_store_to_response(store))


@router.put("/{store_id}", response_model=StoreEnvelope)
async def update_store(
    store_id: int,
    store_data: StoreUpdate,
    db: AsyncSession = Depends(get_db),
) -> StoreEnvelope:
    """Partially update a store; absent fields are left unchanged."""
    store = await CatalogService(db).update_store(
        store_id, store_data.model_dump(exclude_unset=True)
    )
    return StoreEnvelope(store=_store_to_response(store))


@router.delete("/{store_id}", response_model=StoreEnvelope)
async def delete_store(store_id: int, db: AsyncSession = Depends(get_db)) -> StoreEnvelope:
    """
    Delete a store.

    Refused with 409 while employees or bookings reference it.
    """
    store = await CatalogService(db).delete_store(store_id)
    return StoreEnvelope(store=_store_to_response(store))
