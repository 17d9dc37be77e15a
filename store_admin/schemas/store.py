"""
Pydantic schemas for store endpoints.

WHAT: Request/response schemas for store management.

WHY: Required-field rules live in CatalogService, so request fields are all
optional here; the service reports which ones are missing.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from store_admin.schemas.common import CamelModel, CamelResponse


class StoreCreate(CamelModel):
    """Store creation request (name, address and phone are required by the service)."""

    name: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    store_location: Optional[Dict[str, Any]] = None


class StoreUpdate(StoreCreate):
    """Partial store update; only fields present in the body change."""


class StoreResponse(CamelResponse):
    id: int
    name: str
    address: str
    phone: str
    store_location: Optional[Dict[str, Any]] = None
    created_at: datetime
    updated_at: datetime


class StoreEnvelope(CamelResponse):
    valid: bool = True
    store: StoreResponse


class StoreListEnvelope(CamelResponse):
    valid: bool = True
    stores: List[StoreResponse]
