"""
Pydantic schemas for package endpoints.

WHAT: Request/response schemas for the package catalog.

WHY: price and overs are accepted as any JSON value ("500" or 500) because
the integer rule, and its error messages, belong to the service and the
Package model.
"""

from datetime import datetime
from typing import Any, List, Optional

from store_admin.schemas.common import CamelModel, CamelResponse


class PackageCreate(CamelModel):
    name: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    price: Any = None
    overs: Any = None


class PackageUpdate(PackageCreate):
    """Partial package update; only fields present in the body change."""


class PackageResponse(CamelResponse):
    id: int
    name: str
    title: Optional[str] = None
    description: Optional[str] = None
    price: int
    overs: int
    created_at: datetime
    updated_at: datetime


class PackageEnvelope(CamelResponse):
    valid: bool = True
    package: PackageResponse


class PackageListEnvelope(CamelResponse):
    valid: bool = True
    packages: List[PackageResponse]
