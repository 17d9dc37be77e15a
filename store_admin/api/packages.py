"""
Package catalog API endpoints.

WHAT: Admin CRUD for service packages.

WHY: Packages are the priced offers Package bookings copy their price and
overs from. Bookings keep the values they were created with, so editing a
package never rewrites history; deleting one that bookings reference is
refused.

HOW: Thin FastAPI routes over CatalogService.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.db.session import get_db
from store_admin.schemas.package import (
    PackageCreate,
    PackageUpdate,
    PackageResponse,
    PackageEnvelope,
    PackageListEnvelope,
)
from store_admin.services.catalog_service import CatalogService


router = APIRouter(prefix="/admin/packages", tags=["packages"])


def _package_to_response(package) -> PackageResponse:
    return PackageResponse.model_validate(package)


@router.get("", response_model=PackageListEnvelope)
async def list_packages(db: AsyncSession = Depends(get_db)) -> PackageListEnvelope:
    packages = await CatalogService(db).get_all_packages()
    return PackageListEnvelope(packages=[_package_to_response(p) for p in packages])


@router.post("", response_model=PackageEnvelope, status_code=status.HTTP_201_CREATED)
async def create_package(
    package_data: PackageCreate,
    db: AsyncSession = Depends(get_db),
) -> PackageEnvelope:
    """
    Create a package.

    price and overs may be sent as numbers or numeric strings.
    """
    package = await CatalogService(db).create_package(
        package_data.model_dump(exclude_unset=True)
    )
    return PackageEnvelope(package=_package_to_response(package))


@router.get("/{package_id}", response_model=PackageEnvelope)
async def get_package(package_id: int, db: AsyncSession = Depends(get_db)) -> PackageEnvelope:
    package = await CatalogService(db).get_package_by_id(package_id)
    return PackageEnvelope(package=_package_to_response(package))


@router.put("/{package_id}", response_model=PackageEnvelope)
async def update_package(
    package_id: int,
    package_data: PackageUpdate,
    db: AsyncSession = Depends(get_db),
) -> PackageEnvelope:
    package = await CatalogService(db).update_package(
        package_id, package_data.model_dump(exclude_unset=True)
    )
    return PackageEnvelope(package=_package_to_response(package))


@router.delete("/{package_id}", response_model=PackageEnvelope)
async def delete_package(package_id: int, db: AsyncSession = Depends(get_db)) -> PackageEnvelope:
    package = await CatalogService(db).delete_package(package_id)
    return PackageEnvelope(package=_package_to_response(package))
