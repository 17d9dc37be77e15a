"""
Catalog Service.

WHAT: Business logic for stores and service packages.

WHY: Stores and packages are the reference data bookings are built from:
1. Packages carry the price/overs that Package bookings copy
2. Stores are where employees work and bookings are taken
3. Neither may be deleted while something still points at it

HOW: Orchestrates StoreDAO and PackageDAO, with BookingDAO and EmployeeDAO
consulted for the delete restrictions. Failures are raised as DomainError
subclasses; the API layer renders them as soft results.
"""

import logging
from typing import Any, List, Mapping
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.core.exceptions import (
    InvalidPayloadError,
    PackageInUseError,
    StoreInUseError,
)
from store_admin.core.validation import collect_changes, is_integer, require_fields
from store_admin.dao.booking import BookingDAO
from store_admin.dao.employee import EmployeeDAO
from store_admin.dao.package import PackageDAO
from store_admin.dao.store import StoreDAO
from store_admin.models.package import Package
from store_admin.models.store import Store


logger = logging.getLogger(__name__)

STORE_FIELDS = ("name", "address", "phone", "store_location")
PACKAGE_FIELDS = ("name", "title", "description", "price", "overs")

STORE_NULLABLE = ("store_location",)
PACKAGE_NULLABLE = ("title", "description")


class CatalogService:
    """
    Service for store and package operations.

    Example:
        service = CatalogService(session)
        package = await service.create_package({"name": "Net1", "price": "500", "overs": "6"})
        package.price  # 500
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize CatalogService.

        Args:
            session: Async database session
        """
        self.session = session
        self.store_dao = StoreDAO(session)
        self.package_dao = PackageDAO(session)
        self.employee_dao = EmployeeDAO(session)
        self.booking_dao = BookingDAO(session)

    # ------------------------------------------------------------------
    # Stores
    # ------------------------------------------------------------------

    async def get_stores(self) -> List[Store]:
        return await self.store_dao.list_stores()

    async def get_store_by_id(self, store_id: int) -> Store:
        """
        Raises:
            StoreNotFoundError: If the store does not exist
        """
        return await self.store_dao.get_or_raise(store_id)

    async def create_store(self, data: Mapping[str, Any]) -> Store:
        """
        Create a store.

        Args:
            data: name, address, phone (required) and store_location

        Returns:
            Created Store

        Raises:
            InvalidPayloadError: If name, address or phone is missing
        """
        require_fields(
            data,
            ["name", "address", "phone"],
            "store name, address and phone are required.",
        )
        store = await self.store_dao.create(
            name=data["name"],
            address=data["address"],
            phone=data["phone"],
            store_location=data.get("store_location"),
        )
        logger.info(f"Created store {store.id} ({store.name})")
        return store

    async def update_store(self, store_id: int, data: Mapping[str, Any]) -> Store:
        """
        Partially update a store.

        Raises:
            StoreNotFoundError: If the store does not exist
        """
        changes = collect_changes(data, STORE_FIELDS, STORE_NULLABLE)
        store = await self.store_dao.update(store_id, **changes)
        logger.info(f"Updated store {store.id}")
        return store

    async def delete_store(self, store_id: int) -> Store:
        """
        Delete a store that nothing references.

        Raises:
            StoreNotFoundError: If the store does not exist
            StoreInUseError: If employees or bookings reference the store
        """
        await self.store_dao.get_or_raise(store_id)
        has_employees = await self.employee_dao.exists(store_id=store_id)
        if has_employees or await self.booking_dao.is_store_referenced(store_id):
            raise StoreInUseError(store_id=store_id)

        store = await self.store_dao.delete(store_id)
        logger.info(f"Deleted store {store_id}")
        return store

    # ------------------------------------------------------------------
    # Packages
    # ------------------------------------------------------------------

    async def create_package(self, data: Mapping[str, Any]) -> Package:
        """
        Create a package.

        price and overs may arrive as numeric strings; they are stored as
        integers. The Package model rejects anything that is not a positive
        integer.

        Args:
            data: name, price, overs (required), title, description

        Returns:
            Created Package

        Raises:
            InvalidPayloadError: If a required field is missing or price/overs
                is not a positive integer
        """
        require_fields(data, ["name", "price", "overs"], "name, price and overs are required.")
        if not is_integer(data["price"]):
            raise InvalidPayloadError(message="price must be an integer.", field="price")

        package = await self.package_dao.create(
            name=data["name"],
            title=data.get("title"),
            description=data.get("description"),
            price=data["price"],
            overs=data["overs"],
        )
        logger.info(
            f"Created package {package.id} ({package.name}) "
            f"price={package.price} overs={package.overs}"
        )
        return package

    async def get_all_packages(self) -> List[Package]:
        return await self.package_dao.list_packages()

    async def get_package_by_id(self, package_id: int) -> Package:
        """
        Raises:
            PackageNotFoundError: If the package does not exist
        """
        return await self.package_dao.get_or_raise(package_id)

    async def update_package(self, package_id: int, data: Mapping[str, Any]) -> Package:
        """
        Partially update a package.

        Existing bookings keep the price/overs they were created with.

        Raises:
            PackageNotFoundError: If the package does not exist
            InvalidPayloadError: If price/overs is not a positive integer
        """
        changes = collect_changes(data, PACKAGE_FIELDS, PACKAGE_NULLABLE)
        package = await self.package_dao.update(package_id, **changes)
        logger.info(f"Updated package {package.id} price={package.price} overs={package.overs}")
        return package

    async def delete_package(self, package_id: int) -> Package:
        """
        Delete a package no booking references.

        Raises:
            PackageNotFoundError: If the package does not exist
            PackageInUseError: If any booking was made from this package
        """
        await self.package_dao.get_or_raise(package_id)
        if await self.booking_dao.is_package_referenced(package_id):
            raise PackageInUseError(package_id=package_id)

        package = await self.package_dao.delete(package_id)
        logger.info(f"Deleted package {package_id}")
        return package
