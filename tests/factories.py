"""
Test factories for creating test data.

WHY: Factories provide a consistent, reusable way to create test objects,
reducing duplication and making tests more maintainable. Using factories
instead of manual object creation ensures tests stay consistent when models change.
"""

from typing import Any, Dict, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.core.security import PasswordHasher, PasswordHashingConfig
from store_admin.models.store import Store
from store_admin.models.customer import Customer
from store_admin.models.employee import Employee, EmployeeRole
from store_admin.models.package import Package
from store_admin.models.booking import Booking, BookingType


_factory_hasher = PasswordHasher(PasswordHashingConfig(salt="test-salt"))


class StoreFactory:
    """
    Factory for creating Store test instances.
    """

    @staticmethod
    async def create(
        session: AsyncSession,
        name: str = "Test Store",
        address: str = "1 Test Road",
        phone: str = "+15551230000",
        store_location: Optional[Dict[str, Any]] = None,
    ) -> Store:
        """
        Create a store for testing.

        Args:
            session: Database session
            name: Store name
            address: Street address
            phone: Contact phone
            store_location: Optional coordinates

        Returns:
            Created Store instance
        """
        store = Store(
            name=name,
            address=address,
            phone=phone,
            store_location=store_location,
        )
        session.add(store)
        await session.commit()
        await session.refresh(store)
        return store


class CustomerFactory:
    """Factory for creating Customer test instances."""

    _counter = 0

    @classmethod
    async def create(
        cls,
        session: AsyncSession,
        name: str = "Test Customer",
        email: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> Customer:
        cls._counter += 1
        customer = Customer(
            name=name,
            email=email or f"customer{cls._counter}@example.com",
            phone=phone,
        )
        session.add(customer)
        await session.commit()
        await session.refresh(customer)
        return customer


class EmployeeFactory:
    """
    Factory for creating Employee test instances.

    WHY: Stores the password in derived form, as EmployeeService would.
    """

    _counter = 0

    @classmethod
    async def create(
        cls,
        session: AsyncSession,
        store_id: int,
        email: Optional[str] = None,
        password: str = "SecurePassword123!",
        phone: Optional[str] = None,
        name: str = "Test Employee",
        role: EmployeeRole = EmployeeRole.STAFF,
        access_to: Optional[List[str]] = None,
    ) -> Employee:
        """
        Create an employee for testing.

        Args:
            session: Database session
            store_id: Store the employee works at
            email: Email (unique default generated when omitted)
            password: Plain text password, stored hashed
            phone: Phone number
            name: Full name
            role: Employee role
            access_to: Feature grants

        Returns:
            Created Employee instance
        """
        cls._counter += 1
        employee = Employee(
            name=name,
            email=email or f"employee{cls._counter}@example.com",
            phone=phone,
            password=_factory_hasher.hash(password),
            store_id=store_id,
            role=role,
            access_to=access_to or [],
        )
        session.add(employee)
        await session.commit()
        await session.refresh(employee)
        return employee


class PackageFactory:
    """Factory for creating Package test instances."""

    @staticmethod
    async def create(
        session: AsyncSession,
        name: str = "Net Session",
        price: int = 500,
        overs: int = 6,
        title: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Package:
        package = Package(
            name=name,
            title=title,
            description=description,
            price=price,
            overs=overs,
        )
        session.add(package)
        await session.commit()
        await session.refresh(package)
        return package


class BookingFactory:
    """
    Factory for creating Booking test instances.

    WHY: Writes the row directly, bypassing BookingService, so listing and
    delete-restriction tests can set up bookings in one line.
    """

    @staticmethod
    async def create(
        session: AsyncSession,
        store_id: int,
        customer_id: int,
        package: Optional[Package] = None,
        price: int = 450,
        overs: int = 5,
    ) -> Booking:
        """
        Create a booking for testing.

        A package booking is created when `package` is given (price and
        overs copied from it), a custom booking otherwise.
        """
        if package is not None:
            booking = Booking(
                store_id=store_id,
                customer_id=customer_id,
                booking_type=BookingType.PACKAGE,
                package_id=package.id,
                price=package.price,
                overs=package.overs,
            )
        else:
            booking = Booking(
                store_id=store_id,
                customer_id=customer_id,
                booking_type=BookingType.CUSTOM,
                price=price,
                overs=overs,
            )
        session.add(booking)
        await session.commit()
        await session.refresh(booking)
        return booking
