"""
Unit tests for BaseDAO.

WHAT: Generic CRUD behaviour, exercised through StoreDAO and PackageDAO.

WHY: Verifies the DAO error contract:
1. get_by_id returns None for unknown ids, get_or_raise raises the typed error
2. update/delete raise the typed not-found error
3. update goes through model validators
4. unique violations surface as ResourceAlreadyExistsError

HOW: Uses pytest-asyncio with in-memory SQLite database for isolation.
"""

import pytest

from store_admin.core.exceptions import (
    InvalidPayloadError,
    PackageNotFoundError,
    ResourceAlreadyExistsError,
    StoreNotFoundError,
)
from store_admin.dao.customer import CustomerDAO
from store_admin.dao.package import PackageDAO
from store_admin.dao.store import StoreDAO
from tests.factories import PackageFactory, StoreFactory


class TestBaseDAOCreate:
    @pytest.mark.asyncio
    async def test_create_populates_generated_fields(self, db_session):
        store = await StoreDAO(db_session).create(
            name="Nets", address="1 Road", phone="+1555", store_location={"lat": 1.5, "lng": 2.5}
        )

        assert store.id is not None
        assert store.created_at is not None
        assert store.store_location == {"lat": 1.5, "lng": 2.5}

    @pytest.mark.asyncio
    async def test_create_unique_violation(self, db_session):
        """A duplicate unique column is reported as ResourceAlreadyExistsError."""
        customer_dao = CustomerDAO(db_session)
        await customer_dao.create(name="A", email="same@example.com")

        with pytest.raises(ResourceAlreadyExistsError):
            await customer_dao.create(name="B", email="same@example.com")


class TestBaseDAORead:
    @pytest.mark.asyncio
    async def test_get_by_id_unknown_returns_none(self, db_session):
        assert await StoreDAO(db_session).get_by_id(999) is None

    @pytest.mark.asyncio
    async def test_get_by_id_beyond_column_range_returns_none(self, db_session):
        await StoreFactory.create(db_session)
        assert await StoreDAO(db_session).get_by_id(10**20) is None

    @pytest.mark.asyncio
    async def test_get_or_raise_uses_typed_error(self, db_session):
        with pytest.raises(StoreNotFoundError):
            await StoreDAO(db_session).get_or_raise(999)

    @pytest.mark.asyncio
    async def test_get_all_with_filters(self, db_session):
        await StoreFactory.create(db_session, name="North")
        await StoreFactory.create(db_session, name="South")

        stores = await StoreDAO(db_session).get_all(name="South")

        assert [s.name for s in stores] == ["South"]

    @pytest.mark.asyncio
    async def test_count_and_exists(self, db_session):
        store_dao = StoreDAO(db_session)
        assert not await store_dao.exists(name="North")

        await StoreFactory.create(db_session, name="North")

        assert await store_dao.exists(name="North")
        assert await store_dao.count() == 1

    @pytest.mark.asyncio
    async def test_count_with_filters(self, db_session):
        await StoreFactory.create(db_session, name="North")
        await StoreFactory.create(db_session, name="South")
        await StoreFactory.create(db_session, name="South")

        store_dao = StoreDAO(db_session)
        assert await store_dao.count() == 3
        assert await store_dao.count(name="South") == 2
        assert await store_dao.count(name="East") == 0

    @pytest.mark.asyncio
    async def test_list_stores_in_creation_order(self, db_session):
        first = await StoreFactory.create(db_session, name="First")
        second = await StoreFactory.create(db_session, name="Second")

        stores = await StoreDAO(db_session).list_stores()

        assert [s.id for s in stores] == [first.id, second.id]


class TestBaseDAOUpdate:
    @pytest.mark.asyncio
    async def test_update_changes_fields(self, db_session):
        package = await PackageFactory.create(db_session, price=500)
        updated = await PackageDAO(db_session).update(package.id, price="650", title="Evening")

        assert updated.price == 650
        assert updated.title == "Evening"

    @pytest.mark.asyncio
    async def test_update_runs_model_validators(self, db_session):
        package = await PackageFactory.create(db_session)

        with pytest.raises(InvalidPayloadError):
            await PackageDAO(db_session).update(package.id, overs=-2)

    @pytest.mark.asyncio
    async def test_update_unknown_id(self, db_session):
        with pytest.raises(PackageNotFoundError):
            await PackageDAO(db_session).update(404, price=100)


class TestBaseDAODelete:
    @pytest.mark.asyncio
    async def test_delete_returns_instance(self, db_session):
        store = await StoreFactory.create(db_session, name="Closing")
        store_dao = StoreDAO(db_session)

        deleted = await store_dao.delete(store.id)

        assert deleted.name == "Closing"
        assert await store_dao.get_by_id(store.id) is None

    @pytest.mark.asyncio
    async def test_delete_unknown_id(self, db_session):
        with pytest.raises(StoreNotFoundError):
            await StoreDAO(db_session).delete(404)
