"""
Repository tests run directly against a temporary SQLite database.
"""

import asyncio

import pytest
from sqlalchemy import Text
from sqlalchemy.exc import IntegrityError

from food_ordering import database
from food_ordering.models import MenuItem, ContactMessage, Order
from food_ordering.repositories import (
    MenuItemRepository,
    ContactRepository,
    OrderRepository,
)


@pytest.fixture
def run_with_session(db_path):
    """Run ``fn(session)`` inside a fresh engine and return its result."""

    def run(fn):
        async def scenario():
            database.init_engine(f"sqlite+aiosqlite:///{db_path}")
            try:
                assert await database.init_db()
                async with database.async_session_maker() as session:
                    return await fn(session)
            finally:
                await database.dispose_db()

        return asyncio.run(scenario())

    return run


def test_create_assigns_opaque_id(run_with_session):
    async def scenario(session):
        repo = MenuItemRepository(session)
        first = await repo.create(food_name="Soup")
        second = await repo.create(food_name="Soup")
        return first.id, second.id

    first_id, second_id = run_with_session(scenario)

    assert len(first_id) == 32
    assert first_id != second_id


def test_get_by_id(run_with_session):
    async def scenario(session):
        repo = MenuItemRepository(session)
        item = await repo.create(food_name="Soup", price="$2")
        found = await repo.get_by_id(item.id)
        missing = await repo.get_by_id("nope")
        return found.price, missing

    price, missing = run_with_session(scenario)

    assert price == "$2"
    assert missing is None


def test_update_unknown_returns_none(run_with_session):
    async def scenario(session):
        repo = MenuItemRepository(session)
        await repo.create(food_name="Soup")
        result = await repo.update("nope", food_name="Stew")
        return result, [item.food_name for item in await repo.list()]

    result, names = run_with_session(scenario)

    assert result is None
    assert names == ["Soup"]


def test_delete_by_id(run_with_session):
    async def scenario(session):
        repo = MenuItemRepository(session)
        item = await repo.create(food_name="Soup")
        missing = await repo.delete_by_id("nope")
        deleted = await repo.delete_by_id(item.id)
        return missing, deleted, await repo.count()

    missing, deleted, count = run_with_session(scenario)

    assert missing is False
    assert deleted is True
    assert count == 0


def test_create_many(run_with_session):
    rows = [{"food_name": f"Dish {n}"} for n in range(5)]

    async def scenario(session):
        repo = MenuItemRepository(session)
        created = await repo.create_many(rows)
        return [item.id for item in created], [item.food_name for item in await repo.list()]

    ids, names = run_with_session(scenario)

    assert len(set(ids)) == 5
    assert names == [row["food_name"] for row in rows]


def test_contact_lookup_by_request_id(run_with_session):
    async def scenario(session):
        repo = ContactRepository(session)
        stored = await repo.create(name="Asha", request_id="key-1")
        await repo.create(name="Ben")
        found = await repo.get_by_request_id("key-1")
        missing = await repo.get_by_request_id("key-2")
        return stored.id, found.id, missing

    stored_id, found_id, missing = run_with_session(scenario)

    assert found_id == stored_id
    assert missing is None


def test_order_timestamps_are_set(run_with_session):
    async def scenario(session):
        order = await OrderRepository(session).create(name="Ravi", payment_status="Success")
        return order.created_at, order.updated_at

    created_at, updated_at = run_with_session(scenario)

    assert created_at is not None
    assert updated_at is not None


def test_repositories_share_interface():
    for repo in (MenuItemRepository, ContactRepository, OrderRepository):
        for method in ("create", "create_many", "list", "get_by_id", "update", "delete_by_id", "count"):
            assert callable(getattr(repo, method))
    assert MenuItemRepository.model is MenuItem


def test_init_db_reports_unreachable_database(tmp_path):
    async def scenario():
        database.init_engine(f"sqlite+aiosqlite:///{tmp_path / 'no' / 'such' / 'dir.db'}")
        try:
            return await database.init_db()
        finally:
            await database.dispose_db()

    assert asyncio.run(scenario()) is False


def test_create_once_returns_existing(run_with_session):
    async def scenario(session):
        repo = ContactRepository(session)
        first, first_created = await repo.create_once("key-1", name="Asha")
        again, again_created = await repo.create_once("key-1", name="Asha")
        return first.id, first_created, again.id, again_created, await repo.count()

    first_id, first_created, again_id, again_created, count = run_with_session(scenario)

    assert first_created is True
    assert again_created is False
    assert again_id == first_id
    assert count == 1


def test_request_id_is_unique(run_with_session):
    async def scenario(session):
        repo = ContactRepository(session)
        await repo.create(name="Asha", request_id="key-1")
        with pytest.raises(IntegrityError):
            await repo.create(name="Asha", request_id="key-1")
        await session.rollback()
        await repo.create(name="Ben")
        await repo.create(name="Cy")
        return await repo.count()

    assert run_with_session(scenario) == 3


def test_create_once_loses_insert_race(run_with_session):
    """A concurrent insert lands between the lookup and our own insert."""

    class LateRepository(ContactRepository):
        lookups = 0

        async def get_by_request_id(self, request_id):
            self.lookups += 1
            if self.lookups == 1:
                return None
            return await super().get_by_request_id(request_id)

    async def scenario(session):
        winner = await ContactRepository(session).create(name="Asha", request_id="key-1")
        winner_id = winner.id
        record, created = await LateRepository(session).create_once("key-1", name="Asha")
        return winner_id, record.id, created, await ContactRepository(session).count()

    winner_id, record_id, created, count = run_with_session(scenario)

    assert created is False
    assert record_id == winner_id
    assert count == 1


def test_data_columns_are_unbounded():
    for model in (MenuItem, ContactMessage, Order):
        for column in model.__table__.columns:
            if column.name in ("seq", "id", "request_id", "created_at", "updated_at"):
                continue
            assert isinstance(column.type, Text), f"{model.__name__}.{column.name}"
    assert ContactMessage.__table__.c.request_id.type.length is None
