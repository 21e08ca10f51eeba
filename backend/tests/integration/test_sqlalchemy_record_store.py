"""Integration tests for SQLAlchemyRecordStore on an in-memory SQLite database."""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from clientportal.application.persistence import ClientEntity, MilestoneEntity
from clientportal.domain.exceptions import StorageError
from clientportal.domain.records import Client, Milestone
from clientportal.infrastructure.database import Base
from clientportal.infrastructure.database.repositories import SQLAlchemyRecordStore


def _sqlite_engine():
    return create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest_asyncio.fixture
async def store() -> AsyncIterator[SQLAlchemyRecordStore]:
    engine = _sqlite_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield SQLAlchemyRecordStore(async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False))
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_put_get_overwrite_delete(store: SQLAlchemyRecordStore):
    assert await store.get("note", "n1") is None

    await store.put("note", "n1", b'{"v": 1}')
    await store.put("note", "n1", b'{"v": 2}')
    assert await store.get("note", "n1") == b'{"v": 2}'

    assert await store.delete("note", "n1") is True
    assert await store.delete("note", "n1") is False
    assert await store.get("note", "n1") is None


@pytest.mark.asyncio
async def test_entity_types_are_separate_namespaces(store: SQLAlchemyRecordStore):
    await store.put("a", "same", b"1")
    await store.put("b", "same", b"2")

    assert await store.get("a", "same") == b"1"
    assert await store.get("b", "same") == b"2"


@pytest.mark.asyncio
async def test_indexed_entities_persist_through_sql(store: SQLAlchemyRecordStore):
    await ClientEntity.create(store, Client(id="c1", user_id="c1", company="Acme"))
    await MilestoneEntity.create(store, Milestone(id="m1", project_id="p1"))
    await MilestoneEntity.create(store, Milestone(id="m2", project_id="p1"))

    assert [c.company for c in (await ClientEntity.list_all(store)).items] == ["Acme"]
    assert await MilestoneEntity.delete_many(store, ["m1", "m2"]) == 2
    assert (await MilestoneEntity.list_all(store)).items == []


@pytest.mark.asyncio
async def test_missing_table_surfaces_as_storage_error():
    engine = _sqlite_engine()
    try:
        store = SQLAlchemyRecordStore(async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False))
        with pytest.raises(StorageError) as exc_info:
            await store.get("note", "n1")
        assert exc_info.value.entity_type == "note"
        assert exc_info.value.entity_id == "n1"
    finally:
        await engine.dispose()
