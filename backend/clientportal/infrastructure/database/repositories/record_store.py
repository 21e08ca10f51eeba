"""Concrete RecordStore backed by SQLAlchemy.

Each operation runs in its own short transaction, so a failure in one step
of a multi-step operation never rolls back the steps already completed.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from clientportal.application.interfaces import RecordStore
from clientportal.domain.exceptions import StorageError
from clientportal.infrastructure.database.models import KVRecordModel

logger = logging.getLogger(__name__)


class SQLAlchemyRecordStore(RecordStore):
    """Implements the RecordStore port on the ``kv_records`` table."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    @asynccontextmanager
    async def _transaction(
        self, operation: str, entity_type: str, record_id: str
    ) -> AsyncIterator[AsyncSession]:
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    yield session
        except (SQLAlchemyError, OSError) as exc:
            logger.error("Record store %s failed for %s/%s: %s", operation, entity_type, record_id, exc)
            raise StorageError(
                f"Record store {operation} failed for {entity_type} '{record_id}'",
                entity_type=entity_type,
                entity_id=record_id,
            ) from exc

    async def get(self, entity_type: str, record_id: str) -> bytes | None:
        async with self._transaction("get", entity_type, record_id) as session:
            model = await session.get(KVRecordModel, (entity_type, record_id))
            return bytes(model.payload) if model else None

    async def put(self, entity_type: str, record_id: str, payload: bytes) -> None:
        async with self._transaction("put", entity_type, record_id) as session:
            model = await session.get(KVRecordModel, (entity_type, record_id))
            if model is None:
                session.add(
                    KVRecordModel(entity_type=entity_type, record_id=record_id, payload=payload)
                )
            else:
                model.payload = payload

    async def delete(self, entity_type: str, record_id: str) -> bool:
        async with self._transaction("delete", entity_type, record_id) as session:
            model = await session.get(KVRecordModel, (entity_type, record_id))
            if model is None:
                return False
            await session.delete(model)
            return True
