"""Entities with a per-type membership index enabling "list all".

The index for a type is an ordinary record, a JSON array of ids, stored at
``(index_name, "__index__")`` through the same ``RecordStore`` as the records.

Ordering of the two writes keeps readers of ``list_all`` safe:

* create writes the record first, then adds the id to the index;
* delete removes the id from the index first, then deletes the record.

A crash between the steps leaves an unindexed orphan record, never an index
entry without a record. Orphans are invisible to ``list_all``.
"""

import asyncio
import json
import logging
import weakref
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import ClassVar, Generic

from clientportal.application.interfaces import RecordStore
from clientportal.application.persistence.entity import Entity, StateT
from clientportal.domain.exceptions import DomainValidationError, StorageError

logger = logging.getLogger(__name__)

INDEX_ID = "__index__"

# Index read-modify-write is serialized per store and index name. Keyed weakly
# by store so each store (and its event loop) gets its own locks.
_index_locks: "weakref.WeakKeyDictionary[RecordStore, dict[str, asyncio.Lock]]" = (
    weakref.WeakKeyDictionary()
)


def _index_lock(store: RecordStore, index_name: str) -> asyncio.Lock:
    locks = _index_locks.setdefault(store, {})
    if index_name not in locks:
        locks[index_name] = asyncio.Lock()
    return locks[index_name]


@dataclass
class ListResult(Generic[StateT]):
    """Snapshot of every indexed record of a type, in index order."""

    items: list[StateT] = field(default_factory=list)


class IndexedEntity(Entity[StateT]):
    """Entity that also maintains the set of live ids for its type."""

    index_name: ClassVar[str]

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        index_name = getattr(cls, "index_name", None)
        if index_name is not None and index_name == getattr(cls, "entity_name", None):
            raise TypeError(f"{cls.__name__}: index_name must differ from entity_name")

    # ── Index record ─────────────────────────────────────────────────

    @classmethod
    async def index_ids(cls, store: RecordStore) -> list[str]:
        """Ids currently in the type's index, in insertion order."""
        payload = await store.get(cls.index_name, INDEX_ID)
        if payload is None:
            return []
        try:
            ids = json.loads(payload)
        except ValueError as exc:
            raise StorageError(
                f"Corrupt index '{cls.index_name}': {exc}",
                entity_type=cls.index_name,
                entity_id=INDEX_ID,
            ) from exc
        if not isinstance(ids, list) or not all(isinstance(i, str) for i in ids):
            raise StorageError(
                f"Corrupt index '{cls.index_name}': expected a list of ids",
                entity_type=cls.index_name,
                entity_id=INDEX_ID,
            )
        return ids

    @classmethod
    async def _write_index(cls, store: RecordStore, ids: list[str]) -> None:
        await store.put(cls.index_name, INDEX_ID, json.dumps(ids).encode("utf-8"))

    @classmethod
    async def _add_to_index(cls, store: RecordStore, entity_id: str) -> None:
        async with _index_lock(store, cls.index_name):
            ids = await cls.index_ids(store)
            if entity_id not in ids:
                ids.append(entity_id)
                await cls._write_index(store, ids)

    @classmethod
    async def _remove_from_index(cls, store: RecordStore, entity_id: str) -> None:
        async with _index_lock(store, cls.index_name):
            ids = await cls.index_ids(store)
            if entity_id in ids:
                ids.remove(entity_id)
                await cls._write_index(store, ids)

    # ── Single-record operations ─────────────────────────────────────

    async def _persist_new(self, state: StateT) -> None:
        await self.save(state)
        await self._add_to_index(self._store, self.id)

    async def _adopt_existing(self) -> None:
        # Re-index an orphan left by a delete whose record step failed.
        await self._add_to_index(self._store, self.id)

    async def delete(self) -> bool:
        """Remove the id from the index, then the record.

        Returns whether a record was removed. A dangling index entry (record
        already gone) is still cleaned up.
        """
        await self._remove_from_index(self._store, self.id)
        return await super().delete()

    # ── Type-wide operations ─────────────────────────────────────────

    @classmethod
    async def create(cls, store: RecordStore, state: StateT) -> StateT:
        """Persist ``state`` under ``state.id`` and index it.

        An existing record with the same id is overwritten (upsert); the index
        never holds an id twice.
        """
        if not state.id:
            raise DomainValidationError(f"Cannot create {cls.entity_name} without an id")
        await cls(store, state.id)._persist_new(state)
        logger.debug("Created %s '%s'", cls.entity_name, state.id)
        return state

    @classmethod
    async def list_all(cls, store: RecordStore) -> ListResult[StateT]:
        """Read the index, then each member record.

        Ids whose record is missing (deleted out-of-band, or mid-delete) are
        skipped. The result is not an isolated snapshot; concurrent writers
        may interleave with the per-record reads.
        """
        items: list[StateT] = []
        for entity_id in await cls.index_ids(store):
            payload = await store.get(cls.entity_name, entity_id)
            if payload is None:
                logger.debug("Skipping %s '%s': indexed but no record", cls.entity_name, entity_id)
                continue
            items.append(cls(store, entity_id)._decode(payload))
        return ListResult(items=items)

    @classmethod
    async def remove(cls, store: RecordStore, entity_id: str) -> bool:
        """Delete the record and its index entry. Returns whether a record was removed."""
        return await cls(store, entity_id).delete()

    @classmethod
    async def delete_many(cls, store: RecordStore, entity_ids: Iterable[str]) -> int:
        """Best-effort bulk delete; returns how many records were actually removed.

        Each id's index entry and record are handled as one unit. A storage
        failure on one id is logged and does not stop or undo the others.
        """
        removed = 0
        failed = 0
        for entity_id in entity_ids:
            try:
                if await cls.remove(store, entity_id):
                    removed += 1
            except StorageError:
                failed += 1
                logger.warning(
                    "Failed to delete %s '%s'; continuing", cls.entity_name, entity_id, exc_info=True
                )
        if failed:
            logger.warning("Bulk delete of %s: %d removed, %d failed", cls.entity_name, removed, failed)
        return removed
