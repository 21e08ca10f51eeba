"""Single-record handle over the record store.

An ``Entity`` identifies where a record lives, ``(entity_name, id)``, and owns
no data itself. Every call re-reads the store; handles are built per request
and never cached.
"""

import json
import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import Any, ClassVar, Generic, Self, TypeVar

from clientportal.application.interfaces import RecordStore
from clientportal.domain.exceptions import DomainValidationError, StorageError
from clientportal.domain.records import Record

logger = logging.getLogger(__name__)

StateT = TypeVar("StateT", bound=Record)


class Entity(Generic[StateT]):
    """CRUD + existence semantics for one record of a declared type.

    Subclasses set ``entity_name`` (the store namespace) and ``state_type``
    (a ``Record`` dataclass whose no-argument instance is the initial state).
    """

    entity_name: ClassVar[str]
    state_type: ClassVar[type[Record]]

    def __init__(self, store: RecordStore, entity_id: str):
        self._store = store
        self.id = entity_id

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={self.id!r})>"

    @classmethod
    def initial_state(cls) -> StateT:
        """Fresh default record for this type. Never persisted by reads."""
        return cls.state_type()  # type: ignore[return-value]

    # ── Reads ────────────────────────────────────────────────────────

    async def exists(self) -> bool:
        return await self._store.get(self.entity_name, self.id) is not None

    async def get_state(self) -> StateT:
        """Return the stored record, or the initial state if none is present.

        Absent and "present with default-looking values" are indistinguishable
        here; call ``exists`` first when the difference matters.
        """
        payload = await self._store.get(self.entity_name, self.id)
        if payload is None:
            return self.initial_state()
        return self._decode(payload)

    # ── Writes ───────────────────────────────────────────────────────

    async def save(self, state: StateT) -> None:
        """Overwrite the record unconditionally (upsert)."""
        await self._store.put(self.entity_name, self.id, self._encode(state))

    async def patch(self, partial: Mapping[str, Any]) -> StateT:
        """Shallow-merge ``partial`` over the current state and write the result.

        Patching an absent record seeds it from the initial state. Keys that are
        not fields of the record type, and ``id``, are ignored.
        """
        current = await self.get_state()
        allowed = self.state_type.field_names() - {"id"}
        merged = current.to_dict()
        merged.update({key: value for key, value in partial.items() if key in allowed})
        try:
            state = self.state_type.from_dict(merged)
        except (TypeError, ValueError) as exc:
            raise DomainValidationError(
                f"Invalid update for {self.entity_name} '{self.id}': {exc}"
            ) from exc
        await self.save(state)  # type: ignore[arg-type]
        return state  # type: ignore[return-value]

    async def delete(self) -> bool:
        return await self._store.delete(self.entity_name, self.id)

    # ── Singleton / lazy creation ────────────────────────────────────

    @classmethod
    async def ensure_exists(
        cls,
        store: RecordStore,
        entity_id: str,
        default: StateT | None = None,
    ) -> Self:
        """Create the record from ``default`` (or the initial state) if absent.

        Idempotent: an existing record is never overwritten.
        """
        entity = cls(store, entity_id)
        if not await entity.exists():
            state = default if default is not None else cls.initial_state()
            await entity._persist_new(replace(state, id=entity_id))
            logger.info("Created %s '%s' from defaults", cls.entity_name, entity_id)
        else:
            await entity._adopt_existing()
        return entity

    async def _persist_new(self, state: StateT) -> None:
        await self.save(state)

    async def _adopt_existing(self) -> None:
        """Hook run by ``ensure_exists`` when the record is already present."""

    # ── Codec ────────────────────────────────────────────────────────

    def _encode(self, state: StateT) -> bytes:
        return json.dumps(state.to_dict(), separators=(",", ":")).encode("utf-8")

    def _decode(self, payload: bytes) -> StateT:
        try:
            data = json.loads(payload)
            if not isinstance(data, dict):
                raise ValueError(f"expected a JSON object, got {type(data).__name__}")
            return self.state_type.from_dict(data)  # type: ignore[return-value]
        except (TypeError, ValueError) as exc:
            raise StorageError(
                f"Corrupt {self.entity_name} record '{self.id}': {exc}",
                entity_type=self.entity_name,
                entity_id=self.id,
            ) from exc
