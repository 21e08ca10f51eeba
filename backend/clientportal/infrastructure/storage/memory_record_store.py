"""Process-local record store — a dict keyed by ``(entity_type, record_id)``.

Used for tests and for running the API without a database. Contents are
lost when the process exits.
"""

import logging

from clientportal.application.interfaces import RecordStore

logger = logging.getLogger(__name__)


class InMemoryRecordStore(RecordStore):
    """Infrastructure adapter keeping payloads in memory."""

    def __init__(self) -> None:
        self._records: dict[tuple[str, str], bytes] = {}

    async def get(self, entity_type: str, record_id: str) -> bytes | None:
        return self._records.get((entity_type, record_id))

    async def put(self, entity_type: str, record_id: str, payload: bytes) -> None:
        self._records[(entity_type, record_id)] = bytes(payload)

    async def delete(self, entity_type: str, record_id: str) -> bool:
        return self._records.pop((entity_type, record_id), None) is not None

    def __len__(self) -> int:
        return len(self._records)
