"""Abstract key-value interface (port) for record persistence."""

from abc import ABC, abstractmethod


class RecordStore(ABC):
    """Port for opaque record storage keyed by ``(entity_type, record_id)``.

    Implementations must give read-your-writes consistency within a process
    and raise ``StorageError`` for any backend failure.
    """

    @abstractmethod
    async def get(self, entity_type: str, record_id: str) -> bytes | None:
        """Return the stored payload, or None if no record is present."""
        ...

    @abstractmethod
    async def put(self, entity_type: str, record_id: str, payload: bytes) -> None:
        """Store the payload, overwriting any existing record."""
        ...

    @abstractmethod
    async def delete(self, entity_type: str, record_id: str) -> bool:
        """Remove a record. Returns True if deleted, False if not found."""
        ...
