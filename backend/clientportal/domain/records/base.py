"""Shared behaviour for persisted record dataclasses."""

import time
from dataclasses import asdict, dataclass, fields
from typing import Any, Self


def epoch_millis() -> int:
    """Current time as integer milliseconds since the epoch."""
    return int(time.time() * 1000)


@dataclass
class Record:
    """Base for every record stored through the entity layer.

    Every field of a subclass carries a default so that ``cls()`` is the
    type's initial state.
    """

    id: str = ""

    @classmethod
    def field_names(cls) -> frozenset[str]:
        return frozenset(f.name for f in fields(cls))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Build a record from a JSON-like mapping, ignoring unknown keys."""
        known = cls.field_names()
        return cls(**{key: value for key, value in data.items() if key in known})

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
