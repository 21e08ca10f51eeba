from .kv_record import KVRecordModel

__all__ = [
    "KVRecordModel",
]
