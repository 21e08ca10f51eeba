"""SQLAlchemy ORM model for key-value records."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, LargeBinary, String
from sqlalchemy.orm import Mapped, mapped_column

from clientportal.infrastructure.database.base import Base


class KVRecordModel(Base):
    """ORM model — maps to the 'kv_records' table.

    One row per ``(entity_type, record_id)``; index records live here too,
    under their index namespace.
    """

    __tablename__ = "kv_records"

    entity_type: Mapped[str] = mapped_column(String(100), primary_key=True)
    record_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    payload: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<KVRecordModel(type='{self.entity_type}', id='{self.record_id}')>"
