"""
SQLAlchemy model for stock records.

A stock is a named storage location. ``seq`` is a surrogate key that records
insertion order; ``id`` is the identifier the service hands out and is
assigned by the stock manager, never by the database.
"""

from datetime import datetime, timezone

from sqlalchemy import BigInteger, Column, DateTime, Integer, String
from sqlalchemy.types import TypeDecorator

from ..database import Base


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class UTCDateTime(TypeDecorator):
    """Timezone-aware UTC timestamps, also on backends that store them naive (SQLite)."""

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


class Stock(Base):
    __tablename__ = "stocks"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    # BigInteger so the full unsigned 32-bit range fits on every backend
    id = Column(BigInteger, unique=True, nullable=False, index=True, autoincrement=False)

    name = Column(String, nullable=False, default="")
    description = Column(String, nullable=False, default="")

    created_at = Column(UTCDateTime, nullable=False, default=utc_now)
    created_by = Column(BigInteger, nullable=False, default=0)

    def update(self, name: str, description: str) -> "Stock":
        """Overwrite the mutable fields. Identity and creation data stay put."""
        self.name = name
        self.description = description
        return self

    def __repr__(self):
        return f"<Stock(id={self.id}, name='{self.name}', created_by={self.created_by})>"
