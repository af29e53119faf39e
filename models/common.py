from datetime import datetime, timezone

from sqlalchemy import Column, DateTime
from sqlalchemy.types import TypeDecorator


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UTCDateTime(TypeDecorator):
    """DateTime that always comes back timezone-aware (SQLite drops the offset)."""

    impl = DateTime
    cache_ok = True

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


# Timestamps are filled in Python at flush time so the returned row carries them
# without a second round trip.
def created_at_column() -> Column:
    return Column(UTCDateTime(timezone=True), default=utcnow, nullable=False)


def updated_at_column() -> Column:
    return Column(UTCDateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
