from datetime import datetime, UTC

from sqlalchemy import DateTime
from sqlmodel import Field

# Ids are never handed out twice, even on SQLite after the highest row is deleted
AUTOINCREMENT = {"sqlite_autoincrement": True}


def utcnow() -> datetime:
    # Stored naive so both backends hand back the same value
    return datetime.now(UTC).replace(tzinfo=None)


def timestamp_field(**kwargs):
    """Column for a naive UTC timestamp written by ``utcnow``.

    The plain SQLAlchemy ``DateTime`` type stores the value as given, without
    the timezone check newer SQLModel releases attach to ``datetime`` fields.
    """
    return Field(sa_type=DateTime(timezone=False), **kwargs)
