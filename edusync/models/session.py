from datetime import datetime

from sqlmodel import Field, SQLModel

from edusync.models.common import timestamp_field, utcnow


class SessionRecord(SQLModel, table=True):
    """Server-side login session; the cookie only carries ``sid``."""
    __tablename__ = "sessions"

    sid: str = Field(primary_key=True)
    user_id: int = Field(index=True)
    created_at: datetime = timestamp_field(default_factory=utcnow)
    expires_at: datetime = timestamp_field(index=True)
