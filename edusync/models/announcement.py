from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from edusync.models.common import AUTOINCREMENT, timestamp_field, utcnow

# target_role value that reaches every role
TARGET_ALL = "all"


class AnnouncementBase(SQLModel):
    user_id: int = Field(index=True)
    title: str
    content: str
    target_role: Optional[str] = None
    target_class_id: Optional[int] = Field(default=None, index=True)


class Announcement(AnnouncementBase, table=True):
    __tablename__ = "announcements"
    __table_args__ = AUTOINCREMENT

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = timestamp_field(default_factory=utcnow)
