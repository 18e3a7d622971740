from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from edusync.models.common import AUTOINCREMENT, timestamp_field, utcnow


class MessageBase(SQLModel):
    sender_id: int = Field(index=True)
    receiver_id: int = Field(index=True)
    message: str
    read: bool = False


class Message(MessageBase, table=True):
    __tablename__ = "messages"
    __table_args__ = AUTOINCREMENT

    id: Optional[int] = Field(default=None, primary_key=True)
    sent_at: datetime = timestamp_field(default_factory=utcnow)
