from typing import Optional

from sqlmodel import SQLModel

from edusync.models.announcement import AnnouncementBase
from edusync.models.message import MessageBase


class MessageCreate(MessageBase):
    # set from the session on the HTTP surface
    sender_id: Optional[int] = None


class MessageUpdate(SQLModel):
    message: Optional[str] = None
    read: Optional[bool] = None


class AnnouncementCreate(AnnouncementBase):
    user_id: Optional[int] = None


class AnnouncementUpdate(SQLModel):
    title: Optional[str] = None
    content: Optional[str] = None
    target_role: Optional[str] = None
    target_class_id: Optional[int] = None
