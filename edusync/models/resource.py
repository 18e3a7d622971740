from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from edusync.models.common import AUTOINCREMENT, timestamp_field, utcnow


class ResourceBase(SQLModel):
    name: str
    description: Optional[str] = None
    url: str
    type: Optional[str] = None
    uploaded_by: int = Field(index=True)
    subject_id: Optional[int] = Field(default=None, index=True)


class Resource(ResourceBase, table=True):
    __tablename__ = "resources"
    __table_args__ = AUTOINCREMENT

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = timestamp_field(default_factory=utcnow)
