from datetime import date, datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from edusync.models.common import AUTOINCREMENT, timestamp_field, utcnow


class AssignmentBase(SQLModel):
    title: str
    description: Optional[str] = None
    subject_assignment_id: int = Field(index=True)
    due_date: Optional[date] = None
    max_marks: Optional[int] = None
    resource_url: Optional[str] = None


class Assignment(AssignmentBase, table=True):
    __tablename__ = "assignments"
    __table_args__ = AUTOINCREMENT

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = timestamp_field(default_factory=utcnow)
