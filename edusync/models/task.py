from datetime import date, datetime, time
from typing import Optional

from sqlmodel import Field, SQLModel

from edusync.models.common import AUTOINCREMENT, timestamp_field, utcnow


class TaskBase(SQLModel):
    user_id: int = Field(index=True)
    title: str
    description: Optional[str] = None
    due_date: Optional[date] = None
    due_time: Optional[time] = None
    completed: bool = False


class Task(TaskBase, table=True):
    """Personal planner item shown on the dashboard calendar."""
    __tablename__ = "tasks"
    __table_args__ = AUTOINCREMENT

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = timestamp_field(default_factory=utcnow)
