from datetime import time
from typing import Optional

from pydantic import field_validator
from sqlmodel import Field, SQLModel

from edusync.models.common import AUTOINCREMENT


def normalize_day(day: Optional[str]) -> Optional[str]:
    return day.strip().lower() if day is not None else None


class TimetableEntryBase(SQLModel):
    subject_assignment_id: int = Field(index=True)
    day: str = Field(index=True)  # monday .. sunday, lower case
    start_time: time
    end_time: time
    room: Optional[str] = None

    @field_validator("day")
    @classmethod
    def lower_case_day(cls, value: str) -> str:
        return normalize_day(value)


class TimetableEntry(TimetableEntryBase, table=True):
    __tablename__ = "timetable"
    __table_args__ = AUTOINCREMENT

    id: Optional[int] = Field(default=None, primary_key=True)
