from datetime import date, time
from typing import Optional

from pydantic import field_validator
from sqlmodel import SQLModel

from edusync.models import SchoolClass, Subject, SubjectAssignment
from edusync.models.task import TaskBase
from edusync.models.timetable import TimetableEntryBase, normalize_day


class TimetableEntryCreate(TimetableEntryBase):
    pass


class TimetableEntryUpdate(SQLModel):
    subject_assignment_id: Optional[int] = None
    day: Optional[str] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    room: Optional[str] = None

    @field_validator("day")
    @classmethod
    def lower_case_day(cls, value: Optional[str]) -> Optional[str]:
        return normalize_day(value)


class TimetableEntryDetail(TimetableEntryBase):
    id: int
    subject_assignment: Optional[SubjectAssignment] = None
    subject: Optional[Subject] = None
    school_class: Optional[SchoolClass] = None


class TaskCreate(TaskBase):
    # defaults to the current user
    user_id: Optional[int] = None


class TaskUpdate(SQLModel):
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[date] = None
    due_time: Optional[time] = None
    completed: Optional[bool] = None
