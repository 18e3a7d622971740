import datetime
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel

from edusync.models.common import AUTOINCREMENT


class AttendanceStatus(str, Enum):
    present = "present"
    absent = "absent"
    late = "late"


class AttendanceBase(SQLModel):
    student_id: int = Field(index=True)
    subject_assignment_id: int = Field(index=True)
    date: datetime.date = Field(index=True)
    status: AttendanceStatus
    notes: Optional[str] = None


class Attendance(AttendanceBase, table=True):
    # One row per student/subject/date is expected but not enforced
    __tablename__ = "attendance"
    __table_args__ = AUTOINCREMENT

    id: Optional[int] = Field(default=None, primary_key=True)
