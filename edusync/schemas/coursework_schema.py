import datetime
from typing import Optional

from sqlmodel import SQLModel

from edusync.models import AttendanceStatus, SubmissionStatus
from edusync.models.assignment import AssignmentBase
from edusync.models.attendance import AttendanceBase
from edusync.models.submission import SubmissionBase


class AttendanceCreate(AttendanceBase):
    pass


class AttendanceUpdate(SQLModel):
    student_id: Optional[int] = None
    subject_assignment_id: Optional[int] = None
    date: Optional[datetime.date] = None
    status: Optional[AttendanceStatus] = None
    notes: Optional[str] = None


class AssignmentCreate(AssignmentBase):
    pass


class AssignmentUpdate(SQLModel):
    title: Optional[str] = None
    description: Optional[str] = None
    subject_assignment_id: Optional[int] = None
    due_date: Optional[datetime.date] = None
    max_marks: Optional[int] = None
    resource_url: Optional[str] = None


class SubmissionCreate(SubmissionBase):
    pass


class SubmissionUpdate(SQLModel):
    assignment_id: Optional[int] = None
    student_id: Optional[int] = None
    submission_url: Optional[str] = None
    marks: Optional[int] = None
    feedback: Optional[str] = None
    status: Optional[SubmissionStatus] = None
