from datetime import datetime
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel

from edusync.models.common import AUTOINCREMENT, timestamp_field, utcnow


class SubmissionStatus(str, Enum):
    draft = "draft"
    submitted = "submitted"
    marked = "marked"


class SubmissionBase(SQLModel):
    assignment_id: int = Field(index=True)
    student_id: int = Field(index=True)
    submission_url: Optional[str] = None
    marks: Optional[int] = None
    feedback: Optional[str] = None
    status: SubmissionStatus = Field(default=SubmissionStatus.submitted)


class Submission(SubmissionBase, table=True):
    __tablename__ = "submissions"
    __table_args__ = AUTOINCREMENT

    id: Optional[int] = Field(default=None, primary_key=True)
    submitted_at: datetime = timestamp_field(default_factory=utcnow)
