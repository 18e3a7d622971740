from typing import Optional

from sqlmodel import Field, SQLModel

from edusync.models.common import AUTOINCREMENT


class SubjectAssignmentBase(SQLModel):
    teacher_id: int = Field(index=True)
    subject_id: int = Field(index=True)
    class_id: int = Field(index=True)


class SubjectAssignment(SubjectAssignmentBase, table=True):
    """This teacher teaches this subject to this class."""
    __tablename__ = "subject_assignments"
    __table_args__ = AUTOINCREMENT

    id: Optional[int] = Field(default=None, primary_key=True)
