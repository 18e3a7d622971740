from typing import Any, Dict, Optional

from sqlalchemy import Column
from sqlmodel import Field, JSON, SQLModel

from edusync.models.common import AUTOINCREMENT


class StudentBase(SQLModel):
    user_id: int = Field(index=True)
    student_id: str
    year_level: int
    branch_id: int = Field(index=True)
    section_id: int = Field(index=True)


class Student(StudentBase, table=True):
    __tablename__ = "students"
    __table_args__ = AUTOINCREMENT

    id: Optional[int] = Field(default=None, primary_key=True)
    documents: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON))
