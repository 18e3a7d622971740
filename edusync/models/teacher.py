from typing import Optional

from sqlmodel import Field, SQLModel

from edusync.models.common import AUTOINCREMENT


class TeacherBase(SQLModel):
    user_id: int = Field(index=True)
    teacher_id: str
    specialization: Optional[str] = None


class Teacher(TeacherBase, table=True):
    __tablename__ = "teachers"
    __table_args__ = AUTOINCREMENT

    id: Optional[int] = Field(default=None, primary_key=True)
