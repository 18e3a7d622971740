from typing import Optional

from sqlmodel import Field, SQLModel

from edusync.models.common import AUTOINCREMENT


class SubjectBase(SQLModel):
    name: str
    code: str
    description: Optional[str] = None


class Subject(SubjectBase, table=True):
    __tablename__ = "subjects"
    __table_args__ = AUTOINCREMENT

    id: Optional[int] = Field(default=None, primary_key=True)
