from typing import Optional

from sqlmodel import Field, SQLModel

from edusync.models.common import AUTOINCREMENT


class SectionBase(SQLModel):
    name: str


class Section(SectionBase, table=True):
    __tablename__ = "sections"
    __table_args__ = AUTOINCREMENT

    id: Optional[int] = Field(default=None, primary_key=True)
