from typing import Optional

from sqlmodel import Field, SQLModel

from edusync.models.common import AUTOINCREMENT


class SchoolClassBase(SQLModel):
    year_level: int = Field(index=True)
    branch_id: int = Field(index=True)
    section_id: int
    name: str


class SchoolClass(SchoolClassBase, table=True):
    """A class is the (year_level, branch_id, section_id) cohort.

    There is no membership table: students belong to a class when their own
    triple matches, see ``Storage.get_students_by_class``.
    """
    __tablename__ = "classes"
    __table_args__ = AUTOINCREMENT

    id: Optional[int] = Field(default=None, primary_key=True)

    @property
    def cohort(self) -> tuple:
        return self.year_level, self.branch_id, self.section_id
