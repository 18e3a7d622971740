from typing import Optional

from sqlmodel import Field, SQLModel

from edusync.models.common import AUTOINCREMENT


class BranchBase(SQLModel):
    name: str
    description: Optional[str] = None


class Branch(BranchBase, table=True):
    __tablename__ = "branches"
    __table_args__ = AUTOINCREMENT

    id: Optional[int] = Field(default=None, primary_key=True)
