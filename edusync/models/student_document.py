from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from edusync.models.common import AUTOINCREMENT, timestamp_field, utcnow


class StudentDocumentBase(SQLModel):
    student_id: int = Field(index=True)
    name: str
    type: str
    url: str


class StudentDocument(StudentDocumentBase, table=True):
    __tablename__ = "student_documents"
    __table_args__ = AUTOINCREMENT

    id: Optional[int] = Field(default=None, primary_key=True)
    uploaded_at: datetime = timestamp_field(default_factory=utcnow)
