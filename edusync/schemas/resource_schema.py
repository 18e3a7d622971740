from typing import Optional

from sqlmodel import SQLModel

from edusync.models.resource import ResourceBase
from edusync.models.student_document import StudentDocumentBase


class ResourceCreate(ResourceBase):
    uploaded_by: Optional[int] = None


class ResourceUpdate(SQLModel):
    name: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    type: Optional[str] = None
    uploaded_by: Optional[int] = None
    subject_id: Optional[int] = None


class StudentDocumentCreate(StudentDocumentBase):
    pass


class StudentDocumentUpdate(SQLModel):
    student_id: Optional[int] = None
    name: Optional[str] = None
    type: Optional[str] = None
    url: Optional[str] = None
