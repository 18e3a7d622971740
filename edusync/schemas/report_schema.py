from typing import List

from pydantic import BaseModel

from edusync.schemas.academic_schema import StudentWithUser


class AttendanceStats(BaseModel):
    present: int = 0
    absent: int = 0
    late: int = 0
    total: int = 0


class AssignmentStats(BaseModel):
    total_students: int = 0
    assigned: int = 0
    submitted: int = 0
    not_submitted: int = 0
    marked: int = 0
    not_marked: int = 0


class StudentPerformanceItem(BaseModel):
    student: StudentWithUser
    percentage: float


class ClassPerformance(BaseModel):
    class_id: int
    students: List[StudentPerformanceItem]
