from .user import User, UserRole, UserStatus
from .student import Student
from .teacher import Teacher
from .branch import Branch
from .section import Section
from .school_class import SchoolClass
from .subject import Subject
from .subject_assignment import SubjectAssignment
from .attendance import Attendance, AttendanceStatus
from .assignment import Assignment
from .submission import Submission, SubmissionStatus
from .message import Message
from .announcement import Announcement, TARGET_ALL
from .resource import Resource
from .student_document import StudentDocument
from .timetable import TimetableEntry
from .task import Task
from .session import SessionRecord
