"""
Demo data for a fresh store: the CSE year 1 cohort with one teacher, three
students, their timetable, coursework and the teacher's planner.
"""
import logging
from datetime import date, time

from edusync.auth.passwords import PasswordHasher
from edusync.models import AttendanceStatus, SubmissionStatus, User, UserRole, UserStatus
from edusync.schemas.academic_schema import (
    BranchCreate, SchoolClassCreate, SectionCreate, StudentCreate, SubjectAssignmentCreate,
    SubjectCreate, TeacherCreate,
)
from edusync.schemas.coursework_schema import AssignmentCreate, AttendanceCreate, SubmissionCreate
from edusync.schemas.schedule_schema import TaskCreate, TimetableEntryCreate
from edusync.schemas.user_schema import UserCreate
from edusync.storage import Storage

logger = logging.getLogger(__name__)

ADMIN_EMAIL = "admin@edusync.com"
ADMIN_PASSWORD = "admin123"
DEMO_PASSWORD = "password123"


def _avatar(first_name: str, last_name: str, background: str) -> str:
    return f"https://ui-avatars.com/api/?name={first_name}+{last_name}&background={background}&color=fff"


def _user(storage: Storage, hasher: PasswordHasher, email: str, password: str, first_name: str,
          last_name: str, role: UserRole, background: str) -> User:
    return storage.users.create(UserCreate(
        email=email,
        password=hasher.hash(password),
        first_name=first_name,
        last_name=last_name,
        role=role,
        status=UserStatus.approved,
        profile_image=_avatar(first_name, last_name, background),
    ))


def seed_admin(storage: Storage, hasher: PasswordHasher) -> User:
    """Create the bootstrap admin account unless it already exists."""
    existing = storage.get_user_by_email(ADMIN_EMAIL)
    if existing is not None:
        logger.info("Admin user already exists")
        return existing
    admin = _user(storage, hasher, ADMIN_EMAIL, ADMIN_PASSWORD, "Admin", "User", UserRole.admin, "0D8ABC")
    logger.info(f"Admin user created: {ADMIN_EMAIL}")
    return admin


def seed_demo_data(storage: Storage, hasher: PasswordHasher) -> None:
    if storage.branches.list_all():
        logger.info("Store already has data, skipping demo seed")
        return

    cse = storage.branches.create(BranchCreate(name="Computer Science Engineering", description="CSE Branch"))
    storage.branches.create(BranchCreate(name="Electronics & Communication Engineering", description="ECE Branch"))
    storage.branches.create(BranchCreate(name="Mechanical Engineering", description="ME Branch"))

    section_a = storage.sections.create(SectionCreate(name="Section A"))
    storage.sections.create(SectionCreate(name="Section B"))

    class_1a = storage.classes.create(SchoolClassCreate(
        year_level=1, branch_id=cse.id, section_id=section_a.id, name="CSE Year 1 - A"))
    storage.classes.create(SchoolClassCreate(
        year_level=2, branch_id=cse.id, section_id=section_a.id, name="CSE Year 2 - A"))

    maths = storage.subjects.create(SubjectCreate(name="Mathematics", code="MATH101",
                                                  description="Fundamental Mathematics"))
    physics = storage.subjects.create(SubjectCreate(name="Physics", code="PHY101", description="Basic Physics"))
    computing = storage.subjects.create(SubjectCreate(name="Computer Science", code="CS101",
                                                      description="Introduction to Computer Science"))

    seed_admin(storage, hasher)
    teacher_user = _user(storage, hasher, "teacher@edusync.com", DEMO_PASSWORD, "Maureen", "Smith",
                         UserRole.teacher, "4F46E5")
    teacher = storage.teachers.create(TeacherCreate(user_id=teacher_user.id, teacher_id="TCH001",
                                                    specialization="Mathematics"))

    students = []
    for number, (first_name, last_name, background) in enumerate(
            [("James", "Wilson", "22C55E"), ("Brandy", "Johnson", "EAB308"), ("Khloe", "Davis", "EF4444")],
            start=1):
        user = _user(storage, hasher, f"{first_name.lower()}@edusync.com", DEMO_PASSWORD, first_name,
                     last_name, UserRole.student, background)
        students.append(storage.students.create(StudentCreate(
            user_id=user.id, student_id=f"ST2023{number:04d}", year_level=1,
            branch_id=cse.id, section_id=section_a.id)))

    maths_1a, physics_1a, computing_1a = (
        storage.subject_assignments.create(SubjectAssignmentCreate(
            teacher_id=teacher.id, subject_id=subject.id, class_id=class_1a.id))
        for subject in (maths, physics, computing)
    )

    for subject_assignment, start, end, room in [
        (maths_1a, time(8, 0), time(9, 30), "Room 101"),
        (physics_1a, time(10, 0), time(11, 30), "Room 102"),
        (computing_1a, time(11, 0), time(12, 30), "Lab 2"),
    ]:
        storage.timetable.create(TimetableEntryCreate(
            subject_assignment_id=subject_assignment.id, day="monday",
            start_time=start, end_time=end, room=room))

    maths_homework = storage.assignments.create(AssignmentCreate(
        title="Mathematics Assignment 1", description="Solve the given problems",
        subject_assignment_id=maths_1a.id, due_date=date(2023, 8, 15), max_marks=100))
    storage.assignments.create(AssignmentCreate(
        title="Physics Assignment 1", description="Solve the given problems",
        subject_assignment_id=physics_1a.id, due_date=date(2023, 8, 20), max_marks=100))

    for number, (student, marks) in enumerate(zip(students, [70, 48, 21]), start=1):
        storage.submissions.create(SubmissionCreate(
            assignment_id=maths_homework.id, student_id=student.id,
            submission_url=f"https://example.com/submission{number}",
            marks=marks, status=SubmissionStatus.marked))

    for student, status in zip(students, [AttendanceStatus.present, AttendanceStatus.present,
                                          AttendanceStatus.absent]):
        storage.attendance.create(AttendanceCreate(
            student_id=student.id, subject_assignment_id=maths_1a.id,
            date=date(2023, 8, 7), status=status))

    for title, description, due_date, due_time in [
        ("Prepare Assessment Questions",
         "Set assessment questions for Mathematics and Physics assessment coming up on the 20th.",
         date(2023, 8, 10), time(10, 0)),
        ("Have a meeting with my Mentees",
         "Gather my mentees together and have a meeting with them by 12pm.",
         date(2023, 8, 7), time(11, 0)),
        ("Submit Report and Comments",
         "Finish up my reports and comments for the term and submit.",
         date(2023, 8, 7), time(13, 0)),
        ("Speak to the Maureen's Parent",
         "Call and schedule a meeting with Maureen's Parents.",
         date(2023, 8, 7), time(15, 0)),
    ]:
        storage.tasks.create(TaskCreate(user_id=teacher_user.id, title=title, description=description,
                                        due_date=due_date, due_time=due_time))

    logger.info("Demo data seeded")
