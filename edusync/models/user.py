from datetime import datetime
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel

from edusync.models.common import AUTOINCREMENT, timestamp_field, utcnow


class UserRole(str, Enum):
    admin = "admin"
    teacher = "teacher"
    student = "student"


class UserStatus(str, Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


class UserBase(SQLModel):
    email: str = Field(index=True)
    first_name: str
    last_name: str
    role: UserRole = Field(default=UserRole.student)
    status: UserStatus = Field(default=UserStatus.pending)
    profile_image: Optional[str] = None


class User(UserBase, table=True):
    """User model represents an account that can sign in to the dashboard."""
    __tablename__ = "users"
    __table_args__ = AUTOINCREMENT

    id: Optional[int] = Field(default=None, primary_key=True)
    password: str = Field(exclude=True)  # passlib hash, never the plain text
    created_at: datetime = timestamp_field(default_factory=utcnow)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
