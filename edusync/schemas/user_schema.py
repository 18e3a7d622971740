from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field
from sqlmodel import SQLModel

from edusync.models import Student, Teacher, User, UserRole, UserStatus
from edusync.models.user import UserBase


class UserCreate(UserBase):
    """Insert shape for the users table; ``password`` is already hashed."""
    password: str


class UserUpdate(SQLModel):
    email: Optional[str] = None
    password: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: Optional[UserRole] = None
    status: Optional[UserStatus] = None
    profile_image: Optional[str] = None


class UserRegister(BaseModel):
    email: str = Field(min_length=5, max_length=255)
    password: str = Field(min_length=6)
    first_name: str = Field(min_length=1)
    last_name: str = ""
    role: UserRole = UserRole.student
    profile_image: Optional[str] = None


class UserProfileUpdate(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image: Optional[str] = None


class LoginRequest(BaseModel):
    email: str
    password: str


class ChangePasswordRequest(BaseModel):
    current_password: str
    new_password: str = Field(min_length=6)


class UserResponse(BaseModel):
    id: int
    email: str
    first_name: str
    last_name: str
    role: UserRole
    status: UserStatus
    profile_image: Optional[str] = None
    created_at: datetime

    @staticmethod
    def from_user(user: User | None) -> Optional['UserResponse']:
        if user is None:
            return None
        return UserResponse.model_validate(user.model_dump())


class CurrentUserResponse(UserResponse):
    student: Optional[Student] = None
    teacher: Optional[Teacher] = None


class UserSummary(BaseModel):
    first_name: str
    last_name: str
    email: str
    profile_image: Optional[str] = None

    @staticmethod
    def from_user(user: User | None) -> Optional['UserSummary']:
        if user is None:
            return None
        return UserSummary(first_name=user.first_name, last_name=user.last_name,
                           email=user.email, profile_image=user.profile_image)
