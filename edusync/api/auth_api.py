from fastapi import APIRouter, Depends, Response, status

from edusync.auth.auth_handler import AuthService, SessionContext
from edusync.auth.dependencies import get_auth_service, get_current_session, get_settings, get_storage
from edusync.auth.session_token import encode_session_cookie, seconds_until
from edusync.configs.settings import Settings
from edusync.models import UserRole
from edusync.schemas.user_schema import (
    ChangePasswordRequest, CurrentUserResponse, LoginRequest, UserRegister, UserResponse,
)
from edusync.storage import Storage

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(payload: UserRegister, auth_service: AuthService = Depends(get_auth_service)):
    return UserResponse.from_user(auth_service.register(payload))


@router.post("/login", response_model=UserResponse)
def login(payload: LoginRequest, response: Response,
          auth_service: AuthService = Depends(get_auth_service),
          settings: Settings = Depends(get_settings)):
    record, user = auth_service.login(payload.email, payload.password)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=encode_session_cookie(record, settings.SESSION_SECRET, settings.SESSION_ALGORITHM),
        max_age=seconds_until(record.expires_at),
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )
    return UserResponse.from_user(user)


@router.post("/logout")
def logout(response: Response,
           context: SessionContext = Depends(get_current_session),
           auth_service: AuthService = Depends(get_auth_service),
           settings: Settings = Depends(get_settings)):
    auth_service.logout(context.session_id)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=CurrentUserResponse)
def me(context: SessionContext = Depends(get_current_session), storage: Storage = Depends(get_storage)):
    user = context.user
    details = CurrentUserResponse.model_validate(user.model_dump())
    if user.role == UserRole.student:
        details.student = storage.get_student_by_user_id(user.id)
    elif user.role == UserRole.teacher:
        details.teacher = storage.get_teacher_by_user_id(user.id)
    return details


@router.post("/change-password", response_model=UserResponse)
def change_password(payload: ChangePasswordRequest,
                    context: SessionContext = Depends(get_current_session),
                    auth_service: AuthService = Depends(get_auth_service)):
    user = auth_service.change_password(context, payload.current_password, payload.new_password)
    return UserResponse.from_user(user)
