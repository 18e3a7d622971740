from typing import List

from fastapi import APIRouter, Depends

from edusync.api.common import get_or_404
from edusync.auth.auth_handler import AuthService, SessionContext
from edusync.auth.dependencies import admin_only, get_auth_service, get_current_session, get_storage
from edusync.schemas.user_schema import UserResponse
from edusync.storage import Storage

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/pending-users", response_model=List[UserResponse], dependencies=[Depends(admin_only)])
def list_pending_users(storage: Storage = Depends(get_storage)):
    return [UserResponse.from_user(user) for user in storage.get_pending_users()]


@router.post("/approve-user/{user_id}", response_model=UserResponse)
def approve_user(user_id: int,
                 context: SessionContext = Depends(get_current_session),
                 auth_service: AuthService = Depends(get_auth_service)):
    user = get_or_404(auth_service.approve(context, user_id), "User")
    return UserResponse.from_user(user)


@router.post("/reject-user/{user_id}", response_model=UserResponse)
def reject_user(user_id: int,
                context: SessionContext = Depends(get_current_session),
                auth_service: AuthService = Depends(get_auth_service)):
    user = get_or_404(auth_service.reject(context, user_id), "User")
    return UserResponse.from_user(user)
