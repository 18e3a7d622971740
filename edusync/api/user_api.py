from typing import List, Optional

from fastapi import APIRouter, Depends

from edusync.api.common import deleted_or_404, get_or_404
from edusync.auth.dependencies import admin_only, any_user, get_storage
from edusync.models import User, UserRole, UserStatus
from edusync.schemas.user_schema import UserProfileUpdate, UserResponse, UserUpdate
from edusync.storage import Storage

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/", response_model=List[UserResponse], dependencies=[Depends(admin_only)])
def list_users(role: Optional[UserRole] = None, status: Optional[UserStatus] = None,
               storage: Storage = Depends(get_storage)):
    criteria = {}
    if role is not None:
        criteria["role"] = role
    if status is not None:
        criteria["status"] = status
    return [UserResponse.from_user(user) for user in storage.users.list_where(**criteria)]


@router.patch("/me", response_model=UserResponse)
def update_my_profile(payload: UserProfileUpdate, user: User = Depends(any_user),
                      storage: Storage = Depends(get_storage)):
    patch = UserUpdate(**payload.model_dump(exclude_unset=True))
    return UserResponse.from_user(get_or_404(storage.users.update(user.id, patch), "User"))


@router.get("/{user_id}", response_model=UserResponse, dependencies=[Depends(admin_only)])
def get_user(user_id: int, storage: Storage = Depends(get_storage)):
    return UserResponse.from_user(get_or_404(storage.users.get(user_id), "User"))


@router.patch("/{user_id}", response_model=UserResponse, dependencies=[Depends(admin_only)])
def update_user(user_id: int, payload: UserProfileUpdate, storage: Storage = Depends(get_storage)):
    # Status changes go through /admin/approve-user and /admin/reject-user
    patch = UserUpdate(**payload.model_dump(exclude_unset=True))
    return UserResponse.from_user(get_or_404(storage.users.update(user_id, patch), "User"))


@router.delete("/{user_id}", status_code=204, dependencies=[Depends(admin_only)])
def delete_user(user_id: int, storage: Storage = Depends(get_storage)):
    # Orphans the user's student/teacher profile and other rows; nothing cascades
    storage.session_store.destroy_user_sessions(user_id)
    return deleted_or_404(storage.users.delete(user_id), "User")
