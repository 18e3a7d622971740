from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from edusync.api.common import deleted_or_404, get_or_404
from edusync.auth.dependencies import any_user, get_storage
from edusync.models import Task, User, UserRole
from edusync.schemas.schedule_schema import TaskCreate, TaskUpdate
from edusync.storage import Storage

router = APIRouter(prefix="/tasks", tags=["Tasks"])


def _own_task(storage: Storage, task_id: int, user: User) -> Task:
    task = get_or_404(storage.tasks.get(task_id), "Task")
    if task.user_id != user.id and user.role != UserRole.admin:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


@router.get("/", response_model=List[Task])
def list_tasks(user_id: Optional[int] = None, user: User = Depends(any_user),
               storage: Storage = Depends(get_storage)):
    if user_id is not None and user_id != user.id and user.role != UserRole.admin:
        raise HTTPException(status_code=403, detail="You can only list your own tasks")
    return storage.get_tasks_by_user(user_id if user_id is not None else user.id)


@router.post("/", response_model=Task, status_code=201)
def create_task(payload: TaskCreate, user: User = Depends(any_user), storage: Storage = Depends(get_storage)):
    if user.role != UserRole.admin or payload.user_id is None:
        payload = payload.model_copy(update={"user_id": user.id})
    return storage.tasks.create(payload)


@router.get("/{task_id}", response_model=Task)
def get_task(task_id: int, user: User = Depends(any_user), storage: Storage = Depends(get_storage)):
    return _own_task(storage, task_id, user)


@router.patch("/{task_id}", response_model=Task)
def update_task(task_id: int, payload: TaskUpdate, user: User = Depends(any_user),
                storage: Storage = Depends(get_storage)):
    _own_task(storage, task_id, user)
    task = storage.tasks.update(task_id, payload)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found for update")
    return task


@router.delete("/{task_id}", status_code=204)
def delete_task(task_id: int, user: User = Depends(any_user), storage: Storage = Depends(get_storage)):
    _own_task(storage, task_id, user)
    return deleted_or_404(storage.tasks.delete(task_id), "Task")
