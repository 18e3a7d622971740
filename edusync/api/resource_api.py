from typing import List, Optional

from fastapi import APIRouter, Depends

from edusync.api.common import deleted_or_404, get_or_404
from edusync.auth.dependencies import any_user, get_storage, staff_only
from edusync.models import Resource, User
from edusync.schemas.resource_schema import ResourceCreate, ResourceUpdate
from edusync.storage import Storage

router = APIRouter(prefix="/resources", tags=["Resources"])


@router.get("/", response_model=List[Resource], dependencies=[Depends(any_user)])
def list_resources(user_id: Optional[int] = None, subject_id: Optional[int] = None,
                   storage: Storage = Depends(get_storage)):
    if user_id is not None:
        return storage.get_resources_by_user(user_id)
    if subject_id is not None:
        return storage.get_resources_by_subject(subject_id)
    return storage.resources.list_all()


@router.get("/{resource_id}", response_model=Resource, dependencies=[Depends(any_user)])
def get_resource(resource_id: int, storage: Storage = Depends(get_storage)):
    return get_or_404(storage.resources.get(resource_id), "Resource")


@router.post("/", response_model=Resource, status_code=201)
def create_resource(payload: ResourceCreate, user: User = Depends(staff_only),
                    storage: Storage = Depends(get_storage)):
    return storage.resources.create(payload.model_copy(update={"uploaded_by": user.id}))


@router.patch("/{resource_id}", response_model=Resource, dependencies=[Depends(staff_only)])
def update_resource(resource_id: int, payload: ResourceUpdate, storage: Storage = Depends(get_storage)):
    return get_or_404(storage.resources.update(resource_id, payload), "Resource")


@router.delete("/{resource_id}", status_code=204, dependencies=[Depends(staff_only)])
def delete_resource(resource_id: int, storage: Storage = Depends(get_storage)):
    return deleted_or_404(storage.resources.delete(resource_id), "Resource")
