from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from edusync.api.common import deleted_or_404, get_or_404
from edusync.auth.dependencies import any_user, get_storage, staff_only
from edusync.models import Announcement, Message, User, UserRole
from edusync.schemas.communication_schema import (
    AnnouncementCreate, AnnouncementUpdate, MessageCreate, MessageUpdate,
)
from edusync.storage import Storage

router = APIRouter(tags=["Messages"])


@router.get("/messages", response_model=List[Message])
def list_messages(sender_id: Optional[int] = None, receiver_id: Optional[int] = None,
                  user: User = Depends(any_user), storage: Storage = Depends(get_storage)):
    if sender_id is None and receiver_id is None:
        receiver_id = user.id
    if user.role != UserRole.admin and user.id not in (sender_id, receiver_id):
        raise HTTPException(status_code=403, detail="You can only read your own messages")
    if sender_id is not None and receiver_id is not None:
        # one conversation direction; the caller is one of the two parties
        return storage.messages.list_where(sender_id=sender_id, receiver_id=receiver_id)
    if sender_id is not None:
        return storage.get_messages_by_sender(sender_id)
    return storage.get_messages_by_receiver(receiver_id)


@router.post("/messages", response_model=Message, status_code=201)
def send_message(payload: MessageCreate, user: User = Depends(any_user),
                 storage: Storage = Depends(get_storage)):
    get_or_404(storage.users.get(payload.receiver_id), "Receiver")
    return storage.messages.create(payload.model_copy(update={"sender_id": user.id, "read": False}))


@router.patch("/messages/{message_id}", response_model=Message)
def update_message(message_id: int, payload: MessageUpdate, user: User = Depends(any_user),
                   storage: Storage = Depends(get_storage)):
    message = get_or_404(storage.messages.get(message_id), "Message")
    if user.id not in (message.sender_id, message.receiver_id):
        raise HTTPException(status_code=403, detail="Not your message")
    if payload.message is not None and user.id != message.sender_id:
        raise HTTPException(status_code=403, detail="Only the sender can edit a message")
    return get_or_404(storage.messages.update(message_id, payload), "Message")


@router.delete("/messages/{message_id}", status_code=204)
def delete_message(message_id: int, user: User = Depends(any_user), storage: Storage = Depends(get_storage)):
    message = get_or_404(storage.messages.get(message_id), "Message")
    if user.role != UserRole.admin and user.id != message.sender_id:
        raise HTTPException(status_code=403, detail="Only the sender can delete a message")
    return deleted_or_404(storage.messages.delete(message_id), "Message")


@router.get("/announcements", response_model=List[Announcement])
def list_announcements(user_id: Optional[int] = None, role: Optional[str] = None,
                       class_id: Optional[int] = None, user: User = Depends(any_user),
                       storage: Storage = Depends(get_storage)):
    if user_id is not None:
        return storage.get_announcements_by_user(user_id)
    if class_id is not None:
        return storage.get_announcements_by_class(class_id)
    return storage.get_announcements_by_role(role or user.role)


@router.post("/announcements", response_model=Announcement, status_code=201)
def create_announcement(payload: AnnouncementCreate, user: User = Depends(staff_only),
                        storage: Storage = Depends(get_storage)):
    return storage.announcements.create(payload.model_copy(update={"user_id": user.id}))


@router.patch("/announcements/{announcement_id}", response_model=Announcement)
def update_announcement(announcement_id: int, payload: AnnouncementUpdate, user: User = Depends(staff_only),
                        storage: Storage = Depends(get_storage)):
    announcement = get_or_404(storage.announcements.get(announcement_id), "Announcement")
    if user.role != UserRole.admin and announcement.user_id != user.id:
        raise HTTPException(status_code=403, detail="Only the author can edit an announcement")
    return get_or_404(storage.announcements.update(announcement_id, payload), "Announcement")


@router.delete("/announcements/{announcement_id}", status_code=204)
def delete_announcement(announcement_id: int, user: User = Depends(staff_only),
                        storage: Storage = Depends(get_storage)):
    announcement = get_or_404(storage.announcements.get(announcement_id), "Announcement")
    if user.role != UserRole.admin and announcement.user_id != user.id:
        raise HTTPException(status_code=403, detail="Only the author can delete an announcement")
    return deleted_or_404(storage.announcements.delete(announcement_id), "Announcement")
