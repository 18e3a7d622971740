"""
Authentication and authorization gate.

A session moves from anonymous to authenticated on a successful ``login`` and
back on ``logout`` or expiry. Every privileged call receives the caller's
``SessionContext`` explicitly and checks it with ``authorize``.
"""
import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from edusync.auth.passwords import PasswordHasher
from edusync.exceptions import (
    AccountNotApproved, EmailAlreadyRegistered, Forbidden, InvalidCredentials, NotAuthenticated,
)
from edusync.models import SessionRecord, User, UserRole, UserStatus
from edusync.schemas.user_schema import UserCreate, UserRegister, UserUpdate
from edusync.storage import Storage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionContext:
    """The authenticated caller of one request."""
    session_id: str
    user: User

    @property
    def user_id(self) -> int:
        return self.user.id

    @property
    def role(self) -> UserRole:
        return self.user.role


def normalize_email(email: str) -> str:
    return email.strip().lower()


def authorize(context: Optional[SessionContext], allowed_roles: Iterable[UserRole] = ()) -> User:
    """Return the caller if approved and in ``allowed_roles``; otherwise raise Forbidden.

    An empty ``allowed_roles`` admits any approved user.
    """
    if context is None:
        raise NotAuthenticated()
    user = context.user
    if user.status != UserStatus.approved:
        raise Forbidden("Account is not approved")
    allowed = set(allowed_roles)
    if allowed and user.role not in allowed:
        raise Forbidden()
    return user


class AuthService:

    def __init__(self, storage: Storage, hasher: PasswordHasher, require_approval: bool = True):
        self.storage = storage
        self.hasher = hasher
        self.require_approval = require_approval

    def initial_status(self, role: UserRole) -> UserStatus:
        # Nobody grants themselves admin; an existing admin has to approve it
        if role == UserRole.admin or self.require_approval:
            return UserStatus.pending
        return UserStatus.approved

    def register(self, data: UserRegister) -> User:
        email = normalize_email(data.email)
        # check-then-act: two concurrent registrations can still race
        if self.storage.get_user_by_email(email) is not None:
            raise EmailAlreadyRegistered()
        user = self.storage.users.create(UserCreate(
            email=email,
            password=self.hasher.hash(data.password),
            first_name=data.first_name,
            last_name=data.last_name,
            role=data.role,
            status=self.initial_status(data.role),
            profile_image=data.profile_image,
        ))
        logger.info(f"Registered {user.role.value} account {user.id} ({user.status.value})")
        return user

    def authenticate(self, email: str, password: str) -> User:
        user = self.storage.get_user_by_email(normalize_email(email))
        if user is None:
            # Same hashing cost as a real account so unknown emails are not detectable
            self.hasher.dummy_verify()
            raise InvalidCredentials()
        if not self.hasher.verify(password, user.password):
            raise InvalidCredentials()
        if user.status != UserStatus.approved:
            raise AccountNotApproved(user.status.value)
        return user

    def login(self, email: str, password: str) -> Tuple[SessionRecord, User]:
        try:
            user = self.authenticate(email, password)
        except (InvalidCredentials, AccountNotApproved) as e:
            logger.info(f"Login refused: {e.message}")
            raise
        if self.hasher.needs_update(user.password):
            user = self.storage.users.update(user.id, UserUpdate(password=self.hasher.hash(password))) or user
        record = self.storage.session_store.create(user.id)
        logger.info(f"User {user.id} logged in")
        return record, user

    def logout(self, session_id: str) -> bool:
        return self.storage.session_store.destroy(session_id)

    def resolve_session(self, session_id: str | None) -> Optional[SessionContext]:
        """Look up a live session and the current state of its user."""
        if not session_id:
            return None
        record = self.storage.session_store.get(session_id)
        if record is None:
            return None
        user = self.storage.users.get(record.user_id)
        if user is None:
            self.storage.session_store.destroy(session_id)
            return None
        return SessionContext(session_id=record.sid, user=user)

    def approve(self, context: Optional[SessionContext], user_id: int) -> Optional[User]:
        admin = authorize(context, [UserRole.admin])
        user = self.storage.approve_user(user_id)
        if user is not None:
            logger.info(f"Admin {admin.id} approved user {user_id}")
        return user

    def reject(self, context: Optional[SessionContext], user_id: int) -> Optional[User]:
        admin = authorize(context, [UserRole.admin])
        user = self.storage.reject_user(user_id)
        if user is not None:
            self.storage.session_store.destroy_user_sessions(user_id)
            logger.info(f"Admin {admin.id} rejected user {user_id}")
        return user

    def change_password(self, context: Optional[SessionContext], current_password: str,
                        new_password: str) -> User:
        user = authorize(context)
        if not self.hasher.verify(current_password, user.password):
            raise InvalidCredentials("Current password is incorrect")
        return self.storage.users.update(user.id, UserUpdate(password=self.hasher.hash(new_password)))
