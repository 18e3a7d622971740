from typing import Callable, Optional

from fastapi import Depends, Request

from edusync.auth.auth_handler import AuthService, SessionContext, authorize
from edusync.auth.session_token import decode_session_cookie
from edusync.configs.settings import Settings
from edusync.exceptions import NotAuthenticated
from edusync.models import User, UserRole
from edusync.storage import Storage


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_optional_session(request: Request,
                         settings: Settings = Depends(get_settings),
                         auth_service: AuthService = Depends(get_auth_service)) -> Optional[SessionContext]:
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    sid = decode_session_cookie(token, settings.SESSION_SECRET, settings.SESSION_ALGORITHM)
    return auth_service.resolve_session(sid)


def get_current_session(context: Optional[SessionContext] = Depends(get_optional_session)) -> SessionContext:
    if context is None:
        raise NotAuthenticated()
    return context


def require_roles(*allowed_roles: UserRole) -> Callable:
    """Dependency admitting approved users in ``allowed_roles`` (any role when empty)."""
    def dependency(context: SessionContext = Depends(get_current_session)) -> User:
        return authorize(context, allowed_roles)

    return dependency


staff_only = require_roles(UserRole.admin, UserRole.teacher)
admin_only = require_roles(UserRole.admin)
any_user = require_roles()
