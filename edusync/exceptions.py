"""
Error taxonomy shared by the storage layer, the auth gate and the HTTP layer.

Storage reads never raise for a missing record; they return ``None``. The
classes below are the failures callers are expected to branch on, so the route
layer can pick a response without matching on message text.
"""


class EduSyncError(Exception):
    """Base class for all EduSync errors."""

    default_message = "EduSync error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidCredentials(EduSyncError):
    default_message = "Invalid email or password"


class AccountNotApproved(EduSyncError):
    default_message = "Account is not approved"

    def __init__(self, status: str | None = None, message: str | None = None):
        self.status = status
        super().__init__(message or (f"Account is {status}" if status else None))


class NotAuthenticated(EduSyncError):
    default_message = "Not authenticated"


class Forbidden(EduSyncError):
    default_message = "Insufficient role privileges"


class EmailAlreadyRegistered(EduSyncError):
    default_message = "User already exists with this email"


class ConnectivityError(EduSyncError):
    """The relational backend could not complete a call."""

    default_message = "Storage backend unavailable"


class AIServiceError(EduSyncError):
    default_message = "AI tutor request failed"
