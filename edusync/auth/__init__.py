from .auth_handler import AuthService, SessionContext, authorize, normalize_email
from .passwords import PasswordHasher
