from passlib.context import CryptContext
from passlib.registry import get_crypt_handler


class PasswordHasher:
    """Salted password hashing backed by a passlib ``CryptContext``.

    The scheme and salt size are startup settings. Verification uses passlib's
    constant-time digest comparison.
    """

    def __init__(self, scheme: str = "pbkdf2_sha256", salt_size: int | None = 16):
        handler = get_crypt_handler(scheme)
        if salt_size and "salt_size" in getattr(handler, "setting_kwds", ()):
            handler = handler.using(salt_size=salt_size)
        self.scheme = scheme
        self.context = CryptContext(schemes=[handler])

    def hash(self, password: str) -> str:
        return self.context.hash(password)

    def verify(self, password: str, hashed_password: str | None) -> bool:
        if not hashed_password:
            self.context.dummy_verify()
            return False
        try:
            return self.context.verify(password, hashed_password)
        except ValueError:
            # Hash written by another scheme or mangled in storage
            return False

    def dummy_verify(self) -> None:
        """Burn the same time as a real verification."""
        self.context.dummy_verify()

    def needs_update(self, hashed_password: str) -> bool:
        return self.context.needs_update(hashed_password)
