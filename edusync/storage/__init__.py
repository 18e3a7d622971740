from datetime import timedelta

from edusync.configs.database import make_engine
from edusync.configs.settings import Settings
from .base import Repository, SessionStore, Storage
from .database import DatabaseStorage
from .memory import MemoryStorage


def build_storage(settings: Settings) -> Storage:
    """Create the backend named by ``settings.STORAGE_BACKEND``."""
    ttl = timedelta(minutes=settings.SESSION_EXPIRE_MINUTES)
    backend = settings.STORAGE_BACKEND.lower()
    if backend == "memory":
        return MemoryStorage(session_ttl=ttl)
    if backend == "database":
        storage = DatabaseStorage(make_engine(settings), session_ttl=ttl)
        storage.create_schema()
        return storage
    raise ValueError(f"Unknown STORAGE_BACKEND: {settings.STORAGE_BACKEND}")
