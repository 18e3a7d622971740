from edusync.auth.passwords import PasswordHasher
from edusync.configs.database import make_engine
from edusync.configs.settings import Settings
from edusync.models import User, UserRole, UserStatus
from edusync.schemas.user_schema import UserCreate
from edusync.storage import DatabaseStorage, MemoryStorage, Storage

HASHER = PasswordHasher()


def memory_storage() -> Storage:
    return MemoryStorage()


def sqlite_storage() -> Storage:
    storage = DatabaseStorage(make_engine(Settings(DATABASE_URL="sqlite://")))
    storage.create_schema()
    return storage


def make_user(storage: Storage, email: str, role: UserRole = UserRole.student,
              status: UserStatus = UserStatus.approved, password: str = "secret123",
              hasher: PasswordHasher = HASHER) -> User:
    return storage.users.create(UserCreate(
        email=email,
        password=hasher.hash(password),
        first_name=email.split("@")[0].title(),
        last_name="Tester",
        role=role,
        status=status,
    ))


def make_settings(**overrides) -> Settings:
    values = dict(
        STORAGE_BACKEND="memory",
        SEED_DEMO_DATA=False,
        SESSION_SECRET="test-secret",
        OPENAI_API_KEY=None,
        LOG_LEVEL="WARNING",
    )
    values.update(overrides)
    return Settings(**values)
