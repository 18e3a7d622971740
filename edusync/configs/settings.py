import os
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "EduSync"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Storage settings
    STORAGE_BACKEND: str = "memory"  # memory, database
    DATABASE_URL: str = "sqlite:///./edusync.db"
    DB_ECHO: bool = False
    SEED_DEMO_DATA: bool = True

    # Account approval and credential hashing
    REQUIRE_APPROVAL: bool = True
    PASSWORD_SCHEME: str = "pbkdf2_sha256"
    PASSWORD_SALT_SIZE: int = 16

    # Session settings
    SESSION_SECRET: str = "change-me-in-production"
    SESSION_ALGORITHM: str = "HS256"
    SESSION_COOKIE_NAME: str = "edusync_session"
    SESSION_EXPIRE_MINUTES: int = 60 * 24
    SESSION_COOKIE_SECURE: bool = False  # set true behind https

    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:3000"]

    # AI tutor (optional)
    OPENAI_API_KEY: str | None = None
    AI_MODEL: str = "gpt-4o"

    model_config = SettingsConfigDict(
        # Look for env file in project root, even when running from subdirectories
        env_file=os.getenv("ENV_FILE") or str(Path(__file__).parent.parent.parent / "local.env"),
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
