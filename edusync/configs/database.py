import logging

from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from edusync.configs.settings import Settings

logger = logging.getLogger(__name__)


def make_engine(settings: Settings):
    """Create the SQLModel engine for the configured DATABASE_URL."""
    url = settings.DATABASE_URL
    kwargs = {"echo": settings.DB_ECHO}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


def init_db(engine):
    # Table models must be imported before create_all sees them
    import edusync.models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.info("Database schema ready on %s", engine.url.render_as_string(hide_password=True))
