import logging
from contextlib import contextmanager
from datetime import timedelta
from typing import Any, List, Optional, Type

from sqlalchemy import delete as sa_delete
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, select

from edusync.configs.database import init_db
from edusync.exceptions import ConnectivityError
from edusync.models import SessionRecord
from edusync.models.common import utcnow
from edusync.storage.base import COLLECTION_TYPES, E, Repository, SessionStore, Storage

logger = logging.getLogger(__name__)


@contextmanager
def db_session(engine):
    """Session for a single storage call; backend failures surface as ConnectivityError."""
    try:
        with Session(engine, expire_on_commit=False) as session:
            yield session
    except SQLAlchemyError as e:
        logger.error(f"Database call failed: {e}")
        raise ConnectivityError(f"Database unavailable: {e.__class__.__name__}") from e


class DatabaseRepository(Repository[E]):

    def __init__(self, model: Type[E], engine):
        super().__init__(model)
        self.engine = engine

    def get(self, record_id: int) -> Optional[E]:
        with db_session(self.engine) as session:
            return session.get(self.model, record_id)

    def list_where(self, **criteria: Any) -> List[E]:
        statement = select(self.model)
        for name, expected in criteria.items():
            column = getattr(self.model, name)
            if isinstance(expected, COLLECTION_TYPES):
                statement = statement.where(column.in_(list(expected)))
            else:
                statement = statement.where(column == expected)
        statement = statement.order_by(self.model.id)
        with db_session(self.engine) as session:
            return list(session.exec(statement).all())

    def create(self, data: SQLModel) -> E:
        record = self.build(data)
        with db_session(self.engine) as session:
            session.add(record)
            session.commit()
            session.refresh(record)
            return record

    def update(self, record_id: int, patch: SQLModel) -> Optional[E]:
        changes = self.changes(patch)
        with db_session(self.engine) as session:
            record = session.get(self.model, record_id)
            if record is None:
                return None
            if not changes:
                return record
            for name, value in changes.items():
                setattr(record, name, value)
            session.add(record)
            session.commit()
            session.refresh(record)
            return record

    def delete(self, record_id: int) -> bool:
        with db_session(self.engine) as session:
            record = session.get(self.model, record_id)
            if record is None:
                return False
            session.delete(record)
            session.commit()
            return True


class DatabaseSessionStore(SessionStore):

    def __init__(self, engine, ttl: timedelta):
        super().__init__(ttl)
        self.engine = engine

    def _save(self, record: SessionRecord) -> None:
        with db_session(self.engine) as session:
            session.add(record)
            session.commit()
            session.refresh(record)

    def _load(self, sid: str) -> Optional[SessionRecord]:
        with db_session(self.engine) as session:
            return session.get(SessionRecord, sid)

    def destroy(self, sid: str) -> bool:
        with db_session(self.engine) as session:
            result = session.exec(sa_delete(SessionRecord).where(SessionRecord.sid == sid))
            session.commit()
            return result.rowcount > 0

    def destroy_user_sessions(self, user_id: int) -> int:
        with db_session(self.engine) as session:
            result = session.exec(sa_delete(SessionRecord).where(SessionRecord.user_id == user_id))
            session.commit()
            return result.rowcount

    def purge_expired(self) -> int:
        with db_session(self.engine) as session:
            result = session.exec(sa_delete(SessionRecord).where(SessionRecord.expires_at <= utcnow()))
            session.commit()
            return result.rowcount


class DatabaseStorage(Storage):
    """One table per entity; integer keys, plain integer reference columns, no cascades."""

    def __init__(self, engine, session_ttl: timedelta = timedelta(days=1)):
        self.engine = engine
        self.session_store = DatabaseSessionStore(engine, session_ttl)
        super().__init__()

    def _repository(self, model: Type[E]) -> Repository[E]:
        return DatabaseRepository(model, self.engine)

    def create_schema(self) -> None:
        try:
            init_db(self.engine)
        except SQLAlchemyError as e:
            logger.error(f"Could not create schema: {e}")
            raise ConnectivityError("Database unavailable while creating schema") from e

    def close(self) -> None:
        self.engine.dispose()
