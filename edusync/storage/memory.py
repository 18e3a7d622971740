import copy
import itertools
import logging
from datetime import timedelta
from typing import Any, Dict, List, Optional, Type

from sqlmodel import SQLModel

from edusync.models import SessionRecord
from edusync.models.common import utcnow
from edusync.storage.base import COLLECTION_TYPES, E, Repository, SessionStore, Storage

logger = logging.getLogger(__name__)


def _clone(record: E) -> E:
    # Callers get their own copy; mutating it never touches the stored record
    values = {name: copy.deepcopy(getattr(record, name)) for name in type(record).model_fields}
    return type(record)(**values)


def _matches(record: SQLModel, criteria: Dict[str, Any]) -> bool:
    for name, expected in criteria.items():
        value = getattr(record, name)
        if isinstance(expected, COLLECTION_TYPES):
            if value not in expected:
                return False
        elif value != expected:
            return False
    return True


class MemoryRepository(Repository[E]):
    """Dict-backed repository. Ids come from a counter that never goes back."""

    def __init__(self, model: Type[E]):
        super().__init__(model)
        self._records: Dict[int, E] = {}
        self._ids = itertools.count(1)

    def get(self, record_id: int) -> Optional[E]:
        record = self._records.get(record_id)
        return _clone(record) if record is not None else None

    def list_where(self, **criteria: Any) -> List[E]:
        return [_clone(record) for _, record in sorted(self._records.items())
                if _matches(record, criteria)]

    def create(self, data: SQLModel) -> E:
        record = self.build(data)
        record.id = next(self._ids)
        self._records[record.id] = record
        logger.debug("Created %s %s", self.model.__name__, record.id)
        return _clone(record)

    def update(self, record_id: int, patch: SQLModel) -> Optional[E]:
        current = self._records.get(record_id)
        if current is None:
            return None
        updated = _clone(current)
        for name, value in self.changes(patch).items():
            setattr(updated, name, value)
        self._records[record_id] = updated
        return _clone(updated)

    def delete(self, record_id: int) -> bool:
        return self._records.pop(record_id, None) is not None


class MemorySessionStore(SessionStore):

    def __init__(self, ttl: timedelta):
        super().__init__(ttl)
        self._sessions: Dict[str, SessionRecord] = {}

    def _save(self, record: SessionRecord) -> None:
        self._sessions[record.sid] = record

    def _load(self, sid: str) -> Optional[SessionRecord]:
        return self._sessions.get(sid)

    def destroy(self, sid: str) -> bool:
        return self._sessions.pop(sid, None) is not None

    def destroy_user_sessions(self, user_id: int) -> int:
        sids = [sid for sid, record in self._sessions.items() if record.user_id == user_id]
        for sid in sids:
            del self._sessions[sid]
        return len(sids)

    def purge_expired(self) -> int:
        now = utcnow()
        expired = [sid for sid, record in self._sessions.items() if record.expires_at <= now]
        for sid in expired:
            del self._sessions[sid]
        return len(expired)


class MemoryStorage(Storage):
    """Process-lifetime storage; nothing survives a restart."""

    def __init__(self, session_ttl: timedelta = timedelta(days=1)):
        self.session_store = MemorySessionStore(session_ttl)
        super().__init__()

    def _repository(self, model: Type[E]) -> Repository[E]:
        return MemoryRepository(model)
