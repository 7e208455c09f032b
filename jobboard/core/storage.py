"""
Key-value storage collaborators
The store persists each collection as one JSON blob per key
"""
import logging
from typing import Dict, List, Optional, Protocol

from sqlalchemy.orm import sessionmaker

from jobboard.core.config import settings
from jobboard.core.database import SessionLocal, init_db, make_engine
from jobboard.models.storage_entry import StorageEntry

logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    """Minimal string-to-string storage, shaped like browser storage"""

    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...

    def keys(self) -> List[str]: ...


class MemoryStorage:
    """Dict-backed storage; lives as long as the process"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> List[str]:
        return list(self._data)

    def __len__(self):
        return len(self._data)


class DatabaseStorage:
    """
    Storage backed by the storage_entries table
    Every write is its own commit; there is no multi-key transaction
    """

    def __init__(self, session_factory=None):
        self._session_factory = session_factory or SessionLocal

    @classmethod
    def from_url(cls, database_url: str) -> "DatabaseStorage":
        engine = make_engine(database_url)
        init_db(bind=engine)
        return cls(sessionmaker(autocommit=False, autoflush=False, bind=engine))

    def get_item(self, key: str) -> Optional[str]:
        db = self._session_factory()
        try:
            entry = db.get(StorageEntry, key)
            return entry.value if entry else None
        finally:
            db.close()

    def set_item(self, key: str, value: str) -> None:
        db = self._session_factory()
        try:
            entry = db.get(StorageEntry, key)
            if entry:
                entry.value = value
            else:
                db.add(StorageEntry(key=key, value=value))
            db.commit()
        except Exception:
            db.rollback()
            logger.exception("Failed to write storage key %s", key)
            raise
        finally:
            db.close()

    def remove_item(self, key: str) -> None:
        db = self._session_factory()
        try:
            entry = db.get(StorageEntry, key)
            if entry:
                db.delete(entry)
                db.commit()
        finally:
            db.close()

    def keys(self) -> List[str]:
        db = self._session_factory()
        try:
            return [key for (key,) in db.query(StorageEntry.key).all()]
        finally:
            db.close()


def create_storage(backend: Optional[str] = None, database_url: Optional[str] = None) -> KeyValueStorage:
    """Build the durable storage named in settings"""
    backend = (backend or settings.STORAGE_BACKEND).lower()
    if backend == "memory":
        return MemoryStorage()
    if backend == "database":
        if database_url:
            return DatabaseStorage.from_url(database_url)
        init_db()
        return DatabaseStorage()
    raise ValueError(f"Unknown storage backend: {backend}")
