# =============================================================================
# fuego_core/offline/local_database.py
# Local SQLite key-value store for the reservation fallback
# =============================================================================
"""
LocalStore - on-device storage of the whole reservation list.

The list is kept as one JSON blob under a fixed key, the same layout the
public site used in the browser. There is no partial-update API: callers
load the list, change it and save it back.
"""

from __future__ import annotations
import json
import sqlite3
import threading
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from fuego_core.config import ReservationSettings, get_settings
from fuego_core.data.reservation import Reservation, from_local_dict, to_local_dict
from fuego_core.errors import LocalCorruptError, LocalStorageError
from fuego_core.logging import get_logger

logger = get_logger(__name__)


class LocalStore:
    """Reservation list persisted as a single keyed blob in SQLite."""

    SCHEMA = """
        CREATE TABLE IF NOT EXISTS kv_store (
            key TEXT PRIMARY KEY,
            value TEXT,
            updated_at TEXT DEFAULT CURRENT_TIMESTAMP
        )
    """

    def __init__(self, db_path: Path, storage_key: str = "fuego_reservations"):
        """
        Args:
            db_path: Path to SQLite database file
            storage_key: Key holding the serialized reservation list
        """
        self.db_path = Path(db_path)
        self.storage_key = storage_key
        self._local = threading.local()
        self._initialized = False

    def _get_connection(self) -> sqlite3.Connection:
        """Get thread-local database connection."""
        if getattr(self._local, "connection", None) is None:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            self._local.connection = sqlite3.connect(str(self.db_path), check_same_thread=False)
            self._local.connection.row_factory = sqlite3.Row
        return self._local.connection

    @contextmanager
    def transaction(self):
        """Context manager for database transactions."""
        conn = self._get_connection()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise

    @contextmanager
    def _storage_errors(self, operation: str):
        """Convert SQLite and file system failures into LocalStorageError."""
        try:
            yield
        except (sqlite3.Error, OSError) as e:
            raise LocalStorageError(
                f"Local store {operation} failed: {e}",
                key=self.storage_key,
            ) from e

    def initialize(self) -> None:
        """Create the key-value table."""
        if self._initialized:
            return
        with self._storage_errors("initialize"), self.transaction() as conn:
            conn.execute(self.SCHEMA)
        self._initialized = True
        logger.info(f"Local reservation store initialized at: {self.db_path}")

    # =========================================================================
    # BLOB ACCESS
    # =========================================================================

    def _read_blob(self) -> Optional[str]:
        self.initialize()
        with self._storage_errors("read"):
            row = self._get_connection().execute(
                "SELECT value FROM kv_store WHERE key = ?",
                [self.storage_key],
            ).fetchone()
        return row["value"] if row else None

    def _decode(self, blob: str) -> List[Reservation]:
        try:
            items = json.loads(blob)
            if not isinstance(items, list):
                raise TypeError(f"expected a list, got {type(items).__name__}")
            return [from_local_dict(item) for item in items]
        except (ValueError, KeyError, TypeError) as e:
            raise LocalCorruptError(
                f"Stored reservations could not be decoded: {e}",
                key=self.storage_key,
            ) from e

    def load(self) -> List[Reservation]:
        """
        Return the stored list.

        Missing or corrupted data is treated as an empty list.

        Raises:
            LocalStorageError: the database file cannot be opened or read
        """
        blob = self._read_blob()
        if not blob:
            return []
        try:
            return self._decode(blob)
        except LocalCorruptError as e:
            logger.warning(f"{e}; treating local store as empty")
            return []

    def save(self, records: List[Reservation]) -> None:
        """Overwrite the stored list in a single write."""
        self.initialize()
        blob = json.dumps([to_local_dict(r) for r in records], ensure_ascii=False)
        with self._storage_errors("write"), self.transaction() as conn:
            conn.execute(
                """
                INSERT OR REPLACE INTO kv_store (key, value, updated_at)
                VALUES (?, ?, ?)
                """,
                [self.storage_key, blob, datetime.now().isoformat()],
            )
        logger.debug(f"Saved {len(records)} reservations locally")

    def clear(self) -> None:
        """Remove the stored list."""
        self.initialize()
        with self._storage_errors("clear"), self.transaction() as conn:
            conn.execute("DELETE FROM kv_store WHERE key = ?", [self.storage_key])

    def close(self) -> None:
        """Close database connection."""
        if getattr(self._local, "connection", None) is not None:
            self._local.connection.close()
            self._local.connection = None


_local_store: Optional[LocalStore] = None


def get_local_store(settings: Optional[ReservationSettings] = None) -> LocalStore:
    """Get the global LocalStore instance."""
    global _local_store
    if _local_store is None:
        settings = settings or get_settings()
        _local_store = LocalStore(settings.local_db_path, settings.storage_key)
    return _local_store
