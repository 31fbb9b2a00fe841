"""SQLite-backed key/value storage that survives restarts, like a browser's localStorage."""

import sqlite3
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, Optional, Union

import structlog

from ..errors import StorageError

MEMORY = ":memory:"


class LocalStorage:
    """String key/value store persisted in a single SQLite table."""

    def __init__(self, db_path: Union[str, Path] = "wiselife_storage.db"):
        self.db_path = str(db_path)
        self.logger = structlog.get_logger("storage.local")
        self._lock = threading.Lock()
        # An in-memory database only lives as long as its connection.
        self._memory_conn: Optional[sqlite3.Connection] = (
            sqlite3.connect(MEMORY, check_same_thread=False) if self.db_path == MEMORY else None
        )

        if self._memory_conn is None:
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)

        self._init_database()

    def _init_database(self) -> None:
        """Initialize database schema."""
        with self._lock, self._get_connection("init") as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS storage (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)
            conn.commit()

    @contextmanager
    def _get_connection(self, operation: str, key: Optional[str] = None) -> Iterator[sqlite3.Connection]:
        """Get database connection; SQLite failures surface as StorageError."""
        conn = None
        try:
            conn = self._memory_conn or sqlite3.connect(self.db_path, timeout=30.0)
            yield conn
        except sqlite3.Error as e:
            if conn:
                conn.rollback()
            self.logger.error("Storage error", operation=operation, key=key, error=str(e))
            raise StorageError(
                f"Storage {operation} failed: {e}", operation=operation, key=key
            ) from e
        finally:
            if conn is not None and conn is not self._memory_conn:
                conn.close()

    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value, or None when the key is absent."""
        with self._lock, self._get_connection("get", key) as conn:
            row = conn.execute("SELECT value FROM storage WHERE key = ?", (key,)).fetchone()
        return row[0] if row else None

    def set_item(self, key: str, value: str) -> None:
        self.set_items({key: value})

    def set_items(self, items: dict[str, str]) -> None:
        """Write several keys in one transaction; readers never see a partial update."""
        now = datetime.now(timezone.utc).isoformat()
        for key, value in items.items():
            if not isinstance(value, str):
                raise StorageError(f"Value for {key} must be a string", operation="set", key=key)

        with self._lock, self._get_connection("set", ",".join(items)) as conn:
            conn.executemany(
                "INSERT OR REPLACE INTO storage (key, value, updated_at) VALUES (?, ?, ?)",
                [(key, value, now) for key, value in items.items()]
            )
            conn.commit()

    def remove_item(self, key: str) -> None:
        self.remove_items([key])

    def remove_items(self, keys: list[str]) -> None:
        with self._lock, self._get_connection("remove", ",".join(keys)) as conn:
            conn.executemany("DELETE FROM storage WHERE key = ?", [(key,) for key in keys])
            conn.commit()

    def keys(self) -> list[str]:
        with self._lock, self._get_connection("keys") as conn:
            rows = conn.execute("SELECT key FROM storage ORDER BY key").fetchall()
        return [row[0] for row in rows]

    def close(self) -> None:
        if self._memory_conn is not None:
            self._memory_conn.close()
            self._memory_conn = None
