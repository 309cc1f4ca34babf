"""Key-value store for user preferences.

Values are JSON-encoded into a single sqlite table. If the database cannot
be opened, read or written, the store logs once and keeps working from an
in-memory dict for the rest of the process lifetime.
"""

import json
import logging
import sqlite3
import threading
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS preferences (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT DEFAULT CURRENT_TIMESTAMP
);
"""


class KeyValueStore:
    """Persistent get/set with transparent in-memory fallback.

    db_path=None (or ":memory:") keeps everything in memory from the start.
    Thread-safe.
    """

    def __init__(self, db_path: str | Path | None = None):
        self._lock = threading.Lock()
        self._memory: dict[str, Any] = {}
        self._conn: sqlite3.Connection | None = None

        if db_path is None or str(db_path) == ":memory:":
            return

        try:
            path = Path(db_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(str(path), check_same_thread=False)
            conn.executescript(SCHEMA)
            self._conn = conn
            logger.info("[STORE] Using preferences database at %s", path)
        except (sqlite3.Error, OSError) as e:
            self._fall_back(e)

    @property
    def is_persistent(self) -> bool:
        return self._conn is not None

    def _fall_back(self, error: Exception) -> None:
        """Switch to memory for good. Caller holds the lock (or is __init__)."""
        logger.warning("[STORE] Preferences storage unavailable, using memory: %s", error)
        if self._conn is not None:
            try:
                self._conn.close()
            except sqlite3.Error:
                pass
        self._conn = None

    def get(self, key: str) -> Any | None:
        """Get a value, or None if missing or undecodable."""
        with self._lock:
            if self._conn is not None:
                try:
                    row = self._conn.execute(
                        "SELECT value FROM preferences WHERE key = ?", (key,)
                    ).fetchone()
                except sqlite3.Error as e:
                    self._fall_back(e)
                else:
                    if row is None:
                        return None
                    try:
                        return json.loads(row[0])
                    except (json.JSONDecodeError, TypeError):
                        logger.warning("[STORE] Corrupt value for '%s', ignoring", key)
                        return None
            return self._memory.get(key)

    def set(self, key: str, value: Any) -> None:
        """Store a JSON-serializable value."""
        encoded = json.dumps(value)
        with self._lock:
            # Memory copy always kept, so a later fallback still has it
            self._memory[key] = json.loads(encoded)
            if self._conn is None:
                return
            try:
                with self._conn:
                    self._conn.execute(
                        """
                        INSERT INTO preferences (key, value, updated_at)
                        VALUES (?, ?, CURRENT_TIMESTAMP)
                        ON CONFLICT(key) DO UPDATE SET
                            value = excluded.value,
                            updated_at = CURRENT_TIMESTAMP
                        """,
                        (key, encoded),
                    )
            except sqlite3.Error as e:
                self._fall_back(e)

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
