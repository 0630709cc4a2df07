"""Key-value persistence and JSON-backed repositories for CRM collections."""

from __future__ import annotations

import json
import logging
import sqlite3
from pathlib import Path
from typing import Any, Callable, Generic, Protocol, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class KeyValueStorage(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class Repository(Protocol[T]):
    def load(self) -> list[T]: ...

    def save_all(self, records: list[T]) -> None: ...


def _rowcount(cursor: sqlite3.Cursor) -> int:
    if cursor.rowcount < 1:
        raise RuntimeError("Write did not affect any rows.")
    return cursor.rowcount


class SQLiteKeyValueStorage:
    """String values keyed by collection name, stored in a single SQLite file."""

    def __init__(self, db_path: str | Path) -> None:
        self.db_path = Path(db_path)

    def _connect(self) -> sqlite3.Connection:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        connection = sqlite3.connect(self.db_path)
        connection.row_factory = sqlite3.Row
        return connection

    def init_db(self) -> None:
        with self._connect() as connection:
            connection.execute(
                """
                CREATE TABLE IF NOT EXISTS kv_store (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
                )
                """
            )

    def get(self, key: str) -> str | None:
        with self._connect() as connection:
            row = connection.execute(
                "SELECT value FROM kv_store WHERE key = ?",
                (key,),
            ).fetchone()
        if row is None:
            return None
        return str(row["value"])

    def set(self, key: str, value: str) -> None:
        with self._connect() as connection:
            cursor = connection.execute(
                """
                INSERT INTO kv_store (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (key, value),
            )
            _rowcount(cursor)

    def remove(self, key: str) -> None:
        with self._connect() as connection:
            connection.execute("DELETE FROM kv_store WHERE key = ?", (key,))

    def keys(self) -> list[str]:
        with self._connect() as connection:
            rows = connection.execute("SELECT key FROM kv_store ORDER BY key ASC").fetchall()
        return [str(row["key"]) for row in rows]


class MemoryKeyValueStorage:
    """Dictionary-backed storage with the same interface as the SQLite one."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._values)


class JsonRepository(Generic[T]):
    """Load, seed, and save one collection as a JSON array under a storage key.

    Missing or malformed documents are treated as absent: the seed factory is
    called, the seed is written back, and the seed is returned.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str,
        from_dict: Callable[[dict[str, Any]], T],
        to_dict: Callable[[T], dict[str, Any]],
        seed_factory: Callable[[], list[T]] | None = None,
    ) -> None:
        self.storage = storage
        self.key = key
        self._from_dict = from_dict
        self._to_dict = to_dict
        self._seed_factory = seed_factory or list

    def load(self) -> list[T]:
        raw = self.storage.get(self.key)
        if raw is None:
            logger.info("No stored data for %s; seeding.", self.key)
            return self._seed()

        try:
            payload = json.loads(raw)
            if not isinstance(payload, list):
                raise ValueError(f"Expected a JSON array for {self.key}.")
            return [self._from_dict(item) for item in payload]
        except (ValueError, KeyError, TypeError) as exc:
            logger.warning("Stored data for %s is unreadable (%s); reseeding.", self.key, exc)
            return self._seed()

    def save_all(self, records: list[T]) -> None:
        payload = [self._to_dict(record) for record in records]
        self.storage.set(self.key, json.dumps(payload))

    def _seed(self) -> list[T]:
        records = list(self._seed_factory())
        self.save_all(records)
        return records
