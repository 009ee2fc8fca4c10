# src/task_manager/prefs/store.py

from __future__ import annotations

import asyncio
import contextlib
import logging
import sqlite3
import time
from pathlib import Path

logger = logging.getLogger(__name__)

_KIND_STRING = "string"
_KIND_BOOL = "bool"


class SQLitePreferences:
    """
    SQLite-backed key-value preferences (implements core.ports.Preferences).

    Each key holds one typed value: a string or a bool. Reading a key with
    the other type's getter returns None, the same as a missing key.

    Thread-safety:
    - each call opens its own SQLite connection
    - the async API runs the blocking work via asyncio.to_thread
    """

    def __init__(self, db_path: str | Path = "prefs.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        try:
            total = self._count_keys()
        except sqlite3.Error:
            total = -1
        logger.info("Preferences ready db=%s keys=%s", self._db_path, total)

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS prefs (
                    key TEXT PRIMARY KEY,
                    kind TEXT NOT NULL,
                    value TEXT NOT NULL,
                    updated_at REAL NOT NULL
                )
                """
            )
            conn.commit()
        finally:
            conn.close()

    def _count_keys(self) -> int:
        conn = self._get_conn()
        try:
            (n,) = conn.execute("SELECT COUNT(*) FROM prefs").fetchone()
            return int(n)
        finally:
            conn.close()

    def _read(self, key: str, kind: str) -> str | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT kind, value FROM prefs WHERE key = ?", (key,)).fetchone()
        finally:
            conn.close()
        if row is None:
            return None
        if row["kind"] != kind:
            logger.debug("Preference %s has kind=%s, wanted %s", key, row["kind"], kind)
            return None
        return str(row["value"])

    def _write(self, key: str, kind: str, value: str) -> bool:
        try:
            conn = self._get_conn()
            try:
                conn.execute(
                    """
                    INSERT INTO prefs (key, kind, value, updated_at) VALUES (?, ?, ?, ?)
                    ON CONFLICT(key) DO UPDATE SET
                        kind = excluded.kind,
                        value = excluded.value,
                        updated_at = excluded.updated_at
                    """,
                    (key, kind, value, time.time()),
                )
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error:
            logger.exception("Failed to write preference key=%s", key)
            return False
        return True

    def _delete(self, key: str) -> bool:
        try:
            conn = self._get_conn()
            try:
                conn.execute("DELETE FROM prefs WHERE key = ?", (key,))
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error:
            logger.exception("Failed to remove preference key=%s", key)
            return False
        return True

    # ---- public API (async) ----

    async def get_string(self, key: str) -> str | None:
        return await asyncio.to_thread(self._read, key, _KIND_STRING)

    async def set_string(self, key: str, value: str) -> bool:
        return await asyncio.to_thread(self._write, key, _KIND_STRING, str(value))

    async def get_bool(self, key: str) -> bool | None:
        raw = await asyncio.to_thread(self._read, key, _KIND_BOOL)
        if raw is None:
            return None
        return raw == "1"

    async def set_bool(self, key: str, value: bool) -> bool:
        return await asyncio.to_thread(self._write, key, _KIND_BOOL, "1" if value else "0")

    async def remove(self, key: str) -> bool:
        return await asyncio.to_thread(self._delete, key)
