"""SQLiteStore — durable, single-file storage backend using aiosqlite."""

from __future__ import annotations

import asyncio

try:
    import aiosqlite
except ImportError as exc:
    raise ImportError(
        "SQLiteStore requires the 'aiosqlite' package. "
        "Install it with: pip install composite-index[sqlite]"
    ) from exc

from composite_index.exceptions import StoreError, StoreKeyNotFoundError
from composite_index.stores.base import Store

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS index_store (
    key   TEXT NOT NULL PRIMARY KEY,
    value TEXT NOT NULL
)
"""


class SQLiteStore(Store):
    """Persistent store backed by a single SQLite file.

    Parameters:
        db_path: Path to the SQLite database file.  Use ``":memory:"``
                 for an in-memory database (useful for testing).
    """

    def __init__(self, db_path: str = "index_store.db") -> None:
        self._db_path = db_path
        self._db: aiosqlite.Connection | None = None
        self._connect_lock = asyncio.Lock()

    async def _connect(self) -> aiosqlite.Connection:
        if self._db is not None:
            return self._db
        async with self._connect_lock:
            if self._db is None:
                self._db = await self._open()
        return self._db

    async def _open(self) -> aiosqlite.Connection:
        try:
            db = await aiosqlite.connect(self._db_path)
        except aiosqlite.Error as exc:
            raise StoreError("connect", str(exc)) from exc
        try:
            await db.execute(_CREATE_TABLE)
            await db.commit()
        except aiosqlite.Error as exc:
            await db.close()
            raise StoreError("connect", str(exc)) from exc
        return db

    async def close(self) -> None:
        if self._db:
            await self._db.close()
            self._db = None

    # ── Store protocol ───────────────────────────────────────

    async def get(self, key: str) -> str:
        db = await self._connect()
        try:
            cursor = await db.execute("SELECT value FROM index_store WHERE key = ?", (key,))
            row = await cursor.fetchone()
        except aiosqlite.Error as exc:
            raise StoreError("get", str(exc)) from exc
        if row is None:
            raise StoreKeyNotFoundError(key)
        value: str = row[0]
        return value

    async def set(self, key: str, value: str) -> None:
        db = await self._connect()
        try:
            await db.execute(
                "INSERT OR REPLACE INTO index_store (key, value) VALUES (?, ?)",
                (key, value),
            )
            await db.commit()
        except aiosqlite.Error as exc:
            raise StoreError("set", str(exc)) from exc

    async def exists(self, key: str) -> bool:
        db = await self._connect()
        try:
            cursor = await db.execute("SELECT 1 FROM index_store WHERE key = ?", (key,))
            return (await cursor.fetchone()) is not None
        except aiosqlite.Error as exc:
            raise StoreError("exists", str(exc)) from exc

    async def remove(self, key: str) -> None:
        db = await self._connect()
        try:
            await db.execute("DELETE FROM index_store WHERE key = ?", (key,))
            await db.commit()
        except aiosqlite.Error as exc:
            raise StoreError("remove", str(exc)) from exc
