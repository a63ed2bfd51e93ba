"""
Key-value storage backing the region caches and custom mappings.

Callers get a store injected; the SQLite store persists across restarts and
the memory store serves tests and database-less setups.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone

import aiosqlite

from region_atlas.logging import get_logger

logger = get_logger('services.kv_store')


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class KeyValueStore(ABC):
    """Async string-to-string store with prefix listing."""

    @abstractmethod
    async def get(self, key: str) -> str | None: ...

    @abstractmethod
    async def set(self, key: str, value: str) -> None: ...

    @abstractmethod
    async def delete(self, key: str) -> bool: ...

    @abstractmethod
    async def keys(self, prefix: str = "") -> list[str]: ...

    async def items(self, prefix: str = "") -> list[tuple[str, str]]:
        pairs: list[tuple[str, str]] = []
        for key in await self.keys(prefix):
            value = await self.get(key)
            if value is not None:
                pairs.append((key, value))
        return pairs

    async def delete_prefix(self, prefix: str) -> int:
        removed = 0
        for key in await self.keys(prefix):
            if await self.delete(key):
                removed += 1
        return removed


class MemoryKeyValueStore(KeyValueStore):
    """Process-local dict store."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    async def keys(self, prefix: str = "") -> list[str]:
        return [k for k in self._data if k.startswith(prefix)]


class SqliteKeyValueStore(KeyValueStore):
    """Store backed by the ``kv_store`` table."""

    def __init__(self, db_path: str):
        self.db_path = db_path

    async def _get_db(self) -> aiosqlite.Connection:
        db = await aiosqlite.connect(self.db_path)
        db.row_factory = aiosqlite.Row
        return db

    async def get(self, key: str) -> str | None:
        db = await self._get_db()
        try:
            cursor = await db.execute("SELECT value FROM kv_store WHERE key = ?", (key,))
            row = await cursor.fetchone()
            return row["value"] if row else None
        finally:
            await db.close()

    async def set(self, key: str, value: str) -> None:
        db = await self._get_db()
        try:
            await db.execute(
                """INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)
                   ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at""",
                (key, value, _now()),
            )
            await db.commit()
        finally:
            await db.close()

    async def delete(self, key: str) -> bool:
        db = await self._get_db()
        try:
            cursor = await db.execute("DELETE FROM kv_store WHERE key = ?", (key,))
            await db.commit()
            return cursor.rowcount > 0
        finally:
            await db.close()

    async def keys(self, prefix: str = "") -> list[str]:
        db = await self._get_db()
        try:
            # substr() keeps '_' and '%' in prefixes literal
            cursor = await db.execute(
                "SELECT key FROM kv_store WHERE substr(key, 1, ?) = ? ORDER BY key",
                (len(prefix), prefix),
            )
            rows = await cursor.fetchall()
            return [row["key"] for row in rows]
        finally:
            await db.close()

    async def delete_prefix(self, prefix: str) -> int:
        db = await self._get_db()
        try:
            cursor = await db.execute(
                "DELETE FROM kv_store WHERE substr(key, 1, ?) = ?",
                (len(prefix), prefix),
            )
            await db.commit()
            removed = cursor.rowcount
        finally:
            await db.close()
        logger.debug(f"Deleted {removed} keys with prefix {prefix!r}")
        return removed
