"""Live: immediate-write store mirrored to a backend."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Mapping

from .content_types import ContentType, copy_table, copy_value, csv_table, json_table
from .errors import InitializationError, InvalidArgument, InvalidData, InvalidKey, PersistenceError
from .kv.base import Backend
from .kv.memory import Memory
from .readiness import Readiness, State

logger = logging.getLogger(__name__)

Predicate = Callable[[str, Any], bool]


def check_key(operation: str, key: Any) -> str:
    """Return ``key`` if it is a non-empty string, else raise ``InvalidKey``."""
    if not isinstance(key, str) or not key:
        raise InvalidKey(operation, key)
    return key


class Live:
    """Key-value store whose writes take effect immediately.

    The whole table lives in memory. It is loaded once from the
    backend (or created empty, and persisted, on first run), and every
    mutation rewrites the full encoded table before returning.

    All operations are coroutines and wait for the initial load first.
    There is no locking: concurrent mutations can interleave while a
    write is in flight, and the last write to land wins on disk.

    Implements the ``Store`` protocol.
    """

    def __init__(
        self,
        backend: Backend | None = None,
        *,
        content_type: ContentType | None = None,
    ) -> None:
        self._backend = backend if backend is not None else Memory()
        self._content_type = content_type if content_type is not None else json_table()
        self._table: dict[str, Any] = {}
        self._ready = Readiness(self._load, location=self._backend.location)

    def __repr__(self) -> str:
        return (
            f"Live({self._backend.location!r}, content_type={self._content_type.name!r}, "
            f"state={self._ready.state.value})"
        )

    @property
    def location(self) -> str:
        return self._backend.location

    @property
    def state(self) -> State:
        return self._ready.state

    # -- Persistence --

    async def _load(self) -> None:
        location = self._backend.location
        try:
            text = await asyncio.to_thread(self._backend.read)
        except (OSError, UnicodeError) as e:
            raise InitializationError(location, str(e)) from e

        if text is None:
            logger.debug("Creating empty store at %s", location)
            self._table = {}
            try:
                await self._write("open")
            except PersistenceError as e:
                raise InitializationError(location, str(e)) from e
            return

        try:
            self._table = self._content_type.decode(text)
        except InvalidData as e:
            raise InitializationError(location, str(e)) from e
        logger.debug("Loaded %d keys from %s", len(self._table), location)

    async def _write(self, operation: str) -> None:
        try:
            text = self._content_type.encode(self._table)
        except (TypeError, ValueError) as e:
            raise PersistenceError(operation, self._backend.location, str(e)) from e
        try:
            await asyncio.to_thread(self._backend.write, text)
        except (OSError, UnicodeError) as e:
            raise PersistenceError(operation, self._backend.location, str(e)) from e

    async def wait_ready(self) -> None:
        """Wait for the initial load. Raises ``InitializationError`` on failure."""
        await self._ready.wait()

    # -- Read operations --

    async def get(self, key: str, default: Any = None) -> Any:
        await self._ready.wait()
        check_key("get", key)
        return self._table.get(key, default)

    async def has(self, key: str) -> bool:
        await self._ready.wait()
        check_key("has", key)
        return key in self._table

    async def size(self) -> int:
        await self._ready.wait()
        return len(self._table)

    async def keys(self) -> list[str]:
        await self._ready.wait()
        return list(self._table.keys())

    async def values(self) -> list[Any]:
        await self._ready.wait()
        return list(self._table.values())

    async def find(self, predicate: Predicate | None = None) -> list[tuple[str, Any]]:
        """Return ``(key, value)`` pairs, filtered by ``predicate(key, value)``.

        Pairs come back in table order. Without a predicate every pair
        is returned.
        """
        await self._ready.wait()
        if predicate is not None and not callable(predicate):
            raise InvalidArgument(
                f"find: predicate must be callable, got {type(predicate).__name__}"
            )
        items = list(self._table.items())
        if predicate is None:
            return items
        return [(key, value) for key, value in items if predicate(key, value)]

    async def to_json(self) -> dict[str, Any]:
        """Shallow copy of the whole table."""
        await self._ready.wait()
        return dict(self._table)

    async def to_csv(self) -> str:
        """The table as ``key,value`` text. Values are stringified."""
        await self._ready.wait()
        return csv_table().encode(self._table)

    # -- Write operations --

    async def set(self, key: str, value: Any) -> None:
        """Insert or overwrite ``key`` and rewrite the backing file.

        ``value`` is copied through the JSON value space first, so it
        must be JSON-serializable (``InvalidData`` otherwise).
        """
        await self._ready.wait()
        check_key("set", key)
        try:
            value = copy_value(value)
        except InvalidData as e:
            raise InvalidData(f"set: {e}") from e
        self._table[key] = value
        await self._write("set")

    async def delete(self, key: str) -> bool:
        """Remove ``key``. Returns False, without writing, if it was absent."""
        await self._ready.wait()
        check_key("delete", key)
        if key not in self._table:
            return False
        del self._table[key]
        await self._write("delete")
        return True

    async def clear(self) -> None:
        await self._ready.wait()
        self._table = {}
        await self._write("clear")

    delete_all = clear

    async def from_json(self, data: Mapping[str, Any]) -> None:
        """Replace the whole table with a deep copy of ``data``."""
        await self._ready.wait()
        try:
            table = copy_table(data)
        except InvalidData as e:
            raise InvalidData(f"from_json: {e}") from e
        self._table = table
        await self._write("from_json")

    async def from_csv(self, text: str) -> None:
        """Replace the whole table with the rows of ``key,value`` text.

        Every imported value is a string.
        """
        await self._ready.wait()
        try:
            table = csv_table().decode(text)
        except InvalidData as e:
            raise InvalidData(f"from_csv: {e}") from e
        self._table = table
        await self._write("from_csv")
