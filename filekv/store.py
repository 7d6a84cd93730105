"""Store protocol and factory function."""

from __future__ import annotations

import os
from typing import Any, Literal, Mapping, Protocol, runtime_checkable

from .config import Settings, load_settings, resolve_path
from .content_types import ContentType, json_table
from .errors import InvalidArgument
from .live import Live, Predicate


@runtime_checkable
class Store(Protocol):
    """Protocol for whole-table persistent key-value stores.

    Every operation is a coroutine that waits for the initial load.
    Implementations: ``Live``.
    """

    async def get(self, key: str, default: Any = None) -> Any: ...
    async def set(self, key: str, value: Any) -> None: ...
    async def has(self, key: str) -> bool: ...
    async def delete(self, key: str) -> bool: ...
    async def clear(self) -> None: ...
    async def size(self) -> int: ...
    async def keys(self) -> list[str]: ...
    async def values(self) -> list[Any]: ...
    async def find(self, predicate: Predicate | None = None) -> list[tuple[str, Any]]: ...
    async def to_json(self) -> dict[str, Any]: ...
    async def from_json(self, data: Mapping[str, Any]) -> None: ...
    async def to_csv(self) -> str: ...
    async def from_csv(self, text: str) -> None: ...


def store(
    path: str | os.PathLike[str] | None = None,
    *,
    storage: Literal["file", "memory"] = "file",
    settings: Settings | None = None,
    content_type: ContentType | None = None,
) -> Live:
    """Open a store.

    Args:
        path: Backing file. Required when ``storage="file"``. Relative
            paths resolve against ``settings.base_dir``, not the
            current working directory.
        storage: ``"file"`` (default) or ``"memory"``.
        settings: Defaults to ``load_settings()``.
        content_type: Table encoding (default: JSON with
            ``settings.indent`` spaces).

    Returns:
        A ``Live`` store. Loading starts at once when called from a
        coroutine, otherwise on the first operation.
    """
    if settings is None:
        settings = load_settings()
    if content_type is None:
        content_type = json_table(indent=settings.indent)

    if storage == "memory":
        from .kv.memory import Memory

        backend = Memory()
    elif storage == "file":
        from .kv.file import File

        backend = File(resolve_path(path, settings), encoding=settings.encoding)
    else:
        raise InvalidArgument(f"Unknown storage: {storage!r}")

    return Live(backend, content_type=content_type)
