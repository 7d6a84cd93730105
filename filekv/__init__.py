"""filekv: persistent key-value store backed by a single file."""

from .config import Settings, load_settings
from .content_types import ContentType, csv_table, json_table
from .errors import (
    FileKVError,
    InitializationError,
    InvalidArgument,
    InvalidData,
    InvalidKey,
    PersistenceError,
)
from .kv.base import Backend
from .live import Live
from .readiness import State
from .store import Store, store

__all__ = [
    "Backend",
    "ContentType",
    "FileKVError",
    "InitializationError",
    "InvalidArgument",
    "InvalidData",
    "InvalidKey",
    "Live",
    "PersistenceError",
    "Settings",
    "State",
    "Store",
    "csv_table",
    "json_table",
    "load_settings",
    "store",
]
