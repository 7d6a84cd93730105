"""Persistence backends."""

from .base import Backend
from .file import File
from .memory import Memory

__all__ = ["Backend", "File", "Memory"]
