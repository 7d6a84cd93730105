"""In-memory backend."""

import threading

from .base import Backend


class Memory(Backend):
    """A memory-backed backend holding the last written text."""

    def __init__(self, text: str | None = None) -> None:
        self.text = text
        self.writes = 0
        self._lock = threading.Lock()

    @property
    def location(self) -> str:
        return f"<memory {id(self):#x}>"

    def read(self) -> str | None:
        return self.text

    def write(self, text: str) -> None:
        with self._lock:
            self.text = text
            self.writes += 1
