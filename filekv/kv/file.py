"""Single-file backend."""

import logging
import os
import tempfile
from pathlib import Path

from .base import Backend

logger = logging.getLogger(__name__)


class File(Backend):
    """Backend that mirrors the table to one text file.

    Every ``write`` rewrites the whole file: the text goes to a fresh
    sibling temporary file which then replaces the target.
    """

    def __init__(self, path: str | os.PathLike[str], encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding

    @property
    def location(self) -> str:
        return str(self.path)

    def read(self) -> str | None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        try:
            with open(self.path, "r", encoding=self.encoding) as f:
                return f.read()
        except FileNotFoundError:
            logger.debug("No backing file at %s", self.path)
            return None

    def write(self, text: str) -> None:
        fd, name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        tmp = Path(name)
        try:
            with os.fdopen(fd, "w", encoding=self.encoding) as f:
                f.write(text)
            tmp.replace(self.path)
        except BaseException:
            tmp.unlink(missing_ok=True)
            raise
        logger.debug("Wrote %d characters to %s", len(text), self.path)
