"""Environment-driven settings for filekv stores."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from .errors import InvalidArgument

PACKAGE_DIR = Path(__file__).resolve().parent


@dataclass
class Settings:
    base_dir: Path = field(default_factory=lambda: PACKAGE_DIR)
    indent: int = 4
    encoding: str = "utf-8"


def load_settings() -> Settings:
    """Read settings from the environment (and a ``.env`` file, if any).

    ``FILEKV_BASE_DIR``, ``FILEKV_INDENT`` and ``FILEKV_ENCODING``
    override the defaults. Relative store paths resolve against
    ``base_dir``, never the process working directory.
    """
    load_dotenv()
    base_dir = os.getenv("FILEKV_BASE_DIR")
    indent = os.getenv("FILEKV_INDENT")
    try:
        parsed_indent = int(indent) if indent else 4
    except ValueError:
        raise InvalidArgument(f"FILEKV_INDENT must be an integer, got {indent!r}") from None
    return Settings(
        base_dir=Path(base_dir).resolve() if base_dir else PACKAGE_DIR,
        indent=parsed_indent,
        encoding=os.getenv("FILEKV_ENCODING", "utf-8"),
    )


def resolve_path(path: str | os.PathLike[str] | None, settings: Settings) -> Path:
    """Resolve a store path against ``settings.base_dir``.

    Absolute paths are returned unchanged (normalized).
    """
    if path is None or not os.fspath(path):
        raise InvalidArgument("open: missing file path argument")
    return (settings.base_dir / Path(path)).resolve()
