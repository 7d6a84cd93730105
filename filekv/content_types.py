"""Content types: encode/decode for the whole table."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from .errors import InvalidData

CSV_HEADER = "key,value"


@dataclass
class ContentType:
    """A whole-table codec.

    ``encode`` turns the table into the text stored by a backend;
    ``decode`` parses that text back into a fresh ``dict``. ``decode``
    raises ``InvalidData`` for text of the wrong shape.
    """

    name: str
    encode: Callable[[Mapping[str, Any]], str]
    decode: Callable[[str], dict[str, Any]]


def json_table(indent: int = 4) -> ContentType:
    """JSON object, pretty-printed (4-space indentation by default)."""

    def encode(table: Mapping[str, Any]) -> str:
        return json.dumps(table, indent=indent, ensure_ascii=False)

    def decode(text: str) -> dict[str, Any]:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidData(f"invalid JSON: {e}") from e
        if not isinstance(data, dict):
            raise InvalidData(
                f"expected a JSON object at top level, got {type(data).__name__}"
            )
        return data

    return ContentType(name="json", encode=encode, decode=decode)


def stringify(value: Any) -> str:
    """Render a value as a CSV cell: strings as-is, the rest as JSON."""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def csv_table() -> ContentType:
    """Two-column ``key,value`` text. Not type-preserving.

    Cells are neither quoted nor escaped; rows split on the first
    comma, so keys must not contain commas while values may.
    """

    def encode(table: Mapping[str, Any]) -> str:
        lines = [CSV_HEADER]
        lines.extend(f"{key},{stringify(value)}" for key, value in table.items())
        return "\n".join(lines)

    def decode(text: str) -> dict[str, Any]:
        if not isinstance(text, str):
            raise InvalidData(f"expected CSV text, got {type(text).__name__}")
        lines = [line.strip() for line in text.split("\n")]
        lines = [line for line in lines if line]
        if not lines:
            raise InvalidData(f"invalid CSV format, expected header {CSV_HEADER!r}")
        header = lines[0].split(",")
        if header != ["key", "value"]:
            raise InvalidData(
                f"invalid CSV format, expected header {CSV_HEADER!r}, got {lines[0]!r}"
            )
        table: dict[str, Any] = {}
        for lineno, line in enumerate(lines[1:], start=2):
            key, sep, value = line.partition(",")
            if not sep:
                raise InvalidData(f"line {lineno}: missing ',' in {line!r}")
            if not key:
                raise InvalidData(f"line {lineno}: empty key")
            table[key] = value
        return table

    return ContentType(name="csv", encode=encode, decode=decode)


def copy_value(value: Any) -> Any:
    """Deep-copy a value through the JSON value space.

    Tuples come back as lists; anything JSON cannot represent
    raises ``InvalidData``.
    """
    try:
        return json.loads(json.dumps(value, allow_nan=False))
    except (TypeError, ValueError) as e:
        raise InvalidData(f"value is not JSON-serializable: {e}") from e


def copy_table(data: Any) -> dict[str, Any]:
    """Deep-copy a mapping of string keys for bulk import."""
    if not isinstance(data, Mapping):
        raise InvalidData(f"expected a mapping, got {type(data).__name__}")
    for key in data:
        if not isinstance(key, str) or not key:
            raise InvalidData(f"invalid key {key!r}, keys must be non-empty strings")
    return copy_value(dict(data))
