"""Locate a named property in a JSON text without parsing it.

The locator searches for the quoted property name anywhere in the text,
so a name that also appears inside a nested object, an array or a string
value may be matched before the intended top-level property. Object and
array values are returned whole; re-scan the returned span to go deeper.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from pyspanscan._constants import (
    COLON,
    COMMA,
    DOUBLE_QUOTE,
    PERIOD,
    SPACE,
    TAB,
)
from pyspanscan._scanner import block_length
from pyspanscan._span import Buffer, Span
from pyspanscan._utils import terminated_length, to_bytes, validate_property_name

logger = logging.getLogger(__name__)

_OPEN_BRACE = ord("{")
_CLOSE_BRACE = ord("}")
_OPEN_BRACKET = ord("[")
_CLOSE_BRACKET = ord("]")

# Literal values are not checked beyond their first byte.
_LITERALS: dict[int, tuple[str, int]] = {
    ord("t"): ("bool", 4),
    ord("f"): ("bool", 5),
    ord("n"): ("null", 4),
}


class JsonPropType(enum.Enum):
    """Kind of value found for a property."""

    OBJECT = "object"
    ARRAY = "array"
    TEXT = "text"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    NULL = "null"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class JsonPropertyValue:
    """Where a property value sits in the JSON text, and what kind it is.

    For ``TEXT`` values the span excludes the surrounding quotes.
    """

    value: Span | None = None
    length: int = 0
    kind: JsonPropType = JsonPropType.NOT_FOUND

    @property
    def found(self) -> bool:
        return self.kind is not JsonPropType.NOT_FOUND

    def tobytes(self) -> bytes:
        if self.value is None:
            return b""
        return self.value.tobytes()

    def decode(self, encoding: str = "utf-8", errors: str = "strict") -> str:
        return self.tobytes().decode(encoding, errors)


NOT_FOUND = JsonPropertyValue()


def _resolve_text(json: str | Buffer | memoryview | Span) -> tuple[Buffer, int, int]:
    """Return ``(buffer, start, end)`` bounding the NUL-terminated text."""
    if isinstance(json, Span):
        buffer, start, end = json.buffer, json.offset, json.end
    elif isinstance(json, (bytes, bytearray)):
        buffer, start, end = json, 0, len(json)
    else:
        buffer = to_bytes(json)
        start, end = 0, len(buffer)
    return buffer, start, terminated_length(buffer, start, end)


def _found(buffer: Buffer, start: int, length: int, kind: JsonPropType) -> JsonPropertyValue:
    logger.debug("found %s value at offset %d, %d bytes", kind.value, start, length)
    return JsonPropertyValue(Span(buffer, start, length), length, kind)


def find_property(
    json: str | Buffer | memoryview | Span,
    name: str | Buffer,
) -> JsonPropertyValue:
    """Find the value of property ``name`` in ``json``.

    Args:
        json: JSON text. Bytes-like input is scanned in place; a ``Span``
            (such as a previously returned object value) limits the scan to
            that view. ``str`` and ``memoryview`` input are copied to bytes
            first, so returned spans refer to that copy.
        name: Property name, at most 38 bytes once encoded.

    Returns:
        The located value, or ``NOT_FOUND``.

    Raises:
        InvalidPropertyNameError: If ``name`` is too long or contains NUL.
    """
    name_bytes = to_bytes(name)
    validate_property_name(name_bytes)
    buffer, start, end = _resolve_text(json)

    pattern = b'"' + name_bytes + b'"'
    name_at = buffer.find(pattern, start, end)
    if name_at == -1:
        logger.debug("property %r not found", name_bytes)
        return NOT_FOUND

    colon_at = buffer.find(COLON, name_at + len(pattern), end)
    if colon_at == -1:
        logger.debug("property %r has no ':' before end of text", name_bytes)
        return NOT_FOUND

    pos = colon_at + 1
    while pos < end and buffer[pos] in (SPACE, TAB):
        pos += 1
    if pos >= end:
        logger.debug("property %r has no value before end of text", name_bytes)
        return NOT_FOUND

    first = buffer[pos]
    if first == _OPEN_BRACE:
        length = block_length(buffer, pos, end, _OPEN_BRACE, _CLOSE_BRACE)
        return _found(buffer, pos, length, JsonPropType.OBJECT)
    if first == _OPEN_BRACKET:
        length = block_length(buffer, pos, end, _OPEN_BRACKET, _CLOSE_BRACKET)
        return _found(buffer, pos, length, JsonPropType.ARRAY)
    if first == DOUBLE_QUOTE:
        pos += 1
        # escaped quotes are not recognised
        close_at = buffer.find(DOUBLE_QUOTE, pos, end)
        if close_at == -1:
            close_at = end
        return _found(buffer, pos, close_at - pos, JsonPropType.TEXT)
    if first in _LITERALS:
        kind, length = _LITERALS[first]
        return _found(buffer, pos, min(length, end - pos), JsonPropType(kind))

    # Anything else is scanned as a number without validating its syntax.
    kind = JsonPropType.INT
    scan = pos
    while scan < end and buffer[scan] not in (COMMA, _CLOSE_BRACE):
        if buffer[scan] == PERIOD:
            kind = JsonPropType.FLOAT
        scan += 1
    return _found(buffer, pos, scan - pos, kind)
