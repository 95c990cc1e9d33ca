"""Argument validation and coercion helpers."""

from __future__ import annotations

from pyspanscan._constants import MAX_PROPERTY_NAME_LENGTH, NUL
from pyspanscan._errors import (
    ERR_MSG_INVALID_LENGTH,
    ERR_MSG_NAME_NUL,
    ERR_MSG_NAME_TOO_LONG,
    ERR_MSG_NOT_WRITABLE,
    BufferNotWritableError,
    InvalidLengthError,
    InvalidPropertyNameError,
)
from pyspanscan._span import Buffer


def require_writable(buffer: object) -> bytearray:
    """Return ``buffer`` if it can be mutated in place."""
    if not isinstance(buffer, bytearray):
        raise BufferNotWritableError(
            ERR_MSG_NOT_WRITABLE,
            f"got {type(buffer).__name__}, expected bytearray",
        )
    return buffer


def resolve_length(buffer: Buffer, length: int | None) -> int:
    """Validate an explicit length against ``buffer``, defaulting to all of it."""
    if length is None:
        return len(buffer)
    if length < 0 or length > len(buffer):
        raise InvalidLengthError(
            ERR_MSG_INVALID_LENGTH,
            f"length {length} outside buffer of {len(buffer)} bytes",
        )
    return length


def terminated_length(buffer: Buffer, start: int = 0, end: int | None = None) -> int:
    """Return the index of the first NUL in ``buffer[start:end]``, or ``end``."""
    if end is None:
        end = len(buffer)
    nul_at = buffer.find(b"\x00", start, end)
    return end if nul_at == -1 else nul_at


def to_bytes(value: str | Buffer | memoryview) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def validate_property_name(name: bytes) -> None:
    """Reject names that cannot fit the quoted search pattern."""
    if len(name) > MAX_PROPERTY_NAME_LENGTH:
        raise InvalidPropertyNameError(
            ERR_MSG_NAME_TOO_LONG,
            f"property name {name!r} exceeds {MAX_PROPERTY_NAME_LENGTH} bytes",
        )
    if NUL in name:
        raise InvalidPropertyNameError(
            ERR_MSG_NAME_NUL,
            f"null byte found in property name: {name!r}",
        )
