"""In-place helpers for NUL-terminated byte strings."""

from __future__ import annotations

from pyspanscan._constants import NUL, PERCENT
from pyspanscan._errors import ERR_MSG_INVALID_LENGTH, InvalidLengthError
from pyspanscan._span import Buffer
from pyspanscan._utils import require_writable, resolve_length, terminated_length, to_bytes

_HEX_DIGITS = b"0123456789abcdefABCDEF"


def find_bounded(haystack: Buffer, needle: str | Buffer, length: int | None = None) -> int:
    """Return the index of ``needle`` within the first ``length`` bytes, or -1.

    The match must lie entirely inside the bound.
    """
    length = resolve_length(haystack, length)
    return haystack.find(to_bytes(needle), 0, length)


def replace_byte(
    buffer: bytearray,
    from_byte: int,
    to_byte: int,
    length: int | None = None,
) -> int:
    """Replace every ``from_byte`` with ``to_byte`` and return the count.

    Only the text up to the first NUL (or ``length``) is examined.
    """
    buffer = require_writable(buffer)
    end = terminated_length(buffer, 0, resolve_length(buffer, length))
    replaced = 0
    pos = buffer.find(from_byte, 0, end)
    while pos != -1:
        buffer[pos] = to_byte
        replaced += 1
        pos = buffer.find(from_byte, pos + 1, end)
    return replaced


def decode_escapes(buffer: bytearray, length: int | None = None, start: int = 0) -> int:
    """Decode ``%XX`` escapes in place and return the decoded length.

    The text begins at ``start`` and ends at the first NUL or after
    ``length`` bytes. Decoded bytes are compacted toward ``start`` and the
    bytes freed at the tail are set to NUL. A ``%`` not followed by two hex
    digits is copied through unchanged.
    """
    buffer = require_writable(buffer)
    if length is None:
        length = len(buffer) - start
    if start < 0 or length < 0 or start + length > len(buffer):
        raise InvalidLengthError(
            ERR_MSG_INVALID_LENGTH,
            f"range {start}+{length} outside buffer of {len(buffer)} bytes",
        )
    end = terminated_length(buffer, start, start + length)

    read = write = start
    while read < end:
        ch = buffer[read]
        if (
            ch == PERCENT
            and read + 2 < end
            and buffer[read + 1] in _HEX_DIGITS
            and buffer[read + 2] in _HEX_DIGITS
        ):
            buffer[write] = int(buffer[read + 1:read + 3], 16)
            read += 3
        else:
            buffer[write] = ch
            read += 1
        write += 1

    buffer[write:end] = bytes([NUL]) * (end - write)
    return write - start
