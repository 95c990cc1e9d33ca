"""Nesting-aware length of a balanced ``{...}`` or ``[...]`` block."""

from __future__ import annotations

from pyspanscan._span import Buffer


def block_length(
    buffer: Buffer,
    start: int,
    end: int,
    open_char: int,
    close_char: int,
) -> int:
    """Return the byte length of the block opening at ``buffer[start]``.

    The length includes both delimiters. Nested blocks using the same
    delimiter pair are counted; other bytes, including quotes, are not
    interpreted. An unbalanced block stops at ``end`` and yields
    ``end - start``, indistinguishable from a block closing on the last byte.
    """
    open_pairs = 1
    pos = start
    while open_pairs > 0 and pos + 1 < end:
        pos += 1
        ch = buffer[pos]
        if ch == open_char:
            open_pairs += 1
        elif ch == close_char:
            open_pairs -= 1
    if open_pairs:
        return end - start
    return pos - start + 1
