"""Query-string dictionary builder and lookup.

``build_dictionary`` splits a ``key=value&key=value`` buffer in place:
every ``&`` and ``=`` used as a delimiter is overwritten with a NUL byte
and the resulting keys and values are returned as spans into the same
buffer. No percent-decoding is performed here; see
``pyspanscan.strings.decode_escapes``.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from pyspanscan._constants import AMPERSAND, EQUALS, MAX_ENTRIES, NUL
from pyspanscan._errors import ERR_MSG_INVALID_CAPACITY, InvalidCapacityError
from pyspanscan._span import Buffer, Span
from pyspanscan._utils import require_writable, resolve_length, to_bytes

logger = logging.getLogger(__name__)


class BuildStatus(enum.Enum):
    """Outcome of building a dictionary."""

    COMPLETE = "complete"
    EMPTY = "empty"
    TRUNCATED_CAPACITY = "truncated_capacity"
    TRUNCATED_MALFORMED = "truncated_malformed"


class LookupStatus(enum.Enum):
    """Outcome of a dictionary lookup."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    UNINITIALIZED = "uninitialized"


@dataclass
class KeyValueDictionary:
    """Fixed-capacity, ordered key/value overlay on a query-string buffer."""

    keys: list[Span] = field(default_factory=list)
    values: list[Span] = field(default_factory=list)
    count: int = 0
    source_length: int = 0
    capacity: int = MAX_ENTRIES
    status: BuildStatus = BuildStatus.EMPTY

    @property
    def truncated(self) -> bool:
        return self.status in (
            BuildStatus.TRUNCATED_CAPACITY,
            BuildStatus.TRUNCATED_MALFORMED,
        )

    def get(self, key: str | Buffer) -> Span | None:
        """Return the value span of the first entry matching ``key``."""
        wanted = to_bytes(key)
        for k, v in self:
            if k.tobytes() == wanted:
                return v
        return None

    def items(self) -> list[tuple[Span, Span]]:
        return list(zip(self.keys[:self.count], self.values[:self.count]))

    def __iter__(self) -> Iterator[tuple[Span, Span]]:
        return iter(self.items())

    def __len__(self) -> int:
        return self.count

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (str, bytes, bytearray)):
            return False
        return self.get(key) is not None


@dataclass(frozen=True)
class LookupResult:
    """Result of ``lookup``: what was copied into the output buffer."""

    status: LookupStatus
    copied: int = 0
    truncated: bool = False

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND


def build_dictionary(
    buffer: bytearray,
    length: int | None = None,
    *,
    max_entries: int = MAX_ENTRIES,
) -> KeyValueDictionary:
    """Split a query string into key/value spans, mutating ``buffer`` in place.

    Args:
        buffer: Writable buffer holding ``k1=v1&k2=v2...``.
        length: Number of usable bytes in ``buffer``. Defaults to all of it.
        max_entries: Dictionary capacity. Segments past it are ignored.

    Returns:
        The dictionary. Malformed or oversized input yields a smaller
        dictionary whose ``status`` records why.

    Raises:
        BufferNotWritableError: If ``buffer`` is not a bytearray.
        InvalidLengthError: If ``length`` does not fit ``buffer``.
        InvalidCapacityError: If ``max_entries`` is below one.
    """
    buffer = require_writable(buffer)
    length = resolve_length(buffer, length)
    if max_entries < 1:
        raise InvalidCapacityError(
            ERR_MSG_INVALID_CAPACITY,
            f"max_entries={max_entries}",
        )

    result = KeyValueDictionary(source_length=length, capacity=max_entries)
    if length == 0:
        return result

    # Pass 1: segment on '&'
    segments: list[tuple[int, int]] = []
    pos = 0
    more_input = True
    while len(segments) < max_entries:
        delim_at = buffer.find(AMPERSAND, pos, length)
        if delim_at == -1:
            segments.append((pos, length))
            more_input = False
            break
        buffer[delim_at] = NUL
        segments.append((pos, delim_at))
        pos = delim_at + 1

    # a delimiter on the last byte leaves nothing unread
    more_input = more_input and pos < length
    status = BuildStatus.TRUNCATED_CAPACITY if more_input else BuildStatus.COMPLETE
    if more_input:
        logger.debug(
            "query string truncated at %d entries, %d bytes unread",
            max_entries, length - pos,
        )

    # Pass 2: split each segment on its first '='
    for start, stop in segments:
        delim_at = buffer.find(EQUALS, start, stop)
        if delim_at == -1:
            logger.debug(
                "segment at offset %d has no '=', keeping %d entries",
                start, len(result.keys),
            )
            status = BuildStatus.TRUNCATED_MALFORMED
            break
        buffer[delim_at] = NUL
        result.keys.append(Span(buffer, start, delim_at - start))
        result.values.append(Span(buffer, delim_at + 1, stop - delim_at - 1))

    result.count = len(result.keys)
    result.status = status
    return result


def lookup(
    dictionary: KeyValueDictionary,
    key: str | Buffer,
    out: bytearray,
    *,
    capacity: int | None = None,
) -> LookupResult:
    """Copy the value stored under ``key`` into the first ``capacity`` bytes of ``out``.

    At most ``capacity - 1`` bytes are copied and the rest of the first
    ``capacity`` bytes is NUL-filled, so the copy is always terminated.
    Bytes of ``out`` past ``capacity`` are never written. ``capacity``
    defaults to ``len(out)``. When the dictionary is empty or the key is
    absent, ``out`` is left untouched and the caller's pre-armed sentinel
    survives.

    Raises:
        BufferNotWritableError: If ``out`` is not a bytearray.
        InvalidLengthError: If ``capacity`` does not fit ``out``.
    """
    out = require_writable(out)
    capacity = resolve_length(out, capacity)
    if dictionary.count == 0 or len(dictionary.keys[0]) == 0:
        return LookupResult(LookupStatus.UNINITIALIZED)

    wanted = to_bytes(key)
    for k, v in dictionary:
        if k.tobytes() != wanted:
            continue
        if capacity == 0:
            return LookupResult(LookupStatus.FOUND, 0, truncated=len(v) > 0)
        copied = min(len(v), capacity - 1)
        out[:copied] = v.buffer[v.offset:v.offset + copied]
        out[copied:capacity] = bytes(capacity - copied)
        return LookupResult(LookupStatus.FOUND, copied, truncated=copied < len(v))

    return LookupResult(LookupStatus.NOT_FOUND)
