"""Borrowed views into a caller-owned buffer."""

from __future__ import annotations

from dataclasses import dataclass

Buffer = bytes | bytearray


@dataclass(frozen=True, eq=False)
class Span:
    """A non-owning ``(offset, length)`` view into ``buffer``.

    Nothing is copied until ``tobytes`` or ``decode`` is called. The view
    is only meaningful while the owning buffer is alive and unmodified.
    """

    buffer: Buffer
    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length

    def view(self) -> memoryview:
        return memoryview(self.buffer)[self.offset:self.end]

    def tobytes(self) -> bytes:
        return bytes(self.buffer[self.offset:self.end])

    def decode(self, encoding: str = "utf-8", errors: str = "strict") -> str:
        return self.tobytes().decode(encoding, errors)

    def __bytes__(self) -> bytes:
        return self.tobytes()

    def __len__(self) -> int:
        return self.length

    def __repr__(self) -> str:
        return f"Span(offset={self.offset}, length={self.length}, data={self.tobytes()!r})"
