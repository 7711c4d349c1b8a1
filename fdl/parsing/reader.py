"""Forward-only byte cursor with look-ahead over a binary stream.

The Reader keeps a growable buffer filled from the underlying stream in
fixed-size chunks plus an explicit read index into that buffer. Look-ahead
only pulls as many chunks as needed, so the source is never loaded whole,
and logical position is independent of the stream's own file position.
"""

from __future__ import annotations

import io
from typing import BinaryIO, Optional

from fdl.errors import EndOfFile, EndOfLine

NEWLINE = ord("\n")
CARRIAGE_RETURN = ord("\r")

DEFAULT_CHUNK_SIZE = 4096


class Reader:
    """Look-ahead cursor over a readable binary stream.

    Bytes are exposed as ints (0-255); end-of-stream is ``None``.
    ``peek(1)`` is always the next unconsumed byte.
    """

    def __init__(self, stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        """Initialize reader.

        Args:
            stream: Readable binary stream. Only ``read`` is used.
            chunk_size: Number of bytes pulled from the stream per refill.
        """
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._stream = stream
        self._chunk_size = chunk_size
        self._buffer = bytearray()
        self._index = 0
        self._cursor = 0
        self._exhausted = False

    @classmethod
    def from_bytes(cls, data: bytes, chunk_size: int = DEFAULT_CHUNK_SIZE) -> "Reader":
        """Create a reader over in-memory bytes."""
        return cls(io.BytesIO(data), chunk_size=chunk_size)

    @property
    def cursor(self) -> int:
        """Number of bytes consumed so far."""
        return self._cursor

    def _fill(self, wanted: int) -> int:
        """Make at least ``wanted`` unconsumed bytes available if possible.

        Returns:
            int: Number of unconsumed bytes now buffered.
        """
        available = len(self._buffer) - self._index
        while available < wanted and not self._exhausted:
            chunk = self._stream.read(self._chunk_size)
            if not chunk:
                self._exhausted = True
                break
            self._buffer.extend(chunk)
            available += len(chunk)
        return available

    def _compact(self) -> None:
        # Drop the consumed prefix once it outgrows a chunk.
        if self._index > self._chunk_size:
            del self._buffer[: self._index]
            self._index = 0

    def peek(self, offset: int = 1) -> Optional[int]:
        """Return the byte ``offset`` positions ahead without consuming it."""
        if offset < 1:
            raise ValueError(f"peek offset must be >= 1, got {offset}")
        if self._fill(offset) < offset:
            return None
        return self._buffer[self._index + offset - 1]

    def consume(self, offset: int = 1) -> Optional[int]:
        """Advance past ``offset`` bytes.

        The move is clamped to the bytes that exist, so the cursor never
        counts past end-of-stream.

        Returns:
            Optional[int]: The byte now at the read position, or None.
        """
        if offset < 1:
            raise ValueError(f"consume offset must be >= 1, got {offset}")
        step = min(offset, self._fill(offset))
        self._index += step
        self._cursor += step
        self._compact()
        return self.peek()

    def consume_if(self, target: int) -> bool:
        """Consume one byte if it equals ``target``."""
        if self.peek() == target:
            self.consume()
            return True
        return False

    def consume_until(self, target: int) -> bytes:
        """Consume bytes up to, not including, ``target`` or end-of-stream."""
        seq = bytearray()
        ch = self.peek()
        while ch is not None and ch != target:
            seq.append(ch)
            ch = self.consume()
        return bytes(seq)

    def consume_until_newline_or(self, target: int) -> bytes:
        """Consume bytes up to, not including, ``target`` on the current line.

        Bytes scanned before a failure stay consumed.

        Raises:
            EndOfLine: A line terminator came before ``target``.
            EndOfFile: The stream ended before ``target``.
        """
        seq = bytearray()
        ch = self.peek()
        while ch is not None:
            if ch == NEWLINE:
                raise EndOfLine(f"line ended before {chr(target)!r} at byte {self._cursor}")
            if ch == target:
                return bytes(seq)
            seq.append(ch)
            ch = self.consume()
        raise EndOfFile(f"stream ended before {chr(target)!r} at byte {self._cursor}")

    def is_eof(self) -> bool:
        return self.peek() is None


__all__ = ["Reader", "NEWLINE", "CARRIAGE_RETURN", "DEFAULT_CHUNK_SIZE"]
