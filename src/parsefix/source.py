"""Line-indexed, mutable view of a source file.

Lines are addressed with the 1-based numbers that parser diagnostics use.
Every stored line ends with a newline; serializing the buffer reproduces
the original bytes, except that a missing final newline is added.
"""

from __future__ import annotations

from parsefix.errors import ColumnOutOfRangeError, LineBufferError, LineOutOfRangeError

NEWLINE = b"\n"


class LineBuffer:
    """Mutable list of newline-terminated lines.

    Example:
        >>> buf = LineBuffer(b"a := 1\\nb := 2")
        >>> buf.insert_byte(2, 1, b";")
        >>> buf.to_bytes()
        b'a := 1\\nb; := 2\\n'
    """

    def __init__(self, data: bytes) -> None:
        """Split data into lines, keeping the separator on each one.

        Args:
            data: Raw file contents.
        """
        segments = data.split(NEWLINE)
        if data.endswith(NEWLINE) or not data:
            # Trailing separator (or empty input) leaves an empty tail segment.
            segments.pop()
        self._lines: list[bytes] = [segment + NEWLINE for segment in segments]

    def __len__(self) -> int:
        return len(self._lines)

    def line_index(self, line: int) -> int:
        """Convert a 1-based line number into a list index.

        Args:
            line: 1-based line number, as reported by diagnostics.

        Returns:
            0-based index into the line list.

        Raises:
            LineOutOfRangeError: If the line does not exist.
        """
        if line < 1 or line > len(self._lines):
            raise LineOutOfRangeError(line, len(self._lines))
        return line - 1

    def line(self, line: int) -> bytes:
        """Return the full line, separator included."""
        return self._lines[self.line_index(line)]

    def content_length(self, line: int) -> int:
        """Return the length of the line without its separator."""
        return len(self.line(line)) - len(NEWLINE)

    def byte_at(self, line: int, column: int) -> bytes | None:
        """Return the content byte at column, or None past the content."""
        if 0 <= column < self.content_length(line):
            return self.line(line)[column : column + 1]
        return None

    def text_at(self, line: int, column: int, length: int) -> bytes:
        """Return up to length content bytes starting at column."""
        if column < 0:
            return b""
        content = self.line(line)[: self.content_length(line)]
        return content[column : column + length]

    def contains(self, line: int, sub: bytes) -> bool:
        """Check whether the line contains sub."""
        return sub in self.line(line)

    def insert_byte(self, line: int, column: int, byte: bytes) -> None:
        """Insert a single byte at a column offset.

        A column equal to the content length appends the byte just before
        the line separator.

        Args:
            line: 1-based line number.
            column: 0-based offset into the line content.
            byte: Exactly one byte to insert.

        Raises:
            ValueError: If byte is not a single byte.
            LineOutOfRangeError: If the line does not exist.
            ColumnOutOfRangeError: If the column is outside the content.
        """
        if len(byte) != 1:
            raise ValueError(f"Expected a single byte, got {byte!r}")
        index = self.line_index(line)
        current = self._lines[index]
        length = len(current) - len(NEWLINE)
        if column < 0 or column > length:
            raise ColumnOutOfRangeError(line, column, length)
        self._lines[index] = current[:column] + byte + current[column:]

    def replace_first(self, line: int, old: bytes, new: bytes) -> bool:
        """Replace the first occurrence of old on a line.

        Args:
            line: 1-based line number.
            old: Bytes to look for.
            new: Replacement bytes.

        Returns:
            True if a replacement was made, False if old is not on the line.

        Raises:
            LineOutOfRangeError: If the line does not exist.
            LineBufferError: If the edit would drop the line separator.
        """
        index = self.line_index(line)
        current = self._lines[index]
        if old not in current:
            return False
        updated = current.replace(old, new, 1)
        if not updated.endswith(NEWLINE):
            raise LineBufferError(f"Replacing {old!r} would unterminate line {line}")
        self._lines[index] = updated
        return True

    def replace_at(self, line: int, column: int, old: bytes, new: bytes) -> None:
        """Replace old with new where old starts exactly at column.

        Args:
            line: 1-based line number.
            column: 0-based offset into the line content.
            old: Bytes expected at the column.
            new: Replacement bytes.

        Raises:
            LineOutOfRangeError: If the line does not exist.
            ColumnOutOfRangeError: If old would run past the content.
            LineBufferError: If the bytes at column are not old.
        """
        index = self.line_index(line)
        current = self._lines[index]
        length = len(current) - len(NEWLINE)
        end = column + len(old)
        if column < 0 or end > length:
            raise ColumnOutOfRangeError(line, column, length)
        if current[column:end] != old:
            raise LineBufferError(f"{old!r} not found at column {column} on line {line}")
        self._lines[index] = current[:column] + new + current[end:]

    def to_bytes(self) -> bytes:
        """Serialize the buffer back into file contents."""
        return b"".join(self._lines)
