"""Fixed-width table output for the command-line reports."""

from __future__ import annotations

from typing import TextIO


class Record:
    """Line buffer of fixed-width columns separated by a single blank."""

    def __init__(self, widths: list[int] | None = None) -> None:
        """Create a record; widths[i] is the minimum width of column i (default 0)."""
        self._widths = list(widths or [])
        self._parts: list[str] = []

    def init(self) -> None:
        """Clear the buffered fields."""
        self._parts = []

    def append(self, value: object, fmt: str = '') -> None:
        """Append a field, formatted with fmt and padded to its column width.

        Numbers are right-aligned, everything else left-aligned.
        """
        text = format(value, fmt) if fmt else str(value)
        index = len(self._parts)
        width = self._widths[index] if index < len(self._widths) else 0
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            self._parts.append(text.rjust(width))
        else:
            self._parts.append(text.ljust(width))

    def get_line(self) -> str:
        """Return the current line without writing or clearing it."""
        return ' '.join(self._parts).rstrip()

    def write(self, stream: TextIO) -> None:
        """Write the current line (if non-empty) and clear the buffer."""
        line = self.get_line()
        if line:
            stream.write(line + '\n')
        self.init()


def write_table(
    stream: TextIO,
    header: list[str],
    rows: list[list[tuple[object, str]]],
    widths: list[int],
) -> None:
    """Write a header line followed by one line per row of (value, format) fields."""
    record = Record(widths)
    for title in header:
        record.append(title)
    record.write(stream)
    for row in rows:
        for value, fmt in row:
            record.append(value, fmt)
        record.write(stream)
