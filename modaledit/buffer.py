"""Text buffer edited line by line at a cursor."""

from __future__ import annotations

from typing import Optional, Protocol


class _Position(Protocol):
    line: int
    column: int


class Buffer:
    """Lines of text plus the path they belong to."""

    def __init__(self, path_to_file: Optional[str] = None) -> None:
        self._lines: list[str] = [""]
        self.path_to_file = path_to_file

    def _ensure_not_empty(self) -> None:
        if not self._lines:
            self._lines.append("")

    def _has_line(self, line: int) -> bool:
        return 0 <= line < len(self._lines)

    @staticmethod
    def _check_column(text: str, column: int) -> None:
        if not 0 <= column <= len(text):
            raise IndexError(
                f"column {column} is outside a line of length {len(text)}"
            )

    def add_char(self, cursor: _Position, c: str) -> None:
        """Insert c at the cursor and move the cursor past it."""
        self._ensure_not_empty()
        if not self._has_line(cursor.line):
            return
        text = self._lines[cursor.line]
        self._check_column(text, cursor.column)
        self._lines[cursor.line] = text[: cursor.column] + c + text[cursor.column :]
        cursor.column += 1

    def delete_char(self, cursor: _Position) -> None:
        """Delete the character before the cursor, joining lines at a line start."""
        self._ensure_not_empty()
        if not self._has_line(cursor.line):
            return
        if cursor.column > 0:
            text = self._lines[cursor.line]
            self._check_column(text, cursor.column)
            self._lines[cursor.line] = text[: cursor.column - 1] + text[cursor.column :]
            cursor.column -= 1
            return
        if cursor.line == 0:
            return
        current = self._lines.pop(cursor.line)
        cursor.line -= 1
        cursor.column = len(self._lines[cursor.line])
        self._lines[cursor.line] += current

    def new_line(self, cursor: _Position) -> None:
        """Split the line at the cursor and move to the start of the new line."""
        self._ensure_not_empty()
        if not self._has_line(cursor.line):
            return
        text = self._lines[cursor.line]
        self._check_column(text, cursor.column)
        self._lines[cursor.line] = text[: cursor.column]
        self._lines.insert(cursor.line + 1, text[cursor.column :])
        cursor.line += 1
        cursor.column = 0

    def line_length(self, line: int) -> Optional[int]:
        """Length of the given line, or None if there is no such line."""
        if self._has_line(line):
            return len(self._lines[line])
        return None

    def validate_cursor(self, cursor: _Position) -> None:
        """Clamp the cursor to the last line and to the end of its line."""
        if not self._lines:
            return
        cursor.line = min(cursor.line, len(self._lines) - 1)
        cursor.column = min(cursor.column, len(self._lines[cursor.line]))

    def text(self) -> str:
        """The whole buffer, lines joined with newlines."""
        return "\n".join(self._lines)