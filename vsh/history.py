"""Command history kept in a plain text file, browsed by byte offset."""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_HISTORY_FILE = "history_file.txt"
_LINE_LIMIT = 1023


def _decode(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")


class History:
    """Append-only history file; positions are byte offsets into it."""

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_HISTORY_FILE) -> None:
        self.path = Path(path)

    def _read(self) -> bytes | None:
        try:
            return self.path.read_bytes()
        except FileNotFoundError:
            return None

    @staticmethod
    def _line_at(data: bytes, position: int) -> bytes:
        """The raw line at *position*, at most the line limit, newline included."""
        chunk = data[position : position + _LINE_LIMIT]
        newline = chunk.find(b"\n")
        return chunk if newline < 0 else chunk[: newline + 1]

    def add(self, line: str) -> None:
        """Append *line* as a new entry."""
        with self.path.open("a", encoding="utf-8") as fh:
            fh.write(line + "\n")

    def end(self) -> int:
        """Offset just past the last entry, or 0 when there is no history."""
        try:
            return self.path.stat().st_size
        except FileNotFoundError:
            return 0

    def previous(self, position: int) -> tuple[str, int] | None:
        """The entry before *position* and the offset where it starts."""
        if position == 0:
            return None
        data = self._read()
        if data is None:
            return None
        pos = position
        while pos > 0:
            pos -= 1
            if data[pos : pos + 1] == b"\n":
                break
        while pos > 0:
            pos -= 1
            if data[pos : pos + 1] == b"\n":
                pos += 1
                break
        raw = self._line_at(data, pos)
        if not raw:
            return None
        return _decode(raw.removesuffix(b"\n")), pos

    def next(self, position: int) -> tuple[str, int] | None:
        """The entry at *position* and the offset just after it."""
        data = self._read()
        if data is None or not 0 <= position < len(data):
            return None
        raw = self._line_at(data, position)
        if not raw:
            return None
        return _decode(raw.removesuffix(b"\n")), position + len(raw)