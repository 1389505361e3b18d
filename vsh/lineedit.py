"""Interactive line editing with cursor movement and history browsing."""

from __future__ import annotations

import codecs
import termios
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import IO, TextIO

from vsh.history import History

INPUT_MAXLEN = 1024

_ESC = "\x1b"
_CLEAR_LINE = "\x1b[2K\r"
_CURSOR_RIGHT = "\x1b[C"
_CURSOR_LEFT = "\x1b[D"


@contextmanager
def raw_mode(fd: int) -> Iterator[bool]:
    """Turn off line buffering and echo on *fd*; yields whether that was possible."""
    try:
        original = termios.tcgetattr(fd)
    except termios.error:
        original = None
    if original is None:
        yield False
        return
    raw = list(original)
    raw[3] &= ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSAFLUSH, raw)
    try:
        yield True
    finally:
        termios.tcsetattr(fd, termios.TCSAFLUSH, original)


class LineEditor:
    """Turns keystrokes into finished lines, echoing edits to *out*."""

    def __init__(self, history: History, prompt: Callable[[], str], out: TextIO) -> None:
        self.history = history
        self.prompt = prompt
        self.out = out
        self._buffer: list[str] = []
        self._cursor = 0
        self._position: int | None = None
        self._escape: str | None = None
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    @property
    def text(self) -> str:
        """The line being edited."""
        return "".join(self._buffer)

    def _emit(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    def _history_position(self) -> int:
        if self._position is None:
            self._position = self.history.end()
        return self._position

    def _replace(self, text: str) -> None:
        self._buffer = list(text[: INPUT_MAXLEN - 1])
        self._cursor = len(self._buffer)
        self._emit(_CLEAR_LINE + self.prompt() + self.text)

    def _arrow(self, key: str) -> None:
        if key == "A":
            entry = self.history.previous(self._history_position())
            if entry is not None:
                text, self._position = entry
                self._replace(text)
        elif key == "B":
            entry = self.history.next(self._history_position())
            if entry is not None:
                text, self._position = entry
                if text:
                    self._replace(text)
        elif key == "C":
            if self._cursor < len(self._buffer):
                self._cursor += 1
                self._emit(_CURSOR_RIGHT)
        elif key == "D":
            if self._cursor > 0:
                self._cursor -= 1
                self._emit(_CURSOR_LEFT)

    def _backspace(self) -> None:
        if self._cursor == 0:
            return
        self._cursor -= 1
        del self._buffer[self._cursor]
        rest = "".join(self._buffer[self._cursor :])
        self._emit(_CURSOR_LEFT + rest + " " + _CURSOR_LEFT * (len(rest) + 1))

    def _insert(self, char: str) -> None:
        if len(self._buffer) >= INPUT_MAXLEN - 1:
            return
        self._buffer.insert(self._cursor, char)
        self._cursor += 1
        tail = "".join(self._buffer[self._cursor :])
        self._emit(char + tail + "\b" * len(tail))

    def _finish(self) -> str:
        self._emit("\n")
        line = self.text
        self._buffer = []
        self._cursor = 0
        self._position = None
        return line

    def _key(self, char: str) -> str | None:
        if self._escape is not None:
            self._escape += char
            if len(self._escape) == 2:
                sequence, self._escape = self._escape, None
                if sequence[0] == "[":
                    self._arrow(sequence[1])
            return None
        if char == _ESC:
            self._escape = ""
            return None
        code = ord(char)
        if code in (8, 127):
            self._backspace()
        elif char == "\n":
            return self._finish()
        elif char == "\t":
            pass
        elif code >= 32:
            self._insert(char)
        return None

    def feed(self, data: str) -> list[str]:
        """Process typed characters; return the lines they completed."""
        lines = []
        for char in data:
            line = self._key(char)
            if line is not None:
                lines.append(line)
        return lines

    def read_line(self, stream: IO) -> str | None:
        """Read keystrokes from *stream* until a line is complete; None at end of input."""
        while True:
            chunk = stream.read(1)
            if not chunk:
                return None
            if isinstance(chunk, bytes):
                chunk = self._decoder.decode(chunk)
            lines = self.feed(chunk)
            if lines:
                return lines[0]