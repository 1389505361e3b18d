"""Shell error type and its coloured report."""

from __future__ import annotations

from typing import TextIO

from vsh.prompt import RED, RESET


class ShellError(Exception):
    """A failure the shell reports to the user."""

    @classmethod
    def from_os_error(cls, exc: OSError) -> "ShellError":
        """Build a ShellError carrying the system's description of *exc*."""
        return cls(exc.strerror or str(exc))


def _describe(exc: BaseException) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc)


def report_error(exc: BaseException, stream: TextIO) -> None:
    """Write *exc* to *stream* in red, prefixed with the shell's name."""
    stream.write(f"{RED}Vsh: {_describe(exc)}{RESET}\n")
    stream.flush()