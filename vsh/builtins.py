"""Commands the shell runs itself: cd, pwd and echo."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TextIO

from vsh.errors import ShellError


@dataclass
class DirectoryState:
    """Home directory and the directory 'cd -' returns to."""

    home: str
    old_dir: str | None = None


def _change_dir(path: str, state: DirectoryState, previous: str) -> None:
    try:
        os.chdir(path)
    except OSError as exc:
        raise ShellError.from_os_error(exc) from exc
    state.old_dir = previous


def cd(argv: list[str], state: DirectoryState, out: TextIO) -> None:
    """Change directory: home with no argument, the last directory for '-'."""
    current = os.getcwd()
    if len(argv) == 2:
        target = argv[1]
        if target == "-":
            if state.old_dir is None:
                state.old_dir = state.home
            path = state.old_dir
        else:
            path = f"{state.home}/{target}"
        _change_dir(path, state, current)
    elif len(argv) == 1:
        _change_dir(state.home, state, current)
    else:
        out.write("cd : Too many arguments\n")


def pwd(argv: list[str], out: TextIO) -> None:
    """Write the working directory."""
    out.write(os.getcwd())


def echo(argv: list[str], out: TextIO) -> None:
    """Write the arguments back, followed by a newline."""
    out.write("".join(argv[1:]) + "\n")