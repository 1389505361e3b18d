"""Running one parsed command: a builtin or an external program."""

from __future__ import annotations

import os
import signal
import subprocess
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

from vsh.builtins import DirectoryState, cd, echo, pwd

_EXIT_FAILURE = 1


def _prepare_child() -> None:
    os.setpgid(0, 0)
    signal.signal(signal.SIGINT, signal.SIG_DFL)
    signal.signal(signal.SIGTSTP, signal.SIG_DFL)


def _owns_terminal() -> bool:
    if threading.current_thread() is not threading.main_thread():
        return False
    try:
        return os.isatty(0) and os.tcgetpgrp(0) == os.getpgrp()
    except OSError:
        return False


@contextmanager
def _terminal_handed_to(pid: int) -> Iterator[None]:
    """Give the controlling terminal to *pid*'s group, then take it back."""
    if not _owns_terminal():
        yield
        return
    previous = signal.signal(signal.SIGTTOU, signal.SIG_IGN)
    try:
        try:
            os.tcsetpgrp(0, pid)
        except OSError:
            pass
        yield
    finally:
        try:
            os.tcsetpgrp(0, os.getpgrp())
        except OSError:
            pass
        signal.signal(signal.SIGTTOU, previous)


def run_external(argv: list[str]) -> int | None:
    """Run *argv* in the foreground; return its exit code, or None if it stopped."""
    try:
        proc = subprocess.Popen(argv, preexec_fn=_prepare_child)
    except OSError:
        return _EXIT_FAILURE
    try:
        os.setpgid(proc.pid, 0)
    except OSError:
        pass
    with _terminal_handed_to(proc.pid):
        _, status = os.waitpid(proc.pid, os.WUNTRACED)
    if os.WIFSTOPPED(status):
        return None
    code = os.waitstatus_to_exitcode(status)
    proc.returncode = code
    return code


def execute(argv: list[str], state: DirectoryState, out: TextIO) -> int | None:
    """Run one command; builtins write to *out*, others run as programs.

    Returns the exit code of an external program, None otherwise.
    """
    if not argv:
        return None
    name = argv[0]
    if name == "cd":
        cd(argv, state, out)
    elif name == "echo":
        echo(argv, out)
    elif name == "pwd":
        pwd(argv, out)
    else:
        out.flush()
        return run_external(argv)
    return None