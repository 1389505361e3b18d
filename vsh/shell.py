"""The interactive loop: prompt, read, record, run."""

from __future__ import annotations

import os
import sys
from typing import IO, TextIO

from vsh.args import parse_line
from vsh.builtins import DirectoryState
from vsh.errors import ShellError, report_error
from vsh.execute import execute
from vsh.history import History
from vsh.lineedit import LineEditor, raw_mode
from vsh.prompt import UserInfo, banner


class Shell:
    """Reads lines, keeps them in history and runs the commands they hold."""

    def __init__(self, user: UserInfo, history: History, out: TextIO) -> None:
        self.user = user
        self.history = history
        self.out = out
        self.directories = DirectoryState(home=user.home)
        self.editor = LineEditor(history, self.prompt, out)

    def prompt(self) -> str:
        """The prompt for the current working directory."""
        return self.user.render_prompt(os.getcwd())

    def _show_prompt(self) -> None:
        self.out.write(self.prompt())
        self.out.flush()

    def run_line(self, line: str) -> None:
        """Record *line* in history and run each command in it."""
        self.history.add(line)
        for argv in parse_line(line):
            execute(argv, self.directories, self.out)

    def run(self, stream: IO) -> int:
        """Run lines typed on *stream* until it ends; return the exit status."""
        self._show_prompt()
        while (line := self.editor.read_line(stream)) is not None:
            try:
                self.run_line(line)
            except ShellError as exc:
                report_error(exc, self.out)
                return 1
            self._show_prompt()
        return 0


def main(argv: list[str] | None = None) -> int:
    """Start an interactive shell on the terminal."""
    user = UserInfo.from_system()
    out = sys.stdout
    out.write(banner())
    history = History()
    try:
        history.path.open("a").close()
    except OSError:
        out.write("Error creating file!\n")
        return 0
    shell = Shell(user, history, out)
    with raw_mode(sys.stdin.fileno()):
        return shell.run(sys.stdin)


if __name__ == "__main__":
    raise SystemExit(main())