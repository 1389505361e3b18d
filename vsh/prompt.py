"""User identity and the coloured prompt line."""

from __future__ import annotations

import os
import pwd
import socket
from dataclasses import dataclass

GREEN = "\033[0;32m"
RESET = "\033[0m"
BOLD_GREEN = "\033[1;32m"
BOLD_BLUE = "\033[1;34m"
YELLOW = "\033[0;33m"
RED = "\033[0;31m"

HOST_NAME_MAXLEN = 128
PATH_MAXLEN = 128
PROMPT_LINE_MAXLEN = 128


def prompt_path(home: str, cwd: str) -> str:
    """Show *cwd* with a leading *home* replaced by '~'."""
    if cwd.startswith(home):
        shown = "~" if cwd == home else "~" + cwd[len(home):]
    else:
        shown = cwd
    return shown[: PROMPT_LINE_MAXLEN - 1]


def banner() -> str:
    """Text printed once when the shell starts."""
    return "\n" + "*" * 34 + "VSH" + "*" * 29 + "\n\n"


@dataclass(frozen=True)
class UserInfo:
    """Who is running the shell and where."""

    username: str
    hostname: str
    home: str

    @classmethod
    def from_system(cls) -> "UserInfo":
        """Read the current user's name, home directory and the host name."""
        entry = pwd.getpwuid(os.getuid())
        hostname = socket.gethostname()[: HOST_NAME_MAXLEN - 1]
        return cls(username=entry.pw_name, hostname=hostname, home=entry.pw_dir)

    def render_prompt(self, cwd: str) -> str:
        """The prompt shown for working directory *cwd*."""
        return (
            f"{BOLD_GREEN}{self.username}@{self.hostname}{RESET}:"
            f"{BOLD_BLUE}{prompt_path(self.home, cwd)}{RESET}"
            f"{YELLOW}$ {RESET}"
        )