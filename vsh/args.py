"""Splitting an input line into commands and their arguments."""

from __future__ import annotations

import re

_COMMAND_SEPARATORS = re.compile(r"[;\n]")
_ARG_SEPARATORS = re.compile(r"[ \t]")


def split_commands(line: str) -> list[str]:
    """Split *line* at ';' into non-empty commands, ignoring anything past a newline."""
    line = line.split("\n", 1)[0]
    return [part for part in _COMMAND_SEPARATORS.split(line) if part]


def split_args(command: str) -> list[str]:
    """Split one command into its words, separated by spaces and tabs."""
    return [word for word in _ARG_SEPARATORS.split(command) if word]


def parse_line(line: str) -> list[list[str]]:
    """Return the argument lists of every non-empty command in *line*."""
    return [argv for argv in map(split_args, split_commands(line)) if argv]