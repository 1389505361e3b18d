# vsh

A small interactive shell for POSIX terminals. It shows a coloured
`user@host:~/path$ ` prompt and puts the terminal in raw mode so it can edit
the line itself. It keeps a command history on disk and runs commands one
after another.

## Installing

```
pip install .
```

## Running

```
vsh
```

At start the shell prints a banner. It then creates `history_file.txt` in the
current directory if the file is not there yet. If the file cannot be
created, the shell prints `Error creating file!` and exits. The shell ends
with status 0 when its input ends, for example on end of file.

## Command lines

- Several commands can go on one line, separated by `;`.
- Each command is split into words on spaces and tabs. Empty commands are
  skipped.
- There is no quoting or escaping. A word is whatever lies between spaces
  and tabs.

## Built-in commands

- `cd` with no argument goes to your home directory.
- `cd -` goes back to the directory you were in before the last successful
  `cd`. If there was none, it goes to your home directory.
- `cd NAME` goes to `NAME` taken relative to your home directory, as
  `<home>/NAME`.
- `cd` with more than one argument prints `cd : Too many arguments`.
- If changing directory fails, the shell prints the system's message in red,
  prefixed with `Vsh: `, and exits with status 1.
- `pwd` prints the current directory. No newline follows it.
- `echo` prints its arguments with nothing between them, then a newline.

## Other commands

Any other command runs as a program found on your `PATH`, in its own process
group. While it runs it has the terminal and the default handling of Ctrl-C
and Ctrl-Z. The shell waits until the program exits or is stopped. A program
that cannot be started is skipped without a message.

## Line editing

- Left and Right move the cursor within the line.
- Backspace deletes the character before the cursor.
- Up steps back through earlier entries in `history_file.txt`.
- Down steps forward through the same entries. Empty entries are skipped.
- Tab is ignored.
- A line holds at most 1023 characters. Typing beyond that is ignored.

Every line you enter is added to the end of `history_file.txt`. The path is
relative, so it refers to the current working directory at the time of each
read or write, and it follows any `cd`.

## Using it from Python

`vsh.args.parse_line` splits a line into argument lists without running
anything:

```python
from vsh.args import parse_line

parse_line("echo hi; pwd")   # [['echo', 'hi'], ['pwd']]
```

`vsh.shell.Shell` takes a `vsh.prompt.UserInfo`, a `vsh.history.History` and
an output stream. `Shell.run_line(line)` records one line in the history and
runs its commands. `Shell.run(stream)` reads keystrokes from a stream until it
ends. Other pieces can be used on their own:

- `vsh.history.History` has `add`, `end`, `previous` and `next`. Positions
  are byte offsets into the history file.
- `vsh.lineedit.LineEditor.feed` turns typed characters into finished lines.
- `vsh.execute.execute` runs one argument list.

## What it does not do

vsh has no pipes, no redirection, no background jobs and no variables or
globbing. There is no tab completion. A program stopped with Ctrl-Z is left
stopped, because there is no command to resume it. Built-in output always
goes to the shell's output stream.