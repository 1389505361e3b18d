import io
from pathlib import Path

import pytest

from vsh.errors import ShellError
from vsh.history import History
from vsh.prompt import UserInfo
from vsh.shell import Shell


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def shell(home, out):
    user = UserInfo(username="alice", hostname="host", home=str(home))
    return Shell(user, History(home / "history.txt"), out)


def test_run_records_history(shell, home):
    status = shell.run(io.StringIO("echo hi\n"))
    assert status == 0
    assert (home / "history.txt").read_text() == "echo hi\n"


def test_run_line_cd(shell, home):
    (home / "sub").mkdir()
    before = shell.prompt()
    shell.run_line("cd sub")
    after = shell.prompt()
    assert "~/sub" not in before
    assert "~/sub" in after
    assert Path.cwd().resolve() == (home / "sub").resolve()


def test_run_line_cd_missing(shell):
    with pytest.raises(ShellError):
        shell.run_line("cd missing")


def test_prompt_follows_directory(shell, home):
    (home / "sub").mkdir()
    shell.run_line("cd sub")
    assert "~/sub" in shell.prompt()


def test_run_until_end_of_input(shell, out, home):
    status = shell.run(io.StringIO("echo hi\n"))
    assert status == 0
    assert "hi\n" in out.getvalue()
    assert "alice@host" in out.getvalue()
    assert (home / "history.txt").read_text() == "echo hi\n"


def test_run_shows_prompt_after_each_line(shell, out):
    status = shell.run(io.StringIO("echo a\necho b\n"))
    assert status == 0
    assert out.getvalue().count("alice@host") == 3


def test_run_empty_input(shell, out):
    assert shell.run(io.StringIO("")) == 0
    assert out.getvalue() == shell.prompt()


def test_run_stops_on_error(shell, out):
    status = shell.run(io.StringIO("cd missing\necho after\n"))
    assert status == 1
    assert "Vsh: " in out.getvalue()
    assert "after\n" not in out.getvalue()