import io
import os

import pytest

from vsh.builtins import DirectoryState, cd, echo, pwd
from vsh.errors import ShellError


def _here():
    return os.path.realpath(os.getcwd())


def test_echo_writes_arguments_and_newline():
    out = io.StringIO()
    echo(["echo", "a", "b"], out)
    assert out.getvalue() == "ab\n"


def test_echo_without_arguments():
    out = io.StringIO()
    echo(["echo"], out)
    assert out.getvalue() == "\n"


def test_pwd_writes_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    out = io.StringIO()
    pwd(["pwd"], out)
    assert out.getvalue() == os.getcwd()


def test_cd_without_argument_goes_home(tmp_path, monkeypatch):
    start = tmp_path / "start"
    start.mkdir()
    monkeypatch.chdir(start)
    state = DirectoryState(home=str(tmp_path))
    cd(["cd"], state, io.StringIO())
    assert _here() == os.path.realpath(tmp_path)
    assert os.path.realpath(state.old_dir) == os.path.realpath(start)


def test_cd_relative_to_home(tmp_path, monkeypatch):
    (tmp_path / "sub").mkdir()
    monkeypatch.chdir(tmp_path)
    state = DirectoryState(home=str(tmp_path))
    cd(["cd", "sub"], state, io.StringIO())
    assert _here() == os.path.realpath(tmp_path / "sub")


def test_cd_dash_returns_to_previous(tmp_path, monkeypatch):
    (tmp_path / "sub").mkdir()
    monkeypatch.chdir(tmp_path)
    state = DirectoryState(home=str(tmp_path))
    cd(["cd", "sub"], state, io.StringIO())
    cd(["cd", "-"], state, io.StringIO())
    assert _here() == os.path.realpath(tmp_path)
    assert os.path.realpath(state.old_dir) == os.path.realpath(tmp_path / "sub")


def test_cd_dash_without_history_goes_home(tmp_path, monkeypatch):
    other = tmp_path / "other"
    other.mkdir()
    monkeypatch.chdir(other)
    state = DirectoryState(home=str(tmp_path))
    cd(["cd", "-"], state, io.StringIO())
    assert _here() == os.path.realpath(tmp_path)


def test_cd_missing_directory_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    state = DirectoryState(home=str(tmp_path))
    with pytest.raises(ShellError):
        cd(["cd", "missing"], state, io.StringIO())
    assert _here() == os.path.realpath(tmp_path)
    assert state.old_dir is None


def test_cd_too_many_arguments(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    state = DirectoryState(home=str(tmp_path))
    out = io.StringIO()
    cd(["cd", "a", "b"], state, out)
    assert out.getvalue() == "cd : Too many arguments\n"
    assert _here() == os.path.realpath(tmp_path)