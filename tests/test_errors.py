import io

from vsh.errors import ShellError, report_error
from vsh.prompt import RED, RESET


def test_report_shell_error_is_coloured_and_prefixed():
    buf = io.StringIO()
    report_error(ShellError("No such file or directory"), buf)
    assert buf.getvalue() == RED + "Vsh: No such file or directory" + RESET + "\n"


def test_report_os_error_uses_strerror():
    buf = io.StringIO()
    report_error(OSError(2, "No such file"), buf)
    assert buf.getvalue() == RED + "Vsh: No such file" + RESET + "\n"


def test_from_os_error_keeps_description():
    err = ShellError.from_os_error(OSError(13, "Permission denied"))
    assert str(err) == "Permission denied"


def test_from_os_error_gives_a_catchable_exception():
    err = ShellError.from_os_error(OSError(2, "No such file or directory"))
    assert isinstance(err, Exception)
    assert str(err) == "No such file or directory"