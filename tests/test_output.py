import io

import pytest

from cubkit.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


def test_putchar_writes_one_char():
    out = io.StringIO()
    putchar_fd("x", out)
    putchar_fd("y", out)
    assert out.getvalue() == "xy"


def test_putchar_rejects_strings():
    with pytest.raises(ValueError):
        putchar_fd("xy", io.StringIO())


def test_putstr_writes_text():
    out = io.StringIO()
    putstr_fd("hello", out)
    assert out.getvalue() == "hello"


def test_putstr_none_writes_nothing():
    out = io.StringIO()
    putstr_fd(None, out)
    assert out.getvalue() == ""


def test_putendl_appends_newline():
    out = io.StringIO()
    putendl_fd("line", out)
    assert out.getvalue() == "line\n"


def test_putendl_none_writes_nothing():
    out = io.StringIO()
    putendl_fd(None, out)
    assert out.getvalue() == ""


@pytest.mark.parametrize("n", [0, 7, 42, -5, 2147483647, -2147483648])
def test_putnbr_round_trip(n):
    out = io.StringIO()
    putnbr_fd(n, out)
    assert int(out.getvalue()) == n
    assert out.getvalue() == str(n)


def test_putnbr_int_min():
    out = io.StringIO()
    putnbr_fd(-2147483648, out)
    assert out.getvalue() == "-2147483648"


def test_default_stream_is_stdout(capsys):
    putstr_fd("abc")
    putnbr_fd(12)
    assert capsys.readouterr().out == "abc12"