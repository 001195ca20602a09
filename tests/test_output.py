import io

import pytest

from fdf.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_character():
    out = io.StringIO()
    put_char("z", out)
    put_char("!", out)
    assert out.getvalue() == "z!"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_writes_text_unchanged():
    out = io.StringIO()
    put_str("fil de fer", out)
    assert out.getvalue() == "fil de fer"


def test_put_str_none_writes_nothing():
    out = io.StringIO()
    put_str(None, out)
    assert out.getvalue() == ""


def test_put_endl_appends_newline():
    out = io.StringIO()
    put_endl("line", out)
    assert out.getvalue() == "line\n"


def test_put_endl_none_writes_nothing():
    out = io.StringIO()
    put_endl(None, out)
    assert out.getvalue() == ""


@pytest.mark.parametrize("n", [0, 7, 42, -42, 2147483647, -2147483648])
def test_put_nbr_round_trips(n):
    out = io.StringIO()
    put_nbr(n, out)
    assert int(out.getvalue()) == n
    assert out.getvalue().startswith("-") == (n < 0)


def test_put_nbr_int_min_text():
    out = io.StringIO()
    put_nbr(-2147483648, out)
    assert out.getvalue() == "-2147483648"


def test_default_stream_is_stdout(capsys):
    put_str("to stdout")
    put_nbr(5)
    assert capsys.readouterr().out == "to stdout5"