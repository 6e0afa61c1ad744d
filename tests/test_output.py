import io

import pytest

from ftprint.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one_character():
    out = io.StringIO()
    put_char("Z", out)
    assert out.getvalue() == "Z"


@pytest.mark.parametrize("bad", ["", "ab"])
def test_put_char_rejects_non_single(bad):
    with pytest.raises(ValueError):
        put_char(bad, io.StringIO())


def test_put_str_writes_text():
    out = io.StringIO()
    put_str("hello world", out)
    put_str("", out)
    assert out.getvalue() == "hello world"


def test_put_str_rejects_non_string():
    with pytest.raises(TypeError):
        put_str(None, io.StringIO())


def test_put_endl_appends_newline():
    out = io.StringIO()
    put_endl("line", out)
    assert out.getvalue() == "line" + "\n"


def test_put_endl_empty_string_is_newline_only():
    out = io.StringIO()
    put_endl("", out)
    assert out.getvalue() == "\n"


@pytest.mark.parametrize("n", [0, 7, 42, -5, 123456, 2147483647])
def test_put_nbr_round_trip(n):
    out = io.StringIO()
    put_nbr(n, out)
    assert int(out.getvalue()) == n


def test_put_nbr_minimum():
    out = io.StringIO()
    put_nbr(-2147483648, out)
    assert out.getvalue() == "-2147483648"


@pytest.mark.parametrize("n", [2147483648, -2147483649])
def test_put_nbr_out_of_range(n):
    with pytest.raises(OverflowError):
        put_nbr(n, io.StringIO())


def test_put_nbr_rejects_non_int():
    with pytest.raises(TypeError):
        put_nbr("12", io.StringIO())


def test_default_stream_is_stdout(capsys):
    put_str("abc")
    put_char("!")
    put_nbr(-9)
    assert capsys.readouterr().out == "abc!-9"