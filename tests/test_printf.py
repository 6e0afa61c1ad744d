import io

import pytest

from ftprint.printf import format_hex, format_pointer, format_string, printf


@pytest.mark.parametrize("n", [0, 1, 9, 10, 15, 16, 255, 4096, 2**32 - 1, 2**64 - 1])
def test_format_hex_round_trip(n):
    assert int(format_hex(n), 16) == n
    assert int(format_hex(n, True), 16) == n


@pytest.mark.parametrize("n", [10, 171, 3054, 2**40 + 12345])
def test_format_hex_case(n):
    lower = format_hex(n)
    upper = format_hex(n, True)
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_format_hex_zero():
    assert format_hex(0) == "0"


def test_format_hex_negative_rejected():
    with pytest.raises(ValueError):
        format_hex(-1)


def test_format_hex_type_checked():
    with pytest.raises(TypeError):
        format_hex("12")


def test_format_pointer_null():
    assert format_pointer(None) == "0x0"
    assert format_pointer(0) == "0x0"


@pytest.mark.parametrize("address", [1, 0x7FFE1234, 2**48 - 1])
def test_format_pointer_round_trip(address):
    text = format_pointer(address)
    assert text.startswith("0x")
    assert int(text, 16) == address
    assert text[2:] == text[2:].lower()


def test_string_conversions():
    assert format_string("%s", None) == "(null)"
    assert format_string("a%sb", "xyz") == "axyzb"
    assert format_string("%s", "") == ""


def test_char_conversion():
    assert format_string("%c", "q") == "q"
    assert format_string("%c%c", ord("o"), ord("k")) == "ok"


def test_char_rejects_long_string():
    with pytest.raises(ValueError):
        format_string("%c", "ab")


def test_percent_literal():
    assert format_string("%%") == "%"
    assert format_string("100%%") == "100%"


@pytest.mark.parametrize("n", [0, 7, -7, 123456, -2147483647, 2147483647])
def test_signed_round_trip(n):
    assert int(format_string("%d", n)) == n
    assert format_string("%i", n) == format_string("%d", n)


def test_int_min():
    assert format_string("%d", -2147483648) == "-2147483648"


def test_signed_wraps_to_32_bits():
    assert int(format_string("%d", 2**31)) == -(2**31)


def test_unsigned_wraps():
    assert int(format_string("%u", -1)) == 2**32 - 1
    assert int(format_string("%u", 42)) == 42


@pytest.mark.parametrize("n", [0, 255, 4095, 2**31])
def test_hex_conversions(n):
    assert int(format_string("%x", n), 16) == n
    assert format_string("%X", n) == format_string("%x", n).upper()


def test_hex_negative_wraps():
    assert int(format_string("%x", -1), 16) == 2**32 - 1


def test_pointer_conversion():
    assert format_string("%p", None) == "0x0"
    assert int(format_string("%p", 0xBEEF), 16) == 0xBEEF


def test_unknown_conversion_prints_nothing_and_keeps_argument():
    assert format_string("a%qb%s", "z") == "abz"


def test_lone_percent_rejected():
    with pytest.raises(ValueError):
        format_string("abc%")


def test_missing_argument():
    with pytest.raises(TypeError):
        format_string("%d %d", 1)


def test_wrong_argument_type():
    with pytest.raises(TypeError):
        format_string("%d", "1")
    with pytest.raises(TypeError):
        format_string("%s", 5)


def test_mixed_format():
    assert format_string("%s=%d%%", "n", 5) == "n=5%"


def test_printf_writes_and_counts():
    out = io.StringIO()
    count = printf("%s:%d:%c", "ab", -3, "z", file=out)
    assert out.getvalue() == format_string("%s:%d:%c", "ab", -3, "z")
    assert count == len(out.getvalue())


def test_printf_null_string_count():
    out = io.StringIO()
    assert printf("%s", None, file=out) == len("(null)")
    assert out.getvalue() == "(null)"


def test_printf_default_stdout(capsys):
    count = printf("x%uy", 12)
    captured = capsys.readouterr().out
    assert captured == "x12y"
    assert count == len(captured)


def test_printf_empty_format():
    out = io.StringIO()
    assert printf("", file=out) == 0
    assert out.getvalue() == ""