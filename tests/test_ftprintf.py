import pytest

from mshell.ftprintf import format_printf, printf


def test_plain_text_is_unchanged():
    assert format_printf("hello world\n") == "hello world\n"


def test_empty_format():
    assert format_printf("") == ""


@pytest.mark.parametrize("value", [0, 42, 642, -642, 2147483647])
def test_decimal_matches_python(value):
    assert format_printf("%d", value) == "%d" % value
    assert format_printf("%i", value) == "%d" % value


def test_int_min():
    assert format_printf("%d", -2147483648) == "-2147483648"


def test_unsigned_wraps_negative():
    assert format_printf("%u", 4294967295) == "4294967295"
    assert format_printf("%u", -1) == format_printf("%u", 4294967295)


@pytest.mark.parametrize("value", [0, 42, 4556, 255])
def test_hex_matches_python(value):
    assert format_printf("%x | %X", value, value) == "%x | %X" % (value, value)


def test_string_and_null():
    assert format_printf("%s", "yooooo") == "yooooo"
    assert format_printf("%s", None) == "(null)"
    assert format_printf("%s", "") == ""


def test_pointer():
    assert format_printf("%p", None) == "(nil)"
    assert format_printf("%p", 0) == "(nil)"
    assert format_printf("%p", 255) == "0x" + format(255, "x")


def test_char():
    assert format_printf("%c%c%c", "e", "m", "i") == "emi"
    assert format_printf("%c", ord("E")) == "E"


def test_percent_escapes():
    assert format_printf("%% %% %%") == "% % %"
    assert format_printf("%%") == "%"


def test_trailing_percent_kept():
    assert format_printf("abc%") == "abc%"


def test_unknown_conversion_dropped():
    assert format_printf("%q\n") == "\n"
    assert format_printf("% \n") == "\n"


def test_combination():
    text = format_printf("%c | %s | %d | %x | %X\n", "T", "wesh", 42, 42, 42)
    assert text == "T | wesh | %d | %x | %X\n" % (42, 42, 42)


def test_consecutive():
    assert format_printf("%d%d%d", 42, 43, 44) == "424344"


def test_missing_argument():
    with pytest.raises(TypeError):
        format_printf("%d")


def test_none_format():
    with pytest.raises(TypeError):
        format_printf(None)


def test_printf_writes_and_counts(capsys):
    count = printf("Coucou %s\n", "ca va")
    captured = capsys.readouterr().out
    assert captured == "Coucou ca va\n"
    assert count == len(captured)


def test_printf_empty_returns_zero(capsys):
    assert printf("") == 0
    assert capsys.readouterr().out == ""