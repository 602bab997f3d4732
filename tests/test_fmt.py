import pytest

from sigtalk.fmt import printf, render


def test_plain_text_passes_through():
    assert render("hello world") == "hello world"


def test_percent_literal():
    assert render("100%%") == "100%"


def test_string_and_null_string():
    assert render("[%s]", "abc") == "[abc]"
    assert render("%s", None) == "(null)"


def test_char_from_int_and_str():
    assert render("%c%c", ord("z"), "y") == "zy"


def test_signed_minimum():
    assert render("%d", -2147483648) == "-2147483648"


@pytest.mark.parametrize("value", [0, 1, -1, 42, -42, 2147483647])
def test_signed_in_range_matches_int(value):
    assert int(render("%d", value)) == value
    assert render("%i", value) == render("%d", value)


def test_signed_wraps_like_32_bit():
    assert render("%d", 2147483648) == "-2147483648"


def test_unsigned_of_minus_one_is_max():
    assert int(render("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("value", [0, 9, 10, 255, 4096, 0xDEADBEEF])
def test_hex_round_trip(value):
    lower = render("%x", value)
    upper = render("%X", value)
    assert int(lower, 16) == value
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_pointer_null_and_value():
    assert render("%p", None) == "(nil)"
    assert render("%p", 0) == "(nil)"
    out = render("%p", 0x1234)
    assert out.startswith("0x")
    assert int(out[2:], 16) == 0x1234


def test_unknown_conversion_is_dropped_and_consumes_nothing():
    assert render("a%qb%s", "x") == "abx"


def test_trailing_percent_is_dropped():
    assert render("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        render("%d")


def test_printf_writes_and_counts(capsys):
    count = printf("pid %d: %s\n", 7, "ok")
    out = capsys.readouterr().out
    assert out == render("pid %d: %s\n", 7, "ok")
    assert count == len(out)