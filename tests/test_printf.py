import io

import pytest

from minitalk.printf import format_string, print_formatted


def test_plain_text_passes_through():
    assert format_string("hello world") == "hello world"


def test_string_conversion():
    assert format_string("[%s]", "abc") == "[abc]"


def test_null_string():
    assert format_string("%s", None) == "(null)"


@pytest.mark.parametrize("spec", ["%d", "%i"])
def test_decimal_round_trip(spec):
    for number in (0, 7, -42, 123456789, -2147483647):
        assert int(format_string(spec, number)) == number


def test_int_min():
    assert format_string("%d", -2147483648) == "-2147483648"


def test_decimal_wraps_to_32_bits():
    assert int(format_string("%d", 2**31)) == -(2**31)


def test_unsigned_wraps_negative():
    assert int(format_string("%u", -1)) == 2**32 - 1


def test_hex_round_trip_and_case():
    for number in (0, 9, 10, 255, 4096, 2**32 - 1):
        lower = format_string("%x", number)
        assert int(lower, 16) == number
        assert lower == lower.lower()
        assert format_string("%X", number) == lower.upper()


def test_hex_value():
    assert format_string("%x", 255) == "ff"


def test_pointer():
    text = format_string("%p", 48879)
    assert text.startswith("0x")
    assert int(text, 16) == 48879
    assert format_string("%p", None) == "0x0"


def test_char_from_int_and_str():
    assert format_string("%c%c", ord("A"), "b") == "Ab"


def test_percent_literal():
    assert format_string("100%%") == "100%"


def test_unknown_conversion_prints_character():
    assert format_string("%q") == "q"


def test_trailing_percent_dropped():
    assert format_string("abc%") == "abc"


def test_missing_argument():
    with pytest.raises(TypeError):
        format_string("%d")


def test_wrong_type():
    with pytest.raises(TypeError):
        format_string("%d", "seven")


def test_print_formatted_writes_and_counts():
    stream = io.StringIO()
    count = print_formatted("%s=%d\n", "x", 5, stream=stream)
    assert stream.getvalue() == "x=5\n"
    assert count == len(stream.getvalue())


def test_print_formatted_stdout(capsys):
    count = print_formatted("%s", "out")
    assert capsys.readouterr().out == "out"
    assert count == 3