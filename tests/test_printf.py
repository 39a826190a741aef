import pytest

from ftkit.printf import format_string, printf


def test_plain_text_passes_through():
    assert format_string("hello world") == "hello world"


def test_percent_literal():
    assert format_string("100%%") == "100%"


@pytest.mark.parametrize("n", [0, 1, -1, 42, 2147483647, -2147483648, 123456])
def test_d_round_trip(n):
    assert int(format_string("%d", n)) == n


def test_d_int_min():
    assert format_string("%d", -2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [0, 7, -99, 2147483647])
def test_i_matches_d(n):
    assert format_string("%i", n) == format_string("%d", n)


def test_d_wraps_to_32_bits():
    assert format_string("%d", 2 ** 32 + 5) == format_string("%d", 5)


def test_s_string_and_null():
    assert format_string("[%s]", "hello") == "[hello]"
    assert format_string("%s", None) == "(null)"


def test_s_stops_at_nul():
    assert format_string("%s", "ab\0cd") == "ab"


def test_c_from_str_and_int():
    assert format_string("%c", "A") == "A"
    assert format_string("%c", 65) == chr(65)


def test_c_rejects_long_string():
    with pytest.raises(TypeError):
        format_string("%c", "AB")


def test_p_null():
    assert format_string("%p", None) == "(nil)"
    assert format_string("%p", 0) == "(nil)"


@pytest.mark.parametrize("address", [1, 0xDEADBEEF, 2 ** 48 + 17])
def test_p_hex_address(address):
    out = format_string("%p", address)
    assert out.startswith("0x")
    assert int(out[2:], 16) == address
    assert out == out.lower()


@pytest.mark.parametrize("n", [0, 15, 255, 4096, 2 ** 32 - 1])
def test_x_round_trip(n):
    out = format_string("%x", n)
    assert int(out, 16) == n
    assert out == out.lower()


@pytest.mark.parametrize("n", [10, 255, 0xABCDEF])
def test_upper_x_is_upper_of_x(n):
    assert format_string("%X", n) == format_string("%x", n).upper()


def test_negative_unsigned_wraps():
    assert int(format_string("%u", -1)) + 1 == 2 ** 32
    assert int(format_string("%x", -1), 16) + 1 == 2 ** 32


@pytest.mark.parametrize("n", [0, 9, 4294967295])
def test_u_round_trip(n):
    assert int(format_string("%u", n)) == n


def test_trailing_percent_is_dropped():
    assert format_string("abc%") == "abc"


def test_unknown_conversion_prints_nothing_and_keeps_argument():
    assert format_string("a%qb") == "ab"
    assert format_string("%q%d", 7) == "7"


def test_nul_ends_format():
    assert format_string("ab\0%d") == "ab"


def test_mixed_conversions():
    out = format_string("%s=%d (%c)", "x", 3, "y")
    assert out == "x=3 (y)"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d %d", 1)


@pytest.mark.parametrize("fmt", ["%d", "%u", "%x", "%X", "%i"])
def test_wrong_type_raises(fmt):
    with pytest.raises(TypeError):
        format_string(fmt, "12")


def test_s_wrong_type_raises():
    with pytest.raises(TypeError):
        format_string("%s", 12)


def test_printf_writes_and_counts(capsys):
    count = printf("%s-%d%%", "abc", 42)
    out = capsys.readouterr().out
    assert out == format_string("%s-%d%%", "abc", 42)
    assert count == len(out)


def test_printf_null_string_count(capsys):
    assert printf("%s", None) == 6
    assert capsys.readouterr().out == "(null)"


def test_printf_nil_pointer_count(capsys):
    assert printf("%p", None) == 5
    assert capsys.readouterr().out == "(nil)"