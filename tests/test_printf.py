import pytest

from minitalk.printf import format_printf, printf


def test_percent_literal():
    assert format_printf("100%% sure") == "100%% sure" % ()


def test_several_conversions_in_order():
    result = format_printf("%s=%d (%x)", "n", 26, 26)
    assert result == "%s=%d (%x)" % ("n", 26, 26)


def test_null_string_placeholder():
    assert format_printf("%s", None) == "(null)"


def test_null_string_with_short_precision_prints_only_padding():
    result = format_printf("%8.3s|", None)
    assert result.strip() == "|"
    assert len(result) == 9


def test_null_pointer_placeholder():
    assert format_printf("%p", None) == "(nil)"
    assert format_printf("%p", 0) == "(nil)"


def test_pointer_has_hex_prefix():
    assert format_printf("%p", 255) == "%#x" % 255
    assert format_printf("%20p", 0xDEADBEEF) == "%#20x" % 0xDEADBEEF


def test_pointer_takes_sign_flag():
    assert format_printf("%+p", 255) == "+0xff"


def test_pointer_precision_pads_with_zeros():
    assert format_printf("%.5p", 255) == "0x000ff"


def test_zero_with_zero_precision_prints_no_digits():
    assert format_printf("%.0d", 0) == ""
    assert format_printf("[%.0x]", 0) == format_printf("[%s]", "")


def test_signed_values_wrap_to_32_bits():
    assert format_printf("%d", 2**32 + 5) == format_printf("%d", 5)
    assert format_printf("%d", 2**31) == str(-(2**31))


def test_unsigned_negative_wraps():
    assert format_printf("%u", -1) == str(2**32 - 1)
    assert format_printf("%x", -1) == "%x" % (2**32 - 1)


def test_char_from_integer_code():
    assert format_printf("%c", ord("Z")) == "Z"


def test_unknown_characters_before_conversion_are_skipped():
    assert format_printf("%zd", 5) == format_printf("%d", 5)


def test_lone_percent_is_written_out():
    assert format_printf("50%") == "50%"
    assert format_printf("a%!b") == "a%!b"


def test_format_stops_at_nul():
    assert format_printf("ab\0cd") == "ab"


def test_surplus_arguments_are_ignored():
    assert format_printf("%d", 1, 2, 3) == "1"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d %d", 1)


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        format_printf("%d", "nope")
    with pytest.raises(TypeError):
        format_printf("%s", 12)


def test_none_format_raises():
    with pytest.raises(TypeError):
        format_printf(None)


def test_printf_writes_and_counts(capsys):
    count = printf("Server PID:%8d\n", 1234)
    out = capsys.readouterr().out
    assert out == "Server PID:%8d\n" % 1234
    assert count == len(out)


def test_printf_none_format_returns_minus_one(capsys):
    assert printf(None) == -1
    assert capsys.readouterr().out == ""