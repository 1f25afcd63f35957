import pytest

from oscalib.numeric import INT_MAX, INT_MIN
from oscalib.stdio import BUF_MAX, printf, snprintf, sprintf, vsnprintf
from oscalib.tty import Terminal


def test_plain_text_passes_through():
    assert sprintf("hello world") == "hello world"


@pytest.mark.parametrize("value", [0, 7, -7, 123456, -98765, INT_MAX, INT_MIN])
def test_decimal_round_trip(value):
    assert int(sprintf("%d", value)) == value
    assert sprintf("%i", value) == sprintf("%D", value)


def test_decimal_wraps_to_int32():
    assert sprintf("%d", INT_MAX + 1) == str(INT_MIN)


def test_unsigned_of_negative_wraps():
    assert int(sprintf("%u", -1)) == (1 << 32) - 1


@pytest.mark.parametrize("value", [1, 255, 0xDEADBEEF, 4096])
def test_hex_round_trip_lower_case(value):
    for spec in ("%x", "%X"):
        text = sprintf(spec, value)
        assert int(text, 16) == value
        assert text == text.lower()


def test_string_conversion():
    assert sprintf("<%s|%S>", "abc", "cba") == "<abc|cba>"


def test_float_default_precision():
    assert sprintf("%f", 2.5) == "2.500000"


def test_float_negative_mirrors_positive():
    assert sprintf("%f", -2.5) == "-" + sprintf("%f", 2.5)


def test_float_zero():
    assert sprintf("%F", 0.0) == "0.000000"


def test_snprintf_truncates():
    result = snprintf(5, "abcdefgh")
    assert result == "abcdefgh"[:4]
    assert len(result) == 4


def test_snprintf_size_one_gives_empty():
    assert snprintf(1, "%d", 42) == ""


def test_snprintf_negative_size_rejected():
    with pytest.raises(ValueError):
        snprintf(-1, "x")


def test_percent_percent_is_dropped():
    assert sprintf("a%%b") == "ab"


def test_trailing_percent_is_kept():
    assert sprintf("50%") == "50%"


def test_dot_precision_reads_zero_and_fills_default_width():
    text = sprintf("%.3d", 42)
    assert len(text) == 11
    assert int(text) == 42


def test_dot_precision_negative_places_sign_after_zeros():
    text = sprintf("%.3d", -5)
    assert text.endswith("-5")
    assert set(text[:-2]) == {"0"}
    assert len(text) == 12


def test_dot_precision_string_copies_nothing():
    assert sprintf("[%.3s]", "abc") == "[]"


def test_star_precision_for_strings():
    assert sprintf("%*.s", 3, "abc") == "abc"
    assert sprintf("%*.s", 0, "abc") == ""


def test_star_precision_zero_fills_integers():
    text = sprintf("%*.d", 5, 42)
    assert len(text) == 5
    assert int(text) == 42
    assert text.isdigit()


def test_star_negative_precision_falls_back_for_floats():
    assert sprintf("%*.f", -1, 2.5) == sprintf("%f", 2.5)


def test_precision_persists_for_later_floats():
    assert sprintf("%.2f %f", 1.5, 2.5) == "1. 2."


def test_long_modifier_consumes_nothing():
    assert sprintf("%.0l%d", 7) == "7"


def test_missing_argument_raises():
    with pytest.raises(ValueError):
        sprintf("%d %d", 1)


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        sprintf("%s", 5)
    with pytest.raises(TypeError):
        sprintf("%d", "5")


def test_vsnprintf_takes_any_iterable():
    assert vsnprintf(64, "%d-%d", iter([3, 4])) == sprintf("%d-%d", 3, 4)


def test_printf_writes_to_terminal():
    terminal = Terminal()
    terminal.initialize()
    count = printf(terminal, "%s", "hi")
    assert count == 2
    assert terminal.row_text(0).startswith("hi")
    assert (terminal.cursor_x, terminal.cursor_y) == (2, 0)


def test_printf_limits_to_buffer():
    terminal = Terminal()
    terminal.initialize()
    assert printf(terminal, "%s", "a" * 150) == BUF_MAX - 1