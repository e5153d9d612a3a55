import struct

import pytest

from lighten.literals import Literal, LiteralType, parse_literal


def test_booleans():
    assert parse_literal("true") == Literal(LiteralType.BOOLEAN, True)
    assert parse_literal("false") == Literal(LiteralType.BOOLEAN, False)


def test_string_drops_quotes():
    assert parse_literal('"abc"') == Literal(LiteralType.STRING, "abc")


def test_char():
    assert parse_literal("'x'") == Literal(LiteralType.CHAR, "x")


def test_plain_int():
    assert parse_literal("42") == Literal(LiteralType.INT, 42)


@pytest.mark.parametrize(
    "written, decimal",
    [("101b", "5"), ("17o", "15"), ("FFH", "255"), ("0FFH", "255")],
)
def test_based_ints_match_decimal(written, decimal):
    based = parse_literal(written)
    plain = parse_literal(decimal)
    assert based.type is LiteralType.INT
    assert based.value == plain.value


def test_long_suffix():
    assert parse_literal("7L") == Literal(LiteralType.LONG, 7)


def test_long_holds_values_beyond_int():
    assert parse_literal("99999999999L").value == 99999999999


def test_int_out_of_range_raises():
    with pytest.raises(ValueError):
        parse_literal("99999999999")


def test_double_suffix_on_integer():
    assert parse_literal("3D") == Literal(LiteralType.DOUBLE, 3.0)


def test_float_suffix_on_integer():
    assert parse_literal("3f") == Literal(LiteralType.FLOAT, 3.0)


def test_dotted_double():
    assert parse_literal("2.5") == Literal(LiteralType.DOUBLE, 2.5)


def test_dotted_float_exact():
    assert parse_literal("2.5f") == Literal(LiteralType.FLOAT, 2.5)


def test_dotted_float_has_single_precision():
    value = parse_literal("0.1f").value
    assert value == pytest.approx(0.1, rel=1e-6)
    assert value != parse_literal("0.1").value


def test_dotted_binary_gives_double_bits():
    literal = parse_literal("1.5b")
    assert literal.type is LiteralType.LONG
    assert struct.unpack("<d", struct.pack("<q", literal.value))[0] == 1.5


@pytest.mark.parametrize("text", ["1.5L", "1.5o", "1.5H"])
def test_dotted_with_integer_suffix_is_null(text):
    assert parse_literal(text) == Literal(LiteralType.NULL, None)


def test_leading_digits_are_read():
    assert parse_literal("12A").value == parse_literal("12").value


def test_float_overflow_raises():
    with pytest.raises(ValueError):
        parse_literal("1e39f")


def test_not_a_number_raises():
    with pytest.raises(ValueError):
        parse_literal("abc")


def test_empty_raises():
    with pytest.raises(ValueError):
        parse_literal("")


def test_lone_quote_raises():
    with pytest.raises(ValueError):
        parse_literal("'")