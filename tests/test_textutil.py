import pytest

from lighten.textutil import parse_escapes


@pytest.mark.parametrize(
    "escape, expected",
    [
        ("\\n", "\n"),
        ("\\t", "\t"),
        ("\\r", "\r"),
        ("\\\\", "\\"),
        ("\\'", "'"),
        ('\\"', '"'),
        ("\\a", "\a"),
        ("\\b", "\b"),
        ("\\f", "\f"),
        ("\\v", "\v"),
        ("\\0", "\0"),
    ],
)
def test_simple_escapes(escape, expected):
    assert parse_escapes(escape) == expected


def test_plain_text_unchanged():
    text = '"hello world"'
    assert parse_escapes(text) == text


def test_escape_inside_quotes():
    assert parse_escapes('"a\\nb"') == '"a\nb"'


def test_hex_escape():
    assert parse_escapes('"\\x41"') == '"A"'


def test_hex_escape_at_end():
    assert parse_escapes("\\x4a") == "J"


def test_hex_escape_upper_case_digits():
    assert parse_escapes("\\x4A") == "J"


def test_bad_hex_kept():
    assert parse_escapes("\\xZZ") == "\\xZZ"


def test_unknown_escape_kept():
    assert parse_escapes("\\q") == "\\q"


def test_trailing_backslash_kept():
    assert parse_escapes("abc\\") == "abc\\"


def test_output_never_longer_than_input():
    for text in ["\\n\\t", "x\\x41y", "\\q\\", "plain"]:
        assert len(parse_escapes(text)) <= len(text)