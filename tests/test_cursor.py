import pytest

from lighten.cursor import Cursor
from lighten.errors import CompileError


def test_peek_and_consume():
    cur = Cursor("abc")
    assert cur.peek() == "a"
    assert cur.peek(2) == "c"
    assert cur.consume() == "a"
    assert cur.peek(-1) == "a"
    assert cur.position == 1


def test_has_peek_bounds():
    cur = Cursor("ab")
    assert cur.has_peek(1)
    assert not cur.has_peek(2)
    assert not cur.has_peek(-1)


def test_null_past_end():
    cur = Cursor("a")
    cur.consume()
    assert cur.peek() is None
    assert cur.consume() is None
    assert cur.position == 1


def test_base_null_is_none():
    assert Cursor([]).peek() is None


def test_try_consume():
    cur = Cursor("xy")
    assert not cur.try_consume("y")
    assert cur.try_consume("x")
    assert cur.peek() == "y"


def test_expect_returns_item():
    cur = Cursor("xy")
    assert cur.expect("x", "Missing Token", "Expected x") == "x"


def test_expect_raises():
    cur = Cursor("ab")
    cur.consume()
    with pytest.raises(CompileError) as caught:
        cur.expect("z", "Missing Token", "Expected z")
    assert caught.value.kind == "Missing Token"
    assert caught.value.message == "Expected z"
    assert cur.position == 1


def test_fail_raises():
    with pytest.raises(CompileError) as caught:
        Cursor("a").fail("Syntax Error", "bad")
    assert caught.value.line == -1


def test_do_until_collects():
    cur = Cursor("abc;d")
    seen = []
    assert cur.do_until(";", lambda: seen.append(cur.consume()))
    assert seen == ["a", "b", "c"]
    assert cur.peek() == "d"


def test_do_until_missing_terminator():
    cur = Cursor("abc")
    seen = []
    assert not cur.do_until(";", lambda: seen.append(cur.consume()))
    assert seen == ["a", "b", "c"]


def test_do_until_with_separator():
    cur = Cursor("a,b,c)")
    seen = []
    assert cur.do_until(")", lambda: seen.append(cur.consume()), ",", "Missing Token", "Expected ','")
    assert seen == ["a", "b", "c"]
    assert not cur.has_peek()


def test_do_until_empty_list_with_separator():
    cur = Cursor(")")
    seen = []
    assert cur.do_until(")", lambda: seen.append(cur.consume()), ",")
    assert seen == []


def test_do_until_missing_separator_raises():
    cur = Cursor("ab)")
    with pytest.raises(CompileError) as caught:
        cur.do_until(")", cur.consume, ",", "Missing Token", "Expected ','")
    assert caught.value.message == "Expected ','"