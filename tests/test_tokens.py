import dataclasses

import pytest

from lighten.tokens import Token, TokenType, null_token, type_name


def test_str_identifier():
    assert str(Token(TokenType.IDENTIFIER, 3, "main")) == 'IDENTIFIER("main")<3>'


def test_str_without_value():
    assert str(Token(TokenType.SEMICOLON, 1)) == 'SEMICOLON("")<1>'


def test_null_token():
    tok = null_token()
    assert tok.type is TokenType.NULL
    assert tok.line == 0 and tok.value == ""
    assert str(tok) == 'NULL("")<0>'


def test_null_token_type_value():
    assert null_token().type.value == -1


@pytest.mark.parametrize(
    "kind, name",
    [
        (TokenType.D_COLON, "DOUBLE COLON"),
        (TokenType.AT, "NULL"),
        (TokenType.PUBLIC_CLOSURE, "PUBLIC_CLOSURE"),
        (TokenType.AUTOCAST, "AUTOCAST"),
        (TokenType.OPEN_PAREN, "OPEN_PAREN"),
    ],
)
def test_type_name(kind, name):
    assert type_name(kind) == name


def test_names_are_upper_case():
    for kind in TokenType:
        assert type_name(kind) == type_name(kind).upper()


def test_tokens_compare_by_value():
    assert Token(TokenType.LITERAL, 2, "1") == Token(TokenType.LITERAL, 2, "1")
    assert Token(TokenType.LITERAL, 2, "1") != Token(TokenType.LITERAL, 3, "1")


def test_replace_keeps_original():
    tok = Token(TokenType.IDENTIFIER, 1, "a")
    moved = dataclasses.replace(tok, line=5)
    assert moved.line == 5 and tok.line == 1
    with pytest.raises(dataclasses.FrozenInstanceError):
        tok.line = 2