"""Token kinds and the token record produced by the tokenizer."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TokenType(enum.Enum):
    NULL = -1
    OPEN_PAREN = 0
    CLOSE_PAREN = 1
    OPEN_CURLY = 2
    CLOSE_CURLY = 3
    OPEN_ANGLE = 4
    CLOSE_ANGLE = 5
    OPEN_SQUARE = 6
    CLOSE_SQUARE = 7
    SEMICOLON = 8
    AT = 9
    DOT = 10
    COMMA = 11
    COLON = 12
    D_COLON = 13
    PIPE = 14
    LITERAL = 15
    SYMBOLS = 16
    IDENTIFIER = 17
    VAR = 18
    INT = 19
    UINT = 20
    FLOAT = 21
    LONG = 22
    ULONG = 23
    DOUBLE = 24
    CHAR = 25
    BYTE = 26
    BOOLEAN = 27
    STRING = 28
    VOID = 29
    MUTABLE = 30
    STRUCT = 31
    UNION = 32
    INTERFACE = 33
    AS = 34
    RETURN = 35
    ASM = 36
    TYPE = 37
    IF = 38
    ELSE = 39
    WHILE = 40
    DO = 41
    FOR = 42
    NAMESPACE = 43
    DEFER = 44
    FUNC = 45
    INLINE = 46
    PUBLIC = 47
    IMPORT = 48
    PUBLIC_CLOSURE = 49
    BELOW = 50
    ABOVE = 51
    ALL = 52
    NONE = 53
    OPERATION = 54
    CAST = 55
    AUTOCAST = 56


_DISPLAY_OVERRIDES = {
    TokenType.D_COLON: "DOUBLE COLON",
    TokenType.AT: "NULL",
}


def type_name(token_type: TokenType) -> str:
    """The upper-case name a token kind is shown under."""
    return _DISPLAY_OVERRIDES.get(token_type, token_type.name)


@dataclass(frozen=True)
class Token:
    type: TokenType
    line: int = 0
    value: str = ""

    def __str__(self) -> str:
        return f'{type_name(self.type)}("{self.value}")<{self.line}>'


def null_token() -> Token:
    """The token returned when reading past the end of a token list."""
    return Token(TokenType.NULL, 0, "")