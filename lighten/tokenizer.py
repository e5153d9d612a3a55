"""Turns source text into a list of tokens."""

from __future__ import annotations

import string

from lighten.cursor import Cursor
from lighten.errors import CompileError
from lighten.textutil import HEX_LETTERS, LITERAL_SUFFIXES, NON_SYMBOL_CHARS, parse_escapes
from lighten.tokens import Token, TokenType

_NULL_CHAR = "\0"
_C_SPACE = " \t\n\v\f\r"

_PUNCTUATION = {
    "(": TokenType.OPEN_PAREN,
    ")": TokenType.CLOSE_PAREN,
    "{": TokenType.OPEN_CURLY,
    "}": TokenType.CLOSE_CURLY,
    "[": TokenType.OPEN_SQUARE,
    "]": TokenType.CLOSE_SQUARE,
    "<": TokenType.OPEN_ANGLE,
    ">": TokenType.CLOSE_ANGLE,
    ";": TokenType.SEMICOLON,
    "@": TokenType.AT,
    ":": TokenType.COLON,
    ".": TokenType.DOT,
    ",": TokenType.COMMA,
    "$": TokenType.PUBLIC_CLOSURE,
    "|": TokenType.PIPE,
}

_KEYWORDS = {
    "int": TokenType.INT,
    "uint": TokenType.UINT,
    "float": TokenType.FLOAT,
    "long": TokenType.LONG,
    "ulong": TokenType.ULONG,
    "double": TokenType.DOUBLE,
    "char": TokenType.CHAR,
    "byte": TokenType.BYTE,
    "string": TokenType.STRING,
    "void": TokenType.VOID,
    "struct": TokenType.STRUCT,
    "union": TokenType.UNION,
    "interface": TokenType.INTERFACE,
    "return": TokenType.RETURN,
    "mutable": TokenType.MUTABLE,
    "inline": TokenType.INLINE,
    "type": TokenType.TYPE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "while": TokenType.WHILE,
    "do": TokenType.DO,
    "for": TokenType.FOR,
    "namespace": TokenType.NAMESPACE,
    "defer": TokenType.DEFER,
    "as": TokenType.AS,
    "boolean": TokenType.BOOLEAN,
    "func": TokenType.FUNC,
    "var": TokenType.VAR,
    "public": TokenType.PUBLIC,
    "import": TokenType.IMPORT,
    "below": TokenType.BELOW,
    "above": TokenType.ABOVE,
    "all": TokenType.ALL,
    "none": TokenType.NONE,
    "operation": TokenType.OPERATION,
    "cast": TokenType.CAST,
    "autocast": TokenType.AUTOCAST,
}

_BOOLEAN_WORDS = ("true", "false")


def _is_alpha(char: str) -> bool:
    return char in string.ascii_letters


def _is_digit(char: str) -> bool:
    return char in string.digits


def _is_alnum(char: str) -> bool:
    return _is_alpha(char) or _is_digit(char)


class Tokenizer(Cursor[str]):
    """Reads source text one character at a time and produces tokens."""

    def __init__(self, source: str) -> None:
        super().__init__(source)
        self.line = 1

    def null(self) -> str:
        return _NULL_CHAR

    def current_line(self) -> int:
        return self.line

    def matches(self, actual: str, expected: str) -> bool:
        return actual == expected

    def _error(self, kind: str, message: str) -> CompileError:
        return CompileError(kind, message, self.line)

    def tokenize(self) -> list[Token]:
        """Read the whole source and return its tokens in order."""
        tokens: list[Token] = []
        comment = False
        multi_comment = False

        while self.has_peek():
            char = self.peek()
            if char in " \r":
                self.consume()
            elif char == "\n":
                self.consume()
                comment = False
                self.line += 1
            elif comment or multi_comment:
                self.consume()
            elif self.try_consume("/"):
                if self.try_consume("/"):
                    comment = True
                elif self.try_consume("*"):
                    multi_comment = True
                else:
                    tokens.append(Token(TokenType.SYMBOLS, self.line, "/"))
            elif self.try_consume("*"):
                if self.try_consume("/"):
                    multi_comment = False
                else:
                    tokens.append(Token(TokenType.SYMBOLS, self.line, "*"))
            elif char in _PUNCTUATION:
                self.consume()
                kind = _PUNCTUATION[char]
                if char == ":" and self.try_consume(":"):
                    kind = TokenType.D_COLON
                tokens.append(Token(kind, self.line))
            elif char == "'":
                tokens.append(self._read_char())
            elif char == '"':
                tokens.append(self._read_string())
            elif _is_alpha(char):
                tokens.append(self._read_word())
            elif _is_digit(char):
                tokens.append(self._read_number())
            elif char not in _C_SPACE:
                tokens.append(self._read_symbols())
            else:
                raise self._error("Invalid Token", f"Token '{char}' not recognized")
        return tokens

    def _read_char(self) -> Token:
        self.consume()
        char = self.consume()
        if not self.try_consume("'"):
            raise self._error("Missing token", "Closing single quote expected")
        return Token(TokenType.LITERAL, self.line, parse_escapes(f"'{char}'"))

    def _read_string(self) -> Token:
        self.consume()
        parts = ['"']
        while self.has_peek() and not self.try_consume('"'):
            if self.peek() == "\\":
                parts.append(self.consume())
            parts.append(self.consume())
        if not self.has_peek():
            raise self._error("Missing token", "Closing double quote expected")
        parts.append('"')
        return Token(TokenType.LITERAL, self.line, parse_escapes("".join(parts)))

    def _read_word(self) -> Token:
        chars = []
        while self.has_peek() and _is_alnum(self.peek()):
            chars.append(self.consume())
        word = "".join(chars)
        if word in _KEYWORDS:
            return Token(_KEYWORDS[word], self.line)
        if word in _BOOLEAN_WORDS:
            return Token(TokenType.LITERAL, self.line, word)
        if word == "asm":
            return self._read_asm()
        return Token(TokenType.IDENTIFIER, self.line, word)

    def _read_asm(self) -> Token:
        while self.try_consume(" ") or self.try_consume("\r"):
            pass
        while self.try_consume("\n"):
            self.line += 1
        if not self.try_consume("{"):
            raise self._error("Missing token", "Opening curly bracket expected")
        body = []
        while self.has_peek() and not self.try_consume("}"):
            body.append(self.consume())
        if not self.has_peek():
            raise self._error("Missing token", "Closing curly bracket expected")
        return Token(TokenType.ASM, self.line, "".join(body))

    def _read_number(self) -> Token:
        chars = []
        while self.has_peek() and (
            _is_digit(self.peek()) or self.peek() == "." or self.peek() in HEX_LETTERS
        ):
            chars.append(self.consume())
        if self.has_peek() and self.peek() in LITERAL_SUFFIXES:
            chars.append(self.consume())
        return Token(TokenType.LITERAL, self.line, "".join(chars))

    def _read_symbols(self) -> Token:
        chars = []
        while self.has_peek():
            char = self.peek()
            if _is_alnum(char) or char in _C_SPACE or char in NON_SYMBOL_CHARS:
                break
            chars.append(self.consume())
        return Token(TokenType.SYMBOLS, self.line, "".join(chars))


def tokenize(source: str) -> list[Token]:
    """Tokenize ``source`` in one call."""
    return Tokenizer(source).tokenize()