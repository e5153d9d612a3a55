"""Text constants of the language and escape-sequence decoding."""

from __future__ import annotations

import string

EXTENSION = ".lt"

LITERAL_LONG = "L"
LITERAL_FLOAT = "f"
LITERAL_DOUBLE = "D"
LITERAL_BINARY = "b"
LITERAL_OCTAL = "o"
LITERAL_HEX = "H"

LITERAL_SUFFIXES = (
    LITERAL_LONG + LITERAL_FLOAT + LITERAL_DOUBLE + LITERAL_BINARY + LITERAL_OCTAL + LITERAL_HEX
)
NON_SYMBOL_CHARS = "()[]{}<>;@$:,\"'"
HEX_LETTERS = "AaBbCcDdEeFf"

_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    "'": "'",
    '"': '"',
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}


def parse_escapes(text: str) -> str:
    """Replace backslash escapes in ``text`` with the characters they stand for.

    Unknown escapes, a trailing backslash and malformed ``\\x`` escapes are
    kept as written.
    """
    out: list[str] = []
    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if char != "\\" or i + 1 >= length:
            out.append(char)
            i += 1
            continue
        nxt = text[i + 1]
        if nxt in _SIMPLE_ESCAPES:
            out.append(_SIMPLE_ESCAPES[nxt])
            i += 2
        elif nxt == "x":
            digits = text[i + 2 : i + 4]
            if len(digits) == 2 and all(d in string.hexdigits for d in digits):
                out.append(chr(int(digits, 16)))
                i += 4
            else:
                out.append("\\x")
                i += 2
        else:
            out.append("\\" + nxt)
            i += 2
    return "".join(out)