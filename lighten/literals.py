"""Decoding of literal token text into typed values."""

from __future__ import annotations

import enum
import math
import re
import struct
from dataclasses import dataclass
from itertools import takewhile
from typing import Union

from lighten.textutil import (
    LITERAL_BINARY,
    LITERAL_DOUBLE,
    LITERAL_FLOAT,
    LITERAL_HEX,
    LITERAL_LONG,
    LITERAL_OCTAL,
    LITERAL_SUFFIXES,
)


class LiteralType(enum.Enum):
    INT = enum.auto()
    LONG = enum.auto()
    FLOAT = enum.auto()
    DOUBLE = enum.auto()
    CHAR = enum.auto()
    BOOLEAN = enum.auto()
    STRING = enum.auto()
    NULL = enum.auto()


LiteralValue = Union[int, float, str, bool, None]


@dataclass(frozen=True)
class Literal:
    """A literal value together with the type it was written as."""

    type: LiteralType
    value: LiteralValue


_LEADING = re.compile(r"[ \t\n\v\f\r]*([+-]?)")
_FLOAT_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*"
    r"([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[+-]?(?:inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_DIGITS = {
    2: "01",
    8: "01234567",
    10: "0123456789",
    16: "0123456789abcdefABCDEF",
}


def _parse_int(text: str, base: int, bits: int) -> int:
    """Read the leading integer of ``text`` in ``base``, as a signed ``bits``-bit value."""
    match = _LEADING.match(text)
    sign = match.group(1)
    rest = text[match.end():]
    if base == 16 and rest[:2].lower() == "0x" and rest[2:3] and rest[2] in _DIGITS[16]:
        rest = rest[2:]
    digits = "".join(takewhile(lambda c: c in _DIGITS[base], rest))
    if not digits:
        raise ValueError(f"invalid integer literal: {text!r}")
    value = int(sign + digits, base)
    limit = 1 << (bits - 1)
    if not -limit <= value < limit:
        raise ValueError(f"integer literal out of range: {text!r}")
    return value


def _parse_double(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid floating-point literal: {text!r}")
    written = match.group(1)
    value = float(written)
    if math.isinf(value) and "inf" not in written.lower():
        raise ValueError(f"floating-point literal out of range: {text!r}")
    return value


def _parse_float(text: str) -> float:
    value = _parse_double(text)
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        raise ValueError(f"floating-point literal out of range: {text!r}") from None


def _double_bits(value: float) -> int:
    return struct.unpack("<q", struct.pack("<d", value))[0]


def parse_literal(text: str) -> Literal:
    """Decode the text of a literal token.

    Raises ValueError when the text is not a valid literal or a number does
    not fit its type.
    """
    if not text:
        raise ValueError("empty literal")
    if text in ("true", "false"):
        return Literal(LiteralType.BOOLEAN, text == "true")

    first, suffix = text[0], text[-1]
    if first == suffix == '"':
        return Literal(LiteralType.STRING, text[1:-1])
    if first == suffix == "'":
        if len(text) < 2:
            raise ValueError(f"invalid character literal: {text!r}")
        return Literal(LiteralType.CHAR, text[1])

    number = text[:-1] if suffix in LITERAL_SUFFIXES else text

    if "." in text:
        if suffix in (LITERAL_LONG, LITERAL_OCTAL, LITERAL_HEX):
            return Literal(LiteralType.NULL, None)
        if suffix == LITERAL_FLOAT:
            return Literal(LiteralType.FLOAT, _parse_float(number))
        if suffix == LITERAL_BINARY:
            return Literal(LiteralType.LONG, _double_bits(_parse_double(number)))
        return Literal(LiteralType.DOUBLE, _parse_double(number))

    if suffix == LITERAL_LONG:
        return Literal(LiteralType.LONG, _parse_int(number, 10, 64))
    if suffix == LITERAL_FLOAT:
        return Literal(LiteralType.FLOAT, _parse_float(number))
    if suffix == LITERAL_DOUBLE:
        return Literal(LiteralType.DOUBLE, _parse_double(number))
    if suffix == LITERAL_BINARY:
        return Literal(LiteralType.INT, _parse_int(number, 2, 32))
    if suffix == LITERAL_OCTAL:
        return Literal(LiteralType.INT, _parse_int(number, 8, 32))
    if suffix == LITERAL_HEX:
        return Literal(LiteralType.INT, _parse_int(number, 16, 32))
    return Literal(LiteralType.INT, _parse_int(number, 10, 32))