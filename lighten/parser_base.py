"""Parser state and the shared readers for types, variables and names."""

from __future__ import annotations

import dataclasses
from typing import Iterable

from lighten.cursor import Cursor
from lighten.nodes import Builtin, Cast, Expression, NodeInstance, Operation, Type, Variable
from lighten.tokenizer import Tokenizer
from lighten.tokens import Token, TokenType, null_token

_SIMPLE_TYPES = {
    TokenType.INT: Builtin.INT,
    TokenType.UINT: Builtin.UINT,
    TokenType.LONG: Builtin.LONG,
    TokenType.ULONG: Builtin.ULONG,
    TokenType.FLOAT: Builtin.FLOAT,
    TokenType.DOUBLE: Builtin.DOUBLE,
    TokenType.CHAR: Builtin.CHAR,
    TokenType.BYTE: Builtin.BYTE,
    TokenType.BOOLEAN: Builtin.BOOLEAN,
    TokenType.STRING: Builtin.STRING,
    TokenType.VOID: Builtin.VOID,
}


def _tok(kind: TokenType, value: str = "") -> Token:
    return Token(kind, 0, value)


def var_exists(name: str, variables: Iterable[Variable]) -> bool:
    """Whether a variable called ``name`` is among ``variables``."""
    return any(var.name == name for var in variables)


def find_operation(op: Operation, operations: list[Operation]) -> int:
    """Index of the operation equal to ``op``, or -1."""
    return next((i for i, other in enumerate(operations) if other == op), -1)


def find_cast(cast: Cast, casts: list[Cast]) -> int:
    """Index of the cast equal to ``cast``, or -1."""
    return next((i for i, other in enumerate(casts) if other == cast), -1)


class ParserBase(Cursor[Token]):
    """Token cursor holding the parser's symbol tables."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        super().__init__(tokens)
        self.vars: list[Variable] = []
        self.functions: list[NodeInstance] = []
        self.output: list[NodeInstance] = []
        self.namespaces: list[str] = []
        self.defers: list[NodeInstance] = []
        self.operators: list[Operation] = []
        self.casts: list[Cast] = []
        self.autocasts: list[Cast] = []
        self.declared_types: dict[str, Type | None] = {}
        self.scope_depth = 0

    def null(self) -> Token:
        return null_token()

    def current_line(self) -> int:
        return self.peek(-1).line

    def matches(self, actual: Token, expected: Token) -> bool:
        """Types must agree; values only when both are given."""
        if actual.type != expected.type:
            return False
        return not actual.value or not expected.value or actual.value == expected.value

    def parse_type(self) -> Type:
        """Read a type specifier."""
        mut = self.try_consume(_tok(TokenType.MUTABLE))
        if self.try_consume(_tok(TokenType.SYMBOLS, "&")):
            return Type(Builtin.POINTER, mut, points_to=self.parse_type())
        kind = self.peek().type
        if kind in _SIMPLE_TYPES:
            self.consume()
            return Type(_SIMPLE_TYPES[kind], mut)
        if kind in (TokenType.STRUCT, TokenType.UNION):
            self.consume()
            builtin = Builtin.STRUCT if kind is TokenType.STRUCT else Builtin.UNION
            return self._parse_record(builtin, mut)
        if self.try_consume(_tok(TokenType.INTERFACE)):
            return self._parse_interface(mut)
        if kind is TokenType.IDENTIFIER:
            return self._parse_named_type(mut)
        self.fail("Syntax Error", "Invalid Type")

    def _parse_record(self, builtin: Builtin, mut: bool) -> Type:
        if self.try_consume(_tok(TokenType.SEMICOLON)):
            return Type(builtin)
        self.expect(_tok(TokenType.OPEN_CURLY), "Missing Token", "Expected '{'")
        record = Type(builtin)

        def read_field() -> None:
            record.fields.append(self.parse_var())
            self.expect(_tok(TokenType.SEMICOLON), "Missing Token", "Expected ';'")

        if not self.do_until(_tok(TokenType.CLOSE_CURLY), read_field):
            self.fail("Missing Token", "Expected '}'")
        record.mut = mut
        return record

    def _parse_interface(self, mut: bool) -> Type:
        self.expect(_tok(TokenType.OPEN_ANGLE), "Missing Token", "Expected '<'")
        returns = self.parse_type()
        if self.try_consume(_tok(TokenType.CLOSE_ANGLE)):
            return Type(Builtin.INTERFACE, mut, return_type=returns)
        self.expect(_tok(TokenType.PIPE), "Missing Token", "Expected '|'")
        params: list[Type | None] = []
        self.do_until(
            _tok(TokenType.CLOSE_ANGLE),
            lambda: params.append(self.parse_type()),
            _tok(TokenType.COMMA),
            "Missing Token",
            "Expected ','",
        )
        return Type(Builtin.INTERFACE, mut, params=params, return_type=returns)

    def _parse_named_type(self, mut: bool) -> Type:
        name = self.decode_identifier().value
        if name not in self.declared_types:
            self.fail("Syntax Error", "Invalid Type")
        declared = self.declared_types[name]
        if declared is None:
            return Type(Builtin.POINTER, True, points_to=Type(Builtin.VOID))
        return Type(
            declared.type,
            declared.mut or mut,
            declared.identifier,
            declared.points_to,
            list(declared.fields),
        )

    def parse_var(self) -> Variable:
        """Read ``name: type``."""
        name = self.expect(_tok(TokenType.IDENTIFIER), "Missing Token", "Expected identifier").value
        self.expect(_tok(TokenType.COLON), "Missing Token", "Expected type specifier")
        return Variable(name, self.parse_type())

    def parse_expr(self, required_type: Type | None) -> Expression | None:
        """Expressions are not part of the language yet: reads nothing, gives None."""
        return None

    def parse_file(self, path: str, field_name: str) -> list[Token]:
        """Tokens of the public block ``field_name`` in the source file at ``path``.

        The tokens are stamped with the current line so that errors in them
        point at the import.
        """
        try:
            with open(path, encoding="utf-8") as handle:
                source = handle.read()
        except OSError:
            self.fail("File Error", "Cannot open file")
        if source and not source.endswith("\n"):
            source += "\n"
        line = self.current_line()
        tokens = iter(Tokenizer(source).tokenize())
        found = False
        publics: list[Token] = []
        for token in tokens:
            if token.type is not TokenType.PUBLIC:
                continue
            name = next(tokens, null_token())
            if name.type is not TokenType.IDENTIFIER:
                self.fail("Internal Error", "Syntax Error in imported file")
            if next(tokens, null_token()).type is not TokenType.PUBLIC_CLOSURE:
                self.fail("Internal Error", "Syntax Error in imported file")
            wanted = name.value == field_name
            found = found or wanted
            for inner in tokens:
                if inner.type is TokenType.PUBLIC_CLOSURE:
                    break
                if wanted:
                    publics.append(dataclasses.replace(inner, line=line))
            else:
                self.fail("Internal Error", "Syntax Error in imported file")
        if not found:
            self.fail("Syntax Error", "Imported field does not exist")
        return publics

    def get_identifier(self) -> Token:
        """Read a name and qualify it with the enclosing namespaces."""
        ident = self.decode_identifier()
        prefix = "".join(f"{ns}:" for ns in self.namespaces)
        return dataclasses.replace(ident, value=prefix + ident.value)

    def decode_identifier(self) -> Token:
        """Read ``a::b::c`` and return it as one identifier ``a:b:c``."""
        ident = self.expect(_tok(TokenType.IDENTIFIER), "Missing Token", "Expected Identifier")
        parts = [ident.value]
        while self.try_consume(_tok(TokenType.D_COLON)):
            parts.append(
                self.expect(
                    _tok(TokenType.IDENTIFIER), "Missing Token", "Expected Identifier"
                ).value
            )
        return dataclasses.replace(ident, value=":".join(parts))

    def func_has_body(self, instance: NodeInstance, funcs: list[NodeInstance]) -> bool:
        """Whether a function with the same signature already has a body.

        Matching declarations without a body are dropped from ``funcs``.
        """
        name = instance.get("name")
        returns = instance.get("return_type")
        params = instance.get("parameters")
        for func in list(funcs):
            if func.get("name") != name or func.get("return_type") != returns:
                continue
            others = func.get("parameters")
            if len(others) != len(params):
                continue
            if any(a.type != b.type for a, b in zip(others, params)):
                continue
            if func.get("body") is not None:
                return True
            funcs.remove(func)
        return False

    def get_var(self, name: str, variables: Iterable[Variable]) -> Variable:
        """The variable called ``name``; raises if there is none."""
        for var in variables:
            if var.name == name:
                return var
        self.fail("Initial Definition Error", "Variable does not exists")