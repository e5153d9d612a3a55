"""Statement parser: turns a token list into syntax-tree nodes."""

from __future__ import annotations

import os
from typing import Any, Callable, Iterable

from lighten.nodes import (
    Builtin,
    Cast,
    NodeId,
    NodeInstance,
    NodeTemplate,
    Operation,
    Type,
    Variable,
)
from lighten.parser_base import ParserBase, find_cast, find_operation, var_exists
from lighten.textutil import EXTENSION
from lighten.tokens import Token, TokenType

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_PRECEDENCE_WORDS = (TokenType.BELOW, TokenType.ABOVE, TokenType.NONE)


def _tok(kind: TokenType, value: str = "") -> Token:
    return Token(kind, 0, value)


class Parser(ParserBase):
    """Reads statements from a token list and keeps the declarations it meets."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        super().__init__(tokens)
        self.nodes: list[NodeTemplate] = []
        self._register_nodes()

    def parse(self) -> list[NodeInstance]:
        """Parse every statement and return the nodes meant for output."""
        while self.has_peek():
            node = self.parse_single()
            if node.add:
                self.output.append(node)
        return self.output

    def parse_single(self) -> NodeInstance:
        """Parse the statement at the current position."""
        for template in self.nodes:
            if template.check():
                return template.build()
        self.fail("Syntax Error", "Invalid Statement")

    def _accept(self, kind: TokenType, value: str = "") -> bool:
        return self.try_consume(_tok(kind, value))

    def _need(self, kind: TokenType, message: str, error: str = "Missing Token") -> Token:
        return self.expect(_tok(kind), error, message)

    def _at(self, *kinds: TokenType) -> bool:
        return self.peek().type in kinds

    def _step(self, kind: TokenType, message: str) -> Callable[[NodeInstance], Any]:
        return lambda instance: self._need(kind, message)

    def _semicolon(self) -> Callable[[NodeInstance], Any]:
        return self._step(TokenType.SEMICOLON, "Expected ';'")

    def _boolean_expr(self, instance: NodeInstance) -> Any:
        return self.parse_expr(Type(Builtin.BOOLEAN))

    def _body(self, instance: NodeInstance) -> NodeInstance:
        return self.parse_single()

    def _register_nodes(self) -> None:
        builders = (
            self._scope,
            self._func_decl,
            self._var_decl,
            self._type_decl,
            self._public_field,
            self._import,
            self._namespace,
            self._defer,
            self._var_set,
            self._return_stmt,
            self._asm_code,
            self._operation_decl,
            self._cast_decl,
            self._if_stmt,
            self._while_stmt,
            self._do_while_stmt,
            self._for_stmt,
        )
        for build in builders:
            build().register(self.nodes)

    def _scope(self) -> NodeTemplate:
        def content(instance: NodeInstance) -> list[NodeInstance]:
            body: list[NodeInstance] = []
            first_var = len(self.vars)
            self.scope_depth += 1

            def statement() -> None:
                node = self.parse_single()
                if node.add:
                    body.append(node)

            if not self.do_until(_tok(TokenType.CLOSE_CURLY), statement):
                self.fail("Missing Token", "Expected '}'")
            body.extend(node for node in reversed(self.defers) if node.add)
            del self.vars[first_var:]
            self.scope_depth -= 1
            return body

        return (
            NodeTemplate(NodeId.SCOPE, lambda: self._accept(TokenType.OPEN_CURLY))
            .property("content", content)
            .require(self._semicolon())
        )

    def _func_decl(self) -> NodeTemplate:
        def parameters(instance: NodeInstance) -> list[Variable]:
            self._need(TokenType.OPEN_PAREN, "Expected '('")
            params: list[Variable] = []

            def parameter() -> None:
                var = self.parse_var()
                if var_exists(var.name, self.vars):
                    self.fail("Redefinition Error", "Variable already exists")
                if var_exists(var.name, params):
                    self.fail("Redefinition Error", "Parameter already exists")
                params.append(var)

            found = self.do_until(
                _tok(TokenType.CLOSE_PAREN),
                parameter,
                _tok(TokenType.COMMA),
                "Expected separating comma",
                "",
            )
            if not found:
                self.fail("Missing Token", "Expected ')'")
            return params

        def return_type(instance: NodeInstance) -> Type:
            self._need(TokenType.COLON, "Expected return type specifier")
            return self.parse_type()

        def body(instance: NodeInstance) -> NodeInstance | None:
            if self._accept(TokenType.SEMICOLON):
                return None
            first_var = len(self.vars)
            self.vars.extend(instance.get("parameters"))
            node = self.parse_single()
            if node.id is not NodeId.SCOPE:
                self.fail("Syntax Error", "Scope Expected")
            del self.vars[first_var:]
            return node

        def register(instance: NodeInstance) -> None:
            if self.scope_depth > 0:
                self.fail("Logic Error", "Cannot declare a function inside a scope")
            if self.func_has_body(instance, self.functions):
                self.fail("Redefinition Error", "Function already exists")
            self.functions.append(instance)

        return (
            NodeTemplate(NodeId.FUNC_DECL, lambda: self._accept(TokenType.FUNC))
            .property("inline", lambda instance: self._accept(TokenType.INLINE))
            .property("name", lambda instance: self.get_identifier().value)
            .property("parameters", parameters)
            .property("return_type", return_type)
            .property("body", body)
            .finally_(register)
        )

    def _var_decl(self) -> NodeTemplate:
        def var_type(instance: NodeInstance) -> Type:
            self._need(TokenType.COLON, "Expected type specifier")
            return self.parse_type()

        def value(instance: NodeInstance) -> Any:
            if self._accept(TokenType.SYMBOLS, "="):
                return self.parse_expr(instance.get("type"))
            return None

        def declare(instance: NodeInstance) -> None:
            var = Variable(instance.get("name"), instance.get("type"))
            if var_exists(var.name, self.vars):
                self.fail("Redefinition Error", "Variable already exists")
            self.vars.append(var)

        return (
            NodeTemplate(NodeId.VAR_DECL, lambda: self._accept(TokenType.VAR))
            .property("name", lambda instance: self.get_identifier().value)
            .property("type", var_type)
            .property("value", value)
            .require(self._semicolon())
            .finally_(declare)
        )

    def _type_decl(self) -> NodeTemplate:
        def aliased(instance: NodeInstance) -> Type | None:
            if self._accept(TokenType.SEMICOLON):
                return None
            declared = self.parse_type()
            self._need(TokenType.SEMICOLON, "Expected ';'")
            return declared

        def declare(instance: NodeInstance) -> None:
            alias = instance.get("alias")
            if self.declared_types.get(alias) is not None:
                self.fail("Redefinition Error", "Cannot declare already existing type")
            self.declared_types[alias] = instance.get("type")

        return (
            NodeTemplate(NodeId.TYPE_DECL, lambda: self._accept(TokenType.TYPE))
            .property("alias", lambda instance: self.get_identifier().value)
            .property("type", aliased)
            .finally_(declare)
        )

    def _public_field(self) -> NodeTemplate:
        def content(instance: NodeInstance) -> list[NodeInstance]:
            self._need(TokenType.PUBLIC_CLOSURE, "", "Missing Token '$'")
            nodes: list[NodeInstance] = []
            if not self.do_until(
                _tok(TokenType.PUBLIC_CLOSURE), lambda: nodes.append(self.parse_single())
            ):
                self.fail("Missing Token", "Expected '$'")
            return nodes

        return (
            NodeTemplate(NodeId.PUBLIC_FIELD, lambda: self._accept(TokenType.PUBLIC))
            .property(
                "name",
                lambda instance: self._need(TokenType.IDENTIFIER, "Expected Identifier").value,
            )
            .property("content", content)
        )

    def _import(self) -> NodeTemplate:
        def path(instance: NodeInstance) -> list[str]:
            parts: list[str] = []
            found = self.do_until(
                _tok(TokenType.SEMICOLON),
                lambda: parts.append(
                    self._need(TokenType.IDENTIFIER, "Expected Identifier").value
                ),
                _tok(TokenType.DOT),
                "Missing Token",
                "Expected '.' separator",
            )
            if not found:
                self.fail("Missing Token", "Expected ';'")
            return parts

        def load(instance: NodeInstance) -> None:
            parts = instance.get("path")
            if len(parts) < 2:
                self.fail("File Error", "Invalid path for import statement")
            *directories, file_name, field_name = parts
            file_path = os.path.join(*directories, file_name + EXTENSION)
            imported = self.parse_file(file_path, field_name)
            self.items[self.position:self.position] = imported

        return (
            NodeTemplate(NodeId.IMPORT, lambda: self._accept(TokenType.IMPORT))
            .property("path", path)
            .finally_(load)
            .not_added()
        )

    def _namespace(self) -> NodeTemplate:
        def enter(instance: NodeInstance) -> None:
            self._need(TokenType.OPEN_CURLY, "Expected '{'")
            name = instance.get("name")
            if name in self.namespaces:
                self.fail("Logic Error", "Namespace already in use")
            self.namespaces.append(name)

            def statement() -> None:
                node = self.parse_single()
                if node.add:
                    self.output.append(node)

            if not self.do_until(_tok(TokenType.CLOSE_CURLY), statement):
                self.fail("Missing Token", "Expected '}'")

        return (
            NodeTemplate(NodeId.NAMESPACE, lambda: self._accept(TokenType.NAMESPACE))
            .not_added()
            .property(
                "name",
                lambda instance: self._need(TokenType.IDENTIFIER, "Expected identifier").value,
            )
            .finally_(enter)
        )

    def _defer(self) -> NodeTemplate:
        def postpone(instance: NodeInstance) -> None:
            if self.scope_depth <= 0:
                self.fail("Logic Error", "Cannot use defer out of scope")
            self.defers.append(self.parse_single())

        return (
            NodeTemplate(NodeId.DEFER, lambda: self._accept(TokenType.DEFER))
            .finally_(postpone)
            .not_added()
        )

    def _var_set(self) -> NodeTemplate:
        def value(instance: NodeInstance) -> Any:
            var = self.get_var(instance.get("name"), self.vars)
            if self._accept(TokenType.SYMBOLS, "="):
                return self.parse_expr(var.type)
            self.fail("Missing Token", "Expected '='")

        return (
            NodeTemplate(NodeId.VAR_SET, lambda: self._at(TokenType.IDENTIFIER))
            .property("name", lambda instance: self.get_identifier().value)
            .property("value", value)
            .require(self._semicolon())
        )

    def _return_stmt(self) -> NodeTemplate:
        return (
            NodeTemplate(NodeId.RETURN_STMT, lambda: self._accept(TokenType.RETURN))
            .property("value", lambda instance: self.parse_expr(None))
            .require(self._semicolon())
        )

    def _asm_code(self) -> NodeTemplate:
        return (
            NodeTemplate(NodeId.ASM_CODE, lambda: self._at(TokenType.ASM))
            .property("code", lambda instance: self.consume().value)
            .require(self._semicolon())
        )

    def _operation_decl(self) -> NodeTemplate:
        def second_operand(instance: NodeInstance) -> Variable | None:
            if self._at(*_PRECEDENCE_WORDS):
                return None
            var = self.parse_var()
            self._need(TokenType.COMMA, "Expected ','")
            return var

        def body(instance: NodeInstance) -> NodeInstance:
            first_var = len(self.vars)
            self.vars.append(instance.get("operand1"))
            operand2 = instance.get("operand2")
            if operand2 is not None:
                self.vars.append(operand2)
            node = self.parse_single()
            del self.vars[first_var:]
            return node

        def declare(instance: NodeInstance) -> None:
            operand1 = instance.get("operand1")
            operand2 = instance.get("operand2")
            op = Operation(
                operand2 is None,
                instance.get("symbol"),
                operand1.type,
                None if operand2 is None else operand2.type,
                instance.get("ret_type"),
                instance.get("body"),
            )
            if find_operation(op, self.operators) > -1:
                self.fail("Syntax Error", "Operation already exists")
            self.operators.append(op)

        return (
            NodeTemplate(NodeId.OPERATION_DECL, lambda: self._accept(TokenType.OPERATION))
            .property(
                "symbol", lambda instance: self._need(TokenType.SYMBOLS, "Expected symbols").value
            )
            .require(self._step(TokenType.OPEN_ANGLE, "Expected '<'"))
            .property("operand1", lambda instance: self.parse_var())
            .require(self._step(TokenType.COMMA, "Expected ','"))
            .property("operand2", second_operand)
            .property("precedence", self._precedence)
            .require(self._step(TokenType.CLOSE_ANGLE, "Expected '>'"))
            .property("ret_type", lambda instance: self.parse_type())
            .property("body", body)
            .not_added()
            .finally_(declare)
        )

    def _precedence(self, instance: NodeInstance) -> int:
        if not self._at(*_PRECEDENCE_WORDS):
            self.fail("Syntax Error", "Expected precedence specifier")
        if self._accept(TokenType.NONE):
            return 0
        clause = self.consume()
        above = clause.type is TokenType.ABOVE
        if self._accept(TokenType.ALL):
            return INT_MAX if above else INT_MIN
        unary = self._at(TokenType.SYMBOLS)
        first = None if unary else self.parse_type()
        symbols = self._need(TokenType.SYMBOLS, "Expected symbols").value
        second = None
        if unary:
            first = self.parse_type()
        else:
            second = self.parse_type()
        self._need(TokenType.PIPE, "Expected '|'")
        result = self.parse_type()
        index = find_operation(Operation(unary, symbols, first, second, result), self.operators)
        if index < 0:
            self.fail("Syntax Error", "Operation does not exist")
        base = self.operators[index].precedence
        return base + 1 if above else base - 1

    def _cast_decl(self) -> NodeTemplate:
        def declare(instance: NodeInstance) -> None:
            target = self.autocasts if instance.get("auto") else self.casts
            cast = Cast(instance.get("operand").type, instance.get("ret_type"), instance.get("body"))
            if find_cast(cast, target) > -1:
                self.fail("Syntax Error", "Cast already exists")
            target.append(cast)

        return (
            NodeTemplate(NodeId.CAST_DECL, lambda: self._at(TokenType.CAST, TokenType.AUTOCAST))
            .property("auto", lambda instance: self.consume().type is TokenType.AUTOCAST)
            .require(self._step(TokenType.OPEN_ANGLE, "Expected '<'"))
            .property("operand", lambda instance: self.parse_var())
            .require(self._step(TokenType.CLOSE_ANGLE, "Expected '>'"))
            .property("ret_type", lambda instance: self.parse_type())
            .property("body", self._body)
            .not_added()
            .finally_(declare)
        )

    def _if_stmt(self) -> NodeTemplate:
        return (
            NodeTemplate(NodeId.IF_STMT, lambda: self._accept(TokenType.IF))
            .require(self._step(TokenType.OPEN_PAREN, "Expected '('"))
            .property("expr", self._boolean_expr)
            .require(self._step(TokenType.CLOSE_PAREN, "Expected ')'"))
            .property("body", self._body)
            .property(
                "else",
                lambda instance: self.parse_single() if self._accept(TokenType.ELSE) else None,
            )
        )

    def _while_stmt(self) -> NodeTemplate:
        return (
            NodeTemplate(NodeId.WHILE_STMT, lambda: self._accept(TokenType.WHILE))
            .require(self._step(TokenType.OPEN_PAREN, "Expected '('"))
            .property("expr", self._boolean_expr)
            .require(self._step(TokenType.CLOSE_PAREN, "Expected ')'"))
            .property("body", self._body)
        )

    def _do_while_stmt(self) -> NodeTemplate:
        return (
            NodeTemplate(NodeId.DO_WHILE_STMT, lambda: self._accept(TokenType.DO))
            .property("body", self._body)
            .require(self._step(TokenType.WHILE, "Expected 'while'"))
            .require(self._step(TokenType.OPEN_PAREN, "Expected '('"))
            .property("expr", self._boolean_expr)
            .require(self._step(TokenType.CLOSE_PAREN, "Expected ')'"))
            .require(self._semicolon())
        )

    def _for_stmt(self) -> NodeTemplate:
        return (
            NodeTemplate(NodeId.FOR_STMT, lambda: self._accept(TokenType.FOR))
            .require(self._step(TokenType.OPEN_PAREN, "Expected '('"))
            .property("variable", lambda instance: self.parse_var())
            .require(self._semicolon())
            .property("expr", self._boolean_expr)
            .require(self._semicolon())
            .property("incr", self._body)
            .require(self._step(TokenType.CLOSE_PAREN, "Expected ')'"))
            .require(self._step(TokenType.CLOSE_PAREN, "Expected ')'"))
            .property("body", self._body)
        )


def parse(tokens: Iterable[Token]) -> list[NodeInstance]:
    """Parse ``tokens`` in one call."""
    return Parser(tokens).parse()