"""Syntax-tree building blocks: node templates, node instances and types."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Callable

from lighten.errors import CompileError


class Property:
    """A named value of a node, computed once by its criteria function."""

    def __init__(self, name: str, criteria: Callable[["NodeInstance"], Any]) -> None:
        self.name = name
        self.criteria = criteria
        self.valid = False
        self._value: Any = None

    def get(self) -> Any:
        """The computed value; raises if it has not been computed yet."""
        if not self.valid:
            raise CompileError("Illegal State", "Cannot get value before it is valid")
        return self._value

    def invoke(self, instance: "NodeInstance") -> None:
        """Compute the value for ``instance``; a property is computed only once."""
        if self.valid:
            raise CompileError("Illegal State", "Cannot invoke criteria with valid value")
        self._value = self.criteria(instance)
        self.valid = True

    def fresh(self) -> "Property":
        """A copy of this property with no value computed."""
        return Property(self.name, self.criteria)


class NodeId(enum.Enum):
    SCOPE = enum.auto()
    FUNC_DECL = enum.auto()
    VAR_DECL = enum.auto()
    TYPE_DECL = enum.auto()
    PUBLIC_FIELD = enum.auto()
    IMPORT = enum.auto()
    NAMESPACE = enum.auto()
    DEFER = enum.auto()
    VAR_SET = enum.auto()
    RETURN_STMT = enum.auto()
    ASM_CODE = enum.auto()
    OPERATION_DECL = enum.auto()
    CAST_DECL = enum.auto()
    IF_STMT = enum.auto()
    WHILE_STMT = enum.auto()
    DO_WHILE_STMT = enum.auto()
    FOR_STMT = enum.auto()


@dataclass
class NodeInstance:
    """A parsed node: its kind and the properties read for it."""

    id: NodeId
    requirements: list[Property] = field(default_factory=list)
    add: bool = True

    def get(self, name: str) -> Any:
        """The value of the property called ``name``."""
        for prop in self.requirements:
            if prop.name == name:
                return prop.get()
        raise CompileError("Internal Error", "Property not found")

    def __str__(self) -> str:
        parts = "".join(
            f"{prop.name}: {'T' if prop.valid else 'F'}; " for prop in self.requirements
        )
        return f"NodeInstance({parts})"


class NodeTemplate:
    """Describes how one kind of node is recognised and read."""

    def __init__(self, node_id: NodeId, criteria: Callable[[], bool]) -> None:
        self.id = node_id
        self.criteria = criteria
        self.requirements: list[Property] = []
        self.final: Callable[[NodeInstance], None] = lambda instance: None
        self.added = True

    def check(self) -> bool:
        """Whether this node starts at the current position."""
        return bool(self.criteria())

    def property(self, name: str, func: Callable[[NodeInstance], Any]) -> "NodeTemplate":
        """Add a named property, read in the order the properties were added."""
        self.requirements.append(Property(name, func))
        return self

    def require(self, func: Callable[[NodeInstance], Any]) -> "NodeTemplate":
        """Add an unnamed step, run for its effect on the input."""
        self.requirements.append(Property("", func))
        return self

    def finally_(self, func: Callable[[NodeInstance], None]) -> "NodeTemplate":
        """Set the action run once all properties are read."""
        self.final = func
        return self

    def not_added(self) -> "NodeTemplate":
        """Mark built nodes as not to be added to the output."""
        self.added = False
        return self

    def register(self, registry: list["NodeTemplate"]) -> None:
        registry.append(self)

    def build(self) -> NodeInstance:
        """Read every property in order and return the finished node."""
        instance = NodeInstance(
            self.id, [prop.fresh() for prop in self.requirements], self.added
        )
        for prop in instance.requirements:
            prop.invoke(instance)
        self.final(instance)
        return instance


@dataclass
class Variable:
    name: str
    type: "Type | None" = None


class ExprType(enum.Enum):
    LITERAL = enum.auto()
    VARIABLE = enum.auto()
    FUNC_CALL = enum.auto()
    REFERENCE = enum.auto()
    DEREFERENCE = enum.auto()
    SUBSCRIPT = enum.auto()
    DOT_NOTATION = enum.auto()
    CAST = enum.auto()
    CUSTOM = enum.auto()


@dataclass
class Expression:
    type: ExprType
    value: Any = None


class Builtin(enum.Enum):
    INT = enum.auto()
    UINT = enum.auto()
    LONG = enum.auto()
    ULONG = enum.auto()
    FLOAT = enum.auto()
    DOUBLE = enum.auto()
    BYTE = enum.auto()
    CHAR = enum.auto()
    BOOLEAN = enum.auto()
    STRING = enum.auto()
    VOID = enum.auto()
    STRUCT = enum.auto()
    UNION = enum.auto()
    INTERFACE = enum.auto()
    ALIAS = enum.auto()
    POINTER = enum.auto()


def _both_set_and_differ(a: Any, b: Any) -> bool:
    return a is not None and b is not None and a != b


@dataclass(eq=False)
class Type:
    """A type of the language.

    Equality is lenient: a missing pointee, field type, return type or
    parameter type on either side matches anything.
    """

    type: Builtin
    mut: bool = False
    identifier: str = ""
    points_to: "Type | None" = None
    fields: list[Variable] = field(default_factory=list)
    params: list["Type | None"] = field(default_factory=list)
    return_type: "Type | None" = None
    init_size: Expression | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Type):
            return NotImplemented
        if self.type != other.type or self.mut != other.mut:
            return False
        if self.identifier != other.identifier:
            return False
        if _both_set_and_differ(self.points_to, other.points_to):
            return False
        if len(self.fields) != len(other.fields):
            return False
        if any(_both_set_and_differ(a.type, b.type) for a, b in zip(self.fields, other.fields)):
            return False
        if _both_set_and_differ(self.return_type, other.return_type):
            return False
        if len(self.params) != len(other.params):
            return False
        return not any(_both_set_and_differ(a, b) for a, b in zip(self.params, other.params))


@dataclass(eq=False)
class Operation:
    """A user-declared operator; equal when its symbols and types match."""

    unary: bool
    symbols: str
    a: Type | None
    b: Type | None
    r: Type | None
    body: NodeInstance | None = None
    precedence: int = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Operation):
            return NotImplemented
        return (
            self.unary == other.unary
            and self.symbols == other.symbols
            and self.a == other.a
            and self.b == other.b
            and self.r == other.r
        )


@dataclass(eq=False)
class Cast:
    """A user-declared conversion from type ``a`` to type ``b``."""

    a: Type | None
    b: Type | None
    body: NodeInstance | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cast):
            return NotImplemented
        return self.a == other.a and self.b == other.b