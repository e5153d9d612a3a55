"""A forward cursor over a sequence, shared by the tokenizer and the parser."""

from __future__ import annotations

from typing import Callable, Generic, Iterable, TypeVar

from lighten.errors import CompileError

T = TypeVar("T")


class Cursor(Generic[T]):
    """Walks a list of items one at a time.

    Subclasses decide what stands in for a missing item (``null``), how two
    items are compared (``matches``) and which source line errors report
    (``current_line``).
    """

    def __init__(self, items: Iterable[T]) -> None:
        self.items: list[T] = list(items)
        self.position = 0

    def null(self) -> T | None:
        """The value returned when reading past either end."""
        return None

    def current_line(self) -> int:
        """The source line used in error messages; -1 when unknown."""
        return -1

    def matches(self, actual: T, expected: T) -> bool:
        """Whether ``actual`` is what ``expected`` asks for."""
        return actual == expected

    def has_peek(self, offset: int = 0) -> bool:
        index = self.position + offset
        return 0 <= index < len(self.items)

    def peek(self, offset: int = 0) -> T:
        if self.has_peek(offset):
            return self.items[self.position + offset]
        return self.null()

    def consume(self) -> T:
        if not self.has_peek():
            return self.null()
        item = self.items[self.position]
        self.position += 1
        return item

    def try_consume(self, expected: T) -> bool:
        """Consume the next item if it matches ``expected``."""
        if self.matches(self.peek(), expected):
            self.consume()
            return True
        return False

    def expect(self, expected: T, kind: str, message: str) -> T:
        """Consume and return the next item, raising if it does not match."""
        if self.matches(self.peek(), expected):
            return self.consume()
        self.fail(kind, message)

    def fail(self, kind: str, message: str):
        raise CompileError(kind, message, self.current_line())

    def do_until(
        self,
        terminator: T,
        action: Callable[[], object],
        separator: T | None = None,
        kind: str = "Missing Token",
        message: str = "Expected separator",
    ) -> bool:
        """Run ``action`` until ``terminator`` is consumed.

        With a ``separator``, one must stand between consecutive actions.
        Returns False if the items ran out before the terminator was found.
        """
        while self.has_peek():
            if self.try_consume(terminator):
                return True
            action()
            if separator is None:
                continue
            if self.try_consume(terminator):
                return True
            self.expect(separator, kind, message)
        return False