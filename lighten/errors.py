"""Compiler diagnostics: the error raised on bad input, plus warnings and notes."""

from __future__ import annotations

RED = "\033[31m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
RESET = "\033[0m"


class CompileError(Exception):
    """An error found while reading a source file.

    ``line`` is the source line the error was found on; values of zero or
    below mean the line is unknown and it is left out of the message.
    """

    def __init__(self, kind: str, message: str, line: int = -1) -> None:
        super().__init__(kind, message, line)
        self.kind = kind
        self.message = message
        self.line = line

    def __str__(self) -> str:
        where = f" AT LINE {self.line}" if self.line > 0 else ""
        return f"ERROR{where}: {self.kind} -> {self.message}"

    def colored(self) -> str:
        """The message wrapped in terminal colour codes."""
        return f"{RED}{self}{RESET}"


def warn(message: str) -> None:
    """Print a warning line to standard output."""
    print(f"{YELLOW}WARNING: {message}{RESET}")


def info(message: str) -> None:
    """Print an informational line to standard output."""
    print(f"{BLUE}INFO: {message}{RESET}")