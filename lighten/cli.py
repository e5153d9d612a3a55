"""Command-line entry point: tokenizes and parses a source file."""

from __future__ import annotations

import sys
from typing import Sequence

from lighten.errors import CompileError
from lighten.parser import Parser
from lighten.textutil import EXTENSION
from lighten.tokenizer import Tokenizer

_FLAGS = ("-asm", "-obj")


def _read_source(path: str) -> str:
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        return ""
    if text and not text.endswith("\n"):
        text += "\n"
    return text


def main(argv: Sequence[str] | None = None) -> int:
    """Print the tokens and nodes of the source file named in ``argv``."""
    args = list(sys.argv[1:] if argv is None else argv)
    for flag in _FLAGS:
        if flag in args:
            args.remove(flag)
    if not args:
        return 1
    source_path = args[0]
    if source_path[-len(EXTENSION):] != EXTENSION:
        return 1

    source = _read_source(source_path)
    try:
        tokens = Tokenizer(source).tokenize()
        print()
        print("TOKENS:")
        for token in tokens:
            print(token)

        nodes = Parser(tokens).parse()
        print()
        print("NODES:")
        for node in nodes:
            print(node)
    except CompileError as err:
        print(err.colored())
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())