# lighten

A front end for the Lighten language. It reads `.lt` source files, splits them
into tokens and parses the tokens into statement nodes. Along the way it records
declared variables, functions, type aliases, operators and casts. If it finds a
problem, it raises a `CompileError`.

## Installation

```
pip install .
```

## Command line

```
lighten program.lt [-asm] [-obj]
```

The command works as follows:

- It reads the named file. The name must end in `.lt`.
- It prints `TOKENS:` followed by one token per line.
- It prints `NODES:` followed by one parsed top-level node per line.
- The `-asm` and `-obj` flags are accepted and removed from the argument list. They have no further effect.
- Any extra positional argument after the file name is ignored.

The exit status is one of these:

- 0 on success.
- 1 when no input is given or the name does not end in `.lt`.
- 1 when a compile error is found. The error is printed in red, for example `ERROR AT LINE 1: Missing Token -> Expected ';'`.

The same entry point is available as `lighten.cli.main(argv=None)`. It returns the exit status.

## Library use

```python
from lighten.tokenizer import tokenize
from lighten.parser import parse

tokens = tokenize("var x: int;\n")
for token in tokens:
    print(token)          # VAR("")<1>, IDENTIFIER("x")<1>, ...

nodes = parse(tokens)
for node in nodes:
    print(node)           # NodeInstance(name: T; type: T; value: T; : T; )
```

Compile errors are raised as `lighten.errors.CompileError`. The error carries:

- `kind`: the error kind.
- `message`: the message text.
- `line`: the source line. A value of 0 or below means the line is unknown.

```python
from lighten.errors import CompileError
from lighten.parser import parse
from lighten.tokenizer import tokenize

try:
    parse(tokenize("var x: int\n"))
except CompileError as exc:
    print(exc)            # ERROR AT LINE 1: Missing Token -> Expected ';'
```

### Modules

- `lighten.tokenizer`: the `Tokenizer` class and the `tokenize(source)` helper.
- `lighten.tokens`: `TokenType`, the frozen `Token` dataclass, `type_name` and `null_token`.
- `lighten.parser`: the `Parser` class (`parse()`, `parse_single()`) and the `parse(tokens)` helper. Use a `Parser` instance when you need its tables after parsing:
  - `vars`
  - `functions`
  - `declared_types`
  - `operators`
  - `casts`
  - `autocasts`
  - `namespaces`
- `lighten.parser_base`: the shared readers:
  - `ParserBase.parse_type`
  - `parse_var`
  - `decode_identifier`
  - `get_identifier`
  - `parse_file`
  - the lookup helpers `var_exists`, `find_operation` and `find_cast`.
- `lighten.nodes`: the syntax-tree pieces:
  - `NodeTemplate`, `NodeInstance`, `Property` and `NodeId`
  - the type model: `Type`, `Builtin`, `Variable`, `Operation`, `Cast`, `Expression` and `ExprType`.
- `lighten.literals`: `parse_literal(text)` turns literal text into a typed `Literal`. Examples:
  - `"12L"`
  - `"101b"`
  - `"1.5f"`
  - `"'a'"`
  - `"true"`

  Invalid or out-of-range numbers raise `ValueError`.
- `lighten.textutil`: `parse_escapes` and the language's constants, such as `EXTENSION` and the literal suffixes.
- `lighten.cursor`: `Cursor`, the forward cursor that both the tokenizer and the parser are built on.
- `lighten.errors`: `CompileError`, plus `warn` and `info`, which print coloured lines.

## Language overview

The parser accepts these statements:

- `func`
- `var`
- `type`
- `public name $ ... $`
- `import a.b.file.field;`
- `namespace`
- `defer`
- assignments
- `return`
- `asm { ... }`
- `operation`
- `cast` / `autocast`
- `if` / `else`
- `while`
- `do ... while`
- `for`

Names may be qualified as `a::b`. Numeric literals take a suffix:

| Suffix | Type   |
|--------|--------|
| `L`    | long   |
| `f`    | float  |
| `D`    | double |
| `b`    | binary |
| `o`    | octal  |
| `H`    | hex    |

`import` reads `a/b/file.lt` relative to the working directory. It splices in the tokens of the named `public` block.

## What it does not do

- **No expressions.** `ParserBase.parse_expr` reads nothing and returns `None`. A statement that carries a value, such as `var x: int = 5;`, therefore fails at the value.
- **No code generation.** The package does not type-check or generate code.
- **No output files.** It writes no object, assembly or executable files. The command only prints tokens and nodes.

## Running the tests

```
pip install .[test]
pytest
```