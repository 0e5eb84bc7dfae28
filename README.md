# arkscript

Building blocks for the ArkScript language in pure Python, with no
dependencies beyond the standard library.

## What is inside

- `arkscript.common`: the shared vocabulary. `NodeType`, `Keyword`,
  `Instruction` (the bytecode opcodes), `TokenType`, the `Token` dataclass,
  `keyword_from_name()` and `operator_instruction()`, and the exceptions
  `ArkError`, `ArkSyntaxError`, `OptimizerError` and `ArkTypeError`.
- `arkscript.node`: the AST `Node`, with equality, ordering, truthiness
  and a readable string form, plus `make_node()`, `make_node_list()`,
  `format_nodes()` and `type_to_string()`.
- `arkscript.lexer`: the `Lexer` class and the `tokenize()` shortcut,
  which turn source code into a list of `Token`s.
- `arkscript.errorctx`: error messages that quote the offending line with
  up to three lines of context, brackets coloured by nesting depth and the
  problem underlined (`make_token_based_error_ctx()`,
  `make_node_based_error_ctx()`, `make_context()`, `colorize_line()`).
- `arkscript.optimizer`: the `Optimizer`, which removes top-level `let` and
  `mut` constants that are never used when it is given the
  `FEATURE_REMOVE_UNUSED_VARS` option.
- `arkscript.builtins`: the standard builtins in `mathematics`, `lists`,
  `strings`, `io`, `timing` and `system`, the value helpers in `values`,
  and `registry`, which looks builtins up by their ArkScript name.

## Installing

```
pip install .
```

## Tokenizing code

```python
from arkscript.lexer import tokenize

for token in tokenize('(let a "hello")'):
    print(token.type.label, token.token, token.line, token.col)
```

Lines and columns start at 0. An invalid token or a malformed escape in a
string raises `arkscript.common.ArkSyntaxError`, whose message shows the
line and column of the problem.

## Optimizing an AST

```python
from arkscript.optimizer import FEATURE_REMOVE_UNUSED_VARS, Optimizer

optimizer = Optimizer(FEATURE_REMOVE_UNUSED_VARS)
optimizer.feed(ast)          # ast is a list Node; it is copied, not changed
pruned = optimizer.ast()
```

## Calling builtins

Builtins take a sequence of ArkScript values as their arguments. Numbers
are Python `int`/`float`, strings are `str`, lists are `list`, `nil` is
`None` and booleans are `True`/`False`:

```python
from arkscript.builtins.registry import lookup, names

sort = lookup("list:sort")
print(sort([[4, 2, 3]]))      # [2, 3, 4]

print("math:pi" in names())   # True
```

`lookup()` raises `KeyError` for an unknown name. A call with the wrong
argument types raises `arkscript.common.ArkTypeError` listing the accepted
signatures; other failures raise `arkscript.common.ArkError`.
`sys:exit` raises `arkscript.builtins.values.VmExit`, which carries the
exit code. `sys:exec` runs its argument through the shell and returns the
command's output.

## What this package does not do

There is no parser, macro processor, bytecode compiler or virtual machine
here, and no command to run ArkScript programs: the package stops at
tokens, hand-built AST nodes and builtins called directly from Python.
The `async` and `await` builtins are not provided.

## Running the tests

```
pip install .[test]
pytest
```