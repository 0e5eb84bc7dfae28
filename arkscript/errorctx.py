"""Error messages that quote the offending source code with context and highlighting."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from arkscript.common import NodeType
from arkscript.node import Node

NO_NAME_FILE = "FILE"

_RESET = "\033[00m"
_GREEN = "\033[32m"
_RED = "\033[31m"
_PAIRING_COLORS = ("\033[94m", "\033[92m", "\033[93m")

_OPENERS = {"(": "open_parentheses", "[": "open_square_braces", "{": "open_curly_braces"}
_CLOSERS = {")": "open_parentheses", "]": "open_square_braces", "}": "open_curly_braces"}


@dataclass
class LineColorContextCounts:
    """Running counts of open pairings, carried from one line to the next."""

    open_parentheses: int = 0
    open_square_braces: int = 0
    open_curly_braces: int = 0


def is_pairable_char(c: str) -> bool:
    """True for parentheses, square braces and curly braces."""
    return c in _OPENERS or c in _CLOSERS


def colorize_line(line: str, counts: LineColorContextCounts) -> str:
    """Colour matching brackets of a line by nesting depth, updating ``counts``."""
    pieces = []
    for c in line:
        if c in _OPENERS:
            attr = _OPENERS[c]
            depth = getattr(counts, attr)
            color = _PAIRING_COLORS[abs(depth) % len(_PAIRING_COLORS)]
            setattr(counts, attr, depth + 1)
        elif c in _CLOSERS:
            attr = _CLOSERS[c]
            depth = getattr(counts, attr) - 1
            setattr(counts, attr, depth)
            color = _PAIRING_COLORS[abs(depth) % len(_PAIRING_COLORS)]
        else:
            pieces.append(c)
            continue
        pieces.append(f"{color}{c}{_RESET}")
    return "".join(pieces)


def _split_lines(code: str) -> list[str]:
    lines = code.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def make_context(code: str, line: int, col_start: int, sym_size: int) -> str:
    """Show up to three lines around ``line`` and underline the given columns."""
    ctx = _split_lines(code)
    current = ctx[line] if line < len(ctx) else ""
    col_end = min(col_start + sym_size, len(current))
    first = line - 3 if line >= 3 else 0
    last = min(line + 3, len(ctx))
    counts = LineColorContextCounts()

    out = []
    for loop in range(first, last):
        colored = colorize_line(ctx[loop], counts)
        out.append(f"{_GREEN}{loop + 1:>5}{_RESET} | {colored}\n")
        if loop == line:
            carets = "^" * max(0, col_end - col_start)
            out.append(f"      | {' ' * col_start}{_RED}{carets}{_RESET}\n")
    return "".join(out)


def _has_file(filename: str) -> bool:
    return filename not in ("", NO_NAME_FILE)


def make_node_based_error_ctx(message: str, node: Node) -> str:
    """Build an error message locating ``node``, quoting its file when it has one."""
    parts = [f"{message}\n\n"]
    if _has_file(node.filename):
        parts.append(f"In file {node.filename}\n")
    parts.append(f"On line {node.line + 1}:{node.col}, got `{node}'\n")

    size = 1
    if node.node_type in (NodeType.SYMBOL, NodeType.STRING, NodeType.SPREAD):
        size = len(node.value)

    if _has_file(node.filename):
        code = Path(node.filename).read_text(encoding="utf-8")
        parts.append(make_context(code, node.line, node.col, size))
    return "".join(parts)


def make_token_based_error_ctx(match: str, line: int, col: int, code: str) -> str:
    """Build an error message locating a token match inside ``code``."""
    return f"On line {line + 1}:{col}\n" + make_context(code, line, col, len(match))