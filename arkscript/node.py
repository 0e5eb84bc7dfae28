"""AST node used by the parser, optimizer and compiler."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Union

from arkscript.common import ArkTypeError, Keyword, NodeType

NodeValue = Union[float, str, Keyword, None]


def _variant_key(value: NodeValue) -> tuple[int, object]:
    """Order values first by kind (number, string, keyword), then by value."""
    if value is None:
        return (0, 0.0)
    if isinstance(value, Keyword):
        return (2, list(Keyword).index(value))
    if isinstance(value, str):
        return (1, value)
    return (0, value)


@dataclass(eq=False)
class Node:
    """A node of an ArkScript abstract syntax tree."""

    node_type: NodeType
    value: NodeValue = None
    children: list[Node] = field(default_factory=list)
    line: int = 0
    col: int = 0
    filename: str = ""

    @classmethod
    def true_node(cls) -> Node:
        """A symbol node naming ``true``."""
        return cls(NodeType.SYMBOL, "true")

    @classmethod
    def false_node(cls) -> Node:
        """A symbol node naming ``false``."""
        return cls(NodeType.SYMBOL, "false")

    @classmethod
    def nil_node(cls) -> Node:
        """A symbol node naming ``nil``."""
        return cls(NodeType.SYMBOL, "nil")

    @classmethod
    def list_node(cls) -> Node:
        """A symbol node naming ``list``."""
        return cls(NodeType.SYMBOL, "list")

    def push_back(self, node: Node) -> None:
        """Append a child node."""
        self.children.append(node)

    def set_pos(self, line: int, col: int) -> None:
        """Record where the node was found in the source."""
        self.line = line
        self.col = col

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        if self.node_type is not other.node_type:
            return False
        if self.node_type is NodeType.LIST:
            raise ArkTypeError("Can not compare lists")
        if self.node_type is NodeType.CLOSURE:
            return False
        return self.value == other.value

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: Node) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        if self.node_type is not other.node_type:
            return self.node_type.value < other.node_type.value
        if self.node_type in (NodeType.NUMBER, NodeType.SYMBOL, NodeType.STRING):
            return _variant_key(self.value) < _variant_key(other.value)
        if self.node_type is NodeType.LIST:
            for mine, theirs in zip(self.children, other.children):
                if mine < theirs:
                    return True
                if theirs < mine:
                    return False
            return len(self.children) < len(other.children)
        return False

    def __bool__(self) -> bool:
        kind = self.node_type
        if kind is NodeType.LIST:
            return bool(self.children)
        if kind is NodeType.NUMBER:
            return bool(self.value)
        if kind in (NodeType.GET_FIELD, NodeType.CAPTURE, NodeType.STRING):
            return bool(self.value)
        if kind is NodeType.SYMBOL:
            return self.value not in ("false", "nil")
        return True

    def __str__(self) -> str:
        kind = self.node_type
        if kind is NodeType.STRING:
            return f'"{self.value}"'
        if kind is NodeType.SYMBOL:
            return f"(Symbol) {self.value}"
        if kind is NodeType.CAPTURE:
            return f"(Capture) {self.value}"
        if kind is NodeType.GET_FIELD:
            return f"(GetField) {self.value}"
        if kind is NodeType.NUMBER:
            return format(self.value, "g")
        if kind is NodeType.LIST:
            return _format_children("( ", self.children)
        if kind is NodeType.CLOSURE:
            return "Closure"
        if kind is NodeType.KEYWORD:
            return self.value.name.capitalize()
        if kind is NodeType.MACRO:
            return _format_children("( Macro ", self.children)
        if kind is NodeType.SPREAD:
            return f"(Spread) {self.value}"
        return "(Unused)"


def _format_children(opening: str, nodes: Iterable[Node]) -> str:
    return opening + "".join(f"{node} " for node in nodes) + ")"


def format_nodes(nodes: Iterable[Node]) -> str:
    """Render a sequence of nodes as a parenthesised list."""
    return _format_children("( ", nodes)


def make_node(value: float | str | Keyword | NodeType, line: int, col: int, filename: str) -> Node:
    """Build a node from a number, string, keyword or bare node type, with its position."""
    if isinstance(value, NodeType):
        node = Node(value)
    elif isinstance(value, Keyword):
        node = Node(NodeType.KEYWORD, value)
    elif isinstance(value, str):
        node = Node(NodeType.STRING, value)
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        node = Node(NodeType.NUMBER, float(value))
    else:
        raise ArkTypeError(f"cannot build a node from {type(value).__name__}")
    node.set_pos(line, col)
    node.filename = filename
    return node


def make_node_list(line: int, col: int, filename: str) -> Node:
    """Build an empty list node with its position."""
    return make_node(NodeType.LIST, line, col, filename)


def type_to_string(node: Node) -> str:
    """Name of the node's type as shown to users; nil and booleans get their own names."""
    if node.node_type is NodeType.SYMBOL:
        if node.value == "nil":
            return "Nil"
        if node.value in ("true", "false"):
            return "Bool"
    return node.node_type.label