"""Optimizations run on an ArkScript AST before compilation."""

from __future__ import annotations

import copy
from collections.abc import Callable

from arkscript.common import Keyword, NodeType
from arkscript.node import Node

FEATURE_REMOVE_UNUSED_VARS = 1 << 4

_Visitor = Callable[[Node, Node, int], None]


class Optimizer:
    """Removes unused top level constants from an AST when asked to."""

    def __init__(self, options: int) -> None:
        self._options = options
        self._ast = Node(NodeType.LIST)
        self._appearances: dict[str, int] = {}

    def feed(self, ast: Node) -> None:
        """Take a copy of ``ast`` and run the enabled optimizations on it."""
        self._ast = copy.deepcopy(ast)
        self._appearances = {}
        if self._options & FEATURE_REMOVE_UNUSED_VARS:
            self._remove_unused()

    def ast(self) -> Node:
        """The optimized AST."""
        return self._ast

    def _remove_unused(self) -> None:
        if self._ast.node_type is not NodeType.LIST:
            return

        def register(decl: Node, parent: Node, idx: int) -> None:
            self._appearances[decl.children[1].value] = 0

        def prune(decl: Node, parent: Node, idx: int) -> None:
            name = decl.children[1].value
            if (
                self._appearances.get(name) == 1
                and len(decl.children) > 2
                and decl.children[2].node_type is not NodeType.LIST
            ):
                del parent.children[idx]

        self._run_on_global_scope_vars(self._ast, register)
        self._count_occurrences(self._ast)
        self._run_on_global_scope_vars(self._ast, prune)

    def _run_on_global_scope_vars(self, node: Node, func: _Visitor) -> None:
        # Walk backwards so removing an element leaves the pending indices valid.
        for idx in reversed(range(len(node.children))):
            child = node.children[idx]
            if not child.children or child.children[0].node_type is not NodeType.KEYWORD:
                continue
            kw = child.children[0].value
            if kw is Keyword.BEGIN:
                self._run_on_global_scope_vars(child, func)
            elif kw in (Keyword.LET, Keyword.MUT) and len(child.children) > 1:
                func(child, node, idx)

    def _count_occurrences(self, node: Node) -> None:
        if node.node_type in (NodeType.SYMBOL, NodeType.CAPTURE):
            if node.value in self._appearances:
                self._appearances[node.value] += 1
        elif node.node_type is NodeType.LIST:
            for child in node.children:
                self._count_occurrences(child)