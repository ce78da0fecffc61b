"""Syntax tree nodes and Graphviz dumping of trees."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Optional

DEFAULT_DUMP_PATH = Path("dump") / "dump.gv"

_COMPARISONS = frozenset({">", "<", "==", ">=", "<=", "!="})


class NodeType(IntEnum):
    """Kind of a syntax tree node."""

    NUMBER = 1
    OPERATION = 2
    IDENTIFIER = 3
    FUNCTION = 4
    CALLING = 5

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def color(self) -> str:
        return _COLORS[self]


_LABELS = {
    NodeType.FUNCTION: "def",
    NodeType.NUMBER: "number",
    NodeType.IDENTIFIER: "variable",
    NodeType.OPERATION: "operation",
    NodeType.CALLING: "calling",
}

_COLORS = {
    NodeType.NUMBER: "#DBD4FF",
    NodeType.IDENTIFIER: "#EBAEE6",
    NodeType.OPERATION: "#E8D59E",
    NodeType.FUNCTION: "#E7FFAC",
    NodeType.CALLING: "#E8A79E",
}


@dataclass
class Node:
    """A binary syntax tree node. Number nodes never have children."""

    type: NodeType
    value: str
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    def __post_init__(self) -> None:
        self.type = NodeType(self.type)
        if self.type is NodeType.NUMBER:
            self.left = None
            self.right = None

    def children(self) -> tuple["Node", ...]:
        return tuple(child for child in (self.left, self.right) if child is not None)


def copy_node(node: Optional[Node]) -> Optional[Node]:
    """Return a deep copy of the subtree rooted at ``node``."""
    if node is None:
        return None
    return Node(node.type, node.value, copy_node(node.left), copy_node(node.right))


def subtree_contains_variable(node: Optional[Node]) -> bool:
    """Tell whether any identifier occurs in the subtree."""
    if node is None:
        return False
    if node.type is NodeType.IDENTIFIER:
        return True
    return subtree_contains_variable(node.left) or subtree_contains_variable(node.right)


def _name_nodes(root: Node) -> dict[int, str]:
    names: dict[int, str] = {}
    stack = [root]
    while stack:
        node = stack.pop()
        names[id(node)] = f"node_{len(names)}"
        stack.extend(reversed(node.children()))
    return names


def to_dot(root: Node) -> str:
    """Render the tree as Graphviz source text."""
    if root is None:
        raise ValueError("cannot dump an empty tree")

    names = _name_nodes(root)

    def name(node: Optional[Node]) -> str:
        return "(nil)" if node is None else names[id(node)]

    parts = [
        "digraph\n",
        "{\n    ",
        "rankdir = TB;\n    ",
        "node [shape=record,style = filled,penwidth = 2.5];\n    ",
        'bgcolor = "#FDFBE4";\n\n',
    ]

    def describe(node: Node, rank: int) -> None:
        value = node.value
        if node.type is NodeType.OPERATION and value in _COMPARISONS:
            value = "\\" + value
        parts.append(
            f'    {name(node)} [rank={rank},label=" {{ node: {name(node)}'
            f" | type: {node.type.label} | value: {value} | "
            f'{{ left: {name(node.left)} | right: {name(node.right)} }}}} "'
            f', color = "{node.type.color}"];\n'
        )
        for child in node.children():
            describe(child, rank + 1)

    chain_length = 0

    def arrows(node: Node) -> None:
        nonlocal chain_length
        for child in node.children():
            if chain_length:
                parts.append(f"-> {name(child)} ")
            else:
                parts.append(f"    {name(node)} -> {name(child)} ")
            chain_length += 1
            arrows(child)
        if chain_length:
            parts.append(";\n")
        chain_length = 0

    describe(root, 0)
    arrows(root)
    parts.append("}\n")
    return "".join(parts)


def dump(root: Node, path=DEFAULT_DUMP_PATH, render: bool = True) -> Path:
    """Write the tree as a Graphviz file and optionally render it to PNG."""
    if root is None:
        raise ValueError("cannot dump an empty tree")
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_dot(root), encoding="utf-8")
    if render:
        try:
            subprocess.run(
                ["dot", str(path), "-Tpng", "-o", str(path.with_suffix(".png"))],
                check=False,
            )
        except FileNotFoundError:
            pass
    return path