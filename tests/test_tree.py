import pytest

from nasmlang.tree import (
    Node,
    NodeType,
    copy_node,
    dump,
    subtree_contains_variable,
    to_dot,
)


def _sample():
    return Node(
        NodeType.OPERATION,
        "=",
        Node(NodeType.IDENTIFIER, "x"),
        Node(NodeType.OPERATION, "+", Node(NodeType.NUMBER, "1"), Node(NodeType.NUMBER, "2")),
    )


def test_number_node_drops_children():
    child = Node(NodeType.NUMBER, "5")
    node = Node(NodeType.NUMBER, "7", child, child)
    assert node.left is None and node.right is None


def test_node_type_values_fixed():
    assert NodeType.NUMBER.value == 1
    assert NodeType(5) is NodeType.CALLING


def test_copy_node_is_deep_and_equal():
    tree = _sample()
    copy = copy_node(tree)
    assert copy == tree
    assert copy is not tree
    assert copy.right.left is not tree.right.left
    copy.right.value = "-"
    assert tree.right.value == "+"


def test_copy_none():
    assert copy_node(None) is None


def test_subtree_contains_variable():
    tree = _sample()
    assert subtree_contains_variable(tree) is True
    assert subtree_contains_variable(tree.right) is False
    assert subtree_contains_variable(tree.left) is True
    assert subtree_contains_variable(None) is False


def test_subtree_contains_variable_repeated_calls_consistent():
    tree = _sample()
    results = [subtree_contains_variable(tree.right) for _ in range(3)]
    assert results == [False, False, False]
    assert subtree_contains_variable(tree) is True


def test_to_dot_header_and_footer():
    text = to_dot(_sample())
    assert text.startswith("digraph\n{\n    rankdir = TB;\n")
    assert 'bgcolor = "#FDFBE4";' in text
    assert text.endswith("}\n")


def test_to_dot_one_line_per_node():
    text = to_dot(_sample())
    node_lines = [line for line in text.splitlines() if "[rank=" in line]
    assert len(node_lines) == 5


def test_to_dot_ranks_follow_depth():
    text = to_dot(_sample())
    assert "[rank=0," in text
    assert text.count("[rank=2,") == 2
    assert "[rank=3," not in text


def test_to_dot_escapes_comparisons_and_colors():
    tree = Node(NodeType.OPERATION, "<=", Node(NodeType.IDENTIFIER, "a"), Node(NodeType.NUMBER, "3"))
    text = to_dot(tree)
    assert "value: \\<= |" in text
    assert 'color = "#E8D59E"' in text
    assert 'color = "#DBD4FF"' in text
    assert 'color = "#EBAEE6"' in text
    assert "type: variable | value: a" in text


def test_to_dot_edges_reach_every_child():
    text = to_dot(_sample())
    edge_lines = [line for line in text.splitlines() if "->" in line]
    arrow_count = sum(line.count("->") for line in edge_lines)
    assert arrow_count == 4
    assert all(line.rstrip().endswith(";") for line in edge_lines)


def test_to_dot_rejects_none():
    with pytest.raises(ValueError):
        to_dot(None)


def test_dump_writes_file(tmp_path):
    target = tmp_path / "out" / "tree.gv"
    tree = _sample()
    written = dump(tree, target, render=False)
    assert written == target
    assert target.read_text(encoding="utf-8") == to_dot(tree)


def test_dump_rejects_none(tmp_path):
    with pytest.raises(ValueError):
        dump(None, tmp_path / "x.gv", render=False)