"""Tests for the structurally shared Path."""

import pytest

from prodgraph.model.path import Path


def test_root_path():
    root = Path.root("A")

    assert root.length == 0
    assert len(root) == 0
    assert root.start_node == "A"
    assert root.end_node == "A"
    assert root.edges_seq == ()
    assert root.nodes_seq == ("A",)


def test_extend_builds_sequences():
    path = Path.root("A").extend("ab", "B").extend("bc", "C")

    assert path.length == 2
    assert path.end_node == "C"
    assert path.edges_seq == ("ab", "bc")
    assert path.nodes_seq == ("A", "B", "C")
    assert list(path) == ["ab", "bc"]


def test_siblings_share_parent():
    parent = Path.root("A").extend("ab", "B")
    left = parent.extend("bc", "C")
    right = parent.extend("bd", "D")

    assert left.parent is parent
    assert right.parent is parent
    assert parent.edges_seq == ("ab",)
    assert left.edges_seq == ("ab", "bc")
    assert right.edges_seq == ("ab", "bd")


def test_extend_does_not_mutate_parent():
    parent = Path.root("A").extend("ab", "B")
    _ = parent.edges_seq
    parent.extend("bc", "C")
    assert parent.edges_seq == ("ab",)
    assert parent.length == 1


def test_equality_and_hash_by_structure():
    p1 = Path.root("A").extend(0, "B").extend(1, "C")
    p2 = Path.root("A").extend(0, "B").extend(1, "C")
    p3 = Path.root("A").extend(2, "C")

    assert p1 == p2
    assert hash(p1) == hash(p2)
    assert p1 != p3
    assert len({p1, p2, p3}) == 2


def test_equality_with_other_types():
    assert Path.root("A").__eq__("A") is NotImplemented


def test_is_immutable():
    path = Path.root("A")
    with pytest.raises(AttributeError):
        path.end_node = "B"  # type: ignore[misc]


def test_repr_lists_nodes():
    path = Path.root(1).extend(0, 2)
    assert repr(path) == "Path(1 -> 2, edges=[0])"
