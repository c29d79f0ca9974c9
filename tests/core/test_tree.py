"""Generic Tree — construction, equality, helpers.

Tests:
    - Nodes accept list children but store tuples (hashable, immutable)
    - Malformed trees construct without error
    - tree_depth and show_tree
"""

import pytest
from dataclasses import FrozenInstanceError

from tagless.core.interpreters_mul import TreeMulBuild
from tagless.core.programs import tfq
from tagless.core.tree import Leaf, Node, show_tree, tree_depth


def test_list_children_become_tuple():
    node = Node("Add", [Leaf("1"), Leaf("2")])
    assert node.children == (Leaf("1"), Leaf("2"))
    assert hash(node) == hash(Node("Add", (Leaf("1"), Leaf("2"))))


def test_trees_are_immutable():
    with pytest.raises(FrozenInstanceError):
        Leaf("1").text = "2"


def test_malformed_tree_constructs():
    node = Node("Bogus", (Leaf("x"), Leaf("y"), Leaf("z")))
    assert node.tag == "Bogus"


def test_tree_depth():
    assert tree_depth(Leaf("1")) == 1
    assert tree_depth(Node("Neg")) == 1
    assert tree_depth(tfq(TreeMulBuild())) == 5


def test_show_tree():
    assert show_tree(tfq(TreeMulBuild())) == (
        "(Mul (Add (Lit 42) (Neg (Lit 10))) (Lit 7))"
    )
    assert show_tree(Node("Empty")) == "(Empty)"
