"""Generic Tree — the untyped, serializable form of an expression.

Invariants:
    - A Tree is either Leaf(text) or Node(tag, children); nothing else
    - Trees are immutable and hashable; equality is structural
    - Construction never validates tags or arities; only decoding does
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Leaf:
    text: str


@dataclass(frozen=True)
class Node:
    tag: str
    children: tuple["Tree", ...] = ()

    def __post_init__(self):
        # Lists are accepted for convenience but stored as tuples.
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))


Tree = Union[Leaf, Node]


def tree_depth(tree: Tree) -> int:
    """Number of nodes on the longest root-to-leaf path (a Leaf counts as 1)."""
    if isinstance(tree, Leaf):
        return 1
    return 1 + max((tree_depth(c) for c in tree.children), default=0)


def show_tree(tree: Tree) -> str:
    """Compact s-expression rendering, e.g. (Add (Lit 1) (Lit 2))."""
    if isinstance(tree, Leaf):
        return tree.text
    if not tree.children:
        return f"({tree.tag})"
    inner = " ".join(show_tree(c) for c in tree.children)
    return f"({tree.tag} {inner})"
