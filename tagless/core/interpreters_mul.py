"""Extended Interpretations — the base interpretations plus mul.

Invariants:
    - Each class here is a MulSym and therefore also an ExpSym
    - lit/neg/add are inherited unchanged: programs that never call mul
      produce identical results under the base and extended classes
    - One level of extension only; no class here is subclassed further
"""

from tagless.core.domain_types import Tag
from tagless.core.interpreters import IntEval, PrettyPrint, TreeBuild
from tagless.core.tree import Node, Tree


class IntMulEval(IntEval):
    def mul(self, e1: int, e2: int) -> int:
        return self._checked("mul", e1 * e2, e1, e2)


class PrettyMulPrint(PrettyPrint):
    def mul(self, e1: str, e2: str) -> str:
        return f"({e1} * {e2})"


class TreeMulBuild(TreeBuild):
    def mul(self, e1: Tree, e2: Tree) -> Tree:
        return Node(Tag.MUL.value, (e1, e2))
