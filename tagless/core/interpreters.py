"""Base Interpretations — evaluator, pretty-printer and tree builder for lit/neg/add.

Invariants:
    - Each class is an independent ExpSym; none knows about the others
    - IntEval uses checked arithmetic: any result outside the signed `bits`
      range raises ArithmeticOverflowError (never wraps, never saturates)
    - PrettyPrint fully parenthesizes: one "(" per neg/add application
    - TreeBuild emits only well-formed trees (recognized tags, correct arity)

Design Decisions:
    - Multiplication lives in interpreters_mul.py: the base tier is complete
      on its own and the extended tier is added without editing this file
"""

from tagless.core.domain_types import Tag
from tagless.core.errors import ArithmeticOverflowError, ErrorContext
from tagless.core.tree import Leaf, Node, Tree

DEFAULT_INT_BITS: int = 64


class IntEval:
    """Evaluate to an int, checked against a signed `bits`-wide range.

    bits=None disables the range check and uses Python's unbounded ints.
    """

    def __init__(self, bits: int | None = DEFAULT_INT_BITS):
        if bits is not None and bits < 2:
            raise ValueError(f"bits must be >= 2, got {bits}")
        self.bits = bits
        if bits is None:
            self.min_value = self.max_value = None
        else:
            self.min_value = -(1 << (bits - 1))
            self.max_value = (1 << (bits - 1)) - 1

    def describe(self) -> str:
        return f"{type(self).__name__}[{self.bits or 'unbounded'}]"

    def _checked(self, operation: str, result: int, *operands: int) -> int:
        if self.bits is not None and not self.min_value <= result <= self.max_value:
            raise ArithmeticOverflowError(
                operation, operands, self.bits,
                ErrorContext(interpretation=self.describe()),
            )
        return result

    def lit(self, n: int) -> int:
        return self._checked("lit", n, n)

    def neg(self, e: int) -> int:
        return self._checked("neg", -e, e)

    def add(self, e1: int, e2: int) -> int:
        return self._checked("add", e1 + e2, e1, e2)


class PrettyPrint:
    """Render to fully parenthesized infix text."""

    def lit(self, n: int) -> str:
        return str(n)

    def neg(self, e: str) -> str:
        return f"(- {e})"

    def add(self, e1: str, e2: str) -> str:
        return f"({e1} + {e2})"


class TreeBuild:
    """Serialize to a Generic Tree."""

    def lit(self, n: int) -> Tree:
        return Node(Tag.LIT.value, (Leaf(str(n)),))

    def neg(self, e: Tree) -> Tree:
        return Node(Tag.NEG.value, (e,))

    def add(self, e1: Tree, e2: Tree) -> Tree:
        return Node(Tag.ADD.value, (e1, e2))
