"""Algebra Protocols — the contract every interpretation satisfies.

Invariants:
    - ExpSym[R] is the base language: lit, neg, add over a result type R
    - MulSym[R] extends ExpSym[R] with mul and changes nothing in the base
    - Any MulSym is accepted wherever an ExpSym is required
    - Interpretations never inherit from these classes to conform; they only
      need the methods (structural subtyping)

Design Decisions:
    - Protocol over ABC: adding an interpretation never touches this module
    - The result type is the Protocol's type parameter, so a generic program
      reads `def prog(v: ExpSym[R]) -> R`
"""

from typing import Callable, Protocol, TypeVar, runtime_checkable

R = TypeVar("R")


@runtime_checkable
class ExpSym(Protocol[R]):
    """Base algebra: integer literals, negation, addition."""

    def lit(self, n: int) -> R: ...

    def neg(self, e: R) -> R: ...

    def add(self, e1: R, e2: R) -> R: ...


@runtime_checkable
class MulSym(ExpSym[R], Protocol[R]):
    """Extended algebra: the base plus multiplication."""

    def mul(self, e1: R, e2: R) -> R: ...


# A generic program is a function from an interpretation to its result.
Program = Callable[[ExpSym[R]], R]


def supports_mul(interp: object) -> bool:
    """True when interp implements the extended algebra."""
    return isinstance(interp, MulSym)


def interpretation_name(interp: object) -> str:
    """Stable display name for logs and error context."""
    describe = getattr(interp, "describe", None)
    if callable(describe):
        return describe()
    return type(interp).__name__
