"""Generic Programs — expressions written once, run under any interpretation.

Invariants:
    - A program is a plain function interp -> result; it holds no state
    - tf1 needs only ExpSym; tfm1, tfm2, tfq need MulSym
    - tfm2 reuses tf1 unchanged inside an extended program
"""

from typing import TypeVar

from tagless.core.algebra import ExpSym, MulSym, Program
from tagless.core.expression import Exp, reflect

R = TypeVar("R")


def tf1(v: ExpSym[R]) -> R:
    """8 + -(1 + 2)"""
    return v.add(v.lit(8), v.neg(v.add(v.lit(1), v.lit(2))))


def tfm1(v: MulSym[R]) -> R:
    """8 + -(1 * 2)"""
    return v.add(v.lit(8), v.neg(v.mul(v.lit(1), v.lit(2))))


def tfm2(v: MulSym[R]) -> R:
    """7 * tf1"""
    return v.mul(v.lit(7), tf1(v))


def tfq(v: MulSym[R]) -> R:
    """(42 + -10) * 7"""
    return v.mul(v.add(v.lit(42), v.neg(v.lit(10))), v.lit(7))


def program_from_expression(exp: Exp) -> Program[R]:
    """Lift a reference expression into a generic program."""
    def program(v: ExpSym[R]) -> R:
        return reflect(exp, v)
    return program
