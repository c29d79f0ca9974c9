"""Reference Expressions — the "initial" embedding used to state semantics.

Invariants:
    - Exp is a closed sum: Lit | Neg | Add | Mul
    - evaluate() and view() are the reference denotations every tagless
      interpretation must agree with (unbounded ints, no overflow check)
    - reflect() replays an Exp into any interpretation; Mul needs a MulSym

Design Decisions:
    - Not used by the tagless path at runtime; tests and program_from_expression
      are its only clients
"""

from dataclasses import dataclass
from typing import TypeVar, Union

from tagless.core.algebra import ExpSym, interpretation_name, supports_mul

R = TypeVar("R")


@dataclass(frozen=True)
class Lit:
    value: int


@dataclass(frozen=True)
class Neg:
    operand: "Exp"


@dataclass(frozen=True)
class Add:
    left: "Exp"
    right: "Exp"


@dataclass(frozen=True)
class Mul:
    left: "Exp"
    right: "Exp"


Exp = Union[Lit, Neg, Add, Mul]


def evaluate(exp: Exp) -> int:
    match exp:
        case Lit(value=n):
            return n
        case Neg(operand=e):
            return -evaluate(e)
        case Add(left=l, right=r):
            return evaluate(l) + evaluate(r)
        case Mul(left=l, right=r):
            return evaluate(l) * evaluate(r)
    raise TypeError(f"Not an expression: {exp!r}")


def view(exp: Exp) -> str:
    match exp:
        case Lit(value=n):
            return str(n)
        case Neg(operand=e):
            return f"(- {view(e)})"
        case Add(left=l, right=r):
            return f"({view(l)} + {view(r)})"
        case Mul(left=l, right=r):
            return f"({view(l)} * {view(r)})"
    raise TypeError(f"Not an expression: {exp!r}")


def count_operations(exp: Exp) -> int:
    """Number of neg/add/mul applications in exp."""
    match exp:
        case Lit():
            return 0
        case Neg(operand=e):
            return 1 + count_operations(e)
        case Add(left=l, right=r) | Mul(left=l, right=r):
            return 1 + count_operations(l) + count_operations(r)
    raise TypeError(f"Not an expression: {exp!r}")


def reflect(exp: Exp, interp: ExpSym[R]) -> R:
    """Replay exp as calls against interp, left operand first."""
    match exp:
        case Lit(value=n):
            return interp.lit(n)
        case Neg(operand=e):
            return interp.neg(reflect(e, interp))
        case Add(left=l, right=r):
            left = reflect(l, interp)
            return interp.add(left, reflect(r, interp))
        case Mul(left=l, right=r):
            if not supports_mul(interp):
                raise TypeError(
                    f"{interpretation_name(interp)} does not support mul"
                )
            left = reflect(l, interp)
            return interp.mul(left, reflect(r, interp))
    raise TypeError(f"Not an expression: {exp!r}")
