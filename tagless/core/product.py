"""Product Interpretation — run two interpretations in lockstep.

Invariants:
    - Duplicate(a, b) is an ExpSym whose result is the pair (a-result, b-result)
    - Every operation delegates to both components with the matching halves;
      the components share no state and never see each other's results
    - MulDuplicate exists only when BOTH components are MulSym
    - Products nest: a product is itself a valid component, so N-way
      interpretation is right-nested pairs (r0, (r1, (r2, r3)))

Design Decisions:
    - duplicate() picks the tier from its arguments, so callers never need to
      know whether both sides support mul
"""

from typing import Any, Generic, TypeVar

from tagless.core.algebra import ExpSym, MulSym, interpretation_name, supports_mul

R1 = TypeVar("R1")
R2 = TypeVar("R2")


class Duplicate(Generic[R1, R2]):
    """Pair two base interpretations."""

    def __init__(self, first: ExpSym[R1], second: ExpSym[R2]):
        self.first = first
        self.second = second

    def describe(self) -> str:
        return (
            f"{type(self).__name__}({interpretation_name(self.first)}, "
            f"{interpretation_name(self.second)})"
        )

    def lit(self, n: int) -> tuple[R1, R2]:
        return (self.first.lit(n), self.second.lit(n))

    def neg(self, e: tuple[R1, R2]) -> tuple[R1, R2]:
        r1, r2 = e
        return (self.first.neg(r1), self.second.neg(r2))

    def add(self, e1: tuple[R1, R2], e2: tuple[R1, R2]) -> tuple[R1, R2]:
        a1, a2 = e1
        b1, b2 = e2
        return (self.first.add(a1, b1), self.second.add(a2, b2))


class MulDuplicate(Duplicate[R1, R2]):
    """Pair two extended interpretations."""

    def __init__(self, first: MulSym[R1], second: MulSym[R2]):
        missing = [
            interpretation_name(i) for i in (first, second) if not supports_mul(i)
        ]
        if missing:
            raise TypeError(
                f"MulDuplicate requires both components to support mul; "
                f"missing on: {', '.join(missing)}"
            )
        super().__init__(first, second)

    def mul(self, e1: tuple[R1, R2], e2: tuple[R1, R2]) -> tuple[R1, R2]:
        a1, a2 = e1
        b1, b2 = e2
        return (self.first.mul(a1, b1), self.second.mul(a2, b2))


def duplicate(first: ExpSym[R1], second: ExpSym[R2]) -> Duplicate[R1, R2]:
    """Product at the highest tier both components support."""
    if supports_mul(first) and supports_mul(second):
        return MulDuplicate(first, second)
    return Duplicate(first, second)


def duplicate_all(*interps: ExpSym[Any]) -> ExpSym[Any]:
    """Right-nested product of one or more interpretations.

    duplicate_all(a, b, c) == duplicate(a, duplicate(b, c)); a single
    interpretation is returned as-is.
    """
    if not interps:
        raise ValueError("duplicate_all needs at least one interpretation")
    combined = interps[-1]
    for interp in reversed(interps[:-1]):
        combined = duplicate(interp, combined)
    return combined


def flatten(result: Any, count: int) -> tuple:
    """Unnest a right-nested product result into a flat `count`-tuple."""
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")
    flat = []
    for _ in range(count - 1):
        head, result = result
        flat.append(head)
    flat.append(result)
    return tuple(flat)
