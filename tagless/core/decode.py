"""Tree Decoder — replay a Generic Tree as calls against any interpretation.

Invariants:
    - Decoding is structural recursion over the tree, children left to right
    - Failure is all-or-nothing: the first malformed subtree raises DecodeError
      and no partial result escapes
    - Every rejected shape maps to exactly one DecodeError code:
      unknown tag, wrong arity, non-integer Lit text, a Leaf where an
      expression is expected, nesting deeper than max_depth, a non-str tag
    - The extended decoder is the base decoder's rule table plus a Mul rule;
      no base rule is re-implemented
    - ArithmeticOverflowError from the target interpretation propagates untouched

Design Decisions:
    - Explicit tag -> DecodeRule table: every recognized tag visible in one place
    - The interpretation is an argument to decode(), not captured at construction,
      so one decoder instance serves every result type
    - Operator children are decoded by the decoder loop itself, one Python
      frame per tree level, so max_depth maps directly onto stack use
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Generic, Mapping, TypeVar

from tagless.core.algebra import ExpSym, interpretation_name, supports_mul
from tagless.core.domain_types import TAG_ARITY, Tag
from tagless.core.errors import DecodeError
from tagless.core.tree import Leaf, Node, Tree

R = TypeVar("R")

DEFAULT_MAX_DEPTH: int = 500

_INTEGER_TEXT = re.compile(r"-?[0-9]+")


@dataclass(frozen=True)
class DecodeRule:
    """How one tag becomes an interpretation call.

    Operator rules (raw=False) receive the interpretation and the decoded
    children. Raw rules receive the interpretation, the undecoded children
    and the node's path.
    """
    arity: int
    build: Callable[..., Any]
    raw: bool = False


def _build_lit(interp: ExpSym[R], children: tuple[Tree, ...], path: tuple[int, ...]) -> R:
    (leaf,) = children
    text = leaf.text if isinstance(leaf, Leaf) else None
    if not isinstance(text, str) or not _INTEGER_TEXT.fullmatch(text):
        shown = text if text is not None else f"<{type(leaf).__name__}>"
        raise DecodeError(
            f"Lit expects an integer leaf, got {shown!r}",
            DecodeError.INVALID_LITERAL, Tag.LIT.value, path,
        )
    try:
        n = int(text)
    except ValueError as exc:
        # int() refuses decimal strings past sys.get_int_max_str_digits()
        raise DecodeError(
            f"Lit text has too many digits ({len(text)})",
            DecodeError.INVALID_LITERAL, Tag.LIT.value, path,
        ) from exc
    return interp.lit(n)


def _build_mul(interp: Any, e1: Any, e2: Any) -> Any:
    if not supports_mul(interp):
        raise TypeError(f"{interpretation_name(interp)} does not support mul")
    return interp.mul(e1, e2)


BASE_RULES: dict[str, DecodeRule] = {
    Tag.LIT.value: DecodeRule(TAG_ARITY[Tag.LIT], _build_lit, raw=True),
    Tag.NEG.value: DecodeRule(TAG_ARITY[Tag.NEG], lambda v, e: v.neg(e)),
    Tag.ADD.value: DecodeRule(TAG_ARITY[Tag.ADD], lambda v, e1, e2: v.add(e1, e2)),
}

MUL_RULES: dict[str, DecodeRule] = {
    Tag.MUL.value: DecodeRule(TAG_ARITY[Tag.MUL], _build_mul),
}


class TreeDecoder:
    """Decode trees using a fixed tag -> rule table."""

    def __init__(
        self,
        rules: Mapping[str, DecodeRule] | None = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        if max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {max_depth}")
        self._rules = dict(BASE_RULES if rules is None else rules)
        self.max_depth = max_depth

    @property
    def tags(self) -> frozenset[str]:
        return frozenset(self._rules)

    def extend(self, rules: Mapping[str, DecodeRule]) -> "TreeDecoder":
        """New decoder recognizing this decoder's tags plus `rules`."""
        return TreeDecoder({**self._rules, **rules}, self.max_depth)

    def decode(self, tree: Tree, interp: ExpSym[R]) -> R:
        """Replay tree against interp. Raises DecodeError on malformed input."""
        return self._decode(tree, interp, (), 1)

    def _decode(self, tree: Tree, interp: Any, path: tuple[int, ...], depth: int) -> Any:
        if depth > self.max_depth:
            raise DecodeError(
                f"Tree nesting exceeds max depth {self.max_depth}",
                DecodeError.DEPTH_EXCEEDED, None, path,
            )
        if isinstance(tree, Leaf):
            raise DecodeError(
                f"Expected an expression node, got leaf {tree.text!r}",
                DecodeError.UNEXPECTED_LEAF, None, path,
            )
        if not isinstance(tree, Node):
            raise DecodeError(
                f"Expected a tree, got {type(tree).__name__}",
                DecodeError.MALFORMED_TREE, None, path,
            )
        if not isinstance(tree.tag, str):
            raise DecodeError(
                f"Node tag must be a string, got {type(tree.tag).__name__}",
                DecodeError.MALFORMED_TREE, None, path,
            )

        rule = self._rules.get(tree.tag)
        if rule is None:
            raise DecodeError(
                f"Unrecognized tag {tree.tag!r}; expected one of "
                f"{', '.join(sorted(self._rules))}",
                DecodeError.UNKNOWN_TAG, tree.tag, path,
            )
        if len(tree.children) != rule.arity:
            raise DecodeError(
                f"{tree.tag} takes {rule.arity} child(ren), got {len(tree.children)}",
                DecodeError.WRONG_ARITY, tree.tag, path,
            )

        if rule.raw:
            return rule.build(interp, tree.children, path)
        values = []
        for index, child in enumerate(tree.children):
            values.append(self._decode(child, interp, path + (index,), depth + 1))
        return rule.build(interp, *values)


def base_decoder(max_depth: int = DEFAULT_MAX_DEPTH) -> TreeDecoder:
    """Decoder for Lit, Neg, Add."""
    return TreeDecoder(BASE_RULES, max_depth)


def mul_decoder(max_depth: int = DEFAULT_MAX_DEPTH) -> TreeDecoder:
    """Decoder for the base tags plus Mul."""
    return base_decoder(max_depth).extend(MUL_RULES)


@dataclass(frozen=True)
class DecodeOutcome(Generic[R]):
    """Non-raising decode result: exactly one of value / error is meaningful."""
    ok: bool
    value: R | None = None
    error: DecodeError | None = None


def try_decode(decoder: TreeDecoder, tree: Tree, interp: ExpSym[R]) -> DecodeOutcome[R]:
    """decoder.decode() with DecodeError captured in the outcome."""
    try:
        return DecodeOutcome(ok=True, value=decoder.decode(tree, interp))
    except DecodeError as exc:
        return DecodeOutcome(ok=False, error=exc)
