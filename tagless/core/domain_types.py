"""Domain Types — tree tags and their arities.

Invariants:
    - Tag values are the exact strings written into Generic Trees ("Lit", "Neg", "Add", "Mul")
    - TAG_ARITY is the single source of truth for how many children a tag takes
    - BASE_TAGS is a strict subset of EXTENDED_TAGS

Design Decisions:
    - str Enum: a Tag compares equal to its wire string, so tree nodes can hold plain str
"""

from enum import Enum


# ─── Enums ───────────────────────────────────────────────────────

class Tag(str, Enum):
    """Node tags understood by the decoders."""
    LIT = "Lit"
    NEG = "Neg"
    ADD = "Add"
    MUL = "Mul"


TAG_ARITY: dict[Tag, int] = {
    Tag.LIT: 1,
    Tag.NEG: 1,
    Tag.ADD: 2,
    Tag.MUL: 2,
}

BASE_TAGS: frozenset[Tag] = frozenset({Tag.LIT, Tag.NEG, Tag.ADD})
EXTENDED_TAGS: frozenset[Tag] = BASE_TAGS | {Tag.MUL}

