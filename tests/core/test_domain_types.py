"""Domain Types — tag values and arity table.

Tests:
    - Tag values are the exact wire strings
    - Every tag has an arity; base tags are a strict subset of extended tags
"""

from tagless.core.domain_types import BASE_TAGS, EXTENDED_TAGS, TAG_ARITY, Tag


def test_tag_wire_values():
    assert [t.value for t in Tag] == ["Lit", "Neg", "Add", "Mul"]


def test_tag_compares_equal_to_wire_string():
    assert Tag.ADD == "Add"


def test_arity_table_covers_every_tag():
    assert set(TAG_ARITY) == set(Tag)
    assert TAG_ARITY[Tag.LIT] == 1
    assert TAG_ARITY[Tag.NEG] == 1
    assert TAG_ARITY[Tag.ADD] == 2
    assert TAG_ARITY[Tag.MUL] == 2


def test_base_tags_strictly_inside_extended():
    assert BASE_TAGS < EXTENDED_TAGS
    assert EXTENDED_TAGS - BASE_TAGS == {Tag.MUL}
