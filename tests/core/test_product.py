"""Product Interpretation — two (or more) interpretations in lockstep.

Tests cover:
    - Duplicate(A, B) result equals (A result, B result) for every program
    - duplicate() picks MulDuplicate only when both components support mul
    - MulDuplicate refuses a component without mul
    - Products nest: duplicate_all / flatten give N-way results
    - Overflow in one component propagates out of the product
"""

import pytest

from tagless.core.algebra import MulSym, supports_mul
from tagless.core.errors import ArithmeticOverflowError
from tagless.core.expression import reflect
from tagless.core.interpreters import IntEval, PrettyPrint, TreeBuild
from tagless.core.interpreters_mul import IntMulEval, PrettyMulPrint, TreeMulBuild
from tagless.core.product import (
    Duplicate, MulDuplicate, duplicate, duplicate_all, flatten,
)
from tagless.core.programs import tf1, tfq


# ─── Faithfulness ────────────────────────────────────────────────

def test_tf1_under_product():
    assert tf1(Duplicate(IntEval(), PrettyPrint())) == (5, "(8 + (- (1 + 2)))")


def test_product_matches_components(base_expression):
    a, b = IntEval(), PrettyPrint()
    assert reflect(base_expression, Duplicate(a, b)) == (
        reflect(base_expression, a), reflect(base_expression, b),
    )


def test_mul_product_matches_components(mul_expression):
    a, b = IntMulEval(), TreeMulBuild()
    assert reflect(mul_expression, MulDuplicate(a, b)) == (
        reflect(mul_expression, a), reflect(mul_expression, b),
    )


def test_tfq_under_mul_product():
    assert tfq(MulDuplicate(IntMulEval(), PrettyMulPrint())) == (
        224, "((42 + (- 10)) * 7)",
    )


# ─── Tier selection ─────────────────────────────────────────────

def test_duplicate_of_extended_is_extended():
    product = duplicate(IntMulEval(), PrettyMulPrint())
    assert isinstance(product, MulDuplicate)
    assert isinstance(product, MulSym)


def test_duplicate_with_one_base_side_is_base():
    product = duplicate(IntMulEval(), PrettyPrint())
    assert type(product) is Duplicate
    assert not supports_mul(product)


def test_mul_duplicate_rejects_base_component():
    with pytest.raises(TypeError, match="PrettyPrint"):
        MulDuplicate(IntMulEval(), PrettyPrint())


def test_describe_names_components():
    product = Duplicate(IntEval(bits=8), PrettyPrint())
    assert product.describe() == "Duplicate(IntEval[8], PrettyPrint)"


# ─── Nesting ────────────────────────────────────────────────────

def test_products_nest():
    inner = Duplicate(PrettyPrint(), TreeBuild())
    outer = Duplicate(IntEval(), inner)
    value, (text, tree) = tf1(outer)
    assert value == 5
    assert text == "(8 + (- (1 + 2)))"
    assert tree == tf1(TreeBuild())


def test_duplicate_all_three_way_flattens():
    product = duplicate_all(IntMulEval(), PrettyMulPrint(), TreeMulBuild())
    assert isinstance(product, MulDuplicate)
    value, text, tree = flatten(tfq(product), 3)
    assert value == 224
    assert text == "((42 + (- 10)) * 7)"
    assert tree == tfq(TreeMulBuild())


def test_duplicate_all_single_is_identity():
    ev = IntEval()
    assert duplicate_all(ev) is ev
    assert flatten(tf1(ev), 1) == (5,)


def test_duplicate_all_requires_an_interpretation():
    with pytest.raises(ValueError):
        duplicate_all()


def test_duplicate_all_mixed_tiers_drops_to_base():
    product = duplicate_all(IntMulEval(), PrettyMulPrint(), TreeBuild())
    assert not supports_mul(product)
    assert flatten(tf1(product), 3)[0] == 5


# ─── Failure propagation ────────────────────────────────────────

def test_overflow_in_one_component_propagates():
    product = Duplicate(IntEval(bits=8), PrettyPrint())
    with pytest.raises(ArithmeticOverflowError):
        product.add(product.lit(100), product.lit(100))
