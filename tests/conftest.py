"""Root conftest — shared test configuration and a reference expression corpus."""

import os

import pytest

from tagless.config import get_settings
from tagless.core.expression import Add, Lit, Mul, Neg


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Tests never see a developer's TAGLESS_* environment or cached settings."""
    for key in list(os.environ):
        if key.startswith("TAGLESS_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


BASE_CORPUS = [
    Lit(0),
    Lit(-7),
    Neg(Lit(3)),
    Neg(Neg(Lit(3))),
    Add(Lit(8), Neg(Add(Lit(1), Lit(2)))),
    Add(Add(Lit(1), Lit(2)), Add(Lit(3), Neg(Lit(4)))),
    Add(Lit(-5), Lit(5)),
]

MUL_CORPUS = BASE_CORPUS + [
    Mul(Add(Lit(42), Neg(Lit(10))), Lit(7)),
    Mul(Lit(7), Add(Lit(8), Neg(Add(Lit(1), Lit(2))))),
    Add(Lit(8), Neg(Mul(Lit(1), Lit(2)))),
    Mul(Neg(Lit(3)), Mul(Lit(-2), Lit(5))),
]


@pytest.fixture(params=BASE_CORPUS, ids=lambda e: repr(e))
def base_expression(request):
    return request.param


@pytest.fixture(params=MUL_CORPUS, ids=lambda e: repr(e))
def mul_expression(request):
    return request.param
