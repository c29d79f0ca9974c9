"""Pipeline — public entry points: run, build, serialize, decode.

Invariants:
    - Reads Settings for int width and decode depth; core never does
    - Decode failures are logged at WARNING with error_code/tag/path and re-raised
      (or returned in a DecodeOutcome by try_decode_tree); never logged as ERROR
    - decode tier defaults to the interpretation's own tier: MulSym targets get
      the Mul-aware decoder, plain ExpSym targets get the base decoder

Design Decisions:
    - Optional `settings` parameter on every entry point: tests pass explicit
      Settings instead of mutating the environment
"""

import logging
from typing import Any, Callable, TypeVar

from tagless.config import Settings, get_settings
from tagless.core.algebra import ExpSym, interpretation_name, supports_mul
from tagless.core.decode import (
    DecodeOutcome, TreeDecoder, base_decoder, mul_decoder, try_decode,
)
from tagless.core.errors import DecodeError
from tagless.core.interpreters import TreeBuild
from tagless.core.interpreters_mul import IntMulEval, PrettyMulPrint, TreeMulBuild
from tagless.core.tree import Tree
from tagless.schemas.tree import dump_tree_json, load_tree_json

logger = logging.getLogger(__name__)

R = TypeVar("R")


# ─── Interpretations ────────────────────────────────────────────

def int_evaluator(settings: Settings | None = None) -> IntMulEval:
    """Checked integer evaluator at the configured width."""
    settings = settings or get_settings()
    return IntMulEval(bits=settings.int_bits)


def pretty_printer() -> PrettyMulPrint:
    return PrettyMulPrint()


def decoder_for(extended: bool, settings: Settings | None = None) -> TreeDecoder:
    settings = settings or get_settings()
    if extended:
        return mul_decoder(settings.max_decode_depth)
    return base_decoder(settings.max_decode_depth)


# ─── Run & Build ────────────────────────────────────────────────

def run_program(program: Callable[[Any], R], interp: ExpSym[Any]) -> R:
    """Instantiate a generic program against one interpretation."""
    result = program(interp)
    logger.debug(
        "Ran %s", getattr(program, "__name__", "program"),
        extra={"interpretation": interpretation_name(interp)},
    )
    return result


def build_tree(program: Callable[[Any], Tree], extended: bool = True) -> Tree:
    """Serialize a program to a Generic Tree via the tree-building interpretation."""
    builder = TreeMulBuild() if extended else TreeBuild()
    return run_program(program, builder)


def serialize_program(
    program: Callable[[Any], Tree], extended: bool = True, indent: int | None = None,
) -> str:
    """Program -> tree -> JSON text."""
    return dump_tree_json(build_tree(program, extended), indent=indent)


# ─── Decode ─────────────────────────────────────────────────────

def _resolve_decoder(
    interp: object, extended: bool | None, settings: Settings | None,
) -> TreeDecoder:
    if extended is None:
        extended = supports_mul(interp)
    return decoder_for(extended, settings)


def _log_decode_failure(exc: DecodeError, interp: object) -> None:
    logger.warning(
        "Tree decode failed: %s", exc,
        extra={
            "error_code": exc.code,
            "tag": exc.tag,
            "path": exc.path,
            "interpretation": interpretation_name(interp),
        },
    )


def decode_tree(
    tree: Tree,
    interp: ExpSym[R],
    extended: bool | None = None,
    settings: Settings | None = None,
) -> R:
    """Replay a tree against interp. Raises DecodeError on malformed trees."""
    decoder = _resolve_decoder(interp, extended, settings)
    try:
        result = decoder.decode(tree, interp)
    except DecodeError as exc:
        _log_decode_failure(exc, interp)
        raise
    logger.debug(
        "Decoded tree", extra={"interpretation": interpretation_name(interp)},
    )
    return result


def try_decode_tree(
    tree: Tree,
    interp: ExpSym[R],
    extended: bool | None = None,
    settings: Settings | None = None,
) -> DecodeOutcome[R]:
    """Like decode_tree, but failures come back in the outcome instead of raising."""
    outcome = try_decode(_resolve_decoder(interp, extended, settings), tree, interp)
    if not outcome.ok:
        _log_decode_failure(outcome.error, interp)
    return outcome


def replay_json(
    data: str | bytes,
    interp: ExpSym[R],
    extended: bool | None = None,
    settings: Settings | None = None,
) -> R:
    """JSON text -> tree -> result under interp."""
    try:
        tree = load_tree_json(data)
    except DecodeError as exc:
        _log_decode_failure(exc, interp)
        raise
    return decode_tree(tree, interp, extended, settings)
