"""Tagless-final expression language — one program, many interpretations.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: callers import from the submodule that owns a name
"""
