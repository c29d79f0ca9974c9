"""Core Layer — algebra, interpretations, programs and the tree decoder.

Invariants:
    - No module in core/ imports from services/, schemas/, infrastructure/ or config
    - All functions are pure and deterministic; configuration arrives as arguments
"""
