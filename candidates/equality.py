"""Case-insensitive equality variants."""

from __future__ import annotations


def equals_casefold(a: str, b: str) -> bool:
    """Full case-insensitive comparison; folds both sides."""
    return a.casefold() == b.casefold()


def equals_lowercased(a: str, b: str) -> bool:
    """Compare the lowercase form of `a` to `b`, which must already be lowercase."""
    if b != b.lower():
        raise ValueError(f"equals_lowercased() should be passed a lowercased string, not {b!r}")
    return a.lower() == b
