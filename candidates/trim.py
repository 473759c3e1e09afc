"""Whitespace trim variants.

Each function removes leading and trailing ASCII space and tab characters and
must agree with ``base.reference_trim`` on every input.
"""

from __future__ import annotations

from itertools import dropwhile

from .base import TRIM_CHARS, reference_trim


def _is_blank(char: str) -> bool:
    return char == " " or char == "\t"


def trim_drop_reverse(s: str) -> str:
    """Drop leading blanks, reverse, drop again, reverse back."""
    head_trimmed = dropwhile(_is_blank, s)
    tail_trimmed = dropwhile(_is_blank, reversed(list(head_trimmed)))
    return "".join(reversed(list(tail_trimmed)))


def trim_lstrip_scan(s: str) -> str:
    """Strip the front, then walk back from the end to the last kept index."""
    trimmed = s.lstrip(TRIM_CHARS)
    if not trimmed:
        return ""

    end = len(trimmed)
    while end > 0 and _is_blank(trimmed[end - 1]):
        end -= 1
    return trimmed[:end]


def trim_index_scan(s: str) -> str:
    """Find the first and last kept indices by scanning from each end."""
    start = 0
    end = len(s)
    while start < end and _is_blank(s[start]):
        start += 1
    while end > start and _is_blank(s[end - 1]):
        end -= 1
    return s[start:end]


def trim_slice_loop(s: str) -> str:
    """Repeatedly slice one character off either end."""
    while s and _is_blank(s[0]):
        s = s[1:]
    while s and _is_blank(s[-1]):
        s = s[:-1]
    return s


def trim_list_pop(s: str) -> str:
    """Pop characters from the ends of a character list."""
    chars = list(s)
    while chars and _is_blank(chars[-1]):
        chars.pop()
    chars.reverse()
    while chars and _is_blank(chars[-1]):
        chars.pop()
    chars.reverse()
    return "".join(chars)


__all__ = [
    "reference_trim",
    "trim_drop_reverse",
    "trim_lstrip_scan",
    "trim_index_scan",
    "trim_slice_loop",
    "trim_list_pop",
]
