"""Candidate string operations for benchmarking."""

from .base import Candidate, CandidateResult, EqualityCandidate, TrimCandidate, reference_trim
from .equality import equals_casefold, equals_lowercased
from .trim import (
    trim_drop_reverse,
    trim_index_scan,
    trim_list_pop,
    trim_lstrip_scan,
    trim_slice_loop,
)


# Method code -> candidate. Codes follow the --method flag.
CANDIDATES: dict[int, Candidate] = {
    c.code: c
    for c in [
        EqualityCandidate(1, "equal_casefold", "equality: casefold both sides", equals_casefold, expected=True),
        EqualityCandidate(2, "equal_lowercased", "equality: lowercase self", equals_lowercased, expected=True),
        EqualityCandidate(101, "not_equal_casefold", "non-equality: casefold both sides", equals_casefold, expected=False),
        EqualityCandidate(102, "not_equal_lowercased", "non-equality: lowercase self", equals_lowercased, expected=False),
        TrimCandidate(3, "trim_reference", "trimming: str.strip(' \\t')", reference_trim),
        TrimCandidate(4, "trim_drop_reverse", "trimming: dropwhile/reverse/dropwhile/reverse", trim_drop_reverse),
        TrimCandidate(5, "trim_lstrip_scan", "trimming: lstrip, scan back for last index", trim_lstrip_scan),
        TrimCandidate(6, "trim_index_scan", "trimming: scan for first + last indices", trim_index_scan),
        TrimCandidate(7, "trim_slice_loop", "trimming: slice off first / last while blank", trim_slice_loop),
        TrimCandidate(8, "trim_list_pop", "trimming: pop from a character list", trim_list_pop),
    ]
}


def get_candidate(code: int) -> Candidate:
    """Look up a candidate by method code. Raises KeyError if unknown."""
    return CANDIDATES[code]


__all__ = [
    "Candidate",
    "CandidateResult",
    "EqualityCandidate",
    "TrimCandidate",
    "CANDIDATES",
    "get_candidate",
    "reference_trim",
]
