"""Base class for candidate string operations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable


# Characters removed by every trim candidate
TRIM_CHARS = " \t"


def reference_trim(s: str) -> str:
    """Trim ASCII space and tab from both ends. Correctness oracle for trims."""
    return s.strip(TRIM_CHARS)


@dataclass
class CandidateResult:
    """Result of one dispatch loop of a candidate."""
    candidate: str
    passed: bool
    invocations: int
    output: Any = None
    error: str | None = None


class Candidate(ABC):
    """Abstract base class for benchmarked string operations."""

    def __init__(self, code: int, name: str, description: str):
        self.code = code
        self.name = name
        self.description = description

    @property
    @abstractmethod
    def kind(self) -> str:
        """Operation family ("equality" or "trim")."""
        pass

    @abstractmethod
    def run(self, data: str, effort: int) -> CandidateResult:
        """Invoke the operation `effort` times on `data` and verify the result."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code}, name={self.name!r})"


class EqualityCandidate(Candidate):
    """Case-insensitive equality check against a derived comparison string.

    With ``expected=True`` the slot string is compared to its lowercase form;
    with ``expected=False`` it is compared to ``"x" + lowercase``.
    """

    def __init__(
        self,
        code: int,
        name: str,
        description: str,
        func: Callable[[str, str], bool],
        expected: bool,
    ):
        super().__init__(code, name, description)
        self.func = func
        self.expected = expected

    @property
    def kind(self) -> str:
        return "equality"

    def comparison_string(self, data: str) -> str:
        lowered = data.lower()
        return lowered if self.expected else "x" + lowered

    def run(self, data: str, effort: int) -> CandidateResult:
        other = self.comparison_string(data)
        func = self.func
        expected = self.expected
        result = expected

        for i in range(effort):
            try:
                result = func(data, other)
            except Exception as e:
                return CandidateResult(
                    candidate=self.name,
                    passed=False,
                    invocations=i,
                    error=f"{type(e).__name__}: {e}",
                )
            if result != expected:
                verb = "failed" if expected else "succeeded"
                return CandidateResult(
                    candidate=self.name,
                    passed=False,
                    invocations=i + 1,
                    output=result,
                    error=f"compare {verb}",
                )

        return CandidateResult(
            candidate=self.name,
            passed=True,
            invocations=effort,
            output=result,
        )


class TrimCandidate(Candidate):
    """Whitespace trim, checked against the reference trim after each loop."""

    def __init__(
        self,
        code: int,
        name: str,
        description: str,
        func: Callable[[str], str],
    ):
        super().__init__(code, name, description)
        self.func = func

    @property
    def kind(self) -> str:
        return "trim"

    def run(self, data: str, effort: int) -> CandidateResult:
        func = self.func
        output = data
        i = 0

        try:
            for i in range(effort):
                output = func(data)
        except Exception as e:
            return CandidateResult(
                candidate=self.name,
                passed=False,
                invocations=i,
                error=f"{type(e).__name__}: {e}",
            )

        if output != reference_trim(data):
            return CandidateResult(
                candidate=self.name,
                passed=False,
                invocations=effort,
                output=output,
                error=f"FAILED trimming: {output!r}",
            )

        return CandidateResult(
            candidate=self.name,
            passed=True,
            invocations=effort,
            output=output,
        )
