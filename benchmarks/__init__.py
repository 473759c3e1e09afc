"""Benchmark modules."""

from .driver import (
    LoopCounter,
    RunContext,
    TrialResult,
    run_concurrency_ramp,
    run_trial,
    run_work_unit,
)
from .statistics import compute_statistics, format_trial_line, scale_ops

__all__ = [
    "LoopCounter",
    "RunContext",
    "TrialResult",
    "run_concurrency_ramp",
    "run_trial",
    "run_work_unit",
    "compute_statistics",
    "format_trial_line",
    "scale_ops",
]
