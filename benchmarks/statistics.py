"""Throughput formatting and aggregation over a concurrency ramp."""

from __future__ import annotations

import statistics
from typing import Any


# Ops thresholds above which the display unit switches
THOUSANDS_THRESHOLD = 100_000
MILLIONS_THRESHOLD = 100_000_000


def scale_ops(completed_ops: int) -> tuple[float, str, str]:
    """
    Pick a display unit for an operation count.

    Returns (divisor, number format, suffix). The same divisor is applied to
    the ops count and to ops/sec so both read in one unit.
    """
    if completed_ops > MILLIONS_THRESHOLD:
        return 1_000_000, ".2f", "m"
    elif completed_ops > THOUSANDS_THRESHOLD:
        return 1_000, ".2f", "k"
    return 1, ".0f", ""


def format_ops(value: float, completed_ops: int) -> str:
    """Format `value` in the unit chosen for `completed_ops`."""
    divisor, fmt, suffix = scale_ops(completed_ops)
    return f"{value / divisor:{fmt}}{suffix}"


def format_trial_line(trial: Any) -> str:
    """One-line summary of a trial."""
    ops = trial.completed_ops
    return (
        f"Concurrency {trial.concurrency}: completed {trial.completed_loops} loops "
        f"({format_ops(ops, ops)} ops) in {trial.elapsed_s:.2f} seconds, "
        f"{format_ops(trial.ops_per_second, ops)} ops/sec"
    )


def compute_statistics(trials: list[Any]) -> dict:
    """Aggregate per-level throughput into scaling figures."""
    stats = {
        "levels": len(trials),
        "total_loops": sum(t.completed_loops for t in trials),
        "total_failed_units": sum(t.failed_units for t in trials),
        "baseline_ops_per_sec": 0.0,
        "peak": None,
        "mean_ops_per_sec": 0.0,
        "scaling": {},
    }

    if not trials:
        return stats

    baseline = next((t for t in trials if t.concurrency == 1), trials[0])
    base_rate = baseline.ops_per_second
    peak = max(trials, key=lambda t: t.ops_per_second)

    stats["baseline_ops_per_sec"] = round(base_rate, 2)
    stats["peak"] = {
        "concurrency": peak.concurrency,
        "ops_per_sec": round(peak.ops_per_second, 2),
    }
    stats["mean_ops_per_sec"] = round(statistics.mean(t.ops_per_second for t in trials), 2)

    for t in trials:
        speedup = t.ops_per_second / base_rate if base_rate > 0 else 0.0
        stats["scaling"][f"concurrency_{t.concurrency}"] = {
            "ops_per_sec": round(t.ops_per_second, 2),
            "speedup": round(speedup, 3),
            "efficiency": round(speedup / t.concurrency, 3),
        }

    return stats
