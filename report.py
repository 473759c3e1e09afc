"""Markdown report generation."""

from __future__ import annotations

import shlex
from typing import Any

from benchmarks.statistics import format_ops


def _fmt_seconds(s: float) -> str:
    """Format seconds for display."""
    if s < 1:
        return f"{s * 1000:.0f}ms"
    return f"{s:.2f}s"


def _speedup(rate: float, base: float) -> str:
    """Calculate and format speedup."""
    if rate <= 0 or base <= 0:
        return "-"
    return f"{rate / base:.2f}x"


def generate_markdown_report(report: Any) -> str:
    """Generate complete markdown report."""
    lines = []
    candidate = report.candidate

    # Header
    lines.extend([
        "# String Throughput Benchmark Results",
        "",
        f"**Generated:** {report.generated_at}",
        "",
        f"**Method:** {candidate.get('code')} - {candidate.get('description')}",
        "",
    ])

    # Environment
    if report.environment:
        env = report.environment
        lines.extend([
            "## Environment",
            "",
            "| Component | Version |",
            "|-----------|---------|",
            f"| OS | {env.os} {env.os_version} |",
            f"| CPU | {env.cpu} ({env.cpu_cores} cores) |",
            f"| Python | {env.python_implementation} {env.python_version} |",
            "",
        ])

    # Methodology
    config = report.config
    lines.extend([
        "## Methodology",
        "",
        f"- **Concurrency:** 1 to {config.concurrency}",
        f"- **Effort:** {config.effort} operations per loop",
        f"- **Trial duration:** {config.time_ms}ms",
        f"- **Warmup:** one trial at concurrency 1 for {config.warmup_ms}ms",
        f"- **Input:** `{config.data!r}`",
        "",
    ])

    # Results
    if report.trials:
        base = report.trials[0].ops_per_second
        lines.extend([
            "## Results",
            "",
            "| Concurrency | Loops | Ops | Elapsed | Ops/sec | Speedup | Failed units |",
            "|-------------|-------|-----|---------|---------|---------|--------------|",
        ])

        for trial in report.trials:
            ops = trial.completed_ops
            lines.append(
                f"| {trial.concurrency} | {trial.completed_loops} | "
                f"{format_ops(ops, ops)} | {_fmt_seconds(trial.elapsed_s)} | "
                f"{format_ops(trial.ops_per_second, ops)} | "
                f"{_speedup(trial.ops_per_second, base)} | {trial.failed_units} |"
            )

        lines.append("")

    # Summary
    stats = report.statistics
    if stats and stats.get("peak"):
        peak = stats["peak"]
        lines.extend([
            "## Summary",
            "",
            f"- **Peak:** {peak['ops_per_sec']:,.0f} ops/sec at concurrency {peak['concurrency']}",
            f"- **Baseline:** {stats['baseline_ops_per_sec']:,.0f} ops/sec at concurrency 1",
            f"- **Total loops:** {stats['total_loops']}",
        ])
        if stats["total_failed_units"]:
            lines.append(f"- **Failed units:** {stats['total_failed_units']} (candidate output did not verify)")
        lines.append("")

    # Reproduction
    lines.extend([
        "## Reproduce These Results",
        "",
        "```bash",
        f"python3 benchmark.py -c {config.concurrency} -m {config.method} "
        f"-e {config.effort} -t {config.time_ms} -n {config.num_loops} "
        f"-w {config.warmup_ms} --string={shlex.quote(config.data)}",
        "```",
        "",
    ])

    return "\n".join(lines)
