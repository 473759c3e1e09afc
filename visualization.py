"""Chart generation."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

# Try to import matplotlib, but don't fail if not available
try:
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    HAS_MATPLOTLIB = True
except ImportError:
    HAS_MATPLOTLIB = False


COLORS = {
    "equality": "#00D26A",  # Green
    "trim": "#FFA500",      # Orange
}


def generate_throughput_chart(report: Any, output_path: Path) -> str | None:
    """Generate throughput vs concurrency chart with ideal linear scaling."""
    if not HAS_MATPLOTLIB:
        print("    [SKIP] matplotlib not installed", file=sys.stderr)
        return None

    if not report.trials:
        return None

    levels = [t.concurrency for t in report.trials]
    rates = [t.ops_per_second for t in report.trials]
    base = rates[0]
    color = COLORS.get(report.candidate.get("kind"), "#888888")

    fig, ax = plt.subplots(figsize=(10, 6))

    ax.plot(levels, rates, marker="o", color=color, label=report.candidate.get("name", "candidate"))
    ax.plot(
        levels,
        [base * level for level in levels],
        color="gray",
        linestyle="--",
        alpha=0.5,
        label="Linear scaling",
    )

    for level, rate in zip(levels, rates):
        ax.annotate(
            f"{rate:,.0f}",
            xy=(level, rate),
            xytext=(0, 6),
            textcoords="offset points",
            ha="center",
            fontsize=8,
        )

    ax.set_xlabel("Concurrency")
    ax.set_ylabel("Ops/sec")
    ax.set_title(f"Throughput: {report.candidate.get('description', '')}")
    ax.set_xticks(levels)
    ax.legend(loc="upper left")
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(output_path, dpi=150)
    plt.close(fig)

    return str(output_path)
