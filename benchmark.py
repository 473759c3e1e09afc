#!/usr/bin/env python3
"""
String Throughput Benchmark

Measures throughput of case-insensitive equality and whitespace-trim
variants while ramping concurrency from 1 up to a ceiling. Each level runs
one timed trial on a shared thread pool and prints one summary line.

Usage:
    python3 benchmark.py                          # Method 1, concurrency 1, 5s
    python3 benchmark.py -c 4 -m 5                # Trim variant 5, levels 1..4
    python3 benchmark.py -m 3 -t 1000 -e 500      # Short trials, smaller loops
    python3 benchmark.py -c 8 -o results.json     # Save JSON results
    python3 benchmark.py --list                   # Show method codes
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import platform
import sys
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path
from typing import NoReturn

from benchmarks.driver import TrialResult, run_concurrency_ramp
from benchmarks.statistics import compute_statistics
from candidates import CANDIDATES, get_candidate
from report import generate_markdown_report
from visualization import generate_throughput_chart


logger = logging.getLogger(__name__)

DEFAULT_DATA = "  \tThis is some string  \t"


@dataclass(frozen=True)
class BenchmarkConfig:
    """Run parameters. Immutable after parsing."""
    concurrency: int = 1
    num_loops: int = 9999999
    effort: int = 1000
    time_ms: int = 5000
    data: str = DEFAULT_DATA
    method: int = 1
    debug: bool = False
    warmup_ms: int = 1000
    output: str | None = None
    report: str | None = None
    chart: str | None = None


@dataclass
class EnvironmentSpec:
    """Host details recorded alongside results."""
    os: str
    os_version: str
    cpu: str
    cpu_cores: int
    python_version: str
    python_implementation: str
    timestamp: str

    @classmethod
    def capture(cls) -> "EnvironmentSpec":
        """Capture current environment specifications."""
        return cls(
            os=platform.system(),
            os_version=platform.release(),
            cpu=platform.processor() or platform.machine() or "unknown",
            cpu_cores=os.cpu_count() or 0,
            python_version=platform.python_version(),
            python_implementation=platform.python_implementation(),
            timestamp=datetime.now().isoformat(),
        )


@dataclass
class RampReport:
    """Complete results of one benchmark run."""
    version: str = "1.0.0"
    generated_at: str = ""
    environment: EnvironmentSpec | None = None
    config: BenchmarkConfig = field(default_factory=BenchmarkConfig)
    candidate: dict = field(default_factory=dict)
    warmup: TrialResult | None = None
    trials: list[TrialResult] = field(default_factory=list)
    statistics: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "generated_at": self.generated_at,
            "environment": asdict(self.environment) if self.environment else None,
            "config": asdict(self.config),
            "candidate": self.candidate,
            "warmup": _trial_dict(self.warmup) if self.warmup else None,
            "trials": [_trial_dict(t) for t in self.trials],
            "statistics": self.statistics,
        }


def _trial_dict(trial: TrialResult) -> dict:
    return {
        "concurrency": trial.concurrency,
        "completed_loops": trial.completed_loops,
        "completed_ops": trial.completed_ops,
        "elapsed_s": round(trial.elapsed_s, 4),
        "ops_per_sec": round(trial.ops_per_second, 2),
        "failed_units": trial.failed_units,
    }


# Verbose format only when debugging
LOG_FORMATS = {
    False: "%(message)s",
    True: "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
}


def setup_logging(debug: bool = False) -> None:
    """Configure logging to stderr; stdout carries only results."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMATS[debug],
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


class BenchmarkArgumentParser(argparse.ArgumentParser):
    """Parser whose usage and errors exit with status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


class _UsageAction(argparse.Action):
    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None):
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        parser.print_help()
        parser.exit(1)


class _ListAction(argparse.Action):
    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None):
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        for code, candidate in CANDIDATES.items():
            print(f"{code:>5}  {candidate.name:<22} {candidate.description}")
        parser.exit(0)


def _method_help() -> str:
    lines = ["method codes:"]
    for code, candidate in CANDIDATES.items():
        lines.append(f"  {code:>5} = {candidate.description}")
    return "\n".join(lines)


def build_parser() -> BenchmarkArgumentParser:
    defaults = BenchmarkConfig()
    parser = BenchmarkArgumentParser(
        description="String operation throughput benchmark",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
        epilog=_method_help(),
    )
    parser.add_argument(
        "-h", "-?", "--help",
        action=_UsageAction,
        help="Show this help and exit",
    )
    parser.add_argument(
        "-c", "--concurrency",
        type=int,
        default=defaults.concurrency,
        help=f"Maximum concurrency to ramp up to (default: {defaults.concurrency})",
    )
    parser.add_argument(
        "-n", "--num_loops",
        type=int,
        default=defaults.num_loops,
        help=f"Loops per slot before it stops (default: {defaults.num_loops})",
    )
    parser.add_argument(
        "-e", "--effort",
        type=int,
        default=defaults.effort,
        help=f"Operations per loop (default: {defaults.effort})",
    )
    parser.add_argument(
        "-t", "--time",
        dest="time_ms",
        type=int,
        default=defaults.time_ms,
        help=f"Trial duration in ms (default: {defaults.time_ms})",
    )
    parser.add_argument(
        "-s", "--string",
        dest="data",
        default=defaults.data,
        help=f"String to operate on (default: {defaults.data!r})",
    )
    parser.add_argument(
        "-m", "--method",
        type=int,
        default=defaults.method,
        help=f"Candidate method code, see below (default: {defaults.method})",
    )
    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Print debugging output",
    )
    parser.add_argument(
        "-w", "--warmup",
        dest="warmup_ms",
        type=int,
        default=defaults.warmup_ms,
        help=f"Warmup duration in ms (default: {defaults.warmup_ms})",
    )
    parser.add_argument(
        "-o", "--output",
        help="Write JSON results to this path",
    )
    parser.add_argument(
        "--report",
        help="Write a markdown report to this path",
    )
    parser.add_argument(
        "--chart",
        help="Write a throughput chart (PNG) to this path",
    )
    parser.add_argument(
        "-l", "--list",
        action=_ListAction,
        help="List candidate methods and exit",
    )
    return parser


# Options whose value is taken verbatim, even when it starts with "-"
VERBATIM_OPTIONS = ("-s", "--string")


def _attach_verbatim_values(argv: list[str]) -> list[str]:
    """Rewrite `-s VALUE` as `--string=VALUE` so argparse never reads VALUE as a flag."""
    result = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg in VERBATIM_OPTIONS and i + 1 < len(argv):
            result.append(f"--string={argv[i + 1]}")
            i += 2
            continue
        result.append(arg)
        i += 1
    return result


def parse_args(argv: list[str] | None = None) -> BenchmarkConfig:
    """Parse and validate command line options. Exits with status 1 on error."""
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(_attach_verbatim_values(argv))

    if args.method not in CANDIDATES:
        parser.error(f"unknown method {args.method}")
    for name in ("concurrency", "num_loops", "effort"):
        if getattr(args, name) < 1:
            parser.error(f"invalid value for --{name}: must be at least 1")
    if args.time_ms < 0 or args.warmup_ms < 0:
        parser.error("durations must not be negative")

    return BenchmarkConfig(**vars(args))


def run(config: BenchmarkConfig) -> RampReport:
    """Run the warmup and the concurrency ramp for the configured method."""
    candidate = get_candidate(config.method)
    report = RampReport(
        generated_at=datetime.now().isoformat(),
        environment=EnvironmentSpec.capture(),
        config=config,
        candidate={
            "code": candidate.code,
            "name": candidate.name,
            "kind": candidate.kind,
            "description": candidate.description,
        },
    )

    logger.debug("Concurrency: %d", config.concurrency)
    logger.debug("Effort: %d", config.effort)
    logger.debug("Method: %d (%s)", candidate.code, candidate.description)

    report.warmup, report.trials = run_concurrency_ramp(candidate, config)
    report.statistics = compute_statistics(report.trials)
    return report


def write_outputs(report: RampReport, config: BenchmarkConfig) -> None:
    """Write the optional JSON, markdown and chart outputs."""
    if config.output:
        output_path = Path(config.output)
        with open(output_path, "w") as f:
            json.dump(report.to_dict(), f, indent=2, default=str)
        print(f"Saved: {output_path}", file=sys.stderr)

    if config.report:
        report_path = Path(config.report)
        report_path.write_text(generate_markdown_report(report))
        print(f"Generated: {report_path}", file=sys.stderr)

    if config.chart:
        chart_path = generate_throughput_chart(report, Path(config.chart))
        if chart_path:
            print(f"Generated: {chart_path}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    config = parse_args(argv)
    setup_logging(config.debug)

    report = run(config)
    write_outputs(report, config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
