"""Shared fixtures for benchmark tests."""

import sys
from pathlib import Path

import pytest

# Top-level modules (benchmark.py, report.py) live at the repository root
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from benchmark import BenchmarkConfig  # noqa: E402


@pytest.fixture
def fast_config():
    """Config with short trials suitable for tests."""
    return BenchmarkConfig(
        concurrency=2,
        effort=50,
        time_ms=100,
        warmup_ms=20,
        method=3,
    )


