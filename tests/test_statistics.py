"""Tests for throughput formatting and aggregation."""

import pytest

from benchmarks.driver import TrialResult
from benchmarks.statistics import compute_statistics, format_ops, format_trial_line, scale_ops


class TestScaleOps:
    """Tests for display unit selection."""

    @pytest.mark.parametrize(
        "ops, suffix",
        [
            (0, ""),
            (100_000, ""),
            (100_001, "k"),
            (100_000_000, "k"),
            (100_000_001, "m"),
        ],
    )
    def test_thresholds(self, ops, suffix):
        assert scale_ops(ops)[2] == suffix

    def test_raw_format(self):
        assert format_ops(5000, 5000) == "5000"

    def test_thousands_format(self):
        assert format_ops(250_000, 250_000) == "250.00k"

    def test_millions_format(self):
        assert format_ops(123_450_000, 123_450_000) == "123.45m"

    def test_rate_uses_count_unit(self):
        """Test ops/sec is scaled by the unit chosen for the ops count."""
        assert format_ops(50_000, 250_000) == "50.00k"


class TestFormatTrialLine:
    """Tests for the per-level summary line."""

    def test_thousands_line(self):
        trial = TrialResult(concurrency=3, completed_loops=120, effort=1000, elapsed_s=5.0)
        assert format_trial_line(trial) == (
            "Concurrency 3: completed 120 loops (120.00k ops) in 5.00 seconds, 24.00k ops/sec"
        )

    def test_raw_line(self):
        trial = TrialResult(concurrency=1, completed_loops=4, effort=10, elapsed_s=2.0)
        assert format_trial_line(trial) == (
            "Concurrency 1: completed 4 loops (40 ops) in 2.00 seconds, 20 ops/sec"
        )

    def test_millions_line(self):
        trial = TrialResult(concurrency=2, completed_loops=200_000, effort=1000, elapsed_s=4.0)
        assert format_trial_line(trial) == (
            "Concurrency 2: completed 200000 loops (200.00m ops) in 4.00 seconds, 50.00m ops/sec"
        )


class TestComputeStatistics:
    """Tests for ramp aggregation."""

    def test_empty(self):
        stats = compute_statistics([])
        assert stats["levels"] == 0
        assert stats["peak"] is None
        assert stats["scaling"] == {}

    def test_scaling_figures(self):
        trials = [
            TrialResult(concurrency=1, completed_loops=100, effort=10, elapsed_s=1.0),
            TrialResult(concurrency=2, completed_loops=180, effort=10, elapsed_s=1.0),
            TrialResult(concurrency=3, completed_loops=150, effort=10, elapsed_s=1.0, failed_units=1),
        ]

        stats = compute_statistics(trials)

        assert stats["levels"] == 3
        assert stats["total_loops"] == 430
        assert stats["total_failed_units"] == 1
        assert stats["baseline_ops_per_sec"] == 1000.0
        assert stats["peak"] == {"concurrency": 2, "ops_per_sec": 1800.0}
        assert stats["scaling"]["concurrency_2"]["speedup"] == 1.8
        assert stats["scaling"]["concurrency_2"]["efficiency"] == 0.9
        assert stats["scaling"]["concurrency_3"]["speedup"] == 1.5

    def test_zero_baseline(self):
        """Test a failed baseline does not divide by zero."""
        trials = [
            TrialResult(concurrency=1, completed_loops=0, effort=10, elapsed_s=1.0, failed_units=1),
            TrialResult(concurrency=2, completed_loops=10, effort=10, elapsed_s=1.0),
        ]

        stats = compute_statistics(trials)

        assert stats["scaling"]["concurrency_2"]["speedup"] == 0.0
