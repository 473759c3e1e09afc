"""Concurrency ramp driver - dispatches work units and measures throughput."""

from __future__ import annotations

import concurrent.futures
import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable

from candidates.base import Candidate

from .statistics import format_trial_line


logger = logging.getLogger(__name__)


class LoopCounter:
    """Completed-loop counter shared by all work units of a trial."""

    def __init__(self):
        self._lock = threading.Lock()
        self._value = 0

    def increment(self) -> None:
        with self._lock:
            self._value += 1

    @property
    def value(self) -> int:
        with self._lock:
            return self._value


@dataclass
class RunContext:
    """Shared state for one trial. Owned by the driver."""
    candidate: Candidate
    effort: int
    num_loops: int
    strings: list[str]
    counter: LoopCounter
    running: threading.Event
    debug: bool = False


@dataclass
class TrialResult:
    """Outcome of one trial at a fixed concurrency level."""
    concurrency: int
    completed_loops: int
    effort: int
    elapsed_s: float
    failed_units: int = 0

    @property
    def completed_ops(self) -> int:
        return self.completed_loops * self.effort

    @property
    def ops_per_second(self) -> float:
        return self.completed_ops / self.elapsed_s if self.elapsed_s > 0 else 0.0


def make_slot_strings(data: str, count: int) -> list[str]:
    """One private copy of `data` per slot."""
    # str is immutable, so slots can never write to each other's input
    return [str(data) for _ in range(count)]


def new_context(candidate: Candidate, config: Any, concurrency: int) -> RunContext:
    """Fresh counter, flag and slot strings for a trial."""
    running = threading.Event()
    running.set()
    return RunContext(
        candidate=candidate,
        effort=config.effort,
        num_loops=config.num_loops,
        strings=make_slot_strings(config.data, concurrency),
        counter=LoopCounter(),
        running=running,
        debug=config.debug,
    )


def run_work_unit(ctx: RunContext, slot: int) -> bool:
    """Run dispatch loops for one slot until stopped.

    Keeps looping while the running flag is set and the loop ceiling has not
    been reached. Returns False if the candidate failed verification.
    """
    data = ctx.strings[slot - 1]
    loops = 1

    while True:
        result = ctx.candidate.run(data, ctx.effort)
        if not result.passed:
            logger.error(
                "Slot %d (%s): %s after %d loops",
                slot, ctx.candidate.name, result.error, loops - 1,
            )
            return False

        if ctx.debug and loops == 1:
            logger.debug("Instance %d done, converted data: %r", slot, result.output)

        ctx.counter.increment()

        if not ctx.running.is_set() or loops >= ctx.num_loops:
            break
        loops += 1

    logger.debug("Slot %d completed %d loops", slot, loops)
    return True


def run_trial(
    executor: concurrent.futures.Executor,
    candidate: Candidate,
    config: Any,
    concurrency: int,
    duration_ms: int,
) -> TrialResult:
    """Run one trial: dispatch, bounded wait, stop, drain, measure."""
    ctx = new_context(candidate, config, concurrency)
    start = time.perf_counter()

    futures = [
        executor.submit(run_work_unit, ctx, slot)
        for slot in range(1, concurrency + 1)
    ]

    try:
        _, pending = concurrent.futures.wait(futures, timeout=duration_ms / 1000)
    finally:
        ctx.running.clear()
    if pending:
        logger.debug("Time limit reached with %d units in flight, draining", len(pending))
    concurrent.futures.wait(futures)

    elapsed = time.perf_counter() - start
    failed = sum(1 for f in futures if not f.result())

    return TrialResult(
        concurrency=concurrency,
        completed_loops=ctx.counter.value,
        effort=config.effort,
        elapsed_s=elapsed,
        failed_units=failed,
    )


def run_concurrency_ramp(
    candidate: Candidate,
    config: Any,
    on_trial: Callable[[TrialResult], None] | None = None,
) -> tuple[TrialResult, list[TrialResult]]:
    """Warm up at concurrency 1, then run one trial per level 1..ceiling.

    Returns (warmup, trials). `on_trial` is called after each ramp trial;
    by default the summary line is printed.
    """
    if on_trial is None:
        on_trial = lambda trial: print(format_trial_line(trial))

    trials = []

    with concurrent.futures.ThreadPoolExecutor(
        max_workers=config.concurrency,
        thread_name_prefix="bench",
    ) as executor:
        warmup = run_trial(executor, candidate, config, 1, config.warmup_ms)
        logger.debug("Warmup complete: %d loops in %.2fs", warmup.completed_loops, warmup.elapsed_s)

        for level in range(1, config.concurrency + 1):
            logger.debug(
                "Concurrency: %d, Effort: %d, Loops: %d, Time limit: %dms",
                level, config.effort, config.num_loops, config.time_ms,
            )
            trial = run_trial(executor, candidate, config, level, config.time_ms)
            if trial.failed_units:
                logger.warning(
                    "Concurrency %d: %d of %d units failed verification",
                    level, trial.failed_units, level,
                )
            trials.append(trial)
            on_trial(trial)

    return warmup, trials
