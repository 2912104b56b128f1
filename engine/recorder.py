"""
recorder.py — Run Recorder & Analytics
========================================
Runs one algorithm start to finish on a dataset, keeping every Snapshot,
then computes the numbers the comparison panel needs.

Usage:
    rec = Recorder()
    rec.start(algo_key="quick", values=[5, 3, 8, 1])
    rec.run_to_completion()          # steps until the engine is done
    metrics = rec.get_metrics()      # one run's numbers
    rec.export()                     # serialisable snapshot for save/replay

Comparison Mode:
    The UI holds two Recorders (one per algo), runs both to completion
    on the SAME values, then calls compare(rec1, rec2) → ComparisonResult.

Recording always runs with teaching mode off, so no question can stall
the run.
"""

import logging
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from algorithms import AlgoInfo, SortEngine, Snapshot, require_algorithm

logger = logging.getLogger(__name__)

# Upper bound on steps for one recording.  Bubble sort on MAX_SIZE
# elements needs roughly n² steps, well under this.
DEFAULT_MAX_STEPS = 200_000


# ---------------------------------------------------------------------------
# RunMetrics: the numbers of one recorded run
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:     str   = ""
    algo_label:   str   = ""
    size:         int   = 0
    comparisons:  int   = 0
    swaps:        int   = 0            # swaps / shifts / writes, per algorithm
    total_steps:  int   = 0            # number of successful step() calls
    wall_time_ms: float = 0.0          # wall-clock time to run to completion
    sorted_ok:    bool  = False        # final array equals sorted(input)


# ---------------------------------------------------------------------------
# ComparisonResult: side-by-side metrics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_comparisons: str = ""   # which algo compared less
    winner_swaps:       str = ""
    winner_steps:       str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        snapshots : Snapshot after every step, starting with the initial frame.
        metrics   : Computed RunMetrics (available after run_to_completion).
        engine    : The underlying SortEngine.
    """

    def __init__(self):
        self.snapshots: List[Snapshot]       = []
        self.metrics:   Optional[RunMetrics] = None
        self.engine:    Optional[SortEngine] = None

        self._algo_info: Optional[AlgoInfo] = None
        self._values:    List[int]          = []

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algo_key: str, values: Sequence[int]) -> None:
        """Build a fresh engine (teaching off) for this run."""
        info = require_algorithm(algo_key)

        self._algo_info = info
        self._values    = list(values)
        self.snapshots  = []
        self.metrics    = None

        control = info.cls.make_control(teaching_mode=False)
        self.engine = info.cls(self._values, control=control)
        self.snapshots.append(self.engine.snapshot())

    def run_to_completion(self, max_steps: int = DEFAULT_MAX_STEPS) -> RunMetrics:
        """Step until the engine reports completion, record every frame, compute metrics."""
        if self.engine is None:
            raise RuntimeError("Call start() first.")

        start = time.monotonic()
        steps = 0
        while self.engine.step():
            steps += 1
            self.snapshots.append(self.engine.snapshot())
            if steps >= max_steps:
                raise RuntimeError(f"{self.engine.key} did not finish within {max_steps} steps")
        self.snapshots.append(self.engine.snapshot())
        wall_ms = (time.monotonic() - start) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        logger.debug("Recorded %s: %s", self.metrics.algo_key, self.metrics)
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "values":   list(self._values),
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "steps":    [s.to_dict() for s in self.snapshots],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self._algo_info
        engine = self.engine
        return RunMetrics(
            algo_key=info.key if info else "",
            algo_label=info.label if info else "",
            size=len(self._values),
            comparisons=engine.control.comparisons,
            swaps=engine.control.swaps,
            total_steps=engine.step_number,
            wall_time_ms=round(wall_ms, 2),
            sorted_ok=engine.array == sorted(self._values),
        )


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val, l_key, r_key):
        if l_val == r_val:
            return "tie"
        return l_key if l_val < r_val else r_key

    return ComparisonResult(
        left=l,
        right=r,
        winner_comparisons=winner(l.comparisons, r.comparisons, l.algo_label, r.algo_label),
        winner_swaps      =winner(l.swaps, r.swaps, l.algo_label, r.algo_label),
        winner_steps      =winner(l.total_steps, r.total_steps, l.algo_label, r.algo_label),
    )


def compare_algorithms(left_key: str, right_key: str, values: Sequence[int]) -> ComparisonResult:
    """Record both algorithms on the same values and compare them."""
    recorders = []
    for key in (left_key, right_key):
        rec = Recorder()
        rec.start(key, values)
        rec.run_to_completion()
        recorders.append(rec)
    return compare(*recorders)
