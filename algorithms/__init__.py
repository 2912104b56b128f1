"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every sorting engine the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm, create_engine

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, label, cls, stable, complexities, pros, cons, …),
        …
    }

AlgoInfo is a lightweight dataclass.  The session driver, the recorder
and both frontends consume it, so adding an algorithm is: write the
SortEngine subclass, add one entry here.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Type

from algorithms.base           import SortEngine
from algorithms.control        import ControlState
from algorithms.quiz           import QuizBank, Question, AnswerFeedback
from algorithms.snapshot       import Snapshot
from algorithms.bubble_sort    import BubbleSort,    BubblePhase
from algorithms.insertion_sort import InsertionSort, InsertionPhase
from algorithms.merge_sort     import MergeSort,     MergePhase
from algorithms.quick_sort     import QuickSort,     QuickPhase


class UnknownAlgorithmError(ValueError):
    """Raised when a registry key does not name a known algorithm."""


# ---------------------------------------------------------------------------
# AlgoInfo: metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                      # registry key, e.g. "quick"
    label:            str                      # human label, e.g. "Quick Sort"
    cls:              Type[SortEngine]         # the engine class
    stable:           bool      = False
    in_place:         bool      = True
    complexity_time:  str       = ""           # average case, e.g. "O(n log n)"
    complexity_worst: str       = ""
    complexity_space: str       = ""
    checkpoint:       str       = ""           # when teaching questions are asked
    description:      str       = ""           # one-liner for the UI card
    pros:             str       = ""
    cons:             str       = ""

    @property
    def pseudocode(self) -> List[str]:
        return list(self.cls.PSEUDOCODE)

    @property
    def questions(self) -> List[Question]:
        return list(self.cls.QUESTIONS)


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", cls=BubbleSort,
        stable=True,
        complexity_time="O(n²)", complexity_worst="O(n²)", complexity_space="O(1)",
        checkpoint="after every pass",
        description="Swaps out-of-order neighbours; the largest value bubbles to the end each pass.",
        pros="Simple to understand, sorts in place, stable.",
        cons="Slow: O(n²) comparisons on random input.",
    ),

    "insertion": AlgoInfo(
        key="insertion", label="Insertion Sort", cls=InsertionSort,
        stable=True,
        complexity_time="O(n²)", complexity_worst="O(n²)", complexity_space="O(1)",
        checkpoint="after every insertion",
        description="Slides each element left into the sorted prefix. Fast on nearly sorted input.",
        pros="Simple, efficient for small or nearly sorted data.",
        cons="O(n²) worst case.",
    ),

    "merge": AlgoInfo(
        key="merge", label="Merge Sort", cls=MergeSort,
        stable=True, in_place=False,
        complexity_time="O(n log n)", complexity_worst="O(n log n)", complexity_space="O(n)",
        checkpoint="after every merge",
        description="Bottom-up: merges runs of width 1, 2, 4, … until one run remains.",
        pros="Stable, O(n log n) time on every input.",
        cons="Requires O(n) extra space.",
    ),

    "quick": AlgoInfo(
        key="quick", label="Quick Sort", cls=QuickSort,
        complexity_time="O(n log n)", complexity_worst="O(n²)", complexity_space="O(log n)",
        checkpoint="after every partition",
        description="Partitions around the last element, then sorts both sides from an explicit stack.",
        pros="Fast in practice, sorts in place.",
        cons="Not stable; O(n²) on already sorted input with a last-element pivot.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def require_algorithm(key: str) -> AlgoInfo:
    """Return AlgoInfo by key, raising UnknownAlgorithmError if missing."""
    info = REGISTRY.get(key)
    if info is None:
        raise UnknownAlgorithmError(f"Unknown algorithm: {key!r} (choose from {', '.join(REGISTRY)})")
    return info


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def create_engine(
    key: str,
    values: Sequence[int],
    control: Optional[ControlState] = None,
    quiz: Optional[QuizBank] = None,
) -> SortEngine:
    """Instantiate the engine registered under `key`."""
    return require_algorithm(key).cls(values, control=control, quiz=quiz)


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "UnknownAlgorithmError",
    "get_algorithm",
    "require_algorithm",
    "list_algorithms",
    "create_engine",
    "SortEngine",
    "ControlState",
    "QuizBank",
    "Question",
    "AnswerFeedback",
    "Snapshot",
    "BubbleSort",    "BubblePhase",
    "InsertionSort", "InsertionPhase",
    "MergeSort",     "MergePhase",
    "QuickSort",     "QuickPhase",
]
