"""
merge_sort.py — Merge Sort (bottom-up)
=======================================
The recursive divide is replaced by bottom-up doubling, so no call stack
has to be modelled at all.  The "merge ledger" is:

    current_size        – width of the runs merged in this pass (1, 2, 4, …)
    current_pair_start  – offset of the next pair of runs in this pass
    scratch             – copy of the two runs being merged

A pass is over when no right-hand run is left to merge
(`current_pair_start + current_size >= n`); the width then doubles and
the offset rewinds.  Sorting ends once the width exceeds n.

Phases:
    MERGE_PAIRS   → compute low/mid/high, copy both runs into scratch
    MERGING_INIT  → show the two scan pointers
    MERGING_STEP  → write ONE element back (the smaller head; the left
                    run wins ties, which keeps the sort stable)
    DONE_MERGE    → mark [low..high] SORTED, move to the next pair
                    (teaching checkpoint)

Every element written back counts as one swap; only heads compared while
both runs still have elements count as comparisons.
"""

from enum import Enum
from typing import List

from dataset.element import ElementState
from algorithms.base import SortEngine
from algorithms.quiz import Question


PSEUDOCODE: List[str] = [
    "def merge_sort(a):",                                       # 0
    "    size ← 1",                                             # 1
    "    while size < n:",                                      # 2
    "        for low in 0, 2·size, 4·size, …:",                 # 3
    "            mid ← low+size-1; high ← min(low+2·size, n)-1",  # 4
    "            temp[low..high] ← a[low..high]",               # 5
    "            while both runs have elements:",               # 6
    "                a[k++] ← smaller head (left on ties)",     # 7
    "            copy the rest of the other run",               # 8
    "        size ← 2·size",                                    # 9
    "    return a",                                             # 10
]

QUESTIONS: List[Question] = [
    Question(
        text="What is the time complexity of Merge Sort?",
        options=["O(n log n)", "O(n^2)", "O(n)"],
        explanation="There are log n passes and each pass touches every element once.",
    ),
    Question(
        text="Why is a temporary array used in Merge Sort?",
        options=[
            "To merge two sorted runs without overwriting unread values",
            "To store the original array",
            "To perform comparisons",
        ],
        explanation="Writing back into the array would clobber values of the runs that have not been read yet.",
    ),
    Question(
        text="What does the merge step do?",
        options=[
            "Combines two sorted runs into one sorted run",
            "Divides the array",
            "Finds the minimum",
        ],
        explanation="It repeatedly takes the smaller head of the two runs, producing one sorted run.",
    ),
]


class MergePhase(Enum):
    MERGE_PAIRS  = "merge_pairs"
    MERGING_INIT = "merging_init"
    MERGING_STEP = "merging_step"
    DONE_MERGE   = "done_merge"
    DONE         = "done"


class MergeSort(SortEngine):
    key             = "merge"
    title           = "MERGE SORT VISUALIZER"
    PSEUDOCODE      = PSEUDOCODE
    QUESTIONS       = QUESTIONS
    LEGEND = [
        ("Normal",    ElementState.NORMAL),
        ("Merging L", ElementState.PARTITION_LEFT),
        ("Merging R", ElementState.PARTITION_RIGHT),
        ("Sorted",    ElementState.SORTED),
    ]
    checkpoint_name = "merge"

    def _restart(self) -> None:
        self.scratch = [0] * self.n
        self.current_size       = 1
        self.current_pair_start = 0
        self.low  = 0
        self.mid  = 0
        self.high = 0
        self.i = 0      # head of the left run (in scratch)
        self.j = 0      # head of the right run (in scratch)
        self.k = 0      # next write position (in array)
        self._phase = MergePhase.MERGE_PAIRS

    @property
    def phase(self) -> MergePhase:
        if self.control.completed:
            return MergePhase.DONE
        return self._phase

    @property
    def merges(self) -> int:
        return self.checkpoints

    def _advance(self) -> bool:
        phase = self._phase
        if phase is MergePhase.MERGE_PAIRS:
            return self._start_pair()
        if phase is MergePhase.MERGING_INIT:
            self._mark_pointers()
            self._phase = MergePhase.MERGING_STEP
        elif phase is MergePhase.MERGING_STEP:
            self._merge_one()
        else:
            self._finish_pair()
        return True

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------
    def _start_pair(self) -> bool:
        n = self.n
        while self.current_pair_start + self.current_size >= n:
            self.current_size *= 2
            self.current_pair_start = 0
            if self.current_size > n:
                return False

        low  = self.current_pair_start
        mid  = low + self.current_size - 1
        high = min(low + 2 * self.current_size, n) - 1
        self.low, self.mid, self.high = low, mid, high
        self.i, self.j, self.k = low, mid + 1, low
        self.scratch[low:high + 1] = self.array[low:high + 1]
        self._phase = MergePhase.MERGING_INIT
        return True

    def _mark_pointers(self) -> None:
        if self.i <= self.mid:
            self.states[self.i] = ElementState.PARTITION_LEFT
        if self.j <= self.high:
            self.states[self.j] = ElementState.PARTITION_RIGHT

    def _merge_one(self) -> None:
        self._mark_pointers()
        left_open  = self.i <= self.mid
        right_open = self.j <= self.high

        if left_open and right_open:
            self._compare()
            take_left = self.scratch[self.i] <= self.scratch[self.j]
        else:
            take_left = left_open

        if take_left:
            self.array[self.k] = self.scratch[self.i]
            self.i += 1
        else:
            self.array[self.k] = self.scratch[self.j]
            self.j += 1
        self.control.swaps += 1
        self.k += 1

        if self.k > self.high:
            self._phase = MergePhase.DONE_MERGE

    def _finish_pair(self) -> None:
        for idx in range(self.low, self.high + 1):
            self.states[idx] = ElementState.SORTED
        self.current_pair_start += 2 * self.current_size
        self._phase = MergePhase.MERGE_PAIRS
        self._checkpoint()

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    def progress(self) -> float:
        return self._sorted_percentage()

    def current_operation_description(self) -> str:
        phase = self.phase
        if phase is MergePhase.DONE:
            return "Array is now sorted using Merge Sort!"
        if phase is MergePhase.MERGE_PAIRS:
            return f"Pass with run width {self.current_size}: picking the next pair of runs"
        if phase is MergePhase.MERGING_INIT:
            return (f"Initializing merge [{self.low}..{self.mid}] + "
                    f"[{self.mid + 1}..{self.high}]")
        if phase is MergePhase.MERGING_STEP:
            left  = self.scratch[self.i] if self.i <= self.mid else "-"
            right = self.scratch[self.j] if self.j <= self.high else "-"
            return (f"Merging: left[{self.i - self.low}]={left} vs "
                    f"right[{self.j - self.mid - 1}]={right} -> pos {self.k}")
        return f"Merge complete for [{self.low}..{self.high}]"

    def pseudocode_line(self) -> int:
        phase = self.phase
        if phase is MergePhase.MERGING_STEP:
            both_open = self.i <= self.mid and self.j <= self.high
            return 7 if both_open else 8
        return {
            MergePhase.MERGE_PAIRS:  4,
            MergePhase.MERGING_INIT: 5,
            MergePhase.DONE_MERGE:   3,
            MergePhase.DONE:         10,
        }[phase]

    def extra_stats(self) -> dict:
        return {
            "current_size": self.current_size,
            "pair_start":   self.current_pair_start,
            "merges":       self.merges,
        }
