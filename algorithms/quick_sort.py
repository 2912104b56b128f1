"""
quick_sort.py — Quick Sort (explicit range stack)
==================================================
Recursive partitioning is replaced by an explicit stack of (low, high)
bounds; partitioning itself is a small state machine so every pointer
move is its own step:

    CHOOSING_PIVOT      → pop a range, pivot = a[high] (CURRENT),
                          left = low, right = high - 1
    PARTITIONING_LEFT   → a[left] <= pivot ? left++ : go right
    PARTITIONING_RIGHT  → a[right] > pivot ? right-- : go swap
    SWAPPING_ELEMENTS   → swap a[left], a[right]; left++, right--
    SWAPPING_WITH_PIVOT → pivot into a[left] (SORTED), push the two
                          sides (teaching checkpoint)

Whenever the pointers cross, the next step is SWAPPING_WITH_PIVOT.

Stack discipline:
  - Only ranges with at least two elements are pushed; a one-element
    side is marked SORTED on the spot, an empty side is dropped.
  - The right side is pushed first, so the left side is partitioned
    next (same order as the recursive version).
  - CHOOSING_PIVOT still tolerates degenerate ranges: it resolves as many
    as it pops within a single step() before doing real work.
"""

from enum import Enum
from typing import List, Tuple

from dataset.element import ElementState
from algorithms.base import SortEngine
from algorithms.quiz import Question


PSEUDOCODE: List[str] = [
    "def quick_sort(a):",                                       # 0
    "    stack ← [(0, n-1)]",                                   # 1
    "    while stack:",                                         # 2
    "        low, high ← stack.pop(); pivot ← a[high]",         # 3
    "        left ← low; right ← high-1",                       # 4
    "        while left <= right:",                             # 5
    "            if a[left] <= pivot: left++",                  # 6
    "            elif a[right] > pivot: right--",               # 7
    "            else: swap(a[left], a[right])",                # 8
    "        swap(a[left], a[high])   # pivot in place",        # 9
    "        push (left+1, high), (low, left-1)",               # 10
    "    return a",                                             # 11
]

QUESTIONS: List[Question] = [
    Question(
        text="What is the role of the pivot in Quick Sort?",
        options=[
            "It separates elements smaller and larger than itself",
            "It is the smallest element",
            "It is always the first element",
        ],
        explanation="Partitioning moves smaller-or-equal values left of the pivot and larger ones right of it.",
    ),
    Question(
        text="Why is Quick Sort often faster than other O(n log n) sorts?",
        options=[
            "Good average-case partitions and in-place, cache-friendly work",
            "It uses a temporary array",
            "It is stable",
        ],
        explanation="Average O(n log n) with small constants; poor pivots degrade it to O(n^2).",
    ),
    Question(
        text="What happens after a partition?",
        options=[
            "Both sides are sorted separately; the pivot is already final",
            "The entire array is sorted",
            "Every element is swapped once more",
        ],
        explanation="The pivot sits in its final position, so only the two sides still need work.",
    ),
]


class QuickPhase(Enum):
    CHOOSING_PIVOT      = "choosing_pivot"
    PARTITIONING_LEFT   = "partitioning_left"
    PARTITIONING_RIGHT  = "partitioning_right"
    SWAPPING_ELEMENTS   = "swapping_elements"
    SWAPPING_WITH_PIVOT = "swapping_with_pivot"
    DONE_PARTITION      = "done_partition"
    DONE                = "done"


class QuickSort(SortEngine):
    key             = "quick"
    title           = "QUICK SORT VISUALIZER"
    PSEUDOCODE      = PSEUDOCODE
    QUESTIONS       = QUESTIONS
    LEGEND = [
        ("Normal",    ElementState.NORMAL),
        ("Pivot",     ElementState.CURRENT),
        ("Left Ptr",  ElementState.PARTITION_LEFT),
        ("Right Ptr", ElementState.PARTITION_RIGHT),
        ("Swapping",  ElementState.SWAPPING),
        ("Sorted",    ElementState.SORTED),
    ]
    checkpoint_name = "partition"

    def _restart(self) -> None:
        self.stack: List[Tuple[int, int]] = []
        self.low  = 0
        self.high = 0
        self.pivot_index = 0
        self.left  = 0
        self.right = 0
        if self.n > 1:
            self.stack.append((0, self.n - 1))
            self.high = self.n - 1
            self._phase = QuickPhase.CHOOSING_PIVOT
        else:
            self._phase = QuickPhase.DONE_PARTITION

    @property
    def phase(self) -> QuickPhase:
        if self.control.completed:
            return QuickPhase.DONE
        return self._phase

    @property
    def partitions(self) -> int:
        return self.checkpoints

    def _advance(self) -> bool:
        phase = self._phase
        if phase is QuickPhase.CHOOSING_PIVOT:
            return self._choose_pivot()
        if phase is QuickPhase.DONE_PARTITION:
            self._phase = QuickPhase.CHOOSING_PIVOT
            return True

        self.states[self.pivot_index] = ElementState.CURRENT
        if phase is QuickPhase.PARTITIONING_LEFT:
            self._scan_left()
        elif phase is QuickPhase.PARTITIONING_RIGHT:
            self._scan_right()
        elif phase is QuickPhase.SWAPPING_ELEMENTS:
            self._swap_pair()
        else:
            self._place_pivot()
        return True

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------
    def _choose_pivot(self) -> bool:
        while self.stack:
            low, high = self.stack.pop()
            self.low, self.high = low, high
            if low >= high:
                if low == high and low < self.n:
                    self.states[low] = ElementState.SORTED
                continue

            self.pivot_index = high
            self.states[high] = ElementState.CURRENT
            self.left  = low
            self.right = high - 1
            self._phase = QuickPhase.PARTITIONING_LEFT
            return True
        return False

    def _scan_left(self) -> None:
        if self.left > self.right:
            self._phase = QuickPhase.SWAPPING_WITH_PIVOT
            return
        self.states[self.left] = ElementState.PARTITION_LEFT
        self._compare()
        if self.array[self.left] <= self.array[self.pivot_index]:
            self.left += 1
        else:
            self._phase = QuickPhase.PARTITIONING_RIGHT

    def _scan_right(self) -> None:
        if self.left > self.right:
            self._phase = QuickPhase.SWAPPING_WITH_PIVOT
            return
        self.states[self.right] = ElementState.PARTITION_RIGHT
        self._compare()
        if self.array[self.right] > self.array[self.pivot_index]:
            self.right -= 1
        else:
            self._phase = QuickPhase.SWAPPING_ELEMENTS

    def _swap_pair(self) -> None:
        if self.left > self.right:
            self._phase = QuickPhase.SWAPPING_WITH_PIVOT
            return
        self.states[self.left] = ElementState.SWAPPING
        self.states[self.right] = ElementState.SWAPPING
        self._swap(self.left, self.right)
        self.left  += 1
        self.right -= 1
        self._phase = QuickPhase.PARTITIONING_LEFT

    def _place_pivot(self) -> None:
        low, high, final = self.low, self.high, self.left
        self.states[self.pivot_index] = ElementState.SWAPPING
        self.states[final] = ElementState.SWAPPING
        if final != self.pivot_index:
            self._swap(self.pivot_index, final)
        self.states[final] = ElementState.SORTED

        if final + 1 < high:
            self.stack.append((final + 1, high))
        elif final + 1 == high:
            self.states[high] = ElementState.SORTED
        if low < final - 1:
            self.stack.append((low, final - 1))
        elif low == final - 1:
            self.states[low] = ElementState.SORTED

        self._phase = QuickPhase.CHOOSING_PIVOT
        self._checkpoint()

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    def progress(self) -> float:
        return self._sorted_percentage()

    def current_operation_description(self) -> str:
        phase = self.phase
        low, high = self.low, self.high
        if phase is QuickPhase.DONE:
            return "Array is now sorted using Quick Sort!"
        if phase is QuickPhase.CHOOSING_PIVOT:
            if self.stack:
                nl, nh = self.stack[-1]
                return f"Popping range [{nl}..{nh}] and choosing a[{nh}] as pivot"
            return "Range stack is empty"
        if phase is QuickPhase.DONE_PARTITION:
            return "Moving to next subarray"

        pivot = self.array[self.pivot_index]
        if phase is QuickPhase.PARTITIONING_LEFT:
            if self.left <= self.right:
                return (f"Partition [{low}..{high}]: left={self.left} "
                        f"({self.array[self.left]}) <= pivot {pivot}?")
            return f"Partition [{low}..{high}]: pointers crossed"
        if phase is QuickPhase.PARTITIONING_RIGHT:
            if self.left <= self.right:
                return (f"Partition [{low}..{high}]: right={self.right} "
                        f"({self.array[self.right]}) > pivot {pivot}?")
            return f"Partition [{low}..{high}]: pointers crossed"
        if phase is QuickPhase.SWAPPING_ELEMENTS:
            return (f"Swapping left={self.left} ({self.array[self.left]}) "
                    f"with right={self.right} ({self.array[self.right]})")
        return f"Final swap: pivot at {self.pivot_index} with left={self.left}"

    def pseudocode_line(self) -> int:
        return {
            QuickPhase.CHOOSING_PIVOT:      3,
            QuickPhase.PARTITIONING_LEFT:   6,
            QuickPhase.PARTITIONING_RIGHT:  7,
            QuickPhase.SWAPPING_ELEMENTS:   8,
            QuickPhase.SWAPPING_WITH_PIVOT: 9,
            QuickPhase.DONE_PARTITION:      10,
            QuickPhase.DONE:                11,
        }[self.phase]

    def extra_stats(self) -> dict:
        return {"stack_size": len(self.stack), "partitions": self.partitions}
