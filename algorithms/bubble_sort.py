"""
bubble_sort.py — Bubble Sort
=============================
Two cursors replace the nested loops:

    i – completed passes (the last i positions are final)
    j – comparison index inside the current pass

Each step() is one of:
  1. Compare a[j] with a[j+1]  →  mark both COMPARING, swap (SWAPPING)
     when strictly greater, advance j
  2. End of pass (j == n-1-i)  →  mark index n-1-i SORTED, next pass
     (teaching checkpoint)

Equal neighbours are never swapped, so the sort is stable.
"""

from enum import Enum
from typing import List

from dataset.element import ElementState
from algorithms.base import SortEngine
from algorithms.quiz import Question


PSEUDOCODE: List[str] = [
    "def bubble_sort(a):",                      # 0
    "    for i in 0 .. n-2:",                   # 1
    "        for j in 0 .. n-2-i:",             # 2
    "            if a[j] > a[j+1]:",            # 3
    "                swap(a[j], a[j+1])",       # 4
    "        a[n-1-i] is in place",             # 5
    "    return a",                             # 6
]

QUESTIONS: List[Question] = [
    Question(
        text="What is the purpose of the outer loop in Bubble Sort?",
        options=[
            "Each pass bubbles the largest remaining element to the end",
            "It only performs comparisons",
            "It shuffles the array",
        ],
        explanation="Every pass carries the largest unsorted value to the end, growing the sorted tail by one.",
    ),
    Question(
        text="Why does the inner loop stop at n-1-i?",
        options=[
            "To skip the already sorted tail",
            "To scan the entire array",
            "For randomness",
        ],
        explanation="After i passes the last i elements are final, so comparing them again is wasted work.",
    ),
    Question(
        text="When is a swap performed after a comparison?",
        options=[
            "When the left element is strictly larger than the right one",
            "After every comparison",
            "When the left element is smaller",
        ],
        explanation="Only out-of-order neighbours are swapped; equal values stay put, which keeps the sort stable.",
    ),
]


class BubblePhase(Enum):
    COMPARING = "comparing"     # next step compares a[j], a[j+1]
    PASS_DONE = "pass_done"     # next step closes the pass
    DONE      = "done"


class BubbleSort(SortEngine):
    key             = "bubble"
    title           = "BUBBLE SORT VISUALIZER"
    PSEUDOCODE      = PSEUDOCODE
    QUESTIONS       = QUESTIONS
    checkpoint_name = "pass"

    def _restart(self) -> None:
        self.current_i = 0
        self.current_j = 0

    @property
    def phase(self) -> BubblePhase:
        if self.control.completed or self.current_i >= self.n - 1:
            return BubblePhase.DONE
        if self.current_j < self.n - 1 - self.current_i:
            return BubblePhase.COMPARING
        return BubblePhase.PASS_DONE

    def _advance(self) -> bool:
        n, i, j = self.n, self.current_i, self.current_j
        if i >= n - 1:
            return False

        if j < n - 1 - i:
            self.states[j] = ElementState.COMPARING
            self.states[j + 1] = ElementState.COMPARING
            self._compare()
            if self.array[j] > self.array[j + 1]:
                self.states[j] = ElementState.SWAPPING
                self.states[j + 1] = ElementState.SWAPPING
                self._swap(j, j + 1)
            self.current_j += 1
        else:
            self.states[n - 1 - i] = ElementState.SORTED
            self.current_i += 1
            self.current_j = 0
            self._checkpoint()
        return True

    def progress(self) -> float:
        total = self.n * (self.n - 1) // 2
        if total == 0 or self.control.completed:
            return 100.0
        return min(100.0, self.control.comparisons / total * 100.0)

    def current_operation_description(self) -> str:
        phase = self.phase
        if phase is BubblePhase.DONE:
            return "Array is now sorted using Bubble Sort!"
        i, j = self.current_i, self.current_j
        if phase is BubblePhase.COMPARING:
            return (f"Pass {i + 1}: comparing array[{j}] ({self.array[j]}) "
                    f"with array[{j + 1}] ({self.array[j + 1]})")
        return f"Pass {i + 1} completed. Largest element bubbled to index {self.n - 1 - i}."

    def pseudocode_line(self) -> int:
        return {
            BubblePhase.COMPARING: 3,
            BubblePhase.PASS_DONE: 5,
            BubblePhase.DONE:      6,
        }[self.phase]

    def extra_stats(self) -> dict:
        return {"pass": min(self.current_i + 1, max(self.n - 1, 1)), "sorted_tail": self.current_i}
