"""
insertion_sort.py — Insertion Sort
===================================
The outer loop becomes `current_i`, the inner while-loop becomes
`current_j` plus a sub-phase, and the value being inserted is held in
`key` between steps:

    SELECTING_ELEMENT  → key = a[i], mark it CURRENT, j = i - 1
    SEARCHING_POSITION → compare a[j] with key; strictly greater values
                         are shifted one slot right (a copy, not a swap)
    INSERTING_ELEMENT  → write key into its slot, mark it SELECTED
    MOVE_TO_NEXT       → i += 1 (teaching checkpoint)

Index 0 starts out SORTED: a one-element prefix is trivially in order.
Everything left of `current_i` is painted SORTED at the start of each
step, since that prefix is always in sorted relative order.
"""

from enum import Enum
from typing import List

from dataset.element import ElementState
from algorithms.base import SortEngine
from algorithms.quiz import Question


PSEUDOCODE: List[str] = [
    "def insertion_sort(a):",                   # 0
    "    for i in 1 .. n-1:",                   # 1
    "        key ← a[i]",                       # 2
    "        j ← i - 1",                        # 3
    "        while j >= 0 and a[j] > key:",     # 4
    "            a[j+1] ← a[j]",                # 5
    "            j ← j - 1",                    # 6
    "        a[j+1] ← key",                     # 7
    "    return a",                             # 8
]

QUESTIONS: List[Question] = [
    Question(
        text="What is the main idea of Insertion Sort?",
        options=[
            "It builds the sorted array one item at a time",
            "It divides the array into halves",
            "It uses a pivot to partition",
        ],
        explanation="Each new element is slid into its place inside the already sorted prefix.",
    ),
    Question(
        text="What happens in the inner loop of Insertion Sort?",
        options=[
            "Elements larger than the key are shifted one slot right",
            "Adjacent elements are swapped if out of order",
            "The minimum element is searched for",
        ],
        explanation="Shifting larger elements right opens a gap where the key belongs.",
    ),
    Question(
        text="Why is the first element considered sorted?",
        options=[
            "A single element is always sorted",
            "It is the largest",
            "It has already been compared",
        ],
        explanation="A one-element prefix is trivially in order, so the outer loop starts at index 1.",
    ),
]


class InsertionPhase(Enum):
    SELECTING_ELEMENT  = "selecting_element"
    SEARCHING_POSITION = "searching_position"
    INSERTING_ELEMENT  = "inserting_element"
    MOVE_TO_NEXT       = "move_to_next"
    DONE               = "done"


class InsertionSort(SortEngine):
    key             = "insertion"
    title           = "INSERTION SORT VISUALIZER"
    PSEUDOCODE      = PSEUDOCODE
    QUESTIONS       = QUESTIONS
    LEGEND = [
        ("Normal",      ElementState.NORMAL),
        ("Key Element", ElementState.CURRENT),
        ("Comparing",   ElementState.COMPARING),
        ("Position",    ElementState.SELECTED),
        ("Shifting",    ElementState.SWAPPING),
        ("Sorted",      ElementState.SORTED),
    ]
    checkpoint_name = "insertion"

    def _restart(self) -> None:
        self.current_i = 1
        self.current_j = 0
        self.key_value = None
        self._phase    = InsertionPhase.SELECTING_ELEMENT
        if self.n > 0:
            self.states[0] = ElementState.SORTED

    @property
    def phase(self) -> InsertionPhase:
        if self.control.completed:
            return InsertionPhase.DONE
        return self._phase

    def _advance(self) -> bool:
        for idx in range(min(self.current_i, self.n)):
            self.states[idx] = ElementState.SORTED

        phase = self._phase
        if phase is InsertionPhase.SELECTING_ELEMENT:
            return self._select()
        if phase is InsertionPhase.SEARCHING_POSITION:
            self._search()
        elif phase is InsertionPhase.INSERTING_ELEMENT:
            self._insert()
        else:
            self._move_to_next()
        return True

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------
    def _select(self) -> bool:
        i = self.current_i
        if i >= self.n:
            return False
        if i == 0:
            self.states[0] = ElementState.SORTED
            self.current_i = 1
            return True
        self.key_value = self.array[i]
        self.states[i] = ElementState.CURRENT
        self.current_j = i - 1
        self._phase = InsertionPhase.SEARCHING_POSITION
        return True

    def _search(self) -> None:
        j = self.current_j
        self.states[j] = ElementState.COMPARING
        self._compare()
        if self.array[j] > self.key_value:
            self.states[j] = ElementState.SWAPPING
            self.array[j + 1] = self.array[j]
            self.control.swaps += 1
            if j == 0:
                self._phase = InsertionPhase.INSERTING_ELEMENT
            else:
                self.current_j = j - 1
        else:
            self.current_j = j + 1
            self._phase = InsertionPhase.INSERTING_ELEMENT

    def _insert(self) -> None:
        j = self.current_j
        self.array[j] = self.key_value
        self.states[j] = ElementState.SELECTED
        self._phase = InsertionPhase.MOVE_TO_NEXT

    def _move_to_next(self) -> None:
        self.current_i += 1
        self._phase = InsertionPhase.SELECTING_ELEMENT
        self._checkpoint()

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    def progress(self) -> float:
        if self.n <= 1 or self.control.completed:
            return 100.0
        return min(100.0, self.current_i / self.n * 100.0)

    def current_operation_description(self) -> str:
        phase = self.phase
        if phase is InsertionPhase.DONE:
            return "Array is now sorted using Insertion Sort!"
        if phase is InsertionPhase.SELECTING_ELEMENT:
            if self.current_i < self.n:
                return (f"Step {self.current_i}/{self.n - 1}: selecting key element "
                        f"{self.current_i} (value: {self.array[self.current_i]})")
            return "All elements inserted"
        if phase is InsertionPhase.SEARCHING_POSITION:
            return (f"Comparing key {self.key_value} with element {self.current_j} "
                    f"(value: {self.array[self.current_j]})")
        if phase is InsertionPhase.INSERTING_ELEMENT:
            return f"Inserting key {self.key_value} at position {self.current_j}"
        return f"Element {self.key_value} positioned correctly, moving to next"

    def pseudocode_line(self) -> int:
        return {
            InsertionPhase.SELECTING_ELEMENT:  2,
            InsertionPhase.SEARCHING_POSITION: 4,
            InsertionPhase.INSERTING_ELEMENT:  7,
            InsertionPhase.MOVE_TO_NEXT:       1,
            InsertionPhase.DONE:               8,
        }[self.phase]

    def extra_stats(self) -> dict:
        return {"current_i": self.current_i, "key": self.key_value}
