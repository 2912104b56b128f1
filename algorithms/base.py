"""
base.py — Steppable Sort Engine
================================
The common contract every sorting algorithm implements.  A sort engine is
an explicit state machine rather than a generator: its cursors and phase
ARE the suspended "stack frame", so it can be paused anywhere,
single-stepped, reset to the exact same baseline, and inspected between
steps.

    engine = QuickSort([5, 3, 8, 1])
    while engine.step():
        frame = engine.snapshot()

Subclass hooks:
    _restart()        – put cursors / phase at the algorithm's start state
    _advance()        – perform ONE atomic unit of work; False when done
    progress()        – algorithm-specific percentage estimate
    current_operation_description()
    pseudocode_line() – which PSEUDOCODE line the next step executes
    extra_stats()     – algorithm-specific numbers for the stats panel

Everything else (state clearing, completion, quiz gating, reset, the
snapshot) lives here so all four engines behave identically.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Tuple

from dataset.element import ElementState, clear_transient
from algorithms.control import ControlState, MAX_DELAY, MIN_DELAY
from algorithms.quiz import AnswerFeedback, Question, QuizBank
from algorithms.snapshot import Snapshot

logger = logging.getLogger(__name__)


class SortEngine(ABC):
    """
    Attributes:
        array       : Working array, sorted in place.
        original    : The array captured at construction (reset target).
        states      : One ElementState per index (same length as array).
        control     : Shared ControlState (counters, flags, pending question).
        quiz        : QuizBank asked at this algorithm's checkpoints.
        checkpoints : Teaching checkpoints reached since reset.
        step_number : Units of work performed since reset.
    """

    key:        str            = ""
    title:      str            = ""
    PSEUDOCODE: List[str]      = []
    QUESTIONS:  List[Question] = []
    LEGEND: List[Tuple[str, ElementState]] = [
        ("Normal",    ElementState.NORMAL),
        ("Comparing", ElementState.COMPARING),
        ("Swapping",  ElementState.SWAPPING),
        ("Sorted",    ElementState.SORTED),
    ]
    checkpoint_name: str = "step"
    min_delay:       int = MIN_DELAY
    max_delay:       int = MAX_DELAY

    def __init__(
        self,
        values: Sequence[int],
        control: Optional[ControlState] = None,
        quiz: Optional[QuizBank] = None,
    ):
        self.original: List[int]          = list(values)
        self.array:    List[int]          = list(values)
        self.states:   List[ElementState] = [ElementState.NORMAL] * len(self.array)
        self.control:  ControlState       = control if control is not None else self.make_control()
        self.quiz:     QuizBank           = quiz if quiz is not None else QuizBank(self.QUESTIONS)
        self.checkpoints: int = 0
        self.step_number: int = 0
        self.control.reset()
        self._restart()
        self._finish_if_trivial()

    @classmethod
    def make_control(cls, step_delay: Optional[int] = None, teaching_mode: bool = False) -> ControlState:
        """A ControlState clamped to this algorithm's delay range."""
        control = ControlState(min_delay=cls.min_delay, max_delay=cls.max_delay, teaching_mode=teaching_mode)
        if step_delay is not None:
            control.step_delay = control.clamp(step_delay)
        return control

    # ------------------------------------------------------------------
    # Contract
    # ------------------------------------------------------------------
    def step(self) -> bool:
        """
        Advance exactly one atomic sub-step.

        Returns False once the algorithm has no further work (and keeps
        returning False without touching anything).  While a question is
        pending it returns True and does nothing.
        """
        if self.control.completed:
            return False
        if self.control.awaiting_question is not None:
            return True

        clear_transient(self.states)
        if self._advance():
            self.step_number += 1
            return True

        self._complete()
        return False

    def reset(self) -> None:
        """Restore the constructed baseline: array, states, cursors, counters."""
        self.array  = list(self.original)
        self.states = [ElementState.NORMAL] * len(self.array)
        self.checkpoints = 0
        self.step_number = 0
        self.control.reset()
        self._restart()
        self._finish_if_trivial()
        logger.debug("%s reset (n=%d)", self.key, len(self.array))

    def answer(self, option: int) -> Optional[AnswerFeedback]:
        """Answer the pending question.  No-op (None) if nothing is pending."""
        index = self.control.awaiting_question
        if index is None:
            return None
        feedback = self.quiz.answer(index, option)
        self.control.clear_question()
        return feedback

    @property
    def n(self) -> int:
        return len(self.array)

    @property
    def pending_question(self) -> Optional[Question]:
        if self.control.awaiting_question is None:
            return None
        return self.quiz.get(self.control.awaiting_question)

    # ------------------------------------------------------------------
    # Subclass hooks
    # ------------------------------------------------------------------
    @abstractmethod
    def _restart(self) -> None:
        ...

    @abstractmethod
    def _advance(self) -> bool:
        ...

    @abstractmethod
    def progress(self) -> float:
        ...

    @abstractmethod
    def current_operation_description(self) -> str:
        ...

    @property
    @abstractmethod
    def phase(self):
        ...

    def pseudocode_line(self) -> int:
        return -1

    def extra_stats(self) -> Dict[str, Any]:
        return {}

    def legend(self) -> List[Tuple[str, ElementState]]:
        return list(self.LEGEND)

    # ------------------------------------------------------------------
    # Helpers for subclasses
    # ------------------------------------------------------------------
    def _compare(self) -> None:
        self.control.comparisons += 1

    def _swap(self, a: int, b: int) -> None:
        self.array[a], self.array[b] = self.array[b], self.array[a]
        self.control.swaps += 1

    def _checkpoint(self) -> None:
        """One teaching checkpoint reached; raise a question if teaching."""
        self.checkpoints += 1
        if not self.control.teaching_mode:
            return
        index = self.quiz.index_for(self.checkpoints)
        if index is not None:
            self.control.ask_question(index)
            logger.debug("%s %s %d: asking question %d",
                         self.key, self.checkpoint_name, self.checkpoints, index)

    def _sorted_percentage(self) -> float:
        if self.n <= 1 or self.control.completed:
            return 100.0
        done = sum(1 for s in self.states if s is ElementState.SORTED)
        return min(100.0, done / self.n * 100.0)

    def _finish_if_trivial(self) -> None:
        if self.n <= 1:
            self._complete()

    def _complete(self) -> None:
        self.states = [ElementState.SORTED] * len(self.array)
        self.control.mark_completed()
        logger.debug("%s completed: %d comparisons, %d swaps",
                     self.key, self.control.comparisons, self.control.swaps)

    # ------------------------------------------------------------------
    # Snapshot
    # ------------------------------------------------------------------
    def snapshot(self, feedback: Optional[AnswerFeedback] = None) -> Snapshot:
        question = self.pending_question
        option_count = len(question.options) if question else 3
        return Snapshot(
            algo_key=self.key,
            title=self.title,
            step_number=self.step_number,
            array=tuple(self.array),
            states=tuple(self.states),
            phase=self.phase.name,
            description=self.current_operation_description(),
            pseudocode_line=self.pseudocode_line(),
            comparisons=self.control.comparisons,
            swaps=self.control.swaps,
            progress=self.progress(),
            status_text=self.control.status_text(),
            controls_hint=self.control.controls_hint(option_count),
            legend=[(label, state.value) for label, state in self.legend()],
            step_delay=self.control.step_delay,
            teaching_mode=self.control.teaching_mode,
            is_running=self.control.is_running,
            is_paused=self.control.is_paused,
            completed=self.control.completed,
            question=question.to_dict() if question else None,
            feedback=feedback.to_dict() if feedback else None,
            extra=self.extra_stats(),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={self.n}, phase={self.phase.name}, completed={self.control.completed})"
