"""
control.py — Shared Run-Control State
======================================
Every engine carries one ControlState and mutates it the same way:
counters on each comparison / swap, the pending-question slot at teaching
checkpoints, completion when the array is exhausted.  The SessionDriver
flips the run flags and the delay; nothing else writes here.

Invariants:
  - awaiting_question is not None  →  no automatic stepping.
  - completed                      →  is_running is False.
  - min_delay <= step_delay <= max_delay.
"""

from dataclasses import dataclass
from typing import Optional

DEFAULT_DELAY = 300   # ms
MIN_DELAY     = 50
MAX_DELAY     = 2000
DELAY_STEP    = 50


@dataclass
class ControlState:
    """
    Attributes:
        is_running        : The session was started (auto-advance enabled).
        is_paused         : Started, but temporarily halted.
        completed         : The engine has no further work.
        step_delay        : Milliseconds between automatic steps.
        comparisons       : Element comparisons performed so far.
        swaps             : Element writes / exchanges performed so far.
        teaching_mode     : Ask questions at the algorithm's checkpoints.
        awaiting_question : Index into the QuizBank of the pending question.
        min_delay         : Lower clamp for step_delay.
        max_delay         : Upper clamp for step_delay.
    """

    is_running:        bool          = False
    is_paused:         bool          = False
    completed:         bool          = False
    step_delay:        int           = DEFAULT_DELAY
    comparisons:       int           = 0
    swaps:             int           = 0
    teaching_mode:     bool          = False
    awaiting_question: Optional[int] = None
    min_delay:         int           = MIN_DELAY
    max_delay:         int           = MAX_DELAY

    def __post_init__(self):
        self.step_delay = self.clamp(self.step_delay)

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def clamp(self, delay: int) -> int:
        return max(self.min_delay, min(self.max_delay, int(delay)))

    def speed_up(self) -> int:
        """Shorter delay.  Returns the new delay."""
        self.step_delay = self.clamp(self.step_delay - DELAY_STEP)
        return self.step_delay

    def speed_down(self) -> int:
        """Longer delay.  Returns the new delay."""
        self.step_delay = self.clamp(self.step_delay + DELAY_STEP)
        return self.step_delay

    # ------------------------------------------------------------------
    # Run flags
    # ------------------------------------------------------------------
    def toggle_play_pause(self) -> None:
        if self.is_running:
            self.is_paused = not self.is_paused
        else:
            self.is_running = True
            self.is_paused  = False

    def toggle_teaching(self) -> bool:
        self.teaching_mode = not self.teaching_mode
        return self.teaching_mode

    def mark_completed(self) -> None:
        self.is_running = False
        self.is_paused  = False
        self.completed  = True

    def reset(self) -> None:
        """Back to READY.  Delay and teaching mode are user settings and survive."""
        self.is_running        = False
        self.is_paused         = False
        self.completed         = False
        self.comparisons       = 0
        self.swaps             = 0
        self.awaiting_question = None

    # ------------------------------------------------------------------
    # Questions
    # ------------------------------------------------------------------
    def ask_question(self, index: int) -> None:
        self.awaiting_question = index

    def clear_question(self) -> None:
        self.awaiting_question = None

    @property
    def auto_stepping(self) -> bool:
        return (
            self.is_running
            and not self.is_paused
            and not self.completed
            and self.awaiting_question is None
        )

    # ------------------------------------------------------------------
    # Text for the render sink
    # ------------------------------------------------------------------
    def status_text(self) -> str:
        if self.awaiting_question is not None:
            return "WAITING FOR QUESTION"
        if self.completed:
            return "COMPLETED!"
        if self.is_running and not self.is_paused:
            return "RUNNING..."
        if self.is_paused:
            return "PAUSED"
        return "READY"

    def controls_hint(self, option_count: int = 3) -> str:
        if self.awaiting_question is not None:
            keys = ",".join(str(i + 1) for i in range(option_count))
            return f"{keys}: Answer | ESC: Exit"
        if self.completed:
            return "SPACE: Restart | R: Reset | T: Teaching Toggle | ESC: Exit"
        return "SPACE: Start/Pause | S: Step | R: Reset | T: Teaching | +/-: Speed | ESC: Exit"
