"""
session.py — Session Driver
============================
The SessionDriver is the ONLY object a frontend talks to during a
visualization.  It owns one SortEngine (and, through it, the engine's
ControlState), turns discrete input intents into state changes, and
decides when the engine is allowed to advance.

State machine (ControlState flags):
    READY    →  START_PAUSE  →  RUNNING
    RUNNING  →  START_PAUSE  →  PAUSED  →  START_PAUSE  →  RUNNING
    RUNNING  →  (checkpoint, teaching on)  →  WAITING FOR QUESTION
    WAITING  →  ANSWER_QUIZ  →  RUNNING / READY (whatever it was)
    RUNNING  →  (step returns False)  →  COMPLETED
    any      →  RESET  →  READY

Scheduling is cooperative and single-threaded: the frontend loop polls
its input source, feeds intents to handle(), then calls tick().  tick()
performs at most ONE step, and only once the step delay has elapsed
since the previous one, so a pause or a pending question always takes
effect before the next step.

Thread safety:
  Not thread-safe.  One loop mutates, the render sink reads the Snapshot
  between calls.
"""

import logging
import time
from enum import Enum
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union

from algorithms import SortEngine, Snapshot, AnswerFeedback, QuizBank, require_algorithm
from engine.settings import Settings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Intents
# ---------------------------------------------------------------------------
class Intent(Enum):
    START_PAUSE     = "start_pause"
    RESET           = "reset"
    SINGLE_STEP     = "single_step"
    SPEED_UP        = "speed_up"
    SPEED_DOWN      = "speed_down"
    TOGGLE_TEACHING = "toggle_teaching"
    ANSWER_QUIZ     = "answer_quiz"
    EXIT            = "exit"


IntentLike = Union[Intent, str]
Delta      = Optional[dict]


# ---------------------------------------------------------------------------
# SessionDriver
# ---------------------------------------------------------------------------
class SessionDriver:
    """
    Attributes:
        engine   : The SortEngine being visualized.
        control  : The engine's ControlState (same object).
        feedback : Feedback for the most recent quiz answer, or None.
        exited   : True after an EXIT intent.
        on_step  : Optional callback(Snapshot) fired after every step.
                   A frontend can hook its re-render here.
    """

    def __init__(
        self,
        engine: SortEngine,
        on_step: Optional[Callable[[Snapshot], None]] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.engine:   SortEngine               = engine
        self.feedback: Optional[AnswerFeedback] = None
        self.exited:   bool                     = False
        self.on_step:  Optional[Callable[[Snapshot], None]] = on_step
        self._clock      = clock
        self._last_tick: float = clock()

    @classmethod
    def from_settings(
        cls,
        algo_key: str,
        values: Sequence[int],
        settings: Optional[Settings] = None,
        shuffle_questions: bool = False,
        seed: Optional[int] = None,
        **kwargs,
    ) -> "SessionDriver":
        """Build engine + ControlState + QuizBank from explicit settings."""
        settings = settings or Settings()
        info = require_algorithm(algo_key)
        control = info.cls.make_control(step_delay=settings.speed,
                                        teaching_mode=settings.teaching_mode)
        quiz = QuizBank(info.cls.QUESTIONS, shuffle=shuffle_questions, seed=seed)
        engine = info.cls(values, control=control, quiz=quiz)
        logger.debug("New %s session: n=%d delay=%dms teaching=%s",
                     algo_key, len(engine.array), control.step_delay, control.teaching_mode)
        return cls(engine, **kwargs)

    @property
    def control(self):
        return self.engine.control

    @property
    def algo_key(self) -> str:
        return self.engine.key

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------
    def handle(self, intent: IntentLike, option: Optional[int] = None) -> Delta:
        """
        Apply one input intent.  Returns a settings delta (dict of changed
        persisted fields) or None.  Intents that make no sense in the
        current state are ignored.
        """
        intent = Intent(intent)
        control = self.control
        logger.debug("intent %s (option=%s) status=%s", intent.name, option, control.status_text())

        if self.exited:
            return self._ignore(intent, "session has exited")

        if intent is Intent.EXIT:
            self.exited = True
            control.is_running = False
            control.is_paused  = False
            return {"last_algorithm": self.algo_key}

        if control.awaiting_question is not None and intent is not Intent.ANSWER_QUIZ:
            return self._ignore(intent, "a question is pending")

        if intent is Intent.ANSWER_QUIZ:
            return self._answer(option)

        if intent is Intent.START_PAUSE:
            if control.completed:
                self.reset()
            else:
                control.toggle_play_pause()
                self._last_tick = self._clock()
            return None

        if intent is Intent.RESET:
            self.reset()
            return None

        if intent is Intent.SINGLE_STEP:
            if control.is_running or control.completed:
                return self._ignore(intent, "running or completed")
            self._step()
            return None

        if intent is Intent.SPEED_UP:
            return {"speed": control.speed_up()}

        if intent is Intent.SPEED_DOWN:
            return {"speed": control.speed_down()}

        # TOGGLE_TEACHING
        return {"teaching_mode": control.toggle_teaching()}

    def reset(self) -> None:
        self.engine.reset()
        self.feedback = None
        self._last_tick = self._clock()

    def _answer(self, option: Optional[int]) -> Delta:
        question = self.engine.pending_question
        if question is None:
            return self._ignore(Intent.ANSWER_QUIZ, "no question pending")
        if option is None or not 0 <= option < len(question.options):
            return self._ignore(Intent.ANSWER_QUIZ, f"option {option!r} out of range")
        self.feedback = self.engine.answer(option)
        self._last_tick = self._clock()
        logger.debug("answer %d is %s", option, "correct" if self.feedback.correct else "wrong")
        return None

    def _ignore(self, intent: Intent, reason: str) -> Delta:
        logger.debug("ignored %s: %s", intent.name, reason)
        return None

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / timer)
    # ------------------------------------------------------------------
    def tick(self, now: Optional[float] = None) -> bool:
        """
        Call periodically.  If the session is running, unpaused, not
        completed, no question is pending, and the step delay has
        elapsed, performs exactly one step.  Returns True if a step was
        taken.
        """
        if self.exited or not self.control.auto_stepping:
            return False
        now = self._clock() if now is None else now
        if now - self._last_tick < self.control.step_delay / 1000.0:
            return False
        self._last_tick = now
        self._step()
        return True

    def seconds_until_next_step(self, now: Optional[float] = None) -> Optional[float]:
        """How long the frontend may block on input before the next tick is due."""
        if self.exited or not self.control.auto_stepping:
            return None
        now = self._clock() if now is None else now
        return max(0.0, self._last_tick + self.control.step_delay / 1000.0 - now)

    def _step(self) -> bool:
        more = self.engine.step()
        if self.on_step is not None:
            self.on_step(self.snapshot())
        return more

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    def snapshot(self) -> Snapshot:
        return self.engine.snapshot(self.feedback)

    def replay(
        self,
        intents: Iterable[Union[IntentLike, Tuple[IntentLike, Optional[int]]]],
    ) -> List[Snapshot]:
        """Apply intents in order; return the snapshot after each one."""
        frames = []
        for item in intents:
            if isinstance(item, tuple):
                self.handle(*item)
            else:
                self.handle(item)
            frames.append(self.snapshot())
        return frames

    @property
    def is_finished(self) -> bool:
        return self.control.completed

    @property
    def is_playing(self) -> bool:
        return self.control.auto_stepping
