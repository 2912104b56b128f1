"""
snapshot.py — Render Frame Snapshot
====================================
A Snapshot is a frozen-in-time picture of everything a render sink needs
to draw one frame:

    • The array and the per-index ElementState tags
    • Counters (comparisons / swaps) and the progress percentage
    • Which phase is next and a plain-English description of it
    • Which line of pseudocode is executing right now
    • Run-control flags, status text and key hints
    • The pending teaching question (if any) and the last answer feedback

Design decisions:
  - Snapshot is a plain frozen dataclass built by the engine.  The engine
    is the only writer; the web page, the terminal frontend and the
    Recorder are pure readers.
  - `array` and `states` are tuples, so a Snapshot kept in a trace can
    never alias the engine's live lists.
  - `extra` is a free-form dict so each algorithm can surface its own
    bookkeeping (stack size, current merge width, pass number, …).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from dataset.element import ElementState


@dataclass(frozen=True)
class Snapshot:
    """
    Attributes:
        algo_key        : Registry key of the engine, e.g. "quick".
        title           : Display title.
        step_number     : How many successful step() calls since reset.
        array           : Current values.
        states          : One ElementState per index.
        phase           : Name of the phase the next step will execute.
        description     : Human-readable current operation.
        pseudocode_line : 0-based index into the algorithm's PSEUDOCODE.
        comparisons     : Comparison counter.
        swaps           : Swap / write counter.
        progress        : Percentage in [0, 100].
        status_text     : READY / RUNNING... / PAUSED / …
        controls_hint   : Key hints for the current state.
        legend          : [(label, state_value)] pairs for this algorithm.
        step_delay      : Milliseconds between automatic steps.
        teaching_mode   : Whether checkpoints ask questions.
        is_running      : Run flags, copied from the ControlState.
        is_paused       :
        completed       :
        question        : Pending question as a dict (text/options/…) or None.
        feedback        : Feedback for the most recent answer, or None.
        extra           : Algorithm-specific stats.
    """

    algo_key:         str                           = ""
    title:            str                           = ""
    step_number:      int                           = 0
    array:            Tuple[int, ...]               = ()
    states:           Tuple[ElementState, ...]      = ()
    phase:            str                           = ""
    description:      str                           = ""
    pseudocode_line:  int                           = -1
    comparisons:      int                           = 0
    swaps:            int                           = 0
    progress:         float                         = 0.0
    status_text:      str                           = ""
    controls_hint:    str                           = ""
    legend:           List[Tuple[str, str]]         = field(default_factory=list)
    step_delay:       int                           = 0
    teaching_mode:    bool                          = False
    is_running:       bool                          = False
    is_paused:        bool                          = False
    completed:        bool                          = False
    question:         Optional[Dict[str, Any]]      = None
    feedback:         Optional[Dict[str, Any]]      = None
    extra:            Dict[str, Any]                = field(default_factory=dict)

    @property
    def awaiting_question(self) -> bool:
        return self.question is not None

    def trace_key(self) -> Tuple:
        """The parts of a frame that stepping determines (used to compare runs)."""
        return (self.array, self.states, self.phase, self.comparisons, self.swaps)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algo_key":        self.algo_key,
            "title":           self.title,
            "step_number":     self.step_number,
            "array":           list(self.array),
            "states":          [s.value for s in self.states],
            "phase":           self.phase,
            "description":     self.description,
            "pseudocode_line": self.pseudocode_line,
            "comparisons":     self.comparisons,
            "swaps":           self.swaps,
            "progress":        round(self.progress, 1),
            "status_text":     self.status_text,
            "controls_hint":   self.controls_hint,
            "legend":          [list(item) for item in self.legend],
            "step_delay":      self.step_delay,
            "teaching_mode":   self.teaching_mode,
            "is_running":      self.is_running,
            "is_paused":       self.is_paused,
            "completed":       self.completed,
            "question":        self.question,
            "feedback":        self.feedback,
            "extra":           dict(self.extra),
        }
