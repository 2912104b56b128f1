"""
engine/
-------
Playback, settings & recording layer.

    from engine import SessionDriver, Intent, Settings, Recorder, compare
"""

from engine.settings import Settings, SETTINGS_ENV, default_path
from engine.session  import SessionDriver, Intent
from engine.recorder import Recorder, RunMetrics, ComparisonResult, compare, compare_algorithms

__all__ = [
    "SessionDriver",
    "Intent",
    "Settings",
    "SETTINGS_ENV",
    "default_path",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
    "compare_algorithms",
]
