"""
ui/
---
Presentation layer.

    from ui import render_bars
    from ui import playback_controls, algorithm_selector, …

The terminal frontend lives in ui.terminal and is imported on demand
(it needs a POSIX tty).
"""

from ui.canvas import render_bars, CanvasConfig

from ui.controls import (
    playback_controls,
    algorithm_selector,
    dataset_generator,
    stats_panel,
    legend_panel,
    comparison_panel,
    pseudocode_viewer,
    explanation_panel,
    question_panel,
    mode_toggle,
)

__all__ = [
    "render_bars",
    "CanvasConfig",
    "playback_controls",
    "algorithm_selector",
    "dataset_generator",
    "stats_panel",
    "legend_panel",
    "comparison_panel",
    "pseudocode_viewer",
    "explanation_panel",
    "question_panel",
    "mode_toggle",
]
