"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • playback_controls   – start/pause/step/reset/speed
  • algorithm_selector  – dropdown with complexity summary
  • dataset_generator   – random/preset/import tabs
  • stats_panel         – comparisons, swaps, progress, algorithm extras
  • legend_panel        – color key for the current algorithm
  • comparison_panel    – side-by-side metrics of two runs
  • pseudocode_viewer   – with live line highlighting
  • explanation_panel   – current operation in plain English
  • question_panel      – teaching-mode question / answer feedback
  • mode_toggle         – teaching mode on/off

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

from html import escape
from typing import Any, Dict, List, Optional, Tuple

from algorithms import AlgoInfo
from algorithms.control import MAX_DELAY, MIN_DELAY
from dataset import MAX_SIZE, PRESETS
from engine import ComparisonResult
from ui.canvas import CONFIG


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(
    is_running: bool = False,
    is_paused: bool = False,
    completed: bool = False,
    step_number: int = 0,
    step_delay: int = 300,
    status_text: str = "READY",
) -> str:
    playing = is_running and not is_paused
    play_icon = "⏸" if playing else "▶"
    play_label = "Pause" if playing else ("Restart" if completed else "Start")

    return f"""
    <div class="panel playback-controls">
      <h3>⏯ Playback</h3>
      <div class="button-row">
        <button id="btn-reset" data-intent="reset" title="Reset to the original array">⏮</button>
        <button id="btn-play" data-intent="start_pause" title="{play_label}">{play_icon}</button>
        <button id="btn-step" data-intent="single_step" title="Single step" {'disabled' if is_running or completed else ''}>⏭</button>
      </div>
      <div class="step-info">
        Step <span id="current-step">{step_number}</span>
        <span id="status-badge" class="status-badge">{escape(status_text)}</span>
      </div>
      <div class="speed-control">
        <button id="btn-slower" data-intent="speed_down" title="Slower">−</button>
        <span id="step-delay">{step_delay}</span> ms
        <button id="btn-faster" data-intent="speed_up" title="Faster">+</button>
        <span class="hint">({MIN_DELAY}–{MAX_DELAY} ms)</span>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(
    algorithms: List[AlgoInfo],
    selected_key: str = "bubble",
) -> str:
    options = []
    for algo in algorithms:
        sel = 'selected' if algo.key == selected_key else ''
        options.append(
            f'<option value="{algo.key}" {sel}>{algo.label} — {algo.complexity_time}</option>'
        )

    card = ""
    info = next((a for a in algorithms if a.key == selected_key), None)
    if info is not None:
        card = f"""
        <table class="algo-card">
          <tr><td>Average:</td><td><strong>{info.complexity_time}</strong></td></tr>
          <tr><td>Worst:</td><td><strong>{info.complexity_worst}</strong></td></tr>
          <tr><td>Space:</td><td><strong>{info.complexity_space}</strong></td></tr>
          <tr><td>Stable:</td><td><strong>{'yes' if info.stable else 'no'}</strong></td></tr>
          <tr><td>Questions:</td><td><strong>{info.checkpoint}</strong></td></tr>
        </table>
        <p class="hint">{escape(info.description)}</p>
        <p class="hint pros">+ {escape(info.pros)}</p>
        <p class="hint cons">− {escape(info.cons)}</p>
        """

    return f"""
    <div class="panel algorithm-selector">
      <h3>🧠 Algorithm</h3>
      <select id="algo-selector">
        {''.join(options)}
      </select>
      {card}
    </div>
    """


# ---------------------------------------------------------------------------
# Dataset Generator
# ---------------------------------------------------------------------------
def dataset_generator(active_tab: str = "random", size: int = 20) -> str:
    tabs = ["random", "preset", "import"]
    tab_buttons = []
    for t in tabs:
        active = 'active' if t == active_tab else ''
        tab_buttons.append(f'<button class="tab-btn {active}" data-tab="{t}">{t.capitalize()}</button>')

    preset_options = "".join(
        f'<option value="{p}">{p.replace("_", " ").capitalize()}</option>' for p in PRESETS
    )

    return f"""
    <div class="panel dataset-generator">
      <h3>📦 Dataset</h3>
      <div class="tabs">
        {''.join(tab_buttons)}
      </div>

      <div class="tab-content" data-tab="random" style="display: {'block' if active_tab == 'random' else 'none'};">
        <label>Size: <input type="number" id="rand-size" value="{size}" min="0" max="{MAX_SIZE}"></label>
        <label>Min: <input type="number" id="rand-min" value="1" min="0"></label>
        <label>Max: <input type="number" id="rand-max" value="100" min="0"></label>
        <button id="btn-gen-random" class="btn-secondary">Generate Random</button>
      </div>

      <div class="tab-content" data-tab="preset" style="display: {'block' if active_tab == 'preset' else 'none'};">
        <label>Shape:
          <select id="preset-kind">{preset_options}</select>
        </label>
        <label>Size: <input type="number" id="preset-size" value="{size}" min="0" max="{MAX_SIZE}"></label>
        <button id="btn-gen-preset" class="btn-secondary">Generate Preset</button>
      </div>

      <div class="tab-content" data-tab="import" style="display: {'block' if active_tab == 'import' else 'none'};">
        <textarea id="import-text" rows="5" placeholder="5, 3, 8, 1, 9, 2"></textarea>
        <button id="btn-import" class="btn-secondary">Import Values</button>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Stats Panel
# ---------------------------------------------------------------------------
def stats_panel(
    comparisons: int = 0,
    swaps: int = 0,
    progress: float = 0.0,
    size: int = 0,
    extra: Optional[Dict[str, Any]] = None,
) -> str:
    rows = [
        ("Array Size", size),
        ("Comparisons", comparisons),
        ("Swaps", swaps),
        ("Progress", f"{progress:.1f}%"),
    ]
    for key, value in (extra or {}).items():
        rows.append((key.replace("_", " ").title(), value))

    body = "".join(f"<tr><td>{label}:</td><td><strong>{value}</strong></td></tr>" for label, value in rows)
    return f"""
    <div class="panel stats-panel">
      <h3>📊 Statistics</h3>
      <table>{body}</table>
      <div class="progress-bar"><div class="progress-fill" style="width: {progress:.1f}%;"></div></div>
    </div>
    """


# ---------------------------------------------------------------------------
# Legend
# ---------------------------------------------------------------------------
def legend_panel(legend: List[Tuple[str, str]]) -> str:
    items = []
    for label, state in legend:
        color = CONFIG.bar_colors.get(state, CONFIG.bar_colors["normal"])
        items.append(
            f'<span class="legend-item"><span class="swatch" style="background: {color};"></span>{escape(label)}</span>'
        )
    return f"""<div class="legend">{''.join(items)}</div>"""


# ---------------------------------------------------------------------------
# Comparison Panel (side-by-side)
# ---------------------------------------------------------------------------
def comparison_panel(comp: Optional[ComparisonResult] = None) -> str:
    if not comp:
        return """
        <div class="panel comparison-panel">
          <h3>⚖️ Comparison Mode</h3>
          <p class="placeholder">Run two algorithms on the same dataset to compare.</p>
          <button id="btn-compare" class="btn-secondary">Compare</button>
        </div>
        """

    left = comp.left
    right = comp.right

    def winner_badge(winner_label):
        if winner_label == "tie":
            return "🟰 Tie"
        return f"👑 {winner_label}"

    return f"""
    <div class="panel comparison-panel">
      <h3>⚖️ Comparison: {left.algo_label} vs {right.algo_label}</h3>
      <table class="comparison-table">
        <thead>
          <tr>
            <th>Metric</th>
            <th>{left.algo_label}</th>
            <th>{right.algo_label}</th>
            <th>Winner</th>
          </tr>
        </thead>
        <tbody>
          <tr>
            <td>Comparisons</td>
            <td>{left.comparisons}</td>
            <td>{right.comparisons}</td>
            <td>{winner_badge(comp.winner_comparisons)}</td>
          </tr>
          <tr>
            <td>Swaps</td>
            <td>{left.swaps}</td>
            <td>{right.swaps}</td>
            <td>{winner_badge(comp.winner_swaps)}</td>
          </tr>
          <tr>
            <td>Steps</td>
            <td>{left.total_steps}</td>
            <td>{right.total_steps}</td>
            <td>{winner_badge(comp.winner_steps)}</td>
          </tr>
          <tr>
            <td>Wall Time</td>
            <td>{left.wall_time_ms:.2f} ms</td>
            <td>{right.wall_time_ms:.2f} ms</td>
            <td>—</td>
          </tr>
        </tbody>
      </table>
      <button id="btn-compare" class="btn-secondary">Compare Again</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(
    pseudocode_lines: List[str],
    current_line: int = -1,
) -> str:
    if not pseudocode_lines:
        return """
        <div class="code-block">
          <div style="color: #7d8590; padding: 20px; text-align: center;">
            Select an algorithm to view pseudocode
          </div>
        </div>
        """

    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        highlight = 'highlight' if i == current_line else ''
        lines_html.append(f'<div class="code-line {highlight}" data-line="{i}">{escape(line)}</div>')

    return f"""
    <div class="code-block">
      {''.join(lines_html)}
    </div>
    """


# ---------------------------------------------------------------------------
# Explanation Panel
# ---------------------------------------------------------------------------
def explanation_panel(description: str = "") -> str:
    if not description:
        return """<div class="explanation-text">▶ Press <strong>Start</strong> or <strong>Step</strong> to watch the sort one operation at a time.</div>"""
    return f"""<div class="explanation-text">{escape(description)}</div>"""


# ---------------------------------------------------------------------------
# Question Panel (teaching mode)
# ---------------------------------------------------------------------------
def question_panel(
    question: Optional[Dict[str, Any]] = None,
    feedback: Optional[Dict[str, Any]] = None,
) -> str:
    if question:
        buttons = "".join(
            f'<button class="answer-btn" data-option="{i}">{i + 1}. {escape(opt)}</button>'
            for i, opt in enumerate(question["options"])
        )
        return f"""
        <div class="panel question-panel active">
          <h3>❓ Question</h3>
          <p class="question-text">{escape(question['text'])}</p>
          <div class="answers">{buttons}</div>
        </div>
        """

    if feedback:
        verdict = "✅ Correct!" if feedback["correct"] else "❌ Not quite."
        return f"""
        <div class="panel question-panel">
          <h3>❓ Question</h3>
          <p><strong>{verdict}</strong> {escape(feedback.get('explanation', ''))}</p>
        </div>
        """

    return """<div class="panel question-panel hidden"></div>"""


# ---------------------------------------------------------------------------
# Mode Toggle (teaching on/off)
# ---------------------------------------------------------------------------
def mode_toggle(teaching_mode: bool = True) -> str:
    return f"""
    <div class="panel mode-toggle">
      <h3>🎓 Mode</h3>
      <label>
        <input type="checkbox" id="teaching-mode-toggle" data-intent="toggle_teaching" {'checked' if teaching_mode else ''}>
        Teaching Mode (questions at checkpoints)
      </label>
    </div>
    """
