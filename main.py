"""
main.py — Sorting Algorithm Visualizer Flask App
==================================================
The web server that powers the visualizer, plus the command-line launcher
for the terminal frontend.

Routes:
  GET  /                       – main UI
  POST /api/dataset/generate   – generate a random / preset array
  POST /api/dataset/import     – import values from text
  POST /api/config/algo        – switch algorithm (new session driver)
  POST /api/intent             – apply one intent (start/pause, step, …)
  POST /api/tick               – advance if the step delay has elapsed
  GET  /api/state              – current frame (for polling)
  POST /api/compare            – record two algorithms on the dataset

State management:
  The Flask session only holds small JSON-able values:
    • sid             – key into the in-memory driver registry
    • dataset         – serialised Dataset
    • selected_algo
  The live SessionDriver (engine + ControlState) lives in DRIVERS, keyed
  by sid, next to a per-session lock.  Flask serves requests on several
  threads and the page fires /api/tick and /api/intent independently, so
  every route that touches a driver holds that lock for the whole
  handle / tick / render.  DRIVERS is an LRU bounded by
  app.config["MAX_SESSIONS"]; the least recently used session is dropped
  when a new one is created.  Persisted settings (speed, teaching mode, last algorithm) go
  through engine.settings.

Command line:
  python main.py                       – web UI on http://localhost:5000
  python main.py --terminal --algo quick --size 30
"""

from flask import Flask, render_template_string, request, jsonify, session
import argparse
import logging
import secrets
import sys
import os
import threading
from collections import OrderedDict
from contextlib import contextmanager
from typing import Iterator, NamedTuple, Optional

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from dataset import Dataset, DatasetError, MAX_SIZE
from dataset.dataset import DEFAULT_SIZE
from algorithms import REGISTRY, UnknownAlgorithmError, get_algorithm, list_algorithms
from engine import SessionDriver, Intent, Settings, compare_algorithms
from ui import (
    render_bars,
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

logger = logging.getLogger(__name__)

DEFAULT_ALGO = "bubble"

app = Flask(__name__)
app.secret_key = secrets.token_hex(32)
app.config.setdefault("SETTINGS_PATH", None)   # None → engine.settings.default_path()
app.config.setdefault("MAX_SESSIONS", 64)


class DriverEntry(NamedTuple):
    driver: SessionDriver
    lock:   threading.Lock


# sid → DriverEntry, least recently used first
DRIVERS: "OrderedDict[str, DriverEntry]" = OrderedDict()
_drivers_lock = threading.Lock()


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def load_settings() -> Settings:
    return Settings.load(app.config["SETTINGS_PATH"])


def save_delta(delta: Optional[dict]) -> None:
    """Fold a settings delta into the persisted settings."""
    if not delta:
        return
    load_settings().apply(delta).save(app.config["SETTINGS_PATH"])


def get_dataset() -> Dataset:
    """Deserialise dataset from session, or create default."""
    if "dataset" not in session:
        session["dataset"] = Dataset.generate_random(DEFAULT_SIZE, seed=42).to_dict()
    return Dataset.from_dict(session["dataset"])


def save_dataset(dataset: Dataset):
    session["dataset"] = dataset.to_dict()


def selected_algo() -> str:
    key = session.get("selected_algo")
    if key not in REGISTRY:
        key = load_settings().last_algorithm
    if key not in REGISTRY:
        key = DEFAULT_ALGO
    return key


def session_id() -> str:
    if "sid" not in session:
        session["sid"] = secrets.token_hex(8)
    return session["sid"]


def _evict_idle() -> None:
    # caller holds _drivers_lock
    while len(DRIVERS) > app.config["MAX_SESSIONS"]:
        sid, _ = DRIVERS.popitem(last=False)
        logger.info("Dropped least recently used session %s", sid)


def new_driver(algo_key: Optional[str] = None) -> DriverEntry:
    """Replace this session's driver with a fresh one on the current dataset."""
    algo_key = algo_key or selected_algo()
    driver = SessionDriver.from_settings(algo_key, get_dataset().values, load_settings())
    session["selected_algo"] = algo_key
    entry = DriverEntry(driver, threading.Lock())
    sid = session_id()
    with _drivers_lock:
        DRIVERS.pop(sid, None)
        DRIVERS[sid] = entry
        _evict_idle()
    return entry


def get_entry() -> DriverEntry:
    sid = session_id()
    with _drivers_lock:
        entry = DRIVERS.get(sid)
        if entry is not None:
            DRIVERS.move_to_end(sid)
    return entry if entry is not None else new_driver()


@contextmanager
def locked_driver(entry: Optional[DriverEntry] = None) -> Iterator[SessionDriver]:
    """Hold the session's lock while a request reads or mutates its driver."""
    entry = entry or get_entry()
    with entry.lock:
        yield entry.driver


def drop_driver(entry: DriverEntry) -> None:
    sid = session_id()
    with _drivers_lock:
        if DRIVERS.get(sid) is entry:
            del DRIVERS[sid]


def frame_payload(driver: SessionDriver) -> dict:
    """Everything the page needs to redraw after a state change."""
    snap = driver.snapshot()
    info = get_algorithm(driver.algo_key)
    return {
        "frame":       snap.to_dict(),
        "svg":         render_bars(snap),
        "playback":    playback_controls(
            is_running=snap.is_running,
            is_paused=snap.is_paused,
            completed=snap.completed,
            step_number=snap.step_number,
            step_delay=snap.step_delay,
            status_text=snap.status_text,
        ),
        "stats":       stats_panel(snap.comparisons, snap.swaps, snap.progress,
                                   len(snap.array), snap.extra),
        "legend":      legend_panel(snap.legend),
        "pseudocode":  pseudocode_viewer(info.pseudocode if info else [], snap.pseudocode_line),
        "explanation": explanation_panel(snap.description if snap.step_number else ""),
        "question":    question_panel(snap.question, snap.feedback),
        "mode_toggle": mode_toggle(snap.teaching_mode),
    }


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    dataset = get_dataset()
    with locked_driver() as driver:
        payload = frame_payload(driver)
        algo_key = driver.algo_key

    html = render_template_string(INDEX_TEMPLATE,
        svg=payload["svg"],
        playback=payload["playback"],
        algo_selector=algorithm_selector(list_algorithms(), algo_key),
        dataset_gen=dataset_generator(size=dataset.size),
        stats=payload["stats"],
        legend=payload["legend"],
        comparison=comparison_panel(),
        pseudocode=payload["pseudocode"],
        explanation=payload["explanation"],
        question=payload["question"],
        mode_toggle=payload["mode_toggle"],
        dataset_name=dataset.name,
        algo_options=list_algorithms(),
    )
    return html


# ---------------------------------------------------------------------------
# API: Dataset
# ---------------------------------------------------------------------------
@app.route("/api/dataset/generate", methods=["POST"])
def api_dataset_generate():
    data = request.get_json(silent=True) or {}
    mode = data.get("mode", "random")

    try:
        size = int(data.get("size", DEFAULT_SIZE))
        value_range = (int(data.get("min", 1)), int(data.get("max", 100)))
        if not 0 <= size <= MAX_SIZE:
            raise DatasetError(f"Size must be between 0 and {MAX_SIZE}")
        if mode == "random":
            ds = Dataset.generate_random(size, value_range, seed=data.get("seed"))
        elif mode == "preset":
            ds = Dataset.generate_preset(data.get("kind", "random"), size, value_range,
                                         seed=data.get("seed"))
        else:
            return jsonify({"error": "Unknown mode"}), 400
    except (TypeError, ValueError) as e:
        return jsonify({"error": str(e)}), 400

    save_dataset(ds)
    logger.info("Generated dataset %r", ds)
    with locked_driver(new_driver()) as driver:
        return jsonify({"dataset": ds.to_dict(), **frame_payload(driver)})


@app.route("/api/dataset/import", methods=["POST"])
def api_dataset_import():
    data = request.get_json(silent=True) or {}
    text = data.get("text", "")

    try:
        ds = Dataset.from_text(text)
    except DatasetError as e:
        return jsonify({"error": str(e)}), 400

    save_dataset(ds)
    logger.info("Imported dataset %r", ds)
    with locked_driver(new_driver()) as driver:
        return jsonify({"dataset": ds.to_dict(), **frame_payload(driver)})


# ---------------------------------------------------------------------------
# API: Config Changes
# ---------------------------------------------------------------------------
@app.route("/api/config/algo", methods=["POST"])
def api_config_algo():
    data = request.get_json(silent=True) or {}
    algo_key = data.get("algo_key", DEFAULT_ALGO)
    try:
        entry = new_driver(algo_key)
    except UnknownAlgorithmError as e:
        return jsonify({"error": str(e)}), 400

    save_delta({"last_algorithm": algo_key})
    with locked_driver(entry) as driver:
        return jsonify({
            "algo_selector": algorithm_selector(list_algorithms(), algo_key),
            **frame_payload(driver),
        })


# ---------------------------------------------------------------------------
# API: Intents & Ticks
# ---------------------------------------------------------------------------
@app.route("/api/intent", methods=["POST"])
def api_intent():
    data = request.get_json(silent=True) or {}
    try:
        intent = Intent(data.get("intent"))
    except ValueError:
        return jsonify({"error": f"Unknown intent: {data.get('intent')!r}"}), 400

    option = data.get("option")
    if option is not None:
        try:
            option = int(option)
        except (TypeError, ValueError):
            return jsonify({"error": "option must be an integer"}), 400

    entry = get_entry()
    with locked_driver(entry) as driver:
        delta = driver.handle(intent, option)
        payload = frame_payload(driver)
        exited = driver.exited

    save_delta(delta)
    if exited:
        # a fresh driver replaces the exited one on the next request
        drop_driver(entry)
    return jsonify({"delta": delta, **payload})


@app.route("/api/tick", methods=["POST"])
def api_tick():
    with locked_driver() as driver:
        stepped = driver.tick()
        payload = frame_payload(driver)
    return jsonify({"stepped": stepped, **payload})


@app.route("/api/state")
def api_state():
    with locked_driver() as driver:
        payload = frame_payload(driver)
    return jsonify({"dataset": get_dataset().to_dict(), **payload})


# ---------------------------------------------------------------------------
# API: Comparison Mode
# ---------------------------------------------------------------------------
@app.route("/api/compare", methods=["POST"])
def api_compare():
    data = request.get_json(silent=True) or {}
    left = data.get("left", selected_algo())
    right = data.get("right", "quick" if left != "quick" else "merge")
    try:
        comp = compare_algorithms(left, right, get_dataset().values)
    except UnknownAlgorithmError as e:
        return jsonify({"error": str(e)}), 400
    return jsonify({"comparison": comp.to_dict(), "html": comparison_panel(comp)})


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Sorting Algorithm Visualizer</title>
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
  <link href="https://fonts.googleapis.com/css2?family=JetBrains+Mono:wght@400;500;700&family=DM+Sans:wght@400;500;700&display=swap" rel="stylesheet">
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --accent-cyan: #0ea5e9;
      --accent-teal: #06b6d4;
      --accent-emerald: #10b981;
      --accent-amber: #f59e0b;
      --accent-rose: #f43f5e;
      --glow-cyan: rgba(14, 165, 233, 0.4);
    }

    body {
      font-family: 'DM Sans', -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
      overflow: hidden;
    }

    #sidebar {
      width: 340px;
      background: linear-gradient(180deg, var(--bg-dark) 0%, var(--bg-darker) 100%);
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 24px 16px;
    }

    #main { flex: 1; display: flex; flex-direction: column; }

    #canvas-container {
      flex: 1;
      display: flex;
      flex-direction: column;
      align-items: center;
      justify-content: center;
      gap: 12px;
      border-bottom: 1px solid var(--border);
    }
    #canvas-svg { max-width: 100%; max-height: 100%; }
    #dataset-name { color: var(--text-secondary); font-size: 13px; }

    #bottom-panel {
      display: grid;
      grid-template-columns: 1fr 1fr;
      gap: 20px;
      padding: 20px;
      background: var(--bg-dark);
      min-height: 280px;
      max-height: 380px;
    }
    #pseudocode-container, #explanation-container {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 20px;
      overflow-y: auto;
    }
    #bottom-panel h3 {
      font-size: 14px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
      margin-bottom: 16px;
      color: var(--accent-cyan);
    }

    .code-block {
      background: var(--bg-darker);
      border: 1px solid var(--border);
      border-radius: 8px;
      padding: 16px;
      font-family: 'JetBrains Mono', 'Courier New', monospace;
      font-size: 13px;
      line-height: 1.6;
      white-space: pre;
    }
    .code-line { padding: 2px 12px; border-radius: 6px; }
    .code-line.highlight {
      background: linear-gradient(90deg, rgba(6, 182, 212, 0.15) 0%, transparent 100%);
      border-left: 3px solid var(--accent-cyan);
      box-shadow: 0 0 20px var(--glow-cyan);
    }
    .explanation-text { color: var(--text-secondary); line-height: 1.8; font-size: 14px; }
    .explanation-text strong { color: var(--text-primary); }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 18px;
      margin-bottom: 16px;
    }
    .panel.hidden { display: none; }
    .panel h3 {
      font-size: 13px;
      margin-bottom: 14px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
    }

    .button-row, .speed-control { display: flex; gap: 8px; align-items: center; margin-bottom: 12px; }
    button {
      background: linear-gradient(135deg, var(--accent-cyan), var(--accent-teal));
      color: #fff;
      border: none;
      padding: 10px 16px;
      border-radius: 8px;
      cursor: pointer;
      font-size: 13px;
      font-weight: 600;
    }
    button:disabled { opacity: 0.4; cursor: default; }
    .btn-secondary { background: var(--bg-dark); border: 1px solid var(--border); }

    select, input[type="number"], textarea {
      width: 100%;
      background: var(--bg-darker);
      color: var(--text-primary);
      border: 1px solid var(--border);
      border-radius: 8px;
      padding: 8px 10px;
      margin-bottom: 10px;
    }
    label { display: block; font-size: 13px; color: var(--text-secondary); margin-bottom: 8px; }

    .tabs { display: flex; gap: 6px; margin-bottom: 12px; }
    .tab-btn { background: var(--bg-dark); border: 1px solid var(--border); padding: 6px 10px; }
    .tab-btn.active { border-color: var(--accent-cyan); }

    .step-info { font-size: 13px; color: var(--text-secondary); margin-bottom: 10px; }
    .status-badge {
      margin-left: 8px;
      padding: 2px 8px;
      border-radius: 4px;
      background: rgba(16, 185, 129, 0.15);
      color: var(--accent-emerald);
      font-weight: 700;
    }

    table { width: 100%; font-size: 13px; border-collapse: collapse; }
    table td, table th { padding: 4px 6px; }
    table td:first-child { color: var(--text-secondary); }
    .hint { font-size: 12px; color: var(--text-secondary); }

    .progress-bar { height: 6px; background: var(--bg-darker); border-radius: 3px; margin-top: 10px; }
    .progress-fill { height: 100%; background: var(--accent-emerald); border-radius: 3px; }

    .legend { display: flex; flex-wrap: wrap; gap: 14px; font-size: 12px; color: var(--text-secondary); }
    .swatch { display: inline-block; width: 10px; height: 10px; border-radius: 2px; margin-right: 5px; }

    .question-panel.active { border-color: var(--accent-amber); }
    .question-text { margin-bottom: 12px; }
    .answers { display: flex; flex-direction: column; gap: 8px; }
    .answer-btn { text-align: left; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="mode-toggle">{{ mode_toggle|safe }}</div>
    <div id="algo-box">{{ algo_selector|safe }}</div>
    <div id="playback">{{ playback|safe }}</div>
    <div id="question">{{ question|safe }}</div>
    <div id="stats">{{ stats|safe }}</div>
    <div id="dataset-gen">{{ dataset_gen|safe }}</div>
    <div id="comparison">{{ comparison|safe }}</div>
  </div>

  <div id="main">
    <div id="canvas-container">
      <div id="canvas-svg">{{ svg|safe }}</div>
      <div id="legend">{{ legend|safe }}</div>
      <div id="dataset-name">{{ dataset_name }}</div>
    </div>

    <div id="bottom-panel">
      <div id="pseudocode-container">
        <h3>Pseudocode</h3>
        <div id="pseudocode">{{ pseudocode|safe }}</div>
      </div>
      <div id="explanation-container">
        <h3>Current Operation</h3>
        <div id="explanation">{{ explanation|safe }}</div>
      </div>
    </div>
  </div>

  <script>
    // API helpers
    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data),
      });
      return await res.json();
    }

    const PANELS = ['playback', 'stats', 'legend', 'pseudocode', 'explanation', 'question', 'mode_toggle'];
    let timer = null;

    function apply(data) {
      if (data.error) { alert(data.error); return; }
      if (data.svg) document.getElementById('canvas-svg').innerHTML = data.svg;
      PANELS.forEach(p => {
        if (data[p] !== undefined) document.getElementById(p.replace('_', '-')).innerHTML = data[p];
      });
      if (data.algo_selector) document.getElementById('algo-box').innerHTML = data.algo_selector;
      if (data.dataset) document.getElementById('dataset-name').textContent = data.dataset.name;
      if (data.frame) schedule(data.frame);
    }

    // Poll /api/tick while the run is auto-stepping; the server owns the delay.
    function schedule(frame) {
      clearTimeout(timer);
      const live = frame.is_running && !frame.is_paused && !frame.completed && !frame.question;
      if (live) timer = setTimeout(async () => apply(await post('/api/tick', {})), frame.step_delay);
    }

    // Intents: any element with data-intent, answers with data-option
    document.addEventListener('click', async (e) => {
      const el = e.target.closest('[data-intent], [data-option]');
      if (!el) return;
      if (el.dataset.option !== undefined) {
        apply(await post('/api/intent', {intent: 'answer_quiz', option: +el.dataset.option}));
      } else {
        apply(await post('/api/intent', {intent: el.dataset.intent}));
      }
    });

    // Keyboard mirrors the terminal frontend
    const KEYS = {' ': 'start_pause', 's': 'single_step', 'r': 'reset', 't': 'toggle_teaching',
                  '+': 'speed_up', '=': 'speed_up', '-': 'speed_down'};
    document.addEventListener('keydown', async (e) => {
      if (['INPUT', 'TEXTAREA', 'SELECT'].includes(e.target.tagName)) return;
      const k = e.key.toLowerCase();
      if (k >= '1' && k <= '9') {
        apply(await post('/api/intent', {intent: 'answer_quiz', option: +k - 1}));
      } else if (KEYS[k]) {
        e.preventDefault();
        apply(await post('/api/intent', {intent: KEYS[k]}));
      }
    });

    // Tab switching for dataset generator
    document.addEventListener('click', (e) => {
      const btn = e.target.closest('.tab-btn');
      if (!btn) return;
      const tab = btn.dataset.tab;
      document.querySelectorAll('.tab-btn').forEach(b => b.classList.remove('active'));
      btn.classList.add('active');
      document.querySelectorAll('.tab-content').forEach(c => c.style.display = 'none');
      document.querySelector(`.tab-content[data-tab="${tab}"]`).style.display = 'block';
    });

    // Dataset generation
    document.getElementById('btn-gen-random')?.addEventListener('click', async () => {
      apply(await post('/api/dataset/generate', {
        mode: 'random',
        size: +document.getElementById('rand-size').value,
        min: +document.getElementById('rand-min').value,
        max: +document.getElementById('rand-max').value,
      }));
    });
    document.getElementById('btn-gen-preset')?.addEventListener('click', async () => {
      apply(await post('/api/dataset/generate', {
        mode: 'preset',
        kind: document.getElementById('preset-kind').value,
        size: +document.getElementById('preset-size').value,
      }));
    });
    document.getElementById('btn-import')?.addEventListener('click', async () => {
      apply(await post('/api/dataset/import', {text: document.getElementById('import-text').value}));
    });

    // Algorithm selector
    document.addEventListener('change', async (e) => {
      if (e.target.id === 'algo-selector') {
        apply(await post('/api/config/algo', {algo_key: e.target.value}));
      }
    });

    // Comparison mode: current algorithm vs the one picked in the prompt
    document.addEventListener('click', async (e) => {
      if (e.target.id !== 'btn-compare') return;
      const left = document.getElementById('algo-selector').value;
      const right = prompt('Compare against ({{ algo_options|map(attribute="key")|join(", ") }}):', left === 'quick' ? 'merge' : 'quick');
      if (!right) return;
      const data = await post('/api/compare', {left, right});
      if (data.error) { alert(data.error); return; }
      document.getElementById('comparison').innerHTML = data.html;
    });
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Steppable sorting algorithm visualizer")
    parser.add_argument("--terminal", action="store_true", help="run the terminal frontend instead of the web UI")
    parser.add_argument("--no-intro", action="store_true", help="skip the algorithm intro screen")
    parser.add_argument("--algo", choices=sorted(REGISTRY), help="algorithm (defaults to the last one used)")
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE, help=f"array size (0-{MAX_SIZE})")
    parser.add_argument("--values", help='explicit values, e.g. "5,3,8,1"')
    parser.add_argument("--seed", type=int, help="seed for the random array")
    parser.add_argument("--settings", help="settings file (overrides $SORTVIZ_SETTINGS)")
    parser.add_argument("--log-level", default="INFO", help="DEBUG, INFO, WARNING, …")
    parser.add_argument("--log-file", default="sortviz.log", help="log file for the terminal frontend")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=5000)
    return parser.parse_args(argv)


def run_terminal_frontend(args: argparse.Namespace) -> int:
    from ui.terminal import TerminalError, run_terminal

    # stdout belongs to the screen
    logging.basicConfig(filename=args.log_file, level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        if args.values:
            dataset = Dataset.from_text(args.values)
        else:
            dataset = Dataset.generate_random(args.size, seed=args.seed)
    except DatasetError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    settings = Settings.load(args.settings)
    algo_key = args.algo or settings.last_algorithm or DEFAULT_ALGO
    if algo_key not in REGISTRY:
        algo_key = DEFAULT_ALGO
    driver = SessionDriver.from_settings(algo_key, dataset.values, settings)
    try:
        run_terminal(driver, settings, settings_path=args.settings, show_intro=not args.no_intro)
    except TerminalError as e:
        logger.error("Terminal frontend unavailable: %s", e)
        print(f"error: {e} (run from an interactive terminal, or drop --terminal for the web UI)",
              file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        logger.info("Interrupted")
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.terminal:
        return run_terminal_frontend(args)

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app.config["SETTINGS_PATH"] = args.settings
    print("=" * 60)
    print("  Sorting Algorithm Visualizer")
    print("  Starting Flask server...")
    print(f"  Open http://{args.host}:{args.port}")
    print("=" * 60)
    app.run(host=args.host, port=args.port, debug=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
