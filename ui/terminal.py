"""
terminal.py — Terminal Frontend
================================
Full-screen terminal visualizer: a `rich` Live display for output and raw
(cbreak) keyboard input for control.

    driver = SessionDriver.from_settings("quick", values, settings)
    run_terminal(driver, settings)

Keys:
    SPACE  start / pause (restart once completed)
    S      single step (before the run is started)
    R      reset
    T      teaching mode on/off
    + / -  faster / slower
    1-9    answer the pending question
    ESC/Q  quit

Before the first frame an intro card describes the algorithm, its
trade-offs and whether teaching mode is on.  Any key continues, Q/ESC
quits.

The loop is cooperative: wait for a key for at most as long as the next
step is due, apply the intent, tick the driver, redraw.  Raw mode and the
alternate screen are restored on every exit path.

POSIX only (termios).  Without a tty, RawKeyboard raises TerminalError.
"""

import logging
import os
import select
import sys
from typing import Any, List, Optional, Tuple

from rich import box
from rich.console import Console, Group
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from algorithms import AlgoInfo, Snapshot, require_algorithm
from engine import Intent, SessionDriver, Settings

logger = logging.getLogger(__name__)

# state value → rich color
STATE_COLORS = {
    "normal":          "cyan",
    "comparing":       "magenta",
    "swapping":        "red",
    "current":         "yellow",
    "selected":        "bright_white",
    "partition_left":  "blue",
    "partition_right": "dark_orange",
    "sorted":          "green",
}

KEY_INTENTS = {
    " ":    Intent.START_PAUSE,
    "s":    Intent.SINGLE_STEP,
    "r":    Intent.RESET,
    "t":    Intent.TOGGLE_TEACHING,
    "+":    Intent.SPEED_UP,
    "=":    Intent.SPEED_UP,
    "-":    Intent.SPEED_DOWN,
    "_":    Intent.SPEED_DOWN,
    "q":    Intent.EXIT,
    "\x1b": Intent.EXIT,
}

BAR_ROWS  = 14
IDLE_WAIT = 0.25   # seconds to block on input while nothing is scheduled


def key_to_intent(key: str) -> Optional[Tuple[Intent, Optional[int]]]:
    """Map one key press to (intent, option).  Unknown keys map to None."""
    if not key:
        return None
    if key in "123456789" and len(key) == 1:
        return Intent.ANSWER_QUIZ, int(key) - 1
    intent = KEY_INTENTS.get(key.lower())
    if intent is None:
        return None
    return intent, None


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------
def render_bar_chart(snapshot: Snapshot, rows: int = BAR_ROWS, width: int = 100) -> Text:
    """Vertical bar chart as colored block characters."""
    text = Text()
    n = len(snapshot.array)
    if n == 0:
        text.append("(empty array)", style="dim")
        return text

    col = max(1, min(3, width // n - 1)) if n <= width else 1
    top = max(max(snapshot.array), 1)
    heights = [max(1, round(v / top * rows)) if v else 0 for v in snapshot.array]

    for row in range(rows, 0, -1):
        for i, h in enumerate(heights[:width]):
            style = STATE_COLORS.get(snapshot.states[i].value, "cyan")
            text.append(("█" * col) if h >= row else (" " * col), style=style)
            if col > 1:
                text.append(" ")
        text.append("\n")
    if col >= 2:
        for v in snapshot.array[:width]:
            text.append(str(v)[-col:].rjust(col) + " ", style="dim")
    return text


def _legend(snapshot: Snapshot) -> Text:
    text = Text()
    for label, state in snapshot.legend:
        text.append("■ ", style=STATE_COLORS.get(state, "cyan"))
        text.append(f"{label}   ")
    return text


def _stats(snapshot: Snapshot) -> Table:
    table = Table(box=None, show_header=False, padding=(0, 2))
    table.add_column(style="dim")
    table.add_column(style="bold")
    table.add_row("Size", str(len(snapshot.array)))
    table.add_row("Comparisons", str(snapshot.comparisons))
    table.add_row("Swaps", str(snapshot.swaps))
    table.add_row("Progress", f"{snapshot.progress:.1f}%")
    table.add_row("Delay", f"{snapshot.step_delay} ms")
    table.add_row("Teaching", "on" if snapshot.teaching_mode else "off")
    for key, value in snapshot.extra.items():
        table.add_row(key.replace("_", " ").title(), str(value))
    return table


def _pseudocode(lines: List[str], current: int) -> Text:
    text = Text()
    for i, line in enumerate(lines):
        if i == current:
            text.append(f"▶ {line}\n", style="bold black on yellow")
        else:
            text.append(f"  {line}\n", style="dim")
    return text


def _question(snapshot: Snapshot) -> Optional[Panel]:
    if snapshot.question:
        body = Text(snapshot.question["text"] + "\n\n", style="bold")
        for i, option in enumerate(snapshot.question["options"]):
            body.append(f"  {i + 1}. {option}\n")
        return Panel(body, title="Question", border_style="yellow", box=box.ROUNDED)
    if snapshot.feedback:
        fb = snapshot.feedback
        verdict = Text("Correct! " if fb["correct"] else "Not quite. ",
                       style="bold green" if fb["correct"] else "bold red")
        verdict.append(fb.get("explanation", ""))
        return Panel(verdict, title="Answer", border_style="green" if fb["correct"] else "red",
                     box=box.ROUNDED)
    return None


def render_frame(snapshot: Snapshot, pseudocode: Optional[List[str]] = None, width: int = 100) -> Panel:
    """Everything on screen for one Snapshot, as a single rich renderable."""
    status_style = "bold yellow" if snapshot.awaiting_question else (
        "bold green" if snapshot.completed else "bold cyan")
    header = Text()
    header.append(snapshot.status_text, style=status_style)
    header.append(f"   step {snapshot.step_number}   ", style="dim")
    header.append(snapshot.description)

    side = Table.grid(padding=(0, 4))
    side.add_row(_stats(snapshot), _pseudocode(pseudocode or [], snapshot.pseudocode_line))

    parts: List[Any] = [header, Text(), render_bar_chart(snapshot, width=width - 4), _legend(snapshot), Text(), side]
    question = _question(snapshot)
    if question is not None:
        parts.append(question)
    parts.append(Text(snapshot.controls_hint, style="dim"))

    return Panel(Group(*parts), title=snapshot.title, border_style="cyan", box=box.HEAVY)


def render_intro(info: AlgoInfo, teaching_mode: bool) -> Panel:
    """The screen shown before a run: what the algorithm is, its trade-offs, teaching mode."""
    body = Text()
    body.append(f"What is {info.label}?\n\n", style="bold cyan")
    body.append(f"{info.description}\n\n")

    facts = Table(box=None, show_header=False, padding=(0, 2))
    facts.add_column(style="dim")
    facts.add_column(style="bold")
    facts.add_row("Average", info.complexity_time)
    facts.add_row("Worst", info.complexity_worst)
    facts.add_row("Space", info.complexity_space)
    facts.add_row("Stable", "yes" if info.stable else "no")

    trade_offs = Text()
    trade_offs.append("Advantages: ", style="bold green")
    trade_offs.append(f"{info.pros}\n")
    trade_offs.append("Disadvantages: ", style="bold red")
    trade_offs.append(f"{info.cons}\n")

    teaching = Text()
    teaching.append(f"Teaching Mode: {'ON' if teaching_mode else 'OFF'}", style="bold yellow")
    teaching.append(f" (toggle with T). Questions are asked {info.checkpoint}.")

    hint = Text("Press any key to continue... (Q to quit)", style="dim")
    parts = [body, facts, Text(), trade_offs, teaching, Text(), hint]
    return Panel(Group(*parts), title=info.label.upper(), border_style="cyan", box=box.HEAVY)


# ---------------------------------------------------------------------------
# Raw keyboard input
# ---------------------------------------------------------------------------
class TerminalError(RuntimeError):
    """Raised when stdin cannot be switched into raw mode (not a tty, no termios)."""


class RawKeyboard:
    """
    Context manager that puts stdin into cbreak mode and restores the
    previous terminal attributes on exit.
    """

    def __init__(self, stream=None):
        self.stream = stream or sys.stdin
        self._fd: Optional[int] = None
        self._saved = None

    def __enter__(self) -> "RawKeyboard":
        try:
            import termios
            import tty
        except ImportError as exc:
            raise TerminalError("the terminal frontend needs termios (POSIX only)") from exc

        try:
            self._fd = self.stream.fileno()
            if not os.isatty(self._fd):
                raise TerminalError("stdin is not a terminal")
            self._saved = termios.tcgetattr(self._fd)
            tty.setcbreak(self._fd)
        except (OSError, ValueError, termios.error) as exc:
            raise TerminalError(f"cannot put stdin into raw mode: {exc}") from exc
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        import termios
        if self._saved is not None:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved)
            self._saved = None

    def read_key(self, timeout: Optional[float]) -> Optional[str]:
        """Block for up to `timeout` seconds; return one key or None."""
        ready, _, _ = select.select([self._fd], [], [], timeout)
        if not ready:
            return None
        key = os.read(self._fd, 1).decode(errors="ignore")
        if key == "\x1b":
            # arrow keys and friends arrive as ESC [ …; swallow the rest
            rest = self._drain()
            if rest:
                return None
        return key

    def _drain(self) -> str:
        chunks = []
        while select.select([self._fd], [], [], 0.01)[0]:
            chunks.append(os.read(self._fd, 16).decode(errors="ignore"))
        return "".join(chunks)


# ---------------------------------------------------------------------------
# Main loop
# ---------------------------------------------------------------------------
def run_terminal(
    driver: SessionDriver,
    settings: Optional[Settings] = None,
    settings_path=None,
    console: Optional[Console] = None,
    show_intro: bool = True,
) -> Settings:
    """Run the interactive loop until EXIT.  Returns the final settings."""
    console = console or Console()
    settings = settings or Settings()
    info = require_algorithm(driver.algo_key)
    pseudocode = info.pseudocode

    def apply(mapped) -> None:
        nonlocal settings
        delta = driver.handle(*mapped)
        if delta:
            settings = settings.apply(delta)
            settings.save(settings_path)

    def frame():
        return render_frame(driver.snapshot(), pseudocode, width=console.size.width)

    logger.info("Terminal session started: %s, n=%d", driver.algo_key, len(driver.engine.array))
    first = render_intro(info, driver.control.teaching_mode) if show_intro else frame()
    with RawKeyboard() as keyboard, Live(first, console=console, screen=True,
                                          auto_refresh=False) as live:
        if show_intro:
            key = None
            while not key:
                key = keyboard.read_key(None)
            mapped = key_to_intent(key)
            if mapped is not None and mapped[0] is Intent.EXIT:
                apply(mapped)
            live.update(frame(), refresh=True)

        while not driver.exited:
            wait = driver.seconds_until_next_step()
            key = keyboard.read_key(IDLE_WAIT if wait is None else min(wait, IDLE_WAIT))
            mapped = key_to_intent(key) if key else None
            if mapped is not None:
                apply(mapped)
            driver.tick()
            live.update(frame(), refresh=True)

    logger.info("Terminal session ended")
    return settings
