import sys

import pytest

pytest.importorskip("rich")

from rich.console import Console

import main
from algorithms import BubbleSort, QuickSort, require_algorithm
from engine import Intent
from ui.terminal import (
    RawKeyboard,
    TerminalError,
    key_to_intent,
    render_bar_chart,
    render_frame,
    render_intro,
)


@pytest.mark.parametrize("key, expected", [
    (" ", (Intent.START_PAUSE, None)),
    ("s", (Intent.SINGLE_STEP, None)),
    ("S", (Intent.SINGLE_STEP, None)),
    ("r", (Intent.RESET, None)),
    ("t", (Intent.TOGGLE_TEACHING, None)),
    ("+", (Intent.SPEED_UP, None)),
    ("-", (Intent.SPEED_DOWN, None)),
    ("q", (Intent.EXIT, None)),
    ("\x1b", (Intent.EXIT, None)),
    ("1", (Intent.ANSWER_QUIZ, 0)),
    ("9", (Intent.ANSWER_QUIZ, 8)),
])
def test_key_mapping(key, expected):
    assert key_to_intent(key) == expected


@pytest.mark.parametrize("key", ["", "x", "0", None])
def test_unmapped_keys(key):
    assert key_to_intent(key) is None


def render_text(renderable):
    console = Console(width=120, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


def test_frame_shows_status_and_stats():
    engine = QuickSort([5, 3, 8, 1])
    engine.step()
    text = render_text(render_frame(engine.snapshot(), QuickSort.PSEUDOCODE, width=120))
    assert "QUICK SORT VISUALIZER" in text
    assert "READY" in text
    assert "Comparisons" in text
    assert "Pivot" in text


def test_frame_shows_question():
    engine = BubbleSort([2, 1], control=BubbleSort.make_control(teaching_mode=True))
    engine.step()
    engine.step()
    text = render_text(render_frame(engine.snapshot()))
    assert "WAITING FOR QUESTION" in text
    assert "1. " in text


def test_bar_chart_height():
    chart = render_bar_chart(BubbleSort([1, 2, 3]).snapshot(), rows=5, width=40)
    lines = chart.plain.split("\n")
    assert len(lines) == 6
    assert "█" in lines[0]


def test_intro_describes_algorithm_and_teaching_mode():
    text = render_text(render_intro(require_algorithm("merge"), teaching_mode=True))
    assert "What is Merge Sort?" in text
    assert "Advantages: Stable" in text
    assert "Disadvantages: Requires O(n) extra space." in text
    assert "Teaching Mode: ON" in text
    assert "after every merge" in text
    assert "Press any key" in text


def test_intro_shows_teaching_off():
    text = render_text(render_intro(require_algorithm("quick"), teaching_mode=False))
    assert "Teaching Mode: OFF" in text
    assert "O(log n)" in text


def test_raw_keyboard_rejects_non_tty(tmp_path):
    with open(tmp_path / "stdin.txt", "w+") as stream:
        with pytest.raises(TerminalError):
            with RawKeyboard(stream):
                pass


def test_terminal_frontend_without_tty_exits_cleanly(settings_path, tmp_path, monkeypatch, capsys):
    with open(tmp_path / "stdin.txt", "w+") as stream:
        monkeypatch.setattr(sys, "stdin", stream)
        code = main.main(["--terminal", "--values", "3,1,2", "--log-file", str(tmp_path / "run.log")])
    assert code == 2
    assert "not a terminal" in capsys.readouterr().err
