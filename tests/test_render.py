import xml.etree.ElementTree as ET

from algorithms import BubbleSort, QuickSort, list_algorithms
from engine import compare_algorithms
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
from ui.canvas import CONFIG


def parse(svg):
    return ET.fromstring(svg)


def bars(svg):
    return [el for el in parse(svg).iter() if el.get("class", "").startswith("bar ")]


def test_one_bar_per_value():
    snap = BubbleSort([5, 3, 8, 1]).snapshot()
    assert len(bars(render_bars(snap))) == 4


def test_bar_heights_follow_values():
    snap = BubbleSort([10, 5, 0]).snapshot()
    heights = [float(b.get("height")) for b in bars(render_bars(snap))]
    assert heights[0] > heights[1] > heights[2] > 0


def test_bars_are_colored_by_state():
    engine = QuickSort([3, 1, 2])
    engine.step()
    svg = render_bars(engine.snapshot())
    fills = {b.get("class").split()[1]: b.get("fill") for b in bars(svg)}
    assert fills["current"] == CONFIG.bar_colors["current"]


def test_empty_canvas():
    assert "No data" in render_bars(None)
    assert "No data" in render_bars(BubbleSort([]).snapshot())


def test_value_labels_hidden_for_narrow_bars():
    snap = BubbleSort(list(range(200))).snapshot()
    svg = render_bars(snap)
    assert "<text" not in svg


def test_playback_disables_step_while_running():
    assert "disabled" in playback_controls(is_running=True)
    assert "disabled" not in playback_controls()
    assert "COMPLETED!" in playback_controls(completed=True, status_text="COMPLETED!")


def test_algorithm_selector_marks_selection():
    html = algorithm_selector(list_algorithms(), "merge")
    assert 'value="merge" selected' in html
    assert "O(n log n)" in html
    assert "Requires O(n) extra space." in html


def test_every_algorithm_has_trade_offs():
    for info in list_algorithms():
        assert info.pros and info.cons, info.key


def test_dataset_generator_lists_presets():
    html = dataset_generator()
    assert "nearly_sorted" in html
    assert 'id="import-text"' in html


def test_stats_panel_shows_extras():
    html = stats_panel(4, 2, 50.0, 8, {"stack_size": 3})
    assert "Stack Size" in html
    assert "50.0%" in html


def test_legend_uses_canvas_colors():
    html = legend_panel([("Sorted", "sorted")])
    assert CONFIG.bar_colors["sorted"] in html


def test_pseudocode_highlight_and_escape():
    html = pseudocode_viewer(["a < b", "c"], current_line=0)
    assert "a &lt; b" in html
    assert 'class="code-line highlight" data-line="0"' in html


def test_explanation_escapes():
    assert "&lt;script&gt;" in explanation_panel("<script>")


def test_question_panel_states():
    question = {"text": "Why?", "options": ["a", "b"], "correct_index": 0, "explanation": ""}
    assert 'data-option="1"' in question_panel(question)
    assert "Correct" in question_panel(None, {"correct": True, "explanation": "yes"})
    assert "hidden" in question_panel()


def test_comparison_panel():
    assert "Compare" in comparison_panel()
    html = comparison_panel(compare_algorithms("bubble", "merge", [4, 3, 2, 1]))
    assert "Bubble Sort vs Merge Sort" in html


def test_mode_toggle():
    assert "checked" in mode_toggle(True)
    assert "checked" not in mode_toggle(False)
