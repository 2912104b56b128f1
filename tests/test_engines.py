import functools
import random

import pytest

from algorithms import (
    REGISTRY,
    BubbleSort,
    InsertionSort,
    MergeSort,
    QuickSort,
    QuickPhase,
    MergePhase,
    create_engine,
)
from dataset import ElementState

ALGOS = sorted(REGISTRY)

FIXED_INPUTS = [
    [2, 1],
    [1, 2],
    [5, 3, 8, 1],
    [3, 1, 3, 2],
    [1, 2, 3, 4, 5, 6],
    [6, 5, 4, 3, 2, 1],
    [7, 7, 7, 7],
    [0, 100, 0, 100, 50],
    [9, 1, 8, 2, 7, 3, 6, 4, 5],
]


def random_inputs(count=25, max_len=40):
    rng = random.Random(1234)
    return [[rng.randint(0, 50) for _ in range(rng.randint(2, max_len))] for _ in range(count)]


def run_to_end(engine, limit=200_000):
    steps = 0
    while engine.step():
        steps += 1
        assert steps < limit, "engine did not terminate"
    return steps


def trace(engine):
    frames = [engine.snapshot().trace_key()]
    while engine.step():
        frames.append(engine.snapshot().trace_key())
    frames.append(engine.snapshot().trace_key())
    return frames


# ---------------------------------------------------------------------------
# Sort correctness
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("algo", ALGOS)
@pytest.mark.parametrize("values", FIXED_INPUTS + random_inputs())
def test_sorts_every_input(algo, values):
    engine = create_engine(algo, values)
    run_to_end(engine)
    assert engine.array == sorted(values)
    assert engine.control.completed
    assert all(s is ElementState.SORTED for s in engine.states)


@pytest.mark.parametrize("algo", ALGOS)
def test_input_list_is_not_mutated(algo):
    values = [4, 2, 3, 1]
    engine = create_engine(algo, values)
    run_to_end(engine)
    assert values == [4, 2, 3, 1]
    assert engine.original == [4, 2, 3, 1]


# ---------------------------------------------------------------------------
# Counters
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("algo", ALGOS)
def test_counters_never_decrease(algo):
    engine = create_engine(algo, [9, 4, 7, 1, 8, 2, 2, 6])
    last = (0, 0)
    while engine.step():
        now = (engine.control.comparisons, engine.control.swaps)
        assert now[0] >= last[0] and now[1] >= last[1]
        last = now
    assert engine.control.comparisons > 0


@pytest.mark.parametrize("algo", ALGOS)
def test_reset_zeroes_counters(algo):
    engine = create_engine(algo, [3, 2, 1])
    run_to_end(engine)
    engine.reset()
    assert engine.control.comparisons == 0
    assert engine.control.swaps == 0
    assert not engine.control.completed
    assert engine.array == [3, 2, 1]
    assert engine.step_number == 0


@pytest.mark.parametrize("algo, comparisons, swaps", [
    ("bubble", 3, 3),
    ("insertion", 3, 3),
])
def test_reversed_three_counts(algo, comparisons, swaps):
    engine = create_engine(algo, [3, 2, 1])
    run_to_end(engine)
    assert engine.control.comparisons == comparisons
    assert engine.control.swaps == swaps


def test_merge_counts_writes_and_open_comparisons():
    engine = MergeSort([3, 1, 3, 2])
    run_to_end(engine)
    assert engine.control.comparisons == 5
    assert engine.control.swaps == 8
    assert engine.merges == 3


def test_bubble_skips_equal_neighbours():
    engine = BubbleSort([2, 2, 2])
    run_to_end(engine)
    assert engine.control.swaps == 0
    assert engine.control.comparisons == 3


# ---------------------------------------------------------------------------
# Completion
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("algo", ALGOS)
def test_completion_is_idempotent(algo):
    engine = create_engine(algo, [5, 1, 4, 2, 3])
    run_to_end(engine)
    array, states = list(engine.array), list(engine.states)
    counters = (engine.control.comparisons, engine.control.swaps)
    for _ in range(5):
        assert engine.step() is False
    assert engine.array == array
    assert engine.states == states
    assert (engine.control.comparisons, engine.control.swaps) == counters


@pytest.mark.parametrize("algo", ALGOS)
def test_completed_snapshot(algo):
    engine = create_engine(algo, [2, 3, 1])
    run_to_end(engine)
    snap = engine.snapshot()
    assert snap.completed
    assert snap.progress == 100.0
    assert snap.status_text == "COMPLETED!"
    assert snap.phase == "DONE"
    assert "sorted" in snap.description.lower()


# ---------------------------------------------------------------------------
# Reset fidelity
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("algo", ALGOS)
@pytest.mark.parametrize("values", [[5, 3, 8, 1], [3, 1, 3, 2], [9, 8, 7, 6, 5, 4, 3, 2, 1, 0]])
def test_reset_replays_identical_trace(algo, values):
    engine = create_engine(algo, values)
    first = trace(engine)
    engine.reset()
    second = trace(engine)
    assert first == second


@pytest.mark.parametrize("algo", ALGOS)
def test_reset_mid_run_restores_baseline(algo):
    engine = create_engine(algo, [4, 3, 2, 1])
    baseline = engine.snapshot().trace_key()
    for _ in range(5):
        engine.step()
    engine.reset()
    assert engine.snapshot().trace_key() == baseline


@pytest.mark.parametrize("algo", ALGOS)
def test_reset_keeps_delay_and_teaching(algo):
    cls = REGISTRY[algo].cls
    control = cls.make_control(step_delay=700, teaching_mode=True)
    engine = cls([2, 1, 3], control=control)
    engine.step()
    engine.reset()
    assert engine.control.step_delay == 700
    assert engine.control.teaching_mode is True


# ---------------------------------------------------------------------------
# Degenerate input
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("algo", ALGOS)
@pytest.mark.parametrize("values", [[], [42]])
def test_degenerate_input_completes_immediately(algo, values):
    engine = create_engine(algo, values)
    assert engine.control.completed
    assert engine.control.comparisons == 0
    assert engine.control.swaps == 0
    assert engine.step() is False
    assert engine.array == values
    assert engine.snapshot().progress == 100.0


@pytest.mark.parametrize("algo", ALGOS)
def test_degenerate_input_after_reset(algo):
    engine = create_engine(algo, [1])
    engine.reset()
    assert engine.control.completed
    assert engine.step() is False


# ---------------------------------------------------------------------------
# Quick sort stack
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("values", FIXED_INPUTS + random_inputs(10))
def test_quick_stack_ranges_are_valid_when_choosing_pivot(values):
    engine = QuickSort(values)
    while True:
        if engine.phase is QuickPhase.CHOOSING_PIVOT:
            for low, high in engine.stack:
                assert low <= high
                assert 0 <= low < engine.n
                assert 0 <= high < engine.n
        if not engine.step():
            break
    assert engine.array == sorted(values)


def test_quick_partition_places_pivot():
    engine = QuickSort([5, 3, 8, 1, 4])
    while engine.partitions == 0:
        engine.step()
    # two values are smaller than the pivot 4
    assert engine.array.index(4) == 2
    assert engine.states[2] is ElementState.SORTED


def test_quick_pointers_can_cross_below_low():
    # every element is larger than the pivot, so right walks past low
    engine = QuickSort([9, 8, 7, 1])
    run_to_end(engine)
    assert engine.array == [1, 7, 8, 9]


# ---------------------------------------------------------------------------
# Merge sort
# ---------------------------------------------------------------------------
@functools.total_ordering
class Tagged:
    """A value that compares on `value` only but remembers where it came from."""

    def __init__(self, value, origin):
        self.value = value
        self.origin = origin

    def __eq__(self, other):
        return self.value == other.value

    def __lt__(self, other):
        return self.value < other.value

    def __repr__(self):
        return f"{self.value}@{self.origin}"


def test_merge_is_stable():
    items = [Tagged(v, i) for i, v in enumerate([3, 1, 3, 2])]
    engine = MergeSort(items)
    run_to_end(engine)
    assert [t.value for t in engine.array] == [1, 2, 3, 3]
    threes = [t.origin for t in engine.array if t.value == 3]
    assert threes == [0, 2]


@pytest.mark.parametrize("algo", ["bubble", "insertion", "merge"])
def test_stable_algorithms_keep_equal_order(algo):
    values = [2, 1, 2, 1, 2, 0]
    items = [Tagged(v, i) for i, v in enumerate(values)]
    engine = REGISTRY[algo].cls(items)
    run_to_end(engine)
    for v in set(values):
        origins = [t.origin for t in engine.array if t.value == v]
        assert origins == sorted(origins)


def test_merge_odd_length_leftover_run():
    engine = MergeSort([5, 4, 3, 2, 1])
    run_to_end(engine)
    assert engine.array == [1, 2, 3, 4, 5]
    assert engine.current_size > 5


def test_merge_phase_sequence_starts_with_pair():
    engine = MergeSort([2, 1])
    assert engine.phase is MergePhase.MERGE_PAIRS
    engine.step()
    assert engine.phase is MergePhase.MERGING_INIT
    assert (engine.low, engine.mid, engine.high) == (0, 0, 1)


# ---------------------------------------------------------------------------
# Insertion sort
# ---------------------------------------------------------------------------
def test_insertion_prefix_is_sorted_after_each_insertion():
    engine = InsertionSort([4, 1, 3, 2])
    seen = 0
    while engine.step():
        if engine.checkpoints > seen:
            seen = engine.checkpoints
            prefix = engine.array[:engine.current_i]
            assert prefix == sorted(prefix)
    assert seen == 3


# ---------------------------------------------------------------------------
# Quiz gating
# ---------------------------------------------------------------------------
def test_quick_asks_after_first_pivot_placement_and_blocks():
    control = QuickSort.make_control(teaching_mode=True)
    engine = QuickSort([5, 3, 8, 1, 9, 2], control=control)

    while True:
        before = engine.phase
        assert engine.step()
        if control.awaiting_question is not None:
            break
    assert before is QuickPhase.SWAPPING_WITH_PIVOT
    assert engine.partitions == 1

    frozen = (list(engine.array), control.comparisons, control.swaps, engine.step_number)
    for _ in range(10):
        assert engine.step() is True
    assert (list(engine.array), control.comparisons, control.swaps, engine.step_number) == frozen

    feedback = engine.answer(0)
    assert feedback is not None
    assert control.awaiting_question is None
    run_to_end_answering(engine)
    assert engine.array == [1, 2, 3, 5, 8, 9]


def run_to_end_answering(engine, limit=10_000):
    for _ in range(limit):
        if engine.control.awaiting_question is not None:
            engine.answer(0)
        if not engine.step():
            return
    raise AssertionError("engine did not terminate")


@pytest.mark.parametrize("algo", ALGOS)
def test_teaching_mode_asks_at_every_checkpoint(algo):
    cls = REGISTRY[algo].cls
    engine = cls([6, 2, 5, 1, 4, 3], control=cls.make_control(teaching_mode=True))
    asked = 0
    for _ in range(10_000):
        if engine.control.awaiting_question is not None:
            asked += 1
            engine.answer(engine.pending_question.correct_index)
        if not engine.step():
            break
    assert asked == engine.checkpoints
    assert engine.array == [1, 2, 3, 4, 5, 6]


def test_answer_without_question_is_noop():
    engine = BubbleSort([2, 1])
    assert engine.answer(0) is None


def test_answer_reports_correctness():
    engine = BubbleSort([3, 2, 1], control=BubbleSort.make_control(teaching_mode=True))
    while engine.control.awaiting_question is None:
        engine.step()
    question = engine.pending_question
    wrong = (question.correct_index + 1) % len(question.options)
    feedback = engine.answer(wrong)
    assert feedback.correct is False
    assert feedback.correct_index == question.correct_index
    assert feedback.explanation == question.explanation


# ---------------------------------------------------------------------------
# Snapshot
# ---------------------------------------------------------------------------
def test_snapshot_is_detached_from_engine():
    engine = BubbleSort([3, 1, 2])
    snap = engine.snapshot()
    run_to_end(engine)
    assert snap.array == (3, 1, 2)


def test_snapshot_to_dict_serialises_states():
    engine = QuickSort([3, 1, 2])
    engine.step()
    data = engine.snapshot().to_dict()
    assert data["algo_key"] == "quick"
    assert all(isinstance(s, str) for s in data["states"])
    assert "current" in data["states"]
    assert data["legend"][0] == ["Normal", "normal"]
    assert 0 <= data["pseudocode_line"] < len(QuickSort.PSEUDOCODE)


@pytest.mark.parametrize("algo", ALGOS)
def test_pseudocode_line_always_in_range(algo):
    engine = create_engine(algo, [4, 2, 5, 1, 3])
    while True:
        line = engine.pseudocode_line()
        assert 0 <= line < len(engine.PSEUDOCODE)
        assert engine.current_operation_description()
        assert 0.0 <= engine.progress() <= 100.0
        if not engine.step():
            break
