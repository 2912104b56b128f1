import pytest

from engine import Intent, SessionDriver, Settings
from algorithms.control import DEFAULT_DELAY, DELAY_STEP, MAX_DELAY, MIN_DELAY


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


def make_driver(algo="bubble", values=(3, 2, 1), teaching=False, speed=100, **kwargs):
    clock = FakeClock()
    settings = Settings(speed=speed, teaching_mode=teaching)
    driver = SessionDriver.from_settings(algo, list(values), settings, clock=clock, **kwargs)
    return driver, clock


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------
def test_from_settings_applies_speed_and_teaching():
    driver, _ = make_driver(speed=450, teaching=True)
    assert driver.control.step_delay == 450
    assert driver.control.teaching_mode is True
    assert driver.snapshot().status_text == "READY"


def test_from_settings_clamps_speed():
    driver, _ = make_driver(speed=10)
    assert driver.control.step_delay == MIN_DELAY
    driver, _ = make_driver(speed=99_999)
    assert driver.control.step_delay == MAX_DELAY


def test_unknown_algorithm_is_rejected():
    with pytest.raises(ValueError):
        make_driver(algo="bogo")


# ---------------------------------------------------------------------------
# Start / pause / tick
# ---------------------------------------------------------------------------
def test_tick_does_nothing_until_started():
    driver, clock = make_driver()
    clock.advance(10)
    assert driver.tick() is False
    assert driver.engine.step_number == 0


def test_tick_respects_step_delay():
    driver, clock = make_driver(speed=200)
    driver.handle(Intent.START_PAUSE)
    assert driver.snapshot().status_text == "RUNNING..."
    clock.advance(0.15)
    assert driver.tick() is False
    clock.advance(0.15)
    assert driver.tick() is True
    assert driver.tick() is False
    assert driver.engine.step_number == 1


def test_tick_takes_one_step_even_after_long_gap():
    driver, clock = make_driver(speed=100)
    driver.handle("start_pause")
    clock.advance(5)
    assert driver.tick() is True
    assert driver.engine.step_number == 1


def test_pause_stops_ticks():
    driver, clock = make_driver(speed=100)
    driver.handle(Intent.START_PAUSE)
    driver.handle(Intent.START_PAUSE)
    assert driver.snapshot().status_text == "PAUSED"
    clock.advance(1)
    assert driver.tick() is False
    driver.handle(Intent.START_PAUSE)
    clock.advance(0.2)
    assert driver.tick() is True


def test_runs_to_completion_by_ticking():
    driver, clock = make_driver(values=[4, 1, 3, 2], speed=50)
    driver.handle(Intent.START_PAUSE)
    for _ in range(1000):
        clock.advance(0.06)
        driver.tick()
        if driver.is_finished:
            break
    snap = driver.snapshot()
    assert snap.completed
    assert snap.array == (1, 2, 3, 4)
    assert not driver.is_playing


def test_start_pause_after_completion_resets():
    driver, _ = make_driver(values=[2, 1])
    while driver.engine.step():
        pass
    assert driver.is_finished
    driver.handle(Intent.START_PAUSE)
    snap = driver.snapshot()
    assert not snap.completed
    assert snap.array == (2, 1)
    assert snap.status_text == "READY"


def test_on_step_callback_receives_snapshots():
    frames = []
    driver, clock = make_driver(on_step=frames.append)
    driver.handle(Intent.SINGLE_STEP)
    driver.handle(Intent.SINGLE_STEP)
    assert [f.step_number for f in frames] == [1, 2]


def test_seconds_until_next_step():
    driver, clock = make_driver(speed=300)
    assert driver.seconds_until_next_step() is None
    driver.handle(Intent.START_PAUSE)
    clock.advance(0.1)
    assert driver.seconds_until_next_step() == pytest.approx(0.2)


# ---------------------------------------------------------------------------
# Single step
# ---------------------------------------------------------------------------
def test_single_step_when_ready():
    driver, _ = make_driver()
    driver.handle(Intent.SINGLE_STEP)
    assert driver.engine.step_number == 1
    assert driver.control.comparisons == 1


def test_single_step_ignored_while_running_or_paused():
    driver, _ = make_driver()
    driver.handle(Intent.START_PAUSE)
    assert driver.handle(Intent.SINGLE_STEP) is None
    assert driver.engine.step_number == 0
    driver.handle(Intent.START_PAUSE)      # paused, still is_running
    driver.handle(Intent.SINGLE_STEP)
    assert driver.engine.step_number == 0


def test_single_step_ignored_when_completed():
    driver, _ = make_driver(values=[1])
    driver.handle(Intent.SINGLE_STEP)
    assert driver.engine.step_number == 0


# ---------------------------------------------------------------------------
# Speed & teaching deltas
# ---------------------------------------------------------------------------
def test_speed_intents_return_deltas():
    driver, _ = make_driver(speed=DEFAULT_DELAY)
    assert driver.handle(Intent.SPEED_UP) == {"speed": DEFAULT_DELAY - DELAY_STEP}
    assert driver.handle(Intent.SPEED_DOWN) == {"speed": DEFAULT_DELAY}
    assert driver.handle(Intent.SPEED_DOWN) == {"speed": DEFAULT_DELAY + DELAY_STEP}


def test_speed_is_clamped():
    driver, _ = make_driver(speed=MIN_DELAY)
    assert driver.handle(Intent.SPEED_UP) == {"speed": MIN_DELAY}
    driver, _ = make_driver(speed=MAX_DELAY)
    assert driver.handle(Intent.SPEED_DOWN) == {"speed": MAX_DELAY}


def test_toggle_teaching_returns_delta():
    driver, _ = make_driver(teaching=False)
    assert driver.handle(Intent.TOGGLE_TEACHING) == {"teaching_mode": True}
    assert driver.handle(Intent.TOGGLE_TEACHING) == {"teaching_mode": False}


def test_deltas_apply_to_settings():
    driver, _ = make_driver(speed=300)
    settings = Settings(speed=300)
    settings = settings.apply(driver.handle(Intent.SPEED_UP))
    settings = settings.apply(driver.handle(Intent.EXIT))
    assert settings.speed == 250
    assert settings.last_algorithm == "bubble"


# ---------------------------------------------------------------------------
# Quiz gating
# ---------------------------------------------------------------------------
def step_until_question(driver, limit=1000):
    for _ in range(limit):
        driver.handle(Intent.SINGLE_STEP)
        if driver.control.awaiting_question is not None:
            return
    raise AssertionError("no question was asked")


def test_question_blocks_everything_but_answer_and_exit():
    driver, clock = make_driver(values=[3, 2, 1], teaching=True)
    step_until_question(driver)
    snap = driver.snapshot()
    assert snap.status_text == "WAITING FOR QUESTION"
    assert snap.question is not None
    frozen = snap.trace_key()

    for intent in (Intent.SINGLE_STEP, Intent.START_PAUSE, Intent.RESET,
                   Intent.SPEED_UP, Intent.TOGGLE_TEACHING):
        assert driver.handle(intent) is None
    clock.advance(10)
    assert driver.tick() is False
    assert driver.snapshot().trace_key() == frozen
    assert driver.control.teaching_mode is True


def test_controls_hint_follows_state():
    driver, _ = make_driver(values=[2, 1], teaching=True)
    assert driver.snapshot().controls_hint == (
        "SPACE: Start/Pause | S: Step | R: Reset | T: Teaching | +/-: Speed | ESC: Exit")

    step_until_question(driver)
    snap = driver.snapshot()
    keys = ",".join(str(i + 1) for i in range(len(snap.question["options"])))
    assert keys.startswith("1,2")
    assert snap.controls_hint == f"{keys}: Answer | ESC: Exit"

    done, _ = make_driver(values=[2, 1])
    while done.engine.step():
        pass
    assert done.snapshot().controls_hint == "SPACE: Restart | R: Reset | T: Teaching Toggle | ESC: Exit"


def test_answer_out_of_range_is_ignored():
    driver, _ = make_driver(teaching=True)
    step_until_question(driver)
    driver.handle(Intent.ANSWER_QUIZ, 7)
    driver.handle(Intent.ANSWER_QUIZ, None)
    assert driver.control.awaiting_question is not None
    assert driver.feedback is None


def test_answer_records_feedback_and_resumes():
    driver, _ = make_driver(teaching=True)
    step_until_question(driver)
    question = driver.engine.pending_question
    driver.handle(Intent.ANSWER_QUIZ, question.correct_index)
    snap = driver.snapshot()
    assert snap.question is None
    assert snap.feedback["correct"] is True
    before = driver.engine.step_number
    driver.handle(Intent.SINGLE_STEP)
    assert driver.engine.step_number == before + 1


def test_answer_without_question_is_ignored():
    driver, _ = make_driver()
    assert driver.handle(Intent.ANSWER_QUIZ, 0) is None
    assert driver.feedback is None


def test_running_session_resumes_after_answer():
    driver, clock = make_driver(values=[3, 2, 1], teaching=True, speed=100)
    driver.handle(Intent.START_PAUSE)
    while driver.control.awaiting_question is None:
        clock.advance(0.15)
        driver.tick()
    driver.handle(Intent.ANSWER_QUIZ, 0)
    assert driver.snapshot().status_text == "RUNNING..."
    clock.advance(0.15)
    assert driver.tick() is True


def test_reset_clears_feedback():
    driver, _ = make_driver(teaching=True)
    step_until_question(driver)
    driver.handle(Intent.ANSWER_QUIZ, 0)
    driver.handle(Intent.RESET)
    assert driver.feedback is None
    assert driver.engine.step_number == 0


def test_shuffled_questions_keep_correct_answer():
    driver, _ = make_driver(algo="quick", values=[5, 3, 8, 1], teaching=True,
                            shuffle_questions=True, seed=7)
    step_until_question(driver)
    question = driver.engine.pending_question
    driver.handle(Intent.ANSWER_QUIZ, question.correct_index)
    assert driver.feedback.correct is True


# ---------------------------------------------------------------------------
# Exit & replay
# ---------------------------------------------------------------------------
def test_exit_stops_the_session():
    driver, clock = make_driver()
    driver.handle(Intent.START_PAUSE)
    assert driver.handle(Intent.EXIT) == {"last_algorithm": "bubble"}
    assert driver.exited
    clock.advance(10)
    assert driver.tick() is False
    assert driver.handle(Intent.START_PAUSE) is None


def test_exit_works_while_question_pending():
    driver, _ = make_driver(teaching=True)
    step_until_question(driver)
    assert driver.handle(Intent.EXIT) == {"last_algorithm": "bubble"}


def test_unknown_intent_string_raises():
    driver, _ = make_driver()
    with pytest.raises(ValueError):
        driver.handle("dance")


def test_replay_is_deterministic():
    script = [Intent.SINGLE_STEP] * 4 + [Intent.RESET] + [Intent.SINGLE_STEP] * 4
    first, _ = make_driver(algo="merge", values=[4, 3, 2, 1])
    second, _ = make_driver(algo="merge", values=[4, 3, 2, 1])
    a = [f.trace_key() for f in first.replay(script)]
    b = [f.trace_key() for f in second.replay(script)]
    assert a == b
    assert a[3] == a[8]


def test_replay_accepts_answer_tuples():
    driver, _ = make_driver(values=[2, 1], teaching=True)
    frames = driver.replay(["single_step", "single_step", ("answer_quiz", 0), "single_step"])
    assert frames[1].question is not None
    assert frames[2].question is None
    assert frames[3].completed
