import pytest

from moodels.timer import Timer, TimerMode


def test_once_timer_finishes_when_duration_reached():
    timer = Timer(1.0)
    timer.tick(0.5)
    assert not timer.is_finished()
    assert not timer.just_finished()
    timer.tick(0.5)
    assert timer.is_finished()
    assert timer.just_finished()


def test_once_timer_just_finished_only_once():
    timer = Timer(1.0)
    timer.tick(2.0)
    assert timer.just_finished()
    timer.tick(0.25)
    assert timer.is_finished()
    assert not timer.just_finished()


def test_once_timer_clamps_elapsed_to_duration():
    timer = Timer(1.0)
    timer.tick(3.0)
    assert timer.elapsed == timer.duration
    assert timer.fraction() == 1.0


def test_fraction_halfway():
    timer = Timer(2.0)
    timer.tick(1.0)
    assert timer.fraction() == pytest.approx(0.5)


def test_zero_duration_fraction_is_one():
    assert Timer(0.0).fraction() == 1.0


def test_repeating_timer_wraps_and_counts():
    timer = Timer(1.0, TimerMode.REPEATING)
    timer.tick(2.5)
    assert timer.times_finished_this_tick == 2
    assert timer.elapsed == pytest.approx(0.5)
    assert timer.just_finished()


def test_repeating_timer_finishes_again():
    timer = Timer(0.5, TimerMode.REPEATING)
    timer.tick(0.5)
    assert timer.just_finished()
    timer.tick(0.25)
    assert not timer.just_finished()
    assert not timer.is_finished()
    timer.tick(0.25)
    assert timer.just_finished()


def test_reset_clears_state():
    timer = Timer(1.0)
    timer.tick(1.0)
    timer.reset()
    assert timer.elapsed == 0.0
    assert not timer.is_finished()
    assert not timer.just_finished()


def test_set_duration_then_reset_runs_new_duration():
    timer = Timer(1.0)
    timer.tick(1.0)
    timer.set_duration(2.0)
    timer.reset()
    timer.tick(1.0)
    assert not timer.is_finished()
    timer.tick(1.0)
    assert timer.just_finished()


def test_tick_returns_timer():
    timer = Timer(1.0)
    assert timer.tick(0.25) is timer


@pytest.mark.parametrize("duration", [-1.0, -0.01])
def test_negative_duration_rejected(duration):
    with pytest.raises(ValueError):
        Timer(duration)


def test_negative_set_duration_rejected():
    timer = Timer(1.0)
    with pytest.raises(ValueError):
        timer.set_duration(-2.0)


def test_negative_delta_rejected():
    with pytest.raises(ValueError):
        Timer(1.0).tick(-0.5)