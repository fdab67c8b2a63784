import pytest

from moodels.splash import (
    SPLASH_DURATION_SECS,
    SPLASH_FADE_DURATION_SECS,
    SpriteFadeInOut,
)


def test_defaults_come_from_splash_constants():
    fade = SpriteFadeInOut()
    assert fade.alpha() == 0.0
    assert fade.total_duration == SPLASH_DURATION_SECS
    assert fade.fade_duration == SPLASH_FADE_DURATION_SECS


def test_alpha_is_zero_at_ends_and_full_in_middle():
    fade = SpriteFadeInOut()
    fade.t = fade.total_duration
    assert fade.alpha() == pytest.approx(0.0)
    fade.t = fade.total_duration / 2
    assert fade.alpha() == pytest.approx(1.0)


def test_alpha_clamps_outside_duration():
    fade = SpriteFadeInOut(t=-5.0)
    assert fade.alpha() == pytest.approx(0.0)
    fade.t = 100.0
    assert fade.alpha() == pytest.approx(0.0)


def test_alpha_is_symmetric():
    for t in (0.05, 0.2, 0.5, 0.8):
        early = SpriteFadeInOut(t=t).alpha()
        late = SpriteFadeInOut(t=SPLASH_DURATION_SECS - t).alpha()
        assert early == pytest.approx(late)


def test_alpha_rises_monotonically_in_first_half():
    values = [SpriteFadeInOut(t=i * 0.05).alpha() for i in range(19)]
    assert all(0.0 <= v <= 1.0 for v in values)
    assert values == sorted(values)


def test_advance_accumulates_time():
    fade = SpriteFadeInOut()
    fade.advance(0.25)
    fade.advance(0.5)
    assert fade.t == pytest.approx(0.75)