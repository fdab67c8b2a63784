import pytest

from moodels.settings import MAX_VOLUME, MIN_VOLUME, GlobalVolume


def test_default_label():
    assert GlobalVolume().label() == "100%"


def test_decrease_stops_at_minimum():
    volume = GlobalVolume()
    for _ in range(30):
        volume.decrease()
    assert volume.linear == MIN_VOLUME
    assert volume.label() == "  0%"


def test_increase_stops_at_maximum():
    volume = GlobalVolume()
    for _ in range(40):
        volume.increase()
    assert volume.linear == MAX_VOLUME
    assert volume.label() == "300%"


def test_decrease_then_increase_round_trips():
    volume = GlobalVolume(1.5)
    volume.decrease()
    assert volume.linear < 1.5
    volume.increase()
    assert volume.linear == pytest.approx(1.5)


def test_steps_return_new_level():
    volume = GlobalVolume()
    assert volume.increase() == volume.linear
    assert volume.decrease() == volume.linear


def test_label_is_padded_to_three_digits():
    assert GlobalVolume(0.05).label() == "  5%"


def test_effective_scales_playback():
    volume = GlobalVolume(2.0)
    assert volume.effective(0.25) == 0.5
    assert GlobalVolume(0.0).effective(1.0) == 0.0