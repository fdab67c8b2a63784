import dataclasses

import pytest

from moodels.audio import CorrectZoneEntry, MoodChanged, MoodCollision, sound_path
from moodels.moods import Mood


def test_correct_zone_entry_sound():
    assert sound_path(CorrectZoneEntry()) == "audio/sound_effects/button_click.ogg"


def test_mood_changed_sound():
    event = MoodChanged(Mood.SAD, Mood.CALM)
    assert sound_path(event) == "audio/sound_effects/button_hover.ogg"


def test_mood_collision_sound():
    event = MoodCollision(Mood.RAGE, Mood.HAPPY)
    assert sound_path(event) == "audio/sound_effects/step1.ogg"


def test_sound_does_not_depend_on_moods():
    paths = {sound_path(MoodChanged(a, b)) for a in Mood for b in Mood}
    assert len(paths) == 1


def test_unknown_event_raises():
    with pytest.raises(TypeError):
        sound_path("explosion")


def test_events_are_immutable_values():
    event = MoodChanged(Mood.NEUTRAL, Mood.HAPPY)
    assert event == MoodChanged(Mood.NEUTRAL, Mood.HAPPY)
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.to_mood = Mood.SAD