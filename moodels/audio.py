"""Sound-effect events and the sounds they play."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from moodels.moods import Mood

CORRECT_ZONE_ENTRY_SOUND = "audio/sound_effects/button_click.ogg"
MOOD_CHANGE_SOUND = "audio/sound_effects/button_hover.ogg"
MOOD_COLLISION_SOUND = "audio/sound_effects/step1.ogg"


@dataclass(frozen=True)
class CorrectZoneEntry:
    """A moodel of the right mood entered a goal zone."""


@dataclass(frozen=True)
class MoodChanged:
    """A moodel's mood changed."""

    from_mood: Mood
    to_mood: Mood


@dataclass(frozen=True)
class MoodCollision:
    """Two moodels collided."""

    mood1: Mood
    mood2: Mood


PlaySound = Union[CorrectZoneEntry, MoodChanged, MoodCollision]


def sound_path(event: PlaySound) -> str:
    """Asset path of the sound effect played for ``event``."""
    if isinstance(event, CorrectZoneEntry):
        return CORRECT_ZONE_ENTRY_SOUND
    if isinstance(event, MoodChanged):
        return MOOD_CHANGE_SOUND
    if isinstance(event, MoodCollision):
        return MOOD_COLLISION_SOUND
    raise TypeError(f"not a sound event: {event!r}")