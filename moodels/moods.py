"""Moods, how they interact and how they decay."""

from __future__ import annotations

import random
from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from enum import Enum

from moodels.timer import Timer, TimerMode


class Mood(Enum):
    """The emotional state of a moodel."""

    NEUTRAL = "Neutral"
    CALM = "Calm"
    HAPPY = "Happy"
    RAGE = "Rage"
    SAD = "Sad"

    def speed_multiplier(self) -> float:
        """Movement speed multiplier for this mood."""
        return _SPEED[self]

    def color(self) -> tuple[float, float, float]:
        """The sRGB colour associated with this mood."""
        return _COLOR[self]


_SPEED = {
    Mood.NEUTRAL: 0.75,
    Mood.CALM: 0.5,
    Mood.HAPPY: 1.0,
    Mood.RAGE: 1.5,
    Mood.SAD: 0.375,
}

_COLOR = {
    Mood.NEUTRAL: (0.8, 0.8, 0.8),
    Mood.CALM: (0.3, 0.6, 1.0),
    Mood.HAPPY: (1.0, 0.9, 0.2),
    Mood.RAGE: (1.0, 0.2, 0.2),
    Mood.SAD: (0.6, 0.4, 0.8),
}


def _build_interactions() -> dict[tuple[Mood, Mood], tuple[Mood, Mood]]:
    table: dict[tuple[Mood, Mood], tuple[Mood, Mood]] = {}
    n, c, h, r, s = Mood.NEUTRAL, Mood.CALM, Mood.HAPPY, Mood.RAGE, Mood.SAD

    # One mood acts on the other; the reverse order mirrors the outcome.
    one_way = [
        ((r, c), (r, s)),
        ((r, h), (r, s)),
        ((r, n), (r, r)),
        ((r, s), (r, s)),
    ]
    for (a, b), (ra, rb) in one_way:
        table[(a, b)] = (ra, rb)
        table[(b, a)] = (rb, ra)

    # The outcome is the same whichever order the moods come in.
    two_way = [
        ((h, s), (h, c)),
        ((h, c), (h, h)),
        ((h, n), (h, c)),
        ((c, s), (c, c)),
        ((c, n), (c, c)),
        ((s, n), (s, s)),
    ]
    for (a, b), outcome in two_way:
        table[(a, b)] = outcome
        table[(b, a)] = outcome

    for mood in (r, h, c, s):
        table[(mood, mood)] = (mood, mood)
    return table


_INTERACTIONS = _build_interactions()


def mood_interaction(
    mood1: Mood, mood2: Mood, rng: random.Random | None = None
) -> tuple[Mood, Mood]:
    """Return the moods two colliding moodels end up with."""
    if mood1 is Mood.NEUTRAL and mood2 is Mood.NEUTRAL:
        roll = (rng or random).randrange(100)
        if roll < 15:
            return Mood.SAD, Mood.SAD
        if roll < 30:
            return Mood.RAGE, Mood.RAGE
        if roll < 65:
            return Mood.HAPPY, Mood.HAPPY
        return Mood.CALM, Mood.CALM
    return _INTERACTIONS[(mood1, mood2)]


def isolation_decay(mood: Mood, rng: random.Random | None = None) -> Mood:
    """Return the mood an isolated moodel drifts to."""
    rng = rng or random
    if mood in (Mood.RAGE, Mood.HAPPY):
        return Mood.CALM
    if mood is Mood.SAD:
        return Mood.NEUTRAL
    if mood is Mood.CALM:
        return Mood.HAPPY if rng.random() < 0.5 else Mood.NEUTRAL
    roll = rng.randrange(100)
    if roll < 20:
        return Mood.HAPPY
    if roll < 40:
        return Mood.SAD
    if roll < 60:
        return Mood.RAGE
    if roll < 80:
        return Mood.CALM
    return Mood.NEUTRAL


def mood_statistics(moods: Iterable[Mood]) -> dict[Mood, int]:
    """Count each mood, listing every mood in declaration order."""
    counts = dict.fromkeys(Mood, 0)
    for mood in moods:
        counts[mood] += 1
    return counts


def format_mood_statistics(moods: Iterable[Mood]) -> str | None:
    """Render the mood statistics line, or None when there are no moodels."""
    counts = mood_statistics(moods)
    total = sum(counts.values())
    if total == 0:
        return None
    parts = " | ".join(
        f"{mood.value}: {count / total * 100.0:.1f}%" for mood, count in counts.items()
    )
    return f"MOOD STATS | Total: {total} | {parts}"


@dataclass
class MoodEntity:
    """Per-moodel bookkeeping for mood changes."""

    isolation_timer: Timer = field(
        default_factory=lambda: Timer(3.0, TimerMode.REPEATING)
    )
    mood_stability: float = 0.0
    last_interaction_time: float = 0.0


@dataclass
class MoodObject:
    """A static object that switches a moodel's mood on contact."""

    target_mood: Mood
    cooldown: float
    recent_hits: dict[Hashable, float] = field(default_factory=dict)

    def can_affect(self, entity: Hashable, current_time: float) -> bool:
        """True if the cooldown for this entity has run out."""
        last_hit = self.recent_hits.get(entity)
        if last_hit is None:
            return True
        return current_time - last_hit >= self.cooldown

    def record_hit(self, entity: Hashable, current_time: float) -> None:
        """Remember that this entity was affected at ``current_time``."""
        self.recent_hits[entity] = current_time