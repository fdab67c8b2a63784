"""The fade in and out of the splash image."""

from __future__ import annotations

from dataclasses import dataclass

SPLASH_DURATION_SECS = 1.8
SPLASH_FADE_DURATION_SECS = 0.6


@dataclass
class SpriteFadeInOut:
    """A trapezoid-shaped fade: up, hold at full opacity, down."""

    total_duration: float = SPLASH_DURATION_SECS
    fade_duration: float = SPLASH_FADE_DURATION_SECS
    t: float = 0.0

    def alpha(self) -> float:
        """Opacity at the current time, from 0.0 to 1.0."""
        t = min(max(self.t / self.total_duration, 0.0), 1.0)
        fade = self.fade_duration / self.total_duration
        return min((1.0 - abs(2.0 * t - 1.0)) / fade, 1.0)

    def advance(self, delta: float) -> None:
        """Move the fade forward by ``delta`` seconds."""
        self.t += delta