"""The master volume setting."""

from __future__ import annotations

from dataclasses import dataclass

MIN_VOLUME = 0.0
MAX_VOLUME = 3.0
VOLUME_STEP = 0.1


@dataclass
class GlobalVolume:
    """Linear master volume applied to every sound."""

    linear: float = 1.0

    def decrease(self) -> float:
        """Lower the volume one step, not below the minimum."""
        self.linear = max(self.linear - VOLUME_STEP, MIN_VOLUME)
        return self.linear

    def increase(self) -> float:
        """Raise the volume one step, not above the maximum."""
        self.linear = min(self.linear + VOLUME_STEP, MAX_VOLUME)
        return self.linear

    def label(self) -> str:
        """The volume as a percentage, as shown in the settings menu."""
        return f"{100.0 * self.linear:3.0f}%"

    def effective(self, playback_volume: float) -> float:
        """Volume of a sound playing at ``playback_volume``."""
        return self.linear * playback_volume