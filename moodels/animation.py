"""Sprite-sheet animation for the player character."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from moodels.timer import Timer, TimerMode

IDLE_FRAMES = 2
IDLE_INTERVAL = 0.5
WALKING_FRAMES = 6
WALKING_INTERVAL = 0.05
STEP_FRAMES = (2, 5)


class AnimationState(Enum):
    IDLING = "idling"
    WALKING = "walking"


_FRAMES = {AnimationState.IDLING: IDLE_FRAMES, AnimationState.WALKING: WALKING_FRAMES}
_INTERVAL = {
    AnimationState.IDLING: IDLE_INTERVAL,
    AnimationState.WALKING: WALKING_INTERVAL,
}
_ATLAS_OFFSET = {AnimationState.IDLING: 0, AnimationState.WALKING: 6}


def _timer_for(state: AnimationState) -> Timer:
    return Timer(_INTERVAL[state], TimerMode.REPEATING)


@dataclass
class PlayerAnimation:
    """Current frame and state of the player's animation."""

    state: AnimationState = AnimationState.IDLING
    frame: int = 0
    timer: Timer = field(default=None)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.timer is None:
            self.timer = _timer_for(self.state)

    @classmethod
    def idling(cls) -> PlayerAnimation:
        return cls(AnimationState.IDLING)

    @classmethod
    def walking(cls) -> PlayerAnimation:
        return cls(AnimationState.WALKING)

    def update_timer(self, delta: float) -> None:
        """Advance the timer and step to the next frame when it fires."""
        self.timer.tick(delta)
        if self.timer.is_finished():
            self.frame = (self.frame + 1) % _FRAMES[self.state]

    def update_state(self, state: AnimationState) -> None:
        """Switch to ``state``, restarting the animation if it differs."""
        if state is not self.state:
            self.state = state
            self.frame = 0
            self.timer = _timer_for(state)

    def changed(self) -> bool:
        """True if the frame advanced on the last tick."""
        return self.timer.is_finished()

    def atlas_index(self) -> int:
        """Index of the current frame in the texture atlas."""
        return _ATLAS_OFFSET[self.state] + self.frame

    def is_step_frame(self) -> bool:
        """True when a footstep sound belongs to this tick."""
        return (
            self.state is AnimationState.WALKING
            and self.changed()
            and self.frame in STEP_FRAMES
        )