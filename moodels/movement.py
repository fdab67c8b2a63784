"""Steering intent into forces and keeping bodies inside the play area."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

from moodels.vector import ZERO, Vec2

FORCE_GAIN = 20.0
SNAP_THRESHOLD = 0.01
WRAP_MARGIN = 256.0


@dataclass
class MovementController:
    """Where a character wants to go and how fast it may go."""

    intent: Vec2 = ZERO
    max_speed: float = 400.0


@dataclass
class PlayArea:
    """The rectangle bodies are kept inside."""

    center: Vec2 = ZERO
    size: Vec2 = field(default_factory=lambda: Vec2(800.0, 600.0))

    @property
    def min_bounds(self) -> Vec2:
        return self.center - self.size / 2.0

    @property
    def max_bounds(self) -> Vec2:
        return self.center + self.size / 2.0


@dataclass
class PlayAreaBounded:
    """How bouncy a body is when it hits the play-area edge."""

    restitution: float = 0.8


@dataclass
class MovementSmoothing:
    """A smoothed velocity that eases towards the target velocity."""

    current_velocity: Vec2 = ZERO
    acceleration: float = 800.0
    deceleration: float = 1200.0


class BoundsResult(NamedTuple):
    position: Vec2
    velocity: Vec2
    bounced: bool


def smoothing_force(
    controller: MovementController,
    velocity: Vec2,
    smoothing: MovementSmoothing | None,
    delta: float,
) -> Vec2:
    """Return the force that steers ``velocity`` towards the controller's intent.

    When ``smoothing`` is given its current velocity is eased towards the
    target first, and the force steers towards that eased velocity.
    """
    target = controller.intent * controller.max_speed
    if smoothing is None:
        return (target - velocity) * FORCE_GAIN

    diff = target - smoothing.current_velocity
    magnitude = diff.length()
    if magnitude > SNAP_THRESHOLD:
        accelerating = target.length() > smoothing.current_velocity.length()
        rate = smoothing.acceleration if accelerating else smoothing.deceleration
        max_change = rate * delta
        if magnitude <= max_change:
            smoothing.current_velocity = target
        else:
            smoothing.current_velocity = (
                smoothing.current_velocity + diff / magnitude * max_change
            )
    else:
        smoothing.current_velocity = target

    return (smoothing.current_velocity - velocity) * FORCE_GAIN


def apply_play_area_bounds(
    position: Vec2, velocity: Vec2, play_area: PlayArea, restitution: float
) -> BoundsResult:
    """Clamp a body into the play area, bouncing its velocity off the edges."""
    low, high = play_area.min_bounds, play_area.max_bounds
    x, y = position
    vx, vy = velocity
    bounced = False

    if x < low.x:
        x, vx, bounced = low.x, abs(vx) * restitution, True
    elif x > high.x:
        x, vx, bounced = high.x, -abs(vx) * restitution, True

    if y < low.y:
        y, vy, bounced = low.y, abs(vy) * restitution, True
    elif y > high.y:
        y, vy, bounced = high.y, -abs(vy) * restitution, True

    if not bounced:
        return BoundsResult(position, velocity, False)
    return BoundsResult(Vec2(x, y), Vec2(vx, vy), True)


def screen_wrap(position: Vec2, window_size: Vec2) -> Vec2:
    """Wrap a position around a window enlarged by a margin on every side."""
    size = Vec2(window_size.x + WRAP_MARGIN, window_size.y + WRAP_MARGIN)
    half = size / 2.0
    return (position + half).rem_euclid(size) - half