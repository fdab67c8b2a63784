"""Level data, loading it from JSON, goal zones and their feedback."""

from __future__ import annotations

import json
import math
from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any

from moodels.moods import Mood
from moodels.timer import Timer, TimerMode
from moodels.vector import Vec2

DEFAULT_LEVEL_PATH = "levels/tutorial_1.level.json"
LEVEL_MUSIC = "audio/music/Gymnopédie No.1.ogg"
FONT_PATH = "fonts/ComicNeue-Bold.ttf"

ZONE_ALPHA = 0.2
SATISFIED_ZONE_ALPHA = 0.6
PULSE_RANGE = 0.2
PULSE_SPEED = 3.0
SCALE_POP_DURATION = 0.25
SCALE_POP_AMOUNT = 0.2
MOODEL_MAX_SPEED = 350.0


class LevelError(ValueError):
    """A level description is malformed."""


def _require(data: Mapping[str, Any], key: str, where: str) -> Any:
    if not isinstance(data, Mapping):
        raise LevelError(f"{where}: expected an object, got {type(data).__name__}")
    try:
        return data[key]
    except KeyError:
        raise LevelError(f"{where}: missing field {key!r}") from None


def _vec2(value: Any, where: str) -> Vec2:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise LevelError(f"{where}: expected a pair of numbers, got {value!r}")
    x, y = value
    for component in (x, y):
        if isinstance(component, bool) or not isinstance(component, (int, float)):
            raise LevelError(f"{where}: expected a number, got {component!r}")
    return Vec2(float(x), float(y))


def _mood(value: Any, where: str) -> Mood:
    try:
        return Mood(value)
    except ValueError:
        raise LevelError(f"{where}: unknown mood {value!r}") from None


def _count(value: Any, where: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise LevelError(f"{where}: expected a non-negative integer, got {value!r}")
    if value > 2**32 - 1:
        raise LevelError(f"{where}: count too large: {value}")
    return value


def _pair(v: Vec2) -> list[float]:
    return [v.x, v.y]


@dataclass(frozen=True)
class MoodelData:
    """A moodel placed in a level."""

    mood: Mood
    position: Vec2

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MoodelData:
        where = "moodel"
        return cls(
            mood=_mood(_require(data, "mood", where), where),
            position=_vec2(_require(data, "position", where), where),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"mood": self.mood.value, "position": _pair(self.position)}


@dataclass(frozen=True)
class Wall:
    """A solid rectangular obstacle."""

    size: Vec2


@dataclass(frozen=True)
class ObstacleData:
    """An obstacle placed in a level."""

    position: Vec2
    kind: Wall

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ObstacleData:
        where = "obstacle"
        position = _vec2(_require(data, "position", where), where)
        kind = _require(data, "type", where)
        if kind != "Wall":
            raise LevelError(f"{where}: unknown obstacle type {kind!r}")
        size = _vec2(_require(data, "size", where), where)
        return cls(position=position, kind=Wall(size))

    def to_dict(self) -> dict[str, Any]:
        return {
            "position": _pair(self.position),
            "type": "Wall",
            "size": _pair(self.kind.size),
        }


@dataclass(frozen=True)
class GoalZoneData:
    """A goal zone placed in a level."""

    position: Vec2
    size: Vec2
    target_mood: Mood
    required_count: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GoalZoneData:
        where = "goal zone"
        return cls(
            position=_vec2(_require(data, "position", where), where),
            size=_vec2(_require(data, "size", where), where),
            target_mood=_mood(_require(data, "target_mood", where), where),
            required_count=_count(_require(data, "required_count", where), where),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "position": _pair(self.position),
            "size": _pair(self.size),
            "target_mood": self.target_mood.value,
            "required_count": self.required_count,
        }


def _items(data: Mapping[str, Any], key: str) -> list[Any]:
    value = _require(data, key, "level")
    if not isinstance(value, list):
        raise LevelError(f"level: field {key!r} must be a list")
    return value


@dataclass(frozen=True)
class Level:
    """Everything needed to set up one level."""

    name: str
    play_area: Vec2
    moodels: tuple[MoodelData, ...] = ()
    obstacles: tuple[ObstacleData, ...] = ()
    goal_zones: tuple[GoalZoneData, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Level:
        """Build a level from its JSON object form."""
        name = _require(data, "name", "level")
        if not isinstance(name, str):
            raise LevelError(f"level: name must be a string, got {name!r}")
        return cls(
            name=name,
            play_area=_vec2(_require(data, "play_area", "level"), "level"),
            moodels=tuple(MoodelData.from_dict(m) for m in _items(data, "moodels")),
            obstacles=tuple(
                ObstacleData.from_dict(o) for o in _items(data, "obstacles")
            ),
            goal_zones=tuple(
                GoalZoneData.from_dict(z) for z in _items(data, "goal_zones")
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """The JSON object form of this level."""
        return {
            "name": self.name,
            "play_area": _pair(self.play_area),
            "moodels": [m.to_dict() for m in self.moodels],
            "obstacles": [o.to_dict() for o in self.obstacles],
            "goal_zones": [z.to_dict() for z in self.goal_zones],
        }


def loads_level(text: str) -> Level:
    """Parse a level from JSON text."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise LevelError(f"invalid level JSON: {exc}") from exc
    return Level.from_dict(data)


def load_level(path: str | PathLike[str]) -> Level:
    """Read and parse a level file."""
    return loads_level(Path(path).read_text(encoding="utf-8"))


def _tutorial_from_code() -> Level:
    return Level(
        name="Programmatic Tutorial",
        play_area=Vec2(900.0, 600.0),
        moodels=(MoodelData(Mood.HAPPY, Vec2(-200.0, 0.0)),),
        obstacles=(ObstacleData(Vec2(0.0, 0.0), Wall(Vec2(20.0, 300.0))),),
        goal_zones=(
            GoalZoneData(
                position=Vec2(350.0, 0.0),
                size=Vec2(200.0, 200.0),
                target_mood=Mood.HAPPY,
                required_count=1,
            ),
        ),
    )


_LIBRARY = {"tutorial_code": _tutorial_from_code}


def level_by_id(level_id: str) -> Level | None:
    """A level defined in code, or None if no level has this id."""
    factory = _LIBRARY.get(level_id)
    return factory() if factory is not None else None


@dataclass
class GoalZone:
    """A zone that wants a number of moodels of one mood inside it."""

    target_mood: Mood = Mood.NEUTRAL
    required_count: int = 0
    current_count: int = 0
    is_satisfied: bool = False
    entities_inside: set[Hashable] = field(default_factory=set)

    def enter(self, entity: Hashable) -> None:
        """Record that ``entity`` is inside the zone."""
        self.entities_inside.add(entity)

    def leave(self, entity: Hashable) -> None:
        """Record that ``entity`` has left the zone."""
        self.entities_inside.discard(entity)

    def recount(self, moods: Mapping[Hashable, Mood]) -> int:
        """Count the entities inside with the target mood and update satisfaction.

        Entities missing from ``moods`` are not counted.
        """
        self.current_count = sum(
            1
            for entity in self.entities_inside
            if moods.get(entity) is self.target_mood
        )
        self.is_satisfied = self.current_count >= self.required_count
        return self.current_count

    def label(self) -> str:
        """The score text shown in the zone."""
        return f"{self.current_count} / {self.required_count}"

    @property
    def alpha(self) -> float:
        """Base opacity of the zone's background."""
        return SATISFIED_ZONE_ALPHA if self.is_satisfied else ZONE_ALPHA


def all_satisfied(zones: Iterable[GoalZone]) -> bool:
    """True if there is at least one zone and every zone is satisfied."""
    zones = list(zones)
    return bool(zones) and all(zone.is_satisfied for zone in zones)


@dataclass
class AnimateScale:
    """A short scale 'pop' played when a moodel enters the right zone."""

    initial_scale: tuple[float, float, float] = (1.0, 1.0, 1.0)
    timer: Timer = field(
        default_factory=lambda: Timer(SCALE_POP_DURATION, TimerMode.ONCE)
    )

    def advance(self, delta: float) -> tuple[float, float, float]:
        """Move the animation on and return the scale to show now."""
        self.timer.tick(delta)
        if self.timer.is_finished():
            return self.initial_scale
        progress = self.timer.fraction()
        pop = 1.0 + (-4.0 * progress * progress + 4.0 * progress) * SCALE_POP_AMOUNT
        x, y, z = self.initial_scale
        return (x * pop, y * pop, z * pop)

    @property
    def finished(self) -> bool:
        return self.timer.is_finished()


def pulse_alpha(initial_alpha: float, elapsed: float) -> float:
    """Opacity of a satisfied zone, pulsing above ``initial_alpha``."""
    pulse = math.sin(elapsed * PULSE_SPEED) * 0.5 + 0.5
    return initial_alpha + pulse * PULSE_RANGE