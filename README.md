# moodels

Building blocks for a small game about *Moodels*: little creatures that each
carry a mood (neutral, calm, happy, rage or sad). When two Moodels collide,
their moods change by a fixed set of rules. A Moodel left alone for too long
drifts towards calm or neutral, and from neutral it may tip into any mood.

A level gives the play area, the starting Moodels, wall obstacles and goal
zones. Each goal zone asks for a number of Moodels of one mood. The level is
won once every zone is satisfied.

The package has no dependencies beyond the standard library.

## Modules

- `moodels.moods`: the `Mood` enumeration with `speed_multiplier()` and
  `color()`; the collision rules (`mood_interaction`); isolation decay
  (`isolation_decay`); mood counts (`mood_statistics`) and the statistics
  line (`format_mood_statistics`); `MoodEntity` bookkeeping; and
  `MoodObject`, a static object that switches a Moodel into one mood and
  then waits out a cooldown per Moodel (`can_affect`, `record_hit`).
  Functions that roll dice take an optional `random.Random`.
- `moodels.timer`: `Timer` with `TimerMode.ONCE` or `TimerMode.REPEATING`,
  counting seconds (`tick`, `is_finished`, `just_finished`, `set_duration`,
  `reset`, `fraction`).
- `moodels.vector`: an immutable `Vec2` with arithmetic, `length`,
  `distance`, `try_normalize`, `normalize_or_zero` and `rem_euclid`.
- `moodels.movement`: `MovementController`, `PlayArea`, `PlayAreaBounded`
  and `MovementSmoothing`; the force that eases a body's velocity towards
  its intent (`smoothing_force`); clamping and bouncing inside the play
  area (`apply_play_area_bounds`); and wrapping around a window with a
  margin (`screen_wrap`).
- `moodels.animation`: `PlayerAnimation` over a sprite sheet, with idle
  and walking states (`AnimationState`), frame stepping, atlas indices and
  footstep frames.
- `moodels.level`: level data (`Level`, `MoodelData`, `Wall`,
  `ObstacleData`, `GoalZoneData`). Levels are read from JSON
  (`loads_level`, `load_level`), written back with `Level.to_dict`, or
  taken from the built-in library (`level_by_id`). Malformed data raises
  `LevelError`. `GoalZone` tracks who is inside and whether it is
  satisfied; `all_satisfied` checks the win condition; `AnimateScale` and
  `pulse_alpha` give the zone feedback animations.
- `moodels.audio`: sound events (`CorrectZoneEntry`, `MoodChanged`,
  `MoodCollision`) and the asset path each one plays (`sound_path`).
- `moodels.assets`: `ResourceHandles`, a queue of resources waiting for
  their assets to load (`request`, `poll`, `is_all_done`).
- `moodels.theme`: interface colours, `Interaction` and
  `InteractionPalette.color_for`.
- `moodels.settings`: `GlobalVolume`, the master volume, stepped by 0.1
  between 0.0 and 3.0, with its percentage label.
- `moodels.splash`: `SpriteFadeInOut`, the splash image's fade in and out.
- `moodels.states`: the screen and menu state machine (`Screen`, `Menu`,
  `GameState`) covering the splash screen, title menu, settings, credits,
  loading, gameplay and pausing, driven by `press_key`, `click` and `tick`.

## Examples

Collision rules and the built-in tutorial level:

```python
from moodels.moods import Mood, mood_interaction
from moodels.level import level_by_id

print(mood_interaction(Mood.RAGE, Mood.CALM))   # (Mood.RAGE, Mood.SAD)
level = level_by_id("tutorial_code")
print(level.name)                               # Programmatic Tutorial
```

Walking through the screens:

```python
from moodels.states import GameState, Screen

game = GameState()                  # starts on the splash screen
game.tick(1.8, assets_ready=False)  # splash ends, title menu opens
game.click("Play")                  # assets not ready: loading screen
game.tick(0.1, assets_ready=True)   # loaded: gameplay
assert game.screen is Screen.GAMEPLAY
print(game.level_requests)          # ['levels/tutorial_1.level.json']
```

## What it does not do

This is a library only. It installs no command and opens no window: there
is no rendering, no sound playback, no physics engine, no noise-driven
wandering or flocking for the creatures, and no loop that moves Moodels
around a level. A program using the package supplies those and calls the
pieces above from its own game loop.