"""Screens, menus, pausing and the transitions between them."""

from __future__ import annotations

import logging
from enum import Enum

from moodels.level import DEFAULT_LEVEL_PATH
from moodels.settings import GlobalVolume
from moodels.splash import SPLASH_DURATION_SECS, SpriteFadeInOut
from moodels.timer import Timer, TimerMode

log = logging.getLogger(__name__)


class Screen(Enum):
    """The game's main screens."""

    SPLASH = "splash"
    TITLE = "title"
    LOADING = "loading"
    GAMEPLAY = "gameplay"


class Menu(Enum):
    """The menu shown on top of the current screen."""

    NONE = "none"
    MAIN = "main"
    CREDITS = "credits"
    SETTINGS = "settings"
    PAUSE = "pause"


_BUTTONS: dict[Menu, tuple[str, ...]] = {
    Menu.MAIN: ("Play", "Settings", "Credits", "Exit"),
    Menu.CREDITS: ("Back",),
    Menu.SETTINGS: ("-", "+", "Back"),
    Menu.PAUSE: ("Continue", "Settings", "Quit to title"),
}

_TOOLS = {"q": "line", "w": "box", "e": "circle"}


class GameState:
    """The current screen and menu, driven by key presses, clicks and time."""

    def __init__(self) -> None:
        self.screen = Screen.SPLASH
        self.menu = Menu.NONE
        self.paused = False
        self.assets_ready = False
        self.exit_requested = False
        self.volume = GlobalVolume()
        self.level_requests: list[str] = []
        self.active_tool: str | None = None
        self.splash_timer: Timer | None = None
        self.splash_fade: SpriteFadeInOut | None = None
        self._enter_screen(Screen.SPLASH)

    @property
    def splash_alpha(self) -> float:
        """Opacity of the splash image, or 0.0 when it is not shown."""
        return self.splash_fade.alpha() if self.splash_fade is not None else 0.0

    def buttons(self) -> tuple[str, ...]:
        """Labels of the buttons in the open menu."""
        return _BUTTONS.get(self.menu, ())

    def _enter_screen(self, screen: Screen) -> None:
        if screen is Screen.SPLASH:
            self.splash_timer = Timer(SPLASH_DURATION_SECS, TimerMode.ONCE)
            self.splash_fade = SpriteFadeInOut()
        elif screen is Screen.TITLE:
            self._set_menu(Menu.MAIN)
        elif screen is Screen.GAMEPLAY:
            self.level_requests.append(DEFAULT_LEVEL_PATH)

    def _exit_screen(self, screen: Screen) -> None:
        if screen is Screen.SPLASH:
            self.splash_timer = None
            self.splash_fade = None
        elif screen is Screen.TITLE:
            self._set_menu(Menu.NONE)
        elif screen is Screen.GAMEPLAY:
            self._set_menu(Menu.NONE)
            self.paused = False

    def _set_screen(self, screen: Screen) -> None:
        if screen is self.screen:
            return
        log.info("Screen transition: %s -> %s", self.screen.name, screen.name)
        self._exit_screen(self.screen)
        self.screen = screen
        self._enter_screen(screen)

    def _set_menu(self, menu: Menu) -> None:
        if menu is self.menu:
            return
        self.menu = menu
        if menu is Menu.NONE and self.screen is Screen.GAMEPLAY:
            self.paused = False

    def _open_pause(self) -> None:
        self.paused = True
        self._set_menu(Menu.PAUSE)

    def _settings_back(self) -> None:
        self._set_menu(Menu.MAIN if self.screen is Screen.TITLE else Menu.PAUSE)

    def press_key(self, key: str) -> None:
        """React to a key being pressed; unknown keys are ignored."""
        key = key.lower()
        screen, menu, paused = self.screen, self.menu, self.paused
        in_game_without_menu = screen is Screen.GAMEPLAY and menu is Menu.NONE

        if key == "escape":
            if screen is Screen.SPLASH:
                self._set_screen(Screen.TITLE)
            if menu is Menu.CREDITS:
                self._set_menu(Menu.MAIN)
            elif menu is Menu.SETTINGS:
                self._settings_back()
            elif menu is Menu.PAUSE:
                self._set_menu(Menu.NONE)
            if in_game_without_menu:
                self._open_pause()
        elif key == "p":
            if in_game_without_menu:
                self._open_pause()
            elif screen is Screen.GAMEPLAY:
                self._set_menu(Menu.NONE)
        elif key in _TOOLS and not paused:
            self.active_tool = _TOOLS[key]
            log.info("%s tool activated!", self.active_tool.capitalize())

    def click(self, button: str) -> None:
        """Press a button in the open menu."""
        if button not in self.buttons():
            raise ValueError(f"no {button!r} button in the {self.menu.value} menu")

        if self.menu is Menu.MAIN:
            if button == "Play":
                self._set_screen(
                    Screen.GAMEPLAY if self.assets_ready else Screen.LOADING
                )
            elif button == "Settings":
                self._set_menu(Menu.SETTINGS)
            elif button == "Credits":
                self._set_menu(Menu.CREDITS)
            else:
                self.exit_requested = True
        elif self.menu is Menu.CREDITS:
            self._set_menu(Menu.MAIN)
        elif self.menu is Menu.SETTINGS:
            if button == "-":
                self.volume.decrease()
            elif button == "+":
                self.volume.increase()
            else:
                self._settings_back()
        elif button == "Continue":
            self._set_menu(Menu.NONE)
        elif button == "Settings":
            self._set_menu(Menu.SETTINGS)
        else:
            self._set_screen(Screen.TITLE)

    def tick(self, delta: float, assets_ready: bool) -> None:
        """Advance time by ``delta`` seconds, knowing whether assets have loaded."""
        if delta < 0:
            raise ValueError(f"cannot tick backwards: {delta}")
        self.assets_ready = assets_ready
        if self.screen is Screen.SPLASH:
            assert self.splash_timer is not None and self.splash_fade is not None
            self.splash_fade.advance(delta)
            self.splash_timer.tick(delta)
            if self.splash_timer.just_finished():
                self._set_screen(Screen.TITLE)
        elif self.screen is Screen.LOADING and assets_ready:
            self._set_screen(Screen.GAMEPLAY)