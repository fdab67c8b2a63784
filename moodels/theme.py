"""Interface colours and how buttons react to the pointer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Color = tuple[float, float, float]

LABEL_TEXT: Color = (0.867, 0.827, 0.412)
HEADER_TEXT: Color = (0.988, 0.984, 0.800)
BUTTON_TEXT: Color = (0.925, 0.925, 0.925)
BUTTON_BACKGROUND: Color = (0.275, 0.400, 0.750)
BUTTON_HOVERED_BACKGROUND: Color = (0.384, 0.600, 0.820)
BUTTON_PRESSED_BACKGROUND: Color = (0.239, 0.286, 0.600)

HOVER_SOUND = "audio/sound_effects/button_hover.ogg"
CLICK_SOUND = "audio/sound_effects/button_click.ogg"


class Interaction(Enum):
    """The pointer's relation to a widget."""

    NONE = "none"
    HOVERED = "hovered"
    PRESSED = "pressed"


@dataclass(frozen=True)
class InteractionPalette:
    """Background colours for each interaction state of a widget."""

    none: Color
    hovered: Color
    pressed: Color

    def color_for(self, interaction: Interaction) -> Color:
        """The background colour for ``interaction``."""
        if interaction is Interaction.HOVERED:
            return self.hovered
        if interaction is Interaction.PRESSED:
            return self.pressed
        return self.none


BUTTON_PALETTE = InteractionPalette(
    none=BUTTON_BACKGROUND,
    hovered=BUTTON_HOVERED_BACKGROUND,
    pressed=BUTTON_PRESSED_BACKGROUND,
)