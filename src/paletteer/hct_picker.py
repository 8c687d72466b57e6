"""State model behind the HCT colour picker sheet.

Three sliders (hue, chroma, tone) drive a single colour value. Opening the
sheet or switching colour space loads the sliders from the current colour;
moving any slider rebuilds the colour from all three. The readout rows are
the strings a UI would put on the pasteboard.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .color_convert import Swatch

log = logging.getLogger(__name__)

Range = Tuple[float, float]

HUE_RANGE: Range = (0.0, 360.0)
CHROMA_RANGE: Range = (0.0, 100.0)
TONE_RANGE: Range = (0.0, 100.0)


def median(r: Range) -> float:
    return (r[0] + r[1]) / 2.0


def clamp(x: float, r: Range) -> float:
    lo, hi = r
    return hi if x > hi else lo if x < lo else float(x)


class ColorSpace(enum.Enum):
    HCT = "hct"
    RGB = "rgb"

    @property
    def title(self) -> str:
        return self.name


@dataclass
class HCTPicker:
    title: str = ""
    color: Swatch = field(default_factory=Swatch)
    color_space: ColorSpace = ColorSpace.HCT
    showing: bool = False
    hue: float = median(HUE_RANGE)
    chroma: float = median(CHROMA_RANGE)
    tone: float = median(TONE_RANGE)

    # ---- sheet ----

    def open(self) -> None:
        self.showing = True
        self.load_from_color()

    def close(self) -> None:
        self.showing = False

    def toggle(self) -> None:
        if self.showing:
            self.close()
        else:
            self.open()

    def set_color_space(self, space: ColorSpace) -> None:
        self.color_space = space
        self.load_from_color()

    # ---- sliders ----

    def load_from_color(self) -> None:
        hct = self.color.hct
        self.hue = clamp(hct.hue, HUE_RANGE)
        self.chroma = clamp(hct.chroma, CHROMA_RANGE)
        self.tone = clamp(hct.tone, TONE_RANGE)
        log.debug("picker %r loaded %s", self.title, hct.label)

    def set_hue(self, value: float) -> None:
        self.hue = clamp(value, HUE_RANGE)
        self.update_color()

    def set_chroma(self, value: float) -> None:
        self.chroma = clamp(value, CHROMA_RANGE)
        self.update_color()

    def set_tone(self, value: float) -> None:
        self.tone = clamp(value, TONE_RANGE)
        self.update_color()

    def update_color(self) -> None:
        self.color = Swatch.from_hct(self.hue, self.chroma, self.tone)

    def select(self, color: Swatch) -> None:
        """Direct pick, as from the RGB tab; sliders are left alone."""
        self.color = color

    # ---- readout ----

    def steppers(self) -> Dict[str, int]:
        return {"Hue": int(self.hue), "Chroma": int(self.chroma), "Tone": int(self.tone)}

    def color_values(self) -> List[Tuple[str, str]]:
        return [
            ("RGB", self.color.hex_rgb.upper()),
            ("HCT", self.color.hct.label),
        ]

    def copy_text(self, row: str) -> str:
        for name, text in self.color_values():
            if name == row.upper():
                return text
        raise ValueError(f"unknown readout row '{row}'")


__all__ = [
    "CHROMA_RANGE",
    "ColorSpace",
    "HCTPicker",
    "HUE_RANGE",
    "TONE_RANGE",
]
