from __future__ import annotations

from dataclasses import dataclass
from math import cos, pi
from typing import List, Literal

from .color_convert import Hct, Swatch, hct_to_rgba

Tone = float
Schedule = Literal["linear", "ease", "shadow", "highlight"]
SCHEDULES = ("linear", "ease", "shadow", "highlight")

TONE_QUANT = 1e-4


def _q(x: float, q: float = TONE_QUANT) -> float:
    # clamp to [0,100] and quantize
    return max(0.0, min(100.0, round(x / q) * q))


def tone_steps(
    n: int, *, schedule: Schedule = "ease", gamma: float = 1.35
) -> List[Tone]:
    """
    n tones from 100 down to 0. n counts both endpoints; the schedule only
    places the n-2 interior tones:
      linear     – even spacing
      ease       – cosine ease-in/out, denser near both ends
      shadow     – bunched toward the dark end
      highlight  – bunched toward the light end
    """
    if n < 3:
        raise ValueError("n must be ≥ 3 (tone 100, tone 0 and at least one interior)")
    if schedule not in SCHEDULES:
        raise ValueError(f"unknown schedule '{schedule}'")

    g = max(1.001, float(gamma))
    tones: List[Tone] = [100.0]
    for j in range(1, n - 1):
        u = j / (n - 1)
        if schedule == "linear":
            v = u
        elif schedule == "ease":
            v = 0.5 - 0.5 * cos(pi * u)
        elif schedule == "shadow":
            v = 1.0 - (1.0 - u) ** g
        else:
            v = u**g
        tones.append(_q(100.0 * (1.0 - v)))
    tones.append(0.0)
    return tones


@dataclass
class TonalPalette:
    """Fixed hue and chroma taken from a seed; tone varies."""

    hue: float
    chroma: float

    @classmethod
    def from_seed(cls, seed: Swatch) -> TonalPalette:
        hct = seed.hct
        return cls(hct.hue, hct.chroma)

    def tone(self, t: Tone) -> Swatch:
        return Swatch(hct_to_rgba(Hct(self.hue, self.chroma, t)))

    def ramp(
        self, n: int, *, schedule: Schedule = "ease", gamma: float = 1.35
    ) -> List[Swatch]:
        return [self.tone(t) for t in tone_steps(n, schedule=schedule, gamma=gamma)]


def tonal_palette(
    seed_hex: str,
    n: int,
    *,
    schedule: Schedule = "ease",
    gamma: float = 1.35,
) -> List[str]:
    seed = Swatch.from_hex(seed_hex)
    ramp = TonalPalette.from_seed(seed).ramp(n, schedule=schedule, gamma=gamma)
    return [s.hex_rgb for s in ramp]


__all__ = ["SCHEDULES", "TonalPalette", "tonal_palette", "tone_steps"]
