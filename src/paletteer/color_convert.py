# color_convert.py

from __future__ import annotations

import base64
import binascii
import json
import logging
import math
import re
from dataclasses import dataclass
from typing import NamedTuple, Sequence

import numpy as np
from coloraide import Color as _Base
from coloraide.spaces.hct import HCT

from .hsba import HSBA

log = logging.getLogger(__name__)


class Color(_Base):
    """Project-local Color class with HCT registered."""


Color.register(HCT())

Hex = str

# BT.709 luma weights
_BT709 = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)
LIGHT_THRESHOLD = 0.4

# saturation / brightness nudges used by `contrasting`
CONTRAST_SATURATION = 0.1
CONTRAST_BRIGHTNESS = 0.3

HCT_FIT = {"method": "raytrace", "pspace": "hct"}

_HEX_RUN = re.compile(r"(?:0[xX])?(?P<digits>[0-9a-fA-F]*)")


class RGBA(NamedTuple):
    red: float
    green: float
    blue: float
    alpha: float = 1.0


DEFAULT_RGBA = RGBA(0.0, 0.0, 0.0, 1.0)


@dataclass(frozen=True)
class Hct:
    hue: float
    chroma: float
    tone: float

    @property
    def label(self) -> str:
        return f"H{int(round(self.hue))} C{int(round(self.chroma))} T{int(round(self.tone))}"


def _clip01(x: float) -> float:
    return 0.0 if x <= 0.0 else 1.0 if x >= 1.0 else float(x)


def _finite(x: float) -> float:
    # coloraide reports an undefined hue as NaN
    return 0.0 if math.isnan(x) else float(x)


def _to_bytes(values: Sequence[float]) -> np.ndarray:
    arr = np.clip(np.asarray(values, dtype=np.float64), 0.0, 1.0)
    return np.round(arr * 255.0).astype(np.uint8)


# ---- hex / packed integers -------------------------------------------------


def parse_hex(text: str) -> RGBA:
    """
    Parse ``RRGGBB`` or ``RRGGBBAA`` (``#`` optional, surrounding whitespace
    ignored). Only the leading run of hex digits, after an optional ``0x``,
    is read; the length check counts the whole sanitized string. Any length
    other than 6 or 8 gives opaque black instead of raising.
    """
    raw = (text or "").strip().replace("#", "")
    digits = _HEX_RUN.match(raw).group("digits")  # type: ignore[union-attr]
    value = int(digits, 16) if digits else 0

    if len(raw) == 6:
        return RGBA(
            ((value & 0xFF0000) >> 16) / 255.0,
            ((value & 0x00FF00) >> 8) / 255.0,
            (value & 0x0000FF) / 255.0,
            1.0,
        )
    if len(raw) == 8:
        return RGBA(
            ((value & 0xFF000000) >> 24) / 255.0,
            ((value & 0x00FF0000) >> 16) / 255.0,
            ((value & 0x0000FF00) >> 8) / 255.0,
            (value & 0x000000FF) / 255.0,
        )
    log.debug("hex %r has %d digits; using default color", text, len(raw))
    return DEFAULT_RGBA


def format_hex(rgba: Sequence[float], *, alpha: bool = False) -> Hex:
    u8 = _to_bytes(rgba[:4] if alpha else rgba[:3])
    return "#" + "".join(f"{int(v):02x}" for v in u8)


def argb_from_rgb(red: int, green: int, blue: int) -> int:
    return 0xFF000000 | ((red & 0xFF) << 16) | ((green & 0xFF) << 8) | (blue & 0xFF)


def rgba_from_argb(argb: int) -> RGBA:
    """Alpha byte is ignored; the result is always opaque."""
    return RGBA(
        ((argb >> 16) & 0xFF) / 255.0,
        ((argb >> 8) & 0xFF) / 255.0,
        (argb & 0xFF) / 255.0,
        1.0,
    )


def rgb_int(rgba: Sequence[float]) -> int:
    r, g, b = (int(v) for v in _to_bytes(rgba[:3]))
    return argb_from_rgb(r, g, b)


# ---- luminance & contrast --------------------------------------------------


def luminance(rgba: Sequence[float]) -> float:
    return float(_BT709 @ np.asarray(rgba[:3], dtype=np.float64))


def is_light(rgba: Sequence[float]) -> bool:
    return luminance(rgba) > LIGHT_THRESHOLD


def adjust(rgba: RGBA, *, saturation: float = 0.0, brightness: float = 0.0) -> RGBA:
    """Shift HSB saturation/brightness by fractional deltas, clamped to [0, 1]."""
    hsba = rgba_to_hsba(rgba)
    s = _clip01(hsba.saturation / 100.0 + saturation)
    b = _clip01(hsba.brightness / 100.0 + brightness)
    return hsba_to_rgba(HSBA(hsba.hue, s * 100.0, b * 100.0, hsba.alpha))


def contrasting(rgba: RGBA) -> RGBA:
    if is_light(rgba):
        return adjust(rgba, saturation=CONTRAST_SATURATION, brightness=-CONTRAST_BRIGHTNESS)
    return adjust(rgba, saturation=-CONTRAST_SATURATION, brightness=CONTRAST_BRIGHTNESS)


# ---- HSB -------------------------------------------------------------------


def rgba_to_hsba(rgba: RGBA) -> HSBA:
    h, s, v = (_finite(x) for x in Color("srgb", list(rgba[:3])).convert("hsv").coords())
    return HSBA(h % 360.0, s * 100.0, v * 100.0, rgba.alpha * 100.0)


def hsba_to_rgba(hsba: HSBA) -> RGBA:
    hsv = Color(
        "hsv",
        [
            hsba.hue % 360.0,
            _clip01(hsba.saturation / 100.0),
            _clip01(hsba.brightness / 100.0),
        ],
    )
    r, g, b = (_clip01(_finite(x)) for x in hsv.convert("srgb").coords())
    return RGBA(r, g, b, _clip01(hsba.alpha / 100.0))


# ---- HCT -------------------------------------------------------------------


def rgba_to_hct(rgba: RGBA) -> Hct:
    hct = Color("srgb", list(rgba[:3])).convert("hct")
    return Hct(
        _finite(float(hct["h"])) % 360.0,
        _finite(float(hct["c"])),
        _finite(float(hct["t"])),
    )


def hct_to_rgba(hct: Hct) -> RGBA:
    """HCT -> opaque sRGB, gamut-mapped along constant hue/tone."""
    c = Color("hct", [hct.hue % 360.0, max(0.0, hct.chroma), hct.tone]).convert("srgb")
    if not c.in_gamut():
        c.fit(**HCT_FIT)
    r, g, b = (_clip01(_finite(x)) for x in c.coords())
    return RGBA(r, g, b, 1.0)


# ---- value type ------------------------------------------------------------


@dataclass(frozen=True)
class Swatch:
    """Immutable color value. Every edit returns a new instance."""

    rgba: RGBA = DEFAULT_RGBA

    @classmethod
    def from_hex(cls, text: str) -> Swatch:
        return cls(parse_hex(text))

    @classmethod
    def from_argb(cls, argb: int) -> Swatch:
        return cls(rgba_from_argb(argb))

    @classmethod
    def from_rgba(cls, red: float, green: float, blue: float, alpha: float = 1.0) -> Swatch:
        return cls(RGBA(red, green, blue, alpha))

    @classmethod
    def from_hsba(cls, hsba: HSBA) -> Swatch:
        return cls(hsba_to_rgba(hsba))

    @classmethod
    def from_hct(cls, hue: float, chroma: float, tone: float) -> Swatch:
        return cls(hct_to_rgba(Hct(hue, chroma, tone)))

    @property
    def hex_rgb(self) -> Hex:
        return format_hex(self.rgba)

    @property
    def hex_rgba(self) -> Hex:
        return format_hex(self.rgba, alpha=True)

    @property
    def rgb_int(self) -> int:
        return rgb_int(self.rgba)

    @property
    def hsba(self) -> HSBA:
        return rgba_to_hsba(self.rgba)

    @property
    def hct(self) -> Hct:
        return rgba_to_hct(self.rgba)

    @property
    def luminance(self) -> float:
        return luminance(self.rgba)

    @property
    def is_light(self) -> bool:
        return luminance(self.rgba) > LIGHT_THRESHOLD

    @property
    def contrasting_color(self) -> Swatch:
        return Swatch(contrasting(self.rgba))

    def adjust(self, *, saturation: float = 0.0, brightness: float = 0.0) -> Swatch:
        return Swatch(adjust(self.rgba, saturation=saturation, brightness=brightness))

    # ---- archived form ----

    def to_raw(self) -> str:
        """Base64 JSON of the RGBA components, or "" if they cannot be encoded."""
        try:
            payload = json.dumps({"rgba": [float(v) for v in self.rgba]}, allow_nan=False)
        except (TypeError, ValueError):
            log.exception("Could not archive color %r", self.rgba)
            return ""
        return base64.b64encode(payload.encode("utf-8")).decode("ascii")

    @classmethod
    def from_raw(cls, raw: str) -> Swatch | None:
        try:
            payload = json.loads(base64.b64decode(raw, validate=True))
            comps = [float(v) for v in payload["rgba"]]
            if len(comps) != 4:
                raise ValueError(f"expected 4 components, got {len(comps)}")
            if not all(0.0 <= v <= 1.0 for v in comps):
                raise ValueError("component out of range")
        except (binascii.Error, ValueError, KeyError, TypeError, RecursionError) as exc:
            log.warning("Could not decode archived color: %s", exc)
            return None
        return cls(RGBA(*comps))


__all__ = [
    "Color",
    "DEFAULT_RGBA",
    "Hct",
    "RGBA",
    "Swatch",
    "adjust",
    "argb_from_rgb",
    "contrasting",
    "format_hex",
    "hct_to_rgba",
    "hsba_to_rgba",
    "is_light",
    "luminance",
    "parse_hex",
    "rgb_int",
    "rgba_from_argb",
    "rgba_to_hct",
    "rgba_to_hsba",
]
