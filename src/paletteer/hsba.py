from __future__ import annotations

import re
from dataclasses import dataclass

_LABEL_RE = re.compile(
    r"^\s*H(?P<h>-?\d+)\s+S(?P<s>-?\d+)\s+B(?P<b>-?\d+)(?:\s+A(?P<a>-?\d+))?\s*$",
    re.IGNORECASE,
)


def _r(x: float) -> int:
    # half away from zero, not banker's rounding
    return int(x + 0.5) if x >= 0 else -int(-x + 0.5)


@dataclass(frozen=True)
class HSBA:
    """Hue in degrees, saturation/brightness/alpha as percentages."""

    hue: float
    saturation: float
    brightness: float
    alpha: float = 100.0

    @property
    def label(self) -> str:
        text = f"H{_r(self.hue)} S{_r(self.saturation)} B{_r(self.brightness)}"
        if self.alpha != 100.0:
            text += f" A{_r(self.alpha)}"
        return text

    @classmethod
    def parse(cls, label: str) -> HSBA:
        """
        Inverse of `label`. Components come back as whole numbers, so
        ``HSBA.parse(x.label)`` only approximates ``x``.
        """
        m = _LABEL_RE.match(label or "")
        if m is None:
            raise ValueError(f"invalid HSBA label: {label!r}")
        a = m.group("a")
        return cls(
            hue=float(m.group("h")),
            saturation=float(m.group("s")),
            brightness=float(m.group("b")),
            alpha=100.0 if a is None else float(a),
        )

    def __str__(self) -> str:
        return self.label


__all__ = ["HSBA"]
