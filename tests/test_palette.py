import numpy as np
import pytest

from paletteer.color_convert import Swatch
from paletteer.palette import TonalPalette, tonal_palette, tone_steps


def test_tone_steps_endpoints_and_order():
    for schedule in ("linear", "ease", "shadow", "highlight"):
        t = tone_steps(9, schedule=schedule)
        assert len(t) == 9
        assert t[0] == 100.0 and t[-1] == 0.0
        assert all(a > b for a, b in zip(t, t[1:]))


def test_linear_is_even():
    assert np.allclose(tone_steps(5, schedule="linear"), [100, 75, 50, 25, 0])


def test_shadow_and_highlight_lean():
    lin = np.mean(tone_steps(11, schedule="linear")[1:-1])
    assert np.mean(tone_steps(11, schedule="shadow")[1:-1]) < lin
    assert np.mean(tone_steps(11, schedule="highlight")[1:-1]) > lin


def test_tone_steps_rejects():
    with pytest.raises(ValueError):
        tone_steps(2)
    with pytest.raises(ValueError):
        tone_steps(5, schedule="wobbly")  # type: ignore[arg-type]


def test_palette_ends_white_and_black():
    out = tonal_palette("#3366cc", 7)
    assert len(out) == 7
    assert out[0] == "#ffffff"
    assert out[-1] == "#000000"


def test_palette_keeps_seed_hue():
    seed = Swatch.from_hex("#2e8b57")
    pal = TonalPalette.from_seed(seed)
    mid = pal.tone(50.0)
    assert mid.hct.hue == pytest.approx(seed.hct.hue, abs=2.0)
    assert mid.hct.tone == pytest.approx(50.0, abs=1.0)


def test_palette_luminance_falls():
    ramp = TonalPalette.from_seed(Swatch.from_hex("#ffa500")).ramp(9, schedule="linear")
    lum = [s.luminance for s in ramp]
    assert all(a >= b - 1e-9 for a, b in zip(lum, lum[1:]))
