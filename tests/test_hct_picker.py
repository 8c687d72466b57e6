import pytest

from paletteer.color_convert import Swatch
from paletteer.hct_picker import ColorSpace, HCTPicker


def test_sliders_start_at_median():
    p = HCTPicker(title="Primary")
    assert (p.hue, p.chroma, p.tone) == (180.0, 50.0, 50.0)
    assert not p.showing


def test_open_loads_sliders_from_color():
    blue = Swatch.from_hex("#3366cc")
    p = HCTPicker(title="Primary", color=blue)
    p.open()
    hct = blue.hct
    assert p.showing
    assert p.hue == pytest.approx(hct.hue)
    assert p.chroma == pytest.approx(hct.chroma)
    assert p.tone == pytest.approx(hct.tone)
    # opening alone does not touch the color
    assert p.color == blue


def test_chroma_slider_clamps_to_range():
    p = HCTPicker(color=Swatch.from_hex("#ff0000"))
    p.open()
    assert p.chroma == 100.0
    p.set_chroma(250.0)
    assert p.chroma == 100.0
    p.set_hue(-5.0)
    assert p.hue == 0.0


def test_moving_slider_rebuilds_color():
    p = HCTPicker(color=Swatch.from_hex("#3366cc"))
    p.open()
    before = p.color
    p.set_tone(90.0)
    assert p.color != before
    assert p.color.hct.tone == pytest.approx(90.0, abs=1.5)
    assert p.color.is_light


def test_switching_space_reloads_sliders():
    p = HCTPicker()
    p.set_tone(80.0)
    p.select(Swatch.from_hex("#000000"))
    p.set_color_space(ColorSpace.RGB)
    assert p.tone == pytest.approx(0.0, abs=1e-6)
    assert ColorSpace.RGB.title == "RGB"


def test_toggle():
    p = HCTPicker()
    p.toggle()
    assert p.showing
    p.toggle()
    assert not p.showing


def test_readout_and_copy_text():
    p = HCTPicker(color=Swatch.from_hex("#ff0000"))
    p.open()
    rows = dict(p.color_values())
    assert rows["RGB"] == "#FF0000"
    assert rows["HCT"] == p.color.hct.label
    assert p.copy_text("rgb") == "#FF0000"
    assert p.steppers() == {"Hue": int(p.hue), "Chroma": 100, "Tone": int(p.tone)}
    with pytest.raises(ValueError):
        p.copy_text("cmyk")
