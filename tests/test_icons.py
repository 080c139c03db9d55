import pytest

from weatherapp.data.forecast import FORECAST
from weatherapp.icons import DAY_ICON, GLYPHS, NIGHT_ICON, main_icon, render_icon
from weatherapp.renderer.pillow_renderer import to_ndarray


def test_main_icon_follows_flag():
    assert main_icon(False) == DAY_ICON == "cloud.sun.fill"
    assert main_icon(True) == NIGHT_ICON == "moon.stars.fill"


@pytest.mark.parametrize("icon_id", sorted({DAY_ICON, NIGHT_ICON, *(d.icon_id for d in FORECAST)}))
def test_every_used_icon_has_a_glyph(icon_id):
    assert icon_id in GLYPHS
    im = render_icon(icon_id, 40)
    assert im.size == (40, 40)
    assert im.mode == "RGBA"
    assert to_ndarray(im)[..., 3].max() > 0


def test_glyphs_keep_native_colors():
    # sun is drawn yellow, not tinted white
    im = render_icon("sun.max.fill", 60)
    r, g, b, a = im.getpixel((30, 30))
    assert a == 255 and r > 200 and b < 80


@pytest.mark.parametrize("icon_id", [None, ""])
def test_unset_icon_renders_nothing(icon_id):
    assert render_icon(icon_id, 40) is None


def test_unknown_icon_gets_placeholder():
    assert "no.such.symbol" not in GLYPHS
    im = render_icon("no.such.symbol", 40)
    assert im is not None
    assert to_ndarray(im)[..., 3].max() > 0
