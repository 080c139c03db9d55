from weatherapp import theme
from weatherapp.app import WeatherApp
from weatherapp.config import Config
from weatherapp.core.compositor import Compositor
from weatherapp.data.forecast import FORECAST
from weatherapp.icons import DAY_ICON, NIGHT_ICON
from weatherapp.layers.background import BackgroundLayer
from weatherapp.pages import safe_bounds
from weatherapp.renderer import pillow_renderer


def _corners(frame):
    w, h = frame.size
    return frame.getpixel((0, 0)), frame.getpixel((w - 1, h - 1))


def test_initial_render_is_day(app):
    frame = app.render()
    assert frame.size == app.cfg.render_size
    assert app.state.is_night is False
    assert _corners(frame) == (theme.BLUE, theme.LIGHT_BLUE)
    assert app.main_status.icon_id == DAY_ICON
    assert app.main_status.temperature_text == "76°"


def test_single_press_switches_to_night(app):
    day = app.render()
    assert app.press_button() is True
    assert app.state.is_night is True
    assert app.main_status.icon_id == NIGHT_ICON

    night = app.render()
    assert _corners(night) == (theme.BLACK, theme.GRAY)
    x, y, w, h = app.main_status.bounds
    box = (x, y, x + w, y + app.main_status.icon_size)
    assert day.crop(box).tobytes() != night.crop(box).tobytes()


def test_two_presses_restore_day(app):
    app.render()
    app.press_button()
    app.press_button()
    assert app.state.is_night is False
    assert app.main_status.icon_id == DAY_ICON
    assert _corners(app.render()) == (theme.BLUE, theme.LIGHT_BLUE)


def test_press_outside_button_is_ignored(app):
    app.render()
    assert app.press(0, 0) is False
    x, y, w, h = app.button.bounds
    assert app.press(x + w / 2, y - 1) is False
    assert app.state.is_night is False


def test_forecast_row_order(app):
    app.render()
    days = app.forecast
    assert [(d.day_of_week, d.temperature) for d in days] == [
        ("TUE", 70), ("WED", 82), ("THU", 55), ("FRI", 72), ("SAT", 34),
    ]
    assert [d.icon_id for d in days] == [f.icon_id for f in FORECAST]
    assert [d.temperature_text for d in days] == ["70°", "82°", "55°", "72°", "34°"]


def test_forecast_row_is_evenly_spaced(app):
    days = app.forecast
    spacing = int(round(20 * app.cfg.scale))
    for left, right in zip(days, days[1:]):
        lx, ly, lw, lh = left.bounds
        rx, ry, rw, rh = right.bounds
        assert rx - (lx + lw) == spacing
        assert ly + lh // 2 == ry + rh // 2


def test_stack_order_and_safe_area(app):
    sx, sy, sw, sh = safe_bounds(app.cfg)
    city, status, button = app.page.layers[1], app.main_status, app.button
    first_day = app.forecast[0]
    assert sy <= city.bounds[1] < status.bounds[1] < first_day.bounds[1] < button.bounds[1]
    bx, by, bw, bh = button.bounds
    assert by + bh <= sy + sh


def test_background_is_drawn_first(app):
    assert app.page.layers[0] is app.background
    assert app.background.bounds == (0, 0, *app.cfg.render_size)


def test_frames_presented_only_on_change():
    frames = []
    app = WeatherApp(Config(scale=1.0), on_present=frames.append)
    app.render()
    app.render()
    assert len(frames) == 1
    app.press_button()
    assert len(frames) == 2
    app.render()
    assert len(frames) == 2


def test_config_font_path_reaches_the_renderer(tmp_path):
    font = str(tmp_path / "missing.ttf")
    try:
        app = WeatherApp(Config(scale=1.0, font_path=font))
        assert pillow_renderer._PREFERRED_FONT == font
        # an unreadable preferred font falls back and still renders
        assert app.render().size == (390, 844)
    finally:
        pillow_renderer.set_preferred_font(None)


def test_layers_off_screen_are_clipped():
    comp = Compositor(w=10, h=10)
    layer = BackgroundLayer(width=6, height=6, get_is_night=lambda: True)
    layer.tick(0.0)
    layer.move_to(7, -3)
    comp.compose([layer])
    frame = comp.present()
    assert frame.size == (10, 10)
    assert frame.getpixel((0, 0)) == (0, 0, 0, 255)
    assert frame.getpixel((9, 0))[3] == 255
