from PIL import Image

from weatherapp import theme
from weatherapp.config import Config, parse_args
from weatherapp.main import main


def test_parse_args_defaults():
    cfg = parse_args([])
    assert (cfg.width, cfg.height, cfg.scale) == (390, 844, 2.0)
    assert cfg.render_size == (780, 1688)
    assert cfg.taps == 0


def test_parse_args_rejects_bad_size(capsys):
    cfg = parse_args(["--w", "0", "--scale", "-1", "--taps", "-3"])
    assert (cfg.width, cfg.height, cfg.scale) == (390, 844, 2.0)
    assert cfg.taps == 0
    assert "[config]" in capsys.readouterr().out


def test_render_size_rounds():
    assert Config(width=100, height=50, scale=1.5).render_size == (150, 75)


def test_main_writes_day_frame(tmp_path):
    out = tmp_path / "day.png"
    assert main(["--scale", "1", "--out", str(out)]) == 0
    with Image.open(out) as im:
        assert im.size == (390, 844)
        assert im.convert("RGBA").getpixel((0, 0)) == theme.BLUE


def test_main_taps_and_frames(tmp_path, capsys):
    out = tmp_path / "night.png"
    frames = tmp_path / "frames"
    assert main(["--scale", "1", "--out", str(out), "--taps", "1", "--frames-dir", str(frames)]) == 0
    assert sorted(p.name for p in frames.iterdir()) == ["frame_000.png", "frame_001.png"]
    with Image.open(out) as im:
        assert im.convert("RGBA").getpixel((0, 0)) == theme.BLACK
    assert "(night)" in capsys.readouterr().out


def test_main_reports_unwritable_output(tmp_path, capsys):
    out = tmp_path / "missing" / "w.png"
    assert main(["--scale", "1", "--out", str(out)]) == 1
    assert "could not write" in capsys.readouterr().out
