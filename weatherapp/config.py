from __future__ import annotations
import argparse
from dataclasses import dataclass

DEFAULT_WIDTH = 390
DEFAULT_HEIGHT = 844
DEFAULT_SCALE = 2.0

@dataclass
class Config:
    # Screen (logical units)
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    scale: float = DEFAULT_SCALE
    safe_top: int = 47
    safe_bottom: int = 34
    font_path: str | None = None

    # Output
    out: str = "weather.png"
    taps: int = 0
    frames_dir: str | None = None
    show: bool = False

    @property
    def render_size(self) -> tuple[int, int]:
        return int(round(self.width * self.scale)), int(round(self.height * self.scale))


def parse_args(argv: list[str] | None = None) -> Config:
    p = argparse.ArgumentParser("weatherapp")

    scr = p.add_argument_group("Screen")
    scr.add_argument("--w", "--width", dest="width", type=int, default=DEFAULT_WIDTH, help="Logical width")
    scr.add_argument("--h", "--height", dest="height", type=int, default=DEFAULT_HEIGHT, help="Logical height")
    scr.add_argument("--scale", type=float, default=DEFAULT_SCALE, help="Pixels per logical unit")
    scr.add_argument("--safe-top", type=int, default=47, help="Top safe-area inset (logical units)")
    scr.add_argument("--safe-bottom", type=int, default=34, help="Bottom safe-area inset (logical units)")
    scr.add_argument("--font", dest="font_path", type=str, default=None, help="Preferred TTF font")

    out = p.add_argument_group("Output")
    out.add_argument("--out", type=str, default="weather.png", help="PNG written after the last tap")
    out.add_argument("--taps", type=int, default=0, help="Simulated presses of the day/night button")
    out.add_argument("--frames-dir", type=str, default=None, help="Write every presented frame here")
    out.add_argument("--show", action="store_true", help="Open the final frame in the system viewer")

    args = p.parse_args(argv)

    width, height, scale = args.width, args.height, args.scale
    if width <= 0 or height <= 0:
        print(f"[config] invalid size {width}x{height}; using {DEFAULT_WIDTH}x{DEFAULT_HEIGHT}", flush=True)
        width, height = DEFAULT_WIDTH, DEFAULT_HEIGHT
    if scale <= 0:
        print(f"[config] invalid scale {scale}; using {DEFAULT_SCALE}", flush=True)
        scale = DEFAULT_SCALE

    return Config(
        width=width,
        height=height,
        scale=scale,
        safe_top=max(0, args.safe_top),
        safe_bottom=max(0, args.safe_bottom),
        font_path=args.font_path,
        out=args.out,
        taps=max(0, args.taps),
        frames_dir=args.frames_dir,
        show=args.show,
    )
