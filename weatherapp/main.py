from __future__ import annotations
import sys
from pathlib import Path
from typing import Optional

from weatherapp.app import WeatherApp
from weatherapp.config import parse_args


def main(argv: Optional[list[str]] = None) -> int:
    cfg = parse_args(argv)

    frames_dir = Path(cfg.frames_dir).expanduser() if cfg.frames_dir else None
    if frames_dir:
        frames_dir.mkdir(parents=True, exist_ok=True)
    written = 0

    def on_present(image):
        nonlocal written
        if not frames_dir:
            return
        path = frames_dir / f"frame_{written:03d}.png"
        image.save(path)
        written += 1
        print(f"[WeatherApp] wrote {path}", flush=True)

    app = WeatherApp(cfg, on_present=on_present)
    app.render()
    for _ in range(cfg.taps):
        app.press_button()
    frame = app.render()

    try:
        frame.save(cfg.out)
    except (OSError, ValueError) as e:
        print(f"[WeatherApp] could not write {cfg.out}: {e!r}", flush=True)
        return 1
    mode = "night" if app.state.is_night else "day"
    print(f"[WeatherApp] wrote {cfg.out} ({mode})", flush=True)

    if cfg.show:
        frame.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
