from __future__ import annotations
from typing import Tuple

RGBA = Tuple[int, int, int, int]

WHITE: RGBA = (255, 255, 255, 255)
BLACK: RGBA = (0, 0, 0, 255)
GRAY: RGBA = (142, 142, 147, 255)
BLUE: RGBA = (0, 122, 255, 255)
# Named "lightBlue" colour resource.
LIGHT_BLUE: RGBA = (135, 206, 250, 255)

DAY_PALETTE: Tuple[RGBA, RGBA] = (BLUE, LIGHT_BLUE)
NIGHT_PALETTE: Tuple[RGBA, RGBA] = (BLACK, GRAY)

# Glyph colours
SUN_YELLOW: RGBA = (255, 204, 0, 255)
SUNSET_ORANGE: RGBA = (255, 149, 0, 255)
CLOUD_WHITE: RGBA = (250, 250, 252, 255)
MOON_CREAM: RGBA = (255, 241, 190, 255)
SNOW_ICE: RGBA = (214, 236, 255, 255)
RAIN_BLUE: RGBA = (64, 156, 255, 255)
PLACEHOLDER_GRAY: RGBA = (200, 200, 205, 255)
