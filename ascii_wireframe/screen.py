#
# PROJECT: ascii-wireframe
# MODULE: ascii_wireframe/screen.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
from typing import Tuple

from .errors import DegenerateProjectionError
from .math_utils import round_half_away

ScreenPoint = Tuple[int, int]


def to_screen(projected, scale: float, width: int, height: int) -> ScreenPoint:
    """
    Map a normalized (x, y) point, nominally in [-1, 1], onto grid cells.

    Y is flipped: projected Y grows upward, screen rows grow downward.
    The result is NOT clamped; points outside the grid are dropped by the
    frame buffer when plotted. Raises DegenerateProjectionError if the
    mapping overflows to a non-finite value.
    """
    px, py = projected
    fx = ((px * scale) + 1.0) * 0.5 * (width - 1)
    fy = (1.0 - ((py * scale) + 1.0) * 0.5) * (height - 1)
    if not (math.isfinite(fx) and math.isfinite(fy)):
        raise DegenerateProjectionError(f"{projected!r} maps outside finite screen space")
    return (round_half_away(fx), round_half_away(fy))


def in_bounds(point: ScreenPoint, width: int, height: int) -> bool:
    x, y = point
    return 0 <= x < width and 0 <= y < height
