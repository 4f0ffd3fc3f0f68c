#
# PROJECT: ascii-wireframe
# MODULE: ascii_wireframe/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math

from .canvas import FrameBuffer
from .math_utils import round_half_away


def plot_point(p, canvas: FrameBuffer) -> bool:
    """Mark a single screen point; False if it fell outside the buffer."""
    return canvas.plot(p[0], p[1])


def _visible_steps(start: int, inc: float, size: int, step: int):
    """
    Range of sample indices j in [0, step] whose coordinate start + j*inc
    can round into [0, size). Returns (lo, hi) or None when no sample can.
    The range is widened by rounding outward; plot() does the exact test.
    """
    lo_edge, hi_edge = -0.5, size - 0.5
    if inc == 0:
        if lo_edge <= start <= hi_edge:
            return 0, step
        return None

    ta = (lo_edge - start) / inc
    tb = (hi_edge - start) / inc
    lo_t, hi_t = min(ta, tb), max(ta, tb)
    if hi_t < 0 or lo_t > step:
        return None
    lo = 0 if lo_t <= 0 else max(0, math.floor(lo_t))
    hi = step if hi_t >= step else min(step, math.ceil(hi_t))
    return lo, hi


def draw_line(p1, p2, canvas: FrameBuffer) -> int:
    """
    Draws a line with the DDA algorithm.

    Takes max(|dx|, |dy|) steps, sampling both endpoints, and rounds each
    sample to the nearest cell. Coincident endpoints draw nothing; the caller
    plots lone points itself. Returns the number of cells written.

    The sample range is clipped against the buffer first, so a segment
    reaching far off-screen costs no more than one crossing the grid.
    """
    x1, y1 = int(p1[0]), int(p1[1])
    x2, y2 = int(p2[0]), int(p2[1])

    dx = x2 - x1
    dy = y2 - y1
    step = max(abs(dx), abs(dy))
    if step == 0:
        return 0

    x_inc = dx / step
    y_inc = dy / step

    x_range = _visible_steps(x1, x_inc, canvas.w, step)
    y_range = _visible_steps(y1, y_inc, canvas.h, step)
    if x_range is None or y_range is None:
        return 0
    j_lo = max(x_range[0], y_range[0])
    j_hi = min(x_range[1], y_range[1])

    written = 0
    for j in range(j_lo, j_hi + 1):
        if canvas.plot(round_half_away(x1 + j * x_inc), round_half_away(y1 + j * y_inc)):
            written += 1
    return written
