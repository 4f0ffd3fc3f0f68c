#
# PROJECT: ascii-wireframe
# MODULE: ascii_wireframe/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
import logging
from typing import Optional

from .animation import AnimationState
from .canvas import FrameBuffer
from .config import RenderConfig
from .errors import DegenerateProjectionError
from .mesh import Mesh
from .projector import project_vertices
from .rasterizer import draw_line, plot_point
from .screen import to_screen
from .transform import rotate_vertices

logger = logging.getLogger(__name__)


def build_frame(mesh: Mesh, rotation_x: float, rotation_y: float,
                width: int, height: int, fov: float, camera_distance: float,
                buffer: Optional[FrameBuffer] = None,
                screen_scale: float = 1.0, near_clip: float = 0.1) -> FrameBuffer:
    """
    Build one frame of the wireframe.

    Pipeline:
      1. Validate mesh edges (InvalidGeometryError on bad indices)
      2. Rotate the base vertices, X then Y, by the total angles
      3. Offset by the mesh center and perspective-project
      4. Map to grid cells, plot every vertex
      5. Draw every edge whose endpoints both survived projection

    `buffer`, when given, is cleared and reused; it must match width/height.
    The result depends only on the arguments.
    """
    mesh.validate()

    if buffer is None:
        buffer = FrameBuffer(width, height)
    elif (buffer.w, buffer.h) != (width, height):
        raise ValueError(f"buffer is {buffer.w}x{buffer.h}, frame is {width}x{height}")
    buffer.clear()

    rotated = rotate_vertices(mesh.vertices, rotation_x, rotation_y)
    center = mesh.center
    placed = [v + center for v in rotated]

    projected = project_vertices(placed, camera_distance, fov, mesh.size, near_clip)

    screen_v = [None] * len(projected)
    for i, p in enumerate(projected):
        if p is None:
            continue
        try:
            pt = to_screen(p, screen_scale, width, height)
        except DegenerateProjectionError as e:
            logger.debug("Excluding vertex %d: %s", i, e)
            continue
        screen_v[i] = pt
        plot_point(pt, buffer)

    for a, b in mesh.edge_pairs():
        start, end = screen_v[a], screen_v[b]
        if start is None or end is None:
            continue
        draw_line(start, end, buffer)

    return buffer


class Renderer:
    """
    Per-frame renderer holding the one frame buffer the loop reuses.

    render(mesh, state) rebuilds the buffer from the base mesh and the
    current angles; draw(stdscr) copies it to a curses window.
    """

    def __init__(self, config: RenderConfig):
        self.config = config
        self.buffer = FrameBuffer(config.width, config.height,
                                  mark=config.mark_char, blank=config.blank_char)

    def render(self, mesh: Mesh, state: AnimationState) -> FrameBuffer:
        cfg = self.config
        return build_frame(mesh, state.angle_x, state.angle_y,
                           cfg.width, cfg.height, cfg.fov, cfg.camera_distance,
                           buffer=self.buffer,
                           screen_scale=cfg.screen_scale,
                           near_clip=cfg.near_clip)

    def draw(self, stdscr, top: int = 1):
        """
        Output the buffer to curses starting at row `top`, clipped to the
        window. Does NOT call stdscr.refresh().
        """
        th, tw = stdscr.getmaxyx()
        stdscr.erase()
        max_rows = max(0, th - top)
        max_cols = max(0, tw - 1)
        if max_cols == 0:
            return
        for y, row in enumerate(self.buffer.rows()):
            if y >= max_rows:
                break
            try:
                stdscr.addstr(y + top, 0, row[:max_cols])
            except curses.error:
                # Writing the bottom-right cell raises even on success
                pass
