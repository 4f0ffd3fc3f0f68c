#
# PROJECT: ascii-wireframe
# MODULE: ascii_wireframe/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
import logging
import time
from typing import Callable, Optional

from .animation import AnimationState
from .canvas import FrameBuffer
from .config import RenderConfig
from .errors import InvalidGeometryError, RenderError
from .mesh import Mesh
from .renderer import Renderer
from .terminal import hidden_cursor, write_frame

logger = logging.getLogger(__name__)


def render_safely(renderer: Renderer, mesh: Mesh, state: AnimationState) -> Optional[FrameBuffer]:
    """
    Render one frame, recovering from per-frame geometry problems.

    InvalidGeometryError is a programming error and propagates; any other
    RenderError skips the frame with a warning.
    """
    try:
        return renderer.render(mesh, state)
    except InvalidGeometryError:
        raise
    except RenderError as e:
        logger.warning("Skipping frame %d: %s", state.frame, e)
        return None


class StreamApp:
    """
    Plain driver: prints each frame as one text blob to a stream, homing the
    cursor with ANSI escapes when the terminal supports them.
    """

    def __init__(self, config: RenderConfig, mesh: Mesh, stream=None,
                 sleep: Callable[[float], None] = time.sleep):
        mesh.validate()
        self.config = config
        self.mesh = mesh
        self.stream = stream
        self.sleep = sleep
        self.renderer = Renderer(config)
        self.state = AnimationState()

    def run(self, max_frames: Optional[int] = None) -> int:
        """Run until interrupted or `max_frames` frames; returns frames shown."""
        cfg = self.config
        shown = 0
        with hidden_cursor(self.stream, use_ansi=cfg.use_ansi) as stream:
            try:
                while max_frames is None or shown < max_frames:
                    frame = render_safely(self.renderer, self.mesh, self.state)
                    if frame is not None:
                        write_frame(frame, stream, use_ansi=cfg.use_ansi)
                        shown += 1
                    self.state.advance(cfg.x_step, cfg.y_step)
                    self.sleep(cfg.frame_delay)
            except KeyboardInterrupt:
                logger.info("Interrupted after %d frames", shown)
        return shown


class DemoApp:
    """
    Interactive curses harness: spins the mesh, handles keys, draws a
    header line above the frame.
    """

    def __init__(self, stdscr, config: RenderConfig, mesh: Mesh,
                 max_frames: Optional[int] = None):
        self.stdscr = stdscr
        self.running = True
        self.paused = False
        self.max_frames = max_frames

        # ── Curses setup ────────────────────────────────────────────────
        curses.curs_set(0)
        stdscr.nodelay(True)

        mesh.validate()
        self.config = config
        self.mesh = mesh
        self.renderer = Renderer(config)
        self.state = AnimationState()

        # ── Frame counter ───────────────────────────────────────────────
        self.frames_shown = 0
        self.frame_count = 0
        self.fps = 0
        self.last_fps_time = time.time()

    # ────────────────────────────────────────────────────────────────────
    # Input
    # ────────────────────────────────────────────────────────────────────
    def handle_input(self):
        try:
            key = self.stdscr.getch()
        except curses.error:
            key = -1

        if key == -1:
            return

        config = self.config

        if key == ord('q'):
            self.running = False
        elif key == ord(' '):
            self.paused = not self.paused
        elif key == ord('r'):
            self.state.reset()
        elif key in (ord('='), ord('+')):
            config.camera_distance = max(0.5, config.camera_distance - 0.5)
        elif key == ord('-'):
            config.camera_distance += 0.5
        elif key == ord('['):
            config.fov = max(10.0, config.fov - 5)
        elif key == ord(']'):
            config.fov = min(170.0, config.fov + 5)

    # ────────────────────────────────────────────────────────────────────
    # Main loop
    # ────────────────────────────────────────────────────────────────────
    def run(self) -> int:
        cfg = self.config
        while self.running:
            start_time = time.time()

            self.handle_input()

            frame = render_safely(self.renderer, self.mesh, self.state)
            if frame is not None:
                self.renderer.draw(self.stdscr, top=1)
                self.frames_shown += 1

            # ── Header (line 0) ─────────────────────────────────────────
            th, tw = self.stdscr.getmaxyx()
            self.frame_count += 1
            now = time.time()
            if now - self.last_fps_time >= 1.0:
                self.fps = self.frame_count
                self.frame_count = 0
                self.last_fps_time = now

            ms = (now - start_time) * 1000
            hdr = (f" RX:{self.state.angle_x:6.1f} RY:{self.state.angle_y:6.1f}"
                   f" | FOV:{cfg.fov:.0f} D:{cfg.camera_distance:.1f}"
                   f" | FPS:{self.fps} | {ms:.1f}ms"
                   f"{' | PAUSED' if self.paused else ''} ")
            if tw > 1:
                try:
                    self.stdscr.addstr(0, 0, hdr.center(tw - 1, '=')[:tw - 1], curses.A_BOLD)
                except curses.error:
                    pass

            self.stdscr.refresh()

            if not self.paused:
                self.state.advance(cfg.x_step, cfg.y_step)
            if self.max_frames is not None and self.frames_shown >= self.max_frames:
                self.running = False
            time.sleep(cfg.frame_delay)
        return self.frames_shown


def main(stdscr, config: RenderConfig, mesh: Mesh, max_frames: Optional[int] = None) -> int:
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, config, mesh, max_frames=max_frames)
    return app.run()
