#
# PROJECT: ascii-wireframe
# MODULE: ascii_wireframe/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .errors import (RenderError, InvalidGeometryError,
                     DegenerateProjectionError, ZeroMagnitudeVectorError)
from .math_utils import Vec3
from .transform import rotate_x, rotate_y, rotate, rotate_vertices
from .projector import project, project_vertices
from .screen import to_screen, in_bounds
from .canvas import FrameBuffer
from .rasterizer import draw_line, plot_point
from .mesh import Mesh
from .animation import AnimationState
from .config import RenderConfig
from .renderer import Renderer, build_frame
