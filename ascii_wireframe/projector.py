#
# PROJECT: ascii-wireframe
# MODULE: ascii_wireframe/projector.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import math
from typing import List, Optional, Sequence, Tuple

from .errors import DegenerateProjectionError
from .math_utils import Vec3

logger = logging.getLogger(__name__)

Projected = Tuple[float, float]


def fov_scale(fov: float) -> float:
    """1 / tan(fov / 2), fov in degrees."""
    return 1.0 / math.tan(math.radians(fov) / 2.0)


def project(vertex: Vec3, camera_distance: float, fov: float,
            object_scale: float, near_clip: float = 0.0) -> Projected:
    """
    Perspective-project a camera-relative vertex to the normalized plane.

    The camera sits `camera_distance` behind the origin on Z. Raises
    DegenerateProjectionError when the vertex is at or behind the near plane
    or the divide would not yield a finite point.
    """
    if not vertex.is_finite():
        raise DegenerateProjectionError(f"non-finite vertex {vertex!r}")

    distance = vertex.z + camera_distance
    if not distance > near_clip:
        raise DegenerateProjectionError(
            f"{vertex!r} at camera distance {distance:.3f} is not in front of "
            f"the near plane ({near_clip})")

    division_factor = fov_scale(fov) / distance * object_scale
    if division_factor == 0 or not math.isfinite(division_factor):
        raise DegenerateProjectionError(
            f"division factor {division_factor!r} for {vertex!r}")

    x = vertex.x / division_factor
    y = vertex.y / division_factor
    if not (math.isfinite(x) and math.isfinite(y)):
        raise DegenerateProjectionError(f"non-finite projection of {vertex!r}")
    return (x, y)


def project_vertices(vertices: Sequence[Vec3], camera_distance: float, fov: float,
                     object_scale: float, near_clip: float = 0.0) -> List[Optional[Projected]]:
    """
    Project every vertex; degenerate ones come back as None so the caller
    can leave them (and their edges) out of this frame.
    """
    projected: List[Optional[Projected]] = []
    for i, v in enumerate(vertices):
        try:
            projected.append(project(v, camera_distance, fov, object_scale, near_clip))
        except DegenerateProjectionError as e:
            logger.debug("Excluding vertex %d: %s", i, e)
            projected.append(None)
    return projected
