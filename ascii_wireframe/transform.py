#
# PROJECT: ascii-wireframe
# MODULE: ascii_wireframe/transform.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
from typing import Iterable, List

from .math_utils import Vec3


def rotate_x(v: Vec3, angle: float) -> Vec3:
    """Rotate v about the X axis by `angle` degrees."""
    rad = math.radians(angle)
    c = math.cos(rad)
    s = math.sin(rad)
    return Vec3(v.x,
                v.y * c - v.z * s,
                v.y * s + v.z * c)


def rotate_y(v: Vec3, angle: float) -> Vec3:
    """Rotate v about the Y axis by `angle` degrees."""
    rad = math.radians(angle)
    c = math.cos(rad)
    s = math.sin(rad)
    return Vec3(v.x * c + v.z * s,
                v.y,
                -v.x * s + v.z * c)


def rotate(v: Vec3, angle_x: float, angle_y: float) -> Vec3:
    """X rotation first, then Y. The order is not interchangeable."""
    return rotate_y(rotate_x(v, angle_x), angle_y)


def rotate_vertices(vertices: Iterable[Vec3], angle_x: float, angle_y: float) -> List[Vec3]:
    """
    Rotate a whole vertex set by the total accumulated angles.

    Always fed the mesh's base (unrotated) vertices, so repeated frames never
    compound rounding error. The input sequence is left untouched.
    """
    return [rotate(v, angle_x, angle_y) for v in vertices]
