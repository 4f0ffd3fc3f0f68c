#
# PROJECT: ascii-wireframe
# MODULE: ascii_wireframe/mesh.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from typing import Iterator, Optional, Sequence, Tuple

from .errors import InvalidGeometryError
from .math_utils import Vec3


class Mesh:
    """
    Wireframe object: base vertices, a flat edge index list read pairwise,
    a uniform projection scale and a world-space center.

    Vertices are stored once and never modified; every frame rotates a fresh
    copy. Construction does not validate, call validate() (the frame builder
    does so on every frame).
    """

    def __init__(self, vertices: Sequence, edges: Sequence[int],
                 size: float = 1.0, center: Optional[Vec3] = None):
        self.vertices = tuple(v if isinstance(v, Vec3) else Vec3(*v) for v in vertices)
        self.edges = tuple(edges)
        self.size = size
        self.center = center if center is not None else Vec3(0.0, 0.0, 0.0)

    def __repr__(self):
        return (f"Mesh(vertices={len(self.vertices)}, edges={len(self.edges) // 2}, "
                f"size={self.size}, center={self.center!r})")

    def validate(self):
        """Raise InvalidGeometryError if the edge list or size is malformed."""
        if not self.size > 0:
            raise InvalidGeometryError(f"mesh size must be > 0, got {self.size!r}")
        if len(self.edges) % 2:
            raise InvalidGeometryError(
                f"edge list has odd length {len(self.edges)}; indices come in pairs")
        n = len(self.vertices)
        for pos, idx in enumerate(self.edges):
            if isinstance(idx, bool) or not isinstance(idx, int):
                raise InvalidGeometryError(
                    f"edge index {idx!r} at position {pos} is not an integer")
            if idx < 0 or idx >= n:
                raise InvalidGeometryError(
                    f"edge index {idx} at position {pos} out of range for {n} vertices")

    def edge_pairs(self) -> Iterator[Tuple[int, int]]:
        e = self.edges
        for i in range(0, len(e) - 1, 2):
            yield e[i], e[i + 1]

    @classmethod
    def cube(cls, size: float = 12.0, center: Optional[Vec3] = None) -> 'Mesh':
        """Unit cube (corners at +-1) centered on the origin, 12 edges."""
        vertices = [
            (-1, -1, -1), ( 1, -1, -1), ( 1,  1, -1), (-1,  1, -1),
            (-1, -1,  1), ( 1, -1,  1), ( 1,  1,  1), (-1,  1,  1),
        ]
        edges = [
            0, 1,  1, 2,  2, 3,  3, 0,  # bottom square
            4, 5,  5, 6,  6, 7,  7, 4,  # top square
            0, 4,  1, 5,  2, 6,  3, 7,  # verticals
        ]
        return cls(vertices, edges, size=size, center=center)
