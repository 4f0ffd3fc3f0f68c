#
# PROJECT: ascii-wireframe
# MODULE: ascii_wireframe/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

class RenderError(Exception):
    """Base class for everything the render pipeline raises."""


class InvalidGeometryError(RenderError):
    """
    Structural mesh problem: odd-length edge list, edge index outside the
    vertex range, or a non-positive size.  Fatal for the render loop.
    """


class DegenerateProjectionError(RenderError):
    """
    A vertex cannot be projected: it sits at or behind the camera plane, or
    the perspective divide would produce a zero factor / non-finite result.
    The frame builder recovers by excluding the vertex for that frame.
    """


class ZeroMagnitudeVectorError(RenderError, ZeroDivisionError):
    """normalize() called on a zero-length vector."""
