#
# PROJECT: ascii-wireframe
# MODULE: ascii_wireframe/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math

from .errors import ZeroMagnitudeVectorError


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


class Vec3:
    """Immutable 3-component vector. Every operation returns a new Vec3."""
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))
        object.__setattr__(self, "z", float(z))

    def __setattr__(self, name, value):
        raise AttributeError(f"Vec3 is immutable; cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Vec3 is immutable; cannot delete {name!r}")

    def __repr__(self):
        return f"Vec3({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("Vec3 index out of range")

    def __eq__(self, other):
        if isinstance(other, Vec3):
            return self.x == other.x and self.y == other.y and self.z == other.z
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __add__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, scalar):
        if isinstance(scalar, Vec3):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> 'Vec3':
        """
        Unit vector in the same direction.

        Raises ZeroMagnitudeVectorError for the zero vector instead of
        returning NaN components.
        """
        m = self.magnitude()
        if m == 0:
            raise ZeroMagnitudeVectorError(f"cannot normalize zero-length {self!r}")
        return self / m

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)


# Function-style aliases for callers that prefer them over operators.

def add(a: Vec3, b: Vec3) -> Vec3:
    return a + b


def subtract(a: Vec3, b: Vec3) -> Vec3:
    return a - b


def scale(v: Vec3, s: float) -> Vec3:
    return v * s


def dot(a: Vec3, b: Vec3) -> float:
    return a.dot(b)


def normalize(v: Vec3) -> Vec3:
    return v.normalize()
