"""Vector, colour and vertex value types used by scene objects."""

from __future__ import annotations

import math
from dataclasses import dataclass

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720


@dataclass(frozen=True)
class Vec2:
    """A two-component vector, used mostly for texture coordinates."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: float) -> Vec2:
        return Vec2(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Vec3:
    """A three-component vector for positions, rotations, sizes and normals."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scale: float) -> Vec3:
        return Vec3(self.x * scale, self.y * scale, self.z * scale)

    __rmul__ = __mul__

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: Vec3) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Return the cross product ``self x other``."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vec3:
        """Return a unit vector in the same direction; the zero vector stays zero."""
        size = self.length()
        if size == 0.0:
            return Vec3()
        return Vec3(self.x / size, self.y / size, self.z / size)


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components in 0..1."""

    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0


VEC2_ZERO = Vec2()
VEC3_ZERO = Vec3()
WHITE = Color(1.0, 1.0, 1.0, 1.0)


@dataclass
class Vertex2D:
    """A screen-space vertex: position, reciprocal w, colour and texture coordinate."""

    pos: Vec3 = VEC3_ZERO
    rhw: float = 1.0
    color: Color = WHITE
    tex: Vec2 = VEC2_ZERO


@dataclass
class Vertex3D:
    """A world-space vertex: position, normal, colour and texture coordinate."""

    pos: Vec3 = VEC3_ZERO
    nor: Vec3 = VEC3_ZERO
    color: Color = WHITE
    tex: Vec2 = VEC2_ZERO