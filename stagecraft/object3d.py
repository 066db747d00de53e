"""A textured world-space quad that other objects can stand on."""

from __future__ import annotations

import math

from .objects import DEFAULT_PRIORITY, GameObject, Scene
from .vectors import VEC3_ZERO, WHITE, Color, Vec2, Vec3, Vertex3D

Matrix = tuple[tuple[float, float, float, float], ...]


def _identity() -> Matrix:
    return tuple(tuple(1.0 if r == c else 0.0 for c in range(4)) for r in range(4))


def _multiply(a: Matrix, b: Matrix) -> Matrix:
    return tuple(
        tuple(sum(a[r][k] * b[k][c] for k in range(4)) for c in range(4)) for r in range(4)
    )


def _rotation_yaw_pitch_roll(yaw: float, pitch: float, roll: float) -> Matrix:
    """Row-vector rotation applying roll (z), then pitch (x), then yaw (y)."""
    cz, sz = math.cos(roll), math.sin(roll)
    cx, sx = math.cos(pitch), math.sin(pitch)
    cy, sy = math.cos(yaw), math.sin(yaw)
    rz = ((cz, sz, 0.0, 0.0), (-sz, cz, 0.0, 0.0), (0.0, 0.0, 1.0, 0.0), (0.0, 0.0, 0.0, 1.0))
    rx = ((1.0, 0.0, 0.0, 0.0), (0.0, cx, sx, 0.0), (0.0, -sx, cx, 0.0), (0.0, 0.0, 0.0, 1.0))
    ry = ((cy, 0.0, -sy, 0.0), (0.0, 1.0, 0.0, 0.0), (sy, 0.0, cy, 0.0), (0.0, 0.0, 0.0, 1.0))
    return _multiply(_multiply(rz, rx), ry)


def _translation(offset: Vec3) -> Matrix:
    return (
        (1.0, 0.0, 0.0, 0.0),
        (0.0, 1.0, 0.0, 0.0),
        (0.0, 0.0, 1.0, 0.0),
        (offset.x, offset.y, offset.z, 1.0),
    )


class Object3D(GameObject):
    """A quad spanning ``pos +/- size``, tilted when ``size`` has a height.

    An object set as ``follower`` (anything with a ``position`` attribute)
    is placed on the quad's surface on every update while it is over it.
    """

    def __init__(self, scene: Scene, priority: int = DEFAULT_PRIORITY):
        super().__init__(scene, priority)
        self.pos = VEC3_ZERO
        self.rot = VEC3_ZERO
        self.size = VEC3_ZERO
        self.world = _identity()
        self.texture_index = 0
        self.vertices: list[Vertex3D] = []
        self.follower = None

    @classmethod
    def create(
        cls,
        scene: Scene,
        pos: Vec3,
        rot: Vec3,
        size: Vec3,
        textures=None,
        texture_name: str | None = None,
    ) -> Object3D | None:
        """Make, register and set up a quad; None when its layer is full."""
        if scene.is_full(DEFAULT_PRIORITY):
            return None
        obj = cls(scene)
        obj.pos = pos
        obj.rot = rot
        obj.size = size
        obj.init()
        obj.set_offset_vtx()
        obj.texture_index = textures.register(texture_name) if textures is not None else -1
        return obj

    def init(self) -> None:
        """Create the four vertices."""
        self.vertices = [Vertex3D() for _ in range(4)]

    def uninit(self) -> None:
        """Drop the vertices and leave the scene."""
        self.vertices = []
        self.release()

    def _require_vertices(self) -> None:
        if not self.vertices:
            raise RuntimeError("the quad has no vertices; call init() first")

    def set_offset_vtx(
        self, color: Color = WHITE, divisions_x: int = 1, divisions_y: int = 1
    ) -> None:
        """Rebuild every vertex: corners, shared normal, colour and first texture cell."""
        self._require_vertices()
        if divisions_x == 0 or divisions_y == 0:
            raise ValueError("texture divisions must not be zero")
        p, s = self.pos, self.size
        corners = (
            Vec3(p.x - s.x, p.y + s.y, p.z + s.z),
            Vec3(p.x + s.x, p.y + s.y, p.z + s.z),
            Vec3(p.x - s.x, p.y - s.y, p.z - s.z),
            Vec3(p.x + s.x, p.y - s.y, p.z - s.z),
        )
        normal = (corners[0] - corners[2]).cross(corners[3] - corners[2]).normalized()
        step_u = 1.0 / divisions_x
        step_v = 1.0 / divisions_y
        coords = (Vec2(0.0, 0.0), Vec2(step_u, 0.0), Vec2(0.0, step_v), Vec2(step_u, step_v))
        self.vertices = [
            Vertex3D(pos=corner, nor=normal, color=color, tex=tex)
            for corner, tex in zip(corners, coords)
        ]

    def surface_height(self, point: Vec3) -> float | None:
        """Height given to ``point`` when over the quad's first triangle, else None."""
        self._require_vertices()
        v0, v1, v2 = (vertex.pos for vertex in self.vertices[:3])
        normal = (v1 - v0).cross(v2 - v0).normalized()

        edges = ((v0 - v2, v2), (v1 - v0, v0), (v2 - v1, v1))
        for edge, start in edges:
            side = edge.normalized().cross((point - start).normalized())
            if side.y < 0.0:
                return None
        if normal.y == 0.0:
            return None
        along = (point.x - v0.x) * normal.x + (point.z - v0.z) * normal.z
        return self.pos.y + v0.y - along / normal.y

    def snap_to_surface(self, point: Vec3) -> Vec3:
        """Return ``point`` lifted or lowered onto the surface, or unchanged when off it."""
        height = self.surface_height(point)
        if height is None:
            return point
        return Vec3(point.x, height, point.z)

    def update(self) -> None:
        """Place the follower, if any, on the surface."""
        if self.follower is not None:
            self.follower.position = self.snap_to_surface(self.follower.position)

    def world_matrix(self) -> Matrix:
        """Row-vector world transform: rotation by ``rot`` then translation by ``pos``."""
        rotation = _rotation_yaw_pitch_roll(self.rot.y, self.rot.x, self.rot.z)
        return _multiply(_multiply(_identity(), rotation), _translation(self.pos))

    def draw(self, canvas) -> None:
        """Hand the world transform, quad and texture index to ``canvas``."""
        self.world = self.world_matrix()
        canvas.draw_world_quad(self.world, tuple(self.vertices), self.texture_index)