"""A screen-space quad that can be moved, rotated, resized, tinted and textured."""

from __future__ import annotations

import math
from dataclasses import replace

from .objects import DEFAULT_PRIORITY, GameObject, Scene
from .vectors import VEC3_ZERO, WHITE, Color, Vec2, Vec3, Vertex2D

_PI = math.pi


class Object2D(GameObject):
    """A rotatable screen quad centred on ``pos`` with half-size ``width`` x ``height``."""

    def __init__(self, scene: Scene, priority: int = DEFAULT_PRIORITY):
        super().__init__(scene, priority)
        self.pos = VEC3_ZERO
        self.rot = VEC3_ZERO
        self.width = 0.0
        self.height = 0.0
        self.angle = 0.0
        self.length = 0.0
        self.texture_index = -1
        self.vertices: list[Vertex2D] = []

    @classmethod
    def create(cls, scene: Scene, width: float, height: float, pos: Vec3) -> Object2D | None:
        """Make, register and set up a quad; None when its layer is full."""
        if scene.is_full(DEFAULT_PRIORITY):
            return None
        obj = cls(scene)
        obj.init()
        obj.set_position(pos)
        obj.set_size(width, height)
        obj.set_offset_vtx()
        obj.set_texture()
        return obj

    @property
    def size(self) -> Vec2:
        """Half-width and half-height of the quad."""
        return Vec2(self.width, self.height)

    def _require_vertices(self) -> None:
        if not self.vertices:
            raise RuntimeError("the quad has no vertices; call init() first")

    def _rotated_corners(self) -> tuple[Vec3, Vec3, Vec3, Vec3]:
        x, y = self.pos.x, self.pos.y
        z_rot = self.rot.z
        length = self.length
        angles = (
            z_rot - (_PI - self.angle),
            z_rot + (_PI - self.angle),
            z_rot - self.angle,
            z_rot + self.angle,
        )
        return tuple(
            Vec3(x + math.sin(a) * length, y + math.cos(a) * length, 0.0) for a in angles
        )

    def _place_corners(self, corners) -> None:
        self.vertices = [
            replace(vertex, pos=corner) for vertex, corner in zip(self.vertices, corners)
        ]

    def _measure(self) -> None:
        self.length = math.sqrt(self.width * self.width + self.height * self.height)
        self.angle = math.atan2(self.width, self.height)

    def init(self) -> None:
        """Reset the shape and create the four vertices."""
        self.angle = 0.0
        self.length = 0.0
        self.vertices = [Vertex2D() for _ in range(4)]

    def uninit(self) -> None:
        """Drop the vertices and leave the scene."""
        self.vertices = []
        self.release()

    def update(self) -> None:
        """Refresh the corners from the current position and rotation."""
        self.update_vertex()

    def draw(self, canvas) -> None:
        """Hand the quad and its texture index (-1 for none) to ``canvas``."""
        canvas.draw_quad(tuple(self.vertices), self.texture_index)

    def set_position(self, pos: Vec3) -> None:
        """Set the centre; corners follow on the next vertex refresh."""
        self.pos = pos

    def set_rotation(self, rot: Vec3) -> None:
        """Set the rotation; only ``z`` turns the quad."""
        self.rot = rot

    def set_size(self, width: float, height: float) -> None:
        """Set the half-size and place the corners accordingly."""
        self._require_vertices()
        self.width = width
        self.height = height
        self._measure()
        self._place_corners(self._rotated_corners())

    def set_edges(self, left: float, right: float, top: float, bottom: float) -> None:
        """Place the corners at separate distances from the centre, ignoring rotation."""
        self._require_vertices()
        x, y = self.pos.x, self.pos.y
        self._place_corners(
            (
                Vec3(x - left, y - top, 0.0),
                Vec3(x + right, y - top, 0.0),
                Vec3(x - left, y + bottom, 0.0),
                Vec3(x + right, y + bottom, 0.0),
            )
        )

    def set_offset_vtx(
        self, color: Color = WHITE, divisions_x: int = 1, divisions_y: int = 1
    ) -> None:
        """Rebuild every vertex: corners, colour and the first texture cell."""
        self._require_vertices()
        if divisions_x == 0 or divisions_y == 0:
            raise ValueError("texture divisions must not be zero")
        self._measure()
        step_u = 1.0 / divisions_x
        step_v = 1.0 / divisions_y
        coords = (Vec2(0.0, 0.0), Vec2(step_u, 0.0), Vec2(0.0, step_v), Vec2(step_u, step_v))
        self.vertices = [
            Vertex2D(pos=corner, rhw=1.0, color=color, tex=tex)
            for corner, tex in zip(self._rotated_corners(), coords)
        ]

    def update_vertex(self) -> None:
        """Place the corners from the stored shape, position and rotation."""
        self._require_vertices()
        self._place_corners(self._rotated_corners())

    def set_uv_pos(self, offset: Vec2, size: Vec2) -> None:
        """Show the texture rectangle starting at ``offset`` with extent ``size``."""
        self._require_vertices()
        coords = (
            Vec2(offset.x, offset.y),
            Vec2(offset.x + size.x, offset.y),
            Vec2(offset.x, offset.y + size.y),
            Vec2(offset.x + size.x, offset.y + size.y),
        )
        self.vertices = [replace(vertex, tex=tex) for vertex, tex in zip(self.vertices, coords)]

    def set_color(self, color: Color) -> None:
        """Tint all four corners with ``color``."""
        self._require_vertices()
        self.vertices = [replace(vertex, color=color) for vertex in self.vertices]

    def set_texture(self, textures=None, filename: str | None = None) -> None:
        """Register ``filename`` with ``textures``; None means no texture (-1)."""
        if filename is None:
            self.texture_index = -1
            return
        self.texture_index = textures.register(filename)