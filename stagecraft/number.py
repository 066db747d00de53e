"""A single digit sprite cut from a ten-digit strip texture."""

from __future__ import annotations

from dataclasses import replace

from .vectors import VEC3_ZERO, WHITE, Color, Vec2, Vec3, Vertex2D

DIGIT_STEP = 0.1


class NumberSprite:
    """A screen quad showing one digit of a horizontal 0-9 texture strip."""

    def __init__(
        self,
        pos: Vec3 = VEC3_ZERO,
        width: float = 0.0,
        height: float = 0.0,
        divisions_x: int = 1,
        divisions_y: int = 1,
    ):
        if divisions_x <= 0 or divisions_y <= 0:
            raise ValueError("texture divisions must be positive")
        self.pos = pos
        self.width = width
        self.height = height
        self.texture_index = 0
        step_u = 1.0 / divisions_x
        step_v = 1.0 / divisions_y
        self.vertices = [
            Vertex2D(pos=corner, rhw=1.0, color=WHITE, tex=tex)
            for corner, tex in zip(
                self._corners(),
                (Vec2(0.0, 0.0), Vec2(step_u, 0.0), Vec2(0.0, step_v), Vec2(step_u, step_v)),
            )
        ]

    def _corners(self) -> tuple[Vec3, Vec3, Vec3, Vec3]:
        x, y = self.pos.x, self.pos.y
        w, h = self.width, self.height
        return (
            Vec3(x - w, y - h, 0.0),
            Vec3(x + w, y - h, 0.0),
            Vec3(x - w, y + h, 0.0),
            Vec3(x + w, y + h, 0.0),
        )

    def set_size(self, width: float, height: float) -> None:
        """Store a new half-size; it takes effect on the next ``set_pos``."""
        self.width = width
        self.height = height

    def set_pos(self, pos: Vec3) -> None:
        """Move the quad so it is centred on ``pos``."""
        self.pos = pos
        self.vertices = [
            replace(vertex, pos=corner) for vertex, corner in zip(self.vertices, self._corners())
        ]

    def set_uv(self, digit: int) -> None:
        """Show ``digit`` by selecting its tenth of the texture strip."""
        u = DIGIT_STEP * digit
        coords = (Vec2(u, 0.0), Vec2(u + DIGIT_STEP, 0.0), Vec2(u, 1.0), Vec2(u + DIGIT_STEP, 1.0))
        self.vertices = [replace(vertex, tex=tex) for vertex, tex in zip(self.vertices, coords)]

    def set_color(self, color: Color) -> None:
        """Tint all four corners with ``color``."""
        self.vertices = [replace(vertex, color=color) for vertex in self.vertices]

    def set_texture(self, textures, filename: str | None) -> None:
        """Register ``filename`` with ``textures``; None means no texture (-1)."""
        if filename is None:
            self.texture_index = -1
            return
        self.texture_index = textures.register(filename)

    def draw(self, canvas) -> None:
        """Hand the quad and its texture index to ``canvas``."""
        canvas.draw_quad(tuple(self.vertices), self.texture_index)