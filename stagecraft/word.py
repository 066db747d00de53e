"""Letter sprites cut from an A-Z strip texture, and a scene object showing one."""

from __future__ import annotations

from dataclasses import replace
from enum import IntEnum

from .objects import DEFAULT_PRIORITY, GameObject, Scene
from .vectors import VEC3_ZERO, WHITE, Color, Vec2, Vec3, Vertex2D

LETTER_TEXTURE = "data/TEXTURE/word001.png"


class Letter(IntEnum):
    """Letters of the strip texture, in order."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7
    I = 8  # noqa: E741
    J = 9
    K = 10
    L = 11
    M = 12
    N = 13
    O = 14  # noqa: E741
    P = 15
    Q = 16
    R = 17
    S = 18
    T = 19
    U = 20
    V = 21
    W = 22
    X = 23
    Y = 24
    Z = 25


LETTER_COUNT = len(Letter)


class WordSprite:
    """A screen quad showing one letter of a horizontal A-Z texture strip."""

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
        coords = (Vec2(0.0, 0.0), Vec2(step_u, 0.0), Vec2(0.0, step_v), Vec2(step_u, step_v))
        self.vertices = [
            Vertex2D(pos=corner, rhw=1.0, color=WHITE, tex=tex)
            for corner, tex in zip(self._corners(), coords)
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

    def set_uv(self, letter: int) -> None:
        """Show ``letter`` by selecting its cell of the texture strip."""
        step = 1.0 / LETTER_COUNT
        u = step * letter
        coords = (Vec2(u, 0.0), Vec2(u + step, 0.0), Vec2(u, 1.0), Vec2(u + step, 1.0))
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


class TestWord(GameObject):
    """A scene object that displays a single letter."""

    __test__ = False

    def __init__(self, scene: Scene, priority: int = DEFAULT_PRIORITY):
        super().__init__(scene, priority)
        self.letter = Letter.A
        self.pos = VEC3_ZERO
        self.width = 0.0
        self.height = 0.0
        self.textures = None
        self.sprite: WordSprite | None = None

    @classmethod
    def create(
        cls,
        scene: Scene,
        letter: int,
        pos: Vec3,
        width: float,
        height: float,
        textures,
    ) -> TestWord | None:
        """Make, register and initialise a letter object; None when the layer is full."""
        if scene.is_full(DEFAULT_PRIORITY):
            return None
        word = cls(scene)
        word.pos = pos
        word.width = width
        word.height = height
        word.letter = letter
        word.textures = textures
        word.init()
        return word

    def init(self) -> None:
        """Build the sprite and bind the letter texture."""
        self.sprite = WordSprite(self.pos, self.width, self.height, LETTER_COUNT, 1)
        if self.textures is not None:
            self.sprite.set_texture(self.textures, LETTER_TEXTURE)

    def uninit(self) -> None:
        """Drop the sprite and leave the scene."""
        self.sprite = None
        self.release()

    def update(self) -> None:
        """Point the sprite at the current letter."""
        if self.sprite is not None:
            self.sprite.set_uv(self.letter)

    def draw(self, canvas) -> None:
        """Draw the sprite, if any."""
        if self.sprite is not None:
            self.sprite.draw(canvas)