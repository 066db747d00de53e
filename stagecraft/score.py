"""Score counters drawn with digit sprites, including one that counts up smoothly."""

from __future__ import annotations

from enum import IntEnum

from .number import NumberSprite
from .objects import NUM_PRIORITY, GameObject, Scene
from .process import clamp
from .vectors import VEC3_ZERO, Vec3

MAX_DIGIT = 9
MAX_SCORE = 999_999_999
MIN_SCORE = 0
SCORE_PRIORITY = NUM_PRIORITY - 1
DIGIT_TEXTURE = "data/TEXTURE/number005.png"


class ScoreType(IntEnum):
    """Kinds of score object."""

    NORMAL = 0
    LERPER = 1


class Score(GameObject):
    """A nine-digit score display, least significant digit rightmost."""

    def __init__(self, scene: Scene, priority: int = SCORE_PRIORITY):
        super().__init__(scene, priority)
        self.score = 0
        self.pos = VEC3_ZERO
        self.width = 0.0
        self.height = 0.0
        self.textures = None
        self.numbers: list[NumberSprite] = []

    def init(self) -> None:
        """Build one digit sprite per place, stepping left from ``pos``."""
        if self.numbers:
            return
        digit_width = self.width / MAX_DIGIT
        step = digit_width * 2.0
        for place in range(MAX_DIGIT):
            sprite = NumberSprite(
                Vec3(self.pos.x - step * place, self.pos.y, 0.0),
                digit_width,
                self.height,
                9,
                1,
            )
            if self.textures is not None:
                sprite.set_texture(self.textures, DIGIT_TEXTURE)
            self.numbers.append(sprite)

    def uninit(self) -> None:
        """Drop the digit sprites and leave the scene."""
        self.numbers = []
        self.release()

    def update(self) -> None:
        """Keep the score in range and show its digits."""
        self.score = clamp(self.score, MIN_SCORE, MAX_SCORE)
        for sprite, digit in zip(self.numbers, self.digits()):
            sprite.set_uv(digit)

    def draw(self, canvas) -> None:
        """Draw every digit sprite."""
        for sprite in self.numbers:
            sprite.draw(canvas)

    def set_size(self, width: float, height: float) -> None:
        """Set the overall size used when the sprites are built."""
        self.width = width
        self.height = height

    def add_score(self, value: int) -> None:
        """Add ``value`` to the score."""
        self.score += value

    def digits(self) -> list[int]:
        """Digits of the score, least significant first, one per place."""
        value = clamp(self.score, MIN_SCORE, MAX_SCORE)
        return [value // 10**place % 10 for place in range(MAX_DIGIT)]


class ScoreLerper(Score):
    """A score that moves towards a target over a set number of frames."""

    def __init__(self, scene: Scene, priority: int = SCORE_PRIORITY):
        super().__init__(scene, priority)
        self.dest_score = 0
        self.duration = 0
        self.counter = 0

    def update(self) -> None:
        """Move the score a step towards the target, then show it."""
        rate = self.counter / self.duration if self.duration > 0 else 1.0
        if self.counter >= self.duration:
            self.counter = self.duration
        else:
            self.counter += 1
        self.score += int((self.dest_score - self.score) * rate)
        super().update()

    def set_dest_score(self, value: int, duration: int) -> None:
        """Raise the target by ``value`` and reach it over ``duration`` frames."""
        self.dest_score += value
        self.duration = duration
        self.counter = 0


def create_score(
    scene: Scene,
    kind: ScoreType,
    pos: Vec3,
    width: float,
    height: float,
    textures=None,
) -> Score | None:
    """Make, register and initialise a score; None when its layer is full."""
    kind = ScoreType(kind)
    if scene.is_full(SCORE_PRIORITY):
        return None
    cls = ScoreLerper if kind is ScoreType.LERPER else Score
    score = cls(scene)
    score.set_size(width, height)
    score.pos = pos
    score.textures = textures
    score.init()
    return score