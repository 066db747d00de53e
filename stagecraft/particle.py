"""A particle emitter that sprays effects in random directions for a while."""

from __future__ import annotations

import math
import random
from typing import Callable

from .objects import DEFAULT_PRIORITY, GameObject, Scene
from .vectors import VEC3_ZERO, WHITE, Color, Vec3

SpawnEffect = Callable[[Vec3, float, Vec3, Color, int], object]


class Particle3D(GameObject):
    """Emits ``count`` effects per frame for ``duration`` frames and lives ``life`` frames.

    Each effect is handed to ``spawn_effect(pos, radius, move, color, life)``.
    """

    def __init__(self, scene: Scene, priority: int = DEFAULT_PRIORITY):
        super().__init__(scene, priority)
        self.pos = VEC3_ZERO
        self.move = VEC3_ZERO
        self.color = WHITE
        self.radius = 0.0
        self.speed = 0.0
        self.life = 0
        self.max_life = 0
        self.count = 0
        self.duration = 0
        self.spawn_effect: SpawnEffect | None = None
        self.rng: random.Random = random.Random()

    @classmethod
    def create(
        cls,
        scene: Scene,
        pos: Vec3,
        color: Color,
        life: int,
        radius: float,
        count: int,
        duration: int,
        speed: float,
        spawn_effect: SpawnEffect | None = None,
        rng: random.Random | None = None,
    ) -> Particle3D | None:
        """Make, register and set up an emitter; None when its layer is full."""
        if count > 0 and (int(speed) <= 0 or int(radius) <= 0 or life <= 0):
            raise ValueError("an emitting particle needs a positive speed, radius and life")
        if scene.is_full(DEFAULT_PRIORITY):
            return None
        particle = cls(scene)
        particle.init()
        particle.pos = pos
        particle.radius = radius
        particle.life = life
        particle.max_life = life
        particle.color = color
        particle.count = count
        particle.duration = duration
        particle.speed = speed
        particle.spawn_effect = spawn_effect
        if rng is not None:
            particle.rng = rng
        return particle

    def init(self) -> None:
        """Reset colour, radius, movement and life."""
        self.color = WHITE
        self.radius = 0.0
        self.move = VEC3_ZERO
        self.life = 0

    def uninit(self) -> None:
        """Leave the scene."""
        self.release()

    def update(self) -> None:
        """Emit this frame's effects, then age; leave the scene when life runs out."""
        rng = self.rng
        for _ in range(self.count):
            angle_x = (rng.randrange(629) - 314) * 0.01
            angle_y = (rng.randrange(629) - 314) * 0.01
            amount = float(rng.randrange(int(self.speed)) + self.speed * 0.5)
            self.move = Vec3(
                math.sin(angle_x) * math.sin(angle_y) * amount,
                math.cos(angle_x) * amount,
                math.cos(angle_x) * math.sin(angle_y) * amount,
            )
            radius = float(rng.randrange(int(self.radius)) + self.radius * 0.5)
            life = rng.randrange(self.max_life) - int(self.max_life * 0.5)
            if self.duration > 0 and self.spawn_effect is not None:
                self.spawn_effect(self.pos, radius, self.move, self.color, life)

        self.duration -= 1
        self.life -= 1
        if self.life <= 0:
            self.release()

    def draw(self, canvas) -> None:
        """The emitter itself has nothing to draw."""