"""A scene object that draws a registered mesh model, with a planar shadow."""

from __future__ import annotations

import math
import warnings
from typing import Sequence

from .model_manager import ModelError
from .object3d import Matrix, _identity, _multiply, _rotation_yaw_pitch_roll, _translation
from .objects import GameObject, Scene
from .vectors import VEC3_ZERO, Color, Vec3

OBJECTX_PRIORITY = 2
LIGHT_DIR = (0.707, -0.707, 0.707, 0.0)
SHADOW_PLANE = (0.0, -1.0, 0.0, 0.0)
SHADOW_COLOR = Color(0.0, 0.0, 0.0, 1.0)


def shadow_matrix(light_dir: Sequence[float], plane: Sequence[float]) -> Matrix:
    """Row-vector matrix flattening geometry onto ``plane`` along ``light_dir``.

    ``light_dir`` is a 4-vector (w = 0 for a directional light) and ``plane``
    the coefficients ``(a, b, c, d)`` of ``ax + by + cz + d = 0``.
    """
    a, b, c, d = plane
    norm = math.sqrt(a * a + b * b + c * c)
    if norm == 0.0:
        raise ValueError("the plane has no normal")
    p = (a / norm, b / norm, c / norm, d / norm)
    light = tuple(light_dir)
    dot = sum(pi * li for pi, li in zip(p, light))
    return tuple(
        tuple((dot if row == col else 0.0) - p[row] * light[col] for col in range(4))
        for row in range(4)
    )


class ObjectX(GameObject):
    """Draws one model from a model manager at ``pos`` turned by ``rot``."""

    def __init__(self, scene: Scene, priority: int = OBJECTX_PRIORITY):
        super().__init__(scene, priority)
        self.pos = VEC3_ZERO
        self.rot = VEC3_ZERO
        self.world = _identity()
        self.model_index = -1
        self.texture_indices: list[int] = []
        self.models = None
        self.textures = None

    @classmethod
    def create(cls, scene: Scene, pos: Vec3, model_name: str, models, textures) -> ObjectX | None:
        """Make, register and load a model object; None when its layer is full.

        A model that cannot be loaded leaves an object that draws nothing,
        after a warning.
        """
        if scene.is_full(OBJECTX_PRIORITY):
            return None
        obj = cls(scene)
        obj.pos = pos
        obj.init()
        try:
            obj.load_model(models, textures, model_name)
        except ModelError as exc:
            warnings.warn(str(exc), stacklevel=2)
        return obj

    def init(self) -> None:
        """Nothing to prepare beyond construction."""

    def uninit(self) -> None:
        """Forget the texture slots and leave the scene."""
        self.texture_indices = []
        self.release()

    def update(self) -> None:
        """A static model does not change per frame."""

    def load_model(self, models, textures, filename: str) -> None:
        """Register ``filename`` and the textures its materials name."""
        self.models = models
        self.textures = textures
        self.model_index = -1
        index = models.register(filename)
        if index == -1:
            raise ModelError(f"no slot for model {filename!r}")
        self.model_index = index
        self.texture_indices = [
            textures.register_x(getattr(material, "texture_filename", None))
            for material in models.materials(index) or []
        ]

    def world_matrix(self) -> Matrix:
        """Row-vector world transform: rotation by ``rot`` then translation by ``pos``."""
        rotation = _rotation_yaw_pitch_roll(self.rot.y, self.rot.x, self.rot.z)
        return _multiply(_multiply(_identity(), rotation), _translation(self.pos))

    def draw(self, canvas) -> None:
        """Draw each material subset of the model onto ``canvas``."""
        self.world = self.world_matrix()
        if self.model_index == -1 or self.models is None:
            return
        mesh = self.models.mesh(self.model_index)
        materials = self.models.materials(self.model_index) or []
        for subset, (material, texture_index) in enumerate(zip(materials, self.texture_indices)):
            texture = self.textures.get(texture_index) if texture_index != -1 else None
            canvas.draw_subset(self.world, mesh, subset, material, texture)

    def draw_shadow(self, canvas) -> None:
        """Draw the model flattened onto the ground plane in the shadow colour."""
        if self.models is None:
            return
        mesh = self.models.mesh(self.model_index)
        if mesh is None:
            return
        shadow_world = _multiply(self.world, shadow_matrix(LIGHT_DIR, SHADOW_PLANE))
        for subset in range(self.models.num_materials(self.model_index)):
            canvas.draw_subset(shadow_world, mesh, subset, SHADOW_COLOR, None)