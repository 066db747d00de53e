"""Registry of mesh models, looked up by file name and shared by index."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Any, Callable

MAX_MODEL = 256
MODEL_KEY = "FILENAME"


class ModelError(Exception):
    """A model file could not be loaded or registered."""


@dataclass
class ModelInfo:
    """One registered model: its file, mesh and materials."""

    path: str = ""
    mesh: Any = None
    materials: list | None = None
    num_materials: int = 0


class ModelManager:
    """Loads each model file once and hands out the slot index it lives in.

    ``loader`` turns a file name into ``(mesh, materials)``. It returns None,
    or raises ``OSError`` or ``ValueError``, when the file cannot be loaded.
    Each material may carry a ``texture_filename`` attribute.
    """

    def __init__(self, loader: Callable[[str], Any], capacity: int = MAX_MODEL):
        if capacity < 1:
            raise ValueError("a model manager needs at least one slot")
        self._loader = loader
        self.capacity = capacity
        self._models = [ModelInfo() for _ in range(capacity)]
        self.count = 0

    def _open(self, filename: str) -> tuple[Any, list]:
        try:
            result = self._loader(filename)
        except (OSError, ValueError) as exc:
            raise ModelError(f"model {filename!r} could not be loaded: {exc}") from exc
        if result is None:
            raise ModelError(f"model {filename!r} could not be loaded")
        mesh, materials = result
        return mesh, list(materials)

    def _fill(self, info: ModelInfo, filename: str) -> None:
        info.mesh, info.materials = self._open(filename)
        info.num_materials = len(info.materials)

    def register(self, filename: str | None) -> int:
        """Return the slot of ``filename``, loading it first if needed; -1 when impossible."""
        if filename is None:
            return -1
        for index, info in enumerate(self._models):
            if info.path == filename:
                return index
            if self.count < index and self.count <= self.capacity - 1:
                self._fill(info, filename)
                info.path = filename
                self.count += 1
                return index
        return -1

    def _info(self, index: int) -> ModelInfo | None:
        if not 0 <= index < self.capacity:
            return None
        return self._models[index]

    def mesh(self, index: int) -> Any:
        """Return the mesh in slot ``index``, or None."""
        info = self._info(index)
        return None if info is None else info.mesh

    def materials(self, index: int) -> list | None:
        """Return the materials in slot ``index``, or None."""
        info = self._info(index)
        return None if info is None else info.materials

    def num_materials(self, index: int) -> int:
        """Return how many materials the model in slot ``index`` has; 0 when out of range."""
        info = self._info(index)
        return 0 if info is None else info.num_materials

    def load(self, path: str | PathLike) -> None:
        """Load every ``FILENAME = file`` entry of a list file, in order."""
        with open(path, encoding="utf-8", errors="replace") as stream:
            tokens = iter(stream.read().split())
        for token in tokens:
            if token != MODEL_KEY:
                continue
            next(tokens, None)
            name = next(tokens, None)
            if name is None:
                break
            if self.count >= self.capacity:
                raise OverflowError(f"more than {self.capacity} models listed")
            info = self._models[self.count]
            info.path = name
            self._fill(info, name)
            self.count += 1

    def unload(self) -> None:
        """Drop every mesh and material list; the names stay registered."""
        for info in self._models:
            info.mesh = None
            info.materials = None