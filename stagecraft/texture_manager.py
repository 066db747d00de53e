"""Registry of textures, looked up by file name and shared by index."""

from __future__ import annotations

from os import PathLike
from typing import Any, Callable

MAX_TEXTURE = 128
TEXTURE_KEY = "TEXTURE_NAME"


class TextureManager:
    """Loads each texture file once and hands out the slot index it lives in.

    ``loader`` turns a file name into a texture object. It returns None, or
    raises ``OSError``, when the file cannot be loaded; the slot then holds None.
    """

    def __init__(self, loader: Callable[[str], Any], capacity: int = MAX_TEXTURE):
        if capacity < 1:
            raise ValueError("a texture manager needs at least one slot")
        self._loader = loader
        self.capacity = capacity
        self._paths = [""] * capacity
        self._textures: list[Any] = [None] * capacity
        self.count = 0

    def _load(self, filename: str) -> Any:
        try:
            return self._loader(filename)
        except OSError:
            return None

    def _find_or_add(self, filename: str) -> int | None:
        # New entries go to the first slot past the running count.
        for index, path in enumerate(self._paths):
            if path == filename:
                return index
            if self.count < index:
                self._textures[index] = self._load(filename)
                self._paths[index] = filename
                self.count += 1
                return index
        return None

    def register(self, filename: str | None) -> int:
        """Return the slot of ``filename``, loading it first if needed; 0 when impossible."""
        if filename is None:
            return 0
        index = self._find_or_add(filename)
        return 0 if index is None else index

    def register_x(self, filename: str | None) -> int:
        """Like ``register`` for textures named by a model; -1 when impossible."""
        if filename is None:
            return -1
        index = self._find_or_add(filename)
        return -1 if index is None else index

    def get(self, index: int) -> Any:
        """Return the texture in slot ``index``, or None when out of range or empty."""
        if not 0 <= index < self.capacity:
            return None
        return self._textures[index]

    def load(self, path: str | PathLike) -> list[str]:
        """Load every ``TEXTURE_NAME = file`` entry of a list file, in order.

        Returns the names that could not be loaded.
        """
        with open(path, encoding="utf-8", errors="replace") as stream:
            tokens = iter(stream.read().split())
        failed: list[str] = []
        for token in tokens:
            if token != TEXTURE_KEY:
                continue
            next(tokens, None)
            name = next(tokens, None)
            if name is None:
                break
            if self.count >= self.capacity:
                raise OverflowError(f"more than {self.capacity} textures listed")
            slot = self.count
            self._paths[slot] = name
            texture = self._load(name)
            self._textures[slot] = texture
            if texture is None:
                failed.append(name)
            self.count += 1
        return failed

    def unload(self) -> None:
        """Drop every loaded texture; the names stay registered."""
        self._textures = [None] * self.capacity