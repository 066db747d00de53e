"""Scene registry of game objects, grouped into priority layers of fixed size."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Iterator

MAX_OBJECT = 256
NUM_PRIORITY = 8
DEFAULT_PRIORITY = 3
MAX_WORD = 1024
FRAME = 60
MAX_GRAVITY = 1.0


class ObjectType(IntEnum):
    """Kinds of game object."""

    NONE = 0
    PLAYER = 1
    ENEMY = 2
    BULLET = 3
    BLOCK = 4


class Scene:
    """Holds every live object in slots, one fixed-size layer per priority."""

    def __init__(self, max_objects: int = MAX_OBJECT, num_priorities: int = NUM_PRIORITY):
        if max_objects < 1 or num_priorities < 1:
            raise ValueError("a scene needs at least one slot and one priority")
        self.max_objects = max_objects
        self.num_priorities = num_priorities
        self._layers: list[list[GameObject | None]] = [
            [None] * max_objects for _ in range(num_priorities)
        ]
        self._counts = [0] * num_priorities

    def _check_priority(self, priority: int) -> None:
        if not 0 <= priority < self.num_priorities:
            raise IndexError(f"priority {priority} out of range 0..{self.num_priorities - 1}")

    def add(self, obj, priority: int) -> int:
        """Put ``obj`` in the first free slot of ``priority`` and return the slot index."""
        self._check_priority(priority)
        layer = self._layers[priority]
        try:
            index = layer.index(None)
        except ValueError:
            raise OverflowError(f"priority {priority} already holds {self.max_objects} objects") from None
        layer[index] = obj
        self._counts[priority] += 1
        return index

    def remove(self, obj) -> bool:
        """Free the slot holding ``obj``; return whether it was registered."""
        for priority, layer in enumerate(self._layers):
            for index, held in enumerate(layer):
                if held is obj:
                    layer[index] = None
                    self._counts[priority] -= 1
                    return True
        return False

    def count(self, priority: int) -> int:
        """Return how many objects live at ``priority``."""
        self._check_priority(priority)
        return self._counts[priority]

    def get(self, priority: int, index: int):
        """Return the object in a slot, or None when the slot is empty."""
        self._check_priority(priority)
        if not 0 <= index < self.max_objects:
            raise IndexError(f"slot {index} out of range 0..{self.max_objects - 1}")
        return self._layers[priority][index]

    def is_full(self, priority: int) -> bool:
        """Return whether no slot is free at ``priority``."""
        return self.count(priority) >= self.max_objects

    def _live(self) -> Iterator[GameObject]:
        # Slots are read as the walk reaches them, so objects added or
        # released during the walk are seen the same way a slot scan sees them.
        for layer in self._layers:
            for index in range(len(layer)):
                obj = layer[index]
                if obj is not None:
                    yield obj

    def release_all(self) -> None:
        """Shut down every object, lowest priority first."""
        for obj in self._live():
            obj.uninit()

    def update_all(self) -> None:
        """Update every object, lowest priority first."""
        for obj in self._live():
            obj.update()

    def draw_all(self, canvas) -> None:
        """Draw every object onto ``canvas``, lowest priority first."""
        for obj in self._live():
            obj.draw(canvas)


class GameObject(ABC):
    """Base of everything the scene updates and draws; registers itself on creation."""

    def __init__(self, scene: Scene, priority: int = DEFAULT_PRIORITY):
        self.scene = scene
        self.priority = priority
        self.type = ObjectType.NONE
        self.index = scene.add(self, priority)

    @property
    def alive(self) -> bool:
        """Whether the object still holds its slot in the scene."""
        return self.scene.get(self.priority, self.index) is self

    @abstractmethod
    def init(self) -> None:
        """Prepare the object after construction."""

    def uninit(self) -> None:
        """Shut the object down and leave the scene."""
        self.release()

    @abstractmethod
    def update(self) -> None:
        """Advance the object by one frame."""

    @abstractmethod
    def draw(self, canvas) -> None:
        """Draw the object onto ``canvas``."""

    def release(self) -> None:
        """Leave the scene; doing so twice is harmless."""
        self.scene.remove(self)