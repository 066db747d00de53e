"""Scene objects, keyframe motion, sprites, scores, asset registries, WAVE reading and particles."""

__version__ = "0.1.0"