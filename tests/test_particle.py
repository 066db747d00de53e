import math
import random

import pytest

from stagecraft.objects import DEFAULT_PRIORITY, Scene
from stagecraft.particle import Particle3D
from stagecraft.vectors import Color, Vec3

RED = Color(1.0, 0.0, 0.0, 1.0)


def _make(scene, spawned, life=5, count=4, duration=2, radius=10.0, speed=6.0, seed=1):
    return Particle3D.create(
        scene,
        Vec3(1.0, 2.0, 3.0),
        RED,
        life,
        radius,
        count,
        duration,
        speed,
        lambda *args: spawned.append(args),
        random.Random(seed),
    )


def test_create_registers_at_default_priority():
    scene = Scene()
    particle = _make(scene, [])
    assert scene.count(DEFAULT_PRIORITY) == 1
    assert scene.get(DEFAULT_PRIORITY, particle.index) is particle
    assert particle.max_life == 5


def test_emits_only_while_duration_lasts():
    scene = Scene()
    spawned = []
    particle = _make(scene, spawned, life=10, count=4, duration=2)
    particle.update()
    assert len(spawned) == 4
    particle.update()
    assert len(spawned) == 8
    particle.update()
    assert len(spawned) == 8


def test_released_when_life_runs_out():
    scene = Scene()
    particle = _make(scene, [], life=3)
    particle.update()
    particle.update()
    assert particle.alive is True
    particle.update()
    assert particle.alive is False
    assert scene.count(DEFAULT_PRIORITY) == 0


def test_uninit_leaves_scene():
    scene = Scene()
    particle = _make(scene, [])
    particle.uninit()
    assert particle.alive is False
    assert scene.count(DEFAULT_PRIORITY) == 0


def test_spawned_values_stay_in_range():
    scene = Scene()
    spawned = []
    particle = _make(scene, spawned, life=8, count=50, duration=1, radius=10.0, speed=6.0)
    particle.update()
    assert len(spawned) == 50
    positions = {args[0] for args in spawned}
    colors = {args[3] for args in spawned}
    radii = [args[1] for args in spawned]
    lives = [args[4] for args in spawned]
    speeds = [args[2].length() for args in spawned]
    assert positions == {Vec3(1.0, 2.0, 3.0)}
    assert colors == {RED}
    assert min(radii) >= 5.0
    assert max(radii) < 15.0
    assert min(lives) >= -4
    assert max(lives) < 4
    assert max(speeds) <= 9.0 * math.sqrt(2.0)


def test_same_seed_gives_same_spray():
    first, second = [], []
    _make(Scene(), first, seed=7).update()
    _make(Scene(), second, seed=7).update()
    assert len(first) == 4
    assert first == second


def test_full_layer_gives_none():
    scene = Scene(max_objects=1)
    assert _make(scene, []) is not None
    assert _make(scene, []) is None
    assert scene.count(DEFAULT_PRIORITY) == 1


def test_zero_speed_with_particles_is_rejected():
    with pytest.raises(ValueError):
        _make(Scene(), [], speed=0.5)


def test_draw_leaves_canvas_untouched():
    class Canvas:
        def __init__(self):
            self.calls = []

        def draw_quad(self, *args):
            self.calls.append(args)

    canvas = Canvas()
    _make(Scene(), []).draw(canvas)
    assert canvas.calls == []