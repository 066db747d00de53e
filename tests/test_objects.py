import pytest

from stagecraft.objects import (
    DEFAULT_PRIORITY,
    MAX_OBJECT,
    NUM_PRIORITY,
    GameObject,
    ObjectType,
    Scene,
)


class Recorder(GameObject):
    def __init__(self, scene, log, name, priority=DEFAULT_PRIORITY):
        super().__init__(scene, priority)
        self.log = log
        self.name = name

    def init(self):
        self.log.append(("init", self.name))

    def update(self):
        self.log.append(("update", self.name))

    def draw(self, canvas):
        canvas.append(self.name)

    def uninit(self):
        self.log.append(("uninit", self.name))
        super().uninit()


def test_default_scene_dimensions():
    scene = Scene()
    assert scene.max_objects == MAX_OBJECT == 256
    assert scene.num_priorities == NUM_PRIORITY == 8


def test_object_takes_first_free_slot():
    scene = Scene(4, 2)
    a = Recorder(scene, [], "a", priority=1)
    b = Recorder(scene, [], "b", priority=1)
    assert (a.index, b.index) == (0, 1)
    assert scene.get(1, 0) is a
    assert scene.count(1) == 2
    assert scene.count(0) == 0
    assert a.type is ObjectType.NONE


def test_release_frees_slot_and_is_reused():
    scene = Scene(4, 2)
    a = Recorder(scene, [], "a", priority=0)
    Recorder(scene, [], "b", priority=0)
    a.release()
    assert scene.get(0, 0) is None
    assert scene.count(0) == 1
    assert not a.alive
    c = Recorder(scene, [], "c", priority=0)
    assert c.index == 0


def test_release_twice_keeps_count():
    scene = Scene(4, 2)
    a = Recorder(scene, [], "a", priority=0)
    a.release()
    a.release()
    assert scene.count(0) == 0


def test_full_layer_raises():
    scene = Scene(2, 1)
    Recorder(scene, [], "a", priority=0)
    Recorder(scene, [], "b", priority=0)
    assert scene.is_full(0)
    with pytest.raises(OverflowError):
        Recorder(scene, [], "c", priority=0)
    assert scene.count(0) == 2


def test_bad_priority_raises():
    scene = Scene(2, 2)
    with pytest.raises(IndexError):
        scene.count(2)
    with pytest.raises(IndexError):
        scene.get(0, 5)
    with pytest.raises(IndexError):
        Recorder(scene, [], "x", priority=-1)


def test_update_all_runs_in_priority_order():
    scene = Scene(4, 3)
    log = []
    Recorder(scene, log, "late", priority=2)
    Recorder(scene, log, "early", priority=0)
    Recorder(scene, log, "middle", priority=1)
    scene.update_all()
    assert [scene.get(p, 0).name for p in range(3)] == ["early", "middle", "late"]
    assert [scene.count(p) for p in range(3)] == [1, 1, 1]
    assert log == [("update", "early"), ("update", "middle"), ("update", "late")]


def test_draw_all_passes_canvas():
    scene = Scene(4, 2)
    Recorder(scene, [], "b", priority=1)
    Recorder(scene, [], "a", priority=0)
    canvas = []
    scene.draw_all(canvas)
    assert canvas == ["a", "b"]


def test_release_all_uninits_and_empties():
    scene = Scene(4, 2)
    log = []
    Recorder(scene, log, "a", priority=0)
    Recorder(scene, log, "b", priority=1)
    scene.release_all()
    assert log == [("uninit", "a"), ("uninit", "b")]
    assert scene.count(0) == 0
    assert scene.count(1) == 0


def test_remove_unknown_object_returns_false():
    scene = Scene(2, 1)
    assert scene.remove(object()) is False


def test_invalid_scene_size():
    with pytest.raises(ValueError):
        Scene(0, 1)