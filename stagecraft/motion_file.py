"""Reader for the text format that describes a character's parts and motions."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from os import PathLike
from typing import Iterable, Iterator

from .process import clamp
from .vectors import VEC3_ZERO, Vec3

MAX_PARTS = 56
MAX_KEY = 20

_INT = re.compile(r"[+-]?\d+")
_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_WORD = re.compile(r"\S+")
_SPACE = re.compile(r"\s*")


@dataclass
class Key:
    """Pose of one part at one key frame."""

    pos: Vec3 = VEC3_ZERO
    rot: Vec3 = VEC3_ZERO


@dataclass
class KeyInfo:
    """One key frame: how many frames it plays for and a key per part."""

    frame: int = 0
    keys: list[Key] = field(default_factory=list)


@dataclass
class MotionInfo:
    """One motion: whether it loops and its key frames."""

    loop: bool = False
    key_infos: list[KeyInfo] = field(default_factory=list)

    @property
    def num_key(self) -> int:
        """Number of key frames in the motion."""
        return len(self.key_infos)


@dataclass
class PartSetup:
    """Hierarchy and rest offset of one part of the character."""

    index: int
    parent: int = -1
    offset_pos: Vec3 = VEC3_ZERO
    offset_rot: Vec3 = VEC3_ZERO


@dataclass
class MotionData:
    """Everything read from a motion file."""

    model_files: list[str] = field(default_factory=list)
    rejected_models: list[str] = field(default_factory=list)
    num_parts: int = 0
    parts: dict[int, PartSetup] = field(default_factory=dict)
    motions: list[MotionInfo] = field(default_factory=list)
    loaded_motions: int = 0

    @property
    def num_models(self) -> int:
        """Number of model files accepted."""
        return len(self.model_files)


class _ValueReader:
    """Reads values after an ``=`` the way a formatted stream extraction does.

    Once a read fails, every later numeric read yields zero.
    """

    def __init__(self, text: str):
        self._text = text.lstrip(" =")
        self._pos = 0
        self._failed = False

    def _take(self, pattern: re.Pattern) -> str | None:
        if self._failed:
            return None
        start = _SPACE.match(self._text, self._pos).end()
        match = pattern.match(self._text, start)
        if match is None:
            self._failed = True
            self._pos = start
            return None
        self._pos = match.end()
        return match.group()

    def int(self) -> int:
        token = self._take(_INT)
        return int(token) if token is not None else 0

    def float(self) -> float:
        token = self._take(_FLOAT)
        return float(token) if token is not None else 0.0

    def vec3(self) -> Vec3:
        x = self.float()
        y = self.float()
        z = self.float()
        return Vec3(x, y, z)

    def word(self) -> str:
        token = self._take(_WORD)
        return token if token is not None else ""


def _after_equals(line: str) -> str:
    pos = line.find("=")
    return line[pos + 1:] if pos >= 0 else line


def _part(data: MotionData, index: int, max_parts: int) -> PartSetup:
    if not 0 <= index < max_parts:
        raise ValueError(f"part index {index} out of range 0..{max_parts - 1}")
    return data.parts.setdefault(index, PartSetup(index))


def _read_character_line(
    data: MotionData, line: str, value: str, part_index: int, max_parts: int
) -> tuple[bool, int]:
    if "NUM_PARTS" in line:
        data.num_parts = _ValueReader(value).int()
    if "INDEX" in line:
        part_index = _ValueReader(value).int()
    if "PARENT" in line:
        parent = _ValueReader(value).int()
        if parent != -1 and not 0 <= parent < max_parts:
            raise ValueError(f"parent index {parent} out of range 0..{max_parts - 1}")
        _part(data, part_index, max_parts).parent = parent
    if "POS" in line:
        _part(data, part_index, max_parts).offset_pos = _ValueReader(value).vec3()
    if "ROT" in line:
        _part(data, part_index, max_parts).offset_rot = _ValueReader(value).vec3()
    return "END_CHARACTERSET" in line, part_index


def _key_info(motion: MotionInfo, key_index: int) -> KeyInfo:
    if not 0 <= key_index < len(motion.key_infos):
        raise ValueError(f"key set {key_index} is outside NUM_KEY = {len(motion.key_infos)}")
    return motion.key_infos[key_index]


def _key(motion: MotionInfo, key_index: int, part: int) -> Key:
    keys = _key_info(motion, key_index).keys
    if not 0 <= part < len(keys):
        raise ValueError(f"key for part {part} is outside NUM_PARTS = {len(keys)}")
    return keys[part]


def _read_motion_set(data: MotionData, source: Iterator[str], num_motions: int) -> None:
    if data.loaded_motions >= num_motions:
        raise ValueError(f"more than {num_motions} motion sets")
    motion = data.motions[data.loaded_motions]
    key_index = 0
    part = 0
    for line in source:
        value = _after_equals(line)
        if "LOOP" in line:
            motion.loop = _ValueReader(value).int() == 1
        if "NUM_KEY" in line:
            count = _ValueReader(value).int()
            if count < 0:
                raise ValueError(f"negative key count {count}")
            motion.key_infos = [
                KeyInfo(keys=[Key() for _ in range(max(data.num_parts, 0))]) for _ in range(count)
            ]
        if "FRAME" in line:
            _key_info(motion, key_index).frame = _ValueReader(value).int()
        if "POS" in line:
            _key(motion, key_index, part).pos = _ValueReader(value).vec3()
        if "ROT" in line:
            _key(motion, key_index, part).rot = _ValueReader(value).vec3()
        if "END_KEY" in line:
            part = clamp(part + 1, 0, data.num_parts - 1)
        if "END_KEYSET" in line:
            key_index += 1
            part = 0
        if "END_MOTIONSET" in line:
            if data.loaded_motions <= num_motions - 1:
                data.loaded_motions += 1
            break


def parse_motion_text(lines: Iterable[str], max_parts: int, num_motions: int) -> MotionData:
    """Read model files, part setup and up to ``num_motions`` motions from ``lines``."""
    if max_parts < 0 or num_motions < 0:
        raise ValueError("max_parts and num_motions must not be negative")
    data = MotionData(motions=[MotionInfo() for _ in range(num_motions)])
    source = (line.rstrip("\r\n") for line in lines)
    part_index = 0
    character_set_done = False
    for line in source:
        value = _after_equals(line)
        if "MODEL_FILENAME" in line:
            name = _ValueReader(value).word()
            if len(data.model_files) < max_parts:
                data.model_files.append(name)
            else:
                data.rejected_models.append(name)
        if not character_set_done:
            character_set_done, part_index = _read_character_line(
                data, line, value, part_index, max_parts
            )
        if "MOTIONSET" in line:
            _read_motion_set(data, source, num_motions)
        if data.loaded_motions >= num_motions:
            break
    return data


def load_motion_file(path: str | PathLike, max_parts: int, num_motions: int) -> MotionData:
    """Open ``path`` and parse it as a motion file."""
    with open(path, encoding="utf-8", errors="replace") as stream:
        return parse_motion_text(stream, max_parts, num_motions)