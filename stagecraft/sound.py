"""Reading RIFF/WAVE files and keeping a bank of sounds that can be played and stopped."""

from __future__ import annotations

import io
import struct
from dataclasses import dataclass
from enum import IntEnum
from os import PathLike
from typing import BinaryIO, Mapping


class SoundError(Exception):
    """A sound file could not be read, or a sound was used before loading."""


class SoundLabel(IntEnum):
    """Sounds known to the game."""

    ONE = 0


SOUND_INFO: dict[SoundLabel, tuple[str, int]] = {
    SoundLabel.ONE: ("data/BGM/titlebgm.wav", -1),
}

_FMT_MIN_SIZE = 16


@dataclass(frozen=True)
class WaveData:
    """The raw format block and sample data of a WAVE file."""

    format: bytes
    data: bytes

    def _field(self, fmt: str, offset: int) -> int:
        return struct.unpack_from(fmt, self.format, offset)[0]

    @property
    def format_tag(self) -> int:
        """Encoding tag; 1 is plain PCM."""
        return self._field("<H", 0)

    @property
    def channels(self) -> int:
        """Number of interleaved channels."""
        return self._field("<H", 2)

    @property
    def sample_rate(self) -> int:
        """Samples per second per channel."""
        return self._field("<I", 4)

    @property
    def bits_per_sample(self) -> int:
        """Bits in one sample of one channel."""
        return self._field("<H", 14)


def _chunk_id(chunk_id: bytes | str) -> bytes:
    if isinstance(chunk_id, str):
        chunk_id = chunk_id.encode("ascii")
    if len(chunk_id) != 4:
        raise ValueError(f"a chunk id has four bytes, not {len(chunk_id)}")
    return chunk_id


def find_chunk(stream: BinaryIO, chunk_id: bytes | str) -> tuple[int, int]:
    """Return ``(size, position)`` of the data of the first chunk named ``chunk_id``.

    The RIFF chunk counts as four bytes long: its data is the file type.
    """
    wanted = _chunk_id(chunk_id)
    stream.seek(0)
    offset = 0
    riff_size = 0
    while True:
        header = stream.read(8)
        if len(header) < 8:
            raise SoundError(f"chunk {wanted!r} not found")
        kind = header[:4]
        size = int.from_bytes(header[4:], "little")
        if kind == b"RIFF":
            riff_size = size
            size = 4
            stream.read(4)
        else:
            stream.seek(size, io.SEEK_CUR)
        offset += 8
        if kind == wanted:
            return size, offset
        offset += size
        if riff_size == 0:
            raise SoundError(f"chunk {wanted!r} not found: the file does not start with RIFF")


def read_chunk_data(stream: BinaryIO, size: int, offset: int) -> bytes:
    """Read ``size`` bytes starting at ``offset``."""
    stream.seek(offset)
    data = stream.read(size)
    if len(data) < size:
        raise SoundError(f"expected {size} bytes at offset {offset}, found {len(data)}")
    return data


def load_wave(path: str | PathLike) -> WaveData:
    """Read the format and sample data of a WAVE file."""
    try:
        with open(path, "rb") as stream:
            size, position = find_chunk(stream, b"RIFF")
            if read_chunk_data(stream, size, position) != b"WAVE":
                raise SoundError(f"{path} is not a WAVE file")
            size, position = find_chunk(stream, b"fmt ")
            if size < _FMT_MIN_SIZE:
                raise SoundError(f"{path} has a format chunk of only {size} bytes")
            fmt = read_chunk_data(stream, size, position)
            size, position = find_chunk(stream, b"data")
            data = read_chunk_data(stream, size, position)
    except OSError as exc:
        raise SoundError(f"cannot read {path}: {exc}") from exc
    return WaveData(fmt, data)


@dataclass
class _Voice:
    wave: WaveData
    loop_count: int
    queued: int = 0
    running: bool = False


class SoundBank:
    """Keeps one voice per sound label; playing a sound restarts it from the top."""

    def __init__(self, sounds: Mapping[SoundLabel, tuple[str, int]] | None = None):
        self.sounds = dict(SOUND_INFO if sounds is None else sounds)
        self.waves: dict[SoundLabel, WaveData] = {}
        self._voices: dict[SoundLabel, _Voice] = {}

    def load(self) -> None:
        """Read every sound file and queue its buffer, stopped."""
        for label, (filename, loop_count) in self.sounds.items():
            wave = load_wave(filename)
            self.waves[label] = wave
            self._voices[label] = _Voice(wave, loop_count, queued=1)

    def _voice(self, label: SoundLabel) -> _Voice:
        try:
            return self._voices[label]
        except KeyError:
            raise SoundError(f"sound {label!r} is not loaded") from None

    def play(self, label: SoundLabel) -> None:
        """Start ``label`` from the beginning, cutting it off first if it is playing."""
        voice = self._voice(label)
        if voice.queued:
            voice.running = False
            voice.queued = 0
        voice.queued = 1
        voice.running = True

    def stop(self, label: SoundLabel) -> None:
        """Stop ``label`` and drop its queued buffer."""
        voice = self._voice(label)
        if voice.queued:
            voice.running = False
            voice.queued = 0

    def stop_all(self) -> None:
        """Pause every loaded sound."""
        for voice in self._voices.values():
            voice.running = False

    def is_playing(self, label: SoundLabel) -> bool:
        """Whether ``label`` is running with a buffer queued."""
        voice = self._voice(label)
        return voice.running and voice.queued > 0