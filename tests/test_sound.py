import io
import wave

import pytest

from stagecraft.sound import (
    SoundBank,
    SoundError,
    SoundLabel,
    find_chunk,
    load_wave,
    read_chunk_data,
)

FRAMES = b"\x01\x02\x03\x04\x05\x06"


def _write_wav(path, frames=FRAMES, rate=8000, channels=1):
    with wave.open(str(path), "wb") as out:
        out.setnchannels(channels)
        out.setsampwidth(2)
        out.setframerate(rate)
        out.writeframes(frames)
    return path


def _wav_bytes(tmp_path):
    return _write_wav(tmp_path / "a.wav").read_bytes()


def test_riff_chunk_counts_as_file_type(tmp_path):
    stream = io.BytesIO(_wav_bytes(tmp_path))
    size, position = find_chunk(stream, b"RIFF")
    assert (size, position) == (4, 8)
    assert read_chunk_data(stream, size, position) == b"WAVE"


def test_fmt_chunk_of_plain_pcm(tmp_path):
    stream = io.BytesIO(_wav_bytes(tmp_path))
    assert find_chunk(stream, "fmt ") == (16, 20)


def test_data_chunk_holds_frames(tmp_path):
    stream = io.BytesIO(_wav_bytes(tmp_path))
    size, position = find_chunk(stream, b"data")
    assert size == len(FRAMES)
    assert read_chunk_data(stream, size, position) == FRAMES


def test_missing_chunk_raises(tmp_path):
    stream = io.BytesIO(_wav_bytes(tmp_path))
    with pytest.raises(SoundError):
        find_chunk(stream, b"LIST")


def test_non_riff_stream_raises():
    stream = io.BytesIO(b"JUNK" + (4).to_bytes(4, "little") + b"abcd" + b"data")
    with pytest.raises(SoundError):
        find_chunk(stream, b"data")


def test_bad_chunk_id_length():
    with pytest.raises(ValueError):
        find_chunk(io.BytesIO(b""), b"abc")


def test_short_read_raises():
    with pytest.raises(SoundError):
        read_chunk_data(io.BytesIO(b"abc"), 10, 0)


def test_load_wave_round_trip(tmp_path):
    path = _write_wav(tmp_path / "b.wav", rate=22050, channels=2, frames=FRAMES + b"\x07\x08")
    data = load_wave(path)
    assert data.data == FRAMES + b"\x07\x08"
    assert data.sample_rate == 22050
    assert data.channels == 2
    assert data.bits_per_sample == 16
    assert data.format_tag == 1


def test_load_wave_rejects_other_riff(tmp_path):
    path = tmp_path / "c.avi"
    path.write_bytes(b"RIFF" + (4).to_bytes(4, "little") + b"AVI ")
    with pytest.raises(SoundError):
        load_wave(path)


def test_load_wave_missing_file(tmp_path):
    with pytest.raises(SoundError):
        load_wave(tmp_path / "missing.wav")


def test_bank_play_and_stop(tmp_path):
    path = _write_wav(tmp_path / "d.wav")
    bank = SoundBank({SoundLabel.ONE: (str(path), -1)})
    bank.load()
    assert bank.waves[SoundLabel.ONE].data == FRAMES
    assert bank.is_playing(SoundLabel.ONE) is False
    bank.play(SoundLabel.ONE)
    assert bank.is_playing(SoundLabel.ONE) is True
    bank.play(SoundLabel.ONE)
    assert bank.is_playing(SoundLabel.ONE) is True
    bank.stop(SoundLabel.ONE)
    assert bank.is_playing(SoundLabel.ONE) is False


def test_bank_stop_all(tmp_path):
    path = _write_wav(tmp_path / "e.wav")
    bank = SoundBank({SoundLabel.ONE: (str(path), 0)})
    bank.load()
    bank.play(SoundLabel.ONE)
    bank.stop_all()
    assert bank.is_playing(SoundLabel.ONE) is False


def test_bank_use_before_load(tmp_path):
    bank = SoundBank({SoundLabel.ONE: (str(tmp_path / "f.wav"), -1)})
    with pytest.raises(SoundError):
        bank.play(SoundLabel.ONE)


def test_bank_load_missing_file(tmp_path):
    bank = SoundBank({SoundLabel.ONE: (str(tmp_path / "g.wav"), -1)})
    with pytest.raises(SoundError):
        bank.load()