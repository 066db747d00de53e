import pytest

from stagecraft.motion_file import (
    MotionData,
    load_motion_file,
    parse_motion_text,
)
from stagecraft.vectors import Vec3

SAMPLE = """\
NUM_MODEL = 2
MODEL_FILENAME = data/MODEL/body.x
MODEL_FILENAME = data/MODEL/head.x

CHARACTERSET
	NUM_PARTS = 2
	PARTSSET
		INDEX = 0
		PARENT = -1
		POS = 0.0 10.0 0.0
		ROT = 0.0 0.0 0.0
	END_PARTSSET
	PARTSSET
		INDEX = 1
		PARENT = 0
		POS = 0.0 15.5 0.0
		ROT = 0.25 0.0 0.0
	END_PARTSSET
END_CHARACTERSET

MOTIONSET
	LOOP = 1
	NUM_KEY = 2
	KEYSET
		FRAME = 40
		KEY
			POS = 0.0 0.0 0.0
			ROT = 0.0 0.0 0.0
		END_KEY
		KEY
			POS = 1.0 2.0 3.0
			ROT = 0.5 0.0 -0.5
		END_KEY
	END_KEYSET
	KEYSET
		FRAME = 20
		KEY
			POS = 4.0 5.0 6.0
			ROT = 0.0 0.0 0.0
		END_KEY
		KEY
			POS = 0.0 0.0 0.0
			ROT = 0.0 0.75 0.0
		END_KEY
	END_KEYSET
END_MOTIONSET
"""

SECOND_MOTION = """\
MOTIONSET
	LOOP = 0
	NUM_KEY = 1
	KEYSET
		FRAME = 10
		KEY
			POS = 7.0 8.0 9.0
			ROT = 0.0 0.0 0.0
		END_KEY
		KEY
			POS = 0.0 0.0 0.0
			ROT = 0.0 0.0 0.0
		END_KEY
	END_KEYSET
END_MOTIONSET
MODEL_FILENAME = data/MODEL/late.x
"""


def parse(text, max_parts=15, num_motions=2):
    return parse_motion_text(text.splitlines(), max_parts, num_motions)


def test_models_and_parts():
    data = parse(SAMPLE)
    assert data.model_files == ["data/MODEL/body.x", "data/MODEL/head.x"]
    assert data.num_models == 2
    assert data.num_parts == 2
    assert data.parts[0].parent == -1
    assert data.parts[1].parent == 0
    assert data.parts[0].offset_pos == Vec3(0.0, 10.0, 0.0)
    assert data.parts[1].offset_pos == Vec3(0.0, 15.5, 0.0)
    assert data.parts[1].offset_rot == Vec3(0.25, 0.0, 0.0)


def test_motion_keys():
    data = parse(SAMPLE)
    motion = data.motions[0]
    assert motion.loop is True
    assert motion.num_key == 2
    assert [info.frame for info in motion.key_infos] == [40, 20]
    assert motion.key_infos[0].keys[1].pos == Vec3(1.0, 2.0, 3.0)
    assert motion.key_infos[0].keys[1].rot == Vec3(0.5, 0.0, -0.5)
    assert motion.key_infos[1].keys[0].pos == Vec3(4.0, 5.0, 6.0)
    assert motion.key_infos[1].keys[1].rot == Vec3(0.0, 0.75, 0.0)
    assert all(len(info.keys) == data.num_parts for info in motion.key_infos)


def test_unread_motions_stay_empty():
    data = parse(SAMPLE, num_motions=3)
    assert data.loaded_motions == 1
    assert len(data.motions) == 3
    assert data.motions[1].num_key == 0
    assert data.motions[2].loop is False


def test_second_motion_loop_flag():
    data = parse(SAMPLE + SECOND_MOTION, num_motions=3)
    assert data.loaded_motions == 2
    assert data.motions[1].loop is False
    assert data.motions[1].key_infos[0].keys[0].pos == Vec3(7.0, 8.0, 9.0)
    assert data.model_files[-1] == "data/MODEL/late.x"


def test_parsing_stops_once_enough_motions_are_read():
    data = parse(SAMPLE + SECOND_MOTION, num_motions=1)
    assert data.loaded_motions == 1
    assert "data/MODEL/late.x" not in data.model_files


def test_file_matches_text(tmp_path):
    path = tmp_path / "motion.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    from_file = load_motion_file(path, 15, 2)
    assert from_file == parse(SAMPLE)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_motion_file(tmp_path / "absent.txt", 15, 2)


def test_extra_keys_overwrite_last_part():
    text = """\
CHARACTERSET
	NUM_PARTS = 2
END_CHARACTERSET
MOTIONSET
	NUM_KEY = 1
	KEYSET
		FRAME = 5
		KEY
			POS = 1.0 1.0 1.0
		END_KEY
		KEY
			POS = 2.0 2.0 2.0
		END_KEY
		KEY
			POS = 3.0 3.0 3.0
		END_KEY
	END_KEYSET
END_MOTIONSET
"""
    data = parse(text, num_motions=1)
    keys = data.motions[0].key_infos[0].keys
    assert len(keys) == 2
    assert keys[0].pos == Vec3(1.0, 1.0, 1.0)
    assert keys[1].pos == Vec3(3.0, 3.0, 3.0)


def test_numbers_read_like_stream_extraction():
    text = """\
CHARACTERSET
	NUM_PARTS = 1
END_CHARACTERSET
MOTIONSET
	NUM_KEY = 1
	KEYSET
		FRAME = 12abc
		KEY
			POS = 1.5 oops 3.0
		END_KEY
	END_KEYSET
END_MOTIONSET
"""
    data = parse(text, num_motions=1)
    info = data.motions[0].key_infos[0]
    assert info.frame == 12
    assert info.keys[0].pos == Vec3(1.5, 0.0, 0.0)


def test_frame_before_num_key_raises():
    text = "MOTIONSET\n\tFRAME = 10\nEND_MOTIONSET\n"
    with pytest.raises(ValueError):
        parse(text, num_motions=1)


def test_part_index_out_of_range_raises():
    text = "CHARACTERSET\n\tINDEX = 5\n\tPARENT = -1\nEND_CHARACTERSET\n"
    with pytest.raises(ValueError):
        parse(text, max_parts=2)


def test_negative_arguments_raise():
    with pytest.raises(ValueError):
        parse_motion_text([], -1, 1)


def test_empty_input_gives_empty_data():
    data = parse_motion_text([], 15, 2)
    assert isinstance(data, MotionData)
    assert data.model_files == []
    assert data.loaded_motions == 0