"""Key-frame playback of a character's motions, with blending between motions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .motion_file import Key, MotionInfo
from .process import lerp_diff, normalize_rot
from .vectors import VEC3_ZERO, Vec3

NEUTRAL = 0


@dataclass(frozen=True)
class Pose:
    """Position and rotation given to one part for the current frame."""

    pos: Vec3 = VEC3_ZERO
    rot: Vec3 = VEC3_ZERO


def _normalized(angles: Vec3) -> Vec3:
    return Vec3(normalize_rot(angles.x), normalize_rot(angles.y), normalize_rot(angles.z))


def _interpolate(current: Key, following: Key, rate: float) -> Pose:
    """Pose part way from ``current`` to ``following``; rotations take the short way."""
    rot = lerp_diff(current.rot, _normalized(following.rot - current.rot), rate)
    pos = lerp_diff(current.pos, following.pos - current.pos, rate)
    return Pose(pos, rot)


class Motion:
    """Plays a set of motions and blends into and out of them.

    Motion 0 is the neutral motion that a finished one-shot motion blends back to.
    """

    def __init__(self, motions: Iterable[MotionInfo]):
        self.motions: list[MotionInfo] = list(motions)
        if not self.motions:
            raise ValueError("at least one motion is needed")
        self.motion_type = NEUTRAL
        self.num_key = 0
        self.key = 0
        self.count_motion = 0
        self.next_key = 0
        self.loop_motion = False

        self.blend_motion = False
        self.finish_motion = False
        self.first_motion = False

        self.motion_type_blend = NEUTRAL
        self.frame_blend = 0
        self.counter_blend = 0
        self.num_key_blend = 0
        self.key_blend = 0
        self.next_key_blend = 0

        self.poses: list[Pose] = []

    def _check_type(self, motion_type: int) -> None:
        if not 0 <= motion_type < len(self.motions):
            raise IndexError(f"motion {motion_type} out of range 0..{len(self.motions) - 1}")

    def set_motion(self, motion_type: int, blend: bool = True, blend_frames: int = 0) -> None:
        """Switch to ``motion_type``, blending over ``blend_frames`` frames if ``blend``."""
        if motion_type in (self.motion_type_blend, self.motion_type):
            return
        self._check_type(motion_type)
        if blend:
            if blend_frames <= 0:
                raise ValueError("a blended switch needs a positive number of frames")
            self.frame_blend = blend_frames
            if self.motions[motion_type].key_infos[0].frame <= self.counter_blend:
                self.counter_blend = 0
            self.key_blend = 0
            self.first_motion = True
            self.finish_motion = False
            self.blend_motion = True
            self.motion_type_blend = motion_type
        else:
            self.blend_motion = False
            self.motion_type = motion_type
            self.motion_type_blend = motion_type
            self.finish_motion = False

    def _current_pose(self, part: int) -> Pose:
        motion = self.motions[self.motion_type]
        info = motion.key_infos[self.key]
        rate = self.count_motion / info.frame
        return _interpolate(info.keys[part], motion.key_infos[self.next_key].keys[part], rate)

    def _blend_pose(self, part: int) -> Pose:
        motion = self.motions[self.motion_type]
        blended = self.motions[self.motion_type_blend]
        info = motion.key_infos[self.key]
        blend_info = blended.key_infos[self.key_blend]

        rate_motion = self.count_motion / info.frame
        rate_motion_blend = self.counter_blend / blend_info.frame
        rate_blend = self.counter_blend / self.frame_blend

        current = _interpolate(info.keys[part], motion.key_infos[self.next_key].keys[part], rate_motion)
        target = _interpolate(
            blend_info.keys[part],
            blended.key_infos[self.next_key_blend].keys[part],
            rate_motion_blend,
        )
        rot = lerp_diff(current.rot, target.rot - current.rot, rate_blend)
        pos = lerp_diff(current.pos, target.pos - current.pos, rate_blend)
        return Pose(pos, rot)

    def _finish_first_blend(self) -> None:
        if self.first_motion and self.counter_blend >= self.frame_blend and not self.finish_motion:
            self.first_motion = False
            self.key_blend = 0
            self.key = 0
            self.motion_type = self.motion_type_blend
            self.count_motion = self.counter_blend
            self.counter_blend = 0

    def update(self, num_parts: int) -> list[Pose]:
        """Advance one frame and return the poses of the first ``num_parts`` parts."""
        if num_parts > len(self.poses):
            self.poses.extend(Pose() for _ in range(num_parts - len(self.poses)))

        if num_parts > 0:
            current = self.motions[self.motion_type]
            blended = self.motions[self.motion_type_blend]
            self.num_key = current.num_key
            self.num_key_blend = blended.num_key
            self.loop_motion = current.loop
            if self.num_key == 0 or self.num_key_blend == 0:
                raise ValueError("a playing motion has no key frames")
            self.next_key = (self.key + 1) % self.num_key
            self.next_key_blend = (self.key_blend + 1) % self.num_key_blend

            for part in range(num_parts):
                if not self.finish_motion and not self.first_motion:
                    self.poses[part] = self._current_pose(part)
                if (self.finish_motion or self.first_motion) and self.blend_motion:
                    self.poses[part] = self._blend_pose(part)

        if self.is_end_motion():
            self.counter_blend = 0
            self.finish_motion = True
            self.frame_blend = self.motions[self.motion_type].key_infos[self.num_key - 1].frame
            self.motion_type_blend = NEUTRAL

        self._finish_first_blend()

        if self.is_finish_end_blend():
            self.finish_motion = False
            self.blend_motion = False
            self.count_motion = self.frame_blend
            self.motion_type = NEUTRAL
            self.counter_blend = 0

        motion = self.motions[self.motion_type]
        if self.count_motion >= motion.key_infos[self.key].frame:
            self.key = (self.key + 1) % motion.num_key
            self.count_motion = 0

        if not self.first_motion:
            self.count_motion += 1

        if self.finish_motion or self.first_motion:
            self.counter_blend += 1

        return self.poses[:num_parts]

    def is_end_motion(self) -> bool:
        """Whether a blended one-shot motion has reached its last key."""
        return (
            not self.finish_motion
            and self.key >= self.num_key - 1
            and self.blend_motion
            and not self.loop_motion
            and not self.first_motion
        )

    def is_finish_end_blend(self) -> bool:
        """Whether the blend back to neutral after a finished motion is complete."""
        return self.finish_motion and self.frame_blend <= self.counter_blend and not self.first_motion

    def debug_lines(self) -> list[str]:
        """Describe the playback state, one item per line."""
        return [
            f"key {self.key} / {self.motions[self.motion_type].num_key}",
            f"blend key {self.key_blend} / {self.motions[self.motion_type_blend].num_key}",
            f"frame {self.count_motion}",
            f"blend frame {self.counter_blend}",
            f"first = {int(self.first_motion)}",
            f"finish = {int(self.finish_motion)}",
            f"motion = {self.motion_type}",
            f"motion blend = {self.motion_type_blend}",
        ]