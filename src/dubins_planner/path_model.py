# src/dubins_planner/path_model.py
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Tuple

from dubins_planner.errors import InvalidRadius

# ---------------------------------------------------------------------------
# Module: Dubins path representation
#
# - Pose: (x, y, heading) in a fixed global frame, heading in radians.
# - SegmentType: the three primitives a path is built from.
# - PathWord: the six canonical segment sequences. The enum order is the
#   order in which the synthesizer evaluates them, which also decides ties.
# - DubinsPath: immutable path record. segment_params are normalized
#   (radius independent) lengths; physical length = param * turning_radius.
# ---------------------------------------------------------------------------

Pose = Tuple[float, float, float]
Params = Tuple[float, float, float]


class SegmentType(IntEnum):
    LEFT_ARC = 0
    STRAIGHT = 1
    RIGHT_ARC = 2


class PathWord(IntEnum):
    LSL = 0
    LSR = 1
    RSL = 2
    RSR = 3
    RLR = 4
    LRL = 5

    @property
    def segment_types(self) -> Tuple[SegmentType, SegmentType, SegmentType]:
        return WORD_SEGMENTS[self]

    @property
    def is_csc(self) -> bool:
        return WORD_SEGMENTS[self][1] == SegmentType.STRAIGHT


_L, _S, _R = SegmentType.LEFT_ARC, SegmentType.STRAIGHT, SegmentType.RIGHT_ARC

WORD_SEGMENTS: Dict[PathWord, Tuple[SegmentType, SegmentType, SegmentType]] = {
    PathWord.LSL: (_L, _S, _L),
    PathWord.LSR: (_L, _S, _R),
    PathWord.RSL: (_R, _S, _L),
    PathWord.RSR: (_R, _S, _R),
    PathWord.RLR: (_R, _L, _R),
    PathWord.LRL: (_L, _R, _L),
}


@dataclass(frozen=True)
class DubinsPath:
    """
    Shortest Dubins path between two poses.

    Attributes:
        start_pose: (x0, y0, theta0) initial configuration, stored as given
            (the heading is not normalized).
        turning_radius: minimum turning radius, > 0. Every arc uses exactly
            this radius.
        word: which of the six segment sequences the path follows.
        segment_params: normalized lengths (t, p, q) of the three segments,
            in the order given by ``word``.

    Instances are built by ``dubins_planner.dubins.synthesize`` and never
    change afterwards; sub-path extraction returns a new instance.
    """
    start_pose: Pose
    turning_radius: float
    word: PathWord
    segment_params: Params

    def __post_init__(self):
        if not self.turning_radius > 0.0 or math.isinf(self.turning_radius):
            raise InvalidRadius(f"turning radius must be positive, got {self.turning_radius!r}")
        if len(self.segment_params) != 3:
            raise ValueError("segment_params must hold exactly three values")
        # Accept lists/IntEnum values from callers, store canonical types
        object.__setattr__(self, "start_pose", tuple(float(v) for v in self.start_pose))
        params = tuple(float(v) for v in self.segment_params)
        if not all(math.isfinite(v) and v >= 0.0 for v in params):
            raise ValueError(f"segment_params must be finite and non-negative, got {params!r}")
        object.__setattr__(self, "segment_params", params)
        object.__setattr__(self, "word", PathWord(self.word))

    @property
    def segment_types(self) -> Tuple[SegmentType, SegmentType, SegmentType]:
        return WORD_SEGMENTS[self.word]

    def normalized_length(self) -> float:
        return sum(self.segment_params)

    def length(self) -> float:
        return self.normalized_length() * self.turning_radius

    def to_dict(self) -> Dict:
        return {
            "start_pose": list(self.start_pose),
            "turning_radius": self.turning_radius,
            "word": self.word.name,
            "segment_params": list(self.segment_params),
        }

    @staticmethod
    def from_dict(d: Dict) -> "DubinsPath":
        return DubinsPath(
            start_pose=tuple(d["start_pose"]),
            turning_radius=float(d["turning_radius"]),
            word=PathWord[d["word"]],
            segment_params=tuple(d["segment_params"]),
        )
