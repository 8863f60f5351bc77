# src/dubins_planner/__init__.py
"""
dubins_planner

Shortest paths for a forward-only vehicle with a minimum turning radius
between two oriented planar poses (Dubins paths). The planner picks the
cheapest of the six words LSL, LSR, RSL, RSR, RLR, LRL in closed form and
supports sampling poses along the result, length queries and truncation.

Public entry points
-------------------
Typical usage pattern:

    from dubins_planner import synthesize, sample, sample_many, endpoint

    # 1) Plan between two poses (x, y, heading) with turning radius 1.0
    path = synthesize((0.0, 0.0, 0.0), (4.0, 4.0, 3.14), 1.0)

    # 2) Query the result
    path.word, path.length()
    pose = sample(path, 0.5 * path.length())
    goal = endpoint(path)

    # 3) Walk the path; return a truthy value from the visitor to stop early
    sample_many(path, 0.1, lambda pose, s: None)
"""

from.angles import (
    ring_mod,
    normalize_angle,
    angle_diff,
)

from.errors import (
    DubinsError,
    InvalidRadius,
    NoPath,
    ParamOutOfRange,
    InvalidStep,
    IndexOutOfRange,
)

from.config import (
    Tolerances,
    DubinsConfig,
    DEFAULT_TOLERANCES,
    DEFAULT_CONFIG,
)

from.path_model import (
    Pose,
    SegmentType,
    PathWord,
    WORD_SEGMENTS,
    DubinsPath,
)

from.dubins_words import (
    dubins_lsl,
    dubins_lsr,
    dubins_rsl,
    dubins_rsr,
    dubins_rlr,
    dubins_lrl,
    WORD_SOLVERS,
)

from.dubins import (
    normalize_boundary,
    shortest_word_normalized,
    synthesize,
    synthesize_word,
    dubins_candidates,
    dubins_distance,
)

from.sampling import (
    propagate,
    path_length,
    segment_length,
    segment_length_normalized,
    path_type,
    sample,
    endpoint,
    endpoint_legacy,
    iter_samples,
    sample_many,
    sample_path,
    extract_subpath,
)

from.segments import (
    Segment,
    LineSegment,
    CurveSegment,
    SegmentPath,
    to_segments,
)

__all__ = [
    # Angles
    "ring_mod",
    "normalize_angle",
    "angle_diff",
    # Errors
    "DubinsError",
    "InvalidRadius",
    "NoPath",
    "ParamOutOfRange",
    "InvalidStep",
    "IndexOutOfRange",
    # Configuration
    "Tolerances",
    "DubinsConfig",
    "DEFAULT_TOLERANCES",
    "DEFAULT_CONFIG",
    # Path model
    "Pose",
    "SegmentType",
    "PathWord",
    "WORD_SEGMENTS",
    "DubinsPath",
    # Word solvers
    "dubins_lsl",
    "dubins_lsr",
    "dubins_rsl",
    "dubins_rsr",
    "dubins_rlr",
    "dubins_lrl",
    "WORD_SOLVERS",
    # Synthesis
    "normalize_boundary",
    "shortest_word_normalized",
    "synthesize",
    "synthesize_word",
    "dubins_candidates",
    "dubins_distance",
    # Sampling / queries
    "propagate",
    "path_length",
    "segment_length",
    "segment_length_normalized",
    "path_type",
    "sample",
    "endpoint",
    "endpoint_legacy",
    "iter_samples",
    "sample_many",
    "sample_path",
    "extract_subpath",
    # Geometry
    "Segment",
    "LineSegment",
    "CurveSegment",
    "SegmentPath",
    "to_segments",
]

__version__ = "0.1.0"
