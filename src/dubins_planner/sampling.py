# src/dubins_planner/sampling.py
r"""
Module: pose propagation and queries along a Dubins path.

Key functions:
- propagate(pose, param, segment_type): advance a unit-radius pose along one segment.
- sample(path, t): pose at arc length $$t$$ along the path.
- endpoint(path): exact final pose of the path.
- sample_many(path, step_size, visit): walk the path at fixed arc-length steps,
  handing each pose to a visitor that may stop the walk.
- extract_subpath(path, t): the first $$t$$ units of arc length as a new path.

Notes and conventions:
- Headings are in radians; sampled headings are normalized to $$[0, 2\pi)$$.
- Propagation happens in the normalized frame (radius 1, start at the origin);
  positions are scaled by the turning radius and translated back afterwards.
- None of these functions mutate the path they are given.
"""
from __future__ import annotations

import math
import operator
from typing import Any, Callable, Iterator, List, Optional, Tuple

import numpy as np

from dubins_planner.angles import normalize_angle
from dubins_planner.config import DEFAULT_CONFIG, DubinsConfig
from dubins_planner.errors import IndexOutOfRange, InvalidStep, ParamOutOfRange
from dubins_planner.path_model import DubinsPath, PathWord, Pose, SegmentType

Visitor = Callable[[Pose, float], Any]


def propagate(pose: Pose, param: float, segment_type: SegmentType) -> Pose:
    """
    Advance a pose by normalized length $$param$$ along one segment of radius 1.

    - LEFT_ARC turns counter-clockwise about the centre to the left of the heading.
    - RIGHT_ARC turns clockwise about the centre to the right of the heading.
    - STRAIGHT moves along the heading.
    """
    x, y, h = pose
    if segment_type == SegmentType.LEFT_ARC:
        return (
            x + math.sin(h + param) - math.sin(h),
            y - math.cos(h + param) + math.cos(h),
            h + param,
        )
    if segment_type == SegmentType.RIGHT_ARC:
        return (
            x - math.sin(h - param) + math.sin(h),
            y + math.cos(h - param) - math.cos(h),
            h - param,
        )
    if segment_type == SegmentType.STRAIGHT:
        return (x + math.cos(h) * param, y + math.sin(h) * param, h)
    raise ValueError(f"unknown segment type: {segment_type!r}")


def path_length(path: DubinsPath) -> float:
    return path.length()


def _check_index(i: int, config: DubinsConfig) -> Optional[int]:
    # integral types only; 1.0 or "1" are not segment indices
    try:
        idx = operator.index(i)
    except TypeError:
        idx = None
    if idx is not None and 0 <= idx <= 2:
        return idx
    if config.legacy_segment_index:
        return None
    raise IndexOutOfRange(f"segment index must be 0, 1 or 2, got {i!r}")


def segment_length(path: DubinsPath, i: int, config: DubinsConfig = DEFAULT_CONFIG) -> float:
    r"""
    Physical length of segment $$i$$.

    An index outside $$\{0, 1, 2\}$$, or one that is not an integer, raises
    IndexOutOfRange, or returns ``math.inf`` when ``config.legacy_segment_index``
    is set.
    """
    idx = _check_index(i, config)
    if idx is None:
        return math.inf
    return path.segment_params[idx] * path.turning_radius


def segment_length_normalized(path: DubinsPath, i: int, config: DubinsConfig = DEFAULT_CONFIG) -> float:
    """Normalized length of segment $$i$$; index handling as in ``segment_length``."""
    idx = _check_index(i, config)
    if idx is None:
        return math.inf
    return path.segment_params[idx]


def path_type(path: DubinsPath) -> PathWord:
    return path.word


def _to_world(path: DubinsPath, q: Pose) -> Pose:
    # scale, translate back to the start position, normalize heading
    rho = path.turning_radius
    x0, y0, _ = path.start_pose
    return (q[0] * rho + x0, q[1] * rho + y0, normalize_angle(q[2]))


def sample(path: DubinsPath, t: float) -> Pose:
    r"""
    Pose at arc length $$t$$ along the path, $$0 \le t < L$$.

    The start is translated to the origin, the two internal breakpoints
    $$p_1$$ and $$p_1 + p_2$$ are generated, and only the segment containing
    $$t / \rho$$ is propagated from its own start pose.

    Raises
    - ParamOutOfRange if $$t < 0$$ or $$t \ge L$$.
    """
    if not 0.0 <= t < path.length():
        raise ParamOutOfRange(f"t={t!r} outside [0, {path.length()!r})")

    tprime = t / path.turning_radius
    types = path.segment_types
    p1, p2, _ = path.segment_params

    qi = (0.0, 0.0, path.start_pose[2])
    q1 = propagate(qi, p1, types[0])
    q2 = propagate(q1, p2, types[1])
    if tprime < p1:
        q = propagate(qi, tprime, types[0])
    elif tprime < p1 + p2:
        q = propagate(q1, tprime - p1, types[1])
    else:
        q = propagate(q2, tprime - p1 - p2, types[2])
    return _to_world(path, q)


def endpoint(path: DubinsPath) -> Pose:
    """Final pose of the path, propagated through all three segments exactly."""
    q = (0.0, 0.0, path.start_pose[2])
    for param, seg in zip(path.segment_params, path.segment_types):
        q = propagate(q, param, seg)
    return _to_world(path, q)


def endpoint_legacy(path: DubinsPath, config: DubinsConfig = DEFAULT_CONFIG) -> Pose:
    r"""
    Historical endpoint: ``sample`` at $$L - \varepsilon$$.

    Kept for callers that need the old values bit for bit; prefer
    ``endpoint``. Paths shorter than $$\varepsilon$$ fall back to it.
    """
    t = path.length() - config.tolerances.endpoint_eps
    if t < 0.0:
        return endpoint(path)
    return sample(path, t)


def _check_step(step_size: float) -> None:
    if not step_size > 0.0 or math.isinf(step_size):
        raise InvalidStep(f"step_size must be a positive finite number, got {step_size!r}")


def iter_samples(path: DubinsPath, step_size: float) -> Iterator[Tuple[Pose, float]]:
    r"""
    Yield ``(pose, offset)`` at offsets $$0, s, 2s, \dots$$ while offset $$< L$$.

    Offsets are computed as $$k \cdot s$$ rather than accumulated. Each call
    returns a fresh generator.

    Raises
    - InvalidStep if $$s \le 0$$ (checked when called, not on first ``next``).
    """
    _check_step(step_size)
    return _iter_samples(path, step_size)


def _iter_samples(path: DubinsPath, step_size: float) -> Iterator[Tuple[Pose, float]]:
    length = path.length()
    k = 0
    offset = 0.0
    while offset < length:
        yield sample(path, offset), offset
        k += 1
        offset = k * step_size


def sample_many(path: DubinsPath, step_size: float, visit: Visitor) -> Any:
    """
    Walk the path at fixed arc-length steps, calling ``visit(pose, offset)``.

    A falsy return value (``None``, ``0``, ``False``) continues the walk. Any
    other value stops it immediately and is returned. Returns ``0`` once every
    sample has been visited.

    Raises
    - InvalidStep if ``step_size`` is not a positive finite number.
    """
    for pose, offset in iter_samples(path, step_size):
        ret = visit(pose, offset)
        if ret:
            return ret
    return 0


def sample_path(path: DubinsPath, step_size: float) -> Tuple[np.ndarray, np.ndarray]:
    """
    Collect every sample of ``iter_samples``.

    Returns
    - poses: array of shape (N, 3) with rows (x, y, heading).
    - offsets: array of shape (N,) with the matching arc lengths.
    """
    poses: List[Pose] = []
    offsets: List[float] = []
    for pose, offset in iter_samples(path, step_size):
        poses.append(pose)
        offsets.append(offset)
    return np.asarray(poses, dtype=float).reshape(-1, 3), np.asarray(offsets, dtype=float)


def extract_subpath(path: DubinsPath, t: float) -> DubinsPath:
    r"""
    First $$t$$ units of arc length of a path, as a new DubinsPath.

    Start pose, radius and word are kept; the segment parameters are consumed
    greedily in order so the new normalized length is $$\min(t / \rho, L / \rho)$$.
    A $$t$$ beyond the path length returns an equal path.

    Raises
    - ParamOutOfRange if $$t < 0$$.
    """
    if not t >= 0.0:
        raise ParamOutOfRange(f"t must be non-negative, got {t!r}")

    tprime = t / path.turning_radius
    old = path.segment_params
    p0 = min(old[0], tprime)
    p1 = min(old[1], tprime - p0)
    p2 = min(old[2], tprime - p0 - p1)
    return DubinsPath(
        start_pose=path.start_pose,
        turning_radius=path.turning_radius,
        word=path.word,
        segment_params=(p0, p1, p2),
    )
