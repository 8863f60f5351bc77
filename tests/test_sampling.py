# tests/test_sampling.py
import math
import pytest
import numpy as np

from dubins_planner.angles import angle_diff
from dubins_planner.config import DubinsConfig
from dubins_planner.dubins import synthesize
from dubins_planner.errors import IndexOutOfRange, InvalidStep, ParamOutOfRange
from dubins_planner.path_model import DubinsPath, PathWord, SegmentType
from dubins_planner.sampling import (
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

pi = math.pi


@pytest.fixture
def unit_path() -> DubinsPath:
    # three unit segments, radius 1: length 3
    return DubinsPath(start_pose=(0.0, 0.0, 0.0), turning_radius=1.0,
                      word=PathWord.LSR, segment_params=(1.0, 1.0, 1.0))


@pytest.fixture
def planned_path() -> DubinsPath:
    return synthesize((2.0, -1.0, 0.4), (25.0, 12.0, -pi / 3), 7.5)


# ---------- Propagation ----------

def test_propagate_left_quarter_turn():
    assert propagate((0.0, 0.0, 0.0), pi / 2, SegmentType.LEFT_ARC) == pytest.approx((1.0, 1.0, pi / 2))


def test_propagate_right_quarter_turn():
    assert propagate((0.0, 0.0, 0.0), pi / 2, SegmentType.RIGHT_ARC) == pytest.approx((1.0, -1.0, -pi / 2))


def test_propagate_straight():
    x, y, h = propagate((1.0, 1.0, pi / 2), 2.0, SegmentType.STRAIGHT)
    assert x == pytest.approx(1.0)
    assert y == pytest.approx(3.0)
    assert h == pi / 2


def test_propagate_full_circle_returns_to_start():
    for seg in (SegmentType.LEFT_ARC, SegmentType.RIGHT_ARC):
        x, y, h = propagate((0.5, -0.5, 1.0), 2 * pi, seg)
        assert (x, y) == pytest.approx((0.5, -0.5), abs=1e-12)


# ---------- Length queries ----------

def test_lengths_scale_with_radius():
    path = DubinsPath((0.0, 0.0, 0.0), 2.5, PathWord.RLR, (0.5, 4.0, 1.0))
    assert path_length(path) == pytest.approx(2.5 * 5.5)
    assert segment_length(path, 1) == pytest.approx(10.0)
    assert segment_length_normalized(path, 1) == pytest.approx(4.0)
    assert [segment_length(path, i) for i in range(3)] == pytest.approx([1.25, 10.0, 2.5])
    assert path_type(path) == PathWord.RLR


@pytest.mark.parametrize("i", [-1, 3, 10])
def test_segment_index_out_of_range_raises(unit_path, i: int):
    with pytest.raises(IndexOutOfRange):
        segment_length(unit_path, i)
    with pytest.raises(IndexError):
        segment_length_normalized(unit_path, i)


@pytest.mark.parametrize("i", [-1, 3])
def test_segment_index_legacy_sentinel(unit_path, i: int):
    cfg = DubinsConfig(legacy_segment_index=True)
    assert segment_length(unit_path, i, cfg) == math.inf
    assert segment_length_normalized(unit_path, i, cfg) == math.inf
    assert segment_length(unit_path, 0, cfg) == pytest.approx(1.0)


@pytest.mark.parametrize("i", [1.5, 1.0, "1", None])
def test_segment_index_non_integer(unit_path, i):
    with pytest.raises(IndexOutOfRange):
        segment_length(unit_path, i)
    with pytest.raises(IndexOutOfRange):
        segment_length_normalized(unit_path, i)
    cfg = DubinsConfig(legacy_segment_index=True)
    assert segment_length(unit_path, i, cfg) == math.inf
    assert segment_length_normalized(unit_path, i, cfg) == math.inf


def test_segment_index_accepts_numpy_integers(unit_path):
    assert segment_length(unit_path, np.int64(2)) == pytest.approx(1.0)
    assert segment_length_normalized(unit_path, np.int32(0)) == pytest.approx(1.0)


# ---------- Sampling ----------

def test_sample_at_zero_is_start_pose():
    path = synthesize((1.0, 2.0, -pi / 2), (8.0, -3.0, 0.7), 1.3)
    x, y, h = sample(path, 0.0)
    assert (x, y) == pytest.approx((1.0, 2.0))
    assert h == pytest.approx(3 * pi / 2)


@pytest.mark.parametrize("t", [-1e-9, -1.0, 3.0, 3.5, float("nan")])
def test_sample_out_of_range_raises(unit_path, t: float):
    with pytest.raises(ParamOutOfRange):
        sample(unit_path, t)


def test_sample_headings_are_normalized(planned_path):
    for s in np.linspace(0.0, path_length(planned_path), 50, endpoint=False):
        h = sample(planned_path, float(s))[2]
        assert 0.0 <= h < 2 * pi


def test_sample_first_segment_matches_arc(unit_path):
    # LSR: first segment is a left arc of radius 1 from (0, 0, 0)
    x, y, h = sample(unit_path, 0.5)
    assert x == pytest.approx(math.sin(0.5))
    assert y == pytest.approx(1.0 - math.cos(0.5))
    assert h == pytest.approx(0.5)


@pytest.mark.parametrize("word", list(PathWord))
def test_sample_continuous_across_breakpoints(word: PathWord):
    rho = 2.0
    path = DubinsPath((1.0, 2.0, 0.3), rho, word, (0.7, 1.5, 1.1))
    p = path.segment_params
    delta = 1e-7
    for b in (p[0] * rho, (p[0] + p[1]) * rho):
        before = sample(path, b - delta)
        after = sample(path, b + delta)
        assert math.hypot(after[0] - before[0], after[1] - before[1]) < 1e-5
        assert abs(angle_diff(after[2], before[2])) < 1e-5


# ---------- Endpoint ----------

def test_endpoint_matches_legacy_epsilon_variant(planned_path):
    exact = endpoint(planned_path)
    legacy = endpoint_legacy(planned_path)
    assert exact[:2] == pytest.approx(legacy[:2], abs=1e-6)
    assert angle_diff(exact[2], legacy[2]) == pytest.approx(0.0, abs=1e-6)


def test_endpoint_of_zero_length_path_is_start():
    path = DubinsPath((3.0, 4.0, -0.5), 1.0, PathWord.LSL, (0.0, 0.0, 0.0))
    assert endpoint(path) == pytest.approx((3.0, 4.0, 2 * pi - 0.5))
    assert endpoint_legacy(path) == pytest.approx((3.0, 4.0, 2 * pi - 0.5))


# ---------- Batch sampling ----------

def test_sample_many_visits_fixed_offsets(unit_path):
    seen = []

    def visit(pose, s):
        seen.append((pose, s))

    assert sample_many(unit_path, 0.5, visit) == 0
    assert [s for _, s in seen] == pytest.approx([0.0, 0.5, 1.0, 1.5, 2.0, 2.5])
    assert seen[0][0] == pytest.approx((0.0, 0.0, 0.0))


def test_sample_many_stops_and_propagates_signal(unit_path):
    calls = []

    def visit(pose, s):
        calls.append(s)
        return "stop" if s >= 1.0 else 0

    assert sample_many(unit_path, 0.5, visit) == "stop"
    assert calls == pytest.approx([0.0, 0.5, 1.0])


@pytest.mark.parametrize("step", [0.0, -0.5, float("nan"), float("inf")])
def test_sample_many_rejects_bad_step(unit_path, step: float):
    calls = []
    with pytest.raises(InvalidStep):
        sample_many(unit_path, step, lambda pose, s: calls.append(s))
    assert calls == []
    with pytest.raises(InvalidStep):
        iter_samples(unit_path, step)


def test_iter_samples_is_restartable(planned_path):
    first = list(iter_samples(planned_path, 1.0))
    second = list(iter_samples(planned_path, 1.0))
    assert first == second
    assert len(first) == math.ceil(path_length(planned_path) / 1.0)


def test_sample_path_arrays(unit_path):
    poses, offsets = sample_path(unit_path, 0.5)
    assert poses.shape == (6, 3)
    assert offsets.shape == (6,)
    assert offsets[-1] == pytest.approx(2.5)
    assert tuple(poses[3]) == pytest.approx(sample(unit_path, 1.5))


# ---------- Sub-paths ----------

@pytest.mark.parametrize("t", [0.0, 0.5, 1.5, 2.9, 3.0, 10.0])
def test_extract_subpath_length(unit_path, t: float):
    sub = extract_subpath(unit_path, t)
    assert path_length(sub) == pytest.approx(min(t, path_length(unit_path)))
    assert sub.word == unit_path.word
    assert sub.start_pose == unit_path.start_pose
    assert sub.turning_radius == unit_path.turning_radius
    assert all(p >= 0.0 for p in sub.segment_params)


def test_extract_subpath_is_idempotent_and_leaves_input(planned_path):
    before = planned_path.segment_params
    t = 0.6 * path_length(planned_path)
    once = extract_subpath(planned_path, t)
    assert extract_subpath(once, t) == once
    assert planned_path.segment_params == before
    assert once is not planned_path


def test_extract_subpath_endpoint_matches_sample(planned_path):
    t = 0.45 * path_length(planned_path)
    sub = extract_subpath(planned_path, t)
    x, y, h = endpoint(sub)
    xs, ys, hs = sample(planned_path, t)
    assert (x, y) == pytest.approx((xs, ys), abs=1e-9)
    assert angle_diff(h, hs) == pytest.approx(0.0, abs=1e-9)


def test_extract_subpath_negative_raises(unit_path):
    with pytest.raises(ParamOutOfRange):
        extract_subpath(unit_path, -0.1)
