# src/dubins_planner/dubins_words.py
r"""
Closed-form solvers for the six Dubins path words.

Every solver works in the normalized frame produced by
``dubins_planner.dubins.normalize_boundary``: the start sits at the origin,
the goal on the positive x axis at distance $$d$$ (in turning radii), and
$$\alpha$$, $$\beta$$ are the start and goal headings measured from that axis,
both in $$[0, 2\pi)$$.

Signature shared by all solvers:

    solver(alpha, beta, d, tols=DEFAULT_TOLERANCES) -> Optional[(t, p, q)]

The result holds the normalized lengths of the three segments, or ``None``
when no path of that shape exists for the given boundary. For arcs the
length equals the swept angle since the radius is 1 in this frame.

CSC words (LSL, LSR, RSL, RSR) test the discriminant $$p^2$$; values within
``tols.clamp_eps`` below zero are round-off and are clamped to $$0$$.
CCC words (RLR, LRL) test the cosine ratio $$|c| \le 1$$ of the middle arc.
"""
from __future__ import annotations

import math
from typing import Callable, Dict, Optional, Tuple

from dubins_planner.angles import TWO_PI, normalize_angle
from dubins_planner.config import DEFAULT_TOLERANCES, Tolerances
from dubins_planner.path_model import Params, PathWord

WordSolver = Callable[..., Optional[Params]]


def _trig(alpha: float, beta: float) -> Tuple[float, float, float, float, float]:
    return math.sin(alpha), math.sin(beta), math.cos(alpha), math.cos(beta), math.cos(alpha - beta)


def _clamp_discriminant(p_squared: float, tols: Tolerances) -> Optional[float]:
    if p_squared >= 0.0:
        return p_squared
    if p_squared >= -tols.clamp_eps:
        return 0.0
    return None


def dubins_lsl(alpha: float, beta: float, d: float, tols: Tolerances = DEFAULT_TOLERANCES) -> Optional[Params]:
    sa, sb, ca, cb, c_ab = _trig(alpha, beta)
    tmp0 = d + sa - sb
    p_squared = _clamp_discriminant(2.0 + d * d - 2.0 * c_ab + 2.0 * d * (sa - sb), tols)
    if p_squared is None:
        return None
    tmp1 = math.atan2(cb - ca, tmp0)
    t = normalize_angle(-alpha + tmp1)
    p = math.sqrt(p_squared)
    q = normalize_angle(beta - tmp1)
    return t, p, q


def dubins_rsr(alpha: float, beta: float, d: float, tols: Tolerances = DEFAULT_TOLERANCES) -> Optional[Params]:
    sa, sb, ca, cb, c_ab = _trig(alpha, beta)
    tmp0 = d - sa + sb
    p_squared = _clamp_discriminant(2.0 + d * d - 2.0 * c_ab + 2.0 * d * (sb - sa), tols)
    if p_squared is None:
        return None
    tmp1 = math.atan2(ca - cb, tmp0)
    t = normalize_angle(alpha - tmp1)
    p = math.sqrt(p_squared)
    q = normalize_angle(-beta + tmp1)
    return t, p, q


def dubins_lsr(alpha: float, beta: float, d: float, tols: Tolerances = DEFAULT_TOLERANCES) -> Optional[Params]:
    sa, sb, ca, cb, c_ab = _trig(alpha, beta)
    p_squared = _clamp_discriminant(-2.0 + d * d + 2.0 * c_ab + 2.0 * d * (sa + sb), tols)
    if p_squared is None:
        return None
    p = math.sqrt(p_squared)
    tmp2 = math.atan2(-ca - cb, d + sa + sb) - math.atan2(-2.0, p)
    t = normalize_angle(-alpha + tmp2)
    q = normalize_angle(-normalize_angle(beta) + tmp2)
    return t, p, q


def dubins_rsl(alpha: float, beta: float, d: float, tols: Tolerances = DEFAULT_TOLERANCES) -> Optional[Params]:
    sa, sb, ca, cb, c_ab = _trig(alpha, beta)
    p_squared = _clamp_discriminant(d * d - 2.0 + 2.0 * c_ab - 2.0 * d * (sa + sb), tols)
    if p_squared is None:
        return None
    p = math.sqrt(p_squared)
    tmp2 = math.atan2(ca + cb, d - sa - sb) - math.atan2(2.0, p)
    t = normalize_angle(alpha - tmp2)
    q = normalize_angle(beta - tmp2)
    return t, p, q


def dubins_rlr(alpha: float, beta: float, d: float, tols: Tolerances = DEFAULT_TOLERANCES) -> Optional[Params]:
    sa, sb, ca, cb, c_ab = _trig(alpha, beta)
    tmp = (6.0 - d * d + 2.0 * c_ab + 2.0 * d * (sa - sb)) / 8.0
    if abs(tmp) > 1.0:
        return None
    p = normalize_angle(TWO_PI - math.acos(tmp))
    t = normalize_angle(alpha - math.atan2(ca - cb, d - sa + sb) + normalize_angle(p / 2.0))
    q = normalize_angle(alpha - beta - t + normalize_angle(p))
    return t, p, q


def dubins_lrl(alpha: float, beta: float, d: float, tols: Tolerances = DEFAULT_TOLERANCES) -> Optional[Params]:
    sa, sb, ca, cb, c_ab = _trig(alpha, beta)
    tmp = (6.0 - d * d + 2.0 * c_ab + 2.0 * d * (sb - sa)) / 8.0
    if abs(tmp) > 1.0:
        return None
    p = normalize_angle(TWO_PI - math.acos(tmp))
    t = normalize_angle(-alpha - math.atan2(ca - cb, d + sa - sb) + p / 2.0)
    q = normalize_angle(normalize_angle(beta) - alpha - t + normalize_angle(p))
    return t, p, q


# Evaluation order matters: on equal cost the earlier word wins.
WORD_SOLVERS: Dict[PathWord, WordSolver] = {
    PathWord.LSL: dubins_lsl,
    PathWord.LSR: dubins_lsr,
    PathWord.RSL: dubins_rsl,
    PathWord.RSR: dubins_rsr,
    PathWord.RLR: dubins_rlr,
    PathWord.LRL: dubins_lrl,
}
