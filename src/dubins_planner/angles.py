# src/dubins_planner/angles.py
from __future__ import annotations

import math

TWO_PI = 2.0 * math.pi


def ring_mod(x: float, y: float) -> float:
    r"""
    Floating point modulus suitable for rings.

    Returns $$x - y\lfloor x / y \rfloor$$, the representative of $$x$$ in
    $$[0, y)$$. Unlike ``math.fmod`` the result never takes the sign of
    $$x$$, so negative angles land in the same range as positive ones.
    """
    return x - y * math.floor(x / y)


def normalize_angle(theta: float) -> float:
    r"""Normalize an angle (radians) into $$[0, 2\pi)$$."""
    a = ring_mod(theta, TWO_PI)
    # x - y*floor(x/y) can round up to exactly y for tiny negative x
    if a >= TWO_PI:
        return 0.0
    return a


def angle_diff(a: float, b: float) -> float:
    r"""Signed smallest difference $$a - b$$, in $$[-\pi, \pi)$$."""
    return ring_mod(a - b + math.pi, TWO_PI) - math.pi
