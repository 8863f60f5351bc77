# src/dubins_planner/dubins.py
from __future__ import annotations

import logging
import math
from typing import Dict, Optional, Tuple

from dubins_planner.angles import normalize_angle
from dubins_planner.config import DEFAULT_CONFIG, DubinsConfig
from dubins_planner.dubins_words import WORD_SOLVERS
from dubins_planner.errors import InvalidRadius, NoPath
from dubins_planner.path_model import DubinsPath, Params, PathWord, Pose

logger = logging.getLogger(__name__)


def normalize_boundary(
    start: Pose,
    end: Pose,
    radius: float,
) -> Tuple[float, float, float]:
    r"""
    Express a pose pair in the solver frame.

    The shape of the optimal path only depends on the start and goal
    headings relative to the line joining the two positions, and on their
    distance in units of the turning radius. This function computes those
    three quantities.

    Parameters
    - $$start$$: $$(x_0, y_0, \theta_0)$$ start configuration (radians).
    - $$end$$: $$(x_f, y_f, \theta_f)$$ goal configuration (radians).
    - $$radius$$: turning radius $$\rho > 0$$.

    Returns
    - $$(\alpha, \beta, d)$$ with
      $$\theta = \operatorname{atan2}(y_f - y_0, x_f - x_0) \bmod 2\pi$$,
      $$\alpha = (\theta_0 - \theta) \bmod 2\pi$$,
      $$\beta = (\theta_f - \theta) \bmod 2\pi$$,
      $$d = \|(x_f - x_0, y_f - y_0)\| / \rho$$.

    Raises
    - InvalidRadius if $$\rho \le 0$$ (or NaN / infinite).
    """
    if not radius > 0.0 or math.isinf(radius):
        raise InvalidRadius(f"turning radius must be positive, got {radius!r}")

    x0, y0, th0 = start
    xf, yf, thf = end
    dx = xf - x0
    dy = yf - y0
    d = math.hypot(dx, dy) / radius
    # atan2(0, 0) == 0: coincident positions use the x axis as reference
    theta = normalize_angle(math.atan2(dy, dx))
    alpha = normalize_angle(th0 - theta)
    beta = normalize_angle(thf - theta)
    return alpha, beta, d


def dubins_candidates_normalized(
    alpha: float,
    beta: float,
    d: float,
    config: DubinsConfig = DEFAULT_CONFIG,
) -> Dict[PathWord, Optional[Params]]:
    """Run every word solver in evaluation order; ``None`` marks infeasible words."""
    out: Dict[PathWord, Optional[Params]] = {}
    for word, solver in WORD_SOLVERS.items():
        params = solver(alpha, beta, d, config.tolerances)
        if params is None:
            logger.debug("word %s infeasible for alpha=%.6f beta=%.6f d=%.6f", word.name, alpha, beta, d)
        out[word] = params
    return out


def shortest_word_normalized(
    alpha: float,
    beta: float,
    d: float,
    config: DubinsConfig = DEFAULT_CONFIG,
) -> Tuple[PathWord, Params]:
    """
    Select the cheapest feasible word for a normalized boundary.

    Cost is the normalized total length $$t + p + q$$. Words are compared in
    the fixed order LSL, LSR, RSL, RSR, RLR, LRL with a strict comparison, so
    on an exact tie the earlier word is kept.

    Raises
    - NoPath if all six words are infeasible.
    """
    best_word: Optional[PathWord] = None
    best_params: Optional[Params] = None
    best_cost = math.inf
    for word, params in dubins_candidates_normalized(alpha, beta, d, config).items():
        if params is None:
            continue
        cost = params[0] + params[1] + params[2]
        if cost < best_cost:
            best_word, best_params, best_cost = word, params, cost

    if best_word is None or best_params is None:
        raise NoPath(f"no feasible Dubins word for alpha={alpha!r} beta={beta!r} d={d!r}")
    return best_word, best_params


def synthesize(
    start: Pose,
    end: Pose,
    radius: float,
    config: DubinsConfig = DEFAULT_CONFIG,
) -> DubinsPath:
    """
    Compute the shortest Dubins path between two configurations.

    Args:
        start: (x0, y0, theta0) tuple (radians).
        end: (xf, yf, thetaf) tuple (radians).
        radius: Minimum turning radius.
        config: Planner configuration (tolerances).

    Returns:
        DubinsPath holding the start pose, radius, selected word and the
        normalized segment parameters.

    Raises:
        InvalidRadius: If the radius is non-positive.
        NoPath: If no word is feasible (only in degenerate numeric cases).
    """
    alpha, beta, d = normalize_boundary(start, end, radius)
    word, params = shortest_word_normalized(alpha, beta, d, config)
    logger.debug(
        "synthesized %s params=(%.6f, %.6f, %.6f) for alpha=%.6f beta=%.6f d=%.6f",
        word.name, params[0], params[1], params[2], alpha, beta, d,
    )
    return DubinsPath(start_pose=tuple(start), turning_radius=radius, word=word, segment_params=params)


def synthesize_word(
    start: Pose,
    end: Pose,
    radius: float,
    word: PathWord,
    config: DubinsConfig = DEFAULT_CONFIG,
) -> DubinsPath:
    """
    Build the path of one given word, whether or not it is the shortest.

    Raises
    - InvalidRadius if the radius is non-positive.
    - NoPath if the requested word cannot connect the two poses.
    """
    word = PathWord(word)
    alpha, beta, d = normalize_boundary(start, end, radius)
    params = WORD_SOLVERS[word](alpha, beta, d, config.tolerances)
    if params is None:
        raise NoPath(f"word {word.name} is infeasible for this boundary")
    return DubinsPath(start_pose=tuple(start), turning_radius=radius, word=word, segment_params=params)


def dubins_candidates(
    start: Pose,
    end: Pose,
    radius: float,
    config: DubinsConfig = DEFAULT_CONFIG,
) -> Dict[PathWord, Optional[Params]]:
    """Normalized parameters of every word for a pose pair (``None`` if infeasible)."""
    alpha, beta, d = normalize_boundary(start, end, radius)
    return dubins_candidates_normalized(alpha, beta, d, config)


def dubins_distance(
    start: Pose,
    end: Pose,
    radius: float,
    config: DubinsConfig = DEFAULT_CONFIG,
) -> float:
    """Length of the shortest Dubins path between two configurations."""
    return synthesize(start, end, radius, config).length()
