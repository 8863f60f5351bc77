# src/dubins_planner/config.py
from __future__ import annotations

from dataclasses import dataclass, field


# ----- Tolerances -----
@dataclass(frozen=True)
class Tolerances:
    r"""
    Numeric tolerances used across the planner.

    Attributes:
    - clamp_eps: a CSC discriminant $$p^2$$ in $$[-\varepsilon, 0)$$ is treated
      as $$0$$ instead of infeasible (default: $$1\mathrm{e}{-9}$$).
    - endpoint_eps: arc-length offset subtracted from the path length by the
      legacy endpoint query (default: $$1\mathrm{e}{-9}$$).
    """
    clamp_eps: float = 1e-9     # discriminant round-off tolerance
    endpoint_eps: float = 1e-9  # legacy endpoint offset


DEFAULT_TOLERANCES = Tolerances()


@dataclass(frozen=True)
class DubinsConfig:
    r"""
    Planner configuration.

    - tolerances: numeric tolerances, see ``Tolerances``.
    - legacy_segment_index: if True, segment length queries return
      ``math.inf`` for an index outside $$\{0, 1, 2\}$$ instead of raising
      ``IndexOutOfRange``. Only for callers that rely on the old sentinel.
    """
    tolerances: Tolerances = field(default_factory=Tolerances)
    legacy_segment_index: bool = False


DEFAULT_CONFIG = DubinsConfig()
