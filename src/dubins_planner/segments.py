# src/dubins_planner/segments.py
from __future__ import annotations

import math
from dataclasses import dataclass, field
from math import cos, hypot, pi, sin
from typing import Dict, List, Tuple

from dubins_planner.path_model import DubinsPath, SegmentType

# ---------------------------------------------------------------------------
# Geometric view of a Dubins path: explicit lines and circular arcs in the
# world frame, for plotting and inspection. The Dubins path itself only
# stores normalized parameters; to_segments() expands them.
# ---------------------------------------------------------------------------

Point = Tuple[float, float]


@dataclass
class Segment:
    """Abstract base; used for typing and common helpers."""
    def length(self) -> float:
        raise NotImplementedError

    def point_at(self, t: float) -> Point:
        raise NotImplementedError

    def start_point(self) -> Point:
        return self.point_at(0.0)

    def end_point(self) -> Point:
        return self.point_at(1.0)

    def sample(self, n: int) -> List[Point]:
        """Return n points (including endpoints) sampled along the segment.
        n must be >= 2.
        """
        if n < 2:
            raise ValueError("n must be >= 2")
        return [self.point_at(i / (n - 1)) for i in range(n)]

    def to_dict(self) -> Dict:
        raise NotImplementedError


@dataclass
class LineSegment(Segment):
    start: Point  # (x0, y0)
    end: Point    # (xf, yf)

    def length(self) -> float:
        return hypot(self.end[0] - self.start[0], self.end[1] - self.start[1])

    def heading(self) -> float:
        return math.atan2(self.end[1] - self.start[1], self.end[0] - self.start[0])

    def point_at(self, t: float) -> Point:
        """Return point at fraction t in [0,1] along the line."""
        if not 0.0 <= t <= 1.0:
            raise ValueError("t must be in [0,1]")
        x = self.start[0] + t * (self.end[0] - self.start[0])
        y = self.start[1] + t * (self.end[1] - self.start[1])
        return (x, y)

    def to_dict(self) -> Dict:
        return {"type": "line", "start": list(self.start), "end": list(self.end)}


@dataclass
class CurveSegment(Segment):
    center: Point    # (xc, yc)
    radius: float    # R > 0
    theta_s: float   # start angle of the radius vector (radians)
    d_theta: float   # signed sweep (radians), positive for a left (CCW) turn

    def __post_init__(self):
        if self.radius <= 0:
            raise ValueError("radius must be > 0")
        if abs(self.d_theta) > 2 * pi + 1e-12:
            raise ValueError("d_theta must lie in [-2pi, 2pi]")

    def length(self) -> float:
        return abs(self.radius * self.d_theta)

    def angle_at(self, t: float) -> float:
        """Angle (radians) of the radius vector at fraction t in [0,1] along the arc."""
        if not 0.0 <= t <= 1.0:
            raise ValueError("t must be in [0,1]")
        return self.theta_s + t * self.d_theta

    def point_at(self, t: float) -> Point:
        a = self.angle_at(t)
        return (self.center[0] + self.radius * cos(a), self.center[1] + self.radius * sin(a))

    def heading_at(self, t: float) -> float:
        """Direction of travel at fraction t; tangent is 90 deg ahead of the radius for CCW."""
        sgn = 1.0 if self.d_theta >= 0 else -1.0
        return self.angle_at(t) + sgn * pi / 2

    def to_dict(self) -> Dict:
        return {
            "type": "curve",
            "center": list(self.center),
            "radius": self.radius,
            "theta_s": self.theta_s,
            "d_theta": self.d_theta,
        }


@dataclass
class SegmentPath:
    segments: List[Segment] = field(default_factory=list)

    def length(self) -> float:
        return sum(s.length() for s in self.segments)

    def sample(self, samples_per_segment: int = 50) -> List[Point]:
        """Concatenate per-segment samples; shared junction points appear once."""
        pts: List[Point] = []
        for seg in self.segments:
            seg_pts = seg.sample(samples_per_segment)
            if pts:
                seg_pts = seg_pts[1:]
            pts.extend(seg_pts)
        return pts

    def to_dict(self) -> Dict:
        return {"segments": [s.to_dict() for s in self.segments]}


def to_segments(path: DubinsPath) -> SegmentPath:
    """
    Expand a DubinsPath into world-frame line and arc segments.

    Zero-length segments are skipped. Arc centres sit one radius to the left
    (LEFT_ARC) or right (RIGHT_ARC) of the heading at the segment start.
    An arc longer than a half turn becomes several consecutive CurveSegments
    sharing the same centre, each sweeping at most pi.
    """
    rho = path.turning_radius
    x, y, h = path.start_pose
    segs: List[Segment] = []
    for param, seg_type in zip(path.segment_params, path.segment_types):
        if seg_type == SegmentType.STRAIGHT:
            xe = x + rho * param * cos(h)
            ye = y + rho * param * sin(h)
            if param > 0.0:
                segs.append(LineSegment(start=(x, y), end=(xe, ye)))
            x, y = xe, ye
            continue

        sgn = 1.0 if seg_type == SegmentType.LEFT_ARC else -1.0
        # centre is perpendicular to the heading, on the turning side
        xc = x - sgn * rho * sin(h)
        yc = y + sgn * rho * cos(h)
        theta_s = math.atan2(y - yc, x - xc)
        # arcs sweeping more than pi are split into equal pieces
        n_pieces = max(1, math.ceil(param / pi))
        d_theta = sgn * param / n_pieces
        for _ in range(n_pieces):
            if param > 0.0:
                segs.append(CurveSegment(center=(xc, yc), radius=rho, theta_s=theta_s, d_theta=d_theta))
            theta_s = theta_s + d_theta
        x = xc + rho * cos(theta_s)
        y = yc + rho * sin(theta_s)
        h = h + sgn * param
    return SegmentPath(segs)
