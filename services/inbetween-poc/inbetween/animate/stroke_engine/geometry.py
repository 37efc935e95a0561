from typing import List, Sequence
import math
import numpy as np
from ..ingestion.models import Point


def distance(p1: Point, p2: Point) -> float:
    return math.sqrt((p1.x - p2.x)**2 + (p1.y - p2.y)**2)


def centroid(points: Sequence[Point]) -> Point:
    # Origin for an empty sequence; callers should not rely on it
    if not points:
        return Point(x=0, y=0)

    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return Point(x=sum(xs)/len(xs), y=sum(ys)/len(ys))


def polyline_length(points: Sequence[Point]) -> float:
    total = 0.0
    for i in range(1, len(points)):
        total += distance(points[i-1], points[i])
    return total


def _cumulative_lengths(points: Sequence[Point]) -> np.ndarray:
    xy = np.array([[p.x, p.y] for p in points], dtype=float)
    seg = np.hypot(np.diff(xy[:, 0]), np.diff(xy[:, 1]))
    return np.concatenate(([0.0], np.cumsum(seg)))


def resample(points: Sequence[Point], num_points: int) -> List[Point]:
    """
    Resamples a polyline to `num_points` points evenly spaced by arc length.

    The first and last output points coincide with the polyline's endpoints.
    Fewer than two input points are returned as a copy; a zero-length polyline
    yields `num_points` copies of its first point.
    """
    if len(points) < 2:
        return [Point(x=p.x, y=p.y) for p in points]

    n = max(2, int(math.floor(num_points)))

    cum = _cumulative_lengths(points)
    total = float(cum[-1])

    if total == 0:
        first = points[0]
        return [Point(x=first.x, y=first.y) for _ in range(n)]

    targets = np.array([(k / (n - 1)) * total for k in range(n)])

    # First cumulative entry >= target marks the segment end
    ends = np.searchsorted(cum, targets, side="left")
    ends = np.clip(ends, 1, len(cum) - 1)

    new_points = []
    for target, i in zip(targets.tolist(), ends.tolist()):
        t0, t1 = cum[i-1], cum[i]
        u = (target - t0) / ((t1 - t0) or 1e-9)

        p_start = points[i-1]
        p_end = points[i]
        nx = p_start.x + (p_end.x - p_start.x) * u
        ny = p_start.y + (p_end.y - p_start.y) * u
        new_points.append(Point(x=nx, y=ny))

    return new_points
