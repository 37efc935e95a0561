from typing import List, Optional, Sequence, Tuple
from pydantic import BaseModel
from ..ingestion.models import Stroke
from ...config import TweenSettings, get_settings
from .geometry import centroid, distance, polyline_length

# Greedy correspondence between two keyframes' strokes by centroid + length.
# No global assignment; O(|A| * |B|).


class MatchResult(BaseModel):
    pairs: List[Tuple[int, int]] = []
    unmatched_a: List[int] = []
    unmatched_b: List[int] = []


def match_cost(a: Stroke, b: Stroke, settings: Optional[TweenSettings] = None) -> float:
    settings = settings or get_settings()

    d = distance(centroid(a.points), centroid(b.points))
    la = max(settings.min_length, polyline_length(a.points))
    lb = max(settings.min_length, polyline_length(b.points))
    return d + abs(la - lb) * settings.length_weight


def match_strokes(
    strokes_a: Sequence[Stroke],
    strokes_b: Sequence[Stroke],
    settings: Optional[TweenSettings] = None,
) -> MatchResult:
    """
    Pairs each stroke of A (in order) with the cheapest B stroke not yet taken.
    Ties go to the earliest B index. Leftovers on either side are reported
    as unmatched.
    """
    settings = settings or get_settings()

    pairs: List[Tuple[int, int]] = []
    unmatched_a: List[int] = []
    used_b = [False] * len(strokes_b)

    for i, a in enumerate(strokes_a):
        best_j = -1
        best_cost = float("inf")
        for j, b in enumerate(strokes_b):
            if used_b[j]:
                continue
            cost = match_cost(a, b, settings)
            if best_j == -1 or cost < best_cost:
                best_cost = cost
                best_j = j

        if best_j == -1:
            unmatched_a.append(i)
            continue

        pairs.append((i, best_j))
        used_b[best_j] = True

    unmatched_b = [j for j, used in enumerate(used_b) if not used]

    return MatchResult(pairs=pairs, unmatched_a=unmatched_a, unmatched_b=unmatched_b)
