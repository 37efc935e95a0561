import logging
from typing import List, Optional, Sequence, Union
from ..ingestion.models import Drawing, HSBColor, Point, Stroke, resolved_alpha
from ...config import TweenSettings, get_settings
from .geometry import resample
from .ghosts import ghost_from
from .matching import match_strokes

logger = logging.getLogger(__name__)

StrokeSet = Union[Drawing, Sequence[Stroke]]


def lerp(x: float, y: float, t: float) -> float:
    return x + (y - x) * t


def _opacity(stroke: Stroke, default: float) -> float:
    # Only a missing opacity is defaulted; 0 is a real (ghost) value
    return stroke.opacity if stroke.opacity is not None else default


def tween_strokes(
    a: Stroke,
    b: Stroke,
    t: float,
    num_points: Optional[int] = None,
    settings: Optional[TweenSettings] = None,
) -> Stroke:
    """
    Interpolates two strokes at `t` (used as given, no clamping).

    Both polylines are resampled to the same point count and blended
    point-for-point; color channels, alpha, thickness and opacity are
    blended per stroke.
    """
    settings = settings or get_settings()
    if num_points is None:
        num_points = settings.matched_samples

    pa = resample(a.points, num_points)
    pb = resample(b.points, num_points)

    # Only differs when a stroke with < 2 points slipped through
    count = min(len(pa), len(pb))
    points = [
        Point(x=lerp(pa[j].x, pb[j].x, t), y=lerp(pa[j].y, pb[j].y, t))
        for j in range(count)
    ]

    color = HSBColor(
        h=lerp(a.color.h, b.color.h, t),
        s=lerp(a.color.s, b.color.s, t),
        b=lerp(a.color.b, b.color.b, t),
        a=lerp(
            resolved_alpha(a, settings.default_opacity),
            resolved_alpha(b, settings.default_opacity),
            t,
        ),
    )

    thickness = lerp(
        a.thickness or settings.default_thickness,
        b.thickness or settings.default_thickness,
        t,
    )
    opacity = lerp(
        _opacity(a, settings.default_opacity),
        _opacity(b, settings.default_opacity),
        t,
    )

    return Stroke(color=color, thickness=thickness, opacity=opacity, eraser=False, points=points)


def _strokes_of(drawing: StrokeSet) -> Sequence[Stroke]:
    if isinstance(drawing, Drawing):
        return drawing.strokes
    return drawing


def tween_drawings(
    drawing_a: StrokeSet,
    drawing_b: StrokeSet,
    t: float,
    settings: Optional[TweenSettings] = None,
) -> List[Stroke]:
    """
    Builds the in-between drawing of two keyframes at `t`.

    Eraser strokes and strokes with fewer than two points are ignored.
    Matched strokes morph into each other; strokes only in A collapse into a
    fading ghost, strokes only in B grow out of one.
    Output order: matched pairs (A order), then A-only, then B-only.
    """
    settings = settings or get_settings()

    aa = [s for s in _strokes_of(drawing_a) if s.is_drawable()]
    bb = [s for s in _strokes_of(drawing_b) if s.is_drawable()]

    match = match_strokes(aa, bb, settings)
    logger.debug(
        "Tween t=%.3f: %d pairs, %d fading out, %d fading in",
        t, len(match.pairs), len(match.unmatched_a), len(match.unmatched_b),
    )

    out: List[Stroke] = []

    # 1. Morph matched strokes
    for ia, ib in match.pairs:
        out.append(tween_strokes(aa[ia], bb[ib], t, settings.matched_samples, settings))

    # 2. Fade out strokes only present in A
    for ia in match.unmatched_a:
        ghost = ghost_from(aa[ia], settings=settings)
        out.append(tween_strokes(aa[ia], ghost, t, settings.ghost_samples, settings))

    # 3. Fade in strokes only present in B
    for ib in match.unmatched_b:
        ghost = ghost_from(bb[ib], settings=settings)
        out.append(tween_strokes(ghost, bb[ib], t, settings.ghost_samples, settings))

    return out
