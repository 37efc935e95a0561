from typing import Optional
from ..ingestion.models import Stroke, Point
from ...config import TweenSettings, get_settings
from .geometry import centroid


def ghost_from(
    stroke: Stroke,
    point_count: Optional[int] = None,
    settings: Optional[TweenSettings] = None,
) -> Stroke:
    """
    Invisible stand-in for a stroke with no partner in the other keyframe.
    All points sit on the stroke's centroid, so tweening toward it shrinks
    the stroke to a dot while fading it out.
    """
    settings = settings or get_settings()
    if point_count is None:
        point_count = settings.ghost_point_count

    c = centroid(stroke.points)
    return Stroke(
        color=stroke.color.model_copy(),
        thickness=settings.ghost_thickness,
        opacity=0.0,
        eraser=False,
        points=[Point(x=c.x, y=c.y) for _ in range(point_count)],
    )
