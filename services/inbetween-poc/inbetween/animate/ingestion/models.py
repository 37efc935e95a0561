import math
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Union

# Channel ranges: hue 0-360, saturation/brightness/alpha 0-100
HUE_MAX = 360.0
CHANNEL_MAX = 100.0


class Point(BaseModel):
    x: float
    y: float


class HSBColor(BaseModel):
    h: float = 0.0
    s: float = 0.0
    b: float = 0.0
    a: Optional[float] = None  # Embedded alpha, may be absent


class Stroke(BaseModel):
    color: HSBColor = Field(default_factory=HSBColor)
    thickness: float = 4.0
    opacity: Optional[float] = None
    eraser: bool = False
    points: List[Point] = []

    def is_drawable(self) -> bool:
        return not self.eraser and len(self.points) >= 2


class Drawing(BaseModel):
    strokes: List[Stroke] = []


class RawStroke(BaseModel):
    """Stroke as delivered by the capture side; hex colors are converted to HSB."""
    color: Union[HSBColor, str] = Field(default="#000000", validate_default=True)
    thickness: Optional[float] = Field(default=None, gt=0)
    opacity: Optional[float] = None
    eraser: bool = False
    points: List[Point] = []

    @field_validator("color")
    @classmethod
    def _parse_hex(cls, value: Union[HSBColor, str]) -> HSBColor:
        if isinstance(value, str):
            from ...utils import hsb_from_hex
            return hsb_from_hex(value)
        return value


class TweenRequest(BaseModel):
    a: Drawing
    b: Drawing
    t: float = Field(ge=0.0, le=1.0)


class KeyframeRequest(BaseModel):
    strokes: List[RawStroke]


class PlaybackRequest(BaseModel):
    duration_ms: Optional[float] = None


def _finite(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value)


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def resolved_alpha(stroke: Stroke, default: float = CHANNEL_MAX) -> float:
    """
    Alpha used for blending: explicit opacity if present and finite,
    else the color's embedded alpha, else `default`.
    """
    if _finite(stroke.opacity):
        return stroke.opacity
    if _finite(stroke.color.a):
        return stroke.color.a
    return default


def resolve_stroke(raw: RawStroke, default_thickness: float = 4.0) -> Stroke:
    """
    Normalizes a captured stroke into a fully populated Stroke:
    HSB color with alpha, opacity resolved, thickness defaulted.
    """
    color = raw.color
    stroke_color = HSBColor(
        h=_clamp(color.h, 0.0, HUE_MAX),
        s=_clamp(color.s, 0.0, CHANNEL_MAX),
        b=_clamp(color.b, 0.0, CHANNEL_MAX),
        a=color.a,
    )
    stroke = Stroke(
        color=stroke_color,
        thickness=raw.thickness or default_thickness,
        opacity=raw.opacity,
        eraser=raw.eraser,
        points=[Point(x=p.x, y=p.y) for p in raw.points],
    )
    alpha = _clamp(resolved_alpha(stroke), 0.0, CHANNEL_MAX)
    stroke.opacity = alpha
    stroke.color.a = alpha
    return stroke
