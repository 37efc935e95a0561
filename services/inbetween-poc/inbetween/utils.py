import colorsys
import numpy as np

from .animate.ingestion.models import HSBColor


def _rgb_from_hex(value: str) -> np.ndarray:
    """Parses #rgb, #rrggbb or #rrggbbaa into a 4-channel 0-255 array."""
    text = value.strip().lstrip("#")
    if len(text) in (3, 4):
        text = "".join(c * 2 for c in text)
    if len(text) == 6:
        text += "ff"
    if len(text) != 8:
        raise ValueError(f"Invalid hex color: {value!r}")
    return np.array([int(text[i:i + 2], 16) for i in range(0, 8, 2)], dtype=float)


def hsb_from_rgb(r: float, g: float, b: float, a: float = 255.0) -> HSBColor:
    """
    Converts 0-255 RGBA into the hue 0-360 / sat, bright, alpha 0-100 model.
    """
    rgba = np.clip(np.array([r, g, b, a], dtype=float), 0.0, 255.0) / 255.0
    h, s, v = colorsys.rgb_to_hsv(rgba[0], rgba[1], rgba[2])
    return HSBColor(h=h * 360.0, s=s * 100.0, b=v * 100.0, a=float(rgba[3] * 100.0))


def hsb_from_hex(value: str) -> HSBColor:
    r, g, b, a = _rgb_from_hex(value).tolist()
    return hsb_from_rgb(r, g, b, a)

