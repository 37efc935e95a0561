import os
import logging
from typing import Optional
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger("config")

ENV_PREFIX = "INBETWEEN_"


class TweenSettings(BaseModel):
    # Resample counts
    matched_samples: int = 60
    ghost_samples: int = 40

    # Ghost strokes
    ghost_point_count: int = 20
    ghost_thickness: float = 0.001

    # Matching cost = centroid distance + length_weight * |len delta|
    length_weight: float = 0.1
    min_length: float = 1.0

    # Substituted for missing stroke attributes
    default_thickness: float = 4.0
    default_opacity: float = 100.0

    # Playback
    default_duration_ms: float = 10000.0
    default_easing: str = "EaseInOutCubic"
    max_keyframes: int = 10


def load_settings() -> TweenSettings:
    """
    Builds settings from INBETWEEN_* environment variables (after .env is loaded).
    Unset variables keep their defaults.
    """
    overrides = {}
    for name in TweenSettings.model_fields:
        raw = os.environ.get(ENV_PREFIX + name.upper())
        if raw is not None and raw != "":
            overrides[name] = raw
    if overrides:
        logger.info("Loaded tween settings overrides: %s", sorted(overrides))
    return TweenSettings(**overrides)


_settings: Optional[TweenSettings] = None


def get_settings() -> TweenSettings:
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings
