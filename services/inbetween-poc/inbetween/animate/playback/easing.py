import logging
from typing import Callable, Dict, List, Union

logger = logging.getLogger(__name__)

EasingFn = Callable[[float], float]

DEFAULT_EASING = "EaseInOutCubic"


def linear(t: float) -> float:
    return t


def ease_in_out_quad(t: float) -> float:
    return 2 * t * t if t < 0.5 else 1 - (-2 * t + 2) ** 2 / 2


def ease_in_out_cubic(t: float) -> float:
    return 4 * t * t * t if t < 0.5 else 1 - (-2 * t + 2) ** 3 / 2


EASINGS: Dict[str, EasingFn] = {
    "Linear": linear,
    "EaseInOutQuad": ease_in_out_quad,
    "EaseInOutCubic": ease_in_out_cubic,
}


def register_easing(name: str, fn: EasingFn) -> None:
    if not callable(fn):
        raise TypeError(f"Easing {name!r} must be callable")
    EASINGS[name] = fn


def easing_names() -> List[str]:
    return list(EASINGS)


def get_easing(name: Union[str, EasingFn, None]) -> EasingFn:
    """Looks up an easing by name; unknown names fall back to EaseInOutCubic."""
    if callable(name):
        return name
    fn = EASINGS.get(name) if name is not None else None
    if fn is None:
        if name is not None:
            logger.debug("Unknown easing %r, using %s", name, DEFAULT_EASING)
        return EASINGS[DEFAULT_EASING]
    return fn
