import math
import time
import logging
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence, Tuple
from pydantic import BaseModel
from ..ingestion.models import Drawing, Stroke
from ..stroke_engine.tweening import tween_drawings
from ...config import TweenSettings, get_settings
from .easing import EasingFn, get_easing

logger = logging.getLogger(__name__)

RenderFn = Callable[[List[Stroke]], Any]


class ClockState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETE = "complete"


class RenderInstruction(BaseModel):
    kind: str  # "tween" or "final"
    strokes: List[Stroke]
    segment_index: int
    local_t: float
    t_global: float


def _clamp(value: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return max(lo, min(hi, value))


def segment_at(t_global: float, keyframe_count: int, easing: EasingFn) -> Tuple[int, float]:
    """
    Splits global progress over `keyframe_count` keyframes into
    (index of the segment's first keyframe, eased local t).
    """
    segments = keyframe_count - 1
    seg_t = t_global * segments
    index = min(segments - 1, int(math.floor(seg_t)))
    local = _clamp(easing(_clamp(seg_t - index)))
    return index, local


class AnimationClock:
    """
    Playback state for one animation. Time is read from a monotonic source
    on every `advance`, so progress does not depend on the frame rate.
    """

    def __init__(
        self,
        time_source: Callable[[], float] = time.monotonic,
        settings: Optional[TweenSettings] = None,
    ):
        self._time_source = time_source
        self.settings = settings or get_settings()
        self.state = ClockState.IDLE
        self.start_ms = 0.0
        self.duration_ms = self.settings.default_duration_ms

    @property
    def running(self) -> bool:
        return self.state == ClockState.RUNNING

    def _now_ms(self) -> float:
        return self._time_source() * 1000.0

    def _valid_duration(self, duration_ms: Any) -> float:
        try:
            value = float(duration_ms)
        except (TypeError, ValueError):
            value = float("nan")
        if not math.isfinite(value) or value <= 0:
            if duration_ms is not None:
                logger.warning(
                    "Invalid duration %r, using %.0f ms",
                    duration_ms, self.settings.default_duration_ms,
                )
            return self.settings.default_duration_ms
        return value

    def start(self, duration_ms: Any = None) -> None:
        self.duration_ms = self._valid_duration(duration_ms)
        self.start_ms = self._now_ms()
        self.state = ClockState.RUNNING
        logger.info("Playback started (%.0f ms)", self.duration_ms)

    def stop(self) -> None:
        if self.state == ClockState.RUNNING:
            logger.info("Playback stopped")
        self.state = ClockState.IDLE

    def elapsed_ms(self) -> float:
        if self.state != ClockState.RUNNING:
            return 0.0
        return self._now_ms() - self.start_ms

    def advance(
        self,
        keyframes: Sequence[Drawing],
        easing: Any = None,
        render: Optional[RenderFn] = None,
    ) -> Optional[RenderInstruction]:
        """
        Produces the frame for the current time. Returns None (and skips
        `render`) when not running or with fewer than two keyframes.
        """
        if self.state != ClockState.RUNNING:
            return None

        n = len(keyframes)
        if n < 2:
            return None

        t_global = self.elapsed_ms() / self.duration_ms

        if t_global >= 1:
            # Last keyframe verbatim, no tweening
            instruction = RenderInstruction(
                kind="final",
                strokes=list(keyframes[n - 1].strokes),
                segment_index=n - 2,
                local_t=1.0,
                t_global=t_global,
            )
            self.state = ClockState.COMPLETE
            logger.info("Playback complete")
        else:
            ease = get_easing(easing if easing is not None else self.settings.default_easing)
            index, local = segment_at(t_global, n, ease)
            strokes = tween_drawings(keyframes[index], keyframes[index + 1], local, self.settings)
            instruction = RenderInstruction(
                kind="tween",
                strokes=strokes,
                segment_index=index,
                local_t=local,
                t_global=t_global,
            )

        if render is not None:
            render(instruction.strokes)
        return instruction
