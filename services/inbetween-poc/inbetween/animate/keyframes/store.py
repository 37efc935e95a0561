import logging
from typing import Callable, List, Optional, Sequence
from ..ingestion.models import Drawing, Stroke

logger = logging.getLogger(__name__)


class KeyframeError(ValueError):
    """Raised when a keyframe cannot be stored, loaded or removed."""

    def __init__(self, message: str, reason: str = "invalid"):
        super().__init__(message)
        self.reason = reason  # empty, full, locked, missing


def _clone_drawable(strokes: Sequence[Stroke]) -> List[Stroke]:
    return [s.model_copy(deep=True) for s in strokes if len(s.points) >= 2]


class KeyframeStore:
    """
    Ordered keyframe slots. Stored drawings are private copies; callers get
    copies back, so a stored keyframe never changes after it is captured.
    """

    def __init__(self, capacity: int = 10, is_locked: Optional[Callable[[], bool]] = None):
        self.capacity = capacity
        self._is_locked = is_locked or (lambda: False)
        self._frames: List[Drawing] = []
        self.selected_index = -1

    @property
    def count(self) -> int:
        return len(self._frames)

    @property
    def frames(self) -> List[Drawing]:
        # Shallow copy of the list, read-only during playback
        return list(self._frames)

    def _check_unlocked(self) -> None:
        if self._is_locked():
            raise KeyframeError("Keyframes cannot change while animation is running", "locked")

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._frames):
            raise KeyframeError(f"No keyframe at index {index}", "missing")

    def add_frame(self, strokes: Sequence[Stroke]) -> int:
        self._check_unlocked()
        if len(self._frames) >= self.capacity:
            raise KeyframeError(
                f"Storage full (max {self.capacity}). Delete a keyframe to add more.", "full"
            )

        drawing = Drawing(strokes=_clone_drawable(strokes))
        if not drawing.strokes:
            raise KeyframeError("Nothing to store, draw something first.", "empty")

        self._frames.append(drawing)
        self.selected_index = len(self._frames) - 1
        logger.info(
            "Stored keyframe %d (%d strokes)", self.selected_index, len(drawing.strokes)
        )
        return self.selected_index

    def get_frame(self, index: int) -> Drawing:
        self._check_index(index)
        return self._frames[index].model_copy(deep=True)

    def load_frame(self, index: int) -> List[Stroke]:
        """Working copy of a keyframe's strokes for further editing."""
        drawing = self.get_frame(index)
        self.selected_index = index
        return drawing.strokes

    def remove_frame(self, index: int) -> None:
        self._check_unlocked()
        self._check_index(index)

        del self._frames[index]
        if self.selected_index == index:
            self.selected_index = -1
        elif self.selected_index > index:
            self.selected_index -= 1
        logger.info("Removed keyframe %d", index)
