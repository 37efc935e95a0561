import time
import uuid
import logging
from typing import Callable, Dict, Optional
from .config import TweenSettings, get_settings
from .animate.keyframes.store import KeyframeStore
from .animate.playback.clock import AnimationClock

logger = logging.getLogger("sessions")


class AnimationSession:
    """Keyframes plus the clock that plays them back."""

    def __init__(
        self,
        session_id: str,
        settings: Optional[TweenSettings] = None,
        time_source: Callable[[], float] = time.monotonic,
    ):
        self.id = session_id
        self.settings = settings or get_settings()
        self.clock = AnimationClock(time_source=time_source, settings=self.settings)
        self.store = KeyframeStore(
            capacity=self.settings.max_keyframes,
            is_locked=lambda: self.clock.running,
        )


class SessionRegistry:
    def __init__(
        self,
        settings: Optional[TweenSettings] = None,
        time_source: Callable[[], float] = time.monotonic,
    ):
        self._settings = settings
        self._time_source = time_source
        self._sessions: Dict[str, AnimationSession] = {}

    def create(self) -> AnimationSession:
        session_id = str(uuid.uuid4())
        session = AnimationSession(
            session_id,
            settings=self._settings,
            time_source=self._time_source,
        )
        self._sessions[session_id] = session
        logger.info("Created animation session %s", session_id)
        return session

    def get(self, session_id: str) -> Optional[AnimationSession]:
        return self._sessions.get(session_id)

    def remove(self, session_id: str) -> bool:
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        session.clock.stop()
        logger.info("Removed animation session %s", session_id)
        return True
