from fastapi import APIRouter, Depends, HTTPException
from typing import Optional
from .ingestion.models import (
    Drawing,
    KeyframeRequest,
    PlaybackRequest,
    TweenRequest,
    resolve_stroke,
)
from .stroke_engine.tweening import tween_drawings
from .playback.easing import easing_names
from .keyframes.store import KeyframeError
from ..config import get_settings
from ..sessions import AnimationSession, SessionRegistry

router = APIRouter(prefix="/api/v1/animate", tags=["animate"])

registry = SessionRegistry()

_ERROR_STATUS = {"empty": 400, "missing": 404, "full": 409, "locked": 409}


def get_registry() -> SessionRegistry:
    return registry


def _session(session_id: str, reg: SessionRegistry) -> AnimationSession:
    session = reg.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Unknown session {session_id}")
    return session


def _keyframe_http_error(e: KeyframeError) -> HTTPException:
    return HTTPException(status_code=_ERROR_STATUS.get(e.reason, 400), detail=str(e))


@router.get("/easings")
async def list_easings():
    return {"easings": easing_names(), "default": get_settings().default_easing}


@router.post("/tween")
async def tween(request: TweenRequest):
    """
    Stateless in-between of two drawings at t.
    """
    strokes = tween_drawings(request.a, request.b, request.t)
    return {"t": request.t, "strokes": strokes}


@router.post("/sessions")
async def create_session(reg: SessionRegistry = Depends(get_registry)):
    session = reg.create()
    return {"session_id": session.id}


@router.delete("/sessions/{session_id}")
async def delete_session(session_id: str, reg: SessionRegistry = Depends(get_registry)):
    if not reg.remove(session_id):
        raise HTTPException(status_code=404, detail=f"Unknown session {session_id}")
    return {"deleted": session_id}


@router.get("/sessions/{session_id}/keyframes")
async def list_keyframes(session_id: str, reg: SessionRegistry = Depends(get_registry)):
    session = _session(session_id, reg)
    return {
        "count": session.store.count,
        "capacity": session.store.capacity,
        "selected_index": session.store.selected_index,
        "keyframes": session.store.frames,
    }


@router.post("/sessions/{session_id}/keyframes")
async def store_keyframe(
    session_id: str,
    request: KeyframeRequest,
    reg: SessionRegistry = Depends(get_registry),
):
    """
    Captures raw strokes as a new keyframe (colors normalized to HSB).
    """
    session = _session(session_id, reg)
    strokes = [resolve_stroke(s, session.settings.default_thickness) for s in request.strokes]
    try:
        index = session.store.add_frame(strokes)
    except KeyframeError as e:
        raise _keyframe_http_error(e)
    return {"index": index, "count": session.store.count}


@router.get("/sessions/{session_id}/keyframes/{index}")
async def load_keyframe(session_id: str, index: int, reg: SessionRegistry = Depends(get_registry)):
    session = _session(session_id, reg)
    try:
        strokes = session.store.load_frame(index)
    except KeyframeError as e:
        raise _keyframe_http_error(e)
    return Drawing(strokes=strokes)


@router.delete("/sessions/{session_id}/keyframes/{index}")
async def delete_keyframe(session_id: str, index: int, reg: SessionRegistry = Depends(get_registry)):
    session = _session(session_id, reg)
    try:
        session.store.remove_frame(index)
    except KeyframeError as e:
        raise _keyframe_http_error(e)
    return {"count": session.store.count}


@router.post("/sessions/{session_id}/playback")
async def start_playback(
    session_id: str,
    request: PlaybackRequest,
    reg: SessionRegistry = Depends(get_registry),
):
    session = _session(session_id, reg)
    if session.store.count < 2:
        raise HTTPException(status_code=400, detail="Animation needs at least 2 keyframes")
    session.clock.start(request.duration_ms)
    return {"state": session.clock.state, "duration_ms": session.clock.duration_ms}


@router.delete("/sessions/{session_id}/playback")
async def stop_playback(session_id: str, reg: SessionRegistry = Depends(get_registry)):
    session = _session(session_id, reg)
    session.clock.stop()
    return {"state": session.clock.state}


@router.get("/sessions/{session_id}/frame")
async def current_frame(
    session_id: str,
    easing: Optional[str] = None,
    reg: SessionRegistry = Depends(get_registry),
):
    """
    Current animation frame: a tween between two keyframes, or the last
    keyframe once playback has finished.
    """
    session = _session(session_id, reg)
    instruction = session.clock.advance(session.store.frames, easing)
    if instruction is None:
        return {"state": session.clock.state}
    return {"state": session.clock.state, "frame": instruction}
