"""Proctoring router: phone detection on frames sampled by the browser."""

from __future__ import annotations

import base64
import binascii

from fastapi import APIRouter, Depends, HTTPException

from interviewer.memory.memory import SessionStore
from interviewer.perception.schemas import Frame
from interviewer.perception.service import PerceptionService

from ..deps import get_perception, get_store
from ..schemas.proctoring import FrameAnalysis, FramePayload

router = APIRouter()


@router.post("/analyse", response_model=FrameAnalysis)
def analyse_frame(
    payload: FramePayload,
    perception: PerceptionService = Depends(get_perception),
    store: SessionStore = Depends(get_store),
) -> FrameAnalysis:
    session = store.get(payload.session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")

    try:
        data = base64.b64decode(payload.data, validate=True)
        frame = Frame.from_rgba(data, payload.width, payload.height)
    except (binascii.Error, ValueError) as exc:
        raise HTTPException(status_code=400, detail=f"Invalid frame: {exc}")

    result = perception.observe(frame, session.tracker)
    return FrameAnalysis(present=result.present, notify=result.notify, alert_visible=result.alert_visible)
