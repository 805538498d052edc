"""Proctoring payloads."""

from __future__ import annotations

from pydantic import Field

from .interview import CamelModel


class FramePayload(CamelModel):
    session_id: str
    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)
    # base64 of the canvas getImageData buffer (RGBA, row-major)
    data: str


class FrameAnalysis(CamelModel):
    present: bool
    notify: bool
    alert_visible: bool
