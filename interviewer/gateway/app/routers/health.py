"""Health check router."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from interviewer.llm.server import GeminiClient
from interviewer.memory.memory import SessionStore

from ..deps import Settings, get_llm, get_settings, get_store

router = APIRouter()


@router.get("/health")
async def health(
    settings: Settings = Depends(get_settings),
    llm: GeminiClient = Depends(get_llm),
    store: SessionStore = Depends(get_store),
) -> dict[str, object]:
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "geminiApiAvailable": llm.available,
        "hasApiKey": settings.has_api_key,
        "sessionsActive": len(store),
    }
