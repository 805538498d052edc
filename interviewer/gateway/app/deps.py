"""Dependency helpers for the FastAPI gateway."""

from __future__ import annotations

import logging
import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from interviewer.bus.bus import EventBus
from interviewer.interview.service import InterviewService
from interviewer.llm.server import GeminiClient, has_api_key
from interviewer.memory.memory import SessionStore
from interviewer.perception.detector.engine import EdgeDensityDetector
from interviewer.perception.service import PerceptionService

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    environment: str = "development"
    host: str = "0.0.0.0"
    port: int = 3001
    cors_origins: list[str] = ["*"]

    gemini_api_key: str | None = Field(default=None, validation_alias="GEMINI_API_KEY")
    gemini_model: str = "gemini-2.0-flash"
    question_count: int = 7

    detection_interval_seconds: float = 2.0
    alert_duration_seconds: float = 5.0
    edge_threshold: float = 50
    min_edge_ratio: float = 0.02
    max_edge_ratio: float = 0.15
    gradient_source: str = "red"

    model_config = SettingsConfigDict(env_prefix="INTERVIEWER_", populate_by_name=True)

    @property
    def has_api_key(self) -> bool:
        return has_api_key(self.gemini_api_key)


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""
    if os.path.exists(".env"):
        load_dotenv()
    else:
        logger.warning(".env file not found, using environment and default values")
    return Settings()


@lru_cache()
def get_llm() -> GeminiClient:
    settings = get_settings()
    return GeminiClient(settings.gemini_api_key, model=settings.gemini_model)


@lru_cache()
def get_bus() -> EventBus:
    return EventBus()


@lru_cache()
def get_store() -> SessionStore:
    return SessionStore(bus=get_bus(), alert_duration=get_settings().alert_duration_seconds)


def get_detector(settings: Settings | None = None) -> EdgeDensityDetector:
    settings = settings or get_settings()
    return EdgeDensityDetector(
        edge_threshold=settings.edge_threshold,
        min_edge_ratio=settings.min_edge_ratio,
        max_edge_ratio=settings.max_edge_ratio,
        gradient_source=settings.gradient_source,
    )


@lru_cache()
def get_perception() -> PerceptionService:
    return PerceptionService(detector=get_detector())


def get_interviewer() -> InterviewService:
    return InterviewService(llm=get_llm(), question_count=get_settings().question_count)
