"""Interview data models. Fields are camelCase on the wire."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Question(CamelModel):
    id: int
    question: str
    difficulty: str
    category: str


class Evaluation(CamelModel):
    score: float = Field(..., ge=0, le=10)
    feedback: str
    strengths: list[str] = []
    improvements: list[str] = []
    key_points: list[str] = []


class AnswerRecord(CamelModel):
    question_id: int
    question: str
    answer: str
    evaluation: Evaluation
    timestamp: datetime


class InterviewResults(CamelModel):
    domain: str
    total_questions: int
    answered_questions: int
    average_score: float
    percentage: int
    answers: list[AnswerRecord]
    completed_at: datetime


class GenerateQuestionsRequest(CamelModel):
    # validated by the route so any non-string gets the domain error
    domain: Any = None


class GenerateQuestionsResponse(CamelModel):
    session_id: str
    questions: list[Question]


class EvaluateAnswerRequest(CamelModel):
    session_id: str | None = None
    question_id: int | None = None
    question: str | None = None
    answer: str | None = None
