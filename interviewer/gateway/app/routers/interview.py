"""Interview endpoints: questions, answer evaluation and results."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from interviewer.interview.service import InterviewService
from interviewer.llm.server import LLMAuthError
from interviewer.memory.memory import SessionStore

from ..deps import get_interviewer, get_store
from ..schemas.interview import (
    EvaluateAnswerRequest,
    Evaluation,
    GenerateQuestionsRequest,
    GenerateQuestionsResponse,
    InterviewResults,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/generate-questions", response_model=GenerateQuestionsResponse)
async def generate_questions(
    request: GenerateQuestionsRequest,
    interviewer: InterviewService = Depends(get_interviewer),
    store: SessionStore = Depends(get_store),
) -> GenerateQuestionsResponse:
    domain = request.domain.strip() if isinstance(request.domain, str) else ""
    if not domain:
        raise HTTPException(status_code=400, detail="Domain is required and must be a non-empty string")

    try:
        questions = await interviewer.generate_questions(domain)
    except LLMAuthError:
        raise HTTPException(
            status_code=500,
            detail="Invalid API key. Please check your GEMINI_API_KEY environment variable.",
        )

    session = store.create(domain, questions)
    logger.info("Started session %s for %r with %d questions", session.id, domain, len(questions))
    return GenerateQuestionsResponse(session_id=session.id, questions=questions)


@router.post("/evaluate-answer", response_model=Evaluation)
async def evaluate_answer(
    request: EvaluateAnswerRequest,
    interviewer: InterviewService = Depends(get_interviewer),
    store: SessionStore = Depends(get_store),
) -> Evaluation:
    if not (request.session_id and request.question_id and request.question and request.answer):
        raise HTTPException(status_code=400, detail="Missing required fields")

    session = store.get(request.session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")

    evaluation = await interviewer.evaluate_answer(session.domain, request.question, request.answer)
    session.record(request.question_id, request.question, request.answer, evaluation)
    logger.info(
        "Answer evaluated for session %s, question %s, score: %s/10",
        session.id,
        request.question_id,
        evaluation.score,
    )
    return evaluation


@router.get("/results/{session_id}", response_model=InterviewResults)
async def get_results(session_id: str, store: SessionStore = Depends(get_store)) -> InterviewResults:
    session = store.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")

    results = session.results()
    logger.info("Results for session %s: %.1f/10 (%d%%)", session_id, results.average_score, results.percentage)
    return results
