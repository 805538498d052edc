"""Question generation and answer scoring with static fallbacks."""

from __future__ import annotations

import json
import logging
import random
from dataclasses import dataclass, field
from typing import List, Protocol

from interviewer.gateway.app.schemas.interview import Evaluation, Question
from interviewer.llm.server import LLMAuthError, LLMError

from .prompts import build_evaluation_prompt, build_question_prompt
from .question_bank import fallback_questions

logger = logging.getLogger(__name__)

QUESTION_COUNT = 7


class LanguageModel(Protocol):
    @property
    def available(self) -> bool: ...

    async def generate(self, prompt: str) -> str: ...


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_questions(text: str, limit: int = QUESTION_COUNT) -> List[Question]:
    """Parse a JSON array of questions, dropping malformed items.

    Raises ``ValueError`` when the text is not a JSON array or holds no valid question.
    """
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("response is not an array")
    valid = [
        Question(id=q["id"], question=q["question"], difficulty=q["difficulty"], category=q["category"])
        for q in data
        if isinstance(q, dict)
        and _is_int(q.get("id"))
        and isinstance(q.get("question"), str)
        and isinstance(q.get("difficulty"), str)
        and isinstance(q.get("category"), str)
    ][:limit]
    if not valid:
        raise ValueError("no valid questions found")
    return valid


def _reject_constant(token: str) -> float:
    raise ValueError(f"non-finite number {token} in model response")


def parse_evaluation(text: str) -> Evaluation:
    """Parse the model's evaluation, clamping the score to [0, 10]."""
    data = json.loads(text, parse_constant=_reject_constant)
    if (
        not isinstance(data, dict)
        or not _is_number(data.get("score"))
        or not data.get("feedback")
        or not isinstance(data.get("strengths"), list)
        or not isinstance(data.get("improvements"), list)
        or not isinstance(data.get("keyPoints"), list)
    ):
        raise ValueError("invalid evaluation structure")
    return Evaluation(
        score=max(0, min(10, data["score"])),
        feedback=str(data["feedback"]),
        strengths=[str(s) for s in data["strengths"]],
        improvements=[str(s) for s in data["improvements"]],
        key_points=[str(s) for s in data["keyPoints"]],
    )


def unavailable_evaluation(rng: random.Random) -> Evaluation:
    return Evaluation(
        score=rng.randint(5, 8),
        feedback=(
            "Answer received and recorded. AI evaluation is currently unavailable, "
            "but your response has been noted."
        ),
        strengths=["Provided a response", "Engaged with the question"],
        improvements=["Could be more detailed", "Consider providing examples"],
        key_points=["Technical accuracy", "Practical examples", "Clear communication"],
    )


def unparsable_evaluation(rng: random.Random) -> Evaluation:
    return Evaluation(
        score=rng.randint(6, 8),
        feedback=(
            "Your answer has been recorded and shows engagement with the question. While AI evaluation "
            "encountered a technical issue, your response demonstrates effort and understanding of the topic."
        ),
        strengths=["Provided a comprehensive response", "Showed understanding of the topic"],
        improvements=["Could include more specific examples", "Consider elaborating on technical details"],
        key_points=["Technical accuracy", "Practical examples", "Clear communication", "Problem-solving approach"],
    )


def length_based_evaluation(answer: str) -> Evaluation:
    """Score an answer by its length when the model call itself failed."""
    # a blank answer still counts as one word
    word_count = max(1, len(answer.split()))
    return Evaluation(
        score=min(8, max(4, word_count // 10 + 4)),
        feedback=(
            f"Your response has been recorded ({word_count} words). While AI evaluation is temporarily "
            "unavailable, your answer shows engagement with the question and will be considered in your "
            "overall assessment."
        ),
        strengths=["Provided a detailed response", "Engaged thoughtfully with the question"],
        improvements=["Continue to provide specific examples", "Consider technical depth where applicable"],
        key_points=["Technical accuracy", "Practical examples", "Clear communication", "Comprehensive coverage"],
    )


@dataclass
class InterviewService:
    llm: LanguageModel
    question_count: int = QUESTION_COUNT
    rng: random.Random = field(default_factory=random.Random)

    async def generate_questions(self, domain: str) -> List[Question]:
        """Ask the model for questions, falling back to the static bank.

        ``LLMAuthError`` propagates so the caller can report a bad API key.
        """
        if not self.llm.available:
            logger.warning("Gemini not available, using fallback questions for %r", domain)
            return self._fallback_questions(domain)

        try:
            text = await self.llm.generate(build_question_prompt(domain, self.question_count))
        except LLMAuthError:
            raise
        except LLMError as exc:
            logger.error("Error generating questions: %s", exc)
            return self._fallback_questions(domain)

        try:
            return parse_questions(text, self.question_count)
        except ValueError as exc:
            logger.error("Could not parse generated questions: %s", exc)
            return self._fallback_questions(domain)

    async def evaluate_answer(self, domain: str, question: str, answer: str) -> Evaluation:
        if not self.llm.available:
            logger.warning("Gemini not available, using fallback evaluation")
            return unavailable_evaluation(self.rng)

        try:
            text = await self.llm.generate(build_evaluation_prompt(domain, question, answer))
        except LLMError as exc:
            logger.error("Error evaluating answer: %s", exc)
            return length_based_evaluation(answer)

        try:
            return parse_evaluation(text)
        except ValueError as exc:
            logger.error("Evaluation parse error: %s", exc)
            logger.debug("Raw model response: %s", text)
            return unparsable_evaluation(self.rng)

    def _fallback_questions(self, domain: str) -> List[Question]:
        return [Question(**q) for q in fallback_questions(domain)]
