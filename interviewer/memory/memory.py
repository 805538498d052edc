"""In-memory interview session store."""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List

from interviewer.bus.bus import EventBus
from interviewer.gateway.app.schemas.interview import AnswerRecord, Evaluation, InterviewResults, Question
from interviewer.perception.tracking.notifier import ALERT_DURATION_SECONDS, DetectionTracker


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class InterviewSession:
    id: str
    domain: str
    questions: List[Question]
    tracker: DetectionTracker
    answers: List[AnswerRecord] = field(default_factory=list)
    created_at: datetime = field(default_factory=_now)

    def record(self, question_id: int, question: str, answer: str, evaluation: Evaluation) -> AnswerRecord:
        entry = AnswerRecord(
            question_id=question_id,
            question=question,
            answer=answer,
            evaluation=evaluation,
            timestamp=_now(),
        )
        self.answers.append(entry)
        return entry

    def results(self) -> InterviewResults:
        total = sum(a.evaluation.score for a in self.answers)
        average = total / len(self.answers) if self.answers else 0.0
        return InterviewResults(
            domain=self.domain,
            total_questions=len(self.questions),
            answered_questions=len(self.answers),
            average_score=round(average, 1),
            percentage=math.floor(average / 10 * 100 + 0.5),
            answers=list(self.answers),
            completed_at=_now(),
        )


@dataclass
class SessionStore:
    bus: EventBus | None = None
    alert_duration: float = ALERT_DURATION_SECONDS
    sessions: Dict[str, InterviewSession] = field(default_factory=dict)

    def create(self, domain: str, questions: List[Question]) -> InterviewSession:
        session_id = uuid.uuid4().hex
        tracker = DetectionTracker(source=session_id, alert_duration=self.alert_duration, bus=self.bus)
        session = InterviewSession(id=session_id, domain=domain, questions=questions, tracker=tracker)
        self.sessions[session_id] = session
        return session

    def get(self, session_id: str) -> InterviewSession | None:
        return self.sessions.get(session_id)

    def __len__(self) -> int:
        return len(self.sessions)
