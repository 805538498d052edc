from __future__ import annotations

import base64
import json

import numpy as np
import pytest
from fastapi.testclient import TestClient

from interviewer.bus.bus import EventBus
from interviewer.gateway.app.deps import get_interviewer, get_llm, get_store
from interviewer.gateway.app.main import app
from interviewer.interview.service import InterviewService
from interviewer.llm.server import LLMAuthError
from interviewer.memory.memory import SessionStore
from interviewer.perception.tracking.notifier import PHONE_DETECTED_TOPIC

from fakes import FakeLLM, striped

EVALUATION = {
    "score": 8,
    "feedback": "Good coverage of the basics.",
    "strengths": ["clear structure"],
    "improvements": ["mention trade-offs"],
    "keyPoints": ["latency", "consistency", "cost"],
}


@pytest.fixture
def store():
    return SessionStore(bus=EventBus())


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


def _use_llm(llm: FakeLLM) -> None:
    app.dependency_overrides[get_interviewer] = lambda: InterviewService(llm=llm)
    app.dependency_overrides[get_llm] = lambda: llm


def _start(client: TestClient, domain: str = "Web Development") -> str:
    response = client.post("/api/generate-questions", json={"domain": domain})
    assert response.status_code == 200
    return response.json()["sessionId"]


def _rgba(red: np.ndarray) -> dict[str, object]:
    height, width = red.shape
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    pixels[:, :, 0] = red
    pixels[:, :, 3] = 255
    return {"width": width, "height": height, "data": base64.b64encode(pixels.tobytes()).decode()}


def test_root_reports_service(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["service"] == "Mock Interviewer"


def test_health_reports_model_and_sessions(client):
    _use_llm(FakeLLM(available=False))
    _start(client)

    body = client.get("/api/health").json()

    assert body["status"] == "OK"
    assert body["geminiApiAvailable"] is False
    assert body["sessionsActive"] == 1
    assert "timestamp" in body and "hasApiKey" in body


def test_generate_questions_falls_back_without_model(client, store):
    _use_llm(FakeLLM(available=False))

    response = client.post("/api/generate-questions", json={"domain": "  Data Science  "})

    body = response.json()
    assert response.status_code == 200
    assert len(body["questions"]) == 7
    assert body["questions"][0] == {
        "id": 1,
        "question": "What is the difference between supervised and unsupervised learning?",
        "difficulty": "easy",
        "category": "fundamentals",
    }
    assert store.get(body["sessionId"]).domain == "Data Science"


def test_generate_questions_uses_model_reply(client):
    questions = [
        {"id": i, "question": f"Q{i}", "difficulty": "medium", "category": "backend"} for i in range(1, 8)
    ]
    _use_llm(FakeLLM(reply=json.dumps(questions)))

    body = client.post("/api/generate-questions", json={"domain": "Rust"}).json()

    assert [q["question"] for q in body["questions"]] == [f"Q{i}" for i in range(1, 8)]


@pytest.mark.parametrize("payload", [{}, {"domain": ""}, {"domain": "   "}])
def test_generate_questions_requires_domain(client, payload):
    _use_llm(FakeLLM(available=False))

    response = client.post("/api/generate-questions", json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Domain is required and must be a non-empty string"}


def test_generate_questions_reports_bad_api_key(client, store):
    _use_llm(FakeLLM(error=LLMAuthError("API key not valid")))

    response = client.post("/api/generate-questions", json={"domain": "Data Science"})

    assert response.status_code == 500
    assert "GEMINI_API_KEY" in response.json()["error"]
    assert len(store) == 0


def test_evaluate_answer_records_and_results_summarise(client):
    _use_llm(FakeLLM(available=False))
    session_id = _start(client)
    _use_llm(FakeLLM(reply=json.dumps(EVALUATION)))

    response = client.post(
        "/api/evaluate-answer",
        json={"sessionId": session_id, "questionId": 1, "question": "What is REST?", "answer": "An architectural style."},
    )
    assert response.status_code == 200
    assert response.json()["keyPoints"] == ["latency", "consistency", "cost"]

    _use_llm(FakeLLM(reply=json.dumps({**EVALUATION, "score": 7})))
    client.post(
        "/api/evaluate-answer",
        json={"sessionId": session_id, "questionId": 2, "question": "What is CORS?", "answer": "A browser policy."},
    )

    results = client.get(f"/api/results/{session_id}").json()
    assert results["domain"] == "Web Development"
    assert results["totalQuestions"] == 7
    assert results["answeredQuestions"] == 2
    assert results["averageScore"] == 7.5
    assert results["percentage"] == 75
    assert [a["questionId"] for a in results["answers"]] == [1, 2]
    assert results["answers"][0]["evaluation"]["score"] == 8


def test_results_without_answers_average_zero(client):
    _use_llm(FakeLLM(available=False))
    session_id = _start(client)

    results = client.get(f"/api/results/{session_id}").json()

    assert results["averageScore"] == 0
    assert results["percentage"] == 0
    assert results["answers"] == []


@pytest.mark.parametrize("missing", ["sessionId", "questionId", "question", "answer"])
def test_evaluate_answer_requires_all_fields(client, missing):
    _use_llm(FakeLLM(available=False))
    payload = {"sessionId": "abc", "questionId": 1, "question": "q", "answer": "a"}
    del payload[missing]

    response = client.post("/api/evaluate-answer", json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields"}


def test_unknown_session_is_not_found(client):
    _use_llm(FakeLLM(available=False))

    evaluate = client.post(
        "/api/evaluate-answer", json={"sessionId": "nope", "questionId": 1, "question": "q", "answer": "a"}
    )
    results = client.get("/api/results/nope")

    assert evaluate.status_code == 404
    assert evaluate.json() == {"error": "Session not found"}
    assert results.status_code == 404


def test_proctoring_flags_phone_once_per_appearance(client, store):
    _use_llm(FakeLLM(available=False))
    session_id = _start(client)
    alerts: list[dict[str, object]] = []
    store.bus.subscribe(PHONE_DETECTED_TOPIC, alerts.append)

    flat = client.post("/api/proctoring/analyse", json={"sessionId": session_id, **_rgba(np.zeros((100, 100), np.uint8))})
    phone = client.post("/api/proctoring/analyse", json={"sessionId": session_id, **_rgba(striped([10, 30, 50]))})
    again = client.post("/api/proctoring/analyse", json={"sessionId": session_id, **_rgba(striped([10, 30, 50]))})

    assert flat.json() == {"present": False, "notify": False, "alertVisible": False}
    assert phone.json() == {"present": True, "notify": True, "alertVisible": True}
    assert again.json()["notify"] is False
    assert len(alerts) == 1
    assert alerts[0]["source"] == session_id


def test_proctoring_rejects_malformed_frames(client):
    _use_llm(FakeLLM(available=False))
    session_id = _start(client)
    frame = _rgba(np.zeros((10, 10), np.uint8))

    bad_base64 = client.post("/api/proctoring/analyse", json={"sessionId": session_id, **frame, "data": "%%%"})
    short = client.post("/api/proctoring/analyse", json={"sessionId": session_id, **frame, "width": 11})

    assert bad_base64.status_code == 400
    assert short.status_code == 400
    assert short.json()["error"].startswith("Invalid frame")


def test_proctoring_accepts_empty_frame(client):
    _use_llm(FakeLLM(available=False))
    session_id = _start(client)

    response = client.post(
        "/api/proctoring/analyse", json={"sessionId": session_id, "width": 0, "height": 0, "data": ""}
    )

    assert response.json()["present"] is False


def test_proctoring_unknown_session(client):
    response = client.post("/api/proctoring/analyse", json={"sessionId": "nope", **_rgba(np.zeros((4, 4), np.uint8))})
    assert response.status_code == 404


@pytest.mark.parametrize("domain", [123, None, ["Data Science"], {"name": "x"}])
def test_non_string_domain_is_rejected(client, domain):
    _use_llm(FakeLLM(available=False))

    response = client.post("/api/generate-questions", json={"domain": domain})

    assert response.status_code == 400
    assert response.json() == {"error": "Domain is required and must be a non-empty string"}


def test_failing_alert_subscriber_still_returns_notification(client, store):
    _use_llm(FakeLLM(available=False))
    session_id = _start(client)

    def broken(message: dict[str, object]) -> None:
        raise RuntimeError("listener crashed")

    store.bus.subscribe(PHONE_DETECTED_TOPIC, broken)
    frame = {"sessionId": session_id, **_rgba(striped([10, 30, 50]))}

    first = client.post("/api/proctoring/analyse", json=frame)
    second = client.post("/api/proctoring/analyse", json=frame)

    assert first.status_code == 200
    assert first.json()["notify"] is True
    assert second.json()["notify"] is False
