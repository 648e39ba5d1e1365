"""
Test the quiz HTTP endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from main import app
from assessment.logic import get_answer_key
from assessment.routes import get_course_store, get_stream_store

from .conftest import FakeCourseStore, FakeStreamStore, make_courses, make_streams


@pytest.fixture
def client(answer_key, stream_store, course_store):
    app.dependency_overrides[get_answer_key] = lambda: answer_key
    app.dependency_overrides[get_stream_store] = lambda: stream_store
    app.dependency_overrides[get_course_store] = lambda: course_store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def test_get_quiz_definition(client):
    response = client.get("/quiz/session")

    assert response.status_code == 200
    data = response.json()
    assert data["items"][0] == {"key": "science_interest", "text": "I enjoy experiments and science topics."}
    assert len(data["items"]) == 6
    assert data["scale"] == {"min": 0, "max": 4, "labels": ["No", "Low", "Some", "High", "Very High"]}


def test_score_quiz(client):
    response = client.post("/quiz/session", json={"answers": [
        {"key": "science_interest", "value": 4},
        {"key": "maths_confidence", "value": 2},
        {"key": "commerce_interest", "value": 3},
    ]})

    assert response.status_code == 200
    data = response.json()
    assert data["debug"]["ranked"] == [
        {"name": "Science", "score": 1.0},
        {"name": "Commerce", "score": 0.5},
    ]
    assert [r["stream"] for r in data["recommendations"]] == ["Science", "Commerce"]
    assert data["recommendations"][0]["rationale"] == "Based on your responses indicating fit for Science."
    assert len(data["recommendations"][0]["sampleCourses"]) == 5
    assert data["recommendations"][1]["sampleCourses"][0] == {"code": "COM1", "name": "Commerce Course 1"}


def test_empty_answers(client):
    response = client.post("/quiz/session", json={"answers": []})
    assert response.status_code == 200
    assert response.json() == {"recommendations": [], "debug": {"ranked": []}}


@pytest.mark.parametrize("body", [{}, {"answers": "science"}, ["science_interest"], 7])
def test_missing_or_malformed_answers(client, body):
    response = client.post("/quiz/session", json=body)
    assert response.status_code == 200
    assert response.json()["recommendations"] == []


def test_invalid_json_body(client):
    response = client.post(
        "/quiz/session",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 200
    assert response.json() == {"recommendations": [], "debug": {"ranked": []}}


def test_store_failure_returns_generic_error(client):
    app.dependency_overrides[get_stream_store] = lambda: FakeStreamStore(make_streams(), fail=True)

    response = client.post("/quiz/session", json={"answers": [{"key": "science_interest", "value": 4}]})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to score quiz"}


def test_course_store_failure_returns_generic_error(client):
    app.dependency_overrides[get_course_store] = lambda: FakeCourseStore(make_courses(), fail=True)

    response = client.post("/quiz/session", json={"answers": [{"key": "science_interest", "value": 4}]})

    assert response.status_code == 500
    assert "recommendations" not in response.json()


def test_health_reports_drift_counters(client):
    client.post("/quiz/session", json={"answers": [
        {"key": "unknown_key", "value": 99},
        {"key": "arts_creativity", "value": 1},
    ]})

    response = client.get("/quiz/health")

    assert response.status_code == 200
    counters = response.json()["counters"]
    assert counters["scoring_requests"] == 1
    assert counters["unknown_answer_keys"] == 1
    # Arts is not in the fake catalog
    assert counters["unmatched_streams"] == 1


def test_app_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_huge_integer_answer(client):
    response = client.post(
        "/quiz/session",
        content=b'{"answers": [{"key": "science_interest", "value": 1' + b"0" * 400 + b'}]}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 200
    assert response.json()["debug"]["ranked"] == [{"name": "Science", "score": 0.0}]


def test_overflowing_answers(client):
    response = client.post("/quiz/session", json={"answers": [
        {"key": "science_interest", "value": 1e308},
        {"key": "maths_confidence", "value": 1e308},
        {"key": "commerce_interest", "value": 1},
    ]})
    assert response.status_code == 200
    assert response.json()["debug"]["ranked"] == [
        {"name": "Science", "score": 1.0},
        {"name": "Commerce", "score": 0.0},
    ]
