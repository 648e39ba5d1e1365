"""
Shared fixtures: in-memory catalog stores and a wired engine.
"""

from typing import List

import pytest

from assessment.logic import (
    AssessmentEngine,
    CatalogEnricher,
    CourseRecord,
    ScoringCounters,
    StreamRecord,
    load_quiz_definition,
    scoring_counters,
)


class FakeStreamStore:
    """Stream store backed by a list of active StreamRecords."""

    def __init__(self, records: List[StreamRecord], fail: bool = False):
        self.records = records
        self.fail = fail
        self.calls = []

    async def find_active_by_slugs(self, slugs):
        self.calls.append(list(slugs))
        if self.fail:
            raise ConnectionError("stream store unreachable")
        return [r for r in self.records if r.slug in slugs]


class FakeCourseStore:
    """Course store backed by a list of active CourseRecords in storage order."""

    def __init__(self, courses: List[CourseRecord], fail: bool = False):
        self.courses = courses
        self.fail = fail
        self.calls = []

    async def find_active_by_stream_ids(self, ids, limit):
        self.calls.append((list(ids), limit))
        if self.fail:
            raise ConnectionError("course store unreachable")
        return [c for c in self.courses if c.stream_id in ids][:limit]


SCIENCE_ID = "64b000000000000000000001"
COMMERCE_ID = "64b000000000000000000002"


def make_streams() -> List[StreamRecord]:
    # Arts is intentionally missing from the catalog
    return [
        StreamRecord(id=SCIENCE_ID, slug="science", name="Science"),
        StreamRecord(id=COMMERCE_ID, slug="commerce", name="Commerce"),
    ]


def make_courses() -> List[CourseRecord]:
    science = [
        CourseRecord(code=f"SCI{i}", name=f"Science Course {i}", stream_id=SCIENCE_ID)
        for i in range(1, 8)
    ]
    commerce = [
        CourseRecord(code=f"COM{i}", name=f"Commerce Course {i}", stream_id=COMMERCE_ID)
        for i in range(1, 4)
    ]
    # Interleave so grouping has to preserve per-stream fetch order
    return [science[0], commerce[0]] + science[1:4] + commerce[1:] + science[4:]


@pytest.fixture(autouse=True)
def reset_counters():
    scoring_counters.reset()
    yield
    scoring_counters.reset()


@pytest.fixture
def answer_key():
    table, _ = load_quiz_definition()
    return table


@pytest.fixture
def quiz_definition():
    _, definition = load_quiz_definition()
    return definition


@pytest.fixture
def stream_store():
    return FakeStreamStore(make_streams())


@pytest.fixture
def course_store():
    return FakeCourseStore(make_courses())


@pytest.fixture
def counters():
    return ScoringCounters()


@pytest.fixture
def engine(answer_key, stream_store, course_store, counters):
    enricher = CatalogEnricher(stream_store, course_store, counters=counters)
    return AssessmentEngine(answer_key, enricher, counters=counters)
