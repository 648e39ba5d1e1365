"""
Data Contracts for the Interest-Assessment Engine

Defines Pydantic models for quiz answers (input), ranked streams and
recommendations (output), and the records exchanged with the catalog store.
These contracts are the API boundary for the scoring engine.
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, Field


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class AnsweredItem(BaseModel):
    """
    One answered quiz prompt.
    `value` is already sanitized: anything that was not a usable number is 0.
    """
    key: Optional[str] = None
    value: float = 0.0


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class RankedStream(BaseModel):
    """Stream with its normalized score."""
    name: str
    score: float = Field(ge=0.0, le=1.0)

    # Stable stream identifier used for the catalog join; not serialized
    slug: str = Field(default="", exclude=True)


class SampleCourse(BaseModel):
    """Illustrative course shown under a recommended stream."""
    code: str
    name: str


class StreamRecommendation(BaseModel):
    """
    Single stream recommendation.
    """
    stream: str
    score: float = Field(ge=0.0, le=1.0)
    rationale: str
    sampleCourses: List[SampleCourse] = Field(default_factory=list)


class DebugTrace(BaseModel):
    """Full ranking, not truncated to the recommended streams."""
    ranked: List[RankedStream] = Field(default_factory=list)


class ScoringOutput(BaseModel):
    """
    Output contract for the scoring engine.
    """
    recommendations: List[StreamRecommendation] = Field(default_factory=list)
    debug: DebugTrace = Field(default_factory=DebugTrace)


# =============================================================================
# CATALOG STORE RECORDS
# =============================================================================

class StreamRecord(BaseModel):
    """Active stream as returned by the stream store."""
    id: str
    slug: str
    name: str


class CourseRecord(BaseModel):
    """Active course as returned by the course store."""
    code: str
    name: str
    stream_id: str


class CatalogEnrichment(BaseModel):
    """
    Result of resolving the recommended streams against the catalog.
    Used between enrichment and output assembly.
    """
    # slug -> resolved stream record
    streams: Dict[str, StreamRecord] = Field(default_factory=dict)
    # stream id -> sample courses (already truncated)
    courses_by_stream: Dict[str, List[SampleCourse]] = Field(default_factory=dict)

    def courses_for(self, slug: str) -> List[SampleCourse]:
        record = self.streams.get(slug)
        if record is None:
            return []
        return list(self.courses_by_stream.get(record.id, []))


# =============================================================================
# QUIZ DEFINITION
# =============================================================================

class QuizItem(BaseModel):
    """Prompt shown to the learner."""
    key: str
    text: str


class QuizScale(BaseModel):
    """Ordinal answer scale."""
    min: int = 0
    max: int = 4
    labels: List[str] = Field(default_factory=list)


class QuizDefinition(BaseModel):
    """Static quiz served to the client UI."""
    items: List[QuizItem] = Field(default_factory=list)
    scale: QuizScale = Field(default_factory=QuizScale)
