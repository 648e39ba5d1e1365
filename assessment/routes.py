"""
Quiz API Routes

Exposes the interest-assessment engine via REST API.
GET  /quiz/session - quiz definition for the client UI
POST /quiz/session - score answers into stream recommendations
"""

import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from db_mongo import streams_collection, courses_collection
from .logic import (
    AssessmentEngine,
    AnswerKeyTable,
    CatalogEnricher,
    MongoStreamStore,
    MongoCourseStore,
    QuizDefinition,
    get_answer_key,
    get_quiz_definition,
    scoring_counters,
)
from .logic.constants import SCORING_ERROR_MESSAGE

logger = logging.getLogger(__name__)

ENGINE_VERSION = "1.0.0"

router = APIRouter(prefix="/quiz", tags=["quiz"])


# =============================================================================
# DEPENDENCIES
# =============================================================================

def get_stream_store():
    return MongoStreamStore(streams_collection)


def get_course_store():
    return MongoCourseStore(courses_collection)


def get_engine(
    answer_key: AnswerKeyTable = Depends(get_answer_key),
    stream_store=Depends(get_stream_store),
    course_store=Depends(get_course_store),
) -> AssessmentEngine:
    enricher = CatalogEnricher(stream_store, course_store, counters=scoring_counters)
    return AssessmentEngine(answer_key, enricher, counters=scoring_counters)


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.get("/session", summary="Get quiz definition")
def get_quiz(definition: QuizDefinition = Depends(get_quiz_definition)):
    """
    Return the quiz prompts and answer scale.

    Prompt keys are the same keys the scoring endpoint understands.
    """
    return definition.model_dump()


@router.post("/session", summary="Score quiz answers")
async def score_quiz(request: Request, engine: AssessmentEngine = Depends(get_engine)):
    """
    Score quiz answers into ranked stream recommendations.

    **Request Body:**
    - `answers`: list of `{key, value}`; missing or non-list means no answers

    **Response:**
    - `recommendations`: up to 3 streams with score, rationale, sample courses
    - `debug.ranked`: full ranking of every answered stream
    """
    try:
        payload = await request.json()
    except ValueError:
        # Malformed body is treated like an empty one
        payload = {}

    try:
        output = await engine.score_payload(payload)
    except Exception:
        logger.exception("POST /quiz/session failed")
        return JSONResponse(
            status_code=500,
            content={"error": SCORING_ERROR_MESSAGE},
        )

    return output.model_dump()


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Assessment engine health check")
def health_check():
    """Check if the scoring engine is operational and report drift counters."""
    return {
        "status": "ok",
        "engine": "assessment",
        "version": ENGINE_VERSION,
        "counters": scoring_counters.snapshot(),
    }
