"""
Quiz Result API Routes

Stores scored quiz results so they can be fetched again later.
Collection: quiz_results
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from db_mongo import quiz_results_collection
from .logic.constants import QUIZ_TYPES

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quizzes/results", tags=["quiz-results"])


def get_results_collection():
    return quiz_results_collection


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def normalize_answers(answers: Any) -> list:
    """
    Accept either a list of answer objects or a {key: value} map and
    return a list of {key, value} documents.
    """
    if isinstance(answers, list):
        return [
            {"key": a.get("key"), "value": a.get("value")} if isinstance(a, dict) else {"key": None, "value": a}
            for a in answers
        ]
    if isinstance(answers, dict):
        return [{"key": k, "value": v} for k, v in answers.items()]
    return []


# ─────────────────────────────────────────────
# POST /quizzes/results
# ─────────────────────────────────────────────
@router.post("", summary="Save quiz results")
async def save_result(
    request: Request,
    collection=Depends(get_results_collection),
):
    """
    Persist `{quizType, answers, results}` and return the generated resultId.
    """
    try:
        payload = await request.json()
    except ValueError:
        payload = None
    if not isinstance(payload, dict):
        return _error(400, "Missing required fields")

    if not payload.get("quizType") or payload.get("answers") is None or payload.get("results") is None:
        return _error(400, "Missing required fields")
    if payload["quizType"] not in QUIZ_TYPES:
        return _error(400, "Invalid quiz type")

    result_id = str(uuid.uuid4())
    document = {
        "resultId": result_id,
        "quizType": payload["quizType"],
        "answers": normalize_answers(payload["answers"]),
        "results": payload["results"],
        "createdAt": datetime.now(timezone.utc),
    }

    try:
        await collection.insert_one(document)
    except Exception:
        logger.exception("Error saving quiz results")
        return _error(500, "Failed to save quiz results")

    logger.info(f"Quiz result saved: {result_id}")
    return {"resultId": result_id}


# ─────────────────────────────────────────────
# GET /quizzes/results/{result_id}
# ─────────────────────────────────────────────
@router.get("/{result_id}", summary="Fetch a quiz result")
async def get_result(result_id: str, collection=Depends(get_results_collection)):
    """Return one stored quiz result by its resultId."""
    try:
        result = await collection.find_one(
            {"resultId": result_id},
            {"_id": 0}  # exclude Mongo ObjectId
        )
    except Exception:
        logger.exception("Error fetching quiz result")
        return _error(500, "Failed to fetch quiz result")

    if not result:
        return _error(404, "Quiz result not found")
    return result
