"""
Catalog Enricher

Resolves recommended streams to their catalog records and attaches a bounded
sample of active courses to each one.

Reads from the `streams` and `courses` collections:
- NO scoring logic
- NO DB writes
- exactly two reads per request (streams, then one batched course read)
"""

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId

from .constants import (
    COURSE_FETCH_LIMIT,
    MAX_SAMPLE_COURSES_PER_STREAM,
    COUNTER_UNMATCHED_STREAMS,
)
from .contracts import CatalogEnrichment, CourseRecord, SampleCourse, StreamRecord
from .counters import ScoringCounters

logger = logging.getLogger(__name__)


class CatalogUnavailableError(RuntimeError):
    """The catalog store could not be read; the request must fail as a whole."""


def _to_object_id(value: str) -> Any:
    return ObjectId(value) if ObjectId.is_valid(value) else value


# =============================================================================
# MONGO STORES
# =============================================================================

class MongoStreamStore:
    """Active stream lookups against the `streams` collection."""

    def __init__(self, collection):
        self.collection = collection

    async def find_active_by_slugs(self, slugs: List[str]) -> List[StreamRecord]:
        if not slugs:
            return []
        cursor = self.collection.find(
            {"slug": {"$in": list(slugs)}, "isActive": True},
            {"_id": 1, "slug": 1, "name": 1},
        )
        return [
            StreamRecord(id=str(doc["_id"]), slug=doc["slug"], name=doc.get("name") or doc["slug"])
            async for doc in cursor
        ]


class MongoCourseStore:
    """Active course lookups against the `courses` collection."""

    def __init__(self, collection):
        self.collection = collection

    async def find_active_by_stream_ids(self, ids: List[str], limit: int) -> List[CourseRecord]:
        if not ids or limit <= 0:
            return []
        cursor = self.collection.find(
            {"streamId": {"$in": [_to_object_id(i) for i in ids]}, "isActive": True},
            {"_id": 0, "code": 1, "name": 1, "streamId": 1},
        ).limit(limit)
        return [
            CourseRecord(code=doc["code"], name=doc["name"], stream_id=str(doc["streamId"]))
            async for doc in cursor
        ]


# =============================================================================
# ENRICHER
# =============================================================================

def group_courses(
    courses: List[CourseRecord],
    per_stream: int = MAX_SAMPLE_COURSES_PER_STREAM
) -> Dict[str, List[SampleCourse]]:
    """
    Group courses by owning stream id, keeping fetch order and at most
    `per_stream` entries per group.
    """
    grouped: Dict[str, List[SampleCourse]] = {}
    for course in courses:
        bucket = grouped.setdefault(course.stream_id, [])
        if len(bucket) < per_stream:
            bucket.append(SampleCourse(code=course.code, name=course.name))
    return grouped


class CatalogEnricher:
    """
    Joins recommended stream slugs against the stream and course stores.
    """

    def __init__(
        self,
        stream_store,
        course_store,
        counters: Optional[ScoringCounters] = None,
        course_limit: int = COURSE_FETCH_LIMIT,
        per_stream: int = MAX_SAMPLE_COURSES_PER_STREAM,
    ):
        self.stream_store = stream_store
        self.course_store = course_store
        self.counters = counters
        self.course_limit = course_limit
        self.per_stream = per_stream

    async def enrich(self, slugs: List[str]) -> CatalogEnrichment:
        """
        Resolve `slugs` and fetch their sample courses.

        Args:
            slugs: Stream slugs in rank order (at most a handful)

        Returns:
            CatalogEnrichment; unresolved slugs are simply absent

        Raises:
            CatalogUnavailableError: if either store read fails
        """
        if not slugs:
            return CatalogEnrichment()

        try:
            records = await self.stream_store.find_active_by_slugs(list(slugs))
        except Exception as e:
            raise CatalogUnavailableError("Stream lookup failed") from e

        wanted = set(slugs)
        streams: Dict[str, StreamRecord] = {}
        for record in records:
            if record.slug not in wanted:
                continue
            if record.slug in streams:
                logger.warning(
                    f"⚠️ Duplicate active stream records for '{record.slug}' "
                    f"({streams[record.slug].id}, {record.id}); using the first"
                )
                continue
            streams[record.slug] = record

        unmatched = [s for s in slugs if s not in streams]
        if unmatched:
            logger.warning(f"⚠️ Streams not found in catalog: {unmatched}")
            if self.counters is not None:
                self.counters.increment(COUNTER_UNMATCHED_STREAMS, len(unmatched))

        if not streams:
            return CatalogEnrichment()

        try:
            courses = await self.course_store.find_active_by_stream_ids(
                [r.id for r in streams.values()],
                self.course_limit,
            )
        except Exception as e:
            raise CatalogUnavailableError("Course lookup failed") from e

        logger.info(f"📚 Fetched {len(courses)} courses for {len(streams)} streams")

        return CatalogEnrichment(
            streams=streams,
            courses_by_stream=group_courses(courses, self.per_stream),
        )
