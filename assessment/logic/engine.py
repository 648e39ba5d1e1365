"""
Assessment Engine

Main orchestrator that combines all scoring components into a single pipeline.
This is the primary entry point for scoring a quiz.
"""

import logging
import time
from typing import Any, Optional

from .aggregator import ScoreAggregator, parse_answers
from .answer_key import AnswerKeyTable
from .catalog import CatalogEnricher, CatalogUnavailableError
from .constants import COUNTER_SCORING_REQUESTS, COUNTER_SCORING_FAILURES, MAX_RECOMMENDED_STREAMS
from .contracts import CatalogEnrichment, ScoringOutput
from .counters import ScoringCounters
from .output_assembler import assemble_output
from .ranker import rank_streams, top_streams

logger = logging.getLogger(__name__)


class AssessmentEngine:
    """
    Stateless scoring pipeline. One instance may serve concurrent requests.

    Pipeline flow:
    1. Parsing - Sanitize raw answers
    2. Aggregation - Sum answer values per stream
    3. Ranking - Normalize and order streams
    4. Enrichment - Resolve top streams and sample courses from the catalog
    5. Output Assembly - Build final ScoringOutput
    """

    def __init__(
        self,
        answer_key: AnswerKeyTable,
        enricher: CatalogEnricher,
        counters: Optional[ScoringCounters] = None,
        max_streams: int = MAX_RECOMMENDED_STREAMS,
    ):
        self.answer_key = answer_key
        self.aggregator = ScoreAggregator(answer_key, counters)
        self.enricher = enricher
        self.counters = counters
        self.max_streams = max_streams

    async def score(self, raw_answers: Any) -> ScoringOutput:
        """
        Score a list of raw answers.

        Args:
            raw_answers: The request's `answers` value (any JSON)

        Returns:
            ScoringOutput with up to `max_streams` recommendations

        Raises:
            CatalogUnavailableError: if the catalog could not be read
        """
        start_time = time.perf_counter()
        if self.counters is not None:
            self.counters.increment(COUNTER_SCORING_REQUESTS)

        answers = parse_answers(raw_answers)
        tally = self.aggregator.aggregate(answers)
        ranked = rank_streams(tally, self.answer_key.display_name)
        top = top_streams(ranked, self.max_streams)

        logger.info(f"📊 Scored {len(answers)} answers into {len(ranked)} streams")

        if top:
            try:
                enrichment = await self.enricher.enrich([r.slug for r in top])
            except CatalogUnavailableError:
                if self.counters is not None:
                    self.counters.increment(COUNTER_SCORING_FAILURES)
                raise
        else:
            enrichment = CatalogEnrichment()

        output = assemble_output(top, ranked, enrichment, self.answer_key)

        processing_time = (time.perf_counter() - start_time) * 1000
        logger.info(f"✨ Scoring complete: {len(output.recommendations)} recommendations ({processing_time:.2f}ms)")
        return output

    async def score_payload(self, payload: Any) -> ScoringOutput:
        """
        Score a raw request body. `answers` defaults to [] when the body is not
        an object or the field is missing.
        """
        raw_answers = payload.get("answers") if isinstance(payload, dict) else None
        return await self.score(raw_answers)
