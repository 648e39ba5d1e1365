"""
Output Assembler

Transforms ranked streams and catalog enrichment into the final
ScoringOutput contract.
"""

from typing import List

from .answer_key import AnswerKeyTable
from .constants import RATIONALE_TEMPLATE
from .contracts import (
    CatalogEnrichment,
    DebugTrace,
    RankedStream,
    ScoringOutput,
    StreamRecommendation,
)


def build_rationale(stream_name: str) -> str:
    return RATIONALE_TEMPLATE.format(stream=stream_name)


def assemble_recommendation(
    ranked: RankedStream,
    enrichment: CatalogEnrichment,
    answer_key: AnswerKeyTable
) -> StreamRecommendation:
    """
    Convert one RankedStream into a StreamRecommendation.

    The display name comes from the catalog record when the stream resolved,
    otherwise from the answer key table.
    """
    record = enrichment.streams.get(ranked.slug)
    name = record.name if record else answer_key.display_name(ranked.slug)

    return StreamRecommendation(
        stream=name,
        score=ranked.score,
        rationale=build_rationale(name),
        sampleCourses=enrichment.courses_for(ranked.slug),
    )


def assemble_output(
    top: List[RankedStream],
    ranked: List[RankedStream],
    enrichment: CatalogEnrichment,
    answer_key: AnswerKeyTable
) -> ScoringOutput:
    """
    Assemble the final ScoringOutput.

    Args:
        top: Streams selected for recommendation, in rank order
        ranked: Full ranking, echoed as debug.ranked
        enrichment: Catalog join result for `top`
        answer_key: Table used for display names

    Returns:
        Complete ScoringOutput
    """
    return ScoringOutput(
        recommendations=[assemble_recommendation(r, enrichment, answer_key) for r in top],
        debug=DebugTrace(ranked=list(ranked)),
    )
