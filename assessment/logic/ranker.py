"""
Ranker

Normalizes stream tallies into [0, 1] and orders them.
"""

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Dict, List, Optional

from .constants import NORMALIZATION_FLOOR, SCORE_DECIMALS, MAX_RECOMMENDED_STREAMS
from .contracts import RankedStream

_QUANTUM = Decimal(1).scaleb(-SCORE_DECIMALS)


def round2(value: float) -> float:
    """Round half-up on the exact binary value (0.125 -> 0.13)."""
    return float(Decimal(value).quantize(_QUANTUM, rounding=ROUND_HALF_UP))


def normalize_tally(
    tally: Dict[str, float],
    display_name: Optional[Callable[[str], str]] = None
) -> List[RankedStream]:
    """
    Scale every tally entry by the largest tally (floored at 1).

    Only streams present in the tally are scored; nothing is fabricated.
    Output keeps the tally's insertion order.

    Args:
        tally: stream slug -> summed answer values
        display_name: Optional slug -> name resolver

    Returns:
        Unsorted list of RankedStream
    """
    if not tally:
        return []

    divisor = max(NORMALIZATION_FLOOR, max(tally.values()))
    name_of = display_name or (lambda slug: slug)

    return [
        RankedStream(name=name_of(slug), slug=slug, score=_scaled(total, divisor))
        for slug, total in tally.items()
    ]


def _scaled(total: float, divisor: float) -> float:
    # Sums can overflow to inf; overflowed streams share the top score
    if math.isinf(divisor):
        return 1.0 if math.isinf(total) else 0.0
    return round2(total / divisor)


def rank_streams(
    tally: Dict[str, float],
    display_name: Optional[Callable[[str], str]] = None
) -> List[RankedStream]:
    """
    Rank streams by normalized score (descending).

    sorted() is stable, so tied streams keep first-contribution order.
    No secondary key is applied.
    """
    return sorted(
        normalize_tally(tally, display_name),
        key=lambda x: x.score,
        reverse=True
    )


def top_streams(
    ranked: List[RankedStream],
    limit: int = MAX_RECOMMENDED_STREAMS
) -> List[RankedStream]:
    """Streams that go on to catalog enrichment."""
    return ranked[:limit]
