"""
Score Aggregator

Turns raw quiz answers into a per-stream tally.
Each answer is independent and additive: no weighting, decay, or
cross-item normalization happens at this stage.
"""

import logging
import math
from numbers import Real
from typing import Any, Dict, List, Optional

from .answer_key import AnswerKeyTable
from .constants import COUNTER_UNKNOWN_ANSWER_KEYS
from .contracts import AnsweredItem
from .counters import ScoringCounters

logger = logging.getLogger(__name__)


def _coerce_value(raw: Any) -> float:
    """Numeric answer value; anything unusable counts as 0."""
    # bool is a Real subclass but not an answer on the scale
    if isinstance(raw, bool) or not isinstance(raw, Real):
        return 0.0
    try:
        value = float(raw)
    except OverflowError:
        # integers beyond float range
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def parse_answers(raw: Any) -> List[AnsweredItem]:
    """
    Convert the request's `answers` field into AnsweredItems.

    Malformed input is recovered locally: a non-list becomes an empty list,
    entries that are not objects keep no key, bad values become 0.

    Args:
        raw: The `answers` value from the request body

    Returns:
        List of sanitized AnsweredItem objects
    """
    if not isinstance(raw, list):
        return []

    items: List[AnsweredItem] = []
    for entry in raw:
        if not isinstance(entry, dict):
            items.append(AnsweredItem())
            continue
        key = entry.get("key")
        items.append(AnsweredItem(
            key=key if isinstance(key, str) else None,
            value=_coerce_value(entry.get("value")),
        ))
    return items


class ScoreAggregator:
    """
    Accumulates answers into a StreamTally using an injected answer key table.
    """

    def __init__(self, answer_key: AnswerKeyTable, counters: Optional[ScoringCounters] = None):
        self.answer_key = answer_key
        self.counters = counters

    def aggregate(self, answers: List[AnsweredItem]) -> Dict[str, float]:
        """
        Sum answer values per stream slug.

        A stream enters the tally the first time one of its keys is answered,
        which fixes its tie-break position for ranking.

        Args:
            answers: Sanitized answers

        Returns:
            Insertion-ordered dict of stream slug -> summed value
        """
        tally: Dict[str, float] = {}
        unknown = 0

        for item in answers:
            slug = self.answer_key.resolve(item.key)
            if slug is None:
                unknown += 1
                logger.debug(f"Skipping unknown answer key: {item.key!r}")
                continue
            # A zero-valued answer still enters the stream here and fixes its tie-break position
            tally[slug] = tally.get(slug, 0.0) + item.value

        if unknown and self.counters is not None:
            self.counters.increment(COUNTER_UNKNOWN_ANSWER_KEYS, unknown)

        return tally
