"""
Scoring Engine Constants

Limits, templates, and counter names used by the interest-assessment engine.
All values are deterministic with no AI/ML components.
"""

from typing import List

# =============================================================================
# NORMALIZATION
# =============================================================================

# Lower bound for the normalization divisor. An all-zero tally scores 0.0
# everywhere instead of dividing by zero.
NORMALIZATION_FLOOR = 1.0

# Decimal places kept on every emitted score
SCORE_DECIMALS = 2

# =============================================================================
# RANKING / ENRICHMENT LIMITS
# =============================================================================

# Streams passed on to catalog enrichment (and returned as recommendations)
MAX_RECOMMENDED_STREAMS = 3

# Ceiling for the single batched course read across all recommended streams
COURSE_FETCH_LIMIT = 30

# Sample courses kept per recommended stream
MAX_SAMPLE_COURSES_PER_STREAM = 5

# =============================================================================
# OUTPUT
# =============================================================================

RATIONALE_TEMPLATE = "Based on your responses indicating fit for {stream}."

SCORING_ERROR_MESSAGE = "Failed to score quiz"

# =============================================================================
# DRIFT COUNTERS
# =============================================================================

COUNTER_SCORING_REQUESTS = "scoring_requests"
COUNTER_SCORING_FAILURES = "scoring_failures"
COUNTER_UNKNOWN_ANSWER_KEYS = "unknown_answer_keys"
COUNTER_UNMATCHED_STREAMS = "unmatched_streams"

COUNTER_NAMES: List[str] = [
    COUNTER_SCORING_REQUESTS,
    COUNTER_SCORING_FAILURES,
    COUNTER_UNKNOWN_ANSWER_KEYS,
    COUNTER_UNMATCHED_STREAMS,
]

# =============================================================================
# QUIZ RESULTS
# =============================================================================

QUIZ_TYPES = ["interest", "aptitude", "personality", "comprehensive"]
