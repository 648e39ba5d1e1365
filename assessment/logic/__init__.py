"""
Assessment Logic Module

Provides the deterministic interest-assessment scoring engine.
"""

from .contracts import (
    AnsweredItem,
    RankedStream,
    SampleCourse,
    StreamRecommendation,
    ScoringOutput,
    StreamRecord,
    CourseRecord,
    CatalogEnrichment,
    QuizDefinition,
)
from .answer_key import (
    AnswerKeyTable,
    AnswerKeyError,
    load_quiz_definition,
    get_answer_key,
    get_quiz_definition,
)
from .aggregator import ScoreAggregator, parse_answers
from .ranker import rank_streams, top_streams
from .catalog import CatalogEnricher, CatalogUnavailableError, MongoStreamStore, MongoCourseStore
from .counters import ScoringCounters, scoring_counters
from .engine import AssessmentEngine

__all__ = [
    # Main engine
    "AssessmentEngine",

    # Pipeline stages
    "ScoreAggregator",
    "parse_answers",
    "rank_streams",
    "top_streams",
    "CatalogEnricher",
    "MongoStreamStore",
    "MongoCourseStore",

    # Answer key
    "AnswerKeyTable",
    "AnswerKeyError",
    "load_quiz_definition",
    "get_answer_key",
    "get_quiz_definition",

    # Contracts
    "AnsweredItem",
    "RankedStream",
    "SampleCourse",
    "StreamRecommendation",
    "ScoringOutput",
    "StreamRecord",
    "CourseRecord",
    "CatalogEnrichment",
    "QuizDefinition",

    # Errors / counters
    "CatalogUnavailableError",
    "ScoringCounters",
    "scoring_counters",
]
