"""
Answer Key Table

Maps each quiz answer key to the stream it contributes evidence for.
The table is loaded once from the quiz definition artifact and is read-only
afterwards, so it can be shared by every concurrent scoring call.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import ValidationError

from config import ANSWER_KEY_PATH
from .contracts import QuizDefinition, QuizItem, QuizScale

logger = logging.getLogger(__name__)

DEFAULT_QUIZ_DEFINITION_PATH = Path(__file__).resolve().parent.parent / "data" / "quiz_definition.json"


class AnswerKeyError(ValueError):
    """Raised when the quiz definition artifact cannot be turned into a table."""


class AnswerKeyTable:
    """
    Immutable lookup: answer key -> stream slug.

    Streams are referenced by slug; the display name is only looked up when a
    response is composed.
    """

    def __init__(self, entries: Mapping[str, str], stream_names: Mapping[str, str]):
        for key, slug in entries.items():
            if slug not in stream_names:
                raise AnswerKeyError(f"Answer key '{key}' references undeclared stream '{slug}'")
        self._entries = MappingProxyType(dict(entries))
        self._stream_names = MappingProxyType(dict(stream_names))

    def resolve(self, key: Any) -> Optional[str]:
        """Return the stream slug for `key`, or None when the key is unknown."""
        if not isinstance(key, str):
            return None
        return self._entries.get(key)

    def display_name(self, slug: str) -> str:
        return self._stream_names.get(slug, slug)

    @property
    def entries(self) -> Mapping[str, str]:
        return self._entries

    @property
    def streams(self) -> Mapping[str, str]:
        return self._stream_names

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries


def parse_quiz_definition(data: Dict[str, Any]) -> Tuple[AnswerKeyTable, QuizDefinition]:
    """
    Build the answer key table and the client-facing quiz from one document.

    Args:
        data: Parsed quiz definition JSON

    Returns:
        (AnswerKeyTable, QuizDefinition)
    """
    if not isinstance(data, dict):
        raise AnswerKeyError("Quiz definition must be a JSON object")

    stream_names: Dict[str, str] = {}
    for stream in data.get("streams") or []:
        slug = stream.get("slug") if isinstance(stream, dict) else None
        if not slug:
            raise AnswerKeyError(f"Stream entry without slug: {stream!r}")
        if slug in stream_names:
            raise AnswerKeyError(f"Duplicate stream slug '{slug}'")
        stream_names[slug] = stream.get("name") or slug

    entries: Dict[str, str] = {}
    items = []
    for item in data.get("items") or []:
        if not isinstance(item, dict) or not item.get("key") or not item.get("stream"):
            raise AnswerKeyError(f"Quiz item needs 'key' and 'stream': {item!r}")
        key = item["key"]
        if key in entries:
            raise AnswerKeyError(f"Duplicate answer key '{key}'")
        entries[key] = item["stream"]
        items.append(QuizItem(key=key, text=item.get("text", "")))

    try:
        scale = QuizScale(**(data.get("scale") or {}))
    except (TypeError, ValidationError) as e:
        raise AnswerKeyError(f"Invalid quiz scale: {e}") from e

    table = AnswerKeyTable(entries, stream_names)
    return table, QuizDefinition(items=items, scale=scale)


def load_quiz_definition(path: Optional[str] = None) -> Tuple[AnswerKeyTable, QuizDefinition]:
    """Read and parse the quiz definition artifact from disk."""
    source = Path(path) if path else DEFAULT_QUIZ_DEFINITION_PATH
    try:
        with open(source, encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, json.JSONDecodeError) as e:
        raise AnswerKeyError(f"Cannot read quiz definition {source}: {e}") from e

    table, definition = parse_quiz_definition(data)
    logger.info(
        f"📘 Loaded quiz definition v{data.get('version', '?')} from {source}: "
        f"{len(table)} answer keys, {len(table.streams)} streams"
    )
    return table, definition


@lru_cache(maxsize=1)
def _load_default() -> Tuple[AnswerKeyTable, QuizDefinition]:
    return load_quiz_definition(ANSWER_KEY_PATH)


def get_answer_key() -> AnswerKeyTable:
    """Process-wide answer key table (loaded on first use)."""
    return _load_default()[0]


def get_quiz_definition() -> QuizDefinition:
    """Process-wide quiz definition (loaded on first use)."""
    return _load_default()[1]
