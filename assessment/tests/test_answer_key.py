"""
Test loading and lookups of the answer key table.
"""

import json

import pytest

from assessment.logic import AnswerKeyError, AnswerKeyTable, load_quiz_definition
from assessment.logic.answer_key import parse_quiz_definition


def test_packaged_definition_maps_keys_to_streams(answer_key):
    assert len(answer_key) == 6
    assert answer_key.resolve("science_interest") == "science"
    assert answer_key.resolve("maths_confidence") == "science"
    assert answer_key.resolve("business_aptitude") == "commerce"
    assert answer_key.resolve("social_sciences") == "arts"
    assert answer_key.display_name("science") == "Science"
    assert answer_key.display_name("commerce") == "Commerce"


def test_quiz_items_match_answer_keys(answer_key, quiz_definition):
    keys = [item.key for item in quiz_definition.items]
    assert keys == [
        "science_interest",
        "maths_confidence",
        "commerce_interest",
        "business_aptitude",
        "arts_creativity",
        "social_sciences",
    ]
    assert all(key in answer_key for key in keys)
    assert quiz_definition.scale.min == 0
    assert quiz_definition.scale.max == 4
    assert quiz_definition.scale.labels == ["No", "Low", "Some", "High", "Very High"]


@pytest.mark.parametrize("key", ["unknown_key", "", None, 42, ["science_interest"]])
def test_unknown_keys_resolve_to_none(answer_key, key):
    assert answer_key.resolve(key) is None


def test_table_is_read_only(answer_key):
    with pytest.raises(TypeError):
        answer_key.entries["new_key"] = "science"
    with pytest.raises(TypeError):
        answer_key.streams["new"] = "New"


def test_table_rejects_undeclared_stream():
    with pytest.raises(AnswerKeyError):
        AnswerKeyTable({"law_interest": "law"}, {"science": "Science"})


def test_parse_rejects_duplicate_keys():
    data = {
        "streams": [{"slug": "science", "name": "Science"}],
        "items": [
            {"key": "science_interest", "text": "a", "stream": "science"},
            {"key": "science_interest", "text": "b", "stream": "science"},
        ],
    }
    with pytest.raises(AnswerKeyError):
        parse_quiz_definition(data)


def test_parse_rejects_items_without_stream():
    data = {
        "streams": [{"slug": "science", "name": "Science"}],
        "items": [{"key": "science_interest", "text": "a"}],
    }
    with pytest.raises(AnswerKeyError):
        parse_quiz_definition(data)


def test_parse_rejects_non_object():
    with pytest.raises(AnswerKeyError):
        parse_quiz_definition(["not", "an", "object"])


def test_load_custom_definition(tmp_path):
    path = tmp_path / "quiz.json"
    path.write_text(json.dumps({
        "version": 2,
        "streams": [{"slug": "law", "name": "Law"}],
        "items": [{"key": "debate_interest", "text": "I like debating.", "stream": "law"}],
        "scale": {"min": 1, "max": 7, "labels": []},
    }))

    table, definition = load_quiz_definition(str(path))

    assert table.resolve("debate_interest") == "law"
    assert table.resolve("science_interest") is None
    assert definition.scale.max == 7
    assert definition.items[0].text == "I like debating."


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(AnswerKeyError):
        load_quiz_definition(str(tmp_path / "missing.json"))


def test_load_invalid_json_raises(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(AnswerKeyError):
        load_quiz_definition(str(path))
