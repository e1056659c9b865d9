import pytest

from studybud.errors import ParseError
from studybud.services.flashcard_service import (
    extract_completion_content,
    parse_flashcards,
    validate_flashcards,
)


def test_parse_uses_widest_brace_span():
    content = 'Note {not json} then {"flashcards": [{"front": "Q", "back": "A"}]}'

    # 첫 '{' 부터 마지막 '}' 까지라 앞쪽 잡문 때문에 실패한다
    with pytest.raises(ParseError):
        parse_flashcards(content)


def test_parse_nested_objects():
    content = '{"flashcards": [{"front": "Q1", "back": "A1"}, {"front": "Q2", "back": "A2"}]}'

    assert parse_flashcards(content) == [
        {"front": "Q1", "back": "A1"},
        {"front": "Q2", "back": "A2"},
    ]


@pytest.mark.parametrize("content", ['{"cards": []}', '{"flashcards": "none"}', "no braces"])
def test_parse_rejects_missing_flashcards(content):
    with pytest.raises(ParseError):
        parse_flashcards(content)


def test_validate_strict_keeps_only_front_and_back():
    cards = [{"front": "Q", "back": "A", "extra": 1}]

    assert validate_flashcards(cards, "strict") == [{"front": "Q", "back": "A"}]


def test_validate_filter_fails_when_nothing_left():
    with pytest.raises(ParseError):
        validate_flashcards([{"front": "Q"}, "junk"], "filter")


def test_validate_empty_list_is_allowed():
    assert validate_flashcards([], "strict") == []


@pytest.mark.parametrize(
    "data",
    [{}, {"choices": []}, {"choices": [{"message": {}}]}, {"choices": [{"message": {"content": ""}}]}, None],
)
def test_extract_completion_content_missing(data):
    assert extract_completion_content(data) is None
