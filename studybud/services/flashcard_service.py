# ------------------------------------------------------------
# 플래시카드 생성
# - 프로바이더는 "순수 JSON"을 요구받지만 앞뒤에 설명/코드펜스가 붙을 수 있다
# - 첫 '{' ~ 마지막 '}' 구간을 잘라 JSON으로 파싱
# ------------------------------------------------------------

import json
import math
import re

from studybud.config import get_flashcard_validation_mode, get_gateway_api_key
from studybud.errors import EmptyResponseError, ParseError, ValidationError
from studybud.schemas.flashcards import FlashcardRequest
from studybud.services.ai_client import call_chat_completions
from studybud.services.prompt_builder import build_flashcard_messages
from studybud.utils.logging import get_logger

logger = get_logger(__name__)

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")


def extract_completion_content(data) -> str | None:
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return None
    return content if isinstance(content, str) and content else None


def _reject_constant(name: str):
    # NaN, Infinity, -Infinity 는 표준 JSON이 아니다
    raise ValueError(f"Non-standard JSON constant: {name}")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {text}")
    return value


def parse_flashcards(content: str) -> list:
    """completion 텍스트에서 flashcards 배열을 꺼낸다"""
    match = _JSON_OBJECT.search(content)
    if not match:
        logger.error("No JSON found in flashcard response: %s", content)
        raise ParseError()

    try:
        parsed = json.loads(match.group(0), parse_constant=_reject_constant, parse_float=_finite_float)
    except (ValueError, RecursionError) as e:
        logger.error("Flashcard JSON parse error: %s. Content: %s", e, content)
        raise ParseError()

    if not isinstance(parsed, dict) or not isinstance(parsed.get("flashcards"), list):
        logger.error("Flashcard JSON has no flashcards list: %s", content)
        raise ParseError()

    return parsed["flashcards"]


def _is_valid_card(card) -> bool:
    return (
        isinstance(card, dict)
        and isinstance(card.get("front"), str)
        and isinstance(card.get("back"), str)
    )


def validate_flashcards(cards: list, mode: str = "strict") -> list:
    """
    검증 모드
    - strict: 잘못된 카드가 하나라도 있으면 ParseError
    - filter: 잘못된 카드는 버리고, 남는 게 없으면 ParseError
    - off: 그대로 반환
    """
    if mode == "off":
        return cards

    valid = [{"front": c["front"], "back": c["back"]} for c in cards if _is_valid_card(c)]
    dropped = len(cards) - len(valid)

    if mode == "strict" and dropped:
        logger.error("Rejecting flashcard response: %d malformed card(s)", dropped)
        raise ParseError()
    if dropped:
        logger.warning("Dropped %d malformed flashcard(s)", dropped)
        if not valid:
            raise ParseError()
    return valid


async def generate_flashcards(request: FlashcardRequest) -> list:
    topic = (request.topic or "").strip()
    if not topic:
        raise ValidationError("Topic is required")

    api_key = get_gateway_api_key()
    mode = get_flashcard_validation_mode()

    messages = build_flashcard_messages(topic, request.count, request.material_name)
    data = await call_chat_completions(messages, api_key)

    content = extract_completion_content(data)
    if content is None:
        raise EmptyResponseError()

    cards = validate_flashcards(parse_flashcards(content), mode)

    # 개수 불일치는 경고만 (요청 실패로 보지 않음)
    if len(cards) != request.count:
        logger.warning("Requested %d flashcards, provider returned %d", request.count, len(cards))
    return cards
