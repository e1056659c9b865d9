from studybud.config import get_gemini_api_key
from studybud.constants.prompts import FALLBACK_RESPONSE
from studybud.schemas.chat import ChatRequest
from studybud.services.ai_client import call_gemini_chat
from studybud.services.prompt_builder import build_gemini_contents, build_system_instruction
from studybud.utils.logging import get_logger

logger = get_logger(__name__)


def extract_candidate_text(data) -> str | None:
    """candidates[0].content.parts[0].text, 경로 중간이 비어 있으면 None"""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) and text else None


async def complete_chat(request: ChatRequest) -> str:
    """
    튜터 채팅 1회
    - API 키 누락 → ConfigurationError
    - 프로바이더 실패 → RateLimitError / UpstreamError
    - 응답은 왔지만 텍스트가 없으면 고정 문구로 대체 (오류 아님)
    """
    api_key = get_gemini_api_key()

    system_instruction = build_system_instruction(request.class_context)
    contents = build_gemini_contents(request.messages)

    data = await call_gemini_chat(contents, system_instruction, api_key)

    text = extract_candidate_text(data)
    if text is None:
        logger.warning("Gemini response had no candidate text, using fallback")
        return FALLBACK_RESPONSE
    return text
