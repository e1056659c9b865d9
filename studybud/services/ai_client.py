import httpx

from studybud.config import (
    get_flashcard_json_mode,
    get_gateway_model,
    get_gateway_url,
    get_gemini_url,
    get_provider_timeout,
)
from studybud.errors import RateLimitError, UpstreamError
from studybud.utils.logging import get_logger

logger = get_logger(__name__)

# 생성 파라미터 (요청별로 바꾸지 않음)
CHAT_TEMPERATURE = 0.7
CHAT_MAX_OUTPUT_TOKENS = 2048
FLASHCARD_TEMPERATURE = 0.7


# 기본은 실제 네트워크. 테스트에서는 httpx.MockTransport로 교체
_transport: httpx.AsyncBaseTransport | None = None


def _http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=get_provider_timeout(), transport=_transport)


async def _post(provider: str, url: str, headers: dict, payload: dict, error_message: str | None = None) -> dict:
    """
    프로바이더 호출 1회 (재시도 없음)
    - 429 → RateLimitError
    - 그 외 실패 상태 → UpstreamError(error_message 또는 "{provider} API error: {status}")
    - 원본 오류 본문은 로그에만 남긴다
    """
    try:
        async with _http_client() as client:
            response = await client.post(url, headers=headers, json=payload)
    except httpx.TimeoutException as e:
        logger.error("%s API timed out: %r", provider, e)
        raise UpstreamError(f"{provider} API timed out")
    except httpx.HTTPError as e:
        logger.error("%s API request failed: %r", provider, e)
        raise UpstreamError(f"{provider} API request failed")

    if response.is_error:
        logger.error("%s API error: %s %s", provider, response.status_code, response.text)
        if response.status_code == 429:
            raise RateLimitError()
        raise UpstreamError(error_message or f"{provider} API error: {response.status_code}")

    try:
        return response.json()
    except ValueError:
        logger.error("%s API returned a non-JSON body: %s", provider, response.text[:500])
        raise UpstreamError(f"{provider} API returned an invalid response")


async def call_gemini_chat(contents: list[dict], system_instruction: str, api_key: str) -> dict:
    headers = {
        "x-goog-api-key": api_key,
        "Content-Type": "application/json",
    }

    payload = {
        "contents": contents,
        "systemInstruction": {
            "parts": [{"text": system_instruction}]
        },
        "generationConfig": {
            "temperature": CHAT_TEMPERATURE,
            "maxOutputTokens": CHAT_MAX_OUTPUT_TOKENS,
        },
    }

    return await _post("Gemini", get_gemini_url(), headers, payload)


async def call_chat_completions(messages: list[dict], api_key: str) -> dict:
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }

    payload = {
        "model": get_gateway_model(),
        "messages": messages,
        "temperature": FLASHCARD_TEMPERATURE,
    }
    if get_flashcard_json_mode():
        payload["response_format"] = {"type": "json_object"}

    return await _post("AI gateway", get_gateway_url(), headers, payload, error_message="Failed to generate flashcards")
