import os
from dotenv import load_dotenv

from studybud.errors import ConfigurationError

load_dotenv()

# ===================== 기본값 =====================

GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
GEMINI_MODEL = "gemini-2.0-flash"

AI_GATEWAY_URL = "https://ai.gateway.lovable.dev/v1/chat/completions"
AI_GATEWAY_MODEL = "google/gemini-2.5-flash"

PROVIDER_TIMEOUT_SECONDS = 30.0

FLASHCARD_VALIDATION_MODES = ("strict", "filter", "off")

# =================================================
# 모든 값은 요청마다 환경변수에서 새로 읽는다 (핸들러 간 공유 상태 없음)


def _require(name: str) -> str:
    value = os.getenv(name, "").strip()
    if not value:
        raise ConfigurationError(f"{name} is not configured")
    return value


def get_gemini_api_key() -> str:
    return _require("GEMINI_API_KEY")


def get_gateway_api_key() -> str:
    return _require("AI_GATEWAY_API_KEY")


def get_gemini_url() -> str:
    base = os.getenv("GEMINI_API_BASE", GEMINI_API_BASE).rstrip("/")
    model = os.getenv("GEMINI_MODEL", GEMINI_MODEL)
    return f"{base}/models/{model}:generateContent"


def get_gateway_url() -> str:
    return os.getenv("AI_GATEWAY_URL", AI_GATEWAY_URL)


def get_gateway_model() -> str:
    return os.getenv("AI_GATEWAY_MODEL", AI_GATEWAY_MODEL)


def get_provider_timeout() -> float:
    raw = os.getenv("PROVIDER_TIMEOUT_SECONDS")
    if not raw:
        return PROVIDER_TIMEOUT_SECONDS
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"PROVIDER_TIMEOUT_SECONDS must be a number, got {raw!r}")


def get_flashcard_validation_mode() -> str:
    """
    파싱된 카드 검증 방식
    - strict: 하나라도 front/back이 문자열이 아니면 전체 거절 (기본)
    - filter: 잘못된 카드만 제거
    - off: 파싱 결과 그대로 반환
    """
    mode = os.getenv("FLASHCARD_VALIDATION", "strict").strip().lower()
    if mode not in FLASHCARD_VALIDATION_MODES:
        raise ConfigurationError(f"FLASHCARD_VALIDATION must be one of {', '.join(FLASHCARD_VALIDATION_MODES)}")
    return mode


def get_flashcard_json_mode() -> bool:
    return os.getenv("FLASHCARD_JSON_MODE", "false").strip().lower() in ("1", "true", "yes", "on")
