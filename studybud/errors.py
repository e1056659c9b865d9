# ------------------------------------------------------------
# AI 요청 처리 중 발생하는 오류 분류
# - message: 클라이언트에 그대로 내려가는 짧은 문장
# - 원본 업스트림 응답/파싱 예외는 서버 로그에만 남긴다
# ------------------------------------------------------------


class StudyAssistantError(Exception):
    """모든 도메인 오류의 기반 클래스"""

    default_message = "Unknown error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ConfigurationError(StudyAssistantError):
    """필수 시크릿(API 키) 누락"""

    default_message = "API key not configured"


class ValidationError(StudyAssistantError):
    """요청 필드 누락/형식 오류 - 업스트림 호출 전에 거절"""

    default_message = "Invalid request"


class UpstreamError(StudyAssistantError):
    """프로바이더가 실패 상태를 반환했거나 응답 형식이 잘못됨"""

    default_message = "AI provider error"


class RateLimitError(UpstreamError):
    """프로바이더 429"""

    default_message = "Rate limit exceeded. Please try again in a moment."


class EmptyResponseError(StudyAssistantError):
    default_message = "No response from AI"


class ParseError(StudyAssistantError):
    default_message = "Failed to parse flashcards response"
