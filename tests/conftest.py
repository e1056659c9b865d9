import json

import httpx
import pytest
from fastapi.testclient import TestClient

from studybud.main import app
from studybud.repositories.notes import InMemoryNotesRepository, get_notes_repository
from studybud.services import ai_client


class FakeProvider:
    """
    업스트림 AI API 대역
    - 호출된 요청을 기록하고, 미리 넣어둔 응답을 순서대로 돌려준다
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._responses: list[tuple[int, dict]] = []
        self._error: Exception | None = None

    def reply(self, status_code: int = 200, json_body=None, text: str | None = None):
        body = {"text": text} if text is not None else {"json": json_body}
        self._responses.append((status_code, body))
        return self

    def fail(self, error: Exception):
        """연결 실패/타임아웃 흉내"""
        self._error = error
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        if not self._responses:
            raise AssertionError(f"Unexpected upstream call: {request.url}")
        # 마지막 응답은 반복 사용 (같은 요청 반복 테스트용)
        if len(self._responses) == 1:
            status_code, body = self._responses[0]
        else:
            status_code, body = self._responses.pop(0)
        return httpx.Response(status_code, **body)

    @property
    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def provider(monkeypatch):
    fake = FakeProvider()
    monkeypatch.setattr(ai_client, "_transport", httpx.MockTransport(fake.handler))
    return fake


@pytest.fixture(autouse=True)
def api_keys(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "test-gemini-key")
    monkeypatch.setenv("AI_GATEWAY_API_KEY", "test-gateway-key")
    for name in ("FLASHCARD_VALIDATION", "FLASHCARD_JSON_MODE", "GEMINI_MODEL", "GEMINI_API_BASE",
                 "AI_GATEWAY_URL", "AI_GATEWAY_MODEL", "PROVIDER_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def notes_repository():
    repository = InMemoryNotesRepository()
    app.dependency_overrides[get_notes_repository] = lambda: repository
    yield repository
    app.dependency_overrides.pop(get_notes_repository, None)


@pytest.fixture
def client():
    return TestClient(app)
