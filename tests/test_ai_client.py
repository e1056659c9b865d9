import httpx
import pytest


def gemini_reply(text):
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


CHAT_BODY = {"messages": [{"role": "user", "content": "Explain entropy."}]}
FLASHCARD_BODY = {"topic": "Entropy"}


@pytest.mark.parametrize(
    "error, chat_message, flashcard_message",
    [
        (httpx.ReadTimeout("read timed out"), "Gemini API timed out", "AI gateway API timed out"),
        (httpx.ConnectError("connection refused"), "Gemini API request failed", "AI gateway API request failed"),
    ],
)
def test_transport_failures(client, provider, error, chat_message, flashcard_message):
    provider.fail(error)

    chat = client.post("/api/chat", json=CHAT_BODY)
    flashcards = client.post("/api/flashcards", json=FLASHCARD_BODY)

    assert (chat.status_code, chat.json()) == (500, {"error": chat_message})
    assert (flashcards.status_code, flashcards.json()) == (400, {"error": flashcard_message})


def test_non_json_success_body(client, provider):
    provider.reply(status_code=200, text="<html>maintenance</html>")

    chat = client.post("/api/chat", json=CHAT_BODY)
    flashcards = client.post("/api/flashcards", json=FLASHCARD_BODY)

    assert (chat.status_code, chat.json()) == (500, {"error": "Gemini API returned an invalid response"})
    assert (flashcards.status_code, flashcards.json()) == (400, {"error": "AI gateway API returned an invalid response"})


def test_default_timeout_is_applied(client, provider):
    provider.reply(json_body=gemini_reply("ok"))

    client.post("/api/chat", json=CHAT_BODY)

    assert provider.requests[-1].extensions["timeout"]["read"] == 30.0


def test_timeout_is_read_from_environment(client, provider, monkeypatch):
    monkeypatch.setenv("PROVIDER_TIMEOUT_SECONDS", "5")
    provider.reply(json_body=gemini_reply("ok"))

    client.post("/api/chat", json=CHAT_BODY)

    timeout = provider.requests[-1].extensions["timeout"]
    assert timeout["connect"] == 5.0
    assert timeout["read"] == 5.0


def test_invalid_timeout_is_configuration_error(client, provider, monkeypatch):
    monkeypatch.setenv("PROVIDER_TIMEOUT_SECONDS", "soon")

    chat = client.post("/api/chat", json=CHAT_BODY)
    flashcards = client.post("/api/flashcards", json=FLASHCARD_BODY)

    message = "PROVIDER_TIMEOUT_SECONDS must be a number, got 'soon'"
    assert (chat.status_code, chat.json()) == (500, {"error": message})
    assert (flashcards.status_code, flashcards.json()) == (400, {"error": message})
    assert provider.requests == []
