from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from studybud.api import chat, flashcards, notes
from studybud.utils.http import CORS_HEADERS, error_response
from studybud.utils.logging import get_logger, setup_logging

setup_logging()
logger = get_logger(__name__)

app = FastAPI(title="StudyBud AI")

app.include_router(chat.router, prefix="/api/chat", tags=["chat"])
app.include_router(flashcards.router, prefix="/api/flashcards", tags=["flashcards"])
app.include_router(notes.router, prefix="/api/notes", tags=["notes"])


@app.middleware("http")
async def add_cors_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """본문 형식 오류는 422 대신 {error} 400으로 통일"""
    errors = exc.errors()
    logger.warning("Invalid request body for %s: %s", request.url.path, errors)
    message = "Invalid request body"
    if errors:
        first = errors[0]
        loc = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        detail = f"{loc}: {first.get('msg', '')}" if loc else first.get("msg", "")
        message = f"{message} ({detail})"
    return error_response(400, message)


@app.get("/")
def root():
    return {"message": "StudyBud AI server running"}
