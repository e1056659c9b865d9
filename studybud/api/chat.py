from fastapi import APIRouter
from studybud.errors import RateLimitError, StudyAssistantError
from studybud.schemas.chat import ChatRequest, ChatResponse, ErrorResponse
from studybud.services.chat_service import complete_chat
from studybud.utils.http import error_response, preflight_response
from studybud.utils.logging import get_logger

router = APIRouter()
logger = get_logger(__name__)

FAILURE_STATUS = 500


@router.options("")
async def chat_preflight():
    return preflight_response()


@router.post(
    "",
    response_model=ChatResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Malformed request body"},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def chat_with_ai(request: ChatRequest):
    try:
        reply = await complete_chat(request)
        return ChatResponse(response=reply)
    except RateLimitError as e:
        return error_response(429, e.message)
    except StudyAssistantError as e:
        logger.error("Chat function error: %s", e.message)
        return error_response(FAILURE_STATUS, e.message)
    except Exception:
        logger.exception("Unexpected chat function error")
        return error_response(FAILURE_STATUS, "Unknown error")
