from fastapi import APIRouter
from fastapi.responses import JSONResponse
from studybud.errors import StudyAssistantError
from studybud.schemas.chat import ErrorResponse
from studybud.schemas.flashcards import Flashcard, FlashcardRequest, FlashcardResponse
from studybud.services.flashcard_service import generate_flashcards
from studybud.utils.http import error_response, preflight_response
from studybud.utils.logging import get_logger

router = APIRouter()
logger = get_logger(__name__)

# 입력 오류, 설정 누락, 업스트림 실패, 파싱 실패 모두 400 (메시지로만 구분)
FAILURE_STATUS = 400


def _is_plain_card(card) -> bool:
    return (
        isinstance(card, dict)
        and set(card) == {"front", "back"}
        and all(isinstance(v, str) for v in card.values())
    )


@router.options("")
async def flashcards_preflight():
    return preflight_response("ok")


@router.post("", response_model=FlashcardResponse, responses={400: {"model": ErrorResponse}})
async def create_flashcards(request: FlashcardRequest):
    try:
        cards = await generate_flashcards(request)
        if all(_is_plain_card(card) for card in cards):
            return FlashcardResponse(flashcards=[Flashcard(**card) for card in cards])
        # FLASHCARD_VALIDATION=off: 파싱 결과를 손대지 않고 반환 (직렬화 실패도 여기서 잡는다)
        return JSONResponse(content={"flashcards": cards})
    except StudyAssistantError as e:
        logger.error("Flashcard generation error: %s", e.message)
        return error_response(FAILURE_STATUS, e.message)
    except Exception:
        logger.exception("Unexpected flashcard generation error")
        return error_response(FAILURE_STATUS, "Unknown error")
