from fastapi import APIRouter, Depends
from studybud.errors import RateLimitError, StudyAssistantError
from studybud.repositories.notes import NotesRepository, get_notes_repository
from studybud.schemas.chat import ErrorResponse
from studybud.schemas.notes import NotesGenerateRequest, NotesResponse, NotesUpdateRequest
from studybud.services.chat_service import complete_chat
from studybud.services.prompt_builder import build_notes_request
from studybud.utils.http import error_response
from studybud.utils.logging import get_logger
from studybud.utils.markdown_blocks import render_lines

router = APIRouter()
logger = get_logger(__name__)


def _notes_response(material_id: str, notes: str) -> NotesResponse:
    return NotesResponse(material_id=material_id, notes=notes, blocks=render_lines(notes))


@router.post(
    "/generate",
    response_model=NotesResponse,
    responses={400: {"model": ErrorResponse}, 429: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_notes(request: NotesGenerateRequest):
    """
    자료 제목으로 학습 노트 초안을 생성
    - 튜터 채팅을 노트용 지시문으로 호출 (오류 정책도 채팅과 동일)
    - 저장하지 않는다. 사용자가 검토 후 PUT /api/notes/{material_id} 로 저장
    """
    try:
        notes = await complete_chat(build_notes_request(request.material_name))
    except RateLimitError as e:
        return error_response(429, e.message)
    except StudyAssistantError as e:
        logger.error("Error generating notes: %s", e.message)
        return error_response(500, e.message)
    except Exception:
        logger.exception("Unexpected error generating notes")
        return error_response(500, "Unknown error")

    return _notes_response(request.material_id, notes)


@router.get("/{material_id}", response_model=NotesResponse)
async def get_notes(material_id: str, repository: NotesRepository = Depends(get_notes_repository)):
    notes = await repository.get(material_id) or ""
    return _notes_response(material_id, notes)


@router.put("/{material_id}", response_model=NotesResponse)
async def save_notes(
    material_id: str,
    request: NotesUpdateRequest,
    repository: NotesRepository = Depends(get_notes_repository),
):
    await repository.put(material_id, request.notes)
    return _notes_response(material_id, request.notes)
