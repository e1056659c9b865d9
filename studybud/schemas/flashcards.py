from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

DEFAULT_FLASHCARD_COUNT = 5
MAX_FLASHCARD_COUNT = 50

class FlashcardRequest(BaseModel):
    """
    플래시카드 생성 요청
    - topic 누락/빈 문자열은 서비스에서 ValidationError로 처리 (업스트림 호출 전)
    """
    model_config = ConfigDict(populate_by_name=True)

    topic: Optional[str] = Field(None, description="카드 주제")
    material_name: Optional[str] = Field(None, alias="materialName")
    count: int = Field(DEFAULT_FLASHCARD_COUNT, ge=1, le=MAX_FLASHCARD_COUNT)

class Flashcard(BaseModel):
    front: str  # 질문
    back: str   # 답

class FlashcardResponse(BaseModel):
    flashcards: List[Flashcard]
