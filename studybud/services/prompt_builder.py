from studybud.constants.prompts import (
    CLASS_CONTEXT_TEMPLATE,
    FLASHCARD_SYSTEM_TEMPLATE,
    NO_MATERIALS,
    NOTES_CLASS_NAME,
    NOTES_INSTRUCTION_TEMPLATE,
    TUTOR_GUIDELINES,
    TUTOR_PERSONA,
)
from studybud.schemas.chat import ChatRequest, ClassContext, Message
from typing import List, Optional

# 클라이언트 역할 → Gemini 역할
_GEMINI_ROLES = {"user": "user", "assistant": "model"}


# 튜터 채팅용 시스템 지시문
def build_system_instruction(class_context: Optional[ClassContext]) -> str:
    parts = [TUTOR_PERSONA]

    # 클래스 정보가 없으면 문장 자체를 생략
    if class_context is not None:
        materials = ", ".join(class_context.materials) or NO_MATERIALS
        parts.append(CLASS_CONTEXT_TEMPLATE.format(class_name=class_context.class_name, materials=materials))

    parts.append(TUTOR_GUIDELINES)
    return "\n\n".join(parts)


def build_gemini_contents(messages: List[Message]) -> list[dict]:
    """대화 순서 유지, assistant → model 변환"""
    return [
        {"role": _GEMINI_ROLES[msg.role], "parts": [{"text": msg.content}]}
        for msg in messages
    ]


# 플래시카드 생성용 프롬프트
def build_flashcard_messages(topic: str, count: int, material_name: Optional[str] = None) -> list[dict]:
    system_content = FLASHCARD_SYSTEM_TEMPLATE.format(count=count)

    if material_name:
        user_content = f"Create {count} flashcards about \"{topic}\" based on the material \"{material_name}\"."
    else:
        user_content = f"Create {count} flashcards about \"{topic}\"."

    return [
        {"role": "system", "content": system_content},
        {"role": "user", "content": user_content},
    ]


# 노트 생성은 튜터 채팅을 그대로 재사용
def build_notes_request(material_name: str) -> ChatRequest:
    return ChatRequest(
        messages=[Message(role="user", content=NOTES_INSTRUCTION_TEMPLATE.format(material_name=material_name))],
        class_context=ClassContext(class_name=NOTES_CLASS_NAME, materials=[material_name]),
    )
