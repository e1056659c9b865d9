from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional

class Message(BaseModel):
    role: Literal["user", "assistant"]
    content: str

class ClassContext(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    class_name: str = Field(..., alias="className")
    materials: List[str] = Field(default_factory=list, description="자료 표시 이름 (업로드 순)")

class ChatRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    messages: List[Message]
    class_context: Optional[ClassContext] = Field(None, alias="classContext")

class ChatResponse(BaseModel):
    response: str

class ErrorResponse(BaseModel):
    error: str
