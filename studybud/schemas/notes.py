from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional

BlockType = Literal["heading", "labeled_item", "bullet", "numbered", "spacer", "paragraph"]

class Block(BaseModel):
    """노트 한 줄을 렌더링한 결과"""
    type: BlockType
    text: str = ""
    level: Optional[int] = None   # heading 전용 (1~3)
    label: Optional[str] = None   # labeled_item 전용 (굵은 글씨 부분)

class NotesGenerateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    material_id: str = Field(..., alias="materialId")
    material_name: str = Field(..., alias="materialName")

class NotesUpdateRequest(BaseModel):
    notes: str

class NotesResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    material_id: str = Field(..., serialization_alias="materialId")
    notes: str
    blocks: List[Block] = Field(default_factory=list)
