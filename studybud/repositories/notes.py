from typing import Dict, Optional, Protocol


class NotesRepository(Protocol):
    """자료(material)별 노트 저장소. 운영 환경에서는 DB 구현체로 교체"""

    async def get(self, material_id: str) -> Optional[str]: ...

    async def put(self, material_id: str, notes: str) -> None: ...


class InMemoryNotesRepository:
    """프로세스 메모리 저장소 (로컬 실행/테스트용)"""

    def __init__(self) -> None:
        self._notes: Dict[str, str] = {}

    async def get(self, material_id: str) -> Optional[str]:
        return self._notes.get(material_id)

    async def put(self, material_id: str, notes: str) -> None:
        self._notes[material_id] = notes


_default_repository = InMemoryNotesRepository()


def get_notes_repository() -> NotesRepository:
    """FastAPI 의존성 - 테스트에서는 dependency_overrides로 교체"""
    return _default_repository
