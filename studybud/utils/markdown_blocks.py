import re
from typing import List

from studybud.schemas.notes import Block

# "- **용어** - 설명", "1. **용어**: 설명"
_LABELED_RE = re.compile(r"^[-\d.]+\s*\*\*(.+?)\*\*\s*[-–:]*\s*(.*)")
_NUMBERED_START_RE = re.compile(r"^\d+\.\s*\*\*")
_NUMBERED_RE = re.compile(r"^\d+\.")

_HEADINGS = (("### ", 3), ("## ", 2), ("# ", 1))


def _render_line(line: str) -> Block:
    for prefix, level in _HEADINGS:
        if line.startswith(prefix):
            return Block(type="heading", level=level, text=line[len(prefix):])

    if line.startswith("- **") or _NUMBERED_START_RE.match(line):
        m = _LABELED_RE.match(line)
        if m:
            return Block(type="labeled_item", label=m.group(1), text=m.group(2))

    if line.startswith("- "):
        return Block(type="bullet", text=line[2:])
    if _NUMBERED_RE.match(line):
        return Block(type="numbered", text=line)
    if line.strip() == "":
        return Block(type="spacer")
    return Block(type="paragraph", text=line)


def render_lines(text: str) -> List[Block]:
    """
    노트 텍스트(마크다운 일부 문법)를 줄 단위 블록으로 변환
    - 순수 함수, AI 호출 계층과 무관
    """
    if not text:
        return []
    return [_render_line(line) for line in text.split("\n")]
