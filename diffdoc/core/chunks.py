from __future__ import annotations
from typing import Iterator, List, Optional, Tuple

from .types import Chunk, ChunkKind

_MARKERS = {
    "+": ChunkKind.ADDED,
    "-": ChunkKind.REMOVED,
    " ": ChunkKind.CONTEXT,
}

def classify_line(line: str) -> Tuple[ChunkKind, str]:
    """
    Classify one authored line and strip its marker:
    +added
    -removed
     context
    anything else is context, kept as-is
    """
    if line:
        kind = _MARKERS.get(line[0])
        if kind is not None:
            return kind, line[1:]
    return ChunkKind.CONTEXT, line

def parse_chunks(code: str) -> List[Chunk]:
    """
    Split a diff-marked block into maximal runs of lines sharing one kind.
    Every line lands in exactly one chunk, in order. Empty input gives [].
    """
    if code == "":
        return []
    out: List[Chunk] = []
    cur_kind: Optional[ChunkKind] = None
    buf: List[str] = []
    for line in code.split("\n"):
        kind, content = classify_line(line)
        if kind != cur_kind:
            if buf:
                out.append(Chunk(cur_kind, buf))  # type: ignore[arg-type]
            cur_kind = kind
            buf = []
        buf.append(content)
    if buf:
        out.append(Chunk(cur_kind, buf))  # type: ignore[arg-type]
    return out

def final_content(chunks: List[Chunk]) -> str:
    """File text after all edits: added and context lines, removed lines dropped."""
    lines: List[str] = []
    for chunk in chunks:
        if chunk.kind is ChunkKind.REMOVED:
            continue
        lines.extend(chunk.lines)
    return "\n".join(lines)

def iter_lines(chunks: List[Chunk]) -> Iterator[Tuple[ChunkKind, str]]:
    for chunk in chunks:
        for line in chunk.lines:
            yield chunk.kind, line
