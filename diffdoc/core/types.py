from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

class ChunkKind(str, Enum):
    CONTEXT = "context"
    ADDED = "added"
    REMOVED = "removed"
    META = "meta"  # reserved for annotations, never produced by the parser

@dataclass
class Chunk:
    kind: ChunkKind
    lines: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "lines": list(self.lines)}

@dataclass
class CodeBlock:
    id: str
    language: str
    file_path: Optional[str] = None
    chunks: List[Chunk] = field(default_factory=list)
    full_code: Optional[str] = None  # authoritative text, validation only
    final_content: Optional[str] = None  # set by the assembler on the last block of a file
    is_last: Optional[bool] = None

    def copy_text(self) -> str:
        """Whole-file text for copy/export, computed from own chunks when not attached."""
        if self.final_content is not None:
            return self.final_content
        from .chunks import final_content
        return final_content(self.chunks)

    def to_dict(self) -> dict:
        out: Dict[str, Any] = {
            "id": self.id,
            "language": self.language,
            "chunks": [c.to_dict() for c in self.chunks],
        }
        if self.file_path is not None:
            out["filePath"] = self.file_path
        if self.final_content is not None:
            out["reconstructedFinalContent"] = self.final_content
        if self.is_last is not None:
            out["isLast"] = self.is_last
        return out

@dataclass
class Section:
    id: str
    heading: Optional[str] = None
    content: Optional[str] = None
    code_blocks: List[CodeBlock] = field(default_factory=list)

    def to_dict(self) -> dict:
        out: Dict[str, Any] = {"id": self.id}
        if self.heading is not None:
            out["heading"] = self.heading
        if self.content is not None:
            out["content"] = self.content
        out["codeBlocks"] = [b.to_dict() for b in self.code_blocks]
        return out

@dataclass
class Document:
    id: str
    title: str
    meta: Dict[str, Any] = field(default_factory=dict)
    sections: List[Section] = field(default_factory=list)

    def iter_code_blocks(self):
        """Code blocks in document order: section order, then block order."""
        for section in self.sections:
            yield from section.code_blocks

    def summary(self) -> dict:
        return {"id": self.id, "title": self.title, "meta": dict(self.meta)}

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "meta": dict(self.meta),
            "sections": [s.to_dict() for s in self.sections],
        }

# --- authoring side -----------------------------------------------------------

@dataclass
class RawCodeBlock:
    id: str
    language: str
    code: str  # diff-marked text
    file_path: Optional[str] = None
    full_code: Optional[str] = None
    is_last: Optional[bool] = None

@dataclass
class RawSection:
    id: str
    heading: Optional[str] = None
    content: Optional[str] = None
    code_blocks: List[RawCodeBlock] = field(default_factory=list)

@dataclass
class RawDocument:
    id: str
    title: str
    meta: Dict[str, Any] = field(default_factory=dict)
    sections: List[RawSection] = field(default_factory=list)

    def iter_code_blocks(self):
        for section in self.sections:
            yield from section.code_blocks
