from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List
import logging

from .types import ChunkKind, Document, RawDocument

log = logging.getLogger(__name__)

@dataclass(frozen=True)
class LineMismatch:
    file_path: str
    block_id: str
    kind: ChunkKind
    line: str

    def message(self, preview: int = 50) -> str:
        return (
            f'Line mismatch in {self.file_path} ({self.kind.value}): '
            f'"{self.line[:preview]}..." not found in full code'
        )

def collect_full_code(raw: RawDocument) -> Dict[str, str]:
    """Authoritative text per file path. Later blocks win; unnamed blocks are skipped."""
    out: Dict[str, str] = {}
    for block in raw.iter_code_blocks():
        if block.full_code and block.file_path:
            out[block.file_path] = block.full_code
    return out

def validate_document(document: Document, full_code: Dict[str, str], *, preview: int = 50) -> List[LineMismatch]:
    """
    Check that every non-blank context/removed line of a file's blocks exists
    somewhere in that file's authoritative text. Membership only, compared
    after strip(). Mismatches are logged and returned, never raised.
    """
    mismatches: List[LineMismatch] = []
    known: Dict[str, set] = {}
    for block in document.iter_code_blocks():
        path = block.file_path
        if not path or path not in full_code:
            continue
        if path not in known:
            known[path] = {l.strip() for l in full_code[path].split("\n")}
        for chunk in block.chunks:
            if chunk.kind not in (ChunkKind.CONTEXT, ChunkKind.REMOVED):
                continue
            for line in chunk.lines:
                stripped = line.strip()
                if not stripped:
                    continue
                if stripped not in known[path]:
                    m = LineMismatch(path, block.id, chunk.kind, line)
                    log.warning("[%s] %s", block.id, m.message(preview))
                    mismatches.append(m)
    return mismatches
