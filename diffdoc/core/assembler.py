from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .chunks import parse_chunks, final_content
from .types import Chunk, CodeBlock, Document, RawCodeBlock, RawDocument, RawSection, Section
from .validate import LineMismatch, collect_full_code, validate_document

UNNAMED: Optional[str] = None  # group key for blocks without a file path

@dataclass
class Assembly:
    document: Document
    warnings: List[LineMismatch] = field(default_factory=list)

def _parse_block(raw: RawCodeBlock) -> CodeBlock:
    return CodeBlock(
        id=raw.id,
        language=raw.language,
        file_path=raw.file_path,
        chunks=parse_chunks(raw.code),
        full_code=raw.full_code,
        is_last=raw.is_last,
    )

def _parse_section(raw: RawSection) -> Section:
    return Section(
        id=raw.id,
        heading=raw.heading,
        content=raw.content,
        code_blocks=[_parse_block(b) for b in raw.code_blocks],
    )

def group_key(block: CodeBlock) -> Optional[str]:
    return block.file_path if block.file_path is not None else UNNAMED

def accumulate(document: Document) -> Dict[Optional[str], List[Chunk]]:
    """All chunks per file path, concatenated in document order."""
    groups: Dict[Optional[str], List[Chunk]] = {}
    for block in document.iter_code_blocks():
        groups.setdefault(group_key(block), []).extend(block.chunks)
    return groups

def files(document: Document) -> Dict[Optional[str], CodeBlock]:
    """Last code block per file path, the target of the reconstructed content."""
    last: Dict[Optional[str], CodeBlock] = {}
    for block in document.iter_code_blocks():
        last[group_key(block)] = block
    return last

def attach_final_content(document: Document) -> Document:
    # final_content is the only field written after parsing
    groups = accumulate(document)
    for key, block in files(document).items():
        block.final_content = final_content(groups[key])
    return document

def assemble(raw: RawDocument, *, validate: bool = True, preview: int = 50) -> Assembly:
    """
    Parse every code block, optionally validate against authoritative text,
    then attach each file's reconstructed content to its last block.
    The raw document is left untouched; every run builds a fresh Document.
    """
    document = Document(
        id=raw.id,
        title=raw.title,
        meta=dict(raw.meta),
        sections=[_parse_section(s) for s in raw.sections],
    )

    warnings: List[LineMismatch] = []
    if validate:
        full_code = collect_full_code(raw)
        if full_code:
            warnings = validate_document(document, full_code, preview=preview)

    attach_final_content(document)
    return Assembly(document=document, warnings=warnings)

def parse_document(raw: RawDocument, *, validate: bool = True) -> Document:
    return assemble(raw, validate=validate).document
