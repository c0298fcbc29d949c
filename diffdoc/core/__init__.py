from .types import Chunk, ChunkKind, CodeBlock, Document, RawCodeBlock, RawDocument, RawSection, Section
from .chunks import classify_line, final_content, iter_lines, parse_chunks
from .authoring import dedent_code
from .validate import LineMismatch, collect_full_code, validate_document
from .assembler import UNNAMED, Assembly, assemble, files, parse_document

__all__ = [
    "Chunk", "ChunkKind", "CodeBlock", "Document", "RawCodeBlock", "RawDocument", "RawSection", "Section",
    "classify_line", "final_content", "iter_lines", "parse_chunks",
    "dedent_code",
    "LineMismatch", "collect_full_code", "validate_document",
    "UNNAMED", "Assembly", "assemble", "files", "parse_document",
]
