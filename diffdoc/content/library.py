from __future__ import annotations
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from ..core.assembler import Assembly, assemble, files
from ..core.errors import DocumentFormatError, DocumentNotFound
from ..core.types import Document, RawDocument
from ..core.validate import LineMismatch
from .loader import iter_document_files, load_document

class DocumentLibrary:
    """Assembled documents by id, kept in registration order."""

    def __init__(self, raws: Iterable[RawDocument] = (), *, validate: bool = True, preview: int = 50) -> None:
        self._assemblies: Dict[str, Assembly] = {}
        self.validate = validate
        self.preview = preview
        for raw in raws:
            self.add(raw)

    @classmethod
    def from_directory(cls, content_dir: str | Path, *, validate: bool = True, preview: int = 50) -> "DocumentLibrary":
        lib = cls(validate=validate, preview=preview)
        for path in iter_document_files(content_dir):
            lib.add(load_document(path), source=str(path))
        return lib

    def add(self, raw: RawDocument, *, source: Optional[str] = None) -> Assembly:
        if raw.id in self._assemblies:
            raise DocumentFormatError(f"{source or raw.id}: duplicate document id '{raw.id}'")
        asm = assemble(raw, validate=self.validate, preview=self.preview)
        self._assemblies[raw.id] = asm
        return asm

    def __len__(self) -> int:
        return len(self._assemblies)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._assemblies

    def assembly(self, doc_id: str) -> Assembly:
        try:
            return self._assemblies[doc_id]
        except KeyError:
            raise DocumentNotFound(f"Document not found: {doc_id}") from None

    def get(self, doc_id: str) -> Document:
        return self.assembly(doc_id).document

    def ids(self) -> List[str]:
        return list(self._assemblies)

    def listing(self) -> List[dict]:
        return [a.document.summary() for a in self._assemblies.values()]

    @property
    def warnings(self) -> List[LineMismatch]:
        out: List[LineMismatch] = []
        for a in self._assemblies.values():
            out.extend(a.warnings)
        return out

    def final_file(self, doc_id: str, file_path: str) -> str:
        """Reconstructed content of one file, as attached to its last block."""
        targets = files(self.get(doc_id))
        block = targets.get(file_path)
        if block is None:
            raise DocumentNotFound(f"File not found in {doc_id}: {file_path}")
        return block.copy_text()
