from __future__ import annotations

class DiffDocError(Exception):
    """Base for errors raised at the document boundary."""

class DocumentFormatError(DiffDocError):
    """A document file cannot be read or misses a required field."""

class DocumentNotFound(DiffDocError, KeyError):
    """Unknown document id or file path."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
