from .loader import load_document, raw_from_dict, iter_document_files
from .library import DocumentLibrary

__all__ = ["load_document", "raw_from_dict", "iter_document_files", "DocumentLibrary"]
