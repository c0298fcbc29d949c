from __future__ import annotations
from pathlib import Path
from typing import Any
import json, tomllib

from ..core.authoring import dedent_code
from ..core.errors import DocumentFormatError
from ..core.types import RawCodeBlock, RawDocument, RawSection

SUFFIXES = (".toml", ".json")

def _get(data: dict, *keys: str, default: Any = None) -> Any:
    """First present key; accepts snake_case and the camelCase spelling."""
    for k in keys:
        if k in data:
            return data[k]
    return default

def _require(data: dict, key: str, where: str) -> Any:
    if key not in data or data[key] is None:
        raise DocumentFormatError(f"{where}: missing required field '{key}'")
    return data[key]

def _optional_str(data: dict, where: str, *keys: str) -> str | None:
    value = _get(data, *keys)
    if value is not None and not isinstance(value, str):
        raise DocumentFormatError(f"{where}: '{keys[0]}' must be a string")
    return value

def _block_from_dict(data: dict, where: str) -> RawCodeBlock:
    bid = str(_require(data, "id", where))
    where = f"{where} > block {bid}"
    code = _require(data, "code", where)
    if not isinstance(code, str):
        raise DocumentFormatError(f"{where}: 'code' must be a string")
    if _get(data, "dedent", default=False):
        code = dedent_code(code)
    return RawCodeBlock(
        id=bid,
        language=str(_require(data, "language", where)),
        code=code,
        file_path=_optional_str(data, where, "file_path", "filePath"),
        full_code=_optional_str(data, where, "full_code", "fullCode"),
        is_last=_get(data, "is_last", "isLast"),
    )

def _section_from_dict(data: dict, where: str) -> RawSection:
    sid = str(_require(data, "id", where))
    where = f"{where} > section {sid}"
    blocks = _get(data, "code_blocks", "codeBlocks", default=[]) or []
    return RawSection(
        id=sid,
        heading=_optional_str(data, where, "heading"),
        content=_optional_str(data, where, "content"),
        code_blocks=[_block_from_dict(b, where) for b in blocks],
    )

def raw_from_dict(data: dict, *, source: str = "<dict>") -> RawDocument:
    if not isinstance(data, dict):
        raise DocumentFormatError(f"{source}: document must be a table/object")
    did = str(_require(data, "id", source))
    where = f"{source} > {did}"
    return RawDocument(
        id=did,
        title=str(_require(data, "title", where)),
        meta=dict(_get(data, "meta", default={}) or {}),
        sections=[_section_from_dict(s, where) for s in (_get(data, "sections", default=[]) or [])],
    )

def load_document(path: str | Path) -> RawDocument:
    """Read one authored document from a .toml or .json file."""
    p = Path(path)
    try:
        if p.suffix == ".toml":
            with p.open("rb") as f:
                data = tomllib.load(f)
        elif p.suffix == ".json":
            data = json.loads(p.read_text(encoding="utf-8"))
        else:
            raise DocumentFormatError(f"{p}: unsupported extension (expected {', '.join(SUFFIXES)})")
    except (OSError, tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
        raise DocumentFormatError(f"{p}: {e}") from e
    return raw_from_dict(data, source=str(p))

def iter_document_files(content_dir: str | Path) -> list[Path]:
    root = Path(content_dir)
    if not root.is_dir():
        return []
    return sorted(f for f in root.iterdir() if f.is_file() and f.suffix in SUFFIXES)
