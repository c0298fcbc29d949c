from __future__ import annotations
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable
from ..config import Settings
from ..core.validate import LineMismatch

LOG_NAME = "diffdoc.log"

def _now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")

def log_event(settings: Settings, message: str, *, kind: str = "run") -> Path:
    """Append `<ts> | <kind> | <message>` to the event log and return its path."""
    log_dir = Path(settings.general.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    path = log_dir / LOG_NAME
    with path.open("a", encoding="utf-8") as f:
        f.write(f"{_now()} | {kind} | {message}\n")
    return path

def log_mismatches(settings: Settings, doc_id: str, mismatches: Iterable[LineMismatch]) -> int:
    n = 0
    for m in mismatches:
        log_event(settings, f"{doc_id}/{m.block_id}: {m.message(settings.assembly.preview_chars)}", kind="mismatch")
        n += 1
    return n
