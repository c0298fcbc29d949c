from __future__ import annotations
import argparse
import uvicorn
from ..config import load_settings
from ..tools.logs import log_event, log_mismatches
from .app import create_app

def main() -> None:
    parser = argparse.ArgumentParser(description="diffdoc JSON API (FastAPI)")
    parser.add_argument("--config", type=str, default="config", help="Configuration directory (default: ./config)")
    parser.add_argument("--profile", type=str, default="default", help="Configuration profile (default|strict)")
    parser.add_argument("--content", type=str, default=None, help="Document directory (default: general.content_dir)")
    parser.add_argument("--host", type=str, default=None, help="Host (default: web.host)")
    parser.add_argument("--port", type=int, default=None, help="Port (default: web.port)")
    args = parser.parse_args()

    settings = load_settings(args.config, args.profile)
    app = create_app(
        content_dir=args.content or settings.general.content_dir,
        validate=settings.assembly.validate,
        preview=settings.assembly.preview_chars,
    )
    lib = app.state.library
    for doc_id in lib.ids():
        log_mismatches(settings, doc_id, lib.assembly(doc_id).warnings)
    log_event(settings, f"serve documents={len(lib)}", kind="web")

    uvicorn.run(app, host=args.host or settings.web.host, port=int(args.port or settings.web.port), log_level="info")

if __name__ == "__main__":
    main()
