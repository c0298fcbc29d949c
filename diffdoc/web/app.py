from __future__ import annotations
from pathlib import Path
from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import PlainTextResponse
from ..content.library import DocumentLibrary
from ..core.errors import DocumentNotFound

def create_app(content_dir: str, *, validate: bool = True, preview: int = 50) -> FastAPI:
    app = FastAPI(title="diffdoc", docs_url=None, redoc_url=None)

    app.state.content_dir = Path(content_dir).resolve()
    app.state.preview = preview
    app.state.library = DocumentLibrary.from_directory(app.state.content_dir, validate=validate, preview=preview)

    def _library() -> DocumentLibrary:
        return app.state.library

    @app.get("/api/health")
    def health() -> dict:
        return {"status": "ok", "documents": len(_library())}

    @app.get("/api/documents")
    def list_documents() -> list[dict]:
        return _library().listing()

    @app.get("/api/documents/{doc_id}")
    def get_document(doc_id: str) -> dict:
        try:
            asm = _library().assembly(doc_id)
        except DocumentNotFound as e:
            raise HTTPException(status_code=404, detail=str(e))
        out = asm.document.to_dict()
        out["warnings"] = [w.message(app.state.preview) for w in asm.warnings]
        return out

    @app.get("/api/documents/{doc_id}/final", response_class=PlainTextResponse)
    def get_final(doc_id: str, path: str = Query(...)) -> PlainTextResponse:
        try:
            text = _library().final_file(doc_id, path)
        except DocumentNotFound as e:
            raise HTTPException(status_code=404, detail=str(e))
        return PlainTextResponse(text)

    return app
