from __future__ import annotations
import argparse, json, sys
from pathlib import Path
from . import __version__
from .config import PROFILES, Settings, load_settings
from .content.library import DocumentLibrary
from .content.loader import iter_document_files, load_document
from .core.assembler import assemble
from .core.errors import DocumentFormatError, DocumentNotFound
from .tools.logs import log_event, log_mismatches

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_ERROR = 2

def _err(msg: str) -> None:
    print(f"ERR: {msg}", file=sys.stderr, flush=True)

def _library(s: Settings) -> DocumentLibrary:
    return DocumentLibrary.from_directory(
        s.general.content_dir,
        validate=s.assembly.validate,
        preview=s.assembly.preview_chars,
    )

# === Commands ================================================================
def _cmd_list(s: Settings, args) -> int:
    lib = _library(s)
    for item in lib.listing():
        print(f"{item['id']}\t{item['title']}")
    return EXIT_OK

def _cmd_show(s: Settings, args) -> int:
    asm = _library(s).assembly(args.doc_id)
    out = asm.document.to_dict()
    out["warnings"] = [w.message(s.assembly.preview_chars) for w in asm.warnings]
    print(json.dumps(out, ensure_ascii=False, indent=2))
    return EXIT_OK

def _cmd_final(s: Settings, args) -> int:
    print(_library(s).final_file(args.doc_id, args.file_path))
    return EXIT_OK

def _cmd_check(s: Settings, args) -> int:
    if args.paths:
        paths = [Path(p) for p in args.paths]
    else:
        paths = iter_document_files(s.general.content_dir)
    total = 0
    for p in paths:
        raw = load_document(p)
        asm = assemble(raw, validate=True, preview=s.assembly.preview_chars)
        for w in asm.warnings:
            print(f"{p}: {w.message(s.assembly.preview_chars)}")
        total += log_mismatches(s, raw.id, asm.warnings)
    print(f"checked {len(paths)} document(s), {total} warning(s)")
    log_event(s, f"check documents={len(paths)} warnings={total}", kind="check")
    if total and (args.strict or s.assembly.fail_on_mismatch):
        return EXIT_MISMATCH
    return EXIT_OK

# === Arguments ================================================================
def _argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser("diffdoc", description="diffdoc: diff-annotated code documents")
    ap.add_argument("--version", action="store_true", help="Print the version and exit.")
    ap.add_argument("--config", default="config", help="Configuration directory.")
    ap.add_argument("--profile", choices=PROFILES, default="default", help="Configuration profile.")
    ap.add_argument("--content", help="Document directory (overrides general.content_dir).")
    sub = ap.add_subparsers(dest="command")

    sub.add_parser("list", help="List documents (id and title).")

    p = sub.add_parser("show", help="Print an assembled document as JSON.")
    p.add_argument("doc_id")

    p = sub.add_parser("final", help="Print the reconstructed content of one file.")
    p.add_argument("doc_id")
    p.add_argument("file_path")

    p = sub.add_parser("check", help="Validate documents against their full code.")
    p.add_argument("paths", nargs="*", help="Document files (default: every document of the content dir).")
    p.add_argument("--strict", action="store_true", help="Exit 1 when warnings are found.")
    return ap

def build_parser() -> argparse.ArgumentParser:
    return _argparser()

COMMANDS = {
    "list": _cmd_list,
    "show": _cmd_show,
    "final": _cmd_final,
    "check": _cmd_check,
}

# === Main ====================================================================
def main(argv: list[str] | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if args.version:
        print(__version__)
        return EXIT_OK
    if not args.command:
        ap.print_help()
        return EXIT_OK

    overrides = {"content_dir": args.content} if args.content else None
    s = load_settings(config=args.config, profile=args.profile, overrides=overrides)

    try:
        return COMMANDS[args.command](s, args)
    except DocumentNotFound as e:
        _err(str(e))
        return EXIT_ERROR
    except DocumentFormatError as e:
        _err(str(e))
        return EXIT_ERROR

if __name__ == "__main__":
    raise SystemExit(main())
