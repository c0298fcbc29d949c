import json
import subprocess
import sys
from pathlib import Path
from diffdoc.cli import main

def run_cli(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", "diffdoc", *args],
        text=True,
        capture_output=True,
        check=False,
    )

def _write_doc(root: Path, full_code: str = "int y = 2;\nint z = 3;") -> Path:
    root.mkdir(parents=True, exist_ok=True)
    doc = {"id": "scenario", "title": "Scenario", "meta": {"tags": ["c"]}, "sections": [
        {"id": "s1", "code_blocks": [{"id": "b1", "language": "cpp", "file_path": "f.cpp",
                                      "code": "+int x = 1;\n int y = 2;\n-int z = 3;", "full_code": full_code}]},
    ]}
    p = root / "scenario.json"
    p.write_text(json.dumps(doc), encoding="utf-8")
    return p

def test_help_works():
    p = run_cli("--help")
    assert p.returncode == 0
    assert "diffdoc" in p.stdout

def test_version():
    p = run_cli("--version")
    assert p.returncode == 0
    assert p.stdout.strip().count(".") == 2

def test_list_show_final(tmp_path: Path, capsys):
    content = tmp_path / "content"
    _write_doc(content)
    base = ["--content", str(content)]

    assert main([*base, "list"]) == 0
    assert capsys.readouterr().out.strip() == "scenario\tScenario"

    assert main([*base, "show", "scenario"]) == 0
    out = json.loads(capsys.readouterr().out)
    block = out["sections"][0]["codeBlocks"][0]
    assert block["reconstructedFinalContent"] == "int x = 1;\nint y = 2;"
    assert out["warnings"] == []

    assert main([*base, "final", "scenario", "f.cpp"]) == 0
    assert capsys.readouterr().out == "int x = 1;\nint y = 2;\n"

def test_unknown_document_exit_code(tmp_path: Path, capsys):
    content = tmp_path / "content"
    _write_doc(content)
    assert main(["--content", str(content), "show", "missing"]) == 2
    assert "missing" in capsys.readouterr().err
    assert main(["--content", str(content), "final", "scenario", "nope.cpp"]) == 2

def _config(root: Path) -> Path:
    cfg = root / "config"
    cfg.mkdir(parents=True, exist_ok=True)
    logs = (root / "logs").as_posix()
    (cfg / "defaults.toml").write_text(f'[general]\nlog_dir = "{logs}"\n', encoding="utf-8")
    (cfg / "strict.toml").write_text("[assembly]\nfail_on_mismatch = true\n", encoding="utf-8")
    return cfg

def test_check_reports_and_strict(tmp_path: Path, capsys):
    doc = _write_doc(tmp_path / "content", full_code="int y = 2;")
    cfg = str(_config(tmp_path))
    assert main(["--config", cfg, "check", str(doc)]) == 0
    out = capsys.readouterr().out
    assert out.count("Line mismatch") == 1
    assert "int z = 3;" in out
    assert "1 warning(s)" in out
    assert main(["--config", cfg, "check", "--strict", str(doc)]) == 1
    assert main(["--config", cfg, "--profile", "strict", "check", str(doc)]) == 1
    log = (tmp_path / "logs" / "diffdoc.log").read_text(encoding="utf-8")
    assert "| mismatch | scenario/b1:" in log

def test_check_clean_document(tmp_path: Path, capsys):
    doc = _write_doc(tmp_path / "content")
    assert main(["--config", str(_config(tmp_path)), "--profile", "strict", "check", str(doc)]) == 0
    assert "0 warning(s)" in capsys.readouterr().out

def test_check_shipped_content(tmp_path: Path):
    p = run_cli("--config", str(_config(tmp_path)), "--content", "content", "check")
    assert p.returncode == 0
    assert "0 warning(s)" in p.stdout

def test_check_rejects_mistyped_fields(tmp_path: Path, capsys):
    doc = tmp_path / "bad.json"
    doc.write_text(json.dumps({"id": "bad", "title": "Bad", "sections": [{"id": "s", "code_blocks": [
        {"id": "b", "language": "c", "code": "+x", "file_path": "m.c", "full_code": 123}]}]}), encoding="utf-8")
    assert main(["--config", str(_config(tmp_path)), "check", str(doc)]) == 2
    assert "full_code" in capsys.readouterr().err
