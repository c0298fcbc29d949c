import copy
from diffdoc.core.assembler import UNNAMED, assemble, files, parse_document
from diffdoc.core.chunks import final_content, parse_chunks
from diffdoc.core.types import RawCodeBlock, RawDocument, RawSection

def _two_sections() -> RawDocument:
    b1 = RawCodeBlock(id="b1", language="cpp", file_path="f.cpp", code="+int a;\n+int b;")
    other = RawCodeBlock(id="o1", language="py", file_path="g.py", code="+print('hi')")
    b2 = RawCodeBlock(id="b2", language="cpp", file_path="f.cpp", code=" int a;\n-int b;\n+int c;")
    return RawDocument(
        id="doc",
        title="Doc",
        meta={"date": "2025-01-01", "tags": ["t"]},
        sections=[
            RawSection(id="s1", heading="One", content="first", code_blocks=[b1, other]),
            RawSection(id="s2", heading="Two", content="second", code_blocks=[b2]),
        ],
    )

def test_final_content_accumulates_across_sections():
    doc = parse_document(_two_sections())
    b1, other = doc.sections[0].code_blocks
    b2 = doc.sections[1].code_blocks[0]
    assert b2.final_content == final_content(b1.chunks + b2.chunks)
    assert b2.final_content != final_content(b2.chunks)
    assert b2.final_content == "int a;\nint b;\nint a;\nint c;"
    assert b1.final_content is None
    assert other.final_content == "print('hi')"

def test_files_returns_last_block_per_path():
    doc = parse_document(_two_sections())
    targets = files(doc)
    assert set(targets) == {"f.cpp", "g.py"}
    assert targets["f.cpp"].id == "b2"
    assert targets["g.py"].id == "o1"

def test_unnamed_blocks_share_one_group():
    raw = RawDocument(id="d", title="D", sections=[
        RawSection(id="s1", code_blocks=[RawCodeBlock(id="u1", language="txt", code="+one")]),
        RawSection(id="s2", code_blocks=[RawCodeBlock(id="u2", language="txt", code="+two")]),
    ])
    doc = parse_document(raw)
    u1 = doc.sections[0].code_blocks[0]
    u2 = doc.sections[1].code_blocks[0]
    assert u1.final_content is None
    assert u2.final_content == "one\ntwo"
    assert files(doc)[UNNAMED] is u2

def test_literal_unnamed_path_does_not_collide_with_missing_path():
    raw = RawDocument(id="d", title="D", sections=[RawSection(id="s", code_blocks=[
        RawCodeBlock(id="a", language="txt", code="+x"),
        RawCodeBlock(id="b", language="txt", code="+y", file_path="unnamed"),
    ])])
    doc = parse_document(raw)
    a, b = doc.sections[0].code_blocks
    assert a.final_content == "x"
    assert b.final_content == "y"

def test_assembly_is_idempotent_and_leaves_input_untouched():
    raw = _two_sections()
    before = copy.deepcopy(raw)
    first = assemble(raw).document.to_dict()
    second = assemble(raw).document.to_dict()
    assert first == second
    assert raw == before

def test_authoritative_text_is_not_used_as_final_content():
    raw = RawDocument(id="d", title="D", sections=[RawSection(id="s", code_blocks=[
        RawCodeBlock(id="a", language="c", file_path="m.c", code="+int x;", full_code="int x;\nint y;"),
    ])])
    doc = parse_document(raw)
    assert doc.sections[0].code_blocks[0].final_content == "int x;"

def test_to_dict_shape():
    out = parse_document(_two_sections()).to_dict()
    assert out["id"] == "doc" and out["title"] == "Doc"
    assert out["meta"]["tags"] == ["t"]
    s1, s2 = out["sections"]
    assert s1["heading"] == "One"
    block = s2["codeBlocks"][0]
    assert block["filePath"] == "f.cpp"
    assert block["chunks"][1] == {"kind": "removed", "lines": ["int b;"]}
    assert "reconstructedFinalContent" in block
    assert "reconstructedFinalContent" not in s1["codeBlocks"][0]

def test_copy_text_falls_back_to_own_chunks():
    doc = parse_document(_two_sections())
    b1 = doc.sections[0].code_blocks[0]
    assert b1.copy_text() == "int a;\nint b;"
    assert doc.sections[1].code_blocks[0].copy_text() == "int a;\nint b;\nint a;\nint c;"

def test_summary_has_no_sections():
    doc = parse_document(_two_sections())
    assert doc.summary() == {"id": "doc", "title": "Doc", "meta": {"date": "2025-01-01", "tags": ["t"]}}

def test_is_last_passes_through_and_empty_block():
    raw = RawDocument(id="d", title="D", sections=[RawSection(id="s", code_blocks=[
        RawCodeBlock(id="a", language="c", file_path="e.c", code="", is_last=True),
    ])])
    block = parse_document(raw).sections[0].code_blocks[0]
    assert block.is_last is True
    assert block.chunks == []
    assert block.final_content == ""
    assert parse_chunks("") == []
