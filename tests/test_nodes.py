# tests/test_nodes.py
"""
Tests for nodes.py - decoding pandoc JSON into typed nodes
"""
import pytest

from brightdoc.nodes import (
    CodeBlock,
    Document,
    RawBlock,
    RawInline,
    Str,
    decode_element,
    encode_element,
)
from brightdoc.errors import AstFormatError

from conftest import code_block, make_doc, para, raw_block, raw_inline, str_el


class TestDecode:
    """Tests for decode_element"""

    def test_str(self):
        assert decode_element(str_el("hi")) == Str("hi")

    def test_raw_nodes(self):
        assert decode_element(raw_block("<div>")) == RawBlock("html", "<div>")
        assert decode_element(raw_inline("<br>", fmt="latex")) == RawInline("latex", "<br>")

    def test_code_block(self):
        node = decode_element(code_block("x = 1", ["python", "numberLines"], "ex1", [("startFrom", "3")]))
        assert node == CodeBlock(
            text="x = 1",
            classes=["python", "numberLines"],
            identifier="ex1",
            attributes=[("startFrom", "3")],
        )
        assert node.language == "python"

    def test_code_block_without_classes_has_no_language(self):
        assert decode_element(code_block("plain")).language is None

    def test_other_kinds_are_not_decoded(self):
        assert decode_element(para(str_el("x"))) is None
        assert decode_element({"t": "Space"}) is None
        assert decode_element("text") is None


class TestEncode:
    """encode_element writes the shape pandoc reads back"""

    def test_code_block_shape(self):
        node = CodeBlock(text="a", classes=["c"], identifier="id", attributes=[("k", "v")])
        assert encode_element(node) == code_block("a", ["c"], "id", [("k", "v")])

    def test_raw_block_shape(self):
        assert encode_element(RawBlock("html", "<hr>")) == raw_block("<hr>")

    def test_unknown_type_rejected(self):
        with pytest.raises(TypeError):
            encode_element(object())


class TestDocument:
    """Tests for Document.from_json / to_json"""

    def test_from_json(self):
        doc = Document.from_json(make_doc(para(str_el("x")), meta={"title": {"t": "MetaString", "c": "T"}}))
        assert doc.api_version == [1, 23, 1]
        assert doc.meta == {"title": {"t": "MetaString", "c": "T"}}
        assert doc.blocks == [para(str_el("x"))]

    def test_to_json_keeps_keys(self):
        data = make_doc(raw_block("<p>"))
        assert Document.from_json(data).to_json() == data

    def test_missing_keys(self):
        with pytest.raises(AstFormatError) as exc_info:
            Document.from_json({"blocks": []})
        assert "pandoc-api-version" in str(exc_info.value)

    def test_not_a_mapping(self):
        with pytest.raises(AstFormatError):
            Document.from_json([1, 2, 3])
