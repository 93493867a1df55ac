"""
nodes.py - Typed view of the pandoc JSON document

Pandoc hands a filter the whole document as JSON. Only the element kinds
the D2L filter reacts to get a typed node here; everything else stays as
the plain JSON pandoc produced and is carried through untouched.

Element shapes (pandoc API 1.22+):
    Str        {"t": "Str", "c": "text"}
    RawBlock   {"t": "RawBlock", "c": ["html", "<!-- -->"]}
    RawInline  {"t": "RawInline", "c": ["html", "<br>"]}
    CodeBlock  {"t": "CodeBlock", "c": [["id", ["java"], [["k", "v"]]], "code"]}
    Document   {"pandoc-api-version": [1, 23, 1], "meta": {...}, "blocks": [...]}
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from brightdoc.errors import invalid_ast_error

JSON = Dict[str, Any]

HTML_FORMAT = "html"


@dataclass
class Str:
    """Plain-text leaf"""
    text: str


@dataclass
class RawBlock:
    """Block of target-format text inserted verbatim"""
    format: str
    text: str


@dataclass
class RawInline:
    """Inline target-format text inserted verbatim"""
    format: str
    text: str


@dataclass
class CodeBlock:
    """Fenced code block; the first class is the language"""
    text: str
    classes: List[str] = field(default_factory=list)
    identifier: str = ""
    attributes: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def language(self) -> Optional[str]:
        return self.classes[0] if self.classes else None


@dataclass
class Document:
    """Whole document: opaque metadata plus the ordered top-level blocks"""
    blocks: List[Any]
    meta: JSON = field(default_factory=dict)
    api_version: List[int] = field(default_factory=lambda: [1, 23, 1])

    @classmethod
    def from_json(cls, data: Any) -> "Document":
        if not isinstance(data, dict):
            raise invalid_ast_error(["pandoc-api-version", "meta", "blocks"])
        missing = [k for k in ("pandoc-api-version", "meta", "blocks") if k not in data]
        if missing:
            raise invalid_ast_error(missing)
        return cls(
            blocks=list(data["blocks"]),
            meta=data["meta"],
            api_version=list(data["pandoc-api-version"]),
        )

    def to_json(self) -> JSON:
        return {
            "pandoc-api-version": self.api_version,
            "meta": self.meta,
            "blocks": self.blocks,
        }


# Closed set of node kinds the filter dispatches on
Node = Union[Str, RawBlock, RawInline, CodeBlock, Document]


def decode_element(element: Any) -> Optional[Node]:
    """Return the typed node for a pandoc JSON element, or None for other kinds."""
    if not isinstance(element, dict):
        return None
    tag = element.get("t")
    content = element.get("c")

    if tag == "Str":
        return Str(text=content if content is not None else "")
    if tag == "RawBlock":
        fmt, text = content
        return RawBlock(format=fmt, text=text)
    if tag == "RawInline":
        fmt, text = content
        return RawInline(format=fmt, text=text)
    if tag == "CodeBlock":
        (identifier, classes, attributes), text = content
        return CodeBlock(
            text=text,
            classes=list(classes),
            identifier=identifier,
            attributes=[(k, v) for k, v in attributes],
        )
    return None


def encode_element(node: Node) -> JSON:
    """Inverse of decode_element."""
    if isinstance(node, Str):
        return {"t": "Str", "c": node.text}
    if isinstance(node, RawBlock):
        return {"t": "RawBlock", "c": [node.format, node.text]}
    if isinstance(node, RawInline):
        return {"t": "RawInline", "c": [node.format, node.text]}
    if isinstance(node, CodeBlock):
        attr = [node.identifier, list(node.classes), [[k, v] for k, v in node.attributes]]
        return {"t": "CodeBlock", "c": [attr, node.text]}
    if isinstance(node, Document):
        return node.to_json()
    raise TypeError(f"Cannot encode {type(node).__name__}")
