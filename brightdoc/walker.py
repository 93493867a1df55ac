"""
walker.py - Apply a filter visitor to a pandoc JSON document

Traversal is depth-first in document order over metadata and blocks.
Every element of a kind known to brightdoc.nodes is decoded and handed to
visitor.visit(); the Result it returns decides what happens:

    UNCHANGED      keep the original JSON element
    Replace(node)  put the encoded node in its place (not walked again)
    DELETE         remove the element from the list that holds it

Once every element has been visited, visit() is called one last time
with the whole Document, so document-level transforms see the output of
all per-element transforms.
"""

import logging
from typing import Any, Protocol

from brightdoc.nodes import Document, Node, decode_element, encode_element
from brightdoc.results import DELETE, Replace, Result, UNCHANGED

logger = logging.getLogger(__name__)


class Visitor(Protocol):
    def visit(self, node: Node) -> Result:
        ...


def _walk_list(items: list, visitor: Visitor) -> list:
    walked = []
    for item in items:
        node = decode_element(item)
        if node is None:
            walked.append(_walk(item, visitor))
            continue

        result = visitor.visit(node)
        if result is DELETE:
            continue
        if isinstance(result, Replace):
            walked.append(encode_element(result.node))
        else:
            walked.append(item)
    return walked


def _walk(value: Any, visitor: Visitor) -> Any:
    if isinstance(value, list):
        return _walk_list(value, visitor)
    if isinstance(value, dict):
        node = decode_element(value)
        if node is not None:
            # Known element outside a list: nothing to delete it from
            result = visitor.visit(node)
            if isinstance(result, Replace):
                return encode_element(result.node)
            return value
        return {key: _walk(child, visitor) for key, child in value.items()}
    return value


def walk_document(data: Any, visitor: Visitor) -> dict:
    """
    Run visitor over a pandoc JSON document and return the new JSON.

    Raises:
        AstFormatError: If data is not a pandoc document
    """
    doc = Document.from_json(data)
    doc.meta = _walk(doc.meta, visitor)
    doc.blocks = _walk_list(doc.blocks, visitor)

    result = visitor.visit(doc)
    if isinstance(result, Replace):
        if not isinstance(result.node, Document):
            raise TypeError(
                f"Document callback must replace with a Document, got {type(result.node).__name__}"
            )
        doc = result.node
    elif result is not UNCHANGED:
        logger.warning("Document callback asked to delete the document; keeping it")

    return doc.to_json()
