#!/usr/bin/env python3
"""
# Brightdoc
# Licensed under the MIT License. See LICENSE in the project root.

code_filter.py

Pandoc JSON filter that turns a chapter into Brightspace D2L ready HTML.

This filter:
1. Replaces "smart" Unicode punctuation in text with ASCII equivalents
2. Removes raw HTML nodes (block or inline) that are only an empty comment
3. Rewrites fenced code blocks in a supported language as D2L
   line-numbered <pre><code> blocks
4. Wraps the whole document once in the D2L head (stylesheets, CSS) and footer

Usage:
    pandoc chapter.md -t html -o chapter.html --filter brightdoc-filter

    # Debug output on stderr
    BRIGHTDOC_VERBOSE=2 pandoc chapter.md -t html --filter brightdoc-filter
"""

import json
import logging
import os
import re
import sys
from dataclasses import dataclass
from typing import Any, Optional, Union

import click

from brightdoc.nodes import (
    HTML_FORMAT,
    CodeBlock,
    Document,
    Node,
    RawBlock,
    RawInline,
    Str,
    encode_element,
)
from brightdoc.errors import BrightdocError, invalid_ast_error
from brightdoc.log_utils import setup_logging
from brightdoc.normalize import normalize_text, trim
from brightdoc.results import DELETE, Replace, Result, UNCHANGED
from brightdoc.templates import CODE_BLOCK_TEMPLATE, HTML_FOOTER, HTML_HEADER
from brightdoc.walker import walk_document

logger = logging.getLogger(__name__)


# Pandoc language classes that get the D2L code template
ACCEPTED_LANGUAGES = frozenset({
    "java",
    "bash",
    "python",
    "javascript",
    "armasm",
    "cpp",
    "c",
    "json",
})

# Exactly one comment with nothing but whitespace inside, optionally
# surrounded by whitespace. "<!-- a -->" and "<!-- --><!-- -->" don't match.
EMPTY_COMMENT_RE = re.compile(r"[ \t\n\r\f\v]*<!--[ \t\n\r\f\v]*-->[ \t\n\r\f\v]*")


@dataclass
class WrapperState:
    """Whether the D2L head/footer has been added during this run"""
    wrapped: bool = False


def is_empty_comment(text: Optional[str]) -> bool:
    return EMPTY_COMMENT_RE.fullmatch(text or "") is not None


def render_code_block(lang: str, text: Optional[str]) -> str:
    """Fill the D2L code template. lang is used verbatim."""
    code = normalize_text(trim(text))
    return CODE_BLOCK_TEMPLATE.format(lang=lang, code=code)


class D2LFilter:
    """
    Visitor with one case per node kind.

    A WrapperState is injected so the document wrapper fires at most once
    per run; pass the same state to every pass of a multi-pass run and a
    fresh one (the default) to each new document.
    """

    def __init__(self, state: Optional[WrapperState] = None):
        self.state = state if state is not None else WrapperState()

    def visit(self, node: Node) -> Result:
        if isinstance(node, Str):
            return self.visit_str(node)
        if isinstance(node, (RawBlock, RawInline)):
            return self.visit_raw(node)
        if isinstance(node, CodeBlock):
            return self.visit_code_block(node)
        if isinstance(node, Document):
            return self.visit_document(node)
        return UNCHANGED

    def visit_str(self, node: Str) -> Result:
        return Replace(Str(normalize_text(node.text)))

    def visit_raw(self, node: Union[RawBlock, RawInline]) -> Result:
        if node.format == HTML_FORMAT and is_empty_comment(node.text):
            logger.debug("Removing empty HTML comment %s", type(node).__name__)
            return DELETE
        return UNCHANGED

    def visit_code_block(self, node: CodeBlock) -> Result:
        lang = node.language
        if lang is None or lang not in ACCEPTED_LANGUAGES:
            logger.debug("Leaving code block with classes %s to pandoc", node.classes)
            return UNCHANGED

        logger.debug("Rendering %s code block for D2L", lang)
        return Replace(RawBlock(HTML_FORMAT, render_code_block(lang, node.text)))

    def visit_document(self, doc: Document) -> Result:
        if self.state.wrapped:
            return UNCHANGED

        self.state.wrapped = True
        doc.blocks.insert(0, encode_element(RawBlock(HTML_FORMAT, HTML_HEADER)))
        doc.blocks.append(encode_element(RawBlock(HTML_FORMAT, HTML_FOOTER)))
        logger.debug("Added D2L wrapper around %d blocks", len(doc.blocks) - 2)
        return Replace(doc)


def apply_filter(data: Any, state: Optional[WrapperState] = None) -> dict:
    """
    Run the D2L filter over one pandoc JSON document.

    Args:
        data: Decoded pandoc JSON (the object pandoc writes with -t json)
        state: Wrapper state for this run (fresh if not provided)

    Returns:
        The transformed document as pandoc JSON

    Raises:
        AstFormatError: If data is not a pandoc document
    """
    return walk_document(data, D2LFilter(state))


def _env_verbosity() -> int:
    raw = os.environ.get("BRIGHTDOC_VERBOSE", "").strip()
    try:
        return int(raw) if raw else 0
    except ValueError:
        return 0


@click.command(name="filter")
@click.argument("target_format", required=False)
@click.option("--verbose", "-v", count=True, help="Log to stderr (-v info, -vv debug)")
def main(target_format: Optional[str], verbose: int):
    """
    Read a pandoc JSON document on stdin, write the D2L version on stdout.

    TARGET_FORMAT is the output format pandoc passes to every filter; it is
    accepted and ignored.
    """
    setup_logging(max(verbose, _env_verbosity()))
    logger.debug("Filtering for target format: %s", target_format or "(none)")

    raw = sys.stdin.buffer.read()
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise click.ClickException(str(invalid_ast_error([], cause=e)))

    try:
        result = apply_filter(data)
    except BrightdocError as e:
        raise click.ClickException(str(e))

    click.echo(json.dumps(result))


if __name__ == "__main__":
    main()
