"""
postprocess.py - Text-level cleanup of the HTML pandoc writes

Brightspace's editor re-escapes content on save, so entities pandoc
emits are turned back into plain characters, and links open in a new tab
so students don't navigate away from the course shell.
"""

import re

# Applied in this order; &amp; goes before &lt; and &gt;:
# "&amp;lt;" therefore ends up as "<".
ENTITY_REPLACEMENTS = (
    ("&quot;", '"'),
    ("&apos;", "'"),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
)

# Quoted attribute values may contain ">".
ANCHOR_OPEN_RE = re.compile(
    r"<a(?=[\s/>])(?P<attrs>(?:'[^']*'" r'|"[^"]*"' r"|[^'\">])*)>",
    re.IGNORECASE,
)
TARGET_ATTR_RE = re.compile(r"\btarget\s*=", re.IGNORECASE)


def unescape_entities(html: str) -> str:
    if html is None:
        return ""
    for entity, char in ENTITY_REPLACEMENTS:
        html = html.replace(entity, char)
    return html


def add_link_targets(html: str) -> str:
    """Add target="_blank" to every <a> tag that doesn't set a target."""
    if html is None:
        return ""

    def _repl(match: re.Match) -> str:
        attrs = match.group("attrs")
        if TARGET_ATTR_RE.search(attrs):
            return match.group(0)
        closing = ""
        if attrs.endswith("/"):
            attrs, closing = attrs[:-1], "/"
        return f'<a{attrs} target="_blank"{closing}>'

    return ANCHOR_OPEN_RE.sub(_repl, html)


def postprocess_html(html: str, unescape: bool = True, new_tab_links: bool = True) -> str:
    if unescape:
        html = unescape_entities(html)
    if new_tab_links:
        html = add_link_targets(html)
    return html
