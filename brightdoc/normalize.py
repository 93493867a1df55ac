"""
normalize.py - ASCII normalization for text pulled out of the document tree

Word processors and Markdown editors like to slip "smart" punctuation into
course text. The Brightspace theme and the code highlighter both expect
plain ASCII, so these glyphs are replaced before rendering.
"""

from typing import Optional

# Applied in this order. The source characters are disjoint, so the order
# never changes the result.
SMART_CHAR_REPLACEMENTS = (
    ("\u00a0", " "),    # non-breaking space
    ("\u2018", "'"),    # left single quotation mark
    ("\u2019", "'"),    # right single quotation mark / apostrophe
    ("\u201c", '"'),    # left double quotation mark
    ("\u201d", '"'),    # right double quotation mark
    ("\u2013", "-"),    # en dash
    ("\u2014", "--"),   # em dash
    ("\u2026", "..."),  # horizontal ellipsis
)

# ASCII whitespace only: a non-breaking space at the edge of a code block
# survives trimming and is turned into a plain space by normalize_text.
TRIM_CHARS = " \t\n\r\f\v"


def normalize_text(text: Optional[str]) -> str:
    """Replace smart punctuation with ASCII equivalents. None becomes ''."""
    if text is None:
        return ""
    for smart, plain in SMART_CHAR_REPLACEMENTS:
        text = text.replace(smart, plain)
    return text


def trim(text: Optional[str]) -> str:
    """
    Strip leading and trailing whitespace, newlines included.

    An all-whitespace string trims to '' and None becomes ''.
    """
    if text is None:
        return ""
    return text.strip(TRIM_CHARS)
