"""
Brightdoc - Markdown chapters to Brightspace D2L HTML

A pandoc JSON filter that normalizes punctuation, drops empty HTML
comments, re-templates code blocks for the D2L line-numbers theme and
wraps the document in the D2L head, plus a driver that builds a whole
folder of chapters into one combined chapter document.
"""

__version__ = "1.0.0"
__license__ = "MIT"

from .errors import BrightdocError, ConfigurationError, ConversionError, AstFormatError
from .code_filter import D2LFilter, WrapperState, apply_filter

__all__ = [
    "__version__",
    "BrightdocError",
    "ConfigurationError",
    "ConversionError",
    "AstFormatError",
    "D2LFilter",
    "WrapperState",
    "apply_filter",
]
