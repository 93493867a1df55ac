"""
log_utils.py - Logging setup shared by the filter and the build driver

Output always goes to stderr: when pandoc runs brightdoc-filter, stdout
carries the JSON document and must stay clean.
"""

import logging
import sys

from brightdoc import icons as icon_module

# Message-only; no per-line timestamps
LOG_FORMAT = "%(message)s"


class IconLogFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        icon = icon_module.level_icon(record.levelno)
        base = super().format(record)
        return f"{icon} {base}"


def verbosity_to_level(verbosity: int) -> int:
    """Map a -v count to a logging level (0: WARNING, 1: INFO, 2+: DEBUG)."""
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def setup_logging(verbosity: int) -> None:
    level = verbosity_to_level(verbosity)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(IconLogFormatter(LOG_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(handler)
