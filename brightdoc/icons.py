#!/usr/bin/env python3
"""
icons.py - Centralized icon definitions for Brightdoc output

Usage:
    from brightdoc.icons import icons
    click.echo(f"{icons.SUCCESS} Chapter built!")

All unicode characters are defined here once. Never edit unicode
characters in other files - import from this module instead.
"""

import logging
from dataclasses import dataclass


@dataclass(frozen=True)
class Icons:
    """
    Centralized icon definitions.

    Categories:
    - Status: SUCCESS, ERROR, WARNING, INFO, DEBUG, CRITICAL
    - Build: CHAPTER, BOOK, FOLDER
    """

    # =========================================================================
    # Status Icons
    # =========================================================================
    SUCCESS: str = "✅"      # Green checkmark - operation succeeded
    ERROR: str = "❌"        # Red X - operation failed
    WARNING: str = "⚠️"      # Warning triangle
    INFO: str = "ℹ️"         # Information
    DEBUG: str = "🔍"        # Magnifier - debug detail
    CRITICAL: str = "💥"     # Collision - unrecoverable

    # =========================================================================
    # Build Icons
    # =========================================================================
    CHAPTER: str = "📄"      # Single chapter file
    BOOK: str = "📖"         # Combined chapter document
    FOLDER: str = "📁"       # Folder


class AsciiIcons:
    """ASCII-only fallback icons for limited terminals."""

    SUCCESS = "[v]"
    ERROR = "[x]"
    WARNING = "[!]"
    INFO = "[i]"
    DEBUG = "[?]"
    CRITICAL = "[X]"
    CHAPTER = "[F]"
    BOOK = "[B]"
    FOLDER = "[D]"


# Global singleton instance
icons = Icons()


def use_ascii_icons() -> None:
    """
    Switch to ASCII-only icons globally.

    Call this if unicode icons cause problems (e.g. a Windows console
    that is not in UTF-8 mode).
    """
    global icons
    icons = AsciiIcons()


def level_icon(levelno: int) -> str:
    """Return the icon shown in front of a log record of this level."""
    level_map = {
        logging.DEBUG: icons.DEBUG,
        logging.INFO: icons.SUCCESS,
        logging.WARNING: icons.WARNING,
        logging.ERROR: icons.ERROR,
        logging.CRITICAL: icons.CRITICAL,
    }
    return level_map.get(levelno, icons.INFO)
