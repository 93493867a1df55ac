#!/usr/bin/env python3
"""
# Brightdoc
# Licensed under the MIT License. See LICENSE in the project root.

build_chapter.py

Convert a folder of Markdown chapters into D2L HTML.

This script:
1. Checks the source folder exists and creates the output folder
2. Converts each chapter .md with pandoc + brightdoc-filter
3. Cleans up the HTML (entities back to characters, links in a new tab)
4. Concatenates the chapter sources into one combined .md and converts
   it in a second pass, giving a single chapter document

Usage:
    python -m brightdoc.build_chapter [--source DIR] [--output DIR] [--dry-run] [-v]
"""

import argparse
import logging
import shutil
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from brightdoc.config_utils import BrightdocConfig, apply_overrides, get_config
from brightdoc.errors import (
    ConversionError,
    PandocNotFoundError,
    missing_source_dir_error,
    pandoc_not_found_error,
    conversion_failed_error,
)
from brightdoc.log_utils import setup_logging
from brightdoc.postprocess import postprocess_html

logger = logging.getLogger(__name__)

CHAPTER_GLOB = "*.md"
OUTPUT_FORMAT = "html"


@dataclass
class BuildReport:
    """Outcome of one folder build"""
    converted: List[Path] = field(default_factory=list)
    failed: Dict[Path, str] = field(default_factory=dict)
    combined: Optional[Path] = None
    dry_run: bool = False

    @property
    def ok(self) -> bool:
        return not self.failed


class ChapterBuilder:
    """Runs pandoc over every chapter in one folder"""

    def __init__(self, config: BrightdocConfig, dry_run: bool = False):
        self.config = config
        self.dry_run = dry_run
        self.source_dir = config.resolved_source_dir()
        self.output_dir = config.resolved_output_dir()

    @property
    def combined_source(self) -> Path:
        return self.output_dir / f"{self.config.combined_name}.md"

    @property
    def combined_output(self) -> Path:
        return self.output_dir / f"{self.config.combined_name}.{OUTPUT_FORMAT}"

    # -------------------------------------------------------------------------
    # Checks
    # -------------------------------------------------------------------------

    def check_folders(self) -> None:
        if not self.source_dir.is_dir():
            raise missing_source_dir_error(self.source_dir)
        if not self.dry_run:
            self.output_dir.mkdir(parents=True, exist_ok=True)

    def check_pandoc(self) -> None:
        if shutil.which(self.config.pandoc) is None:
            raise pandoc_not_found_error(self.config.pandoc)

    def find_chapters(self) -> List[Path]:
        """Chapter sources in name order, never the combined document itself."""
        combined = self.combined_source.resolve()
        return sorted(
            p for p in self.source_dir.glob(CHAPTER_GLOB)
            if p.is_file() and p.resolve() != combined
        )

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def pandoc_command(self, source: Path, dest: Path) -> List[str]:
        return [
            self.config.pandoc,
            "-f", self.config.input_format,
            "-t", OUTPUT_FORMAT,
            "--filter", self.config.filter_command,
            "-o", str(dest),
            str(source),
        ]

    def convert(self, source: Path, dest: Path) -> None:
        """
        Convert one Markdown file to post-processed HTML.

        Raises:
            ConversionError: If pandoc is missing or exits non-zero
        """
        cmd = self.pandoc_command(source, dest)
        if self.dry_run:
            logger.info("Would run: %s", " ".join(cmd))
            return

        logger.debug("Running: %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                cwd=str(self.source_dir),
                capture_output=True,
                text=True,
                encoding="utf-8",
            )
        except FileNotFoundError as e:
            raise pandoc_not_found_error(self.config.pandoc, cause=e)

        if result.stderr.strip():
            logger.debug("pandoc stderr for %s:\n%s", source.name, result.stderr.strip())
        if result.returncode != 0:
            raise conversion_failed_error(source, result.returncode, result.stderr)

        self.postprocess(dest)

    def postprocess(self, html_path: Path) -> None:
        html = html_path.read_text(encoding="utf-8")
        html = postprocess_html(
            html,
            unescape=self.config.unescape_entities,
            new_tab_links=self.config.new_tab_links,
        )
        html_path.write_text(html, encoding="utf-8")

    def write_combined_source(self, chapters: List[Path]) -> Path:
        """Concatenate chapter sources, separated by a blank line."""
        parts = [c.read_text(encoding="utf-8").rstrip("\n") for c in chapters]
        combined = self.combined_source
        if self.dry_run:
            logger.info("Would combine %d chapters into %s", len(chapters), combined)
        else:
            combined.write_text("\n\n".join(parts) + "\n", encoding="utf-8")
        return combined

    # -------------------------------------------------------------------------
    # Entry point
    # -------------------------------------------------------------------------

    def build(self) -> BuildReport:
        report = BuildReport(dry_run=self.dry_run)

        self.check_folders()
        if not self.dry_run:
            self.check_pandoc()

        chapters = self.find_chapters()
        if not chapters:
            logger.warning("No %s files in %s", CHAPTER_GLOB, self.source_dir)
            return report

        logger.info("Converting %d chapters from %s", len(chapters), self.source_dir)
        for chapter in chapters:
            dest = self.output_dir / f"{chapter.stem}.{OUTPUT_FORMAT}"
            try:
                self.convert(chapter, dest)
            except PandocNotFoundError:
                raise
            except ConversionError as e:
                logger.error("Failed to convert %s: %s", chapter.name, e.message)
                report.failed[chapter] = e.message
                continue
            logger.info("Converted %s -> %s", chapter.name, dest.name)
            report.converted.append(dest)

        combined_source = self.write_combined_source(chapters)
        try:
            self.convert(combined_source, self.combined_output)
        except ConversionError as e:
            logger.error("Failed to build combined chapter: %s", e.message)
            report.failed[combined_source] = e.message
        else:
            report.combined = self.combined_output
            logger.info("Combined chapter written to %s", self.combined_output)

        return report


def build_folder(
    config: Optional[BrightdocConfig] = None,
    dry_run: bool = False,
) -> BuildReport:
    """Build one chapter folder with the given (or loaded) configuration."""
    if config is None:
        config = get_config()
    return ChapterBuilder(config, dry_run=dry_run).build()


# -----------------------------------------------------------------------------
# Script entrypoint
# -----------------------------------------------------------------------------

def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Convert a folder of Markdown chapters into Brightspace D2L HTML."
    )
    parser.add_argument("--source", "-s", help="Folder holding the chapter .md files")
    parser.add_argument("--output", "-o", help="Folder for the HTML output")
    parser.add_argument("--dry-run", "-n", action="store_true", help="Show pandoc commands without running them")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v for more info, -vv for debug logging)",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    setup_logging(args.verbose)

    config = apply_overrides(
        get_config(),
        source_dir=Path(args.source) if args.source else None,
        output_dir=Path(args.output) if args.output else None,
    )
    report = build_folder(config, dry_run=args.dry_run)
    if not report.ok:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
