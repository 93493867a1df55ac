# cli.py - Command-line interface for Brightdoc
"""
Brightdoc CLI - Markdown chapters to Brightspace D2L HTML

COMMANDS:
    brightdoc build [--source DIR] [--output DIR]   Convert a chapter folder
    brightdoc filter [FORMAT]                       Run the pandoc JSON filter
    brightdoc config                                Show resolved configuration
    brightdoc init [--force]                        Write a brightdoc.yaml template
    brightdoc version                               Show version information

EXAMPLES:
    # Convert every chapter in ./chapters into ./html plus html/chapter.html
    brightdoc build --source chapters --output html

    # Preview the pandoc commands
    brightdoc build --dry-run -v

    # Use the filter directly with pandoc
    pandoc week1.md -t html -o week1.html --filter brightdoc-filter
"""

from pathlib import Path
from typing import Optional

import click

from brightdoc import __version__
from brightdoc.build_chapter import build_folder
from brightdoc.code_filter import main as filter_command
from brightdoc.config_utils import (
    CONFIG_FILENAME,
    BrightdocConfig,
    apply_overrides,
    create_config_template,
    get_config,
)
from brightdoc.errors import BrightdocError
from brightdoc import icons as icon_module
from brightdoc.log_utils import setup_logging


# ============================================================================
# Click Group Setup
# ============================================================================

@click.group()
@click.option('--project-dir', type=click.Path(file_okay=False, path_type=Path),
              help='Project folder holding brightdoc.yaml (defaults to cwd)')
@click.option('--ascii', 'ascii_icons', is_flag=True, help='Use ASCII instead of emoji icons')
@click.pass_context
def cli(ctx, project_dir: Optional[Path], ascii_icons: bool):
    """
    Brightdoc - Markdown chapters to Brightspace D2L HTML
    """
    if ascii_icons:
        icon_module.use_ascii_icons()
    ctx.obj = project_dir or Path.cwd()


cli.add_command(filter_command, name="filter")


def _load_config(project_dir: Path) -> BrightdocConfig:
    try:
        return get_config(project_dir)
    except BrightdocError as e:
        raise click.ClickException(str(e))


# ============================================================================
# Build
# ============================================================================

@cli.command()
@click.option('--source', '-s', type=click.Path(path_type=Path), help='Folder holding the chapter .md files')
@click.option('--output', '-o', type=click.Path(path_type=Path), help='Folder for the HTML output')
@click.option('--combined-name', help='Name of the combined chapter document (no extension)')
@click.option('--no-new-tab', is_flag=True, help='Leave links without target="_blank"')
@click.option('--no-unescape', is_flag=True, help='Keep HTML entities as pandoc wrote them')
@click.option('--dry-run', '-n', is_flag=True, help='Show pandoc commands without running them')
@click.option('--verbose', '-v', count=True, help='More output (-v info, -vv debug)')
@click.pass_obj
def build(project_dir: Path, source: Optional[Path], output: Optional[Path],
          combined_name: Optional[str], no_new_tab: bool, no_unescape: bool,
          dry_run: bool, verbose: int):
    """
    Convert a folder of chapters

    Each chapter .md becomes an .html file in the output folder, and all
    chapters are stitched into one combined chapter document.

    Examples:
        brightdoc build
        brightdoc build --source chapters --output html
        brightdoc build --combined-name week-3 --dry-run
    """
    setup_logging(max(verbose, 1))

    config = apply_overrides(
        _load_config(project_dir),
        source_dir=source,
        output_dir=output,
        combined_name=combined_name,
        new_tab_links=False if no_new_tab else None,
        unescape_entities=False if no_unescape else None,
    )

    icons = icon_module.icons
    click.echo(f"{icons.FOLDER} Source: {config.resolved_source_dir()}")
    click.echo(f"{icons.FOLDER} Output: {config.resolved_output_dir()}")

    try:
        report = build_folder(config, dry_run=dry_run)
    except BrightdocError as e:
        raise click.ClickException(str(e))

    for path in report.converted:
        click.echo(f"{icons.CHAPTER} {path.name}")
    for path, reason in report.failed.items():
        click.echo(f"{icons.ERROR} {path.name}: {reason}", err=True)

    if dry_run:
        click.echo(f"\n{icons.INFO} Dry run complete! No files were written.")
    elif report.combined:
        click.echo(f"{icons.BOOK} {report.combined}")

    if not report.ok:
        raise click.ClickException(f"{len(report.failed)} conversion(s) failed")
    if not dry_run:
        click.echo(f"\n{icons.SUCCESS} Build complete!")


# ============================================================================
# Configuration
# ============================================================================

@cli.command(name="config")
@click.pass_obj
def show_config(project_dir: Path):
    """Show the resolved configuration and where each value came from"""
    config = _load_config(project_dir)

    rows = [
        ("source_dir", config.resolved_source_dir()),
        ("output_dir", config.resolved_output_dir()),
        ("combined_name", config.combined_name),
        ("pandoc", config.pandoc),
        ("filter_command", config.filter_command),
        ("input_format", config.input_format),
        ("new_tab_links", config.new_tab_links),
        ("unescape_entities", config.unescape_entities),
    ]

    click.echo("Brightdoc Configuration\n")
    click.echo("=" * 60)
    for name, value in rows:
        source = config.sources.get(name, "default")
        click.echo(f"{name:<18} {value}  ({source})")
    if config.extra:
        click.echo("\nUnrecognized settings:")
        for key, value in config.extra.items():
            click.echo(f"  {key}: {value}")


@cli.command()
@click.option('--force', is_flag=True, help='Overwrite an existing brightdoc.yaml')
@click.option('--no-comments', is_flag=True, help='Write the template without comments')
@click.pass_obj
def init(project_dir: Path, force: bool, no_comments: bool):
    """Write a brightdoc.yaml template into the project folder"""
    icons = icon_module.icons
    target = project_dir / CONFIG_FILENAME

    if target.exists() and not force:
        click.echo(f"{icons.WARNING} {CONFIG_FILENAME} already exists (use --force to overwrite)")
        return

    project_dir.mkdir(parents=True, exist_ok=True)
    target.write_text(create_config_template(include_comments=not no_comments), encoding="utf-8")
    click.echo(f"{icons.SUCCESS} Created {target}")


# ============================================================================
# Version
# ============================================================================

@cli.command()
def version():
    """Show Brightdoc version"""
    click.echo(f"Brightdoc CLI v{__version__}")
    click.echo("Markdown chapters to Brightspace D2L HTML")


# ============================================================================
# Entry Point
# ============================================================================

if __name__ == '__main__':
    cli()
