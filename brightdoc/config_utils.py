# config_utils.py - YAML Configuration System for Brightdoc
"""
Brightdoc configuration utilities with YAML file support.

Configuration Resolution Order (highest to lowest priority):
1. Command-line options (applied by the CLI via apply_overrides)
2. Environment variables (BRIGHTDOC_SOURCE_DIR, BRIGHTDOC_PANDOC, etc.)
3. brightdoc.yaml in the project root
4. ~/.brightdoc/config.yaml (global defaults)

Usage:
    from brightdoc.config_utils import get_config

    config = get_config()
    print(config.source_dir)
    print(config.sources["pandoc"])
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Dict, Any

import yaml

from brightdoc.errors import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "brightdoc.yaml"

TRUE_VALUES = {"1", "true", "yes", "on"}


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in TRUE_VALUES
    return bool(value)


@dataclass
class BrightdocConfig:
    """Complete Brightdoc configuration"""
    # Folders (relative paths resolve against project_root)
    source_dir: Optional[Path] = None
    output_dir: Optional[Path] = None

    # Pandoc invocation
    pandoc: str = "pandoc"
    filter_command: str = "brightdoc-filter"
    input_format: str = "markdown"

    # Combined chapter document (without extension)
    combined_name: str = "chapter"

    # HTML post-processing
    new_tab_links: bool = True
    unescape_entities: bool = True

    # Resolved at load time
    project_root: Optional[Path] = None

    # Extra settings from config file
    extra: Dict[str, Any] = field(default_factory=dict)

    # Track where values came from (for debugging)
    sources: Dict[str, str] = field(default_factory=dict)

    def resolved_source_dir(self) -> Path:
        return self._resolve(self.source_dir, Path("."))

    def resolved_output_dir(self) -> Path:
        return self._resolve(self.output_dir, Path("html"))

    def _resolve(self, value: Optional[Path], default: Path) -> Path:
        path = Path(value) if value is not None else default
        if not path.is_absolute():
            path = (self.project_root or Path.cwd()) / path
        return path


class ConfigLoader:
    """Load configuration from multiple sources"""

    # YAML key -> (attribute, converter)
    MAPPINGS = {
        "source_dir": ("source_dir", Path),
        "output_dir": ("output_dir", Path),
        "pandoc": ("pandoc", str),
        "filter_command": ("filter_command", str),
        "input_format": ("input_format", str),
        "combined_name": ("combined_name", str),
        "new_tab_links": ("new_tab_links", _as_bool),
        "unescape_entities": ("unescape_entities", _as_bool),
    }

    ENV_VARS = {
        "BRIGHTDOC_SOURCE_DIR": ("source_dir", Path),
        "BRIGHTDOC_OUTPUT_DIR": ("output_dir", Path),
        "BRIGHTDOC_PANDOC": ("pandoc", str),
        "BRIGHTDOC_FILTER": ("filter_command", str),
        "BRIGHTDOC_COMBINED_NAME": ("combined_name", str),
        "BRIGHTDOC_NEW_TAB_LINKS": ("new_tab_links", _as_bool),
        "BRIGHTDOC_UNESCAPE_ENTITIES": ("unescape_entities", _as_bool),
    }

    def __init__(self, project_dir: Optional[Path] = None, global_config: Optional[Path] = None):
        self.project_dir = Path(project_dir) if project_dir else Path.cwd()
        self.global_config = global_config or Path.home() / ".brightdoc" / "config.yaml"
        self.config = BrightdocConfig(project_root=self.project_dir)

    def load(self) -> BrightdocConfig:
        """Load configuration from all sources in priority order"""
        # Load in reverse priority (lowest first, higher overwrites)
        self._load_global_config()
        self._load_yaml_config()
        self._load_env_vars()
        return self.config

    def _load_global_config(self):
        """Load ~/.brightdoc/config.yaml if it exists"""
        if self.global_config.exists():
            self._load_yaml_file(self.global_config, "global")

    def _load_yaml_config(self):
        """Load brightdoc.yaml from project root"""
        yaml_path = self.project_dir / CONFIG_FILENAME
        if yaml_path.exists():
            self._load_yaml_file(yaml_path, CONFIG_FILENAME)

    def _load_yaml_file(self, path: Path, source_name: str):
        """Load settings from a YAML file"""
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                message=f"Could not parse {path.name}",
                suggestion="Fix the YAML syntax or delete the file to use defaults",
                context={"file": str(path)},
                cause=e,
            )

        if not isinstance(data, dict):
            raise ConfigurationError(
                message=f"{path.name} must contain a mapping of settings",
                suggestion="Start from a template: brightdoc init --force",
                context={"file": str(path), "found": type(data).__name__},
            )

        for yaml_key, (attr, convert) in self.MAPPINGS.items():
            if yaml_key in data and data[yaml_key] is not None:
                value = data[yaml_key]
                if convert is Path:
                    value = Path(str(value)).expanduser()
                else:
                    value = convert(value)
                setattr(self.config, attr, value)
                self.config.sources[attr] = source_name

        # Store any extra settings
        for key, value in data.items():
            if key not in self.MAPPINGS:
                logger.debug("Unknown setting %r in %s kept in extra", key, path)
                self.config.extra[key] = value

    def _load_env_vars(self):
        """Load from environment variables"""
        for env_var, (attr, convert) in self.ENV_VARS.items():
            raw = os.environ.get(env_var)
            if raw is None or raw == "":
                continue
            if convert is Path:
                value = Path(raw).expanduser()
            else:
                value = convert(raw)
            setattr(self.config, attr, value)
            self.config.sources[attr] = f"env:{env_var}"


def apply_overrides(config: BrightdocConfig, **overrides: Any) -> BrightdocConfig:
    """Apply command-line values (None means 'not given') on top of a config."""
    for attr, value in overrides.items():
        if value is None:
            continue
        if not hasattr(config, attr):
            raise ConfigurationError(
                message=f"Unknown setting: {attr}",
                context={"value": value},
            )
        setattr(config, attr, value)
        config.sources[attr] = "cli"
    return config


# ============================================================================
# Public API
# ============================================================================

def get_config(project_dir: Optional[Path] = None) -> BrightdocConfig:
    """
    Get complete Brightdoc configuration.

    Args:
        project_dir: Project directory (defaults to cwd)

    Returns:
        BrightdocConfig with all settings resolved
    """
    loader = ConfigLoader(project_dir)
    return loader.load()


def create_config_template(include_comments: bool = True) -> str:
    """
    Generate a brightdoc.yaml template.

    Args:
        include_comments: Whether to include explanatory comments

    Returns:
        YAML string ready to write to file
    """
    if include_comments:
        return '''# Brightdoc Configuration File

# Folder holding the chapter .md files (relative to this file)
source_dir: .

# Where the HTML goes
output_dir: html

# Name of the combined chapter document (no extension)
combined_name: chapter

# Pandoc executable and the filter it should run
pandoc: pandoc
filter_command: brightdoc-filter

# HTML clean-up after conversion
new_tab_links: true        # add target="_blank" to links
unescape_entities: true    # turn &quot; &lt; ... back into characters
'''
    else:
        return '''source_dir: .
output_dir: html
combined_name: chapter
pandoc: pandoc
filter_command: brightdoc-filter
new_tab_links: true
unescape_entities: true
'''
