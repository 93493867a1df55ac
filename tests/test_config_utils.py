# tests/test_config_utils.py
"""
Tests for config_utils.py - Configuration loading with YAML support
"""
from pathlib import Path

import pytest
import yaml

from brightdoc.config_utils import (
    CONFIG_FILENAME,
    BrightdocConfig,
    ConfigLoader,
    apply_overrides,
    create_config_template,
    get_config,
)
from brightdoc.errors import ConfigurationError


class TestBrightdocConfig:
    """Tests for BrightdocConfig dataclass"""

    def test_default_values(self):
        config = BrightdocConfig()

        assert config.pandoc == "pandoc"
        assert config.filter_command == "brightdoc-filter"
        assert config.combined_name == "chapter"
        assert config.new_tab_links is True
        assert config.unescape_entities is True
        assert config.sources == {}

    def test_relative_dirs_resolve_against_project_root(self, tmp_path):
        config = BrightdocConfig(project_root=tmp_path, source_dir=Path("chapters"))

        assert config.resolved_source_dir() == tmp_path / "chapters"
        assert config.resolved_output_dir() == tmp_path / "html"

    def test_absolute_dirs_kept(self, tmp_path):
        config = BrightdocConfig(project_root=Path("/elsewhere"), output_dir=tmp_path)
        assert config.resolved_output_dir() == tmp_path


class TestConfigLoader:
    """Tests for ConfigLoader"""

    def test_defaults_without_files(self, tmp_path):
        config = get_config(tmp_path)

        assert config.project_root == tmp_path
        assert config.resolved_source_dir() == tmp_path / "."
        assert config.sources == {}

    def test_yaml_config(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text(
            "source_dir: chapters\n"
            "output_dir: out\n"
            "combined_name: week-3\n"
            "new_tab_links: false\n"
            "theme: dark\n"
        )
        config = get_config(tmp_path)

        assert config.resolved_source_dir() == tmp_path / "chapters"
        assert config.resolved_output_dir() == tmp_path / "out"
        assert config.combined_name == "week-3"
        assert config.new_tab_links is False
        assert config.sources["combined_name"] == CONFIG_FILENAME
        assert config.extra == {"theme": "dark"}

    def test_global_config_lowest_priority(self, tmp_path):
        global_file = tmp_path / "global.yaml"
        global_file.write_text("pandoc: /opt/pandoc\ncombined_name: global\n")
        (tmp_path / CONFIG_FILENAME).write_text("combined_name: local\n")

        config = ConfigLoader(tmp_path, global_config=global_file).load()

        assert config.pandoc == "/opt/pandoc"
        assert config.sources["pandoc"] == "global"
        assert config.combined_name == "local"

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        (tmp_path / CONFIG_FILENAME).write_text("pandoc: from-yaml\nunescape_entities: true\n")
        monkeypatch.setenv("BRIGHTDOC_PANDOC", "from-env")
        monkeypatch.setenv("BRIGHTDOC_UNESCAPE_ENTITIES", "no")

        config = get_config(tmp_path)

        assert config.pandoc == "from-env"
        assert config.sources["pandoc"] == "env:BRIGHTDOC_PANDOC"
        assert config.unescape_entities is False

    def test_string_flags_in_yaml(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text('new_tab_links: "off"\n')
        assert get_config(tmp_path).new_tab_links is False

    def test_invalid_yaml(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text("source_dir: [unclosed\n")
        with pytest.raises(ConfigurationError) as exc_info:
            get_config(tmp_path)
        assert "Could not parse" in str(exc_info.value)

    def test_yaml_not_a_mapping(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError):
            get_config(tmp_path)

    def test_empty_yaml(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text("")
        assert get_config(tmp_path).combined_name == "chapter"


class TestApplyOverrides:

    def test_none_values_ignored(self):
        config = apply_overrides(BrightdocConfig(), pandoc=None, combined_name="x")

        assert config.pandoc == "pandoc"
        assert config.combined_name == "x"
        assert config.sources == {"combined_name": "cli"}

    def test_unknown_setting(self):
        with pytest.raises(ConfigurationError):
            apply_overrides(BrightdocConfig(), colour="red")


class TestConfigTemplate:

    @pytest.mark.parametrize("include_comments", [True, False])
    def test_template_is_valid_yaml(self, include_comments, tmp_path):
        text = create_config_template(include_comments=include_comments)
        data = yaml.safe_load(text)

        assert data["combined_name"] == "chapter"
        assert data["new_tab_links"] is True

        (tmp_path / CONFIG_FILENAME).write_text(text)
        assert get_config(tmp_path).extra == {}
