# tests/conftest.py
"""
Pytest configuration and shared fixtures for Brightdoc tests
"""
import logging
import subprocess
from pathlib import Path

import pytest

import brightdoc.build_chapter as bc
import brightdoc.icons


def str_el(text):
    return {"t": "Str", "c": text}


def raw_block(text, fmt="html"):
    return {"t": "RawBlock", "c": [fmt, text]}


def raw_inline(text, fmt="html"):
    return {"t": "RawInline", "c": [fmt, text]}


def code_block(text, classes=(), identifier="", attributes=()):
    return {
        "t": "CodeBlock",
        "c": [[identifier, list(classes), [list(kv) for kv in attributes]], text],
    }


def para(*inlines):
    return {"t": "Para", "c": list(inlines)}


def make_doc(*blocks, meta=None):
    return {
        "pandoc-api-version": [1, 23, 1],
        "meta": meta or {},
        "blocks": list(blocks),
    }


@pytest.fixture(autouse=True)
def reset_root_logger():
    """setup_logging() installs handlers on the root logger; drop them between tests"""
    yield
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.WARNING)


@pytest.fixture(autouse=True)
def clean_brightdoc_env(monkeypatch, tmp_path):
    """Keep the developer's environment and ~/.brightdoc out of the tests"""
    for var in (
        "BRIGHTDOC_SOURCE_DIR",
        "BRIGHTDOC_OUTPUT_DIR",
        "BRIGHTDOC_PANDOC",
        "BRIGHTDOC_FILTER",
        "BRIGHTDOC_COMBINED_NAME",
        "BRIGHTDOC_NEW_TAB_LINKS",
        "BRIGHTDOC_UNESCAPE_ENTITIES",
        "BRIGHTDOC_VERBOSE",
    ):
        monkeypatch.delenv(var, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))


@pytest.fixture
def chapter_dir(tmp_path) -> Path:
    """A project folder with two chapters and no config"""
    project = tmp_path / "course"
    chapters = project / "chapters"
    chapters.mkdir(parents=True)

    (chapters / "01-intro.md").write_text(
        "# Intro\n\nIt\u2019s a \u201ctest\u201d.\n",
        encoding="utf-8",
    )
    (chapters / "02-loops.md").write_text(
        "# Loops\n\n```java\nfor (int i = 0; i < 3; i++) {}\n```\n\n",
        encoding="utf-8",
    )
    (chapters / "notes.txt").write_text("not a chapter", encoding="utf-8")
    return project


FAKE_HTML = '<p>&quot;{name}&quot; <a href="https://example.com">link</a></p>\n'


class FakePandoc:
    """Stands in for subprocess.run; writes HTML to the -o target"""

    def __init__(self, fail_on=()):
        self.calls = []
        self.fail_on = set(fail_on)

    def __call__(self, cmd, **kwargs):
        self.calls.append((cmd, kwargs))
        source = Path(cmd[-1])
        if source.name in self.fail_on:
            return subprocess.CompletedProcess(cmd, 64, stdout="", stderr="bad fence")
        dest = Path(cmd[cmd.index("-o") + 1])
        dest.write_text(FAKE_HTML.format(name=source.stem), encoding="utf-8")
        return subprocess.CompletedProcess(cmd, 0, stdout="", stderr="")


@pytest.fixture(autouse=True)
def restore_icons(monkeypatch):
    """--ascii swaps the module-level icon set; put it back after each test"""
    monkeypatch.setattr(brightdoc.icons, "icons", brightdoc.icons.icons)


@pytest.fixture
def fake_pandoc(monkeypatch) -> FakePandoc:
    """Replace the pandoc subprocess for the build driver"""
    fake = FakePandoc()
    monkeypatch.setattr(bc.subprocess, "run", fake)
    monkeypatch.setattr(bc.shutil, "which", lambda name: f"/usr/bin/{name}")
    return fake
