"""Shared fixtures for Instant Divider tests."""

from pathlib import Path

import pytest


NOTE_WITH_SECTIONS = """---
title: Meeting notes
tags: [work]
---
# Project

Intro paragraph.

---

First topic discussed at length

## Details

---
Second topic

---

---
Third
"""


@pytest.fixture
def note_text() -> str:
    """A note with frontmatter, headings and several dividers."""
    return NOTE_WITH_SECTIONS


@pytest.fixture
def note_file(tmp_path: Path, note_text: str) -> Path:
    """The sample note written to disk."""
    path = tmp_path / "note.md"
    path.write_text(note_text, encoding="utf-8")
    return path


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Isolated settings directory."""
    return tmp_path / "config"
