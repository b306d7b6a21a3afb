"""Test setup for md2page."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


SAMPLE_DOCUMENT = """\
# Project # project

Intro paragraph.

## Install # install

```bash
pip install md2page
```

## Usage ## not an id

### Serving # serving

#hashtag line

| a | b |
|---|---|
| 1 | 2 |
"""


@pytest.fixture
def sample_text() -> str:
    """Markdown document with anchored headings, a rejected heading and a table."""
    return SAMPLE_DOCUMENT


@pytest.fixture
def sample_document(tmp_path: Path) -> Path:
    """Sample document written to disk."""
    path = tmp_path / "project.md"
    path.write_text(SAMPLE_DOCUMENT, encoding="utf-8")
    return path
