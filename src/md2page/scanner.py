"""Single pass over a document: rewrite heading lines and collect the tree."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Iterable

from md2page.headings import parse_heading_line, rewrite_heading_line
from md2page.hierarchy import HeadingTreeBuilder
from md2page.schemas import HeadingNode


@dataclass
class ScannedDocument:
    """Rewritten Markdown body and the headings found in it."""

    body: str
    headings: list[HeadingNode]


def scan_document(lines: Iterable[str]) -> ScannedDocument:
    """Rewrite anchored headings in ``lines`` and build their tree.

    Lines keep their terminators; anything that is not an accepted heading is
    copied verbatim. Errors raised while iterating ``lines`` propagate.
    """
    builder = HeadingTreeBuilder()
    parts: list[str] = []
    for line in lines:
        candidate = parse_heading_line(line)
        if candidate is None:
            parts.append(line)
            continue
        builder.add(candidate)
        parts.append(rewrite_heading_line(candidate))
    return ScannedDocument(body="".join(parts), headings=builder.headings)


def scan_text(text: str) -> ScannedDocument:
    """Scan an in-memory document."""
    return scan_document(io.StringIO(text))
