"""Render a heading tree as a table of contents."""

from __future__ import annotations

import html
from typing import Iterable
from urllib.parse import quote_plus

from md2page.config import TOC_ANCHOR_PREFIX
from md2page.schemas import HeadingNode


def render_table_of_contents(headings: list[HeadingNode]) -> str:
    """Render ``headings`` as nested ``<ul>`` lists.

    Each entry links to its heading and carries the ``toc-`` anchor the heading
    links back to. An empty list renders as an empty string.
    """
    parts: list[str] = []
    _render_list(parts, headings)
    return "".join(parts)


def _render_list(parts: list[str], headings: list[HeadingNode]) -> None:
    if not headings:
        return
    parts.append("<ul>")
    for heading in headings:
        parts.append(
            '\n<li><a id="{toc_id}" href="#{anchor}">{title}</a>'.format(
                toc_id=quote_plus(TOC_ANCHOR_PREFIX + heading.identifier),
                anchor=quote_plus(heading.identifier),
                title=html.escape(heading.title),
            )
        )
        _render_list(parts, heading.children)
        parts.append("</li>")
    parts.append("\n</ul>")


def count_headings(headings: Iterable[HeadingNode]) -> int:
    """Count total headings in the tree."""
    total = 0
    for heading in headings:
        total += 1
        total += count_headings(heading.children)
    return total


def create_headings_outline(headings: list[HeadingNode], indent: int = 0) -> str:
    """Plain-text outline of the tree, one heading per line."""
    lines: list[str] = []
    for heading in headings:
        lines.append(" " * (indent * 4) + f"{heading.title} (#{heading.identifier})")
        if heading.children:
            lines.append(create_headings_outline(heading.children, indent + 1))
    return "\n".join(lines)
