"""Conversion pipeline: Markdown document -> HTML page with a table of contents."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from md2page.config import MD2PAGE_HIGHLIGHT_STYLE, MD2PAGE_LANG
from md2page.exceptions import OutputWriteError, SourceReadError
from md2page.markdown import convert_markdown_to_html
from md2page.page import PageTemplate, document_title
from md2page.scanner import ScannedDocument, scan_document, scan_text
from md2page.schemas import RenderedPage
from md2page.toc import count_headings, render_table_of_contents
from md2page.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class RenderOptions:
    """Options for page rendering.

    Attributes:
        lang: Value of the ``lang`` attribute on the page.
        highlight_style: Pygments style for fenced code blocks.
    """

    lang: str = MD2PAGE_LANG
    highlight_style: str = MD2PAGE_HIGHLIGHT_STYLE


def render_markdown(
    text: str,
    *,
    title: str,
    template: PageTemplate | None = None,
    options: RenderOptions | None = None,
) -> RenderedPage:
    """Render an in-memory Markdown document into a full page."""
    return _assemble(scan_text(text), title=title, template=template, options=options)


def render_document(
    path: str | os.PathLike[str],
    *,
    template: PageTemplate | None = None,
    options: RenderOptions | None = None,
) -> RenderedPage:
    """Read a Markdown file and render it into a full page.

    Every call re-reads and re-parses the file; nothing is cached.

    Args:
        path: Markdown source file.
        template: Page template. A default one is built if None.
        options: Rendering options. Uses defaults if None.

    Returns:
        The rendered page.

    Raises:
        SourceReadError: If the file cannot be opened, read or decoded.
        ConversionError: If Markdown conversion fails.
        TemplateRenderError: If the page template fails.
    """
    try:
        with open(path, encoding="utf-8") as source:
            scanned = scan_document(source)
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(f"Cannot read {os.fspath(path)}: {exc}") from exc

    return _assemble(scanned, title=document_title(path), template=template, options=options)


def write_document(
    source: str | os.PathLike[str],
    destination: str | os.PathLike[str],
    *,
    template: PageTemplate | None = None,
    options: RenderOptions | None = None,
) -> RenderedPage:
    """Render ``source`` and write the page to ``destination``.

    The destination is only touched once rendering has fully succeeded.

    Raises:
        OutputWriteError: If the destination cannot be written.
    """
    page = render_document(source, template=template, options=options)
    try:
        Path(destination).write_text(page.html, encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(f"Cannot write {os.fspath(destination)}: {exc}") from exc

    logger.info(
        "Wrote rendered page",
        extra={"source": os.fspath(source), "destination": os.fspath(destination), "headings": page.heading_count},
    )
    return page


def _assemble(
    scanned: ScannedDocument,
    *,
    title: str,
    template: PageTemplate | None,
    options: RenderOptions | None,
) -> RenderedPage:
    opts = options or RenderOptions()
    page_template = template or PageTemplate()

    table_of_contents = render_table_of_contents(scanned.headings)
    contents = convert_markdown_to_html(scanned.body, highlight_style=opts.highlight_style)
    html = page_template.render(
        lang=opts.lang,
        title=title,
        table_of_contents=table_of_contents,
        contents=contents,
    )
    heading_count = count_headings(scanned.headings)
    logger.debug("Rendered page", extra={"title": title, "headings": heading_count})

    return RenderedPage(
        title=title,
        table_of_contents=table_of_contents,
        content=contents,
        html=html,
        heading_count=heading_count,
    )
