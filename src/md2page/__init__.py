"""md2page: render anchored Markdown documents into HTML pages with a table of contents."""

from md2page.exceptions import (
    ConversionError,
    Md2pageError,
    OutputWriteError,
    SourceReadError,
    TemplateRenderError,
)
from md2page.page import PageTemplate
from md2page.rendering import RenderOptions, render_document, render_markdown, write_document
from md2page.scanner import ScannedDocument, scan_document, scan_text
from md2page.schemas import HeadingNode, RenderedPage

__all__ = [
    "ConversionError",
    "HeadingNode",
    "Md2pageError",
    "OutputWriteError",
    "PageTemplate",
    "RenderOptions",
    "RenderedPage",
    "ScannedDocument",
    "SourceReadError",
    "TemplateRenderError",
    "render_document",
    "render_markdown",
    "scan_document",
    "scan_text",
    "write_document",
]
