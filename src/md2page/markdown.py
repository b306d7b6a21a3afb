"""Convert rewritten Markdown into HTML."""

from __future__ import annotations

import markdown

from md2page.config import MD2PAGE_HIGHLIGHT_STYLE
from md2page.exceptions import ConversionError

_EXTENSIONS = ["tables", "fenced_code", "codehilite", "attr_list"]


def convert_markdown_to_html(text: str, *, highlight_style: str = MD2PAGE_HIGHLIGHT_STYLE) -> str:
    """Render a Markdown document body to an HTML fragment.

    Raw HTML is passed through. Code blocks are highlighted with Pygments using
    inline styles so the page needs no extra stylesheet.

    Parameters
    ----------
    text : str
        Markdown source, with heading lines already rewritten.
    highlight_style : str
        Name of the Pygments style used for fenced code blocks.
    """
    md = markdown.Markdown(
        extensions=_EXTENSIONS,
        extension_configs={
            "codehilite": {
                "noclasses": True,
                "pygments_style": highlight_style,
                "guess_lang": False,
            },
        },
        output_format="html",
    )
    try:
        return md.convert(text)
    except Exception as exc:
        raise ConversionError(f"Failed to convert Markdown to HTML: {exc}") from exc
