"""Assemble the final HTML page from the rendered parts."""

from __future__ import annotations

import os

from jinja2 import Environment, PackageLoader, TemplateError, select_autoescape
from markupsafe import Markup

from md2page.exceptions import TemplateRenderError

DEFAULT_TEMPLATE_NAME = "base.html"


class PageTemplate:
    """Jinja2 page template wrapping the table of contents and the body.

    Build one instance up front and pass it to every conversion; rendering
    does not mutate it, so it is safe to share between concurrent requests.
    """

    def __init__(self, environment: Environment | None = None, template_name: str = DEFAULT_TEMPLATE_NAME) -> None:
        self.environment = environment or Environment(
            loader=PackageLoader("md2page", "templates"),
            autoescape=select_autoescape(["html", "xml"]),
        )
        self.template = self.environment.get_template(template_name)

    def render(self, *, lang: str, title: str, table_of_contents: str, contents: str) -> str:
        """Render the page. ``table_of_contents`` and ``contents`` must already be safe HTML."""
        try:
            return self.template.render(
                lang=lang,
                title=title,
                table_of_contents=Markup(table_of_contents),
                contents=Markup(contents),
            )
        except TemplateError as exc:
            raise TemplateRenderError(f"Failed to render page template: {exc}") from exc


def document_title(path: str | os.PathLike[str]) -> str:
    """Page title for a source path: the normalised path without its extension."""
    cleaned = os.path.normpath(os.fspath(path))
    root, _ = os.path.splitext(cleaned)
    return root
