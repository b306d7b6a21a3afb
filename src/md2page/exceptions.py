"""Custom exceptions for md2page."""


class Md2pageError(Exception):
    """Base exception for md2page operations."""


class SourceReadError(Md2pageError):
    """The source document cannot be opened, read or decoded."""


class ConversionError(Md2pageError):
    """Error during Markdown to HTML conversion."""


class TemplateRenderError(Md2pageError):
    """The page template failed to render."""


class OutputWriteError(Md2pageError):
    """The rendered page cannot be written to its destination."""
