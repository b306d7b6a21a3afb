"""Command line entry point."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from md2page.config import MD2PAGE_HIGHLIGHT_STYLE, MD2PAGE_HOST, MD2PAGE_LANG, MD2PAGE_LOG_LEVEL
from md2page.exceptions import Md2pageError, SourceReadError
from md2page.page import PageTemplate
from md2page.rendering import RenderOptions, write_document
from md2page.scanner import scan_document
from md2page.toc import create_headings_outline
from md2page.utils.logging_config import configure_logging, get_logger
from server.main import serve

logger = get_logger(__name__)

_EPILOG = """examples:
  md2page project.md              # serves project.md on a localhost connection
  md2page project.md project.html # render project.md into project.html
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="md2page",
        description="Render a Markdown document with anchored headings into an HTML page with a table of contents.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("source", type=Path, help="Markdown document")
    parser.add_argument("destination", nargs="?", type=Path, help="write the page here instead of serving it")
    parser.add_argument("--host", default=MD2PAGE_HOST, help="interface to serve on (default: %(default)s)")
    parser.add_argument("--port", type=int, help="serve on this port only instead of probing 6060-6069")
    parser.add_argument("--lang", default=MD2PAGE_LANG, help="page language (default: %(default)s)")
    parser.add_argument(
        "--style",
        default=MD2PAGE_HIGHLIGHT_STYLE,
        help="Pygments style for code blocks (default: %(default)s)",
    )
    parser.add_argument("--outline", action="store_true", help="print the heading outline and exit")
    parser.add_argument("--log-level", default=MD2PAGE_LOG_LEVEL, help="logging level (default: %(default)s)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    options = RenderOptions(lang=args.lang, highlight_style=args.style)
    try:
        if args.outline:
            print(_outline(args.source))
            return 0
        template = PageTemplate()
        if args.destination is not None:
            write_document(args.source, args.destination, template=template, options=options)
            return 0
        serve(args.source, host=args.host, port=args.port, template=template, options=options)
    except Md2pageError as exc:
        logger.error("%s", exc)
        return 1
    except OSError as exc:
        logger.error("Cannot start server: %s", exc)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


def _outline(source: Path) -> str:
    try:
        with source.open(encoding="utf-8") as handle:
            scanned = scan_document(handle)
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(f"Cannot read {source}: {exc}") from exc
    return create_headings_outline(scanned.headings)


if __name__ == "__main__":
    sys.exit(main())
