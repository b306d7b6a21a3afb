"""Recognise anchored heading lines and rewrite them with cross-links.

A heading line carries its anchor after a second ``#``::

    ## Getting started # getting-started

Only lines whose anchor token is made of letters, digits, ``_`` and ``-`` are
treated as headings; everything else is left untouched as body text.
"""

from __future__ import annotations

from dataclasses import dataclass

from md2page.config import MAX_HEADING_LEVEL, TOC_ANCHOR_PREFIX

_MARKER = "#"
_IDENTIFIER_PUNCTUATION = frozenset("_-")


@dataclass(frozen=True)
class HeadingCandidate:
    """A line that looks like an anchored heading."""

    level: int
    title: str
    identifier: str


def classify_line(line: str) -> HeadingCandidate | None:
    """Split a ``#``-prefixed line into level, title and anchor token.

    Returns None when the line does not start with ``#`` or has no second ``#``
    after the leading run. The identifier is not validated here.
    """
    if not line.startswith(_MARKER):
        return None

    level = len(line) - len(line.lstrip(_MARKER))
    remainder = line[level:]
    delimiter = remainder.find(_MARKER)
    if delimiter < 0:
        return None

    return HeadingCandidate(
        level=level,
        title=remainder[:delimiter].strip(),
        identifier=remainder[delimiter + 1 :].strip(),
    )


def is_valid_identifier(token: str) -> bool:
    """Check that every character of ``token`` is safe inside an anchor."""
    return all(char.isalpha() or char.isdecimal() or char in _IDENTIFIER_PUNCTUATION for char in token)


def parse_heading_line(line: str) -> HeadingCandidate | None:
    """Return the heading on ``line``, or None if it must stay plain text."""
    candidate = classify_line(line)
    if candidate is None:
        return None
    if candidate.level > MAX_HEADING_LEVEL:
        return None
    if not is_valid_identifier(candidate.identifier):
        return None
    return candidate


def rewrite_heading_line(candidate: HeadingCandidate) -> str:
    """Render the Markdown line that replaces an accepted heading.

    The title links to its table of contents entry, a trailing ``[link]`` points
    at the heading itself and the ``{#id}`` attribute list defines the anchor.
    """
    return "{markers} [{title}](#{prefix}{identifier}) [[link](#{identifier})] {{#{identifier}}}\n".format(
        markers=_MARKER * candidate.level,
        title=candidate.title,
        prefix=TOC_ANCHOR_PREFIX,
        identifier=candidate.identifier,
    )
