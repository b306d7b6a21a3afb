"""Build the heading tree while a document is scanned top to bottom."""

from __future__ import annotations

from md2page.config import MAX_HEADING_LEVEL
from md2page.headings import HeadingCandidate
from md2page.schemas import HeadingNode


class HeadingTreeBuilder:
    """Attach each accepted heading to its parent as it is encountered.

    ``_frontier[level]`` holds the most recent heading accepted at that level.
    A heading's natural parent is the frontier entry one level up. When that
    entry is empty (a level was skipped before any heading existed there), the
    heading is adopted by the fallback anchor instead. The fallback anchor
    starts at the root and moves to every new heading exactly one level deeper
    than itself.

    Frontier entries are never cleared, so a later heading may attach under a
    deeper heading from an earlier subtree. Skipped-level placement is a
    heuristic and can disagree with what the author meant.
    """

    def __init__(self) -> None:
        self.root = HeadingNode.root()
        self._frontier: list[HeadingNode | None] = [None] * (MAX_HEADING_LEVEL + 1)
        self._frontier[0] = self.root
        self._fallback = self.root

    @property
    def headings(self) -> list[HeadingNode]:
        """Top-level headings in document order."""
        return self.root.children

    def add(self, candidate: HeadingCandidate) -> HeadingNode:
        """Insert an accepted heading and return its node."""
        level = candidate.level
        if not 1 <= level <= MAX_HEADING_LEVEL:
            raise ValueError(f"Heading level must be between 1 and {MAX_HEADING_LEVEL}, got {level}")

        node = HeadingNode(title=candidate.title, identifier=candidate.identifier, level=level)
        parent = self._frontier[level - 1]
        if parent is None:
            parent = self._fallback
        parent.children.append(node)
        self._frontier[level] = node

        if node.level == self._fallback.level + 1:
            self._fallback = node
        return node
