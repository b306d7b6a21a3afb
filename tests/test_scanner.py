"""Tests for the document scanner."""

from __future__ import annotations

from typing import Iterator

import pytest

from md2page.headings import is_valid_identifier
from md2page.scanner import scan_document, scan_text
from md2page.schemas import HeadingNode


def _walk(nodes: list[HeadingNode]) -> Iterator[HeadingNode]:
    for node in nodes:
        yield node
        yield from _walk(node.children)


class TestScanDocument:
    """Tests for scan_document and scan_text."""

    def test_document_without_headings_is_unchanged(self) -> None:
        """Without headings the body is a verbatim copy and the tree is empty."""
        text = "Plain text.\n\n#hashtag\n## Title ## not an id\n"

        result = scan_text(text)

        assert result.body == text
        assert result.headings == []

    def test_rewrites_accepted_headings_only(self, sample_text: str) -> None:
        """Accepted headings are rewritten and everything else is kept."""
        result = scan_text(sample_text)
        lines = result.body.splitlines()

        assert lines[0] == "# [Project](#toc-project) [[link](#project)] {#project}"
        assert "Intro paragraph." in lines
        assert "## Usage ## not an id" in lines
        assert "#hashtag line" in lines
        assert "### [Serving](#toc-serving) [[link](#serving)] {#serving}" in lines

    def test_builds_tree(self, sample_text: str) -> None:
        """The sample document nests Serving under Install under Project."""
        result = scan_text(sample_text)

        assert [node.identifier for node in result.headings] == ["project"]
        project = result.headings[0]
        assert [node.identifier for node in project.children] == ["install"]
        assert [node.identifier for node in project.children[0].children] == ["serving"]

    def test_processes_final_line_without_terminator(self) -> None:
        """The last line is handled even without a trailing newline."""
        result = scan_text("Text\n# End # end")

        assert result.body == "Text\n# [End](#toc-end) [[link](#end)] {#end}\n"
        assert [node.title for node in result.headings] == ["End"]

    def test_keeps_line_terminators_of_plain_lines(self) -> None:
        """Plain lines are copied with their original terminators."""
        result = scan_document(["a\r\n", "b"])

        assert result.body == "a\r\nb"

    def test_accepted_headings_satisfy_level_and_identifier_rules(self) -> None:
        """Every node in the tree has a level from 1 to 6 and a safe identifier."""
        text = "\n".join(
            [
                "####### Seven # seven",
                "# One # one",
                "### Three # three",
                "## Bad # a.b",
                "###### Six # six",
                "## Two # two_2",
            ]
        )

        result = scan_text(text)
        nodes = list(_walk(result.headings))

        assert [node.identifier for node in nodes] == ["one", "three", "six", "two_2"]
        assert all(1 <= node.level <= 6 for node in nodes)
        assert all(is_valid_identifier(node.identifier) for node in nodes)

    def test_read_errors_propagate(self) -> None:
        """An error while reading lines aborts the scan."""

        def broken_lines() -> Iterator[str]:
            yield "# Start # start\n"
            raise OSError("disk vanished")

        with pytest.raises(OSError, match="disk vanished"):
            scan_document(broken_lines())

    def test_repeated_scans_are_identical(self, sample_text: str) -> None:
        """Scanning twice gives equal results."""
        first = scan_text(sample_text)
        second = scan_text(sample_text)

        assert first.body == second.body
        assert first.headings == second.headings
