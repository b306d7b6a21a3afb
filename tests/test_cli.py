"""Tests for the command line interface."""

from __future__ import annotations

from pathlib import Path

import pytest

from md2page import cli


class TestMain:
    """Tests for cli.main."""

    def test_writes_destination(self, sample_document: Path, tmp_path: Path) -> None:
        """Two arguments render the source into the destination."""
        destination = tmp_path / "project.html"

        assert cli.main([str(sample_document), str(destination)]) == 0
        assert 'id="toc-install"' in destination.read_text(encoding="utf-8")

    def test_missing_source_fails(self, tmp_path: Path) -> None:
        """A missing source exits with status 1."""
        assert cli.main([str(tmp_path / "missing.md"), str(tmp_path / "out.html")]) == 1
        assert not (tmp_path / "out.html").exists()

    def test_serves_single_argument(self, sample_document: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """One argument starts the server."""
        calls: list[dict] = []

        def fake_serve(source: Path, **kwargs) -> None:
            calls.append({"source": source, **kwargs})

        monkeypatch.setattr(cli, "serve", fake_serve)

        assert cli.main([str(sample_document), "--port", "8123"]) == 0
        assert len(calls) == 1
        assert calls[0]["source"] == sample_document
        assert calls[0]["port"] == 8123
        assert calls[0]["options"].lang == "en"

    def test_outline(self, sample_document: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """--outline prints the heading tree."""
        assert cli.main(["--outline", str(sample_document)]) == 0

        out = capsys.readouterr().out
        assert out.splitlines() == [
            "Project (#project)",
            "    Install (#install)",
            "        Serving (#serving)",
        ]

    def test_requires_source(self) -> None:
        """Running without arguments prints usage and exits."""
        with pytest.raises(SystemExit) as excinfo:
            cli.main([])

        assert excinfo.value.code == 2
