"""Shared fixtures for gitbook2latex tests."""

from pathlib import Path

import pytest


class FakeConverter:
    """Converter that writes a canned LaTeX document next to the source."""

    def __init__(self, body: str = "\\section{Title}\nText.\n") -> None:
        self.body = body
        self.converted: list[Path] = []
        self.sources: dict[Path, str] = {}

    def convert(self, source: Path) -> Path:
        self.sources[source] = source.read_text(encoding="utf-8")
        output = source.with_suffix(".tex")
        output.write_text(self.body, encoding="utf-8")
        self.converted.append(source)
        return output


@pytest.fixture
def fake_converter() -> FakeConverter:
    """Create a converter that needs no pandoc install."""
    return FakeConverter()


@pytest.fixture
def header_template(tmp_path) -> Path:
    """Create a minimal header template."""
    header = tmp_path / "header.tex"
    header.write_text(
        "\\begin{document}\n<CONTENT>\\end{document}\n", encoding="utf-8"
    )
    return header


@pytest.fixture
def gitbook(tmp_path) -> Path:
    """Create a small GitBook with a foreword and two summary entries."""
    book = tmp_path / "gitbook"
    (book / "ch1").mkdir(parents=True)
    (book / "README.md").write_text("# Foreword\n", encoding="utf-8")
    (book / "SUMMARY.md").write_text(
        "# Summary\n\n* [Intro](intro.md)\n* [Ch1](ch1/page.md)\n",
        encoding="utf-8",
    )
    (book / "intro.md").write_text("# Intro\n\nH<sub>2</sub>O\n", encoding="utf-8")
    (book / "ch1" / "page.md").write_text(
        "# Page\n\nE = mc<sup>2</sup>\n", encoding="utf-8"
    )
    return book
