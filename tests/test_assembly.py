"""Tests for converting entries and rendering book.tex."""

from pathlib import Path

import pytest

from gitbook2latex.domain import BookIndex, DocumentEntry, Level
from gitbook2latex.errors import ConversionError
from gitbook2latex.services.assembly_service import (
    AssemblyService,
    include_directive,
    include_path,
    render_header,
)


@pytest.fixture
def assembly_service(fake_converter) -> AssemblyService:
    return AssemblyService(fake_converter)


class TestIncludePaths:
    """Tests for relative include path computation."""

    def test_include_path(self):
        """Nested file becomes a forward-slash path without extension."""
        assert include_path(Path("/out/ch1/page.tex"), Path("/out/")) == "ch1/page"

    def test_include_directive(self):
        assert include_directive(Path("/out/ch1/page.tex"), Path("/out")) == (
            "\\include{ch1/page}\n"
        )

    def test_root_file(self):
        assert include_path(Path("/out/README.tex"), Path("/out")) == "README"

    def test_only_last_extension_stripped(self):
        """Only the final .tex is removed from the include path."""
        assert include_path(Path("/out/a.tex.d/b.tex"), Path("/out")) == "a.tex.d/b"

    def test_file_outside_root(self):
        """Files referenced with ../ stay relative to the root."""
        assert include_path(Path("/shared/x.tex"), Path("/out")) == "../shared/x"


class TestRenderHeader:
    """Tests for placeholder substitution."""

    def test_single_placeholder(self):
        result = render_header("start\n<CONTENT>end\n", "\\include{a}\n")

        assert result == "start\n\\include{a}\nend\n"

    def test_backslashes_kept(self):
        """Includes are inserted literally, not as a regex replacement."""
        result = render_header("<CONTENT>", "\\include{ch1/page}\n")

        assert result == "\\include{ch1/page}\n"

    def test_multiple_placeholders(self):
        """Every placeholder receives the same includes block."""
        assert render_header("<CONTENT>|<CONTENT>", "x") == "x|x"

    def test_missing_placeholder_warns(self, caplog):
        """A template without placeholder is returned unchanged."""
        result = render_header("\\begin{document}\\end{document}", "x")

        assert result == "\\begin{document}\\end{document}"
        assert "placeholder" in caplog.text


class TestAssemble:
    """Tests for AssemblyService."""

    def test_process_chapter(self, assembly_service, fake_converter, tmp_path):
        """Chapters are pre-rewritten and converted but not shifted."""
        source = tmp_path / "README.md"
        source.write_text("x<sup>2</sup>", encoding="utf-8")

        converted = assembly_service.process_entry(
            DocumentEntry(path=source, level=Level.CHAPTER)
        )

        assert fake_converter.sources[source] == "x^2^"
        assert converted.read_text(encoding="utf-8") == "\\section{Title}\nText.\n"

    def test_process_subchapter(self, assembly_service, tmp_path):
        """Subchapters have their sections demoted after conversion."""
        source = tmp_path / "page.md"
        source.write_text("# Page", encoding="utf-8")

        converted = assembly_service.process_entry(
            DocumentEntry(path=source, level=Level.SUBCHAPTER)
        )

        assert converted.read_text(encoding="utf-8") == "\\subsection{Title}\nText.\n"

    def test_assemble_in_index_order(self, assembly_service, fake_converter, tmp_path):
        (tmp_path / "b").mkdir()
        for name in ("a.md", "b/c.md"):
            (tmp_path / name).write_text("# Doc", encoding="utf-8")
        index = BookIndex(
            (
                DocumentEntry(tmp_path / "b/c.md", Level.SUBCHAPTER),
                DocumentEntry(tmp_path / "a.md", Level.CHAPTER),
            )
        )

        text = assembly_service.assemble(index, "<CONTENT>", tmp_path)

        assert text == "\\include{b/c}\n\\include{a}\n"
        assert fake_converter.converted == [tmp_path / "b/c.md", tmp_path / "a.md"]

    def test_conversion_failure_aborts(self, tmp_path):
        """The first failing document stops the whole assembly."""

        class FailingConverter:
            def __init__(self):
                self.calls = 0

            def convert(self, source):
                self.calls += 1
                raise ConversionError(source, "boom", returncode=1)

        converter = FailingConverter()
        for name in ("a.md", "b.md"):
            (tmp_path / name).write_text("", encoding="utf-8")
        index = BookIndex(
            (
                DocumentEntry(tmp_path / "a.md", Level.CHAPTER),
                DocumentEntry(tmp_path / "b.md", Level.CHAPTER),
            )
        )

        with pytest.raises(ConversionError):
            AssemblyService(converter).assemble(index, "<CONTENT>", tmp_path)
        assert converter.calls == 1

    def test_missing_source_raises(self, assembly_service, tmp_path):
        """Referenced files that do not exist abort the build."""
        entry = DocumentEntry(tmp_path / "missing.md", Level.SUBCHAPTER)

        with pytest.raises(FileNotFoundError):
            assembly_service.process_entry(entry)

    def test_write_book(self, assembly_service, tmp_path):
        book = assembly_service.write_book("\\documentclass{book}", tmp_path)

        assert book == tmp_path / "book.tex"
        assert book.read_text(encoding="utf-8") == "\\documentclass{book}"
