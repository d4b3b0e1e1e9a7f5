"""Book service implementation.

Orchestrates a complete build: copy the GitBook tree, index it, convert
every document and write the master LaTeX file. Any error aborts the
build; there is no resume.
"""

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from ..domain import DocumentEntry
from ..errors import MissingResourceError, MissingTemplateError
from .assembly_service import AssemblyService
from .index_service import IndexService
from .interfaces import IConverter

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Outcome of a successful build."""

    book_path: Path
    entries: list[DocumentEntry] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "book_path": str(self.book_path),
            "entries": [
                {"path": str(e.path), "level": e.level.value} for e in self.entries
            ],
        }


def load_template(path: Path) -> str:
    """Read the LaTeX header template.

    Raises:
        MissingTemplateError: If the template does not exist.
    """
    if not path.is_file():
        raise MissingTemplateError(f"Header template not found: {path}")
    return path.read_text(encoding="utf-8")


def copy_tree(source: Path, destination: Path) -> None:
    """Copy the book tree, merging into an existing destination.

    Raises:
        MissingResourceError: If ``source`` is not a directory.
    """
    if not source.is_dir():
        raise MissingResourceError(f"Book directory not found: {source}")
    shutil.copytree(source, destination, dirs_exist_ok=True)
    logger.debug("Copied %s to %s", source, destination)


class BookService:
    """High-level service running the whole GitBook to LaTeX build."""

    def __init__(
        self,
        converter: IConverter,
        index_service: IndexService | None = None,
    ) -> None:
        """Initialize the book service.

        Args:
            converter: Converter used for each markdown document.
            index_service: Index builder (default: IndexService()).
        """
        self._index_service = index_service or IndexService()
        self._assembly_service = AssemblyService(converter)

    def build(self, source: Path, output: Path, header: Path) -> BuildResult:
        """Build a LaTeX book from a GitBook directory.

        Args:
            source: The GitBook directory containing SUMMARY.md.
            output: Directory that receives the copy, converted files
                and ``book.tex``.
            header: LaTeX header template with a ``<CONTENT>`` placeholder.

        Returns:
            BuildResult with the master document path and the entries
            included, in order.

        Raises:
            MissingResourceError: If the template, source or summary is missing.
            EmptyIndexError: If there is nothing to convert.
            ConversionError: If a document fails to convert.
            OSError: On any other file system failure.
        """
        template = load_template(header)
        copy_tree(source, output)

        index = self._index_service.index_book(output)
        logger.info("Indexed %d document(s)", len(index))

        text = self._assembly_service.assemble(index, template, output)
        book_path = self._assembly_service.write_book(text, output)
        return BuildResult(book_path=book_path, entries=list(index))
