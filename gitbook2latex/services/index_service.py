"""Index service implementation.

Locates the GitBook ``SUMMARY.md`` and ``README.md`` at the book root and
turns the summary into an ordered :class:`BookIndex`.

Summary example::

    # Summary

    * [Introduction](README.md)
    * [Chapter 1](chapter1/README.md)
        * [Getting started](chapter1/start.md)

Each parenthesized group is one reference. A reference whose text
contains ``readme`` becomes a chapter, every other one a subchapter.
"""

import logging
import re
from pathlib import Path

from ..config import BuildConfig
from ..domain import BookIndex, DocumentEntry, Level
from ..errors import EmptyIndexError, MissingIndexError

logger = logging.getLogger(__name__)


class IndexService:
    """Service for building the ordered book index from SUMMARY.md.

    Parsing is line oriented: a reference never spans lines, and its
    target ends at the first closing parenthesis. Only the parenthesized
    target decides the level, a [label] mentioning readme does not. A target with nested
    parentheses such as ``(a(b)c)`` is cut short to ``a(b``.
    """

    # Optional [label] immediately followed by (target)
    REFERENCE_PATTERN = re.compile(r"(?:\[[^\]\n]*\])?\(([^)\n]*)\)")

    def __init__(
        self,
        summary_name: str = BuildConfig.SUMMARY_FILENAME,
        foreword_name: str = BuildConfig.FOREWORD_FILENAME,
        chapter_marker: str = BuildConfig.CHAPTER_MARKER,
    ) -> None:
        """Initialize the index service.

        Args:
            summary_name: Name of the index file, matched ignoring case.
            foreword_name: Name of the foreword file, matched ignoring case.
            chapter_marker: Substring that marks a reference as a chapter.
        """
        self._summary_name = summary_name.lower()
        self._foreword_name = foreword_name.lower()
        self._chapter_marker = chapter_marker.lower()

    def find_summary(self, root: Path) -> Path:
        """Find the summary file among the immediate children of ``root``.

        Args:
            root: The book root directory.

        Returns:
            Path to the summary file.

        Raises:
            MissingIndexError: If no summary file exists.
        """
        summary = self._find_child(root, self._summary_name)
        if summary is None:
            raise MissingIndexError(
                f"No {BuildConfig.SUMMARY_FILENAME} found in {root}"
            )
        return summary

    def find_foreword(self, root: Path) -> Path | None:
        """Find the foreword (root README.md), if the book has one."""
        return self._find_child(root, self._foreword_name)

    def _find_child(self, root: Path, name: str) -> Path | None:
        # Sorted so the result does not depend on directory listing order;
        # when several names match (README.md, readme.md), the last wins.
        found = None
        for child in sorted(root.iterdir()):
            if child.is_file() and child.name.lower() == name:
                found = child
        return found

    def parse_references(self, text: str) -> list[tuple[str, str]]:
        """Extract every reference from summary text.

        Args:
            text: Raw summary content.

        Returns:
            List of ``(link_text, target)`` tuples in source order, where
            ``link_text`` is the full match, e.g. ``[Intro](intro.md)``.
        """
        references = []
        for line in text.splitlines():
            for match in self.REFERENCE_PATTERN.finditer(line):
                references.append((match.group(0), match.group(1)))
        return references

    def classify(self, link_text: str) -> Level:
        """Classify a reference as chapter or subchapter.

        Args:
            link_text: The parenthesized target, e.g. ``(ch1/README.md)``.
        """
        if self._chapter_marker in link_text.lower():
            return Level.CHAPTER
        return Level.SUBCHAPTER

    def build_index(self, summary_text: str, output_root: Path) -> BookIndex:
        """Build the ordered index from summary text.

        Referenced files are not checked for existence and duplicates
        are kept.

        Args:
            summary_text: Raw summary content.
            output_root: Directory the reference targets are relative to.

        Returns:
            BookIndex with one entry per reference, in source order.
        """
        entries = []
        for link_text, target in self.parse_references(summary_text):
            entry = DocumentEntry(
                path=output_root / target,
                level=self.classify(f"({target})"),
                link_text=link_text,
            )
            logger.debug("Indexed %s as %s", target, entry.level.value)
            entries.append(entry)
        return BookIndex(entries=tuple(entries))

    def index_book(self, output_root: Path) -> BookIndex:
        """Build the complete index for a copied book.

        Reads the summary, builds the index and prepends the root
        README.md as a chapter when present. A document listed more than
        once, such as a summary entry for the root README.md, is kept only
        at its first position.

        Args:
            output_root: The book root directory.

        Returns:
            The complete book index.

        Raises:
            MissingIndexError: If there is no summary file.
            EmptyIndexError: If neither summary nor foreword yield documents.
            OSError: If the summary cannot be read.
        """
        summary = self.find_summary(output_root)
        index = self.build_index(summary.read_text(encoding="utf-8"), output_root)
        if not index:
            logger.warning("No references found in %s", summary)

        foreword = self.find_foreword(output_root)
        if foreword is not None:
            index = index.with_foreword(
                DocumentEntry(path=foreword, level=Level.CHAPTER)
            )

        if not index:
            raise EmptyIndexError(f"Nothing to convert: {summary} lists no documents")

        for path in index.duplicate_paths():
            logger.warning(
                "Document listed more than once, keeping first: %s", path
            )

        return index.without_duplicates()
