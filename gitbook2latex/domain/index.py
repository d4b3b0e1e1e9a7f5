"""Domain models for the ordered book index.

A book is an ordered sequence of markdown documents, each tagged as a
top-level chapter or a subchapter. The order of entries is the order in
which converted documents are included in the final LaTeX book.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path



class Level(Enum):
    """Position of a document in the book hierarchy."""

    CHAPTER = "chapter"
    SUBCHAPTER = "subchapter"

    @property
    def is_shifted(self) -> bool:
        """Whether converted sectioning commands are demoted one level."""
        return self is Level.SUBCHAPTER


@dataclass(frozen=True)
class DocumentEntry:
    """A single markdown document in the book.

    Attributes:
        path: Absolute path of the markdown source in the output tree.
        level: Chapter or subchapter.
        link_text: The summary text this entry was parsed from (empty for
            the foreword, which is not listed in the summary).
    """

    path: Path
    level: Level
    link_text: str = ""


@dataclass(frozen=True)
class BookIndex:
    """Immutable, ordered sequence of book entries."""

    entries: tuple[DocumentEntry, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[DocumentEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, position: int) -> DocumentEntry:
        return self.entries[position]

    def with_foreword(self, entry: DocumentEntry) -> "BookIndex":
        """Return a new index with ``entry`` placed before all others."""
        return BookIndex(entries=(entry, *self.entries))

    @property
    def paths(self) -> list[Path]:
        return [entry.path for entry in self.entries]

    def duplicate_paths(self) -> list[Path]:
        """Paths that appear more than once, in first-seen order."""
        seen: set[Path] = set()
        duplicates: list[Path] = []
        for path in self.paths:
            if path in seen and path not in duplicates:
                duplicates.append(path)
            seen.add(path)
        return duplicates

    def without_duplicates(self) -> "BookIndex":
        """Return a new index keeping only the first entry for each path."""
        seen: set[Path] = set()
        entries = []
        for entry in self.entries:
            if entry.path not in seen:
                entries.append(entry)
                seen.add(entry.path)
        return BookIndex(entries=tuple(entries))
