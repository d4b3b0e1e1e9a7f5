"""Custom exceptions for the :mod:`gitbook2latex` package."""

from pathlib import Path


class Gitbook2LatexError(Exception):
    """Base exception for book conversion errors."""


class MissingResourceError(Gitbook2LatexError, FileNotFoundError):
    """A file or directory the build depends on does not exist."""


class MissingTemplateError(MissingResourceError):
    """The LaTeX header template could not be found."""


class MissingIndexError(MissingResourceError):
    """No SUMMARY.md index file exists at the book root."""


class EmptyIndexError(Gitbook2LatexError, ValueError):
    """The book index contains no documents to convert."""


class ConversionError(Gitbook2LatexError, RuntimeError):
    """The external converter failed on a single document."""

    def __init__(
        self, source: Path, message: str, returncode: int | None = None
    ) -> None:
        super().__init__(f"Failed to convert {source}: {message}")
        self.source = source
        self.returncode = returncode


__all__ = [
    "Gitbook2LatexError",
    "MissingResourceError",
    "MissingTemplateError",
    "MissingIndexError",
    "EmptyIndexError",
    "ConversionError",
]
