"""Assembly service implementation.

Converts every indexed document in order and renders the master
``book.tex`` that includes them.
"""

import logging
import os
from pathlib import Path, PurePosixPath

from ..config import BuildConfig
from ..domain import BookIndex, DocumentEntry
from .interfaces import IConverter
from .rewrite_service import (
    rewrite_file,
    rewrite_markup_before_conversion,
    shift_section_level,
)

logger = logging.getLogger(__name__)


def include_path(converted: Path, output_root: Path) -> str:
    """Get the ``\\include`` argument for a converted document.

    Args:
        converted: Path of the converted LaTeX file.
        output_root: Book root the path is made relative to.

    Returns:
        Forward-slash relative path without extension, e.g. ``ch1/page``.
    """
    relative = Path(os.path.relpath(converted.resolve(), output_root.resolve()))
    return PurePosixPath(*relative.parts).with_suffix("").as_posix()


def include_directive(converted: Path, output_root: Path) -> str:
    return f"\\include{{{include_path(converted, output_root)}}}\n"


def render_header(
    template: str,
    includes: str,
    placeholder: str = BuildConfig.CONTENT_PLACEHOLDER,
) -> str:
    """Substitute the includes block for every placeholder in the template.

    A template without placeholder is returned unchanged and a warning
    is logged.
    """
    if placeholder not in template:
        logger.warning(
            "Header template has no %s placeholder, no documents included",
            placeholder,
        )
        return template
    return template.replace(placeholder, includes)


class AssemblyService:
    """Service for converting indexed documents and building the master file.

    For every entry, in index order:

    1. Rewrite sub/superscript tags in the markdown source.
    2. Convert the source with the configured converter.
    3. Demote sectioning commands when the entry is a subchapter.
    """

    def __init__(self, converter: IConverter) -> None:
        """Initialize the assembly service.

        Args:
            converter: Converter used for each markdown document.
        """
        self._converter = converter

    def process_entry(self, entry: DocumentEntry) -> Path:
        """Prepare, convert and post-process a single document.

        Returns:
            Path of the converted LaTeX document.
        """
        rewrite_file(entry.path, rewrite_markup_before_conversion)
        converted = self._converter.convert(entry.path)
        if entry.level.is_shifted:
            rewrite_file(converted, shift_section_level)
        return converted

    def assemble(self, index: BookIndex, template: str, output_root: Path) -> str:
        """Convert all documents and render the master document.

        Args:
            index: Ordered book index.
            template: Header template containing the content placeholder.
            output_root: Book root that include paths are relative to.

        Returns:
            The complete master document text.
        """
        includes = []
        for entry in index:
            converted = self.process_entry(entry)
            includes.append(include_directive(converted, output_root))
        return render_header(template, "".join(includes))

    def write_book(
        self,
        text: str,
        output_root: Path,
        filename: str = BuildConfig.BOOK_FILENAME,
    ) -> Path:
        """Write the master document to the book root."""
        book_path = output_root / filename
        book_path.write_text(text, encoding="utf-8")
        logger.info("Wrote %s", book_path)
        return book_path
