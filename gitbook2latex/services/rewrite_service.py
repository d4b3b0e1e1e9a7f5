"""Text rewriting applied around the markdown to LaTeX conversion.

GitBook writes subscripts and superscripts as ``<sub>x</sub>`` and
``<sup>x</sup>`` while pandoc expects ``~x~`` and ``^x^``. After
conversion, subchapter documents have their sectioning commands demoted
so that a GitBook H1 inside a subchapter becomes ``\\subsection``.
Unlike a literal ``section{`` -> ``subsection{`` replacement, starred
sections are demoted too and ``\\subsubsection`` becomes ``\\paragraph``.
"""

import logging
import re
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)

# Literal tag -> pandoc delimiter, applied in order
MARKUP_REPLACEMENTS = (
    ("<sub>", "~"),
    ("</sub>", "~"),
    ("<sup>", "^"),
    ("</sup>", "^"),
)

# One level down for each sectioning command
SECTION_DEMOTIONS = {
    "section": "subsection",
    "subsection": "subsubsection",
    "subsubsection": "paragraph",
}

SECTION_PATTERN = re.compile(r"\\(section|subsection|subsubsection)(\*?)\{")


def rewrite_markup_before_conversion(text: str) -> str:
    """Replace GitBook sub/superscript tags with pandoc delimiters.

    Plain literal replacement: tags are not parsed, so unbalanced or
    nested tags are replaced as they appear.
    """
    for tag, delimiter in MARKUP_REPLACEMENTS:
        text = text.replace(tag, delimiter)
    return text


def shift_section_level(text: str) -> str:
    """Demote every LaTeX sectioning command by one level.

    ``\\section{`` becomes ``\\subsection{``, ``\\subsection{`` becomes
    ``\\subsubsection{`` and ``\\subsubsection{`` becomes ``\\paragraph{``.
    Starred forms keep their star. Each command is rewritten once per call,
    but calling this twice on the same text demotes twice.
    """

    def demote(match: re.Match) -> str:
        return f"\\{SECTION_DEMOTIONS[match.group(1)]}{match.group(2)}{{"

    return SECTION_PATTERN.sub(demote, text)


def rewrite_file(path: Path, transform: Callable[[str], str]) -> None:
    """Apply ``transform`` to a whole file and overwrite it in place.

    Args:
        path: File to rewrite.
        transform: Pure text transform.

    Raises:
        OSError: If the file cannot be read or written.
    """
    content = path.read_text(encoding="utf-8")
    rewritten = transform(content)
    if rewritten != content:
        path.write_text(rewritten, encoding="utf-8")
        logger.debug("Rewrote %s with %s", path, transform.__name__)
