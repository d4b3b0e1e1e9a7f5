"""Service interfaces (protocols) for the build pipeline.

The core pipeline depends only on these protocols, so the external
converter can be swapped for another tool or a fake in tests.
"""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class IConverter(Protocol):
    """Converts one markdown document into one LaTeX document."""

    def convert(self, source: Path) -> Path:
        """Convert ``source`` and return the path of the produced file.

        Args:
            source: Path of the markdown document.

        Returns:
            Path of the converted LaTeX document.

        Raises:
            ConversionError: If the conversion fails.
        """
        ...
