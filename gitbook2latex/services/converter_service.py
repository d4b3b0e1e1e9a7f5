"""Pandoc converter implementation.

Runs the pandoc CLI as a subprocess, one document at a time::

    pandoc -o chapter1/page.tex chapter1/page.md
"""

import logging
import subprocess
from pathlib import Path

from ..config import BuildConfig
from ..errors import ConversionError

logger = logging.getLogger(__name__)


class PandocConverter:
    """Converter for markdown documents using the pandoc CLI.

    Implements :class:`~gitbook2latex.services.interfaces.IConverter`.
    Conversions are never retried: a failure raises immediately.
    """

    def __init__(
        self,
        executable: str = BuildConfig.DEFAULT_PANDOC,
        timeout: float | None = BuildConfig.DEFAULT_TIMEOUT,
        target_suffix: str = BuildConfig.TARGET_SUFFIX,
    ) -> None:
        """Initialize the converter.

        Args:
            executable: Name or path of the pandoc binary.
            timeout: Seconds to wait for each document, None waits forever.
            target_suffix: Extension of the produced document.
        """
        self._executable = executable
        self._timeout = timeout
        self._target_suffix = target_suffix

    def output_path(self, source: Path) -> Path:
        """Get the output path for a source document (extension swapped)."""
        return source.with_suffix(self._target_suffix)

    def build_command(self, source: Path) -> list[str]:
        return [self._executable, "-o", str(self.output_path(source)), str(source)]

    def convert(self, source: Path) -> Path:
        """Convert a single document.

        Args:
            source: Path of the markdown document.

        Returns:
            Path of the produced LaTeX document.

        Raises:
            ConversionError: If pandoc cannot be started, times out or
                exits with a non-zero status.
        """
        command = self.build_command(source)
        logger.info("%s", " ".join(command))

        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self._timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise ConversionError(
                source, f"{self._executable} timed out after {self._timeout}s"
            ) from e
        except OSError as e:
            raise ConversionError(
                source, f"cannot run {self._executable}: {e}"
            ) from e

        if result.stdout:
            logger.info("%s", result.stdout.rstrip())
        if result.stderr:
            logger.warning("%s", result.stderr.rstrip())

        if result.returncode != 0:
            raise ConversionError(
                source,
                f"{self._executable} exited with status {result.returncode}",
                returncode=result.returncode,
            )

        return self.output_path(source)
