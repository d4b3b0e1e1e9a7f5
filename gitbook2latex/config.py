"""
Configuration settings for gitbook2latex builds
"""

import os
from pathlib import Path


class BuildConfig:
    """Configuration class for book build settings."""

    # Index file and foreword looked up at the book root (case-insensitive)
    SUMMARY_FILENAME = "summary.md"
    FOREWORD_FILENAME = "readme.md"

    # Substring in a summary reference that marks a top-level chapter
    CHAPTER_MARKER = "readme"

    # LaTeX output
    BOOK_FILENAME = "book.tex"
    CONTENT_PLACEHOLDER = "<CONTENT>"
    SOURCE_SUFFIX = ".md"
    TARGET_SUFFIX = ".tex"

    # Header template, read from the working directory by default
    DEFAULT_HEADER = Path("header.tex")

    # External converter
    DEFAULT_PANDOC = "pandoc"
    DEFAULT_TIMEOUT = 300.0  # seconds per document, 0 disables

    # Environment overrides
    ENV_HEADER = "GITBOOK2LATEX_HEADER"
    ENV_PANDOC = "GITBOOK2LATEX_PANDOC"
    ENV_TIMEOUT = "GITBOOK2LATEX_TIMEOUT"

    @classmethod
    def get_header_path(cls) -> Path:
        """Get the header template path, checking environment variables."""
        env_header = os.environ.get(cls.ENV_HEADER)
        if env_header:
            return Path(env_header)
        return cls.DEFAULT_HEADER

    @classmethod
    def get_pandoc_path(cls) -> str:
        """Get the converter executable, checking environment variables."""
        return os.environ.get(cls.ENV_PANDOC) or cls.DEFAULT_PANDOC

    @classmethod
    def get_timeout(cls) -> float | None:
        """Get the per-document converter timeout in seconds.

        Returns:
            The timeout, or None when it is disabled (set to 0).

        Raises:
            ValueError: If the environment value is not a number.
        """
        env_timeout = os.environ.get(cls.ENV_TIMEOUT)
        timeout = float(env_timeout) if env_timeout else cls.DEFAULT_TIMEOUT
        return cls.normalize_timeout(timeout)

    @staticmethod
    def normalize_timeout(timeout: float) -> float | None:
        if timeout < 0:
            raise ValueError(f"Timeout must not be negative: {timeout}")
        return timeout or None
