"""Command-line interface for gitbook2latex.

Provides a Click-based CLI that converts a GitBook directory into a
LaTeX book::

    gitbook2latex path/to/gitbook path/to/output
"""

import json
import logging
import sys
from importlib.metadata import version as get_version
from pathlib import Path

import click

from . import logconf
from .config import BuildConfig
from .errors import Gitbook2LatexError
from .services import BookService, PandocConverter

# Get version from package metadata
try:
    __version__ = get_version("gitbook2latex")
except Exception:
    __version__ = "0.0.0"  # Fallback version

logger = logging.getLogger(__name__)


def resolve_timeout(timeout: float | None) -> float | None:
    """Resolve the converter timeout from option or environment.

    Args:
        timeout: The --timeout value, None when not given.

    Returns:
        Timeout in seconds, or None to wait forever.
    """
    if timeout is None:
        return BuildConfig.get_timeout()
    return BuildConfig.normalize_timeout(timeout)


@click.command()
@click.argument("source", type=click.Path(file_okay=False, path_type=Path))
@click.argument("destination", type=click.Path(file_okay=False, path_type=Path))
@click.option(
    "--header",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="LaTeX header template containing <CONTENT> (default: ./header.tex).",
)
@click.option(
    "--pandoc",
    default=None,
    help="Path to the pandoc executable (default: pandoc on PATH).",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0),
    default=None,
    help="Seconds to wait for each conversion, 0 to wait forever (default: 300).",
)
@click.option("--json", "as_json", is_flag=True, help="Print the build result as JSON.")
@click.option("--verbose", "-v", is_flag=True, help="Show debug output.")
@click.version_option(version=__version__, prog_name="gitbook2latex")
def main(
    source: Path,
    destination: Path,
    header: Path | None,
    pandoc: str | None,
    timeout: float | None,
    as_json: bool,
    verbose: bool,
) -> None:
    """Convert a GitBook into a single LaTeX book.

    SOURCE is the GitBook directory containing SUMMARY.md. Its contents are
    copied to DESTINATION, every markdown file listed in SUMMARY.md is
    converted with pandoc, and DESTINATION/book.tex includes them in order.
    """
    logconf.init("DEBUG" if verbose else "INFO")

    header_path = header or BuildConfig.get_header_path()
    try:
        converter = PandocConverter(
            executable=pandoc or BuildConfig.get_pandoc_path(),
            timeout=resolve_timeout(timeout),
        )
    except ValueError as e:
        click.echo(f"Error: Invalid timeout - {e}", err=True)
        sys.exit(1)

    book_service = BookService(converter)

    try:
        result = book_service.build(source, destination, header_path)
    except (Gitbook2LatexError, OSError) as e:
        if verbose:
            logger.exception("Build failed")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    click.echo(f"Built {result.book_path} with {len(result.entries)} document(s)")


if __name__ == "__main__":
    main()
