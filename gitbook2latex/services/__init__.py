"""Service layer for book conversion.

Provides the converter interface (protocol) and the services that index,
convert and assemble a GitBook into a LaTeX book.
"""

from .interfaces import IConverter
from .assembly_service import AssemblyService
from .book_service import BookService, BuildResult
from .converter_service import PandocConverter
from .index_service import IndexService

__all__ = [
    "IConverter",
    "AssemblyService",
    "BookService",
    "BuildResult",
    "PandocConverter",
    "IndexService",
]
