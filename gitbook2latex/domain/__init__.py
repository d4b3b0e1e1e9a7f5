"""Domain layer for book representation."""

from .index import BookIndex, DocumentEntry, Level

__all__ = [
    "BookIndex",
    "DocumentEntry",
    "Level",
]
