"""File I/O related utilities.

This package groups small modules that read schema and instance documents
from disk.
"""

from .document_loader import load_document, load_documents

__all__ = [
    "load_document",
    "load_documents",
]
