"""
Core module - shared protocols and errors for the retrieval pipeline.

USAGE:
------
from scaffold_retrieval.core import EmbeddingProvider, DocumentMatcher

class MyStore:
    '''Implements DocumentMatcher protocol.'''
    ...
"""

from scaffold_retrieval.core.errors import (
    RetrievalError,
    ValidationFailure,
    RetrievalFailure,
)
from scaffold_retrieval.core.protocols import (
    EmbeddingProvider,
    DocumentMatcher,
)

__all__ = [
    # Protocols
    "EmbeddingProvider",
    "DocumentMatcher",
    # Errors
    "RetrievalError",
    "ValidationFailure",
    "RetrievalFailure",
]
