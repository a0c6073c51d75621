"""
Retrieval module - semantic scaffold search.

This module provides:
- StoredDocument: The stored row model
- PgVectorStore / InMemoryVectorStore: DocumentMatcher implementations
- QueryEmbedder, SimilarityMatcher: Wrappers that surface RetrievalFailure
- normalize_document(): Loosely-typed row → RetrievalResult
- RetrievalOrchestrator / create_orchestrator(): The pipeline entry point

ARCHITECTURE:
-------------
1. Protocols define the contracts (in core.protocols)
2. Multiple implementations (PgVectorStore, InMemoryVectorStore)
3. Factory functions for instantiation
4. Test doubles for fast unit tests
"""

from scaffold_retrieval.retrieval.document import StoredDocument

from scaffold_retrieval.retrieval.store import (
    VectorStoreConfig,
    PgVectorStore,
    InMemoryVectorStore,
    get_vector_store,
)

from scaffold_retrieval.retrieval.normalizer import (
    parse_summary,
    extract_summary_text,
    extract_standards,
    extract_type_tags,
    normalize_document,
)

from scaffold_retrieval.retrieval.embedder import QueryEmbedder, build_query_text
from scaffold_retrieval.retrieval.matcher import MATCH_THRESHOLD, SimilarityMatcher

from scaffold_retrieval.retrieval.orchestrator import (
    RetrievalOrchestrator,
    create_orchestrator,
)

from scaffold_retrieval.retrieval.seeds import (
    get_scaffold_documents,
    seed_vector_store,
)

__all__ = [
    # Document
    "StoredDocument",
    # Stores
    "VectorStoreConfig",
    "PgVectorStore",
    "InMemoryVectorStore",
    "get_vector_store",
    # Normalizer
    "parse_summary",
    "extract_summary_text",
    "extract_standards",
    "extract_type_tags",
    "normalize_document",
    # Pipeline stages
    "QueryEmbedder",
    "build_query_text",
    "MATCH_THRESHOLD",
    "SimilarityMatcher",
    "RetrievalOrchestrator",
    "create_orchestrator",
    # Seeds
    "get_scaffold_documents",
    "seed_vector_store",
]
