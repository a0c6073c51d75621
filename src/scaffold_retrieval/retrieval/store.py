"""
Vector store implementations following the gold standard pattern.

Pattern: Protocol → Production impl → Test double → Factory

This module contains:
1. VectorStoreConfig - Configuration dataclass
2. PgVectorStore - PostgreSQL with pgvector (production)
3. InMemoryVectorStore - In-memory store (testing/development)
4. get_vector_store() - Factory function

The stores only READ. Building the table, the index and the
match_documents function belongs to the ingestion side.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace

import numpy as np
import psycopg
from pgvector.psycopg import register_vector
from psycopg import sql
from psycopg.rows import dict_row

from scaffold_retrieval.core import EmbeddingProvider
from scaffold_retrieval.retrieval.document import StoredDocument

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# CONFIGURATION
# ---------------------------------------------------------------------------


@dataclass
class VectorStoreConfig:
    """Configuration for the vector store."""

    connection_string: str = "postgresql://localhost/scaffolds"
    match_function: str = "match_documents"


# ---------------------------------------------------------------------------
# PGVECTOR STORE (Production)
# ---------------------------------------------------------------------------


class PgVectorStore:
    """
    PostgreSQL vector store using pgvector.

    Similarity search is delegated to a SQL function with the signature
    match_documents(query_embedding vector, match_threshold float, k int)
    which applies cosine similarity, the threshold and the limit, and
    returns rows most-similar-first.

    The connection is opened lazily on first use and then shared by
    all callers.
    """

    def __init__(self, config: VectorStoreConfig):
        self.config = config
        self._conn = None
        self._conn_lock = threading.Lock()

    def connect(self) -> None:
        """Establish database connection."""
        self._conn = psycopg.connect(self.config.connection_string, autocommit=True)
        register_vector(self._conn)
        logger.debug(f"Connected to vector store, match function {self.config.match_function}")

    def close(self) -> None:
        """Close database connection."""
        with self._conn_lock:
            if self._conn:
                self._conn.close()
                self._conn = None

    def _ensure_connected(self) -> None:
        # Concurrent first calls must share one connection
        with self._conn_lock:
            if not self._conn:
                self.connect()

    def match(
        self,
        query_embedding: np.ndarray,
        threshold: float,
        limit: int,
    ) -> list[StoredDocument]:
        """Call the match function and return its rows in order."""
        self._ensure_connected()

        query = sql.SQL(
            "SELECT * FROM {}(query_embedding => %s, match_threshold => %s, k => %s)"
        ).format(sql.Identifier(self.config.match_function))

        with self._conn.cursor(row_factory=dict_row) as cur:
            rows = cur.execute(query, (query_embedding, threshold, limit)).fetchall()

        return [StoredDocument.from_record(row) for row in rows]


# ---------------------------------------------------------------------------
# IN-MEMORY STORE (Testing/Development)
# ---------------------------------------------------------------------------


class InMemoryVectorStore:
    """
    In-memory vector store for development/testing.

    Implements the same match() contract as PgVectorStore but doesn't
    require Postgres. Uses cosine similarity, keeps only scores strictly
    above the threshold, most-similar-first.
    """

    def __init__(self, embeddings: EmbeddingProvider | None = None):
        """
        Args:
            embeddings: Optional provider used to embed documents inserted
                without a precomputed embedding
        """
        self._embeddings = embeddings
        self._documents: list[StoredDocument] = []

    def connect(self) -> None:
        """No-op for in-memory store."""
        pass

    def close(self) -> None:
        """No-op for in-memory store."""
        pass

    def insert_document(self, doc: StoredDocument) -> None:
        """Insert document into memory."""
        if doc.embedding is None:
            if self._embeddings is None:
                raise ValueError(f"Document {doc.id!r} has no embedding and no provider is set")
            doc.embedding = self._embeddings.embed(f"{doc.title}\n{doc.summary}")
        self._documents.append(doc)

    def insert_documents_batch(self, docs: list[StoredDocument]) -> None:
        """Batch insert."""
        for doc in docs:
            self.insert_document(doc)

    def __len__(self) -> int:
        return len(self._documents)

    def _cosine_similarity(self, a: np.ndarray, b: np.ndarray) -> float:
        """Calculate cosine similarity between two vectors."""
        norm = np.linalg.norm(a) * np.linalg.norm(b)
        if norm == 0:
            return 0.0
        return float(np.dot(a, b) / norm)

    def match(
        self,
        query_embedding: np.ndarray,
        threshold: float,
        limit: int,
    ) -> list[StoredDocument]:
        """Search using cosine similarity."""
        scored = []
        for doc in self._documents:
            if doc.embedding is None:
                continue
            score = self._cosine_similarity(query_embedding, doc.embedding)
            if score > threshold:
                scored.append((doc, score))

        # Stable sort keeps insertion order among equal scores
        scored.sort(key=lambda x: x[1], reverse=True)

        return [replace(doc, similarity=score) for doc, score in scored[:limit]]


# ---------------------------------------------------------------------------
# FACTORY FUNCTION
# ---------------------------------------------------------------------------


def get_vector_store(
    use_postgres: bool = True,
    config: VectorStoreConfig | None = None,
    embeddings: EmbeddingProvider | None = None,
) -> PgVectorStore | InMemoryVectorStore:
    """
    Factory function to get the appropriate vector store.

    Args:
        use_postgres: Use PostgreSQL store (default) or the in-memory store
        config: Store configuration (uses defaults if not provided)
        embeddings: Provider for the in-memory store's inserts

    Returns:
        DocumentMatcher implementation
    """
    if use_postgres:
        return PgVectorStore(config or VectorStoreConfig())
    return InMemoryVectorStore(embeddings)
