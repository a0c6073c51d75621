"""
Core protocols defining contracts for the retrieval pipeline.

The two external collaborators (embedding model and vector store) are
expressed as Protocols so the orchestrator receives them by injection.
Production code wires OpenAI + Postgres; tests wire fakes.

PATTERN:
- Protocol defines the contract
- Production implementation (OpenAIEmbeddings, PgVectorStore)
- Test double (MockEmbeddings, InMemoryVectorStore)
- Factory functions for instantiation
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from scaffold_retrieval.retrieval.document import StoredDocument


# ---------------------------------------------------------------------------
# EMBEDDING PROVIDER PROTOCOL
# ---------------------------------------------------------------------------


@runtime_checkable
class EmbeddingProvider(Protocol):
    """
    Contract for embedding generation.

    Implementations:
    - OpenAIEmbeddings (production)
    - MockEmbeddings (testing)
    """

    model: str

    def embed(self, text: str) -> np.ndarray:
        """Generate embedding for a single text."""
        ...


# ---------------------------------------------------------------------------
# DOCUMENT MATCHER PROTOCOL
# ---------------------------------------------------------------------------


@runtime_checkable
class DocumentMatcher(Protocol):
    """
    Contract for nearest-neighbour search over stored documents.

    The store applies the threshold and the limit itself. Callers treat
    the returned sequence as already filtered and already ordered.

    Implementations:
    - PgVectorStore (production, calls the match_documents SQL function)
    - InMemoryVectorStore (testing/development)
    """

    def match(
        self,
        query_embedding: np.ndarray,
        threshold: float,
        limit: int,
    ) -> Sequence[StoredDocument]:
        """Return documents whose similarity exceeds threshold, at most limit."""
        ...
