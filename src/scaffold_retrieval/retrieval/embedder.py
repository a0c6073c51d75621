"""
Query embedder - request text in, query vector out.

The query text is objectives immediately followed by standards, with no
separator. Changing the concatenation moves the query vector, so it is
kept exactly as the corpus queries were always built.
"""

from __future__ import annotations

import logging

import numpy as np

from scaffold_retrieval.core import EmbeddingProvider, RetrievalFailure
from scaffold_retrieval.schemas.retrieval import RetrievalRequest

logger = logging.getLogger(__name__)


def build_query_text(request: RetrievalRequest) -> str:
    return request.objectives + request.standards


class QueryEmbedder:
    """Wraps an EmbeddingProvider and turns its failures into RetrievalFailure."""

    def __init__(self, provider: EmbeddingProvider):
        self._provider = provider

    @property
    def model(self) -> str:
        return self._provider.model

    def embed(self, text: str) -> np.ndarray:
        """
        Embed query text with the provider's fixed model.

        Raises:
            RetrievalFailure: if the provider raises or returns no vector
        """
        try:
            vector = self._provider.embed(text)
        except Exception as e:
            logger.error(f"Embedding call failed ({self.model}): {e}")
            raise RetrievalFailure("Failed to embed query") from e

        if vector is None or np.size(vector) == 0:
            logger.error(f"Embedding call returned no vector ({self.model})")
            raise RetrievalFailure("Failed to embed query")

        return np.asarray(vector, dtype=np.float32)
