"""
Similarity matcher - query vector in, candidate documents out.

Thresholding and the top-k cut happen in the store. Whatever comes back
is taken as already filtered and already ordered; nothing is re-sorted
or re-filtered here.
"""

from __future__ import annotations

import logging

import numpy as np

from scaffold_retrieval.core import DocumentMatcher, RetrievalFailure
from scaffold_retrieval.retrieval.document import StoredDocument

logger = logging.getLogger(__name__)

# Fixed, not request-configurable
MATCH_THRESHOLD = 0.5


class SimilarityMatcher:
    """
    Wraps a DocumentMatcher and turns its failures into RetrievalFailure.

    Plain mapping rows from the store are coerced to StoredDocument.
    """

    def __init__(self, store: DocumentMatcher):
        self._store = store

    def match(
        self,
        vector: np.ndarray,
        threshold: float = MATCH_THRESHOLD,
        limit: int = 10,
    ) -> list[StoredDocument]:
        """
        Raises:
            RetrievalFailure: if the store raises or returns no sequence
        """
        try:
            documents = self._store.match(vector, threshold, limit)
        except Exception as e:
            logger.error(f"Similarity search failed (threshold={threshold}, limit={limit}): {e}")
            raise RetrievalFailure("Failed to search documents") from e

        if documents is None:
            logger.error("Similarity search returned no result set")
            raise RetrievalFailure("Failed to search documents")

        return [
            doc if isinstance(doc, StoredDocument) else StoredDocument.from_record(doc)
            for doc in documents
        ]
