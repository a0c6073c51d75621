"""
Document model for the retrieval system.

Single responsibility: Define the structure of scaffold documents
returned by vector stores.

The stored rows are loosely typed. summary and type_tags are raw blobs
and are deliberately kept as Any here - coercion happens in the
normalizer, not at load time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

import numpy as np

logger = logging.getLogger(__name__)


def _as_embedding(value: Any, doc_id: Any) -> np.ndarray | None:
    if value is None:
        return None
    try:
        return np.asarray(value, dtype=np.float32)
    except (TypeError, ValueError, OverflowError) as e:
        logger.warning(f"Ignoring unreadable embedding for document {doc_id!r}: {e}")
        return None


def _as_similarity(value: Any, doc_id: Any) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError) as e:
        logger.warning(f"Ignoring unreadable similarity for document {doc_id!r}: {e}")
        return None


@dataclass
class StoredDocument:
    """
    A scaffold document as the vector store returns it.

    This is the internal representation. For external APIs, the
    normalizer converts it to RetrievalResult (schemas.retrieval).
    """
    id: Any = None
    title: Any = None
    author: Any = None
    url: Any = None
    answer_url: Any = None
    summary: Any = None  # Expected: JSON object with "Summary" and "CCSS standards"
    type_tags: Any = None  # Expected: comma-separated string
    embedding: np.ndarray | None = None
    similarity: float | None = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "StoredDocument":
        """
        Build from a result row. Missing keys become None.

        embedding and similarity are not part of the result contract, so
        values that cannot be converted are dropped rather than raised.
        """
        doc_id = record.get("id")
        return cls(
            id=doc_id,
            title=record.get("title"),
            author=record.get("author"),
            url=record.get("url"),
            answer_url=record.get("answer_url"),
            summary=record.get("summary"),
            type_tags=record.get("type_tags"),
            embedding=_as_embedding(record.get("embedding"), doc_id),
            similarity=_as_similarity(record.get("similarity"), doc_id),
        )

